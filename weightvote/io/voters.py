'''Voter lists with voting weights.

A voter list holds one voter per line, in the form::

    * Faculty of Mathematics: 3
    * Faculty of Physics: 2

Blank lines are ignored. The name may contain colons; the weight follows
the last one.
'''

import dataclasses
from typing import Iterable, List

import weightvote.io.core
from weightvote.io.core import SyntaxParseError


@dataclasses.dataclass(frozen=True)
class Voter:
    name: str
    weight: int


def load_lines(lines: Iterable[str]) -> List[Voter]:
    voters = []
    for line_number, line in weightvote.io.core.significant_lines(lines):
        voters.append(_parse_voter(line, line_number))
    return voters


load, loads = weightvote.io.core.loaders(load_lines)


def dump_lines(voters: Iterable[Voter]) -> Iterable[str]:
    for voter in voters:
        yield f'* {voter.name}: {voter.weight}'


dump, dumps = weightvote.io.core.dumpers(dump_lines)


def _parse_voter(line: str, line_number: int) -> Voter:
    if not line.startswith('*'):
        raise SyntaxParseError(line_number, 'line must start with a *')
    name, colon, weight_str = line[1:].rpartition(':')
    if not colon:
        raise SyntaxParseError(line_number, 'line must contain ": weight"')
    name = weightvote.io.core.check_name(name.strip(), line_number)
    try:
        weight = int(weight_str.strip())
    except ValueError as e:
        raise SyntaxParseError(
            line_number, f'invalid weight: {weight_str.strip()!r}'
        ) from e
    return Voter(name, weight)
