"""Shared functionality for voting definition and ballot file I/O. Internal."""

from __future__ import annotations

import dataclasses
import typing
from typing import Any, List, Callable, Iterable, Tuple, TextIO, Optional, Union

from weightvote.vote import MedianBallot, SchulzeBallot

MAX_NAME_LENGTH = 150


class ParseError(Exception):
    """An input that is invalid according to the given format was detected."""
    pass


class SyntaxParseError(ParseError):
    """An invalid line was found in a line-based text format.

    :param line_number: One-based number of the offending line.
    :param message: What was wrong with the line.
    """
    def __init__(self, line_number: int, message: str):
        self.line_number = line_number
        self.message = message
        super().__init__(f'Error in line {line_number}: {message}')


@dataclasses.dataclass
class ElectionData:
    """A container for data returnable from a ballot file."""
    procedure: str
    ballots: List[Union[MedianBallot, SchulzeBallot]]
    percent_required: Optional[float] = None
    options: Optional[List[str]] = None
    max_value: Optional[int] = None
    name: Optional[str] = None


def check_name(name: str, line_number: int) -> str:
    """Check that a name is non-empty and not too long.

    :raises SyntaxParseError: If it is not.
    """
    if not name or len(name) > MAX_NAME_LENGTH:
        raise SyntaxParseError(
            line_number,
            f'name must be non-empty and at most {MAX_NAME_LENGTH}'
            ' characters long'
        )
    return name


def significant_lines(lines: Iterable[str]) -> Iterable[Tuple[int, str]]:
    """Yield stripped non-blank lines with their one-based line numbers."""
    for line_number, line in enumerate(lines, start=1):
        line = line.strip()
        if line:
            yield line_number, line


def loaders(line_loader: Callable[..., Any]
            ) -> Tuple[Callable[..., Any], Callable[..., Any]]:
    """Create load() and loads() functions from an iterating function."""
    return_annot = typing.get_type_hints(line_loader).get('return')
    if return_annot is None:
        return_annot = Any

    def load(file: TextIO, **kwargs) -> return_annot:
        return line_loader(file, **kwargs)

    def loads(text: str, **kwargs) -> return_annot:
        return line_loader(iter(text.split('\n')), **kwargs)

    return load, loads


def dumpers(line_dumper: Callable[..., Iterable[str]]
            ) -> Tuple[Callable[..., None], Callable[..., str]]:
    """Create dump() and dumps() functions from a line generator function."""

    def dump(file: TextIO, *args, **kwargs) -> None:
        for line in line_dumper(*args, **kwargs):
            file.write(line + '\n')

    def dumps(*args, **kwargs) -> str:
        return ''.join(line + '\n' for line in line_dumper(*args, **kwargs))

    return dump, dumps
