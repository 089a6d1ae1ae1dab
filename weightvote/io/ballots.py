'''Ballot files in JSON.

A ballot file describes a single voting with all its ballots::

    {
        "procedure": "schulze",
        "name": "Who organizes the party",
        "percent_required": 0.5,
        "options": ["Culture", "Sports", "No"],
        "ballots": [
            {"weight": 3, "ranking": [0, 1, 2]},
            {"weight": 2, "ranking": [1, 0, 1]}
        ]
    }

Median voting files use ``"procedure": "median"``, ballots of the form
``{"weight": 2, "value": 15000}`` and an optional ``"max_value"``.
The ``options`` list is optional for Schulze votings if the ballots
are not empty.
'''

import json
from numbers import Real
from typing import Any, Callable, Dict, Iterable, List

import weightvote.io.core
import weightvote.persist
from weightvote.io.core import ElectionData, ParseError
from weightvote.vote import MedianBallot, SchulzeBallot

PROCEDURES = ('median', 'schulze')


def load_lines(lines: Iterable[str]) -> ElectionData:
    text = '\n'.join(line.rstrip('\n') for line in lines)
    try:
        document = json.loads(text)
    except json.JSONDecodeError as e:
        raise ParseError(f'invalid JSON ballot file: {e}') from e
    return parse_document(document)


load, loads = weightvote.io.core.loaders(load_lines)


def parse_document(document: Dict[str, Any]) -> ElectionData:
    '''Create election data from a parsed JSON ballot document.

    :raises ParseError: If the document structure is invalid.
    '''
    if not isinstance(document, dict):
        raise ParseError('ballot file must contain a JSON object')
    procedure = document.get('procedure')
    if procedure not in PROCEDURES:
        raise ParseError(
            f'unknown procedure {procedure!r}, supported: '
            + ', '.join(PROCEDURES)
        )
    raw_ballots = document.get('ballots', [])
    if not isinstance(raw_ballots, list):
        raise ParseError('ballots must be a list')
    if procedure == 'median':
        ballots = [_median_ballot(raw) for raw in raw_ballots]
    else:
        ballots = [_schulze_ballot(raw) for raw in raw_ballots]
    percent_required = _optional(document, 'percent_required', _is_number)
    options = _optional(document, 'options', _is_name_list)
    max_value = _optional(document, 'max_value', _is_int)
    name = _optional(document, 'name', lambda value: isinstance(value, str))
    return ElectionData(
        procedure=procedure,
        ballots=ballots,
        percent_required=percent_required,
        options=options,
        max_value=max_value,
        name=name,
    )


def dump_document(data: ElectionData) -> Dict[str, Any]:
    '''Convert election data to a JSON-ready ballot document.'''
    document = {'procedure': data.procedure}
    for key in ('name', 'percent_required', 'options', 'max_value'):
        value = getattr(data, key)
        if value is not None:
            document[key] = weightvote.persist.serialize_value(value)
    document['ballots'] = [
        {key: val for key, val in ballot.to_dict().items() if key != 'class'}
        for ballot in data.ballots
    ]
    return document


def dumps(data: ElectionData) -> str:
    return json.dumps(dump_document(data), indent=4)


def _median_ballot(raw: Any) -> MedianBallot:
    weight, value = _fields(raw, ['weight', 'value'])
    return MedianBallot(weight, value)


def _schulze_ballot(raw: Any) -> SchulzeBallot:
    weight, ranking = _fields(raw, ['weight', 'ranking'])
    if not isinstance(ranking, list):
        raise ParseError(f'ranking must be a list, got {ranking!r}')
    return SchulzeBallot(weight, ranking)


def _fields(raw: Any, keys: List[str]) -> List[Any]:
    if not isinstance(raw, dict):
        raise ParseError(f'ballot must be a JSON object, got {raw!r}')
    try:
        return [raw[key] for key in keys]
    except KeyError as e:
        raise ParseError(f'ballot {raw!r} is missing {e}') from e


def _optional(document: Dict[str, Any],
              key: str,
              is_valid: Callable[[Any], bool],
              ) -> Any:
    value = document.get(key)
    if value is not None and not is_valid(value):
        raise ParseError(f'invalid {key}: {value!r}')
    return value


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _is_number(value: Any) -> bool:
    return isinstance(value, Real) and not isinstance(value, bool)


def _is_name_list(value: Any) -> bool:
    return (
        isinstance(value, list)
        and all(isinstance(item, str) for item in value)
    )
