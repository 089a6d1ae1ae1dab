'''Voting collections written in a lightweight markup.

A voting collection is a dated set of voting groups, each containing
median and Schulze votings. It is written as follows::

    # General assembly: 24.10.2017

    ## Budget

    ### Party fund
    - 1200.50

    ### Who organizes the party
    * Culture department
    * Sports department
    * No

A ``#`` title with the date in the ``DD.MM.YYYY`` format comes first, each
``##`` heading opens a group and each ``###`` heading names a voting. A
voting is either a median voting, given by a single ``-`` line with its
maximum value (a currency amount with up to two decimals, stored as an
integer number of cents), or a Schulze voting, given by one ``*`` line per
option. Blank lines are ignored.

The required majority is not part of the markup; parsed votings leave
``percent_required`` unset for the caller to configure.
'''

import re
import enum
import datetime
import dataclasses
from numbers import Real
from typing import Iterable, List, Optional, Tuple

import weightvote.io.core
import weightvote.evaluate
import weightvote.vote
from weightvote.io.core import ParseError, SyntaxParseError

DATE_FORMAT = '%d.%m.%Y'
CURRENCY_RE = re.compile(r'^(\d+)(?:[.,](\d{1,2}))?$')


@dataclasses.dataclass
class MedianVoting:
    '''A median voting on an amount of at most max_value (in cents).'''
    name: str
    max_value: int
    percent_required: Optional[Real] = None

    def evaluator(self, default_percent: Real = 0.5
                  ) -> weightvote.evaluate.MedianEvaluator:
        '''Create an evaluator with the configured majority.

        :param default_percent: Majority to use if none is configured.
        '''
        if self.percent_required is None:
            return weightvote.evaluate.MedianEvaluator(default_percent)
        return weightvote.evaluate.MedianEvaluator(self.percent_required)

    def validator(self) -> weightvote.vote.MedianBallotValidator:
        '''Create a validator that checks ballots against max_value.'''
        return weightvote.vote.MedianBallotValidator(self.max_value)


@dataclasses.dataclass
class SchulzeVoting:
    '''A Schulze voting; the last option is the reference ("no") option.'''
    name: str
    options: List[str]
    percent_required: Optional[Real] = None

    @property
    def n_options(self) -> int:
        return len(self.options)

    def evaluator(self,
                  default_percent: Real = 0.5,
                  n_workers: Optional[int] = None,
                  ) -> weightvote.evaluate.SchulzeEvaluator:
        '''Create an evaluator with the configured majority.

        :param default_percent: Majority to use if none is configured.
        :param n_workers: Number of threads for the evaluator.
        '''
        percent = self.percent_required
        if percent is None:
            percent = default_percent
        return weightvote.evaluate.SchulzeEvaluator(percent, n_workers)

    def validator(self) -> weightvote.vote.SchulzeBallotValidator:
        return weightvote.vote.SchulzeBallotValidator(self.n_options)


@dataclasses.dataclass
class VotingGroup:
    name: str
    median_votings: List[MedianVoting] = dataclasses.field(
        default_factory=list
    )
    schulze_votings: List[SchulzeVoting] = dataclasses.field(
        default_factory=list
    )


@dataclasses.dataclass
class VotingCollection:
    name: str
    date: datetime.date
    groups: List[VotingGroup] = dataclasses.field(default_factory=list)


class _State(enum.Enum):
    START = enum.auto()
    TOP_LEVEL = enum.auto()
    GROUP = enum.auto()
    VOTING = enum.auto()
    GROUP_OR_VOTING = enum.auto()
    SCHULZE_OPTIONS = enum.auto()


def parse_currency(value: str) -> int:
    '''Convert a currency amount such as ``12.5`` or ``3,05`` to cents.

    :raises ValueError: If the amount is not in the XXXX.XX format.
    '''
    match = CURRENCY_RE.match(value)
    if match is None:
        raise ValueError(
            f'not a valid amount: {value!r}, allowed format is XXXX.XX'
        )
    whole, decimals = match.groups()
    return int(whole) * 100 + int((decimals or '').ljust(2, '0'))


class CollectionParser:
    '''A state machine building a voting collection line by line.

    Use :func:`load` or :func:`loads` rather than this class directly.
    '''
    def __init__(self):
        self.state = _State.START
        self.collection = None
        self.voting_name = None
        self.voting_line = None

    def feed(self, line: str, line_number: int) -> None:
        handler = getattr(self, '_handle_' + self.state.name.lower())
        handler(line, line_number)

    def finish(self) -> VotingCollection:
        if self.state == _State.START:
            raise ParseError('empty voting collection')
        if self.state == _State.VOTING:
            raise SyntaxParseError(
                self.voting_line,
                f'voting {self.voting_name!r} has no options or value'
            )
        return self.collection

    def _handle_start(self, line: str, line_number: int) -> None:
        if not line.startswith('# '):
            raise SyntaxParseError(line_number,
                                   'expected a title starting with # ')
        name, colon, date_str = line[2:].rpartition(':')
        if not colon:
            raise SyntaxParseError(line_number, 'line must contain ": date"')
        name = weightvote.io.core.check_name(name.strip(), line_number)
        try:
            date = datetime.datetime.strptime(
                date_str.strip(), DATE_FORMAT
            ).date()
        except ValueError as e:
            raise SyntaxParseError(
                line_number, f'invalid date {date_str.strip()!r}, expected'
                ' DD.MM.YYYY'
            ) from e
        self.collection = VotingCollection(name, date)
        self.state = _State.TOP_LEVEL

    def _handle_top_level(self, line: str, line_number: int) -> None:
        name = _heading(line, 2, line_number)
        if name is None:
            raise SyntaxParseError(line_number,
                                   'expected a group starting with ## ')
        self._open_group(name)

    def _handle_group(self, line: str, line_number: int) -> None:
        name = _heading(line, 3, line_number)
        if name is None:
            raise SyntaxParseError(line_number,
                                   'expected a voting starting with ### ')
        self._open_voting(name, line_number)

    def _handle_voting(self, line: str, line_number: int) -> None:
        item_type, item = _item(line, line_number)
        group = self.collection.groups[-1]
        if item_type == '*':
            group.schulze_votings.append(
                SchulzeVoting(self.voting_name, [item])
            )
            self.state = _State.SCHULZE_OPTIONS
        elif item_type == '-':
            try:
                max_value = parse_currency(item)
            except ValueError as e:
                raise SyntaxParseError(line_number, str(e)) from e
            group.median_votings.append(
                MedianVoting(self.voting_name, max_value)
            )
            self.state = _State.GROUP_OR_VOTING
        else:
            raise SyntaxParseError(
                line_number,
                'expected either * OPTION (for Schulze voting)'
                ' or - VALUE (for median voting)'
            )
        self.voting_name = None

    def _handle_schulze_options(self, line: str, line_number: int) -> None:
        item_type, item = _item(line, line_number)
        if item_type == '*':
            self.collection.groups[-1].schulze_votings[-1].options.append(item)
        elif item_type == '-':
            raise SyntaxParseError(
                line_number, 'expected a Schulze option, found a median value'
            )
        else:
            self._handle_group_or_voting(line, line_number)

    def _handle_group_or_voting(self, line: str, line_number: int) -> None:
        voting_name = _heading(line, 3, line_number)
        if voting_name is not None:
            self._open_voting(voting_name, line_number)
            return
        group_name = _heading(line, 2, line_number)
        if group_name is not None:
            self._open_group(group_name)
            return
        raise SyntaxParseError(line_number,
                               'expected a voting or a voting group')

    def _open_group(self, name: str) -> None:
        self.collection.groups.append(VotingGroup(name))
        self.state = _State.GROUP

    def _open_voting(self, name: str, line_number: int) -> None:
        self.voting_name = name
        self.voting_line = line_number
        self.state = _State.VOTING


def _heading(line: str, level: int, line_number: int) -> Optional[str]:
    prefix = '#' * level + ' '
    if not line.startswith(prefix):
        return None
    return weightvote.io.core.check_name(
        line[len(prefix):].strip(), line_number
    )


def _item(line: str, line_number: int) -> Tuple[Optional[str], str]:
    for marker in ('*', '-'):
        if line.startswith(marker + ' '):
            return marker, weightvote.io.core.check_name(
                line[2:].strip(), line_number
            )
    return None, line


def load_lines(lines: Iterable[str]) -> VotingCollection:
    parser = CollectionParser()
    for line_number, line in weightvote.io.core.significant_lines(lines):
        parser.feed(line, line_number)
    return parser.finish()


load, loads = weightvote.io.core.loaders(load_lines)
