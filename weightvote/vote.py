'''Ballot types and ballot validators.

Two ballot types are recognized by Weightvote:

-   **Median** ballots - a voter names a single quantity (e.g. an amount of
    money in cents) that they support. Represented by :class:`MedianBallot`.
-   **Schulze** ballots - a voter ranks all options of a voting. Represented
    by :class:`SchulzeBallot` holding one integer rank per option; smaller
    numbers mean more preferred options and equal numbers mean that the voter
    is indifferent between those options. For example, with three options, a
    ranking of ``(0, 1, 0)`` prefers the first and third option equally to the
    second one.

Both carry an integer weight, since a single voter (such as a delegation)
may hold more than one vote.

The evaluators only check what they cannot do without (the ranking length of
Schulze ballots); use the validators in this module to check weights and
values beforehand. If a ballot is invalid, they raise a subclass of
:class:`VoteError`.
'''

import abc
import dataclasses
from typing import Any, Iterable, List, Optional, Tuple
from numbers import Number

from weightvote.persist import simple_serialization


class VoteError(Exception, metaclass=abc.ABCMeta):
    '''A ballot is invalid given the voting rules.'''
    pass


class RankingLengthError(VoteError):
    '''A Schulze ballot does not rank exactly the options of the voting.

    :param expected: Number of options in the voting.
    :param actual: Length of the ranking found on the ballot.
    '''
    def __init__(self, expected: int, actual: int):
        self.expected = expected
        self.actual = actual
        super().__init__(
            f'expected ranking of length {expected}, got length {actual}'
        )


ValidationError = RankingLengthError


class VoteMagnitudeError(VoteError):
    '''A ballot weight or value is too small or too large.

    :param value: The number that was found to be invalid.
    :param min_value: Minimum value permissible in the context.
    :param max_value: Maximum value permissible in the context.
    :param value_name: Role of the number (e.g. weight, value...)
    '''
    def __init__(self,
                 value: Number,
                 min_value: Optional[Number] = None,
                 max_value: Optional[Number] = None,
                 value_name: str = 'value',
                 ):
        self.value = value
        self.min_value = min_value
        self.max_value = max_value
        message = f'invalid ballot {value_name}: {value}'
        parts = []
        if min_value is not None:
            parts.append(f'>={min_value}')
        if max_value is not None:
            parts.append(f'<={max_value}')
        if parts:
            message += ', must be ' + ' and '.join(parts)
        super().__init__(message)


class VoteValueError(VoteError):
    '''A ballot contains something that cannot be interpreted.

    :param value: The offending content.
    :param allowed: What would have been allowed at the given point.
    '''
    def __init__(self, value: Any, allowed: Any = None):
        self.value = value
        self.allowed = allowed
        message = f'invalid ballot content: {value!r}'
        if allowed is not None:
            message += f', allowed: {allowed}'
        super().__init__(message)


@simple_serialization
@dataclasses.dataclass(frozen=True)
class MedianBallot:
    '''A weighted vote for a single value in a median voting.'''
    weight: int
    value: int


@simple_serialization
@dataclasses.dataclass(frozen=True)
class SchulzeBallot:
    '''A weighted ranking of all options of a Schulze voting.

    The ranking is stored as a tuple, with ``ranking[i]`` being the rank
    of option ``i``.
    '''
    weight: int
    ranking: Tuple[int, ...]

    def __post_init__(self):
        object.__setattr__(self, 'ranking', tuple(self.ranking))


def total_weight(ballots: Iterable[Any]) -> int:
    '''Sum the weights of all given ballots.'''
    return sum(ballot.weight for ballot in ballots)


def sort_median_ballots(ballots: Iterable[MedianBallot]
                        ) -> List[MedianBallot]:
    '''Return the ballots ordered by their value, highest values first.'''
    return sorted(ballots, key=lambda ballot: ballot.value, reverse=True)


IntBoundsTupleType = Tuple[Optional[int], Optional[int]]


class VoteMagnitudeChecker:
    '''A helper class to check if a value is in a specified range.

    :param bounds: A tuple with lower and upper bounds (inclusive) for the
        value to be checked. None means the respective bound is not checked.
    :param value_name: Name of the value to be checked (included in the error
        message).
    '''
    def __init__(self,
                 bounds: IntBoundsTupleType = (None, None),
                 value_name: str = 'value',
                 ):
        self.min_value, self.max_value = bounds
        self.value_name = value_name

    def is_valid(self, value: Number) -> bool:
        return (
            (self.min_value is None or value >= self.min_value)
            and (self.max_value is None or value <= self.max_value)
        )

    def check(self, value: Number) -> None:
        '''Check if the value is within the given range.

        :raises VoteMagnitudeError: If the value is outside the given
            range.
        '''
        if not self.is_valid(value):
            raise VoteMagnitudeError(
                value, self.min_value, self.max_value, self.value_name
            )


WEIGHT_CHECKER = VoteMagnitudeChecker((0, None), value_name='weight')


def _check_weight(weight: Any) -> None:
    if not isinstance(weight, int) or isinstance(weight, bool):
        raise VoteValueError(weight, allowed='integer weight')
    WEIGHT_CHECKER.check(weight)


class BallotValidator(metaclass=abc.ABCMeta):
    '''Validate that a single ballot is valid under the voting rules.

    Base class, not intended for direct use.
    '''
    @abc.abstractmethod
    def validate(self, ballot: Any) -> None:
        raise NotImplementedError

    def validate_all(self, ballots: Iterable[Any]) -> None:
        '''Validate all given ballots, stopping at the first invalid one.'''
        for ballot in ballots:
            self.validate(ballot)


@simple_serialization
class MedianBallotValidator(BallotValidator):
    '''Validate a median ballot.

    The weight must be a non-negative integer and the value an integer
    between zero and the maximum value of the voting (if given).

    :param max_value: The largest value a ballot may name. None means values
        are not bounded from above.
    '''
    def __init__(self, max_value: Optional[int] = None):
        self.max_value = max_value
        self._value_checker = VoteMagnitudeChecker((0, max_value))

    def validate(self, ballot: MedianBallot) -> None:
        '''Check if the median ballot is valid.

        :param ballot: Median ballot to be checked.
        :raises VoteValueError: If the weight or value is not an integer.
        :raises VoteMagnitudeError: If the weight is negative or the value
            out of bounds.
        '''
        _check_weight(ballot.weight)
        if not isinstance(ballot.value, int) or isinstance(ballot.value, bool):
            raise VoteValueError(ballot.value, allowed='integer value')
        self._value_checker.check(ballot.value)


@simple_serialization
class SchulzeBallotValidator(BallotValidator):
    '''Validate a Schulze ballot.

    :param n_options: Number of options of the voting; the ranking must
        contain exactly this many integers.
    '''
    def __init__(self, n_options: int):
        self.n_options = n_options

    def validate(self, ballot: SchulzeBallot) -> None:
        '''Check if the Schulze ballot is valid.

        :param ballot: Schulze ballot to be checked.
        :raises RankingLengthError: If the ranking length does not match
            the number of options.
        :raises VoteValueError: If the weight or any rank is not an integer.
        :raises VoteMagnitudeError: If the weight is negative.
        '''
        _check_weight(ballot.weight)
        if len(ballot.ranking) != self.n_options:
            raise RankingLengthError(self.n_options, len(ballot.ranking))
        for rank in ballot.ranking:
            if not isinstance(rank, int) or isinstance(rank, bool):
                raise VoteValueError(rank, allowed='integer rank')
