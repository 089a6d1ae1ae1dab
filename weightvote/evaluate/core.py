'''Result objects shared by the evaluators.'''

import dataclasses
from typing import Tuple

from weightvote.persist import simple_serialization

FrozenMatrix = Tuple[Tuple[int, ...], ...]

__all__ = ['MedianResult', 'SchulzeResult']


@simple_serialization
@dataclasses.dataclass(frozen=True)
class MedianResult:
    '''Result of a median voting.

    :param value: The largest value with a majority; zero if there was no
        value with a majority (including when there were no ballots).
    :param votes_required: The weight that had to be strictly exceeded.
    '''
    value: int
    votes_required: int


@simple_serialization
@dataclasses.dataclass(frozen=True)
class SchulzeResult:
    '''Result of a Schulze voting.

    :param votes_required: The weight that had to be strictly exceeded for
        a majority.
    :param d: The pairwise victory matrix; ``d[i][j]`` is the weight of
        ballots preferring option ``i`` to option ``j``.
    :param p: The strongest path matrix derived from ``d``.
    :param ranked_groups: Option indices grouped by rank, winners first.
        Options within a group are tied.
    :param percentages: For every option except the last, the share of the
        total weight that preferred it to the last option.

    The matrices and groups are stored as tuples so the result cannot be
    changed after evaluation.
    '''
    votes_required: int
    d: FrozenMatrix
    p: FrozenMatrix
    ranked_groups: FrozenMatrix
    percentages: Tuple[float, ...]

    def __post_init__(self):
        for name in ('d', 'p', 'ranked_groups'):
            rows = tuple(tuple(row) for row in getattr(self, name))
            object.__setattr__(self, name, rows)
        object.__setattr__(self, 'percentages', tuple(self.percentages))

    def winners(self) -> Tuple[int, ...]:
        '''Return the options in the best rank group.'''
        return self.ranked_groups[0] if self.ranked_groups else ()

    def accepted(self, option: int) -> bool:
        '''Tell whether a majority preferred the option to the last one.

        :param option: Index of an option other than the last.
        '''
        n = len(self.d)
        if not 0 <= option < n - 1:
            raise IndexError(f'option {option} out of range for {n} options')
        return self.d[option][n - 1] > self.votes_required
