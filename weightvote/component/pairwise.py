'''Pairwise comparison of options on ranked ballots.

The pairwise victory matrix ``d`` holds, at ``d[i][j]``, the total weight of
ballots that rank option ``i`` strictly better than option ``j``. Ballots
that rank both equally do not count in either direction.
'''

import logging
from typing import List, Optional, Sequence

import weightvote.util
from weightvote.util import IntMatrix
from weightvote.vote import SchulzeBallot, RankingLengthError

logger = logging.getLogger(__name__)


def check_rankings(ballots: Sequence[SchulzeBallot], n: int) -> None:
    '''Check that every ballot ranks exactly n options.

    :raises RankingLengthError: For the first ballot of a different length.
    '''
    for ballot in ballots:
        if len(ballot.ranking) != n:
            raise RankingLengthError(n, len(ballot.ranking))


def add_ballots(matrix: IntMatrix, ballots: Sequence[SchulzeBallot]) -> None:
    '''Add the pairwise preferences of the ballots to the matrix in place.'''
    n = len(matrix)
    for ballot in ballots:
        weight = ballot.weight
        ranking = ballot.ranking
        for i in range(n):
            rank_i = ranking[i]
            for j in range(i + 1, n):
                if rank_i < ranking[j]:
                    matrix[i][j] += weight
                elif ranking[j] < rank_i:
                    matrix[j][i] += weight


def partial_matrix(ballots: Sequence[SchulzeBallot], n: int) -> IntMatrix:
    matrix = weightvote.util.new_matrix(n)
    add_ballots(matrix, ballots)
    return matrix


def pairwise_matrix(ballots: Sequence[SchulzeBallot],
                    n: int,
                    n_workers: Optional[int] = None,
                    ) -> IntMatrix:
    '''Compute the pairwise victory matrix of the ballots.

    With more than one worker, the ballots are split into contiguous shards
    whose partial matrices are computed concurrently and then summed; the
    result does not depend on the sharding.

    :param ballots: Schulze ballots, each ranking exactly n options.
    :param n: Number of options.
    :param n_workers: Number of threads to shard the ballots across.
    :raises RankingLengthError: If any ballot ranks a different number of
        options; no matrix is computed in that case.
    '''
    ballots = list(ballots)
    check_rankings(ballots, n)
    if not weightvote.util.is_parallel(n_workers):
        return partial_matrix(ballots, n)
    shards = weightvote.util.split_evenly(ballots, n_workers)
    logger.debug('counting %d ballots in %d shards', len(ballots), len(shards))
    partials = weightvote.util.run_tasks(
        partial_matrix, [(shard, n) for shard in shards], n_workers
    )
    return weightvote.util.sum_matrices(partials, n)


def support_fractions(d: IntMatrix, n: int, weight_sum: int) -> List[float]:
    '''Compute the fraction of weight preferring each option to the last one.

    The last option is the reference (typically "no" or status quo), so the
    result has ``n - 1`` entries. With zero total weight, all fractions are
    zero.

    :param d: Pairwise victory matrix.
    :param n: Number of options.
    :param weight_sum: Total weight of all ballots.
    '''
    if n == 0:
        return []
    if weight_sum == 0:
        return [0.0] * (n - 1)
    return [row[n - 1] / weight_sum for row in d[:n - 1]]
