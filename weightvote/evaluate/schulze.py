'''Schulze method evaluator for weighted ranked ballots.

The Schulze method (also called beatpath or Schwartz sequential dropping)
compares every pair of options by the weight of ballots preferring one to
the other, finds the strongest paths of such pairwise wins between all
pairs, and ranks the options by how many others they beat on strongest
paths. It always selects the Condorcet winner when there is one.

The evaluation proceeds as follows:

1.  The pairwise victory matrix ``d`` is counted from the ballots
    (see :mod:`weightvote.component.pairwise`).
2.  The strongest path matrix ``p`` (see
    :mod:`weightvote.component.paths`) and the support fractions against
    the last option are computed from ``d``, concurrently if workers are
    available.
3.  The options are grouped by rank from ``p`` (see
    :mod:`weightvote.component.rank`).

The result does not depend on the number of workers.
'''

import logging
import concurrent.futures
from numbers import Real
from typing import Optional, Sequence

import weightvote.util
import weightvote.vote
import weightvote.component.pairwise
import weightvote.component.paths
import weightvote.component.rank
from weightvote.evaluate.core import SchulzeResult
from weightvote.persist import simple_serialization
from weightvote.vote import SchulzeBallot

logger = logging.getLogger(__name__)


def evaluate_schulze(ballots: Sequence[SchulzeBallot],
                     n: int,
                     percent_required: Real,
                     n_workers: Optional[int] = None,
                     ) -> SchulzeResult:
    '''Evaluate a Schulze voting.

    :param ballots: Schulze ballots, each ranking exactly n options.
    :param n: Number of options, the last one being the reference ("no")
        option.
    :param percent_required: Share of the total weight that must be strictly
        exceeded for a majority, between 0 and 1.
    :param n_workers: Number of threads to use; None or 1 computes
        everything in the calling thread.
    :raises RankingLengthError: If any ballot does not rank exactly n
        options.
    '''
    ballots = list(ballots)
    weight_sum = weightvote.vote.total_weight(ballots)
    votes_required = weightvote.util.votes_required(
        weight_sum, percent_required
    )
    d = weightvote.component.pairwise.pairwise_matrix(ballots, n, n_workers)
    logger.debug('schulze voting: %d ballots, %d options, weight %d, '
                 '%d votes required', len(ballots), n, weight_sum,
                 votes_required)
    if weightvote.util.is_parallel(n_workers):
        with concurrent.futures.ThreadPoolExecutor(max_workers=2) as pool:
            p_future = pool.submit(
                weightvote.component.paths.strongest_paths, d, n, n_workers
            )
            percentages_future = pool.submit(
                weightvote.component.pairwise.support_fractions,
                d, n, weight_sum
            )
            p = p_future.result()
            percentages = percentages_future.result()
    else:
        p = weightvote.component.paths.strongest_paths(d, n)
        percentages = weightvote.component.pairwise.support_fractions(
            d, n, weight_sum
        )
    ranked_groups = weightvote.component.rank.rank_groups(p, n, n_workers)
    logger.info('schulze ranking: %s', ranked_groups)
    return SchulzeResult(
        votes_required=votes_required,
        d=d,
        p=p,
        ranked_groups=ranked_groups,
        percentages=percentages,
    )


@simple_serialization
class SchulzeEvaluator:
    '''Schulze method evaluator.

    :param percent_required: Share of the total weight that must be strictly
        exceeded for a majority, between 0 and 1 (exclusive).
    :param n_workers: Number of threads to use for the evaluation; None
        evaluates sequentially. The results are identical either way.
    '''
    def __init__(self,
                 percent_required: Real = 0.5,
                 n_workers: Optional[int] = None,
                 ):
        self.percent_required = weightvote.util.check_percent_required(
            percent_required
        )
        self.n_workers = n_workers

    def evaluate(self,
                 ballots: Sequence[SchulzeBallot],
                 n_options: int,
                 ) -> SchulzeResult:
        '''Evaluate a Schulze voting.

        :param ballots: Schulze ballots, each ranking exactly n_options.
        :param n_options: Number of options, including the last "no" option.
        :raises RankingLengthError: If any ballot ranks a different number
            of options.
        '''
        if n_options < 1:
            raise ValueError(f'need at least one option, got {n_options}')
        return evaluate_schulze(
            ballots, n_options, self.percent_required, self.n_workers
        )
