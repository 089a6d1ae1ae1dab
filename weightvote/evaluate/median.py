'''Median voting evaluator.

In a median voting, each voter names a value (typically the largest amount
of money they agree to spend). A voter naming a value is taken to support
every smaller value too, so walking the ballots from the largest value
down, the support accumulates; the first value whose accumulated weight
strictly exceeds the required share of the total weight wins.
'''

import logging
from numbers import Real
from typing import Iterable

import weightvote.util
import weightvote.vote
from weightvote.evaluate.core import MedianResult
from weightvote.persist import simple_serialization
from weightvote.vote import MedianBallot

logger = logging.getLogger(__name__)


def evaluate_median(ballots: Iterable[MedianBallot],
                    percent_required: Real,
                    ) -> MedianResult:
    '''Select the largest value supported by the required majority.

    :param ballots: Median ballots; their order does not matter.
    :param percent_required: Share of the total weight that must be strictly
        exceeded, between 0 and 1.
    :returns: The winning value together with the weight to be exceeded.
        If no value reaches the majority (e.g. there are no ballots),
        the value is zero.
    '''
    ordered = weightvote.vote.sort_median_ballots(ballots)
    weight_sum = weightvote.vote.total_weight(ordered)
    votes_required = weightvote.util.votes_required(
        weight_sum, percent_required
    )
    logger.debug('median voting: %d ballots, weight %d, %d votes required',
                 len(ordered), weight_sum, votes_required)
    weight_so_far = 0
    for ballot in ordered:
        weight_so_far += ballot.weight
        if weight_so_far > votes_required:
            logger.info('value %d has a majority of %d', ballot.value,
                        weight_so_far)
            return MedianResult(ballot.value, votes_required)
    logger.info('no value reached a majority')
    return MedianResult(0, votes_required)


@simple_serialization
class MedianEvaluator:
    '''Median voting evaluator.

    :param percent_required: Share of the total weight that must be strictly
        exceeded, between 0 and 1 (exclusive). The default of one half
        requires a simple majority.
    '''
    def __init__(self, percent_required: Real = 0.5):
        self.percent_required = weightvote.util.check_percent_required(
            percent_required
        )

    def evaluate(self, ballots: Iterable[MedianBallot]) -> MedianResult:
        '''Select the largest value supported by the required majority.

        :param ballots: Median ballots.
        '''
        return evaluate_median(ballots, self.percent_required)
