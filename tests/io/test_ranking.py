
import sys
import os

import pytest

sys.path.append(os.path.join(os.path.dirname(__file__), '..', '..'))
import weightvote.io
import weightvote.vote

OPTIONS = ['A', 'B', 'C', 'D']

RANKINGS = [
    (tuple('ABCD'), (0, 1, 2, 3)),
    (tuple('DCBA'), (3, 2, 1, 0)),
    (('B', frozenset('AC'), 'D'), (1, 0, 1, 2)),
    (('C',), (1, 1, 0, 1)),
    ((), (0, 0, 0, 0)),
    ((frozenset('ABCD'),), (0, 0, 0, 0)),
]


@pytest.mark.parametrize(('ordering', 'ranking'), RANKINGS)
def test_ranking_from_ranked(ordering, ranking):
    assert weightvote.io.ranking_from_ranked(ordering, OPTIONS) == ranking


@pytest.mark.parametrize('ordering', [
    ('A', 'E'),
    ('A', 'B', 'A'),
    (frozenset('AB'), 'B'),
])
def test_ranking_from_ranked_invalid(ordering):
    with pytest.raises(weightvote.vote.VoteValueError):
        weightvote.io.ranking_from_ranked(ordering, OPTIONS)
