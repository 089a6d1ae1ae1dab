
import sys
import os

import pytest

sys.path.append(os.path.join(os.path.dirname(__file__), '..'))
import weightvote.vote
from weightvote.vote import MedianBallot, SchulzeBallot


VALID = {
    'median': [
        MedianBallot(1, 0),
        MedianBallot(0, 500),
        MedianBallot(12, 120050),
    ],
    'schulze': [
        SchulzeBallot(1, [0, 1, 2]),
        SchulzeBallot(0, [2, 1, 0]),
        SchulzeBallot(5, (0, 0, 0)),
        SchulzeBallot(2, [7, -1, 3]),
    ],
}

INVALID = {
    'median': [
        (MedianBallot(-1, 100), weightvote.vote.VoteMagnitudeError),
        (MedianBallot(1, -5), weightvote.vote.VoteMagnitudeError),
        (MedianBallot(1, 200000), weightvote.vote.VoteMagnitudeError),
        (MedianBallot(1.5, 100), weightvote.vote.VoteValueError),
        (MedianBallot(1, '100'), weightvote.vote.VoteValueError),
        (MedianBallot(True, 100), weightvote.vote.VoteValueError),
    ],
    'schulze': [
        (SchulzeBallot(1, [0, 1]), weightvote.vote.RankingLengthError),
        (SchulzeBallot(1, [0, 1, 2, 3]), weightvote.vote.RankingLengthError),
        (SchulzeBallot(-2, [0, 1, 2]), weightvote.vote.VoteMagnitudeError),
        (SchulzeBallot(1, [0, 'a', 2]), weightvote.vote.VoteValueError),
    ],
}

VALIDATORS = {
    'median': weightvote.vote.MedianBallotValidator(max_value=150000),
    'schulze': weightvote.vote.SchulzeBallotValidator(3),
}


@pytest.mark.parametrize(('ballot_type', 'ballot'), [
    (key, ballot) for key, ballots in VALID.items() for ballot in ballots
])
def test_valid(ballot_type, ballot):
    VALIDATORS[ballot_type].validate(ballot)


@pytest.mark.parametrize(('ballot_type', 'ballot', 'error'), [
    (key, ballot, error)
    for key, variants in INVALID.items() for ballot, error in variants
])
def test_invalid(ballot_type, ballot, error):
    with pytest.raises(error):
        VALIDATORS[ballot_type].validate(ballot)
    assert issubclass(error, weightvote.vote.VoteError)


def test_validate_all():
    validator = VALIDATORS['schulze']
    validator.validate_all(VALID['schulze'])
    with pytest.raises(weightvote.vote.RankingLengthError):
        validator.validate_all(VALID['schulze'] + [SchulzeBallot(1, [0])])


def test_unbounded_median():
    weightvote.vote.MedianBallotValidator().validate(MedianBallot(1, 10 ** 12))


def test_ballots_immutable():
    ballot = SchulzeBallot(1, [0, 1])
    assert ballot.ranking == (0, 1)
    with pytest.raises(AttributeError):
        ballot.weight = 5
    assert hash(ballot) == hash(SchulzeBallot(1, (0, 1)))


def test_total_weight():
    assert weightvote.vote.total_weight(VALID['median']) == 13
    assert weightvote.vote.total_weight([]) == 0


def test_sort_median_ballots():
    ballots = [MedianBallot(1, 5), MedianBallot(2, 50), MedianBallot(3, 10)]
    ordered = weightvote.vote.sort_median_ballots(ballots)
    assert [ballot.value for ballot in ordered] == [50, 10, 5]
    assert ballots[0].value == 5


def test_error_messages():
    assert str(weightvote.vote.RankingLengthError(4, 2)) == \
        'expected ranking of length 4, got length 2'
    assert str(weightvote.vote.VoteMagnitudeError(7, 0, 5, 'value')) == \
        'invalid ballot value: 7, must be >=0 and <=5'
