
import sys
import os
import io
import datetime

import pytest

sys.path.append(os.path.join(os.path.dirname(__file__), '..', '..'))
import weightvote.evaluate
import weightvote.io.collection
import weightvote.vote
from weightvote.io.core import ParseError, SyntaxParseError
from weightvote.vote import MedianBallot, SchulzeBallot


COLLECTION_TEXT = '''
# General assembly: 24.10.2017

## Budget

### Party fund
- 1200.5

### Travel costs
- 300

### Who organizes the party
* Culture department
* Sports department
* No

## Elections
### Chair
* Alice
* Bob
* No
### Office supplies
- 99,99
'''


def test_load():
    collection = weightvote.io.collection.loads(COLLECTION_TEXT)
    assert collection.name == 'General assembly'
    assert collection.date == datetime.date(2017, 10, 24)
    assert [group.name for group in collection.groups] == [
        'Budget', 'Elections'
    ]
    budget, elections = collection.groups
    assert [(v.name, v.max_value) for v in budget.median_votings] == [
        ('Party fund', 120050),
        ('Travel costs', 30000),
    ]
    assert len(budget.schulze_votings) == 1
    party = budget.schulze_votings[0]
    assert party.name == 'Who organizes the party'
    assert party.options == ['Culture department', 'Sports department', 'No']
    assert party.n_options == 3
    assert party.percent_required is None
    assert [v.name for v in elections.schulze_votings] == ['Chair']
    assert elections.median_votings[0].max_value == 9999


def test_load_file():
    collection = weightvote.io.collection.load(io.StringIO(COLLECTION_TEXT))
    assert len(collection.groups) == 2


@pytest.mark.parametrize(('value', 'cents'), [
    ('0', 0), ('12', 1200), ('12.5', 1250), ('12,05', 1205), ('7.99', 799),
])
def test_parse_currency(value, cents):
    assert weightvote.io.collection.parse_currency(value) == cents


@pytest.mark.parametrize('value', ['', '12.', '1.234', '-3', 'ten', '1 000'])
def test_parse_currency_invalid(value):
    with pytest.raises(ValueError):
        weightvote.io.collection.parse_currency(value)


INVALID = {
    'no_title': ('## Group', 1),
    'no_date': ('# Assembly', 1),
    'bad_date': ('# Assembly: 31.02.2017', 1),
    'no_group': ('# Assembly: 01.02.2017\n### Voting', 2),
    'no_voting': ('# Assembly: 01.02.2017\n## Group\n* Option', 3),
    'bad_item': ('# Assembly: 01.02.2017\n## Group\n### V\nOption', 4),
    'bad_value': ('# Assembly: 01.02.2017\n## Group\n### V\n- lots', 4),
    'mixed': ('# Assembly: 01.02.2017\n## Group\n### V\n* A\n- 12', 5),
    'median_twice': ('# Assembly: 01.02.2017\n## G\n### V\n- 1\n- 2', 5),
    'empty_name': ('# Assembly: 01.02.2017\n## G\n### V\n*  ', 4),
    'unfinished': ('# Assembly: 01.02.2017\n## G\n### V\n', 3),
}


@pytest.mark.parametrize('case', INVALID.keys())
def test_invalid(case):
    text, line_number = INVALID[case]
    with pytest.raises(SyntaxParseError) as excinfo:
        weightvote.io.collection.loads(text)
    assert excinfo.value.line_number == line_number


def test_empty():
    with pytest.raises(ParseError):
        weightvote.io.collection.loads('\n\n')


def test_title_only():
    collection = weightvote.io.collection.loads('# Assembly: 01.02.2017')
    assert collection.groups == []


def test_evaluate_configured_votings():
    collection = weightvote.io.collection.loads(COLLECTION_TEXT)
    budget = collection.groups[0]
    fund = budget.median_votings[0]
    ballots = [MedianBallot(3, 120050), MedianBallot(2, 50000)]
    fund.validator().validate_all(ballots)
    with pytest.raises(weightvote.vote.VoteMagnitudeError):
        fund.validator().validate(MedianBallot(1, 120051))
    assert fund.evaluator().evaluate(ballots).value == 120050
    fund.percent_required = 0.75
    assert fund.evaluator().evaluate(ballots).value == 50000

    party = budget.schulze_votings[0]
    ballots = [SchulzeBallot(2, [0, 1, 2]), SchulzeBallot(1, [1, 0, 2])]
    party.validator().validate_all(ballots)
    evaluator = party.evaluator(n_workers=2)
    assert isinstance(evaluator, weightvote.evaluate.SchulzeEvaluator)
    result = evaluator.evaluate(ballots, party.n_options)
    assert result.winners() == (0,)
