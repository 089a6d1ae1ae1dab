
import sys
import os
import io

import pytest

sys.path.append(os.path.join(os.path.dirname(__file__), '..', '..'))
import weightvote.io.voters
from weightvote.io.core import SyntaxParseError
from weightvote.io.voters import Voter


VOTER_TEXT = '''
* Faculty of Mathematics: 3

* Faculty of Physics: 2
*Student Union: Board: 1
'''


def test_load():
    voters = weightvote.io.voters.loads(VOTER_TEXT)
    assert voters == [
        Voter('Faculty of Mathematics', 3),
        Voter('Faculty of Physics', 2),
        Voter('Student Union: Board', 1),
    ]


def test_load_file():
    voters = weightvote.io.voters.load(io.StringIO(VOTER_TEXT))
    assert len(voters) == 3


def test_roundtrip():
    voters = weightvote.io.voters.loads(VOTER_TEXT)
    text = weightvote.io.voters.dumps(voters)
    assert text.startswith('* Faculty of Mathematics: 3\n')
    assert weightvote.io.voters.loads(text) == voters


@pytest.mark.parametrize(('text', 'line_number'), [
    ('Faculty: 3', 1),
    ('* Faculty: 3\n\n* Faculty 3', 3),
    ('* Faculty: three', 1),
    ('* : 3', 1),
    ('* ' + 'x' * 151 + ': 3', 1),
])
def test_invalid(text, line_number):
    with pytest.raises(SyntaxParseError) as excinfo:
        weightvote.io.voters.loads(text)
    assert excinfo.value.line_number == line_number
    assert str(excinfo.value).startswith(f'Error in line {line_number}: ')
