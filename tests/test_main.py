
import sys
import os
import io
import json

import pytest

sys.path.append(os.path.join(os.path.dirname(__file__), '..'))
import weightvote.__main__
import weightvote.vote


SCHULZE_DOC = {
    'procedure': 'schulze',
    'name': 'Chair',
    'options': ['Alice', 'Bob', 'No'],
    'ballots': [
        {'weight': 3, 'ranking': [0, 1, 2]},
        {'weight': 2, 'ranking': [1, 0, 2]},
        {'weight': 1, 'ranking': [2, 2, 0]},
    ],
}

MEDIAN_DOC = {
    'procedure': 'median',
    'percent_required': 0.5,
    'max_value': 1000,
    'ballots': [
        {'weight': 4, 'value': 200},
        {'weight': 3, 'value': 1000},
        {'weight': 2, 'value': 700},
        {'weight': 2, 'value': 500},
    ],
}


def run(document, capsys, **kwargs):
    weightvote.__main__.main(io.StringIO(json.dumps(document)), **kwargs)
    return capsys.readouterr().out


def test_median(capsys):
    out = run(MEDIAN_DOC, capsys, quiet=True)
    assert 'Votes required: more than 5' in out
    assert 'Accepted value: 500' in out


def test_schulze(capsys):
    out = run(SCHULZE_DOC, capsys, workers=2)
    assert 'Evaluating a Schulze voting "Chair"' in out
    assert 'total weight 6' in out
    ranking_lines = out.split('Ranking:')[1].strip().splitlines()
    assert ranking_lines[0].split() == ['1', 'Alice']
    assert 'accepted' in out


def test_json_output(capsys):
    out = run(SCHULZE_DOC, capsys, json_output=True, percent_required=0.75)
    result = json.loads(out)
    assert result['class'] == 'weightvote.evaluate.core.SchulzeResult'
    assert result['votes_required'] == 4
    assert result['ranked_groups'][0] == [0]


def test_median_over_max(capsys):
    document = dict(MEDIAN_DOC, max_value=900)
    with pytest.raises(weightvote.vote.VoteMagnitudeError):
        run(document, capsys)


def test_schulze_without_options(capsys):
    document = {k: v for k, v in SCHULZE_DOC.items() if k != 'options'}
    out = run(document, capsys)
    assert 'Ranking:' in out


def test_empty(capsys):
    with pytest.warns(UserWarning):
        out = run({'procedure': 'median', 'ballots': []}, capsys)
    assert out == ''


def test_json_output_median(capsys):
    out = run(MEDIAN_DOC, capsys, json_output=True, quiet=True)
    assert json.loads(out) == {
        'class': 'weightvote.evaluate.core.MedianResult',
        'value': 500,
        'votes_required': 5,
    }


def write_document(tmp_path, document):
    path = tmp_path / 'ballots.json'
    path.write_text(json.dumps(document), encoding='utf8')
    return str(path)


def test_command_json(tmp_path, capsys):
    path = write_document(tmp_path, SCHULZE_DOC)
    weightvote.__main__.command(['-i', path, '--json', '-q'])
    result = json.loads(capsys.readouterr().out)
    assert result['ranked_groups'][0] == [0]


@pytest.mark.parametrize('document', [
    dict(MEDIAN_DOC, max_value=900),
    dict(SCHULZE_DOC, options=['Alice', 'No']),
    dict(SCHULZE_DOC, percent_required='0.5'),
])
def test_command_invalid_input(tmp_path, capsys, document):
    path = write_document(tmp_path, document)
    with pytest.raises(SystemExit) as excinfo:
        weightvote.__main__.command(['-i', path, '-q'])
    assert excinfo.value.code == 1
    err = capsys.readouterr().err
    assert 'error:' in err.strip().splitlines()[-1]
    assert 'Traceback' not in err
