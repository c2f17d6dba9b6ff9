import sys
import os
import json

import pytest

sys.path.append(os.path.join(os.path.dirname(__file__), '..'))
import votetally.io.csv
from votetally.__main__ import argparser, main, run_menu, run_query
from votetally.query import QueryEngine

SAMPLE_PATH = os.path.join(
    os.path.dirname(__file__), 'io', 'data', 'president_2016.csv'
)


def make_ask(answers):
    answers = iter(answers)
    prompts = []

    def ask(prompt):
        prompts.append(prompt)
        try:
            return next(answers)
        except StopIteration:
            raise EOFError
    ask.prompts = prompts
    return ask


@pytest.fixture
def engine():
    return QueryEngine(votetally.io.csv.load_path(SAMPLE_PATH))


def test_args():
    args = argparser.parse_args(['-i', 'data.csv', '-q', 'state', '-t', 'ohio'])
    assert vars(args) == {
        'input_file': 'data.csv',
        'query': 'state',
        'term': 'ohio',
        'as_json': False,
        'bar_unit': 150000,
        'verbose': False,
        'quiet': False,
    }


def test_args_invalid_query():
    with pytest.raises(SystemExit):
        argparser.parse_args(['-q', 'president'])


def test_single_query(capsys):
    assert main(input_file=SAMPLE_PATH, query='overview') == 0
    out = capsys.readouterr().out
    assert 'Number of election records: 16' in out
    assert 'Total number of votes recorded: 5279964' in out


def test_single_query_json(capsys):
    status = main(input_file=SAMPLE_PATH, query='county', term='lubbock',
                  as_json=True)
    assert status == 0
    found = json.loads(capsys.readouterr().out)
    assert [rec['candidate'] for rec in found] == [
        'Hillary Clinton', 'Donald Trump',
    ]


def test_bar_unit(capsys):
    main(input_file=SAMPLE_PATH, query='state', term='OHIO', bar_unit=100000)
    out = capsys.readouterr().out
    assert 'Hillary Clinton     |||||||\n' in out


def test_invalid_bar_unit():
    assert main(input_file=SAMPLE_PATH, query='state', term='OHIO',
                bar_unit=0) == 2


def test_missing_file(tmp_path, caplog):
    assert main(input_file=str(tmp_path / 'missing.csv'),
                query='overview') == 1
    assert 'cannot open' in caplog.text


def test_malformed_file(tmp_path, caplog):
    path = tmp_path / 'bad.csv'
    path.write_text('OHIO,Cuyahoga,A,PartyX,100\nOHIO,Franklin,A,PartyX,lots\n')
    assert main(input_file=str(path), query='overview') == 1
    assert 'line 2' in caplog.text


def test_empty_file_warns(tmp_path, capsys):
    path = tmp_path / 'empty.csv'
    path.write_text('')
    with pytest.warns(UserWarning, match='no vote records'):
        assert main(input_file=str(path), query='national') == 0
    assert capsys.readouterr().out == ''


def test_file_prompt(monkeypatch, capsys):
    monkeypatch.setattr('builtins.input', make_ask([SAMPLE_PATH]))
    assert main(query='overview') == 0
    assert 'records: 16' in capsys.readouterr().out


def test_file_prompt_eof(monkeypatch):
    monkeypatch.setattr('builtins.input', make_ask([]))
    assert main(query='overview') == 0


def test_query_prompts_for_term(engine, capsys):
    ask = make_ask(['trump'])
    run_query(engine, 'candidate', ask=ask)
    assert ask.prompts == ['Enter candidate: ']
    assert capsys.readouterr().out.endswith(
        'The best state for Donald Trump is TEXAS\n'
    )


def test_unknown_query(engine):
    with pytest.raises(ValueError):
        run_query(engine, 'senate')


def test_menu(engine, capsys):
    ask = make_ask(['1', 'abc', '9', '3', 'texas', '5', 'xyz123', '6', '1'])
    run_menu(engine, ask=ask)
    out = capsys.readouterr().out
    assert out.count('Select a menu option:') == 6
    assert '  6. Exit' in out
    assert 'Number of election records: 16' in out
    assert 'Donald Trump        ||||\n' in out
    assert ask.prompts == [
        'Your choice: ', 'Your choice: ', 'Your choice: ', 'Your choice: ',
        'Enter state: ', 'Your choice: ', 'Enter county: ', 'Your choice: ',
    ]


def test_menu_ends_on_eof(engine, capsys):
    run_menu(engine, ask=make_ask(['2']))
    out = capsys.readouterr().out
    assert out.count('Select a menu option:') == 2
    assert 'Gary Johnson' in out


def test_menu_eof_at_term_prompt(engine):
    run_menu(engine, ask=make_ask(['4']))
