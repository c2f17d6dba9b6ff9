import sys
import os

sys.path.append(os.path.join(os.path.dirname(__file__), '..'))
import votetally.format
import votetally.io.csv
import votetally.query

SAMPLE = votetally.io.csv.load_path(os.path.join(
    os.path.dirname(__file__), 'io', 'data', 'president_2016.csv'
))


def test_overview():
    lines = list(votetally.format.overview_lines(
        votetally.query.overview(SAMPLE)
    ))
    assert lines == [
        'Number of election records: 16',
        'Total number of votes recorded: 5279964',
    ]


def test_national():
    lines = list(votetally.format.national_lines(
        votetally.query.national_results(SAMPLE)
    ))
    assert len(lines) == 3
    assert lines[0] == (
        'Hillary Clinton' + ' ' * 5 + 'Democrat' + ' ' * 10 + '3604447'
    )
    assert all(len(line) == 45 for line in lines)


def test_state():
    lines = list(votetally.format.state_lines(
        votetally.query.state_results(SAMPLE, 'ohio')
    ))
    assert lines == [
        'Hillary Clinton     |||||',
        'Donald Trump        |||',
        'Gary Johnson        ',
    ]


def test_candidate():
    lines = list(votetally.format.candidate_lines(
        votetally.query.candidate_results(SAMPLE, 'trump')
    ))
    assert len(lines) == 52
    assert lines[0] == 'ALABAMA' + ' ' * 13 + ' ' * 9 + '0' + ' ' * 9 + '0' \
        + '    0.0%'
    assert lines[34] == 'OHIO' + ' ' * 16 + '    383543' + '   1144567' \
        + '   33.5%'
    assert lines[-1] == 'The best state for Donald Trump is TEXAS'


def test_candidate_not_found():
    lines = list(votetally.format.candidate_lines(
        votetally.query.candidate_results(SAMPLE, 'nobody')
    ))
    assert lines[-1] == 'The best state for  is '


def test_county():
    lines = list(votetally.format.county_lines(
        votetally.query.county_search(SAMPLE, 'cook')
    ))
    assert lines == [
        'Cook, ILLINOIS'.ljust(40) + 'Hillary Clinton'.ljust(20)
        + '1611946'.rjust(10),
        'Cook, ILLINOIS'.ljust(40) + 'Donald Trump'.ljust(20)
        + '453287'.rjust(10),
    ]


def test_empty_results():
    assert list(votetally.format.national_lines([])) == []
    assert list(votetally.format.county_lines([])) == []
