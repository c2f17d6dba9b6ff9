import sys
import os
from fractions import Fraction

import pytest

sys.path.append(os.path.join(os.path.dirname(__file__), '..'))
import votetally.util


@pytest.mark.parametrize('value, rounded', [
    (0, 0),
    (Fraction(1, 2), 1),
    (Fraction(3, 2), 2),
    (Fraction(5, 2), 3),
    (Fraction(2, 5), 0),
    (Fraction(749469, 150000), 5),
    (Fraction(-1, 2), -1),
    (7, 7),
])
def test_round_half_up(value, rounded):
    assert votetally.util.round_half_up(value) == rounded


@pytest.mark.parametrize('value, term, matches', [
    ('Cook', 'cook', True),
    ('Cook', 'CO', True),
    ('Cook', 'ok', True),
    ('Cook', 'Cook County', False),
    ('Cook', '', False),
    ('Cook', '  ', False),
    ('District of Columbia', ' ', True),
])
def test_matches_term(value, term, matches):
    assert votetally.util.matches_term(value, term) == matches


def test_percentage():
    assert votetally.util.percentage(150, 180) == pytest.approx(83.333, abs=1e-3)
    assert votetally.util.percentage(0, 0) == 0.0
    assert votetally.util.percentage(5, 5) == 100.0


def test_sorted_descending_stable():
    items = [('A', 1), ('B', 3), ('C', 1), ('D', 3)]
    assert votetally.util.sorted_descending(
        items, key=lambda item: item[1]
    ) == [('B', 3), ('D', 3), ('A', 1), ('C', 1)]
