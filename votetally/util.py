'''Various utility functions for other modules of votetally.

There should normally be no need to use these functions directly.
'''

import math
import operator
from fractions import Fraction
from numbers import Rational
from typing import Any, Callable, Iterable, List, TypeVar

T = TypeVar('T')


def matches_term(value: str, term: str) -> bool:
    '''Case-insensitive substring test used by all search queries.

    An empty term matches nothing; whitespace is matched like any text.
    '''
    if not term:
        return False
    return term.upper() in value.upper()


def same_name(name1: str, name2: str) -> bool:
    '''Case-insensitive exact comparison of two names.'''
    return name1.upper() == name2.upper()


def round_half_up(value: Rational) -> int:
    '''Round a non-negative rational number, halves away from zero.

    Built-in :func:`round` rounds halves to even, which would give 0 bars
    for exactly half a unit.
    '''
    value = Fraction(value)
    if value < 0:
        return -round_half_up(-value)
    return math.floor(value + Fraction(1, 2))


def percentage(part: int, whole: int) -> float:
    '''Return part as a percentage of whole, or zero if whole is zero.'''
    if whole > 0:
        return (100.0 * part) / whole
    return 0.0


def sorted_descending(items: Iterable[T],
                      key: Callable[[T], Any] = operator.attrgetter('votes'),
                      ) -> List[T]:
    '''Return items sorted by key, largest first.

    The sort is stable, so items with equal keys stay in input order.
    '''
    return sorted(items, key=key, reverse=True)
