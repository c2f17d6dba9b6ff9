"""A commandline tool to explore county-level election results.

Loads vote records from a comma-delimited file and answers queries about
them: a data overview, national and state results, state-by-state results
of a candidate, and a county search. Without --query, an interactive menu
is shown.
"""

import argparse
import logging
import sys
import warnings
from typing import Callable, Dict, Iterable, Optional, Tuple

import votetally.format
import votetally.io.csv
import votetally.persist
from votetally.io.core import LoadError
from votetally.query import BAR_UNIT, QueryEngine

logger = logging.getLogger('votetally')

argparser = argparse.ArgumentParser(
    prog='votetally',
    description=__doc__,
    formatter_class=argparse.ArgumentDefaultsHelpFormatter,
)
argparser.add_argument(
    '-i', '--input-file',
    help='file to load vote records from; asked for if not given',
)
argparser.add_argument(
    '-q', '--query',
    choices=['overview', 'national', 'state', 'candidate', 'county'],
    help='run a single query and exit instead of showing the menu',
)
argparser.add_argument(
    '-t', '--term',
    help=(
        'state name, candidate name or county name fragment for the'
        ' state, candidate and county queries; asked for if not given'
    ),
)
argparser.add_argument(
    '-j', '--json',
    action='store_true',
    dest='as_json',
    help='output query results as JSON instead of text tables',
)
argparser.add_argument(
    '-b', '--bar-unit',
    type=int,
    default=BAR_UNIT,
    help='number of votes per bar in state results',
)
argparser.add_argument(
    '-v', '--verbose',
    action='store_true',
    help='show all log messages',
)
argparser.add_argument(
    '--quiet',
    action='store_true',
    help='show only warnings and errors',
)

MENU: Tuple[str, ...] = (
    'Data overview',
    'National results',
    'State results',
    'Candidate results',
    'County search',
    'Exit',
)
MENU_QUERIES: Dict[int, str] = {
    1: 'overview',
    2: 'national',
    3: 'state',
    4: 'candidate',
    5: 'county',
}
EXIT_CHOICE: int = 6
TERM_PROMPTS: Dict[str, str] = {
    'state': 'Enter state: ',
    'candidate': 'Enter candidate: ',
    'county': 'Enter county: ',
}


def main(input_file: Optional[str] = None,
         query: Optional[str] = None,
         term: Optional[str] = None,
         as_json: bool = False,
         bar_unit: int = BAR_UNIT,
         verbose: bool = False,
         quiet: bool = False,
         ) -> int:
    logging.basicConfig(
        level=(
            logging.DEBUG if verbose
            else (logging.WARNING if quiet else logging.INFO)
        ),
        format='%(levelname)-10s %(message)s'
    )
    if bar_unit <= 0:
        logger.error('bar unit must be positive, got %d', bar_unit)
        return 2
    try:
        if input_file is None:
            input_file = input('Enter file to use: ').strip()
        store = votetally.io.csv.load_path(input_file)
    except EOFError:
        return 0
    except LoadError as e:
        logger.error('%s', e)
        return 1
    if not store:
        warnings.warn('no vote records loaded: all results will be empty')
    engine = QueryEngine(store)
    if query is None:
        run_menu(engine, as_json=as_json, bar_unit=bar_unit)
    else:
        try:
            run_query(engine, query, term,
                      as_json=as_json, bar_unit=bar_unit)
        except EOFError:
            pass
    return 0


def run_menu(engine: QueryEngine,
             ask: Callable[[str], str] = input,
             as_json: bool = False,
             bar_unit: int = BAR_UNIT,
             ) -> None:
    """Show the numbered query menu until the user exits."""
    while True:
        print()
        print('Select a menu option:')
        for i, label in enumerate(MENU, start=1):
            print(f'  {i}. {label}')
        try:
            answer = ask('Your choice: ').strip()
        except EOFError:
            return
        try:
            choice = int(answer)
        except ValueError:
            logger.debug('ignoring non-numeric menu choice %r', answer)
            continue
        if choice == EXIT_CHOICE:
            return
        elif choice in MENU_QUERIES:
            try:
                run_query(engine, MENU_QUERIES[choice], None, ask=ask,
                          as_json=as_json, bar_unit=bar_unit)
            except EOFError:
                return
        else:
            logger.debug('ignoring unknown menu choice %d', choice)


def run_query(engine: QueryEngine,
              query: str,
              term: Optional[str] = None,
              ask: Callable[[str], str] = input,
              as_json: bool = False,
              bar_unit: int = BAR_UNIT,
              ) -> None:
    """Run a single named query and print its results.

    :param engine: Query engine wrapping the loaded records.
    :param query: One of the query names accepted by the --query option.
    :param term: Search term for the queries that need one; asked for
        if None.
    :param ask: Function that prompts the user and returns the answer.
    """
    if query in TERM_PROMPTS and term is None:
        term = ask(TERM_PROMPTS[query])
    if query == 'overview':
        result = engine.overview()
        lines = votetally.format.overview_lines(result)
    elif query == 'national':
        result = engine.national_results()
        lines = votetally.format.national_lines(result)
    elif query == 'state':
        result = engine.state_results(term, bar_unit=bar_unit)
        lines = votetally.format.state_lines(result)
    elif query == 'candidate':
        result = engine.candidate_results(term)
        lines = votetally.format.candidate_lines(result)
    elif query == 'county':
        result = engine.county_search(term)
        lines = votetally.format.county_lines(result)
    else:
        raise ValueError(f'unknown query: {query!r}, available: '
                         + ', '.join(MENU_QUERIES.values()))
    if as_json:
        print(votetally.persist.to_json(result, indent=2))
    else:
        show_lines(lines)


def show_lines(lines: Iterable[str]) -> None:
    for line in lines:
        print(line)


def run() -> None:
    args = argparser.parse_args()
    sys.exit(main(**vars(args)))


if __name__ == '__main__':
    run()
