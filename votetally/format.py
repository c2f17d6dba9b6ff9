'''Text rendering of query results.

Every function yields the lines of a fixed-width text table, without line
terminators. Column widths follow the classic console report: names are
left-aligned, numbers right-aligned.
'''

from typing import Iterable, List

from votetally.query import CandidateResults, Overview, StateResult
from votetally.record import CandidateTotal, VoteRecord

BAR_CHAR: str = '|'


def overview_lines(overview: Overview) -> Iterable[str]:
    yield f'Number of election records: {overview.n_records}'
    yield f'Total number of votes recorded: {overview.total_votes}'


def national_lines(totals: List[CandidateTotal]) -> Iterable[str]:
    for total in totals:
        yield f'{total.candidate:<20}{total.party:<15}{total.votes:>10}'


def state_lines(results: List[StateResult]) -> Iterable[str]:
    for result in results:
        yield f'{result.total.candidate:<20}{BAR_CHAR * result.bars}'


def candidate_lines(results: CandidateResults) -> Iterable[str]:
    '''Yield the state table and the best state of a candidate.

    The closing line names the best state; it is left blank after "is" if
    the candidate got no votes anywhere.
    '''
    for tally in results.table:
        yield (
            f'{tally.jurisdiction:<20}'
            f'{tally.candidate_votes:>10}'
            f'{tally.total_votes:>10}'
            f'{tally.percentage:>7.1f}%'
        )
    best = results.best_jurisdiction or ''
    yield f'The best state for {results.candidate} is {best}'


def county_lines(records: List[VoteRecord]) -> Iterable[str]:
    for record in records:
        place = f'{record.sub_jurisdiction}, {record.jurisdiction}'
        yield f'{place:<40}{record.candidate:<20}{record.votes:>10}'
