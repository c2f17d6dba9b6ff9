'''The five read-only queries answered over a store of vote records.

Each query is available as a method of :class:`QueryEngine`, which wraps a
:class:`votetally.record.RecordStore`, and as a module-level function
taking the store as its first argument. No query modifies the store, so
they can be run repeatedly and in any order.

Searches that find nothing return empty or zero results rather than
raising.
'''

from __future__ import annotations

import dataclasses
import logging
from fractions import Fraction
from typing import Iterable, List, Optional

import votetally.util
from votetally.aggregate import StateTable, aggregate, build_state_table, \
    resolve_candidate
from votetally.persist import simple_serialization
from votetally.record import CandidateTotal, RecordStore, VoteRecord

logger = logging.getLogger(__name__)


BAR_UNIT: int = 150000
'''Number of votes represented by one bar in state results.'''


@simple_serialization
@dataclasses.dataclass(frozen=True)
class Overview:
    '''Size of the loaded data.

    :param n_records: Number of vote records.
    :param total_votes: Sum of votes over all records.
    '''
    n_records: int
    total_votes: int


@simple_serialization
@dataclasses.dataclass(frozen=True)
class StateResult:
    '''A candidate total within a state, with its bar chart length.

    :param total: The candidate's votes in the state.
    :param bars: Number of bars to draw for the candidate.
    '''
    total: CandidateTotal
    bars: int


@simple_serialization
@dataclasses.dataclass(frozen=True)
class CandidateResults:
    '''State-by-state performance of a candidate.

    :param candidate: The resolved candidate name; empty if no candidate
        matched the search.
    :param table: Per-jurisdiction tallies in canonical order.
    :param best_jurisdiction: The jurisdiction with the highest percentage
        for the candidate (the first one on ties), or None if the candidate
        got no votes anywhere.
    :param best_percentage: The candidate's percentage in the best
        jurisdiction.
    '''
    candidate: str
    table: StateTable
    best_jurisdiction: Optional[str] = None
    best_percentage: float = 0.0


def bar_count(votes: int, bar_unit: int = BAR_UNIT) -> int:
    '''Return the number of bars for the votes, rounding halves up.'''
    return votetally.util.round_half_up(Fraction(votes, bar_unit))


class QueryEngine:
    '''Answers aggregate queries about a set of vote records.

    :param records: The records to query. Any iterable is accepted; it is
        stored as a :class:`RecordStore`.
    '''
    def __init__(self, records: Iterable[VoteRecord]):
        if not isinstance(records, RecordStore):
            records = RecordStore(records)
        self.store = records

    def overview(self) -> Overview:
        '''Count the records and their votes.'''
        return Overview(len(self.store), self.store.total_votes)

    def national_results(self) -> List[CandidateTotal]:
        '''Rank all candidates by their votes across all jurisdictions.'''
        return aggregate(self.store)

    def state_results(self,
                      jurisdiction: str,
                      bar_unit: int = BAR_UNIT,
                      ) -> List[StateResult]:
        '''Rank candidates by their votes in a single jurisdiction.

        :param jurisdiction: Jurisdiction name; case is ignored. An unknown
            name produces an empty list.
        :param bar_unit: Number of votes per bar.
        '''
        if bar_unit <= 0:
            raise ValueError(f'bar unit must be positive, got {bar_unit}')
        totals = aggregate(self.store, jurisdiction=jurisdiction)
        if not totals:
            logger.info('no records for jurisdiction %r', jurisdiction)
        return [StateResult(total, bar_count(total.votes, bar_unit))
                for total in totals]

    def candidate_results(self, search_term: str) -> CandidateResults:
        '''Show how a candidate fared in each jurisdiction.

        The candidate is the first one in the records whose name contains
        the search term, ignoring case. The best jurisdiction is the one
        where the candidate's share of votes is strictly highest.

        :param search_term: Fragment of the candidate's name.
        '''
        candidate = resolve_candidate(self.store, search_term)
        if candidate:
            logger.info('search %r resolved to candidate %s',
                        search_term, candidate)
        else:
            logger.info('no candidate matches %r', search_term)
        table = build_state_table(self.store, candidate)
        best_jurisdiction = None
        best_percentage = 0.0
        for tally in table:
            if tally.total_votes > 0 and tally.percentage > best_percentage:
                best_jurisdiction = tally.jurisdiction
                best_percentage = tally.percentage
        return CandidateResults(
            candidate, table, best_jurisdiction, best_percentage
        )

    def county_search(self, search_term: str) -> List[VoteRecord]:
        '''List all records from counties whose name contains the term.

        The match ignores case. Records are returned in input order, one
        per record, without aggregation.

        :param search_term: Fragment of the county name.
        '''
        return [
            record for record in self.store
            if votetally.util.matches_term(record.sub_jurisdiction,
                                           search_term)
        ]


def overview(store: Iterable[VoteRecord]) -> Overview:
    return QueryEngine(store).overview()


def national_results(store: Iterable[VoteRecord]) -> List[CandidateTotal]:
    return QueryEngine(store).national_results()


def state_results(store: Iterable[VoteRecord],
                  jurisdiction: str,
                  bar_unit: int = BAR_UNIT,
                  ) -> List[StateResult]:
    return QueryEngine(store).state_results(jurisdiction, bar_unit)


def candidate_results(store: Iterable[VoteRecord],
                      search_term: str,
                      ) -> CandidateResults:
    return QueryEngine(store).candidate_results(search_term)


def county_search(store: Iterable[VoteRecord],
                  search_term: str,
                  ) -> List[VoteRecord]:
    return QueryEngine(store).county_search(search_term)
