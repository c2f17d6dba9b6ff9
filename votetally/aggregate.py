'''Grouping of vote records into candidate totals and state tables.

Two aggregations are provided:

-   :func:`aggregate` sums votes per candidate, optionally within a single
    jurisdiction, and ranks the candidates by their totals.
-   :func:`build_state_table` tallies, for every jurisdiction of the fixed
    table in :mod:`votetally.jurisdiction`, the votes of one candidate
    against all votes cast there.

Both are pure functions of the records they receive.
'''

from __future__ import annotations

import dataclasses
import logging
from typing import Dict, Iterable, Iterator, List, Optional, Tuple

import votetally.jurisdiction
import votetally.util
from votetally.jurisdiction import JURISDICTIONS
from votetally.persist import simple_serialization
from votetally.record import CandidateTotal, VoteRecord

logger = logging.getLogger(__name__)


def aggregate(records: Iterable[VoteRecord],
              jurisdiction: Optional[str] = None,
              ) -> List[CandidateTotal]:
    '''Sum votes per candidate and rank the candidates.

    Candidates are grouped by their exact (case-sensitive) name. Where one
    name appears under more than one party label, the first label seen is
    kept and the votes are still merged.

    :param records: Vote records to aggregate.
    :param jurisdiction: If given, only records from this jurisdiction are
        counted. The comparison ignores case.
    :returns: Candidate totals sorted by votes, highest first. Candidates
        with equal totals are listed in order of their first record.
    '''
    totals: Dict[str, CandidateTotal] = {}
    for record in records:
        if jurisdiction is not None and not votetally.util.same_name(
            record.jurisdiction, jurisdiction
        ):
            continue
        total = totals.get(record.candidate)
        if total is None:
            total = totals[record.candidate] = CandidateTotal(
                record.candidate, record.party
            )
        elif total.party != record.party:
            logger.debug('%s also listed for %s, counting under %s',
                         record.candidate, record.party, total.party)
        total.votes += record.votes
    return votetally.util.sorted_descending(totals.values())


def resolve_candidate(records: Iterable[VoteRecord], search_term: str) -> str:
    '''Find the full name of the candidate matching the search term.

    :param records: Vote records to search, in order.
    :param search_term: A case-insensitive fragment of the candidate name.
    :returns: The name of the first record whose candidate name contains
        the term, or an empty string if none does (or the term is empty).
    '''
    for record in records:
        if votetally.util.matches_term(record.candidate, search_term):
            return record.candidate
    return ''


@simple_serialization
@dataclasses.dataclass
class JurisdictionTally:
    '''Votes of one candidate against all votes in a jurisdiction.

    :param jurisdiction: Canonical jurisdiction name.
    :param candidate_votes: Votes received by the tallied candidate.
    :param total_votes: Votes received by all candidates.
    '''
    jurisdiction: str
    candidate_votes: int = 0
    total_votes: int = 0

    serialize_extra = ('percentage', )

    @property
    def percentage(self) -> float:
        '''Candidate's share of the jurisdiction's votes, in percent.'''
        return votetally.util.percentage(
            self.candidate_votes, self.total_votes
        )


@simple_serialization
class StateTable:
    '''Per-jurisdiction tallies for one candidate, in canonical order.

    Iterating yields one :class:`JurisdictionTally` for each of the
    jurisdictions in :data:`votetally.jurisdiction.JURISDICTIONS`,
    including those without any records.

    :param candidate: The tallied candidate's name; empty if the candidate
        could not be resolved.
    :param tallies: The tallies, one per canonical jurisdiction.
    :param unrecognized: Jurisdiction names found in the records but not in
        the canonical table; their votes are left out of the tallies.
    '''
    def __init__(self,
                 candidate: str,
                 tallies: List[JurisdictionTally],
                 unrecognized: Tuple[str, ...] = (),
                 ):
        self.candidate = candidate
        self.tallies = tallies
        self.unrecognized = unrecognized

    def __iter__(self) -> Iterator[JurisdictionTally]:
        return iter(self.tallies)

    def __len__(self) -> int:
        return len(self.tallies)

    def __getitem__(self, jurisdiction: str) -> JurisdictionTally:
        index = votetally.jurisdiction.index_of(jurisdiction)
        if index is None:
            raise KeyError(jurisdiction)
        return self.tallies[index]


def build_state_table(records: Iterable[VoteRecord],
                      candidate: str,
                      ) -> StateTable:
    '''Tally the candidate's votes against total votes in each jurisdiction.

    Records are matched to jurisdictions by exact name. Records whose
    jurisdiction is not in the canonical table are skipped; their names are
    reported in the table's ``unrecognized`` attribute.

    :param records: Vote records to tally.
    :param candidate: Exact name of the candidate, as resolved by
        :func:`resolve_candidate`. With an empty name, all candidate vote
        counts stay at zero.
    '''
    tallies = [JurisdictionTally(name) for name in JURISDICTIONS]
    unrecognized: Dict[str, None] = {}
    for record in records:
        index = votetally.jurisdiction.index_of(record.jurisdiction)
        if index is None:
            unrecognized[record.jurisdiction] = None
            continue
        tally = tallies[index]
        if candidate and record.candidate == candidate:
            tally.candidate_votes += record.votes
        tally.total_votes += record.votes
    if unrecognized:
        logger.warning('skipping records from unrecognized jurisdictions: %s',
                       ', '.join(repr(name) for name in unrecognized))
    return StateTable(candidate, tallies, tuple(unrecognized))
