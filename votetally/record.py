'''Vote records and the read-only store that holds them.

A :class:`VoteRecord` is one line of the input data: the votes a single
candidate received in one county (sub-jurisdiction) of one state
(jurisdiction). The records are loaded once into a :class:`RecordStore`
and never modified afterwards, so any number of queries can share it.
'''

from __future__ import annotations

import dataclasses
from typing import Iterable, Iterator, List, Sequence, Union, overload

from votetally.persist import simple_serialization


@simple_serialization
@dataclasses.dataclass(frozen=True)
class VoteRecord:
    '''Votes cast for one candidate in one sub-jurisdiction.

    :param jurisdiction: State (or district) name, as stored in the input;
        normally upper case.
    :param sub_jurisdiction: County or county-equivalent locality.
    :param candidate: Candidate name.
    :param party: Party label of the candidate.
    :param votes: Number of votes; assumed non-negative, not validated.
    '''
    jurisdiction: str
    sub_jurisdiction: str
    candidate: str
    party: str
    votes: int


@simple_serialization
@dataclasses.dataclass
class CandidateTotal:
    '''Votes summed for one candidate over a set of records.

    :param candidate: Candidate name, the grouping key.
    :param party: Party label of the first record seen for the candidate.
    :param votes: Summed votes.
    '''
    candidate: str
    party: str
    votes: int = 0


class RecordStore(Sequence[VoteRecord]):
    '''An immutable, ordered collection of vote records.

    Behaves as a read-only sequence; the input order of the records is
    preserved.

    :param records: Vote records in input order.
    '''
    def __init__(self, records: Iterable[VoteRecord] = ()):
        self._records = tuple(records)

    @overload
    def __getitem__(self, index: int) -> VoteRecord: ...

    @overload
    def __getitem__(self, index: slice) -> RecordStore: ...

    def __getitem__(self, index: Union[int, slice]
                    ) -> Union[VoteRecord, RecordStore]:
        if isinstance(index, slice):
            return RecordStore(self._records[index])
        return self._records[index]

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[VoteRecord]:
        return iter(self._records)

    def __eq__(self, other) -> bool:
        if isinstance(other, RecordStore):
            return self._records == other._records
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._records)

    def __repr__(self) -> str:
        return f'{self.__class__.__name__}(<{len(self)} records>)'

    @property
    def total_votes(self) -> int:
        '''Sum of votes over all records.'''
        return sum(record.votes for record in self._records)

    def jurisdictions(self) -> List[str]:
        '''Return distinct jurisdiction names in order of first appearance.'''
        return list(dict.fromkeys(
            record.jurisdiction for record in self._records
        ))
