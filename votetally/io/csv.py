"""Read and write headerless comma-delimited vote record files.

Each line of the file holds one vote record as five fields in fixed order::

    OHIO,Cuyahoga,Joe Smith,Democrat,100

that is, jurisdiction, sub-jurisdiction (county), candidate, party and vote
count. There is no header row and no quoting, so the fields themselves
cannot contain commas. Blank lines are ignored.
"""

import logging
from typing import Iterable

import votetally.io.core
from votetally.io.core import MalformedRecordError
from votetally.record import RecordStore, VoteRecord

logger = logging.getLogger(__name__)

DELIMITER: str = ','
N_FIELDS: int = 5


def load_lines(lines: Iterable[str]) -> RecordStore:
    """Parse vote records from lines of text.

    :param lines: Lines of the file, with or without line terminators.
    :raises MalformedRecordError: If a line does not have five fields or its
        vote count is not an integer. Nothing is returned in
        that case, even if other lines were valid.
    """
    records = []
    for line_no, line in enumerate(lines, start=1):
        line = line.rstrip('\r\n')
        if not line.strip():
            continue    # ignore empty lines
        records.append(_parse_record(line, line_no))
    logger.info('loaded %d vote records', len(records))
    return RecordStore(records)


load, loads, load_path = votetally.io.core.loaders(load_lines)


class NotSupportedInCSV(votetally.io.core.NotSupportedInFormat):
    FORMAT = 'delimited vote record file'


def dump_lines(records: Iterable[VoteRecord]) -> Iterable[str]:
    for record in records:
        fields = [
            record.jurisdiction,
            record.sub_jurisdiction,
            record.candidate,
            record.party,
        ]
        for field in fields:
            if DELIMITER in field or '\n' in field:
                raise NotSupportedInCSV(f'delimiter in field {field!r}')
        yield DELIMITER.join(fields + [str(record.votes)])


dump, dumps = votetally.io.core.dumpers(dump_lines)


def _parse_record(line: str, line_no: int) -> VoteRecord:
    fields = line.split(DELIMITER)
    if len(fields) != N_FIELDS:
        raise MalformedRecordError(
            line_no, line, f'expected {N_FIELDS} fields, got {len(fields)}'
        )
    jurisdiction, sub_jurisdiction, candidate, party, votes_str = fields
    return VoteRecord(
        jurisdiction,
        sub_jurisdiction,
        candidate,
        party,
        _parse_votes(votes_str, line, line_no),
    )


def _parse_votes(votes_str: str, line: str, line_no: int) -> int:
    votes_str = votes_str.strip()
    # int() would also accept non-ASCII digits like superscripts
    if not votes_str.isascii():
        raise MalformedRecordError(
            line_no, line, f'invalid vote count {votes_str!r}'
        )
    try:
        return int(votes_str)
    except ValueError as e:
        raise MalformedRecordError(
            line_no, line, f'invalid vote count {votes_str!r}'
        ) from e
