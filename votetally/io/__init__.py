"""Input/output of vote record files.

This subpackage is structured into modules by file format. Currently the
only format is the headerless comma-delimited one in :mod:`votetally.io.csv`.
The load errors shared by all formats live in :mod:`votetally.io.core`.
"""

from votetally.io.core import LoadError, MalformedRecordError, \
    SourceUnavailableError

__all__ = ['LoadError', 'MalformedRecordError', 'SourceUnavailableError']
