"""Shared functionality for vote record file I/O. Internal."""

from __future__ import annotations

import os
from typing import Callable, Iterable, TextIO, Tuple, Union

from votetally.record import RecordStore


class NotSupportedInFormat(Exception):
    """Signals that the given value cannot be written in the I/O format."""

    FORMAT: str = NotImplemented

    def __init__(self, what: str):
        super().__init__(f'{what} not supported by {self.FORMAT}')


class LoadError(Exception):
    """Vote records could not be loaded."""
    pass


class SourceUnavailableError(LoadError):
    """The input source could not be opened.

    :param source: Path or other description of the source.
    :param reason: Description of the underlying failure.
    """
    def __init__(self, source: str, reason: str = ''):
        self.source = source
        message = f'cannot open vote records from {source}'
        if reason:
            message += f': {reason}'
        super().__init__(message)


class MalformedRecordError(LoadError):
    """An input line is not a valid vote record.

    :param line_no: 1-based number of the offending line.
    :param line: The offending line, without its terminator.
    :param reason: What is wrong with the line.
    """
    def __init__(self, line_no: int, line: str, reason: str):
        self.line_no = line_no
        self.line = line
        super().__init__(f'line {line_no}: {reason}: {line!r}')


def loaders(line_loader: Callable[..., RecordStore]
            ) -> Tuple[
                Callable[..., RecordStore],
                Callable[..., RecordStore],
                Callable[..., RecordStore],
            ]:
    """Create load(), loads() and load_path() from an iterating function."""

    def load(file: TextIO, **kwargs) -> RecordStore:
        return line_loader(file, **kwargs)

    def loads(text: str, **kwargs) -> RecordStore:
        return line_loader(iter(text.split('\n')), **kwargs)

    def load_path(path: Union[str, os.PathLike],
                  encoding: str = 'utf8',
                  **kwargs) -> RecordStore:
        try:
            infile = open(path, encoding=encoding)
        except OSError as e:
            raise SourceUnavailableError(
                os.fspath(path), e.strerror or str(e)
            ) from e
        with infile:
            return line_loader(infile, **kwargs)

    return load, loads, load_path


def dumpers(line_dumper: Callable[..., Iterable[str]]
            ) -> Tuple[Callable[..., None], Callable[..., str]]:
    """Create dump() and dumps() functions from a line generator function."""

    def dump(file: TextIO, *args, **kwargs) -> None:
        for line in line_dumper(*args, **kwargs):
            if not line.endswith('\n'):
                line += '\n'
            file.write(line)

    def dumps(*args, **kwargs) -> str:
        return ''.join(
            line + ('' if line.endswith('\n') else '\n')
            for line in line_dumper(*args, **kwargs)
        )

    return dump, dumps
