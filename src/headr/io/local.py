"""Local file and standard input byte sources."""

import errno
import logging
import os
import sys
from pathlib import Path
from typing import BinaryIO, Union

_logger = logging.getLogger(__name__)


class LocalByteSource:
    """Buffered byte source over a local path or an already open binary stream."""

    def __init__(self, source: Union[Path, str, BinaryIO], name: str | None = None):
        self.bytes_read = 0
        self._file = None
        self._should_close_file = False

        if hasattr(source, 'read'):
            # Borrowed stream (stdin); the owner closes it
            self._file = source
            self.name = name or getattr(source, 'name', '<stream>')
        else:
            self.name = name or str(source)
            # open() accepts a directory on some platforms and fails on first read
            if os.path.isdir(source):
                raise IsADirectoryError(errno.EISDIR, os.strerror(errno.EISDIR), str(source))
            self._file = open(source, 'rb')
            self._should_close_file = True
        _logger.debug("opened %s", self.name)

    @property
    def closed(self) -> bool:
        return self._file is None

    def readline(self) -> bytes:
        """Return the next line including its terminator, or b"" at end of source."""
        line = self._file.readline()
        self.bytes_read += len(line)
        return line

    def read(self, size: int) -> bytes:
        """Return at most `size` bytes; fewer only when the stream has less ready."""
        if size < 0:
            raise ValueError("Size cannot be negative")
        data = self._file.read(size)
        self.bytes_read += len(data)
        return data

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()

    def close(self):
        """Close the file if we opened it."""
        if self._file is None:
            return
        if self._should_close_file:
            self._file.close()
        self._file = None
        _logger.debug("closed %s after %d bytes", self.name, self.bytes_read)


def _stdin_buffer() -> BinaryIO:
    # Looked up at call time so swapped-in streams (test runners) are honoured
    return getattr(sys.stdin, 'buffer', sys.stdin)


def open_local_source(source: Union[Path, str, BinaryIO]) -> LocalByteSource:
    """Create a byte source for a local path or binary stream."""
    return LocalByteSource(source)


def open_stdin_source() -> LocalByteSource:
    """Create a byte source over standard input; closing it leaves stdin open."""
    return LocalByteSource(_stdin_buffer(), name="-")
