from __future__ import annotations
import logging
from typing import BinaryIO, Iterator, TextIO

from ..io import ByteSource, open_source
from .model import Bytes, Config, Lines, ReadMode, SourceReadError, SourceResult
from .util import decode_lossy, format_header

_logger = logging.getLogger(__name__)


def read_lines(source: ByteSource, count: int) -> Iterator[bytes]:
    """Yield up to ``count`` lines, each with its terminator if it had one.

    Stops quietly at end of source; never asks for a line past ``count``.
    """
    for _ in range(count):
        line = source.readline()
        if not line:
            return
        yield line


def read_bytes(source: ByteSource, count: int) -> bytes:
    """Read exactly ``count`` bytes, or everything up to end of source if shorter."""
    buf = bytearray()
    while len(buf) < count:
        # only ask for what is still missing so the source is never over-read
        chunk = source.read(count - len(buf))
        if not chunk:
            break
        buf.extend(chunk)
    return bytes(buf)


def _write_text(out: BinaryIO, text: str) -> None:
    # argv may smuggle undecodable file names through as surrogates
    out.write(text.encode("utf-8", errors="surrogateescape"))


def print_source(source: ByteSource, mode: ReadMode, out: BinaryIO) -> int:
    """Write the truncated content of one source to ``out``.

    Lines go out one at a time, byte for byte. A byte window is decoded
    lossily and written in a single call. Returns the number of bytes taken
    from the source.
    """
    start = source.bytes_read
    if isinstance(mode, Lines):
        for line in read_lines(source, mode.count):
            out.write(line)
    elif isinstance(mode, Bytes):
        _write_text(out, decode_lossy(read_bytes(source, mode.count)))
    else:
        raise TypeError(f"Unknown read mode: {mode!r}")
    return source.bytes_read - start


def run(config: Config, out: BinaryIO, err: TextIO) -> list[SourceResult]:
    """Print the head of every source in ``config.files``, in order.

    A source that cannot be opened is reported on ``err`` as ``name: reason``
    and skipped. A failure while reading an opened source is fatal and raised
    as SourceReadError.
    """
    results: list[SourceResult] = []
    show_headers = len(config.files) > 1

    for index, name in enumerate(config.files):
        try:
            source = open_source(name)
        except OSError as e:
            reason = e.strerror or str(e)
            err.write(f"{name}: {reason}\n")
            err.flush()
            _logger.debug("skipping %s: %s", name, reason)
            results.append(SourceResult(name=name, success=False, error=reason, bytes_read=0))
            continue

        with source:
            if show_headers:
                _write_text(out, format_header(name, first=index == 0))
            try:
                taken = print_source(source, config.mode, out)
            except BrokenPipeError:
                raise
            except OSError as e:
                raise SourceReadError(name, e.strerror or str(e)) from e

        results.append(SourceResult(name=name, success=True, error=None, bytes_read=taken))

    return results
