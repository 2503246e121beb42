from __future__ import annotations
import logging
import re
import sys
from typing import Iterable

from .model import Bytes, Config, DEFAULT_LINES, InvalidCountError, Lines, ReadMode
from .util import STDIN

_logger = logging.getLogger(__name__)

_COUNT_RE = re.compile(r"\+?[0-9]+")


def parse_count(value: str) -> int:
    """Parse a line/byte count; anything but a positive base-10 integer is rejected.

    The raised InvalidCountError carries ``value`` unchanged as its message.
    """
    if not _COUNT_RE.fullmatch(value):
        raise InvalidCountError(value)
    n = int(value)
    if n < 1 or n > sys.maxsize:
        raise InvalidCountError(value)
    return n


def resolve_mode(lines: str | None = None, bytes_: str | None = None) -> ReadMode:
    """Pick the single active read mode; bytes wins over lines."""
    if lines is None and bytes_ is None:
        return Lines(DEFAULT_LINES)
    if bytes_ is not None:
        return Bytes(parse_count(bytes_))
    return Lines(parse_count(lines))


def resolve_config(
    files: Iterable[str] | None = None,
    lines: str | None = None,
    bytes_: str | None = None,
) -> Config:
    """Turn raw option values into a validated Config."""
    names = tuple(files) if files else ()
    config = Config(files=names or (STDIN,), mode=resolve_mode(lines, bytes_))
    _logger.debug("resolved %d source(s), mode=%r", len(config.files), config.mode)
    return config
