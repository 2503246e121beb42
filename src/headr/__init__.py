"""headr - print the first lines or bytes of files and standard input."""

import logging
import sys

from .core.model import (                                             # re-export
    Config, Lines, Bytes, SourceResult,
    HeadrError, InvalidCountError, SourceReadError,
)
from .core.options import parse_count, resolve_config
from .core.runner import run
from .io import open_source

__version__ = "0.1.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())


def head_sync(files=None, *, lines: str | None = None, bytes_: str | None = None,
              out=None, err=None) -> list[SourceResult]:
    """Resolve raw option values and print the head of each source."""
    config = resolve_config(files, lines=lines, bytes_=bytes_)
    return run(
        config,
        out if out is not None else sys.stdout.buffer,
        err if err is not None else sys.stderr,
    )


__all__ = [
    "head_sync", "run", "resolve_config", "parse_count", "open_source",
    "Config", "Lines", "Bytes", "SourceResult",
    "HeadrError", "InvalidCountError", "SourceReadError",
]
