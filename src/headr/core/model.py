from __future__ import annotations
from dataclasses import dataclass, field
from typing import Union


@dataclass(frozen=True, slots=True)
class Lines:
    """Print at most ``count`` lines of each source."""
    count: int

    def __post_init__(self) -> None:
        _check_count(self.count)


@dataclass(frozen=True, slots=True)
class Bytes:
    """Print at most ``count`` bytes of each source."""
    count: int

    def __post_init__(self) -> None:
        _check_count(self.count)


ReadMode = Union[Lines, Bytes]

DEFAULT_LINES = 10


def _check_count(count: int) -> None:
    if isinstance(count, bool) or not isinstance(count, int) or count < 1:
        raise ValueError(f"count must be a positive integer, got {count!r}")


@dataclass(frozen=True, slots=True)
class Config:
    files: tuple[str, ...] = ("-",)
    mode: ReadMode = field(default_factory=lambda: Lines(DEFAULT_LINES))


@dataclass(slots=True)
class SourceResult:
    name: str
    success: bool
    error: str | None
    bytes_read: int            # taken from the source, not written


class HeadrError(RuntimeError):
    """Base class for headr errors."""
    pass


class InvalidCountError(HeadrError, ValueError):
    """Raised when a line or byte count is not a positive integer.

    The message is the rejected text itself so callers can show it verbatim.
    """

    def __init__(self, value: str):
        super().__init__(value)
        self.value = value


class SourceReadError(HeadrError):
    """Raised when reading an already opened source fails."""

    def __init__(self, name: str, reason: str):
        super().__init__(f"{name}: {reason}")
        self.name = name
        self.reason = reason
