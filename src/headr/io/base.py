"""Base protocols and shared types for I/O layer."""

from typing import Protocol, runtime_checkable


@runtime_checkable
class ByteSource(Protocol):
    """Protocol for incrementally readable byte streams."""

    bytes_read: int  # running total

    def readline(self) -> bytes:
        """Return the next line including its terminator, or b"" at end of source."""
        ...

    def read(self, size: int) -> bytes:
        """Return at most `size` bytes; b"" only at end of source."""
        ...

    def close(self) -> None:
        ...
