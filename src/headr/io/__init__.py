"""I/O layer for headr - uniform byte sources over files and stdin."""

# Re-export these for import convenience
from .base import ByteSource
from .local import LocalByteSource, open_local_source, open_stdin_source
from ..core.util import STDIN


def open_source(source) -> LocalByteSource:
    """Factory function to create the appropriate ByteSource for a source name."""
    if hasattr(source, 'read'):  # BinaryIO
        return open_local_source(source)

    if str(source) == STDIN:
        return open_stdin_source()
    return open_local_source(source)


__all__ = [
    "ByteSource", "LocalByteSource",
    "open_source", "open_local_source", "open_stdin_source",
]
