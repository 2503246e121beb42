from __future__ import annotations

STDIN = "-"

# U+FFFD, what the "replace" error handler substitutes for undecodable input
PLACEHOLDER = "�"


def decode_lossy(data: bytes, encoding: str = "utf-8") -> str:
    """Decode ``data`` for display, replacing invalid sequences with PLACEHOLDER.

    The input is decoded exactly as read, so a multi-byte character cut at a
    byte limit shows up as a placeholder.
    """
    return data.decode(encoding, errors="replace")


def format_header(name: str, *, first: bool) -> str:
    """Return the ``==> name <==`` banner printed between multiple sources."""
    prefix = "" if first else "\n"
    return f"{prefix}==> {name} <==\n"
