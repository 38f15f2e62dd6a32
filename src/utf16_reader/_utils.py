"""Internal shared utilities for utf16_reader."""

from __future__ import annotations

from utf16_reader.enums import Endianness

#: Default number of bytes requested from the source per ``read()`` call.
DEFAULT_CHUNK_SIZE: int = 8192


def _validate_chunk_size(chunk_size: int) -> None:
    """Raise ValueError if *chunk_size* is not a positive integer."""
    if (
        isinstance(chunk_size, bool)
        or not isinstance(chunk_size, int)
        or chunk_size < 1
    ):
        msg = "chunk_size must be a positive integer"
        raise ValueError(msg)


def _validate_endianness(endianness: Endianness) -> None:
    """Raise ValueError if *endianness* is not an :class:`Endianness` member."""
    if not isinstance(endianness, Endianness):
        msg = f"default_endianness must be an Endianness member, not {endianness!r}"
        raise ValueError(msg)
