"""Exceptions raised by utf16_reader."""

from __future__ import annotations


class Utf16ReaderError(Exception):
    """Base exception for everything raised while decoding."""


class DecodeError(Utf16ReaderError, ValueError):
    """The byte stream is not well-formed UTF-16."""


class TruncatedInputError(DecodeError):
    """The stream ended between the two bytes of a code unit."""

    def __init__(self, offset: int) -> None:
        self.offset = offset
        super().__init__(
            f"stream ends with a dangling byte at offset {offset} "
            "(odd number of data bytes)"
        )


class InvalidSurrogatePairError(DecodeError):
    """A surrogate code unit is unpaired or paired with the wrong half."""

    def __init__(self, position: int, unit: int | None, reason: str) -> None:
        self.position = position
        self.unit = unit
        super().__init__(f"{reason} at code unit {position}")


class UnderlyingReadError(Utf16ReaderError, OSError):
    """The input source failed while being read."""
