"""Decode UTF-16 byte streams (either byte order, with or without BOM) to text."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Protocol

from utf16_reader._utils import DEFAULT_CHUNK_SIZE, _validate_chunk_size
from utf16_reader.decoder import Utf16Decoder
from utf16_reader.enums import Endianness
from utf16_reader.errors import (
    DecodeError,
    InvalidSurrogatePairError,
    TruncatedInputError,
    UnderlyingReadError,
    Utf16ReaderError,
)

if TYPE_CHECKING:
    import os

__version__ = "0.2.0"
__all__ = [
    "DecodeError",
    "Endianness",
    "InvalidSurrogatePairError",
    "TruncatedInputError",
    "UnderlyingReadError",
    "Utf16Decoder",
    "Utf16ReaderError",
    "decode",
    "decode_bytes",
    "decode_file",
]


class SupportsRead(Protocol):
    """Any binary stream with a ``read(size)`` method."""

    def read(self, size: int, /) -> bytes: ...


def decode(
    source: SupportsRead,
    *,
    strict: bool = True,
    default_endianness: Endianness = Endianness.BIG,
    chunk_size: int = DEFAULT_CHUNK_SIZE,
) -> str:
    """Read *source* to exhaustion and decode it as UTF-16.

    The stream is consumed *chunk_size* bytes at a time and is never held in
    memory as a whole.  Byte order comes from a leading BOM, falling back to
    *default_endianness*.

    :raises DecodeError: If the stream is not well-formed UTF-16.
    :raises UnderlyingReadError: If reading from *source* fails.
    :raises TypeError: If *source* yields ``str`` instead of bytes.
    """
    _validate_chunk_size(chunk_size)
    decoder = Utf16Decoder(strict=strict, default_endianness=default_endianness)
    while True:
        try:
            chunk = source.read(chunk_size)
        except OSError as e:
            msg = f"reading from {source!r} failed: {e}"
            raise UnderlyingReadError(msg) from e
        if isinstance(chunk, str):
            msg = "source must be opened in binary mode"
            raise TypeError(msg)
        if chunk is None:
            # Raw non-blocking streams return None for "no data yet", not EOF.
            msg = f"{source!r} returned None; non-blocking streams are not supported"
            raise UnderlyingReadError(msg)
        if not chunk:
            break
        decoder.feed(chunk)
    return decoder.close()


def decode_bytes(
    byte_str: bytes | bytearray | memoryview,
    *,
    strict: bool = True,
    default_endianness: Endianness = Endianness.BIG,
) -> str:
    """Decode an in-memory UTF-16 byte string.

    Same semantics as :func:`decode`.
    """
    decoder = Utf16Decoder(strict=strict, default_endianness=default_endianness)
    decoder.feed(byte_str)
    return decoder.close()


def decode_file(
    path: str | os.PathLike[str],
    *,
    strict: bool = True,
    default_endianness: Endianness = Endianness.BIG,
    chunk_size: int = DEFAULT_CHUNK_SIZE,
) -> str:
    """Open *path* in binary mode and decode its contents as UTF-16.

    :raises OSError: If the file cannot be opened.
    """
    with Path(path).open("rb") as f:
        return decode(
            f,
            strict=strict,
            default_endianness=default_endianness,
            chunk_size=chunk_size,
        )
