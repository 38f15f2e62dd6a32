"""Stage 2: reassemble stream bytes into 16-bit code units."""

from __future__ import annotations

import struct

from utf16_reader.enums import Endianness


class CodeUnitAssembler:
    """Pairs incoming bytes into code units across arbitrary chunk boundaries.

    The only state kept between :meth:`feed` calls is the first byte of a
    code unit whose partner has not arrived yet.
    """

    def __init__(self, endianness: Endianness) -> None:
        self.endianness = endianness
        self._prefix = endianness.struct_prefix
        self._pending: int | None = None

    def feed(self, data: bytes | bytearray | memoryview) -> list[int]:
        """Return the code units completed by *data*, in stream order."""
        if not data:
            return []
        buf = bytes(data)
        if self._pending is not None:
            buf = bytes((self._pending,)) + buf
            self._pending = None
        usable = len(buf) & ~1
        if usable != len(buf):
            self._pending = buf[-1]
        if not usable:
            return []
        return list(struct.unpack(f"{self._prefix}{usable // 2}H", buf[:usable]))

    @property
    def pending(self) -> bool:
        """Whether a byte is waiting for the second half of its code unit."""
        return self._pending is not None

    def reset(self) -> None:
        """Drop any pending byte."""
        self._pending = None
