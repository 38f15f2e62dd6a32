"""Stage 1: byte-order resolution from the optional BOM."""

from __future__ import annotations

from utf16_reader.enums import Endianness
from utf16_reader.pipeline import ByteOrder

BOM_BE: bytes = b"\xfe\xff"
BOM_LE: bytes = b"\xff\xfe"

_BOMS: tuple[tuple[bytes, Endianness], ...] = (
    (BOM_BE, Endianness.BIG),
    (BOM_LE, Endianness.LITTLE),
)


def resolve_byte_order(
    head: bytes, default: Endianness = Endianness.BIG
) -> ByteOrder:
    """Resolve the byte order from the first (up to) two bytes of a stream.

    A recognised BOM is consumed.  Anything else, including a head shorter
    than two bytes, resolves to *default* and the bytes remain data.
    """
    for bom_bytes, endianness in _BOMS:
        if head[:2] == bom_bytes:
            return ByteOrder(endianness=endianness, bom_length=len(bom_bytes))
    return ByteOrder(endianness=default, bom_length=0)
