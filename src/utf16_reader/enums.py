"""Enumerations for utf16_reader."""

import enum


class Endianness(enum.Enum):
    """Byte order used to assemble a code unit from two stream bytes."""

    BIG = "big"
    LITTLE = "little"

    @property
    def struct_prefix(self) -> str:
        """The :mod:`struct` byte-order character for this endianness."""
        return ">" if self is Endianness.BIG else "<"
