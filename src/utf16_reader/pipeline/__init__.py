"""Decoding pipeline stages and shared types."""

from __future__ import annotations

import dataclasses

from utf16_reader.enums import Endianness


@dataclasses.dataclass(frozen=True, slots=True)
class ByteOrder:
    """Outcome of byte-order resolution for one stream.

    Holds the endianness used for the rest of the stream and how many
    leading bytes were a byte-order mark (0 or 2).
    """

    endianness: Endianness
    bom_length: int

    @property
    def has_bom(self) -> bool:
        """Whether the stream started with a byte-order mark."""
        return self.bom_length > 0
