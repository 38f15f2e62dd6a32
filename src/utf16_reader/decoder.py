"""Utf16Decoder: streaming UTF-16 decoding."""

from __future__ import annotations

import logging

from utf16_reader._utils import _validate_endianness
from utf16_reader.enums import Endianness
from utf16_reader.errors import DecodeError, TruncatedInputError
from utf16_reader.pipeline import ByteOrder
from utf16_reader.pipeline.bom import resolve_byte_order
from utf16_reader.pipeline.surrogates import SurrogateDecoder
from utf16_reader.pipeline.units import CodeUnitAssembler


class Utf16Decoder:
    """Streaming UTF-16 decoder.

    Implements a feed/close pattern: bytes are passed to :meth:`feed` in
    chunks of any size and :meth:`close` returns the complete text.

    .. code::

            d = Utf16Decoder()
            for chunk in chunks:
                d.feed(chunk)
            text = d.close()

    A failed decoder is closed; call :meth:`reset` before reusing it.
    """

    def __init__(
        self,
        *,
        strict: bool = True,
        default_endianness: Endianness = Endianness.BIG,
    ) -> None:
        """Initialize the decoder.

        :param strict: If ``True`` (the default), a stream with an odd number
            of data bytes raises :class:`TruncatedInputError`.  If ``False``,
            the dangling byte is dropped.
        :param default_endianness: Byte order assumed when the stream does
            not start with a byte-order mark.
        """
        _validate_endianness(default_endianness)
        self.strict = strict
        self.default_endianness = default_endianness
        self.logger = logging.getLogger(__name__)
        self._head = bytearray()
        self._byte_order: ByteOrder | None = None
        self._assembler: CodeUnitAssembler | None = None
        self._surrogates = SurrogateDecoder()
        self._pieces: list[str] = []
        self._bytes_seen = 0
        self._closed = False

    def feed(self, byte_str: bytes | bytearray | memoryview) -> None:
        """Feed the next chunk of bytes to the decoder.

        :param byte_str: The next chunk of the stream.
        :raises ValueError: If called after :meth:`close` without a
            :meth:`reset`.
        :raises InvalidSurrogatePairError: If the code units seen so far are
            not valid UTF-16.
        """
        if self._closed:
            msg = "feed() called after close() without reset()"
            raise ValueError(msg)
        if isinstance(byte_str, str):
            msg = "feed() expects bytes, not str"
            raise TypeError(msg)
        # Count bytes, not elements, for typed buffers such as array('H').
        data = memoryview(byte_str).cast("B")
        if not data:
            return
        self._bytes_seen += data.nbytes
        try:
            if self._assembler is None:
                self._head.extend(data)
                if len(self._head) < 2:
                    return
                self._resolve()
                body = bytes(self._head[self._byte_order.bom_length :])
                self._head = bytearray()
                self._push(body)
            else:
                self._push(data)
        except DecodeError:
            self._closed = True
            raise

    def _resolve(self) -> None:
        self._byte_order = resolve_byte_order(
            bytes(self._head[:2]), self.default_endianness
        )
        self._assembler = CodeUnitAssembler(self._byte_order.endianness)
        self.logger.debug(
            "resolved byte order %s (bom=%s)",
            self._byte_order.endianness.value,
            self._byte_order.has_bom,
        )

    def _push(self, data: bytes | bytearray | memoryview) -> None:
        units = self._assembler.feed(data)
        if units:
            self._pieces.append(self._surrogates.feed(units))

    def close(self) -> str:
        """Finish decoding and return the complete text.

        :raises TruncatedInputError: In strict mode, if the stream ended in
            the middle of a code unit.
        :raises InvalidSurrogatePairError: If the stream ended in the middle
            of a surrogate pair.
        :raises ValueError: If the decoder was already closed.
        """
        if self._closed:
            msg = "close() called twice without reset()"
            raise ValueError(msg)
        self._closed = True
        if self._assembler is None:
            # Fewer than two bytes in total: no BOM, at most one data byte.
            self._resolve()
            self._push(bytes(self._head))
            self._head = bytearray()
        if self._assembler.pending:
            offset = self._bytes_seen - 1
            if self.strict:
                raise TruncatedInputError(offset)
            self.logger.warning("dropping dangling byte at offset %d", offset)
        self._surrogates.close()
        text = "".join(self._pieces)
        self._pieces = []
        self.logger.debug(
            "decoded %d bytes into %d characters", self._bytes_seen, len(text)
        )
        return text

    def reset(self) -> None:
        """Reset the decoder to its initial state for reuse."""
        self._head = bytearray()
        self._byte_order = None
        self._assembler = None
        self._surrogates.reset()
        self._pieces = []
        self._bytes_seen = 0
        self._closed = False

    @property
    def byte_order(self) -> ByteOrder | None:
        """The resolved byte order, or ``None`` before two bytes were seen."""
        return self._byte_order

    @property
    def closed(self) -> bool:
        """Whether :meth:`close` was called or decoding failed."""
        return self._closed
