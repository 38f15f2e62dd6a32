"""Stage 3: validate code units and decode them into text."""

from __future__ import annotations

from utf16_reader.errors import InvalidSurrogatePairError

_HIGH_FIRST = 0xD800
_HIGH_LAST = 0xDBFF
_LOW_FIRST = 0xDC00
_LOW_LAST = 0xDFFF
_SUPPLEMENTARY_BASE = 0x10000


class SurrogateDecoder:
    """Turns a stream of UTF-16 code units into Unicode scalar values.

    A high surrogate that ends one :meth:`feed` call is held until the next
    one so a pair may straddle chunks.
    """

    def __init__(self) -> None:
        self._high: int | None = None
        self._position = 0

    def feed(self, units: list[int]) -> str:
        """Decode *units* and return the text they complete.

        :raises InvalidSurrogatePairError: On an isolated or mismatched
            surrogate.
        """
        chars: list[str] = []
        append = chars.append
        high = self._high
        position = self._position
        for unit in units:
            if high is not None:
                if not _LOW_FIRST <= unit <= _LOW_LAST:
                    raise InvalidSurrogatePairError(
                        position, unit, "high surrogate not followed by a low surrogate"
                    )
                offset = ((high - _HIGH_FIRST) << 10) | (unit - _LOW_FIRST)
                append(chr(_SUPPLEMENTARY_BASE + offset))
                high = None
            elif unit < _HIGH_FIRST or unit > _LOW_LAST:
                append(chr(unit))
            elif unit <= _HIGH_LAST:
                high = unit
            else:
                raise InvalidSurrogatePairError(
                    position, unit, "low surrogate without a preceding high surrogate"
                )
            position += 1
        self._high = high
        self._position = position
        return "".join(chars)

    def close(self) -> None:
        """Fail if the stream ended in the middle of a surrogate pair."""
        if self._high is not None:
            # The dangling high surrogate is the unit just before the end.
            raise InvalidSurrogatePairError(
                self._position - 1,
                self._high,
                "unpaired high surrogate at end of input",
            )

    @property
    def position(self) -> int:
        """Number of code units consumed so far."""
        return self._position

    def reset(self) -> None:
        """Forget any pending surrogate and restart position counting."""
        self._high = None
        self._position = 0
