# tests/test_decoder.py
from __future__ import annotations

import array
import logging

import pytest

from conftest import ROUND_TRIP_TEXTS
from utf16_reader.decoder import Utf16Decoder
from utf16_reader.enums import Endianness
from utf16_reader.errors import InvalidSurrogatePairError, TruncatedInputError
from utf16_reader.pipeline import ByteOrder


def test_basic_lifecycle():
    decoder = Utf16Decoder()
    decoder.feed(b"\x00T\x00h\x00i\x00s")
    assert decoder.close() == "This"
    assert decoder.closed


def test_byte_order_unknown_until_two_bytes():
    decoder = Utf16Decoder()
    assert decoder.byte_order is None
    decoder.feed(b"\xff")
    assert decoder.byte_order is None
    decoder.feed(b"\xfe")
    assert decoder.byte_order == ByteOrder(Endianness.LITTLE, 2)


def test_bom_split_across_feeds_is_still_stripped():
    decoder = Utf16Decoder()
    for chunk in (b"\xfe", b"\xff\x00", b"A"):
        decoder.feed(chunk)
    assert decoder.close() == "A"


def test_first_data_unit_split_after_head():
    decoder = Utf16Decoder()
    decoder.feed(b"\x00A\x00")
    decoder.feed(b"B")
    assert decoder.close() == "AB"


def test_empty_input():
    assert Utf16Decoder().close() == ""


def test_empty_feeds_are_ignored():
    decoder = Utf16Decoder()
    decoder.feed(b"")
    decoder.feed(b"\x00A")
    decoder.feed(b"")
    assert decoder.close() == "A"


def test_single_byte_input_strict():
    decoder = Utf16Decoder()
    decoder.feed(b"\x00")
    with pytest.raises(TruncatedInputError) as excinfo:
        decoder.close()
    assert excinfo.value.offset == 0


def test_single_byte_input_lenient():
    decoder = Utf16Decoder(strict=False)
    decoder.feed(b"\x00")
    assert decoder.close() == ""


def test_odd_length_strict_reports_offset():
    decoder = Utf16Decoder()
    decoder.feed(b"\xfe\xff\x00A\x00")
    with pytest.raises(TruncatedInputError) as excinfo:
        decoder.close()
    assert excinfo.value.offset == 4


def test_odd_length_lenient_drops_byte(caplog: pytest.LogCaptureFixture):
    decoder = Utf16Decoder(strict=False)
    decoder.feed(b"\x00A\x00")
    with caplog.at_level(logging.WARNING, logger="utf16_reader.decoder"):
        assert decoder.close() == "A"
    assert "dangling byte at offset 2" in caplog.text


def test_resolution_is_logged(caplog: pytest.LogCaptureFixture):
    with caplog.at_level(logging.DEBUG, logger="utf16_reader.decoder"):
        decoder = Utf16Decoder()
        decoder.feed(b"\xff\xfeA\x00")
        decoder.close()
    assert "resolved byte order little (bom=True)" in caplog.text


def test_default_endianness_little():
    decoder = Utf16Decoder(default_endianness=Endianness.LITTLE)
    decoder.feed("Hi".encode("utf-16-le"))
    assert decoder.close() == "Hi"


def test_invalid_default_endianness():
    with pytest.raises(ValueError, match="Endianness"):
        Utf16Decoder(default_endianness="little")  # type: ignore[arg-type]


def test_feed_after_close_raises():
    decoder = Utf16Decoder()
    decoder.feed(b"\x00A")
    decoder.close()
    with pytest.raises(ValueError, match="after close"):
        decoder.feed(b"\x00B")


def test_close_twice_raises():
    decoder = Utf16Decoder()
    decoder.close()
    with pytest.raises(ValueError):
        decoder.close()


def test_failure_closes_decoder():
    decoder = Utf16Decoder()
    with pytest.raises(InvalidSurrogatePairError):
        decoder.feed(b"\xdc\x00")
    assert decoder.closed
    with pytest.raises(ValueError):
        decoder.feed(b"\x00A")


def test_dangling_high_surrogate_fails_on_close():
    decoder = Utf16Decoder()
    decoder.feed(b"\x00A\xd8\x00")
    with pytest.raises(InvalidSurrogatePairError):
        decoder.close()


def test_reset():
    decoder = Utf16Decoder()
    decoder.feed(b"\xff\xfeA\x00")
    decoder.close()
    decoder.reset()
    assert decoder.byte_order is None
    assert not decoder.closed
    decoder.feed(b"\x00B")
    assert decoder.close() == "B"
    assert decoder.byte_order == ByteOrder(Endianness.BIG, 0)


def test_reset_after_failure():
    decoder = Utf16Decoder()
    with pytest.raises(InvalidSurrogatePairError):
        decoder.feed(b"\xd8\x00\x00A")
    decoder.reset()
    decoder.feed(b"\x00A")
    assert decoder.close() == "A"


@pytest.mark.parametrize(("label", "text"), list(ROUND_TRIP_TEXTS.items()))
@pytest.mark.parametrize("chunk_size", [1, 2, 3, 7, 64, None])
def test_chunked_feeding_matches_single_feed(
    label: str, text: str, chunk_size: int | None
):
    data = b"\xff\xfe" + text.encode("utf-16-le")
    decoder = Utf16Decoder()
    if chunk_size is None:
        decoder.feed(data)
    else:
        for i in range(0, len(data), chunk_size):
            decoder.feed(data[i : i + chunk_size])
    assert decoder.close() == text


def test_feeding_str_raises_without_counting_bytes():
    decoder = Utf16Decoder()
    with pytest.raises(TypeError, match="not str"):
        decoder.feed("xyz")  # type: ignore[arg-type]
    assert not decoder.closed
    decoder.feed(b"\x00A\x00")
    with pytest.raises(TruncatedInputError) as excinfo:
        decoder.close()
    assert excinfo.value.offset == 2


def test_typed_buffers_are_counted_in_bytes():
    # Two 16-bit elements are four bytes; the dangling fifth byte is at offset 4
    units = array.array("H", [0x4100, 0x4200])
    decoder = Utf16Decoder(default_endianness=Endianness.LITTLE)
    decoder.feed(memoryview(units))
    decoder.feed(b"\x00")
    with pytest.raises(TruncatedInputError) as excinfo:
        decoder.close()
    assert excinfo.value.offset == 4


def test_typed_buffer_decodes_all_bytes():
    units = array.array("H", [0x0041, 0x0042])
    data = units.tobytes()
    decoder = Utf16Decoder(default_endianness=Endianness.LITTLE)
    decoder.feed(units)
    expected = data.decode("utf-16-le")
    assert decoder.close() == expected
