"""Shared test fixtures."""

from __future__ import annotations

from pathlib import Path

import pytest

#: Text of the sample files shipped with the original crate.
SAMPLE_TEXT = "This is a test"

#: Texts used for round-trip checks; every entry is valid Unicode without
#: lone surrogates.
ROUND_TRIP_TEXTS: dict[str, str] = {
    "empty": "",
    "ascii": "The quick brown fox jumps over the lazy dog.",
    "latin1": "Héllo wörld, café résumé naïve",
    "cyrillic": "Привет, мир",
    "cjk": "日本語のテキスト。中文测试。",
    "emoji": "smile \U0001f600 and rocket \U0001f680",
    "astral_only": "\U00010000\U0010ffff\U0001d11e",
    "bom_char_inside": "a\ufeffb\ufffe",
    "controls": "line one\r\nline two\ttabbed\x00null",
}


@pytest.fixture
def utf16_be_file(tmp_path: Path) -> Path:
    """A big-endian UTF-16 file with a BOM."""
    path = tmp_path / "test_be.txt"
    path.write_bytes(b"\xfe\xff" + SAMPLE_TEXT.encode("utf-16-be"))
    return path


@pytest.fixture
def utf16_le_file(tmp_path: Path) -> Path:
    """A little-endian UTF-16 file with a BOM."""
    path = tmp_path / "test_le.txt"
    path.write_bytes(b"\xff\xfe" + SAMPLE_TEXT.encode("utf-16-le"))
    return path
