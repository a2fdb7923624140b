# tests/test_bom.py
from __future__ import annotations

import logging

import pytest

from utfconvert.codec.bom import bom_for, detect_bom, sniff_bom
from utfconvert.enums import Endianness
from utfconvert.errors import (
    EmptyBomBufferError,
    MisalignedBufferError,
    UnrecognizedBOMError,
    UnsupportedEndiannessError,
)

BE = Endianness.BIG_ENDIAN
LE = Endianness.LITTLE_ENDIAN

# ---------------------------------------------------------------------------
# bom_for
# ---------------------------------------------------------------------------


def test_utf32_be_bom():
    assert bom_for(BE) == b"\x00\x00\xfe\xff"


def test_utf32_le_bom():
    assert bom_for(LE) == b"\xff\xfe\x00\x00"


def test_utf16_be_bom():
    assert bom_for(BE, unit_size=2) == b"\xfe\xff"


def test_utf16_le_bom():
    assert bom_for(LE, unit_size=2) == b"\xff\xfe"


def test_bom_matches_builtin_codecs(endianness: Endianness, codec_suffix: str):
    assert bom_for(endianness) == "\ufeff".encode(f"utf-32-{codec_suffix}")
    assert bom_for(endianness, 2) == "\ufeff".encode(f"utf-16-{codec_suffix}")


@pytest.mark.parametrize("unit_size", [0, 1, 3, 8])
def test_bom_for_rejects_unknown_unit_size(unit_size: int):
    with pytest.raises(ValueError, match="unit_size must be 2 or 4"):
        bom_for(BE, unit_size)


def test_bom_for_rejects_unknown_endianness():
    with pytest.raises(UnsupportedEndiannessError):
        bom_for("little")  # type: ignore[arg-type]


# ---------------------------------------------------------------------------
# detect_bom
# ---------------------------------------------------------------------------


def test_detect_bom_matches_own_pattern(endianness: Endianness):
    assert detect_bom(bom_for(endianness), endianness)
    assert detect_bom(bom_for(endianness, 2), endianness)


def test_detect_bom_rejects_other_byte_order():
    assert not detect_bom(b"\x00\x00\xfe\xff", LE)
    assert not detect_bom(b"\xff\xfe\x00\x00", BE)
    assert not detect_bom(b"\xfe\xff", LE)
    assert not detect_bom(b"\xff\xfe", BE)


def test_detect_bom_rejects_text():
    assert not detect_bom(b"A\x00\x00\x00", LE)
    assert not detect_bom(b"\x00A", BE)


def test_detect_bom_rejects_odd_sized_units():
    assert not detect_bom(b"", BE)
    assert not detect_bom(b"\xef\xbb\xbf", BE)
    assert not detect_bom(b"\xff\xfe\x00\x00\x00", LE)


# ---------------------------------------------------------------------------
# sniff_bom
# ---------------------------------------------------------------------------


def test_sniff_utf32_be():
    assert sniff_bom(b"\x00\x00\xfe\xff\x00\x00\x00H", 4) is BE


def test_sniff_utf32_le():
    assert sniff_bom(b"\xff\xfe\x00\x00H\x00\x00\x00", 4) is LE


def test_sniff_utf16_be():
    assert sniff_bom(b"\xfe\xff\x00H", 2) is BE


def test_sniff_utf16_le():
    assert sniff_bom(b"\xff\xfeH\x00", 2) is LE


def test_sniff_bom_only():
    assert sniff_bom(b"\xff\xfe\x00\x00", 4) is LE


def test_sniff_empty_buffer():
    with pytest.raises(EmptyBomBufferError) as exc_info:
        sniff_bom(b"", 4)
    assert exc_info.value.position == 0


def test_sniff_buffer_shorter_than_bom():
    # A UTF-16 BOM is not a UTF-32 BOM.
    with pytest.raises(MisalignedBufferError):
        sniff_bom(b"\xff\xfe", 4)


def test_sniff_unrecognized():
    with pytest.raises(UnrecognizedBOMError, match="48 00 00 00") as exc_info:
        sniff_bom(b"H\x00\x00\x00", 4)
    assert exc_info.value.position == 0


def test_sniff_utf8_bom_is_not_utf16():
    with pytest.raises(UnrecognizedBOMError):
        sniff_bom(b"\xef\xbb\xbfA", 2)


def test_sniff_rejects_unknown_unit_size():
    with pytest.raises(ValueError, match="unit_size"):
        sniff_bom(b"\xff\xfe", 3)


def test_sniff_logs_detected_byte_order(caplog: pytest.LogCaptureFixture):
    caplog.set_level(logging.DEBUG, logger="utfconvert")
    sniff_bom(b"\xff\xfe\x00\x00", 4)
    assert "detected little BOM for 4-byte code units" in caplog.text


def test_sniff_logs_unrecognized_bom(caplog: pytest.LogCaptureFixture):
    caplog.set_level(logging.DEBUG, logger="utfconvert")
    with pytest.raises(UnrecognizedBOMError):
        sniff_bom(b"\x00A", 2)
    assert "unrecognized BOM" in caplog.text
