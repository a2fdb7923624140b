"""UTF-32 to UTF-8 encoding."""

from __future__ import annotations

import logging

from utfconvert._utils import (
    UTF32_UNIT_SIZE,
    _check_alignment,
    _coerce_buffer,
    _validate_endianness,
    read_u32,
)
from utfconvert.codec import CODEPOINT_LIMIT, append_utf8, is_surrogate
from utfconvert.codec.bom import sniff_bom
from utfconvert.enums import Endianness
from utfconvert.errors import InvalidCodepointError

logger = logging.getLogger(__name__)


def encode_u32_to_u8(
    data: bytes | bytearray | memoryview,
    endianness: Endianness,
    *,
    strict: bool = False,
) -> bytes:
    """Encode a BOM-less UTF-32 buffer as UTF-8.

    Values in the surrogate band are encoded as ordinary 3-byte sequences
    unless *strict* is set.

    :param data: UTF-32 code units laid out in *endianness* byte order.
    :param endianness: Byte order of *data*.
    :param strict: Reject surrogate values instead of passing them through.
    :returns: The UTF-8 bytes.
    :raises UnsupportedEndiannessError: If *endianness* is not recognized.
    :raises MisalignedBufferError: If ``len(data)`` is not a multiple of 4.
    :raises InvalidCodepointError: On a value at or above ``0x110000``
        (or a surrogate, in strict mode).
    """
    _validate_endianness(endianness)
    buf = _coerce_buffer(data)
    return _encode_units(buf, 0, endianness, strict)


def encode_u32_to_u8_with_bom(
    data: bytes | bytearray | memoryview, *, strict: bool = False
) -> bytes:
    """Encode a UTF-32 buffer whose first unit is a BOM as UTF-8.

    The byte order is taken from the BOM, which is not copied to the
    output.  Error positions refer to offsets in *data*, BOM included.

    :raises EmptyBomBufferError: If *data* is empty.
    :raises UnrecognizedBOMError: If the first unit is not a UTF-32 BOM.
    """
    buf = _coerce_buffer(data)
    endianness = sniff_bom(buf, UTF32_UNIT_SIZE)
    return _encode_units(buf, UTF32_UNIT_SIZE, endianness, strict)


def _encode_units(
    data: bytes, start: int, endianness: Endianness, strict: bool
) -> bytes:
    _check_alignment(data, UTF32_UNIT_SIZE, start)
    out = bytearray()
    for offset in range(start, len(data), UTF32_UNIT_SIZE):
        value = read_u32(data, offset, endianness)
        if value >= CODEPOINT_LIMIT:
            logger.debug("UTF-32 value %#x out of range at offset %d", value, offset)
            msg = f"UTF-32 value {value:#x} at offset {offset} exceeds U+10FFFF"
            raise InvalidCodepointError(msg, position=offset)
        if strict and is_surrogate(value):
            logger.debug("UTF-32 surrogate %#x at offset %d", value, offset)
            msg = f"UTF-32 value {value:#x} at offset {offset} is a surrogate"
            raise InvalidCodepointError(msg, position=offset)
        append_utf8(out, value)
    return bytes(out)
