"""UTF-16 to UTF-8 encoding, including surrogate pairs."""

from __future__ import annotations

import logging

from utfconvert._utils import (
    UTF16_UNIT_SIZE,
    _check_alignment,
    _coerce_buffer,
    _validate_endianness,
    read_u16,
)
from utfconvert.codec import (
    LEAD_SURROGATE_START,
    SUPPLEMENTARY_START,
    SURROGATE_END,
    TRAIL_SURROGATE_START,
    append_utf8,
)
from utfconvert.codec.bom import sniff_bom
from utfconvert.enums import Endianness
from utfconvert.errors import (
    InvalidSurrogatePairError,
    LoneSurrogateError,
    TruncatedSurrogatePairError,
)

logger = logging.getLogger(__name__)


def encode_u16_to_u8(
    data: bytes | bytearray | memoryview,
    endianness: Endianness,
    *,
    strict: bool = False,
) -> bytes:
    """Encode a BOM-less UTF-16 buffer as UTF-8.

    A lead surrogate must be followed by a trail surrogate; the pair is
    combined into one supplementary codepoint.  A trail surrogate that
    does not follow a lead is encoded as a 3-byte sequence, as if it were
    an ordinary BMP character, unless *strict* is set.

    :param data: UTF-16 code units laid out in *endianness* byte order.
    :param endianness: Byte order of *data*.
    :param strict: Reject unpaired trail surrogates.
    :returns: The UTF-8 bytes.
    :raises UnsupportedEndiannessError: If *endianness* is not recognized.
    :raises MisalignedBufferError: If ``len(data)`` is odd.
    :raises TruncatedSurrogatePairError: If the last unit is a lead surrogate.
    :raises InvalidSurrogatePairError: If a lead is followed by a non-trail.
    :raises LoneSurrogateError: On an unpaired trail, in strict mode.
    """
    _validate_endianness(endianness)
    buf = _coerce_buffer(data)
    return _encode_units(buf, 0, endianness, strict)


def encode_u16_to_u8_with_bom(
    data: bytes | bytearray | memoryview, *, strict: bool = False
) -> bytes:
    """Encode a UTF-16 buffer whose first unit is a BOM as UTF-8.

    :raises EmptyBomBufferError: If *data* is empty.
    :raises UnrecognizedBOMError: If the first unit is not a UTF-16 BOM.
    """
    buf = _coerce_buffer(data)
    endianness = sniff_bom(buf, UTF16_UNIT_SIZE)
    return _encode_units(buf, UTF16_UNIT_SIZE, endianness, strict)


def _encode_units(
    data: bytes, start: int, endianness: Endianness, strict: bool
) -> bytes:
    _check_alignment(data, UTF16_UNIT_SIZE, start)
    out = bytearray()
    length = len(data)
    offset = start

    while offset < length:
        value = read_u16(data, offset, endianness)

        if LEAD_SURROGATE_START <= value < TRAIL_SURROGATE_START:
            trail_offset = offset + UTF16_UNIT_SIZE
            if trail_offset >= length:
                logger.debug("unpaired lead surrogate %#x at offset %d", value, offset)
                msg = (
                    f"lead surrogate {value:#06x} at offset {offset} "
                    "is not followed by a trail surrogate"
                )
                raise TruncatedSurrogatePairError(msg, position=offset)

            trail = read_u16(data, trail_offset, endianness)
            if not TRAIL_SURROGATE_START <= trail < SURROGATE_END:
                logger.debug(
                    "lead surrogate %#x followed by %#x at offset %d",
                    value,
                    trail,
                    trail_offset,
                )
                msg = (
                    f"unit {trail:#06x} at offset {trail_offset} is not a trail "
                    f"surrogate for lead {value:#06x}"
                )
                raise InvalidSurrogatePairError(msg, position=trail_offset)

            codepoint = SUPPLEMENTARY_START + (
                ((value - LEAD_SURROGATE_START) << 10)
                | (trail - TRAIL_SURROGATE_START)
            )
            append_utf8(out, codepoint)
            offset += 2 * UTF16_UNIT_SIZE
            continue

        if strict and TRAIL_SURROGATE_START <= value < SURROGATE_END:
            logger.debug("lone trail surrogate %#x at offset %d", value, offset)
            msg = f"trail surrogate {value:#06x} at offset {offset} has no lead"
            raise LoneSurrogateError(msg, position=offset)

        append_utf8(out, value)
        offset += UTF16_UNIT_SIZE

    return bytes(out)
