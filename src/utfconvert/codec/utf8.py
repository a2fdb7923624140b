"""UTF-8 to UTF-32 decoding.

The default mode is permissive: only the lead byte of each sequence is
classified.  Continuation markers are not checked, and overlong forms,
surrogates and values above U+10FFFF are decoded as-is.  Pass
``strict=True`` to validate all of those.
"""

from __future__ import annotations

import logging
from typing import NoReturn

from utfconvert._utils import _coerce_buffer, _validate_endianness, write_u32
from utfconvert.codec import CODEPOINT_LIMIT, is_surrogate
from utfconvert.codec.bom import bom_for
from utfconvert.enums import Endianness
from utfconvert.errors import (
    InvalidCodepointError,
    InvalidContinuationByteError,
    InvalidLeadByteError,
    OverlongEncodingError,
    TruncatedSequenceError,
)

logger = logging.getLogger(__name__)

# Smallest codepoint that legitimately needs a sequence of each length.
_MIN_CODEPOINT: dict[int, int] = {2: 0x80, 3: 0x800, 4: 0x10000}


def decode_u8_to_u32(
    data: bytes | bytearray | memoryview,
    target_endianness: Endianness,
    add_bom: bool = False,
    *,
    strict: bool = False,
) -> bytes:
    """Decode UTF-8 into UTF-32 code units.

    :param data: The UTF-8 bytes.
    :param target_endianness: Byte order of the produced code units.
    :param add_bom: Emit a UTF-32 BOM for *target_endianness* first.
    :param strict: Validate continuation bytes, reject overlong forms,
        surrogates and values above U+10FFFF.
    :returns: The UTF-32 bytes, four per decoded codepoint.
    :raises UnsupportedEndiannessError: If *target_endianness* is not
        recognized.
    :raises InvalidLeadByteError: On a byte that cannot start a sequence.
    :raises TruncatedSequenceError: If a sequence runs past the end of *data*.
    :raises InvalidContinuationByteError: Strict mode only.
    :raises OverlongEncodingError: Strict mode only.
    :raises InvalidCodepointError: Strict mode only.
    """
    _validate_endianness(target_endianness)
    buf = _coerce_buffer(data)

    out = bytearray()
    if add_bom:
        out += bom_for(target_endianness)

    i = 0
    length = len(buf)

    while i < length:
        byte = buf[i]

        if byte < 0x80:
            write_u32(out, byte, target_endianness)
            i += 1
            continue

        # Most specific pattern first: 1111xxxx, 1110xxxx, 110xxxxx.
        if byte & 0xF0 == 0xF0:
            seq_len = 4
            codepoint = byte & 0x07
        elif byte & 0xE0 == 0xE0:
            seq_len = 3
            codepoint = byte & 0x0F
        elif byte & 0xC0 == 0xC0:
            seq_len = 2
            codepoint = byte & 0x1F
        else:
            _raise_invalid_lead(byte, i)

        if strict and byte >= 0xF8:
            _raise_invalid_lead(byte, i)

        if i + seq_len > length:
            logger.debug("truncated %d-byte sequence at offset %d", seq_len, i)
            msg = (
                f"lead byte {byte:#04x} at offset {i} needs {seq_len - 1} "
                f"continuation bytes, {length - i - 1} remain"
            )
            raise TruncatedSequenceError(msg, position=i)

        for j in range(i + 1, i + seq_len):
            trail = buf[j]
            if strict and trail & 0xC0 != 0x80:
                logger.debug("bad continuation byte %#x at offset %d", trail, j)
                msg = f"byte {trail:#04x} at offset {j} is not a continuation byte"
                raise InvalidContinuationByteError(msg, position=j)
            codepoint = (codepoint << 6) | (trail & 0x3F)

        if strict:
            _check_scalar_value(codepoint, seq_len, i)

        write_u32(out, codepoint, target_endianness)
        i += seq_len

    return bytes(out)


def _raise_invalid_lead(byte: int, offset: int) -> NoReturn:
    logger.debug("invalid lead byte %#x at offset %d", byte, offset)
    msg = f"byte {byte:#04x} at offset {offset} cannot start a UTF-8 sequence"
    raise InvalidLeadByteError(msg, position=offset)


def _check_scalar_value(codepoint: int, seq_len: int, offset: int) -> None:
    """Strict-mode checks on a fully assembled codepoint."""
    if codepoint < _MIN_CODEPOINT[seq_len]:
        logger.debug("overlong %d-byte sequence at offset %d", seq_len, offset)
        msg = (
            f"overlong {seq_len}-byte encoding of U+{codepoint:04X} "
            f"at offset {offset}"
        )
        raise OverlongEncodingError(msg, position=offset)
    if codepoint >= CODEPOINT_LIMIT or is_surrogate(codepoint):
        logger.debug("decoded invalid codepoint %#x at offset %d", codepoint, offset)
        msg = f"sequence at offset {offset} decodes to invalid value {codepoint:#x}"
        raise InvalidCodepointError(msg, position=offset)
