"""Byte-order mark construction and recognition."""

from __future__ import annotations

import logging

from utfconvert._utils import (
    UTF16_UNIT_SIZE,
    UTF32_UNIT_SIZE,
    _validate_endianness,
)
from utfconvert.enums import Endianness
from utfconvert.errors import (
    EmptyBomBufferError,
    MisalignedBufferError,
    UnrecognizedBOMError,
)

logger = logging.getLogger(__name__)

# U+FEFF laid out per unit size and byte order.
_BOMS: dict[int, dict[Endianness, bytes]] = {
    UTF32_UNIT_SIZE: {
        Endianness.BIG_ENDIAN: b"\x00\x00\xfe\xff",
        Endianness.LITTLE_ENDIAN: b"\xff\xfe\x00\x00",
    },
    UTF16_UNIT_SIZE: {
        Endianness.BIG_ENDIAN: b"\xfe\xff",
        Endianness.LITTLE_ENDIAN: b"\xff\xfe",
    },
}


def _boms_for_size(unit_size: int) -> dict[Endianness, bytes]:
    try:
        return _BOMS[unit_size]
    except KeyError:
        msg = f"unit_size must be 2 or 4, not {unit_size!r}"
        raise ValueError(msg) from None


def bom_for(endianness: Endianness, unit_size: int = UTF32_UNIT_SIZE) -> bytes:
    """Return the BOM for *endianness* as a single code unit.

    :param endianness: Byte order the BOM should announce.
    :param unit_size: ``4`` for a UTF-32 BOM, ``2`` for a UTF-16 BOM.
    :returns: The BOM bytes, ``unit_size`` long.
    :raises UnsupportedEndiannessError: If *endianness* is not an
        :class:`Endianness` member.
    :raises ValueError: If *unit_size* is neither 2 nor 4.
    """
    _validate_endianness(endianness)
    return _boms_for_size(unit_size)[endianness]


def detect_bom(first_unit: bytes, endianness: Endianness) -> bool:
    """Whether *first_unit* is the BOM for *endianness*.

    The unit size is taken from ``len(first_unit)``; anything other than
    a 2- or 4-byte unit never matches.
    """
    _validate_endianness(endianness)
    boms = _BOMS.get(len(first_unit))
    if boms is None:
        return False
    return bytes(first_unit) == boms[endianness]


def sniff_bom(data: bytes, unit_size: int) -> Endianness:
    """Read the byte order announced by the BOM leading *data*.

    :param data: A code-unit buffer expected to start with a BOM.
    :param unit_size: ``4`` for UTF-32, ``2`` for UTF-16.
    :returns: The detected :class:`Endianness`.
    :raises EmptyBomBufferError: If *data* is empty.
    :raises MisalignedBufferError: If *data* is shorter than one unit.
    :raises UnrecognizedBOMError: If the first unit matches neither BOM.
    """
    boms = _boms_for_size(unit_size)
    if not data:
        msg = "a buffer carrying a BOM must contain at least the BOM unit"
        raise EmptyBomBufferError(msg, position=0)
    if len(data) < unit_size:
        msg = f"buffer of {len(data)} bytes is shorter than a {unit_size}-byte BOM"
        raise MisalignedBufferError(msg, position=0)

    first_unit = bytes(data[:unit_size])
    for endianness, pattern in boms.items():
        if first_unit == pattern:
            logger.debug(
                "detected %s BOM for %d-byte code units", endianness.value, unit_size
            )
            return endianness

    logger.debug("unrecognized BOM %r", first_unit)
    msg = f"first code unit {first_unit.hex(' ')} is not a byte-order mark"
    raise UnrecognizedBOMError(msg, position=0)
