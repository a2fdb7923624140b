"""Enumerations for utfconvert."""

import enum


class Endianness(enum.Enum):
    """Byte order of the code units in a UTF-16 or UTF-32 buffer.

    The set is closed: there is no native or unspecified member, callers
    always state the byte order or let a BOM-aware entry point detect it.
    """

    BIG_ENDIAN = "big"
    LITTLE_ENDIAN = "little"
