"""Conversion routines and the Unicode constants they share."""

from __future__ import annotations

#: One past the largest Unicode codepoint.
CODEPOINT_LIMIT: int = 0x110000

#: UTF-16 surrogate bands: leads in [0xD800, 0xDC00), trails in [0xDC00, 0xE000).
LEAD_SURROGATE_START: int = 0xD800
TRAIL_SURROGATE_START: int = 0xDC00
SURROGATE_END: int = 0xE000

#: First codepoint that needs a surrogate pair in UTF-16.
SUPPLEMENTARY_START: int = 0x10000


def append_utf8(out: bytearray, value: int) -> None:
    """Append the minimal UTF-8 encoding of *value* to *out*.

    Callers must have rejected values at or above :data:`CODEPOINT_LIMIT`.
    """
    if value < 0x80:
        # 0xxxxxxx
        out.append(value)
    elif value < 0x800:
        # 110xxxxx 10xxxxxx
        out.append(0xC0 | (value >> 6))
        out.append(0x80 | (value & 0x3F))
    elif value < SUPPLEMENTARY_START:
        # 1110xxxx 10xxxxxx 10xxxxxx
        out.append(0xE0 | (value >> 12))
        out.append(0x80 | ((value >> 6) & 0x3F))
        out.append(0x80 | (value & 0x3F))
    else:
        # 11110xxx 10xxxxxx 10xxxxxx 10xxxxxx
        out.append(0xF0 | (value >> 18))
        out.append(0x80 | ((value >> 12) & 0x3F))
        out.append(0x80 | ((value >> 6) & 0x3F))
        out.append(0x80 | (value & 0x3F))


def is_surrogate(value: int) -> bool:
    """Whether *value* falls in the UTF-16 surrogate band."""
    return LEAD_SURROGATE_START <= value < SURROGATE_END
