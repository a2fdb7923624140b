"""Internal byte-order primitives and argument validation."""

from __future__ import annotations

from utfconvert.enums import Endianness
from utfconvert.errors import MisalignedBufferError, UnsupportedEndiannessError

#: Size in bytes of a UTF-16 code unit.
UTF16_UNIT_SIZE: int = 2

#: Size in bytes of a UTF-32 code unit.
UTF32_UNIT_SIZE: int = 4


def read_u16(data: bytes, offset: int, endianness: Endianness) -> int:
    """Assemble the 16-bit unit starting at *offset*."""
    if endianness is Endianness.BIG_ENDIAN:
        return (data[offset] << 8) | data[offset + 1]
    return (data[offset + 1] << 8) | data[offset]


def read_u32(data: bytes, offset: int, endianness: Endianness) -> int:
    """Assemble the 32-bit unit starting at *offset*."""
    if endianness is Endianness.BIG_ENDIAN:
        return (
            (data[offset] << 24)
            | (data[offset + 1] << 16)
            | (data[offset + 2] << 8)
            | data[offset + 3]
        )
    return (
        (data[offset + 3] << 24)
        | (data[offset + 2] << 16)
        | (data[offset + 1] << 8)
        | data[offset]
    )


def write_u32(out: bytearray, value: int, endianness: Endianness) -> None:
    """Append *value* to *out* as four bytes in the given byte order."""
    if endianness is Endianness.BIG_ENDIAN:
        out.append((value >> 24) & 0xFF)
        out.append((value >> 16) & 0xFF)
        out.append((value >> 8) & 0xFF)
        out.append(value & 0xFF)
    else:
        out.append(value & 0xFF)
        out.append((value >> 8) & 0xFF)
        out.append((value >> 16) & 0xFF)
        out.append((value >> 24) & 0xFF)


def _validate_endianness(endianness: object) -> None:
    """Raise UnsupportedEndiannessError if *endianness* is not an Endianness."""
    if not isinstance(endianness, Endianness):
        msg = f"unsupported endianness: {endianness!r}"
        raise UnsupportedEndiannessError(msg)


def _coerce_buffer(data: bytes | bytearray | memoryview) -> bytes:
    """Return *data* as ``bytes``, raising TypeError for non-buffers."""
    if isinstance(data, bytes):
        return data
    if isinstance(data, (bytearray, memoryview)):
        return bytes(data)
    msg = f"expected a bytes-like object, not {type(data).__name__}"
    raise TypeError(msg)


def _check_alignment(data: bytes, unit_size: int, start: int = 0) -> None:
    """Raise MisalignedBufferError unless ``data[start:]`` holds whole units."""
    remainder = (len(data) - start) % unit_size
    if remainder:
        msg = (
            f"buffer of {len(data) - start} bytes is not a whole number "
            f"of {unit_size}-byte code units"
        )
        raise MisalignedBufferError(msg, position=len(data) - remainder)
