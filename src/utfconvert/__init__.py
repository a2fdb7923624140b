"""Exact UTF-8 / UTF-16 / UTF-32 transcoding with explicit byte order."""

from __future__ import annotations

from utfconvert.codec.bom import bom_for, detect_bom, sniff_bom
from utfconvert.codec.utf8 import decode_u8_to_u32
from utfconvert.codec.utf16 import encode_u16_to_u8, encode_u16_to_u8_with_bom
from utfconvert.codec.utf32 import encode_u32_to_u8, encode_u32_to_u8_with_bom
from utfconvert.enums import Endianness
from utfconvert.errors import (
    EmptyBomBufferError,
    InvalidCodepointError,
    InvalidContinuationByteError,
    InvalidLeadByteError,
    InvalidSurrogatePairError,
    LoneSurrogateError,
    MisalignedBufferError,
    OverlongEncodingError,
    TruncatedSequenceError,
    TruncatedSurrogatePairError,
    UnrecognizedBOMError,
    UnsupportedEndiannessError,
    UTFConversionError,
)

__version__ = "1.0.0"
__all__ = [
    "EmptyBomBufferError",
    "Endianness",
    "InvalidCodepointError",
    "InvalidContinuationByteError",
    "InvalidLeadByteError",
    "InvalidSurrogatePairError",
    "LoneSurrogateError",
    "MisalignedBufferError",
    "OverlongEncodingError",
    "TruncatedSequenceError",
    "TruncatedSurrogatePairError",
    "UTFConversionError",
    "UnrecognizedBOMError",
    "UnsupportedEndiannessError",
    "bom_for",
    "decode_u8_to_u32",
    "detect_bom",
    "encode_u16_to_u8",
    "encode_u16_to_u8_with_bom",
    "encode_u32_to_u8",
    "encode_u32_to_u8_with_bom",
    "sniff_bom",
]
