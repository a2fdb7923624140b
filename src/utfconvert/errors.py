"""Exceptions raised by the conversion routines."""

from __future__ import annotations


class UTFConversionError(ValueError):
    """Base class for every conversion failure.

    Subclasses ``ValueError`` so callers that already guard codec calls with
    ``except ValueError`` keep working.

    :param message: Human-readable description of the failure.
    :param position: Byte offset in the caller's input buffer at which
        conversion stopped, or ``None`` when the failure has no location.
    """

    def __init__(self, message: str, position: int | None = None) -> None:
        super().__init__(message)
        self.position = position


class UnsupportedEndiannessError(UTFConversionError):
    """An endianness outside :class:`~utfconvert.enums.Endianness` was given."""


class InvalidCodepointError(UTFConversionError):
    """A value is not an encodable Unicode codepoint."""


class TruncatedSequenceError(UTFConversionError):
    """A multi-byte UTF-8 lead byte is missing its trailing bytes."""


class TruncatedSurrogatePairError(UTFConversionError):
    """A UTF-16 lead surrogate is the last unit of the buffer."""


class InvalidSurrogatePairError(UTFConversionError):
    """A UTF-16 lead surrogate is followed by a unit that is not a trail."""


class InvalidLeadByteError(UTFConversionError):
    """A UTF-8 byte cannot start a sequence."""


class UnrecognizedBOMError(UTFConversionError):
    """The first unit of a BOM-tagged buffer is not a byte-order mark."""


class EmptyBomBufferError(UTFConversionError):
    """A buffer expected to start with a BOM is empty."""


class MisalignedBufferError(UTFConversionError):
    """A UTF-16/UTF-32 buffer does not hold a whole number of code units."""


class InvalidContinuationByteError(UTFConversionError):
    """Strict mode: a UTF-8 continuation byte lacks the ``10xxxxxx`` marker."""


class OverlongEncodingError(UTFConversionError):
    """Strict mode: a UTF-8 sequence uses more bytes than its codepoint needs."""


class LoneSurrogateError(UTFConversionError):
    """Strict mode: a UTF-16 trail surrogate appears outside a pair."""
