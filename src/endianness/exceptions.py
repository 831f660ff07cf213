"""Exception hierarchy for endianness.

All exceptions inherit from EndiannessError for easy catching of any
endianness-specific error.
"""

from __future__ import annotations


class EndiannessError(Exception):
    """Base exception for all endianness errors."""

    pass


class SchemaError(EndiannessError):
    """Raised when a record declaration cannot be turned into a byte layout.

    Examples:
        - Field has no numeric or fixed-bytes annotation
        - Fixed-bytes field declared with a non-positive length
    """

    pass


class DecodeError(EndiannessError):
    """Raised when decoding binary data fails."""

    pass


class InsufficientBytesError(DecodeError):
    """Raised when a byte span is shorter than the width of the requested type.

    Attributes:
        required: Number of bytes the read needs
        actual: Number of bytes that were available
        type_name: Name of the requested type (e.g. "i32"), if known
    """

    def __init__(self, required: int, actual: int, type_name: str | None = None) -> None:
        self.required = required
        self.actual = actual
        self.type_name = type_name
        what = type_name or "read"
        super().__init__(f"{what} needs {required} bytes, got {actual}")
