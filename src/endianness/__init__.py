"""endianness: fixed-width numeric decoding with explicit byte order

Reads signed/unsigned 16/32/64-bit integers and IEEE-754 single/double floats
from a byte span, in big-endian or little-endian order. Readers raise instead
of reading past the end of the span, and never depend on the host's byte order.

Quick Start:
    >>> from endianness import ByteOrder, read_i16, read_i32, read_f32
    >>> data = bytes([0, 128, 128, 0])
    >>> read_i16(data[0:2], ByteOrder.LITTLE_ENDIAN)
    -32768
    >>> read_i16(data[2:4], ByteOrder.BIG_ENDIAN)
    -32768
    >>> read_i32(data, ByteOrder.LITTLE_ENDIAN)
    8421376
    >>> read_f32(bytes([194, 255, 0, 0]), ByteOrder.BIG_ENDIAN)
    -127.5
"""

from __future__ import annotations

from .byteorder import ByteOrder
from .codec import (
    ByteCursor,
    NumericType,
    ReaderConfig,
    RecordSchema,
    byte_width,
    decode_record,
    read_f32,
    read_f64,
    read_i16,
    read_i32,
    read_i64,
    read_u16,
    read_u32,
    read_u64,
    read_value,
)
from .exceptions import DecodeError, EndiannessError, InsufficientBytesError, SchemaError
from .models import F32, F64, I16, I32, I64, U16, U32, U64, BaseRecord, FixedBytes, Numeric
from .utils import field_offsets, record_size

__version__ = "0.1.0"

__all__ = [
    # Byte order
    "ByteOrder",
    # Readers
    "read_u16",
    "read_i16",
    "read_u32",
    "read_i32",
    "read_u64",
    "read_i64",
    "read_f32",
    "read_f64",
    "read_value",
    "NumericType",
    "byte_width",
    # Sequential reads
    "ByteCursor",
    "ReaderConfig",
    # Records
    "BaseRecord",
    "RecordSchema",
    "decode_record",
    "Numeric",
    "FixedBytes",
    "U16",
    "I16",
    "U32",
    "I32",
    "U64",
    "I64",
    "F32",
    "F64",
    # Sizing
    "record_size",
    "field_offsets",
    # Exceptions
    "EndiannessError",
    "DecodeError",
    "InsufficientBytesError",
    "SchemaError",
    # Version
    "__version__",
]
