"""Fixed-width numeric decoding for endianness.

This module provides the per-type readers, the sequential ByteCursor, and the
record decoder built on top of them.
"""

from __future__ import annotations

from .numeric import Numeric, NumericType, byte_width
from .reader import (
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
from .config import ReaderConfig
from .cursor import ByteCursor
from .schema import FieldLayout, RecordSchema
from .decoder import decode_record

__all__ = [
    "NumericType",
    "Numeric",
    "byte_width",
    "read_u16",
    "read_i16",
    "read_u32",
    "read_i32",
    "read_u64",
    "read_i64",
    "read_f32",
    "read_f64",
    "read_value",
    "ReaderConfig",
    "ByteCursor",
    "RecordSchema",
    "FieldLayout",
    "decode_record",
]
