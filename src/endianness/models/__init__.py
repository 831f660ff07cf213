"""Pydantic record modeling for endianness.

This module provides the BaseRecord class and the field annotations used to
describe fixed binary layouts.
"""

from __future__ import annotations

from .base import BaseRecord
from .fields import F32, F64, I16, I32, I64, U16, U32, U64, FixedBytes, Numeric

__all__ = [
    "BaseRecord",
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
]
