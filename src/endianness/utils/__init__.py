"""Utility functions for endianness."""

from __future__ import annotations

from .sizing import field_offsets, record_size

__all__ = [
    "record_size",
    "field_offsets",
]
