"""Catalogue of supported fixed-width numeric types.

Each NumericType knows its width in bytes, its signedness, and whether its bit
pattern is an IEEE-754 float. Widths are fixed: 2, 4 or 8 bytes.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Optional

from ..byteorder import ByteOrder


class NumericType(enum.Enum):
    """Fixed-width numeric type decoded from a byte span.

    The value of each member is its short name ("u16", "f64", ...).
    """

    U16 = "u16"
    I16 = "i16"
    U32 = "u32"
    I32 = "i32"
    U64 = "u64"
    I64 = "i64"
    F32 = "f32"
    F64 = "f64"

    @property
    def width(self) -> int:
        """Width of the type in bytes."""
        return int(self.value[1:]) // 8

    @property
    def bits(self) -> int:
        """Width of the type in bits."""
        return int(self.value[1:])

    @property
    def signed(self) -> bool:
        """True for two's-complement integer types."""
        return self.value[0] == "i"

    @property
    def is_float(self) -> bool:
        """True for IEEE-754 types."""
        return self.value[0] == "f"

    @property
    def struct_code(self) -> str:
        """``struct`` format character for this type (without byte order)."""
        return _STRUCT_CODES[self]

    @property
    def min_value(self) -> int | None:
        """Smallest representable integer, or None for floats."""
        if self.is_float:
            return None
        if self.signed:
            return -(1 << (self.bits - 1))
        return 0

    @property
    def max_value(self) -> int | None:
        """Largest representable integer, or None for floats."""
        if self.is_float:
            return None
        if self.signed:
            return (1 << (self.bits - 1)) - 1
        return (1 << self.bits) - 1

    @classmethod
    def parse(cls, value: str | NumericType) -> NumericType:
        """Resolve a numeric type from its short name ("u16", "F32", ...).

        Raises:
            ValueError: If the name is not a supported type
        """
        if isinstance(value, NumericType):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            supported = ", ".join(member.value for member in cls)
            raise ValueError(
                f"Unsupported numeric type: {value}. Supported: {supported}"
            ) from None


_STRUCT_CODES = {
    NumericType.U16: "H",
    NumericType.I16: "h",
    NumericType.U32: "I",
    NumericType.I32: "i",
    NumericType.U64: "Q",
    NumericType.I64: "q",
    NumericType.F32: "f",
    NumericType.F64: "d",
}


def byte_width(numeric_type: NumericType | str) -> int:
    """Return the number of bytes a type occupies.

    Example:
        >>> byte_width("i32")
        4
    """
    return NumericType.parse(numeric_type).width


@dataclass(frozen=True)
class Numeric:
    """Annotation marker binding a record field to a fixed-width numeric type.

    Attributes:
        numeric_type: Type to decode the field as
        order: Byte order for this field only (None uses the record's order)
    """

    numeric_type: NumericType
    order: Optional[ByteOrder] = None

    def __init__(self, numeric_type: NumericType | str, order: ByteOrder | str | None = None):
        object.__setattr__(self, "numeric_type", NumericType.parse(numeric_type))
        object.__setattr__(self, "order", None if order is None else ByteOrder.parse(order))
