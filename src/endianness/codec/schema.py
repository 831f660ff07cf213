"""Schema introspection for record models.

This module turns a BaseRecord subclass into a fixed byte layout: an ordered
list of fields, each with a width, a byte offset and an optional byte-order
override.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Type

from pydantic import BaseModel
from pydantic.fields import FieldInfo

from ..byteorder import ByteOrder
from ..exceptions import SchemaError
from .numeric import Numeric, NumericType


@dataclass(frozen=True)
class FieldLayout:
    """Layout information for a single record field.

    Attributes:
        name: Field name
        offset: Byte offset from the start of the record
        width: Width in bytes
        numeric_type: Numeric type, or None for raw bytes fields
        order: Byte order override, or None to use the record's order
    """

    name: str
    offset: int
    width: int
    numeric_type: Optional[NumericType]
    order: Optional[ByteOrder]

    @property
    def is_bytes(self) -> bool:
        return self.numeric_type is None


class RecordSchema:
    """Byte layout of an entire record.

    Example:
        >>> schema = RecordSchema.from_model(PcapHeader)
        >>> for field in schema.fields:
        ...     print(f"{field.name}: {field.width} bytes at {field.offset}")
    """

    def __init__(self, model_class: Type[BaseModel]) -> None:
        """Initialize schema from a Pydantic model.

        Args:
            model_class: Record class to introspect

        Raises:
            SchemaError: If a field has no fixed-width layout
        """
        self.model_class = model_class
        self.order: ByteOrder = ByteOrder.parse(
            getattr(model_class, "endianness_order", ByteOrder.BIG_ENDIAN)
        )
        self.fields: List[FieldLayout] = []
        self._introspect()

    @classmethod
    def from_model(cls, model_class: Type[BaseModel]) -> RecordSchema:
        return cls(model_class)

    def _introspect(self) -> None:
        offset = 0
        for field_name, field_info in self.model_class.model_fields.items():
            layout = self._extract_layout(field_name, field_info, offset)
            self.fields.append(layout)
            offset += layout.width

    def _extract_layout(self, name: str, field_info: FieldInfo, offset: int) -> FieldLayout:
        marker: Optional[Numeric] = None
        min_length = None
        max_length = None

        # Pydantic v2 keeps Annotated extras and constraints in metadata
        for item in field_info.metadata:
            if isinstance(item, Numeric):
                marker = item
            if hasattr(item, "min_length"):
                min_length = item.min_length
            if hasattr(item, "max_length"):
                max_length = item.max_length

        if marker is not None:
            return FieldLayout(
                name=name,
                offset=offset,
                width=marker.numeric_type.width,
                numeric_type=marker.numeric_type,
                order=marker.order,
            )

        if field_info.annotation is bytes:
            if max_length is None or min_length != max_length:
                raise SchemaError(
                    f"Field {name}: bytes fields need a fixed length. "
                    f"Use FixedBytes(length=n)."
                )
            if max_length <= 0:
                raise SchemaError(f"Field {name}: length must be > 0, got {max_length}")
            return FieldLayout(
                name=name, offset=offset, width=max_length, numeric_type=None, order=None
            )

        raise SchemaError(
            f"Field {name}: unsupported type {field_info.annotation}. "
            f"Supported: U16, I16, U32, I32, U64, I64, F32, F64, fixed bytes."
        )

    def total_bytes(self) -> int:
        """Return the size of the record in bytes."""
        return sum(field.width for field in self.fields)
