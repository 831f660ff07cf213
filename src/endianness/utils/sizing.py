"""Record size calculation utilities.

This module provides functions to calculate the byte layout of records
without decoding any data.
"""

from __future__ import annotations

from pydantic import BaseModel

from ..codec.schema import RecordSchema


def _record_class(record_or_class: BaseModel | type[BaseModel]) -> type[BaseModel]:
    if isinstance(record_or_class, BaseModel):
        return type(record_or_class)
    return record_or_class


def record_size(record_or_class: BaseModel | type[BaseModel]) -> int:
    """Calculate the size of a record in bytes.

    Args:
        record_or_class: Record instance or class

    Returns:
        Number of bytes the record occupies

    Raises:
        SchemaError: If the record declares a field with no fixed layout

    Example:
        >>> class Sample(BaseRecord):
        ...     channel: U16
        ...     value: F64
        >>> record_size(Sample)
        10
    """
    return RecordSchema.from_model(_record_class(record_or_class)).total_bytes()


def field_offsets(record_or_class: BaseModel | type[BaseModel]) -> dict[str, int]:
    """Get the byte offset of each field in a record.

    Example:
        >>> field_offsets(Sample)
        {'channel': 0, 'value': 2}
    """
    schema = RecordSchema.from_model(_record_class(record_or_class))
    return {field.name: field.offset for field in schema.fields}
