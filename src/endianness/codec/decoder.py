"""Record decoder.

This module provides decode_record(), which reads a BaseRecord's fields in
declaration order from a byte span and builds the model instance.
"""

from __future__ import annotations

import logging
from typing import Any, Optional, TypeVar

from pydantic import BaseModel, ValidationError

from ..byteorder import ByteOrder
from ..exceptions import DecodeError, InsufficientBytesError
from .cursor import ByteCursor
from .reader import ByteSpan, byte_view
from .schema import RecordSchema

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=BaseModel)


def decode_record(
    record_class: type[T],
    data: ByteSpan,
    order: Optional[ByteOrder | str] = None,
    offset: int = 0,
) -> T:
    """Decode a fixed-layout record from a byte span.

    Args:
        record_class: BaseRecord subclass describing the layout
        data: Byte span to read from; bytes past the record are ignored
        order: Byte order for fields without an override
            (default: the record's ``endianness_order``)
        offset: Byte offset where the record starts

    Returns:
        Decoded record instance

    Raises:
        SchemaError: If the record declares a field with no fixed layout
        InsufficientBytesError: If the span ends before the record does,
            including an ``offset`` past the end of the span
        DecodeError: If the decoded values are rejected by the model
        ValueError: If ``offset`` is negative

    Example:
        ```python
        class Header(BaseRecord):
            magic: Annotated[bytes, FixedBytes(length=4)]
            count: U16

        header = decode_record(Header, b"RIFF\\x00\\x02", order="be")
        assert header.count == 2
        ```
    """
    schema = RecordSchema.from_model(record_class)
    record_order = schema.order if order is None else ByteOrder.parse(order)

    if offset < 0:
        raise ValueError(f"offset must be >= 0, got {offset}")

    view = byte_view(data)
    needed = schema.total_bytes()
    available = max(len(view) - offset, 0)
    if available < needed:
        logger.debug(
            "%s needs %d bytes at offset %d, only %d available",
            record_class.__name__,
            needed,
            offset,
            available,
        )
        raise InsufficientBytesError(needed, available, record_class.__name__)

    cursor = ByteCursor(view, order=record_order, offset=offset)

    field_values: dict[str, Any] = {}
    for layout in schema.fields:
        if layout.numeric_type is None:
            field_values[layout.name] = cursor.read_bytes(layout.width)
        else:
            field_values[layout.name] = cursor.read(layout.numeric_type, layout.order)

    try:
        return record_class(**field_values)
    except ValidationError as e:
        raise DecodeError(f"Failed to construct {record_class.__name__}: {e}") from e
