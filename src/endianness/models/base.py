"""Base record class for fixed binary layouts."""

from __future__ import annotations

from typing import ClassVar

from pydantic import BaseModel, ConfigDict

from ..byteorder import ByteOrder


class BaseRecord(BaseModel):
    """Base class for fixed-layout binary records.

    Fields are decoded in declaration order, each starting where the previous
    one ended. The record's byte order is set with a ClassVar:

    Example:
        >>> class PcapHeader(BaseRecord):
        ...     magic: U32
        ...     version_major: U16
        ...     version_minor: U16
        ...
        ...     endianness_order: ClassVar[ByteOrder] = ByteOrder.LITTLE_ENDIAN

    Attributes:
        endianness_order: Default byte order for the record's fields (big-endian)
    """

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
    )

    endianness_order: ClassVar[ByteOrder] = ByteOrder.BIG_ENDIAN
