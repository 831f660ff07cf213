"""Field type helpers for declaring fixed binary layouts.

Record fields are ordinary Pydantic fields whose annotation carries a Numeric
marker. The aliases below cover the common case; use Numeric() directly to pin
one field to a byte order different from the record's.

Example:
    >>> class Header(BaseRecord):
    ...     magic: Annotated[bytes, FixedBytes(length=4)]
    ...     version: U16
    ...     length: U32
    ...     checksum: Annotated[int, Numeric("u16", order=ByteOrder.LITTLE_ENDIAN)]
"""

from __future__ import annotations

from typing import Annotated, Any, cast

from pydantic import Field
from pydantic.fields import FieldInfo

from ..codec.numeric import Numeric, NumericType


def _int_field(numeric_type: NumericType) -> FieldInfo:
    return cast(FieldInfo, Field(ge=numeric_type.min_value, le=numeric_type.max_value))


U16 = Annotated[int, Numeric(NumericType.U16), _int_field(NumericType.U16)]
I16 = Annotated[int, Numeric(NumericType.I16), _int_field(NumericType.I16)]
U32 = Annotated[int, Numeric(NumericType.U32), _int_field(NumericType.U32)]
I32 = Annotated[int, Numeric(NumericType.I32), _int_field(NumericType.I32)]
U64 = Annotated[int, Numeric(NumericType.U64), _int_field(NumericType.U64)]
I64 = Annotated[int, Numeric(NumericType.I64), _int_field(NumericType.I64)]
F32 = Annotated[float, Numeric(NumericType.F32)]
F64 = Annotated[float, Numeric(NumericType.F64)]


def FixedBytes(*, length: int, **kwargs: Any) -> FieldInfo:
    """Create a fixed-length raw bytes field.

    Args:
        length: Exact length in bytes
        **kwargs: Additional Field() arguments

    Returns:
        Pydantic FieldInfo suitable for use as field metadata.

    Example:
        >>> class Message(BaseRecord):
        ...     magic: Annotated[bytes, FixedBytes(length=4)]
    """
    return cast(FieldInfo, Field(min_length=length, max_length=length, **kwargs))
