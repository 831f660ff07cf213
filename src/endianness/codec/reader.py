"""Fixed-width numeric readers.

Every reader takes a byte span and an explicit ByteOrder, checks that the span
holds at least the type's width, and decodes exactly the first ``width`` bytes.
Bytes past the width are ignored, so callers can pass a larger buffer and
slice logically.

Example:
    >>> from endianness import ByteOrder, read_i16, read_f32
    >>> read_i16(b"\\x00\\x80", ByteOrder.LITTLE_ENDIAN)
    -32768
    >>> read_f32(b"\\xc2\\xff\\x00\\x00", ByteOrder.BIG_ENDIAN)
    -127.5
"""

from __future__ import annotations

import logging
import struct
from typing import Sequence, Union

from ..byteorder import ByteOrder
from ..exceptions import InsufficientBytesError
from .numeric import NumericType

logger = logging.getLogger(__name__)

ByteSpan = Union[bytes, bytearray, memoryview, Sequence[int]]


def byte_view(data: ByteSpan) -> memoryview:
    """Return a flat unsigned-byte view over ``data``.

    Strided memoryviews are copied; other buffers are viewed in place.
    """
    if isinstance(data, memoryview):
        if not data.c_contiguous:
            return memoryview(data.tobytes())
        if data.format != "B" or data.ndim != 1:
            return data.cast("B")
        return data
    if isinstance(data, (bytes, bytearray)):
        return memoryview(data)
    return memoryview(bytes(data))


def _take(data: ByteSpan, width: int, type_name: str) -> bytes:
    """Return exactly the first ``width`` bytes of ``data``.

    Raises:
        InsufficientBytesError: If fewer than ``width`` bytes are available
    """
    if isinstance(data, memoryview):
        data = byte_view(data)

    available = len(data)
    if available < width:
        logger.debug("read_%s: span of %d bytes is shorter than %d", type_name, available, width)
        raise InsufficientBytesError(width, available, type_name)

    return bytes(data[:width])


def _read_unsigned(data: ByteSpan, numeric_type: NumericType, order: ByteOrder) -> int:
    """Compose the first W bytes into an unsigned integer under ``order``."""
    order = ByteOrder.parse(order)
    chunk = _take(data, numeric_type.width, numeric_type.value)
    return int.from_bytes(chunk, order.byteorder, signed=False)


def _to_signed(unsigned_value: int, num_bits: int) -> int:
    """Reinterpret an unsigned bit pattern as two's complement."""
    sign_bit = 1 << (num_bits - 1)
    if unsigned_value & sign_bit:
        return unsigned_value - (1 << num_bits)
    return unsigned_value


def _to_float(unsigned_value: int, numeric_type: NumericType) -> float:
    """Reinterpret an unsigned bit pattern as an IEEE-754 value, bit for bit."""
    if numeric_type is NumericType.F32:
        exponent = (unsigned_value >> 23) & 0xFF
        mantissa = unsigned_value & 0x7FFFFF
        if exponent == 0xFF and mantissa:
            # NaN: widen by hand, a C float cast would set the quiet bit
            sign = unsigned_value >> 31
            unsigned_value = (sign << 63) | (0x7FF << 52) | (mantissa << 29)
            return struct.unpack(">d", struct.pack(">Q", unsigned_value))[0]
        return struct.unpack(">f", struct.pack(">I", unsigned_value))[0]
    return struct.unpack(">d", struct.pack(">Q", unsigned_value))[0]


def read_value(data: ByteSpan, numeric_type: NumericType | str, order: ByteOrder) -> int | float:
    """Decode one value of ``numeric_type`` from the start of ``data``.

    Args:
        data: Byte span to read from (bytes, bytearray, memoryview or ints 0-255)
        numeric_type: Type to decode, as a NumericType or short name ("i32")
        order: Byte order of the span

    Returns:
        Decoded int (integer types) or float (f32/f64)

    Raises:
        InsufficientBytesError: If ``data`` is shorter than the type's width
        ValueError: If ``numeric_type`` or ``order`` names nothing known
    """
    numeric_type = NumericType.parse(numeric_type)
    unsigned_value = _read_unsigned(data, numeric_type, order)

    if numeric_type.is_float:
        return _to_float(unsigned_value, numeric_type)
    if numeric_type.signed:
        return _to_signed(unsigned_value, numeric_type.bits)
    return unsigned_value


def read_u16(data: ByteSpan, order: ByteOrder) -> int:
    """Read an unsigned 16-bit integer."""
    return _read_unsigned(data, NumericType.U16, order)


def read_i16(data: ByteSpan, order: ByteOrder) -> int:
    """Read a signed 16-bit integer."""
    return _to_signed(_read_unsigned(data, NumericType.I16, order), 16)


def read_u32(data: ByteSpan, order: ByteOrder) -> int:
    """Read an unsigned 32-bit integer."""
    return _read_unsigned(data, NumericType.U32, order)


def read_i32(data: ByteSpan, order: ByteOrder) -> int:
    """Read a signed 32-bit integer."""
    return _to_signed(_read_unsigned(data, NumericType.I32, order), 32)


def read_u64(data: ByteSpan, order: ByteOrder) -> int:
    """Read an unsigned 64-bit integer."""
    return _read_unsigned(data, NumericType.U64, order)


def read_i64(data: ByteSpan, order: ByteOrder) -> int:
    """Read a signed 64-bit integer."""
    return _to_signed(_read_unsigned(data, NumericType.I64, order), 64)


def read_f32(data: ByteSpan, order: ByteOrder) -> float:
    """Read an IEEE-754 single-precision float.

    The value is widened exactly to a Python float. NaN and the infinities are
    returned as ordinary values.
    """
    return _to_float(_read_unsigned(data, NumericType.F32, order), NumericType.F32)


def read_f64(data: ByteSpan, order: ByteOrder) -> float:
    """Read an IEEE-754 double-precision float."""
    return _to_float(_read_unsigned(data, NumericType.F64, order), NumericType.F64)
