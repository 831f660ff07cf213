"""Sequential reads over an in-memory buffer.

ByteCursor keeps a read position over a caller-owned buffer so that successive
fields of a header or packet can be decoded without slicing by hand. It does
not buffer or stream: the whole span must already be in memory.
"""

from __future__ import annotations

from typing import cast

from ..byteorder import ByteOrder
from ..exceptions import InsufficientBytesError
from .config import ReaderConfig
from .numeric import NumericType
from .reader import ByteSpan, byte_view, read_value


class ByteCursor:
    """Reads fixed-width values one after another from a byte buffer.

    A failed read raises InsufficientBytesError and leaves the position where
    it was.

    Example:
        >>> cursor = ByteCursor(b"\\x00\\x2a\\xff\\xff\\xff\\xff", order=ByteOrder.BIG_ENDIAN)
        >>> cursor.read_u16()
        42
        >>> cursor.read_i32()
        -1
        >>> cursor.remaining()
        0
    """

    def __init__(
        self,
        data: ByteSpan,
        order: ByteOrder | str = ByteOrder.BIG_ENDIAN,
        offset: int = 0,
    ) -> None:
        """Initialize a cursor over ``data``.

        Args:
            data: Buffer to read from
            order: Default byte order for reads
            offset: Starting position in bytes

        Raises:
            ValueError: If ``offset`` lies outside the buffer
        """
        self._view = byte_view(data)
        self.order = ByteOrder.parse(order)
        self._position = 0
        self.seek(offset)

    @classmethod
    def from_config(cls, data: ByteSpan, config: ReaderConfig) -> ByteCursor:
        """Create a cursor using the order and offset from ``config``."""
        return cls(data, order=config.order, offset=config.offset)

    def read(self, numeric_type: NumericType | str, order: ByteOrder | None = None) -> int | float:
        """Read one value and advance past it.

        Args:
            numeric_type: Type to decode
            order: Byte order for this read only (defaults to the cursor's)

        Returns:
            Decoded value

        Raises:
            InsufficientBytesError: If fewer than the type's width bytes remain
        """
        numeric_type = NumericType.parse(numeric_type)
        value = read_value(
            self._view[self._position :],
            numeric_type,
            self.order if order is None else order,
        )
        self._position += numeric_type.width
        return value

    def read_u16(self, order: ByteOrder | None = None) -> int:
        return cast(int, self.read(NumericType.U16, order))

    def read_i16(self, order: ByteOrder | None = None) -> int:
        return cast(int, self.read(NumericType.I16, order))

    def read_u32(self, order: ByteOrder | None = None) -> int:
        return cast(int, self.read(NumericType.U32, order))

    def read_i32(self, order: ByteOrder | None = None) -> int:
        return cast(int, self.read(NumericType.I32, order))

    def read_u64(self, order: ByteOrder | None = None) -> int:
        return cast(int, self.read(NumericType.U64, order))

    def read_i64(self, order: ByteOrder | None = None) -> int:
        return cast(int, self.read(NumericType.I64, order))

    def read_f32(self, order: ByteOrder | None = None) -> float:
        return self.read(NumericType.F32, order)

    def read_f64(self, order: ByteOrder | None = None) -> float:
        return self.read(NumericType.F64, order)

    def read_bytes(self, num_bytes: int) -> bytes:
        """Read raw bytes and advance past them.

        Raises:
            ValueError: If ``num_bytes`` is negative
            InsufficientBytesError: If fewer than ``num_bytes`` bytes remain
        """
        if num_bytes < 0:
            raise ValueError(f"num_bytes must be >= 0, got {num_bytes}")
        if num_bytes > self.remaining():
            raise InsufficientBytesError(num_bytes, self.remaining())

        chunk = bytes(self._view[self._position : self._position + num_bytes])
        self._position += num_bytes
        return chunk

    def skip(self, num_bytes: int) -> None:
        """Move the position forward (or back, if negative) by ``num_bytes``."""
        self.seek(self._position + num_bytes)

    def seek(self, offset: int) -> None:
        """Move to an absolute byte offset.

        Raises:
            ValueError: If ``offset`` is outside ``[0, len(buffer)]``
        """
        if not 0 <= offset <= len(self._view):
            raise ValueError(f"offset must be 0-{len(self._view)}, got {offset}")
        self._position = offset

    def tell(self) -> int:
        """Return the current position in bytes."""
        return self._position

    def remaining(self) -> int:
        """Return the number of unread bytes."""
        return len(self._view) - self._position

    def __len__(self) -> int:
        return len(self._view)
