"""Byte order selector.

ByteOrder is a closed two-value enumeration passed to every read. Decoding
never consults the host's native order; ``native()`` is informational.
"""

from __future__ import annotations

import enum
import sys

_ALIASES = {
    "big": "big",
    "be": "big",
    "big-endian": "big",
    "bigendian": "big",
    "motorola": "big",
    ">": "big",
    "!": "big",
    "little": "little",
    "le": "little",
    "little-endian": "little",
    "littleendian": "little",
    "intel": "little",
    "<": "little",
}


class ByteOrder(enum.Enum):
    """Order of bytes in the span being decoded.

    Members:
        BIG_ENDIAN: Byte 0 is the most significant byte (Motorola order)
        LITTLE_ENDIAN: Byte 0 is the least significant byte (Intel order)
    """

    BIG_ENDIAN = "big"
    LITTLE_ENDIAN = "little"

    # Aliases matching the names used in wire-format documents
    BigEndian = "big"
    LittleEndian = "little"

    @property
    def struct_prefix(self) -> str:
        """Prefix for ``struct`` format strings (">" or "<")."""
        return ">" if self is ByteOrder.BIG_ENDIAN else "<"

    @property
    def byteorder(self) -> str:
        """Name accepted by ``int.from_bytes`` ("big" or "little")."""
        return self.value

    @classmethod
    def parse(cls, value: str | ByteOrder) -> ByteOrder:
        """Resolve a byte order from configuration text.

        Args:
            value: A ByteOrder, or one of "big", "be", ">", "little", "le", "<"
                (case-insensitive)

        Returns:
            Matching ByteOrder member

        Raises:
            ValueError: If the text names no known byte order
        """
        if isinstance(value, ByteOrder):
            return value

        key = _ALIASES.get(str(value).strip().lower())
        if key is None:
            raise ValueError(f"Invalid byte order '{value}'. Expected 'big' or 'little'.")
        return cls(key)

    @classmethod
    def native(cls) -> ByteOrder:
        """Return the host CPU's byte order."""
        return cls(sys.byteorder)
