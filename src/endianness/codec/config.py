"""Reusable reader defaults.

Byte order is always explicit on the per-type readers. ReaderConfig bundles a
default order and a starting offset for ByteCursor and record decoding.
"""

from __future__ import annotations

from dataclasses import dataclass

from ..byteorder import ByteOrder


@dataclass(frozen=True)
class ReaderConfig:
    """Defaults for sequential reads over one buffer.

    Attributes:
        order: Default byte order (ByteOrder, or "big"/"little"/"be"/"le"/">"/"<").
            Default big-endian, the network byte order.
        offset: Byte offset where reading starts (default 0)

    Examples:
        ```python
        from endianness import ByteCursor, ReaderConfig

        config = ReaderConfig(order="le", offset=4)
        cursor = ByteCursor.from_config(packet, config)
        ```
    """

    order: ByteOrder = ByteOrder.BIG_ENDIAN
    offset: int = 0

    def __post_init__(self) -> None:
        """Validate configuration parameters."""
        # Frozen dataclass: normalise through object.__setattr__
        object.__setattr__(self, "order", ByteOrder.parse(self.order))

        if self.offset < 0:
            raise ValueError(f"offset must be >= 0, got {self.offset}")
