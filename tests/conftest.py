"""Pytest configuration and shared fixtures."""

from __future__ import annotations

import pytest

from endianness import ByteOrder


@pytest.fixture
def sample_buffer() -> bytes:
    """Buffer used by the decoding examples: 0x00 0x80 0x80 0x00."""
    return bytes([0x00, 0x80, 0x80, 0x00])


@pytest.fixture(params=[ByteOrder.BIG_ENDIAN, ByteOrder.LITTLE_ENDIAN], ids=["be", "le"])
def order(request: pytest.FixtureRequest) -> ByteOrder:
    """Each byte order in turn."""
    return request.param
