"""End-to-end tests decoding realistic file headers."""

from __future__ import annotations

import struct
from typing import Annotated, ClassVar

import pytest

from endianness import (
    I32,
    U16,
    U32,
    BaseRecord,
    ByteCursor,
    ByteOrder,
    FixedBytes,
    InsufficientBytesError,
    decode_record,
    read_u32,
    record_size,
)


class PcapGlobalHeader(BaseRecord):
    """libpcap global header, written in the capturing host's order."""

    magic: U32
    version_major: U16
    version_minor: U16
    thiszone: I32
    sigfigs: U32
    snaplen: U32
    network: U32


class WavFmtChunk(BaseRecord):
    """RIFF 'fmt ' chunk body."""

    chunk_id: Annotated[bytes, FixedBytes(length=4)]
    chunk_size: U32
    audio_format: U16
    channels: U16
    sample_rate: U32
    byte_rate: U32
    block_align: U16
    bits_per_sample: U16

    endianness_order: ClassVar[ByteOrder] = ByteOrder.LITTLE_ENDIAN


PCAP_MAGIC = 0xA1B2C3D4


def _pcap_header(prefix: str) -> bytes:
    return struct.pack(prefix + "IHHiIII", PCAP_MAGIC, 2, 4, -3600, 0, 65535, 1)


def _wav_file() -> bytes:
    fmt = struct.pack("<4sIHHIIHH", b"fmt ", 16, 1, 2, 44100, 176400, 4, 16)
    return b"RIFF" + struct.pack("<I", 4 + len(fmt)) + b"WAVE" + fmt


def _detect_order(data: bytes) -> ByteOrder:
    """Pick the byte order whose reading of the magic number matches."""
    if read_u32(data, ByteOrder.BIG_ENDIAN) == PCAP_MAGIC:
        return ByteOrder.BIG_ENDIAN
    return ByteOrder.LITTLE_ENDIAN


class TestEndToEndWorkflow:
    """Test decoding complete file headers."""

    @pytest.mark.parametrize(
        "prefix,expected", [(">", ByteOrder.BIG_ENDIAN), ("<", ByteOrder.LITTLE_ENDIAN)]
    )
    def test_pcap_header(self, prefix: str, expected: ByteOrder) -> None:
        """Test pcap header decodes after detecting order from the magic."""
        data = _pcap_header(prefix)
        order = _detect_order(data)
        assert order is expected

        header = decode_record(PcapGlobalHeader, data, order=order)
        assert header.magic == PCAP_MAGIC
        assert (header.version_major, header.version_minor) == (2, 4)
        assert header.thiszone == -3600
        assert header.snaplen == 65535
        assert header.network == 1

    def test_wav_header_with_cursor(self) -> None:
        """Test cursor and record decoding share one WAV buffer."""
        data = _wav_file()

        cursor = ByteCursor(data, order=ByteOrder.LITTLE_ENDIAN)
        assert cursor.read_bytes(4) == b"RIFF"
        assert cursor.read_u32() == len(data) - 8
        assert cursor.read_bytes(4) == b"WAVE"

        chunk = decode_record(WavFmtChunk, data, offset=cursor.tell())
        cursor.skip(record_size(WavFmtChunk))

        assert chunk.chunk_id == b"fmt "
        assert chunk.channels == 2
        assert chunk.sample_rate == 44100
        assert chunk.bits_per_sample == 16
        assert cursor.remaining() == 0


class TestErrorRecovery:
    """Test truncated input is reported without partial results."""

    def test_truncated_pcap_header(self) -> None:
        """Test a cut-off pcap header reports the missing bytes."""
        data = _pcap_header("<")[:20]

        with pytest.raises(InsufficientBytesError) as exc_info:
            decode_record(PcapGlobalHeader, data, order=ByteOrder.LITTLE_ENDIAN)

        assert exc_info.value.required == 24
        assert exc_info.value.actual == 20

    def test_cursor_continues_after_failed_read(self) -> None:
        """Test a cursor stays usable after a short read."""
        cursor = ByteCursor(_wav_file()[:14], order=ByteOrder.LITTLE_ENDIAN)
        cursor.seek(12)

        with pytest.raises(InsufficientBytesError):
            cursor.read_u32()

        assert cursor.tell() == 12
        assert cursor.read_bytes(2) == b"fm"
