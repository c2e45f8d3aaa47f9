"""Unit tests for the word-packed bit writer."""

from __future__ import annotations

import sys

import pytest
from structlog.testing import capture_logs

from varbits import StreamConfig, WordBitWriter

little_endian_only = pytest.mark.skipif(
    sys.byteorder != "little", reason="byte layout follows the host byte order"
)


def written_stream(writer: WordBitWriter) -> str:
    return writer.stream_padded()[: writer.bit_length()]


class TestWriteBits:
    """Test raw bit writes."""

    def test_write_bits(self, writer: WordBitWriter) -> None:
        """Test that the first bit written is bit 0 of the first word."""
        writer.write_bits(0b101, 3)
        writer.write_bits(0b1, 1)

        assert writer.bit_length() == 4
        assert writer.words() == [0b1101]
        assert written_stream(writer) == "1011"

    def test_masks_high_bits(self, writer: WordBitWriter) -> None:
        """Test that bits above num_bits are ignored."""
        writer.write_bits(0xFF, 4)
        writer.write_bits(-1, 2)

        assert writer.words() == [0b11_1111]
        assert writer.bit_length() == 6

    def test_write_zero_bits(self, writer: WordBitWriter) -> None:
        """Test that writing 0 bits is a no-op."""
        writer.write_bits(0xFF, 0)

        assert writer.bit_length() == 0
        assert writer.words() == []

    def test_split_across_words(self, writer: WordBitWriter) -> None:
        """Test a write straddling a word boundary."""
        writer.write_bits(0, 60)
        writer.write_bits(0xFF, 8)

        assert writer.bit_length() == 68
        assert writer.words() == [0xF << 60, 0xF]

    def test_full_word(self, writer: WordBitWriter) -> None:
        """Test writing exactly 64 bits, then one more."""
        writer.write_bits((1 << 64) - 1, 64)
        assert writer.words() == [(1 << 64) - 1]

        writer.write_bits(1, 1)
        assert writer.words() == [(1 << 64) - 1, 1]
        assert writer.bit_length() == 65

    def test_num_bits_bounds(self, writer: WordBitWriter) -> None:
        """Test that more than 64 bits per write is rejected."""
        with pytest.raises(ValueError, match="num_bits must be 0-64"):
            writer.write_bits(0, 65)
        with pytest.raises(ValueError, match="num_bits must be 0-64"):
            writer.write_bits(0, -1)
        assert writer.bit_length() == 0

    def test_never_overwrites(self, writer: WordBitWriter) -> None:
        """Test that later writes leave earlier bits untouched."""
        writer.write_bits(0b1, 1)
        writer.write_bits(0, 64)
        writer.write_bits(0b1, 1)

        assert written_stream(writer) == "1" + "0" * 64 + "1"

    def test_small_words(self) -> None:
        """Test a 64-bit write spread over 8-bit words."""
        writer = WordBitWriter(StreamConfig(word_bits=8))
        writer.write_bits(0b101, 3)
        writer.write_bits((1 << 64) - 1, 64)

        assert writer.bit_length() == 67
        assert writer.words() == [0b1111_1101] + [0xFF] * 7 + [0b111]


class TestWriteStream:
    """Test stream and bitset helpers."""

    def test_write_stream(self, writer: WordBitWriter) -> None:
        """Test that '01' is written as 0b10."""
        writer.write_stream("01")

        assert writer.words() == [0b10]
        assert written_stream(writer) == "01"

    def test_write_stream_too_long(self, writer: WordBitWriter) -> None:
        """Test that a stream longer than 64 characters is rejected."""
        with pytest.raises(ValueError):
            writer.write_stream("0" * 65)

    def test_write_bitset(self, writer: WordBitWriter) -> None:
        """Test writing all or part of a bitset."""
        writer.write_bitset(0b0000_0101, 8)
        writer.write_bitset(0b0000_0101, 8, 3)

        assert written_stream(writer) == "10100000" + "101"

    def test_write_bitset_larger_than_size(self, writer: WordBitWriter) -> None:
        """Test that more bits than the bitset holds are rejected."""
        with pytest.raises(ValueError, match="num_bits must be 0-4"):
            writer.write_bitset(0xFF, 4, 8)
        assert writer.bit_length() == 0


class TestOutput:
    """Test byte and stream extraction."""

    def test_data_size_bytes(self, writer: WordBitWriter) -> None:
        """Test the byte size rounds up."""
        assert writer.data_size_bytes() == 0
        writer.write_bits(0, 9)
        assert writer.data_size_bytes() == 2

    @little_endian_only
    def test_data_copy(self, writer: WordBitWriter) -> None:
        """Test that only the bytes holding written bits are copied."""
        writer.write_bits(0x1234, 16)
        writer.write_bits(1, 1)

        assert writer.data_copy() == b"\x34\x12\x01"
        assert writer.to_bytes() == writer.data_copy()

    def test_data_view(self, writer: WordBitWriter) -> None:
        """Test the read-only byte view."""
        writer.write_bits(0xABC, 12)
        view = writer.data()

        assert view.readonly
        assert len(view) == 2
        assert bytes(view) == writer.data_copy()

    def test_empty(self, writer: WordBitWriter) -> None:
        """Test an empty writer."""
        assert writer.data_copy() == b""
        assert writer.stream_padded() == ""

    def test_stream_padded(self, writer: WordBitWriter) -> None:
        """Test the debug stream is padded to the word size."""
        writer.write_stream("101")

        assert writer.stream_padded() == "101" + "0" * 61

    def test_stream_padded_small_words(self) -> None:
        """Test padding with 8-bit words."""
        writer = WordBitWriter(StreamConfig(word_bits=8))
        writer.write_stream("101")

        assert writer.stream_padded() == "10100000"

    def test_words_is_a_copy(self, writer: WordBitWriter) -> None:
        """Test that the returned word list can't alter the writer."""
        writer.write_bits(1, 1)
        writer.words().append(5)

        assert writer.words() == [1]


def test_creation_is_logged() -> None:
    """Test the debug event emitted on creation."""
    with capture_logs() as logs:
        WordBitWriter(StreamConfig(word_bits=16))

    assert logs == [{"event": "bit writer created", "word_bits": 16, "log_level": "debug"}]
