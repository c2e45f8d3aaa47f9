"""End-to-end integration tests."""

from __future__ import annotations

import sys
from dataclasses import dataclass

import pytest

from varbits import (
    BitReader,
    BitWriter,
    StreamConfig,
    VariableWidthParams,
    WordBitReader,
    WordBitWriter,
    decode,
    encode,
    encoded_size,
)

little_endian_only = pytest.mark.skipif(sys.byteorder != "little", reason="byte layout is native endian")

OPCODE_BITS = 3
OPERAND_CHUNK = 5
DELTA_CHUNK = 3
DELTA_EXPONENT = 1


@dataclass
class Record:
    """Instruction-like record mixing fixed and variable-width fields."""

    opcode: int  # 1-7, never zero so a record can't be mistaken for padding
    operand: int  # unsigned 32-bit
    deltas: list[int]  # signed 16-bit
    tag: str  # short bit string

    def write(self, writer: BitWriter) -> None:
        writer.write_bits(self.opcode, OPCODE_BITS)
        writer.write_variable_width_u32(self.operand, OPERAND_CHUNK)
        writer.write_variable_width_u8(len(self.deltas), 2)
        for delta in self.deltas:
            writer.write_variable_width_s16(delta, DELTA_CHUNK, DELTA_EXPONENT)
        writer.write_variable_width_u8(len(self.tag), 3)
        writer.write_stream(self.tag)

    @classmethod
    def read(cls, reader: BitReader) -> Record:
        opcode, num_read = reader.read_bits(OPCODE_BITS)
        assert num_read == OPCODE_BITS
        operand = reader.read_variable_width_u32(OPERAND_CHUNK)
        count = reader.read_variable_width_u8(2)
        assert operand is not None and count is not None
        deltas = [reader.read_variable_width_s16(DELTA_CHUNK, DELTA_EXPONENT) for _ in range(count)]
        tag_length = reader.read_variable_width_u8(3)
        assert tag_length is not None
        return cls(opcode, operand, deltas, reader.read_stream(tag_length))  # type: ignore[arg-type]


RECORDS = [
    Record(1, 0, [], ""),
    Record(2, 42, [0, -1, 1], "1"),
    Record(7, (1 << 32) - 1, [-32768, 32767], "0110"),
    Record(3, 1000, [5, -5, 200, -200, 0], "0000000000000001"),
    Record(4, 1 << 20, [0] * 40, "10"),
    Record(5, 7, [-3], ""),
]


def write_records(config: StreamConfig) -> WordBitWriter:
    writer = WordBitWriter(config)
    for record in RECORDS:
        record.write(writer)
    return writer


def read_records(reader: BitReader) -> list[Record]:
    records = []
    while not reader.only_zeroes_left():
        records.append(Record.read(reader))
    return records


class TestMixedStream:
    """Test a stream of records built from every kind of write."""

    def test_roundtrip_words(self, config: StreamConfig) -> None:
        """Test handing the word buffer to a reader."""
        writer = write_records(config)
        reader = WordBitReader.from_words(writer.words(), config)

        assert read_records(reader) == RECORDS
        assert reader.bits_remaining() < config.word_bits

    @little_endian_only
    def test_roundtrip_bytes(self, config: StreamConfig) -> None:
        """Test sending the bytes through a copy."""
        writer = write_records(config)
        data = bytearray(writer.data_copy())
        assert len(data) == writer.data_size_bytes()

        reader = WordBitReader.from_bytes(memoryview(data), config)
        assert read_records(reader) == RECORDS

    @little_endian_only
    def test_word_size_does_not_change_bytes(self) -> None:
        """Test that every word size produces the same bytes on little-endian hosts."""
        outputs = {write_records(StreamConfig(word_bits=bits)).data_copy() for bits in (8, 16, 32, 64)}
        assert len(outputs) == 1

    def test_stream_text_matches_words(self, config: StreamConfig) -> None:
        """Test that the padded stream and the buffer describe the same bits."""
        writer = write_records(config)
        stream = writer.stream_padded()

        assert len(stream) % config.word_bits == 0
        assert set(stream[writer.bit_length() :]) <= {"0"}

        reader = WordBitReader.from_words(writer.words(), config)
        assert reader.read_stream(min(64, writer.bit_length())) == stream[: min(64, writer.bit_length())]


class TestBatchCodec:
    """Test the batch helpers over every word size."""

    @little_endian_only
    def test_signed_roundtrip(
        self, config: StreamConfig, signed_params: VariableWidthParams, sample_values: list[int]
    ) -> None:
        """Test encode then decode of signed values."""
        data = encode(sample_values, signed_params, config)

        assert len(data) == encoded_size(sample_values, signed_params)
        assert decode(data, signed_params, len(sample_values), config) == sample_values

    @little_endian_only
    def test_all_widths(self) -> None:
        """Test every width with a chunk length that doesn't divide it."""
        for width in (8, 16, 32, 64):
            params = VariableWidthParams(width=width, chunk_length=7)
            values = [0, 1, 127, 128, (1 << width) - 1]
            assert decode(encode(values, params), params, len(values)) == values
