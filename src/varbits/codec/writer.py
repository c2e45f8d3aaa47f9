"""Bit writers.

This module provides the abstract BitWriter interface and WordBitWriter, its
implementation backed by a growable list of fixed-size words.

Bits are appended in stream order: the first bit written is bit 0 of the
first word. Words are laid out in the host's native byte order when the
buffer is turned into bytes.
"""

from __future__ import annotations

import struct
from abc import ABC, abstractmethod
from typing import Optional

from structlog import get_logger

from ..config import DEFAULT_CONFIG, StreamConfig
from ..utils.bits import buffer_to_stream, get_lower_bits, num_bits_to_num_words, stream_to_bits
from . import varint

logger = get_logger()

MAX_BITS_PER_WRITE = 64

# struct format characters with standard sizes in native byte order ("=")
WORD_FORMATS = {8: "B", 16: "H", 32: "I", 64: "Q"}


def check_num_bits(num_bits: int) -> None:
    """Raise ValueError unless a raw operation transfers 0 to 64 bits."""
    if num_bits < 0 or num_bits > MAX_BITS_PER_WRITE:
        raise ValueError(f"num_bits must be 0-{MAX_BITS_PER_WRITE}, got {num_bits}")


def check_bitset_bits(num_bits: int, size: int) -> None:
    """Raise ValueError unless ``num_bits`` of a ``size``-bit set are requested."""
    if num_bits < 0 or num_bits > size:
        raise ValueError(f"num_bits must be 0-{size}, got {num_bits}")


class BitWriter(ABC):
    """Abstract interface for writing sequences of bits.

    Implementations only provide the raw operations ``write_bits()``,
    ``bit_length()`` and ``data_copy()``; everything else is built on top of
    them.
    """

    @abstractmethod
    def write_bits(self, bits: int, num_bits: int) -> None:
        """Write the lower ``num_bits`` of ``bits`` to the stream.

        Args:
            bits: Integer holding the bits to write (higher bits are ignored)
            num_bits: Number of bits to write (0-64)

        Raises:
            ValueError: If num_bits is out of range
        """

    @abstractmethod
    def bit_length(self) -> int:
        """Return the number of bits written so far."""

    @abstractmethod
    def data_copy(self) -> bytes:
        """Return a byte copy of the written bits, zero-padded to a whole byte."""

    def data_size_bytes(self) -> int:
        """Return the size of the written data in bytes."""
        return num_bits_to_num_words(self.bit_length(), 8)

    def write_stream(self, stream: str) -> None:
        """Write a left-to-right string of '0' and '1' (at most 64 characters).

        The string doesn't represent a number but bits in the order they come
        from the encoder: "01" is written as 0b10, not 0b01.
        """
        self.write_bits(stream_to_bits(stream), len(stream))

    def write_bitset(self, bits: int, size: int, num_bits: Optional[int] = None) -> None:
        """Write the first ``num_bits`` (default: all ``size``) bits of a bitset.

        Raises:
            ValueError: If num_bits is greater than size
        """
        if num_bits is None:
            num_bits = size
        check_bitset_bits(num_bits, size)
        self.write_bits(bits, num_bits)

    def write_variable_width(self, value: int, chunk_length: int, width: int = 64) -> None:
        """Write an unsigned ``width``-bit value in chunks of ``chunk_length`` bits.

        Each chunk is followed by a signal bit: 0 - no more chunks to follow,
        1 - more chunks to follow. For example 255 is encoded into
        ``1111 1 1111 0`` for chunk length 4. The last chunk can be truncated
        and its signal bit omitted once the entire payload (for example 16
        bits for a 16-bit value) has been written.
        """
        varint.write_variable_width(self, value, chunk_length, width)

    def write_variable_width_signed(
        self, value: int, chunk_length: int, zigzag_exponent: int, width: int = 64
    ) -> None:
        """Write a signed ``width``-bit value, zigzag encoded, in chunks of ``chunk_length`` bits."""
        varint.write_variable_width_signed(self, value, chunk_length, zigzag_exponent, width)

    def write_variable_width_u64(self, value: int, chunk_length: int) -> None:
        self.write_variable_width(value, chunk_length, 64)

    def write_variable_width_u32(self, value: int, chunk_length: int) -> None:
        self.write_variable_width(value, chunk_length, 32)

    def write_variable_width_u16(self, value: int, chunk_length: int) -> None:
        self.write_variable_width(value, chunk_length, 16)

    def write_variable_width_u8(self, value: int, chunk_length: int) -> None:
        self.write_variable_width(value, chunk_length, 8)

    def write_variable_width_s64(self, value: int, chunk_length: int, zigzag_exponent: int) -> None:
        self.write_variable_width_signed(value, chunk_length, zigzag_exponent, 64)

    def write_variable_width_s32(self, value: int, chunk_length: int, zigzag_exponent: int) -> None:
        self.write_variable_width_signed(value, chunk_length, zigzag_exponent, 32)

    def write_variable_width_s16(self, value: int, chunk_length: int, zigzag_exponent: int) -> None:
        self.write_variable_width_signed(value, chunk_length, zigzag_exponent, 16)

    def write_variable_width_s8(self, value: int, chunk_length: int, zigzag_exponent: int) -> None:
        self.write_variable_width_signed(value, chunk_length, zigzag_exponent, 8)


class WordBitWriter(BitWriter):
    """Writes bits into a growable list of fixed-size words.

    The writer is append-only: no write ever touches previously written bits.
    Unused high bits of the last word are always zero.

    Example:
        >>> writer = WordBitWriter()
        >>> writer.write_bits(0b101, 3)
        >>> writer.write_variable_width_u64(255, 4)
        >>> writer.bit_length()
        13
        >>> data = writer.data_copy()
    """

    def __init__(self, config: Optional[StreamConfig] = None) -> None:
        """Initialize an empty writer.

        Args:
            config: Word layout (default: 64-bit words)
        """
        self._config = config or DEFAULT_CONFIG
        self._word_bits = self._config.word_bits
        self._buffer: list[int] = []
        # Total number of bits written so far.
        self._end = 0
        self.log = logger.new(word_bits=self._word_bits)
        self.log.debug("bit writer created")

    @property
    def config(self) -> StreamConfig:
        return self._config

    def write_bits(self, bits: int, num_bits: int) -> None:
        check_num_bits(num_bits)
        if num_bits == 0:
            return

        # Negative ints are taken as two's complement.
        bits &= (1 << num_bits) - 1
        offset = self._end % self._word_bits
        remaining = num_bits
        while remaining:
            if offset == 0:
                # Last word is full (or there is none yet).
                self._buffer.append(0)
            chunk = min(remaining, self._word_bits - offset)
            self._buffer[-1] |= get_lower_bits(bits, chunk) << offset
            bits >>= chunk
            remaining -= chunk
            offset = (offset + chunk) % self._word_bits

        self._end += num_bits

    def bit_length(self) -> int:
        return self._end

    def words(self) -> list[int]:
        """Return a copy of the word buffer."""
        return list(self._buffer)

    def _pack(self) -> bytes:
        fmt = f"={len(self._buffer)}{WORD_FORMATS[self._word_bits]}"
        return struct.pack(fmt, *self._buffer)

    def data(self) -> memoryview:
        """Return a read-only byte view of the written bits.

        The view covers ``data_size_bytes()`` bytes of the word buffer as laid
        out in memory.
        """
        return memoryview(self._pack()[: self.data_size_bytes()])

    def data_copy(self) -> bytes:
        return self._pack()[: self.data_size_bytes()]

    def to_bytes(self) -> bytes:
        """Alias of data_copy()."""
        return self.data_copy()

    def stream_padded(self) -> str:
        """Return the written bits as a stream, zero-padded to a multiple of the word size."""
        return buffer_to_stream(self._buffer, self._word_bits)
