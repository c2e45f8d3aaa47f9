"""Bit readers.

This module provides the abstract BitReader interface and WordBitReader, its
implementation over an immutable list of fixed-size words.

Readers are forward-only: there is no seeking or rewinding. Two notions of
end of stream are exposed:

- hard EOF (``reached_end()``): every bit of the buffer has been consumed.
- soft EOF (``only_zeroes_left()``): hard EOF, or only zero bits are left.
  Consumers expecting the stream to end with zero padding may stop there.
"""

from __future__ import annotations

import struct
from abc import ABC, abstractmethod
from typing import Optional, Union

from structlog import get_logger

from ..config import DEFAULT_CONFIG, StreamConfig
from ..utils.bits import bits_to_stream, get_lower_bits
from . import varint
from .writer import WORD_FORMATS, check_bitset_bits, check_num_bits

logger = get_logger()

BytesLike = Union[bytes, bytearray, memoryview]


class BitReader(ABC):
    """Abstract interface for reading sequences of bits.

    Implementations only provide ``read_bits()`` and ``reached_end()``;
    ``only_zeroes_left()`` may be overridden to detect soft EOF.
    """

    @abstractmethod
    def read_bits(self, num_bits: int) -> tuple[int, int]:
        """Read ``num_bits`` from the stream.

        Args:
            num_bits: Number of bits to read (0-64)

        Returns:
            Tuple of (bits, number of bits read). Fewer than ``num_bits`` are
            read only when the end of the stream is reached.

        Raises:
            ValueError: If num_bits is out of range
        """

    @abstractmethod
    def reached_end(self) -> bool:
        """Return True if the end of the buffer was reached."""

    def only_zeroes_left(self) -> bool:
        """Return True if the end was reached or only zero bits are left to read.

        Implementations are allowed to commit a "false negative" error, i.e.
        return False even if indeed only zeroes are left, but never a false
        positive. The default simply delegates to reached_end().
        """
        return self.reached_end()

    def read_stream(self, num_bits: int) -> str:
        """Read ``num_bits`` and return them as a left-to-right string of '0' and '1'.

        The string is shorter than ``num_bits`` if the end was reached.
        """
        bits, num_read = self.read_bits(num_bits)
        return bits_to_stream(bits, num_read)

    def read_bitset(self, size: int, num_bits: Optional[int] = None) -> tuple[int, int]:
        """Read the first ``num_bits`` (default: all ``size``) bits of a bitset.

        Returns:
            Tuple of (bitset, number of bits read), as read_bits()

        Raises:
            ValueError: If num_bits is greater than size
        """
        if num_bits is None:
            num_bits = size
        check_bitset_bits(num_bits, size)
        return self.read_bits(num_bits)

    def read_variable_width(self, chunk_length: int, width: int = 64) -> Optional[int]:
        """Read a value encoded with BitWriter.write_variable_width().

        Reader and writer must use the same ``chunk_length`` and ``width``.

        Returns:
            The value, or None if the bit stream ends prematurely
        """
        return varint.read_variable_width(self, chunk_length, width)

    def read_variable_width_signed(
        self, chunk_length: int, zigzag_exponent: int, width: int = 64
    ) -> Optional[int]:
        return varint.read_variable_width_signed(self, chunk_length, zigzag_exponent, width)

    # Fixed-width shorthands, each returns None if the bit stream ends prematurely.

    def read_variable_width_u64(self, chunk_length: int) -> Optional[int]:
        return self.read_variable_width(chunk_length, 64)

    def read_variable_width_u32(self, chunk_length: int) -> Optional[int]:
        return self.read_variable_width(chunk_length, 32)

    def read_variable_width_u16(self, chunk_length: int) -> Optional[int]:
        return self.read_variable_width(chunk_length, 16)

    def read_variable_width_u8(self, chunk_length: int) -> Optional[int]:
        return self.read_variable_width(chunk_length, 8)

    def read_variable_width_s64(self, chunk_length: int, zigzag_exponent: int) -> Optional[int]:
        return self.read_variable_width_signed(chunk_length, zigzag_exponent, 64)

    def read_variable_width_s32(self, chunk_length: int, zigzag_exponent: int) -> Optional[int]:
        return self.read_variable_width_signed(chunk_length, zigzag_exponent, 32)

    def read_variable_width_s16(self, chunk_length: int, zigzag_exponent: int) -> Optional[int]:
        return self.read_variable_width_signed(chunk_length, zigzag_exponent, 16)

    def read_variable_width_s8(self, chunk_length: int, zigzag_exponent: int) -> Optional[int]:
        return self.read_variable_width_signed(chunk_length, zigzag_exponent, 8)


class WordBitReader(BitReader):
    """Reads bits from an immutable list of fixed-size words.

    Use one of the two constructors:

    - ``WordBitReader.from_words(words)`` takes ownership of a word list
      produced by a writer with the same word size. The list is not copied,
      and the caller must not use it afterwards.
    - ``WordBitReader.from_bytes(data)`` copies a byte buffer and casts it to
      words, zero-padding the last partial word.

    Example:
        >>> reader = WordBitReader.from_bytes(writer.data_copy())
        >>> bits, num_read = reader.read_bits(3)
        >>> value = reader.read_variable_width_u64(4)
    """

    def __init__(self, words: list[int], config: Optional[StreamConfig] = None) -> None:
        self._config = config or DEFAULT_CONFIG
        self._word_bits = self._config.word_bits
        self._buffer = words
        self._capacity = len(words) * self._word_bits
        self._pos = 0
        self.log = logger.new(word_bits=self._word_bits, capacity=self._capacity)
        self.log.debug("bit reader created")

    @classmethod
    def from_words(cls, words: list[int], config: Optional[StreamConfig] = None) -> WordBitReader:
        """Create a reader owning ``words``.

        Raises:
            ValueError: If a word doesn't fit the configured word size
        """
        word_bits = (config or DEFAULT_CONFIG).word_bits
        for word in words:
            if word < 0 or word >> word_bits:
                raise ValueError(f"Word {word} doesn't fit in {word_bits} bits")
        return cls(words, config)

    @classmethod
    def from_bytes(cls, data: BytesLike, config: Optional[StreamConfig] = None) -> WordBitReader:
        """Create a reader over a copy of ``data``."""
        config = config or DEFAULT_CONFIG
        padded = bytes(data)
        tail = len(padded) % config.word_bytes
        if tail:
            padded += b"\x00" * (config.word_bytes - tail)
        count = len(padded) // config.word_bytes
        words = list(struct.unpack(f"={count}{WORD_FORMATS[config.word_bits]}", padded))
        return cls(words, config)

    @property
    def config(self) -> StreamConfig:
        return self._config

    def read_bits(self, num_bits: int) -> tuple[int, int]:
        check_num_bits(num_bits)
        num_bits = min(num_bits, self._capacity - self._pos)

        bits = 0
        num_read = 0
        while num_read < num_bits:
            index, offset = divmod(self._pos, self._word_bits)
            chunk = min(num_bits - num_read, self._word_bits - offset)
            bits |= get_lower_bits(self._buffer[index] >> offset, chunk) << num_read
            num_read += chunk
            self._pos += chunk

        return bits, num_read

    def reached_end(self) -> bool:
        return self._pos >= self._capacity

    def only_zeroes_left(self) -> bool:
        if self.reached_end():
            return True

        # Only the last word is inspected, earlier positions report False.
        index, offset = divmod(self._pos, self._word_bits)
        if index != len(self._buffer) - 1:
            return False
        return not self._buffer[index] >> offset

    def position(self) -> int:
        """Return the number of bits consumed so far."""
        return self._pos

    def capacity(self) -> int:
        """Return the total number of bits in the buffer."""
        return self._capacity

    def bits_remaining(self) -> int:
        """Return the number of bits left before hard EOF."""
        return self._capacity - self._pos
