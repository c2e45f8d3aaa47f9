"""Conversions between words, bit strings and bitsets.

Terminology used across varbits:

- **bits**: an int holding up to 64 bits, the first bit is the lowest.
- **stream**: a str of '0' and '1' read left-to-right, i.e. the first bit is
  the first character and not the last one as in ``format(x, "b")``.
- **bitset**: an int of fixed size N whose conventional printed form
  ``format(x, "0Nb")`` is the reverse of its stream.

These helpers are meant for debugging and tests; the stream format is never
a wire format.
"""

from __future__ import annotations

from typing import Iterable, Optional

_STREAM_CHARS = frozenset("01")


def num_bits_to_num_words(num_bits: int, word_size: int) -> int:
    """Return how many words of ``word_size`` bits are needed for ``num_bits``.

    Example:
        >>> num_bits_to_num_words(9, 8)
        2
    """
    return (num_bits + (word_size - 1)) // word_size


def get_lower_bits(value: int, num_bits: int, width: int = 64) -> int:
    """Return ``value`` with all but the first ``num_bits`` bits set to zero.

    Args:
        value: Integer to mask (negative values are taken as two's complement)
        num_bits: Number of low bits to keep (0 to ``width``)
        width: Bit width of the type ``value`` belongs to

    Returns:
        The masked value; ``value`` unchanged when ``num_bits == width``.

    Raises:
        ValueError: If num_bits is out of range
    """
    if num_bits < 0 or num_bits > width:
        raise ValueError(f"num_bits must be 0-{width}, got {num_bits}")
    if num_bits == width:
        return value
    return value & ((1 << num_bits) - 1)


def _check_stream(stream: str, max_length: int) -> None:
    if len(stream) > max_length:
        raise ValueError(f"Stream length must be at most {max_length}, got {len(stream)}")
    if not _STREAM_CHARS.issuperset(stream):
        raise ValueError(f"Stream must contain only '0' and '1', got {stream!r}")


def bits_to_stream(bits: int, num_bits: int = 64) -> str:
    """Convert the first ``num_bits`` of a 64-bit word to a stream.

    Example:
        >>> bits_to_stream(0b110, 4)
        '0110'
    """
    return bitset_to_stream(bits, 64, num_bits)


def stream_to_bits(stream: str) -> int:
    """Convert a stream of at most 64 characters to a 64-bit word.

    Example:
        >>> stream_to_bits("01")
        2
    """
    return stream_to_bitset(stream, 64)


def bitset_to_stream(bits: int, size: int, num_bits: Optional[int] = None) -> str:
    """Convert the first ``num_bits`` of an N-bit set to a stream.

    Args:
        bits: Bitset value (only the low ``size`` bits are considered)
        size: Size of the bitset in bits
        num_bits: Number of bits to convert (default: all ``size`` bits)

    Returns:
        Left-to-right string of '0' and '1'
    """
    if num_bits is None:
        num_bits = size
    if num_bits < 0 or num_bits > size:
        raise ValueError(f"num_bits must be 0-{size}, got {num_bits}")
    if num_bits == 0:
        return ""
    # format() prints right-to-left, reverse to get the stream order
    return format(bits & ((1 << num_bits) - 1), f"0{num_bits}b")[::-1]


def stream_to_bitset(stream: str, size: int) -> int:
    """Convert a stream to an N-bit set.

    Raises:
        ValueError: If the stream is longer than ``size`` or has other characters
    """
    _check_stream(stream, size)
    if not stream:
        return 0
    return int(stream[::-1], 2)


def buffer_to_stream(buffer: Iterable[int], word_bits: int = 64) -> str:
    """Convert a buffer of words to a stream, ``word_bits`` characters per word."""
    return "".join(bitset_to_stream(word, word_bits) for word in buffer)


def stream_to_buffer(stream: str, word_bits: int = 64) -> list[int]:
    """Convert a stream to a buffer of words.

    A trailing partial word is completed with zero high bits.

    Example:
        >>> stream_to_buffer("1" * 9, 8)
        [255, 1]
    """
    return [
        stream_to_bitset(stream[start : start + word_bits], word_bits)
        for start in range(0, len(stream), word_bits)
    ]


def pad_to_word(stream: str, word_size: int) -> str:
    """Add '0' characters at the end of the stream until its length is a multiple of ``word_size``.

    Example:
        >>> pad_to_word("101", 8)
        '10100000'
    """
    tail_length = len(stream) % word_size
    if tail_length:
        stream += "0" * (word_size - tail_length)
    return stream
