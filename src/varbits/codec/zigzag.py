"""ZigZag mapping between signed and unsigned 64-bit integers.

Motivation: -1 is 0xFF...FF in two's complement, which doesn't work very well
with the variable-width encoding, as it prefers values with as many high zero
bits as possible. ZigZag interleaves negative and non-negative values so that
small magnitudes of either sign map to small unsigned values.
"""

from __future__ import annotations

from ..utils.bits import get_lower_bits

INT64_MIN = -(1 << 63)
INT64_MAX = (1 << 63) - 1
UINT64_MAX = (1 << 64) - 1


def _check_int64(value: int) -> None:
    if value < INT64_MIN or value > INT64_MAX:
        raise ValueError(f"Value {value} doesn't fit in a signed 64-bit integer")


def _check_uint64(value: int) -> None:
    if value < 0 or value > UINT64_MAX:
        raise ValueError(f"Value {value} doesn't fit in an unsigned 64-bit integer")


def _check_block_exponent(block_exponent: int) -> None:
    if block_exponent < 0 or block_exponent >= 64:
        raise ValueError(f"block_exponent must be 0-63, got {block_exponent}")


def encode_zigzag(value: int) -> int:
    """Encode a signed integer as unsigned in zigzag order.

    0 -> 0, -1 -> 1, 1 -> 2, -2 -> 3, 2 -> 4, ...

    Args:
        value: Signed 64-bit integer

    Returns:
        Unsigned 64-bit integer

    Raises:
        ValueError: If value doesn't fit in 64 signed bits
    """
    _check_int64(value)
    # >> on a Python int is arithmetic, so (value >> 63) is 0 or -1
    return ((value << 1) ^ (value >> 63)) & UINT64_MAX


def decode_zigzag(value: int) -> int:
    """Decode an unsigned integer produced by encode_zigzag()."""
    _check_uint64(value)
    if value & 1:
        # Negative: 1 -> -1, 3 -> -2, 5 -> -3
        return -1 - (value >> 1)
    # Non-negative: 0 -> 0, 2 -> 1, 4 -> 2
    return value >> 1


def encode_zigzag_block(value: int, block_exponent: int) -> int:
    """Encode a signed integer as unsigned, zigzagging blocks of 2**block_exponent.

    This is a generalized version of encode_zigzag() designed to favor small
    positive numbers: the low ``block_exponent`` bits of the magnitude are kept
    untouched and only whole blocks alternate sign. With ``block_exponent`` 0
    it degenerates into encode_zigzag().

    Order of values when block_exponent is 1 (the position is the encoded value):
        0, 1, -1, -2, 2, 3, -3, -4, 4, 5, -5, -6, 6, 7, -7, -8

    Order of values when block_exponent is 2:
        0, 1, 2, 3, -1, -2, -3, -4, 4, 5, 6, 7, -5, -6, -7, -8

    Args:
        value: Signed 64-bit integer
        block_exponent: Number of low magnitude bits to preserve (0-63)

    Returns:
        Unsigned 64-bit integer

    Raises:
        ValueError: If value doesn't fit in 64 signed bits or block_exponent >= 64
    """
    _check_int64(value)
    _check_block_exponent(block_exponent)
    magnitude = value if value >= 0 else -value - 1
    block_num = ((magnitude >> block_exponent) << 1) | (0 if value >= 0 else 1)
    pos = get_lower_bits(magnitude, block_exponent)
    return (block_num << block_exponent) + pos


def decode_zigzag_block(value: int, block_exponent: int) -> int:
    """Decode an unsigned integer produced by encode_zigzag_block().

    ``block_exponent`` must be the same that was used for encoding.
    """
    _check_uint64(value)
    _check_block_exponent(block_exponent)
    block_num = value >> block_exponent
    pos = get_lower_bits(value, block_exponent)
    if block_num & 1:
        return -1 - ((block_num >> 1) << block_exponent) - pos
    return ((block_num >> 1) << block_exponent) + pos
