"""Encoded size calculation utilities.

This module provides functions to calculate the size of variable-width encoded
values without actually encoding them.
"""

from __future__ import annotations

from typing import Iterable

from ..codec.params import VariableWidthParams
from ..codec.varint import check_params, check_unsigned
from ..codec.zigzag import encode_zigzag_block
from .bits import num_bits_to_num_words


def variable_width_bits(value: int, chunk_length: int, width: int = 64) -> int:
    """Calculate the number of bits an unsigned value takes with the variable-width encoding.

    Args:
        value: Unsigned integer that fits in ``width`` bits
        chunk_length: Number of payload bits per chunk
        width: Width of the value type (8, 16, 32 or 64)

    Returns:
        Size in bits, payload and signal bits included

    Raises:
        ValueError: If parameters are invalid or value doesn't fit in width

    Example:
        >>> variable_width_bits(255, 4)
        10
        >>> variable_width_bits(255, 4, width=8)
        9
    """
    check_params(chunk_length, width)
    check_unsigned(value, width)

    num_bits = 0
    payload = 0
    while payload < width:
        if payload + chunk_length >= width:
            return num_bits + width - payload
        num_bits += chunk_length + 1
        payload += chunk_length
        value >>= chunk_length
        if not value:
            break
    return num_bits


def encoded_bits(values: Iterable[int], params: VariableWidthParams) -> int:
    """Calculate the size in bits of a sequence encoded with varbits.encode().

    Example:
        >>> params = VariableWidthParams(width=16, chunk_length=4, signed=True)
        >>> encoded_bits([0, -1, 7], params)
        15
    """
    total = 0
    for value in values:
        if params.signed:
            value = encode_zigzag_block(value, params.zigzag_exponent)
        total += variable_width_bits(value, params.chunk_length, params.width)
    return total


def encoded_size(values: Iterable[int], params: VariableWidthParams) -> int:
    """Calculate the size in bytes of a sequence encoded with varbits.encode().

    Returns:
        Size in bytes (rounded up to nearest byte)
    """
    return num_bits_to_num_words(encoded_bits(values, params), 8)
