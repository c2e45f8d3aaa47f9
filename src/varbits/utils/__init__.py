"""Utility functions for varbits.

This module provides bit string conversions, size calculation, and other utilities.
"""

from __future__ import annotations

from .bits import (
    bits_to_stream,
    bitset_to_stream,
    buffer_to_stream,
    get_lower_bits,
    num_bits_to_num_words,
    pad_to_word,
    stream_to_bits,
    stream_to_bitset,
    stream_to_buffer,
)
from .sizing import encoded_bits, encoded_size, variable_width_bits

__all__ = [
    # Conversions
    "num_bits_to_num_words",
    "get_lower_bits",
    "bits_to_stream",
    "stream_to_bits",
    "bitset_to_stream",
    "stream_to_bitset",
    "buffer_to_stream",
    "stream_to_buffer",
    "pad_to_word",
    # Sizing functions
    "variable_width_bits",
    "encoded_bits",
    "encoded_size",
]
