"""varbits: Variable-Width Bit Stream Codec

A Python library for packing and unpacking arbitrary-width integers into a
dense bit stream. It is the primitive a structural encoder builds on to get a
compact binary representation of typed data.

Key Features:
- Word-packed bit writer and forward-only bit reader
- ZigZag mapping of signed integers, plain and block variants
- Self-terminating variable-width chunked encoding
- Left-to-right bit string helpers for debugging and tests

Quick Start:
    >>> from varbits import WordBitReader, WordBitWriter
    >>>
    >>> writer = WordBitWriter()
    >>> writer.write_bits(5, 3)
    >>> writer.write_variable_width_u64(255, 4)
    >>> writer.write_variable_width_s32(-7, 4, 0)
    >>>
    >>> reader = WordBitReader.from_bytes(writer.data_copy())
    >>> reader.read_bits(3)
    (5, 3)
    >>> reader.read_variable_width_u64(4)
    255
    >>> reader.read_variable_width_s32(4, 0)
    -7
"""

from __future__ import annotations

from .codec import (
    BitReader,
    BitWriter,
    VariableWidthParams,
    WordBitReader,
    WordBitWriter,
    decode,
    decode_all,
    decode_zigzag,
    decode_zigzag_block,
    encode,
    encode_to_writer,
    encode_zigzag,
    encode_zigzag_block,
)
from .config import StreamConfig
from .exceptions import DecodeError, EncodeError, VarbitsError
from .utils import (
    bits_to_stream,
    bitset_to_stream,
    buffer_to_stream,
    encoded_bits,
    encoded_size,
    get_lower_bits,
    num_bits_to_num_words,
    pad_to_word,
    stream_to_bits,
    stream_to_bitset,
    stream_to_buffer,
    variable_width_bits,
)

__version__ = "0.1.0"

__all__ = [
    # Core API
    "BitWriter",
    "BitReader",
    "WordBitWriter",
    "WordBitReader",
    "StreamConfig",
    # ZigZag
    "encode_zigzag",
    "decode_zigzag",
    "encode_zigzag_block",
    "decode_zigzag_block",
    # Batch codec
    "VariableWidthParams",
    "encode",
    "encode_to_writer",
    "decode",
    "decode_all",
    # Exceptions
    "VarbitsError",
    "EncodeError",
    "DecodeError",
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
    # Sizing
    "variable_width_bits",
    "encoded_bits",
    "encoded_size",
    # Version
    "__version__",
]
