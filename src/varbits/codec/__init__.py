"""Bit stream codec for varbits.

This module provides the bit writer/reader pair, the zigzag mapping and the
variable-width chunked encoding built on top of them.
"""

from __future__ import annotations

from .decoder import decode, decode_all
from .encoder import encode, encode_to_writer
from .params import VariableWidthParams
from .reader import BitReader, WordBitReader
from .writer import BitWriter, WordBitWriter
from .zigzag import decode_zigzag, decode_zigzag_block, encode_zigzag, encode_zigzag_block

__all__ = [
    "BitWriter",
    "WordBitWriter",
    "BitReader",
    "WordBitReader",
    "encode_zigzag",
    "decode_zigzag",
    "encode_zigzag_block",
    "decode_zigzag_block",
    "encode",
    "encode_to_writer",
    "decode",
    "decode_all",
    "VariableWidthParams",
]
