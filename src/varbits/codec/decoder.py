"""Batch decoder for sequences of variable-width integers.

This module provides the decode() and decode_all() functions, the inverse of
varbits.codec.encoder.encode().
"""

from __future__ import annotations

from typing import Optional

from structlog import get_logger

from ..config import StreamConfig
from ..exceptions import DecodeError
from .params import VariableWidthParams
from .reader import BitReader, BytesLike, WordBitReader

logger = get_logger()


def _read_value(reader: BitReader, params: VariableWidthParams) -> Optional[int]:
    if params.signed:
        return reader.read_variable_width_signed(
            params.chunk_length, params.zigzag_exponent, params.width
        )
    return reader.read_variable_width(params.chunk_length, params.width)


def decode(
    data: BytesLike,
    params: VariableWidthParams,
    count: int,
    config: Optional[StreamConfig] = None,
) -> list[int]:
    """Decode exactly ``count`` integers from a bit stream.

    Args:
        data: Bytes produced by encode() with the same parameters
        params: Variable-width parameters used for encoding
        count: Number of values to decode
        config: Word layout of the stream (default: 64-bit words)

    Returns:
        Decoded values, in order

    Raises:
        DecodeError: If the stream is truncated before ``count`` values are read
    """
    if count < 0:
        raise ValueError(f"count must be >= 0, got {count}")

    reader = WordBitReader.from_bytes(data, config)
    values = []
    for index in range(count):
        value = _read_value(reader, params)
        if value is None:
            logger.debug("decode failed", index=index, count=count, position=reader.position())
            raise DecodeError(
                f"Truncated data: stream ended while decoding value {index} of {count}"
            )
        values.append(value)
    return values


def decode_all(
    data: BytesLike,
    params: VariableWidthParams,
    config: Optional[StreamConfig] = None,
) -> list[int]:
    """Decode integers until only zero padding is left in the stream.

    Soft EOF is only detected inside the last word, so the result depends on
    ``config``: a trailing zero value that starts in the last word can't be
    told apart from the padding and is dropped, while one that starts in an
    earlier word is returned. For example ``[5, 0]`` at width 16 with 4-bit
    chunks decodes to ``[5]`` with 64-bit words but to ``[5, 0]`` with 8-bit
    words. Use decode() when the number of values is known.

    Raises:
        DecodeError: If the stream ends in the middle of a value
    """
    reader = WordBitReader.from_bytes(data, config)
    values = []
    while not reader.only_zeroes_left():
        value = _read_value(reader, params)
        if value is None:
            logger.debug("decode failed", index=len(values), position=reader.position())
            raise DecodeError(f"Truncated data: stream ended while decoding value {len(values)}")
        values.append(value)
    return values
