"""Batch encoder for sequences of variable-width integers.

This module provides the encode() function that writes a homogeneous sequence
of integers with the variable-width encoding and returns the resulting bytes.
"""

from __future__ import annotations

from typing import Iterable, Optional

from structlog import get_logger

from ..config import StreamConfig
from ..exceptions import EncodeError
from .params import VariableWidthParams
from .writer import WordBitWriter

logger = get_logger()


def encode(
    values: Iterable[int],
    params: VariableWidthParams,
    config: Optional[StreamConfig] = None,
) -> bytes:
    """Encode integers to a compact bit stream.

    Args:
        values: Integers to encode, in order
        params: Variable-width parameters shared by all values
        config: Word layout of the stream (default: 64-bit words)

    Returns:
        Bytes of the stream, zero-padded to a whole byte

    Raises:
        EncodeError: If a value doesn't fit the parameters

    Examples:
        ```python
        from varbits import VariableWidthParams, decode, encode

        params = VariableWidthParams(width=32, chunk_length=4, signed=True)
        data = encode([0, -1, 300], params)
        assert decode(data, params, count=3) == [0, -1, 300]
        ```
    """
    writer = encode_to_writer(values, params, config)
    return writer.data_copy()


def encode_to_writer(
    values: Iterable[int],
    params: VariableWidthParams,
    config: Optional[StreamConfig] = None,
) -> WordBitWriter:
    """Encode integers and return the writer, e.g. to inspect its bit stream.

    Raises:
        EncodeError: If a value doesn't fit the parameters
    """
    writer = WordBitWriter(config)
    for index, value in enumerate(values):
        if not params.min_value <= value <= params.max_value:
            raise EncodeError(
                f"Value {value} at index {index} out of bounds "
                f"[{params.min_value}, {params.max_value}] for width {params.width}"
            )
        if params.signed:
            writer.write_variable_width_signed(
                value, params.chunk_length, params.zigzag_exponent, params.width
            )
        else:
            writer.write_variable_width(value, params.chunk_length, params.width)

    logger.debug("values encoded", num_bits=writer.bit_length(), width=params.width)
    return writer
