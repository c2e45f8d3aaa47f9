"""Encode and decode CLI commands."""

from __future__ import annotations

import argparse

from ..codec.decoder import decode, decode_all
from ..codec.encoder import encode_to_writer
from ..codec.params import VariableWidthParams
from ..config import StreamConfig


def params_from_args(args: argparse.Namespace) -> VariableWidthParams:
    """Build variable-width parameters from parsed arguments.

    Raises:
        pydantic.ValidationError: If the parameters are invalid
    """
    return VariableWidthParams(
        width=args.width,
        chunk_length=args.chunk,
        signed=args.signed,
        zigzag_exponent=args.zigzag,
    )


def run_encode(args: argparse.Namespace) -> None:
    """Encode the given values and print the bit stream and its bytes.

    Args:
        args: Parsed arguments of the ``encode`` command
    """
    params = params_from_args(args)
    config = StreamConfig(word_bits=args.word_bits)
    writer = encode_to_writer(args.values, params, config)

    stream = writer.stream_padded()[: writer.bit_length()]
    print(f"Stream: {stream}")
    print(f"Bits:   {writer.bit_length()} (max {params.max_bits() * len(args.values)})")
    print(f"Bytes:  {writer.data_size_bytes()}")
    print(f"Hex:    {writer.data_copy().hex()}")


def run_decode(args: argparse.Namespace) -> None:
    """Decode values from a hex string and print them, one per line.

    Args:
        args: Parsed arguments of the ``decode`` command

    Raises:
        ValueError: If the input is not valid hex
        DecodeError: If the stream is truncated
    """
    params = params_from_args(args)
    config = StreamConfig(word_bits=args.word_bits)
    data = bytes.fromhex(args.data)

    if args.count is None:
        values = decode_all(data, params, config)
    else:
        values = decode(data, params, args.count, config)

    for value in values:
        print(value)
