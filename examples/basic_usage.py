#!/usr/bin/env python3
"""Basic usage example for varbits.

This example demonstrates:
1. Writing fixed-width and variable-width fields to a bit stream
2. Reading them back from the bytes
3. Comparing chunk lengths for a batch of signed samples
"""

from __future__ import annotations

from varbits import (
    VariableWidthParams,
    WordBitReader,
    WordBitWriter,
    decode,
    encode,
    encode_zigzag_block,
    encoded_size,
)


def main() -> None:
    """Run the basic usage example."""
    print("=" * 60)
    print("varbits Basic Usage Example")
    print("=" * 60)
    print()

    # Write a few fields by hand
    print("1. Writing fields...")
    writer = WordBitWriter()
    writer.write_bits(0b101, 3)
    writer.write_variable_width_u64(255, 4)
    writer.write_variable_width_s16(-300, 4, 2)
    writer.write_stream("0110")

    print(f"   Stream: {writer.stream_padded()[: writer.bit_length()]}")
    print(f"   Size: {writer.bit_length()} bits = {writer.data_size_bytes()} bytes")
    print()

    # Read them back
    print("2. Reading fields back...")
    reader = WordBitReader.from_bytes(writer.data_copy())
    header, _ = reader.read_bits(3)
    print(f"   Header: {header:03b}")
    print(f"   Unsigned: {reader.read_variable_width_u64(4)}")
    print(f"   Signed: {reader.read_variable_width_s16(4, 2)}")
    print(f"   Tag: {reader.read_stream(4)}")
    print(f"   Only padding left: {reader.only_zeroes_left()}")
    print()

    # ZigZag keeps small magnitudes small
    print("3. Block zigzag (k=2)...")
    for value in (-4, -1, 0, 1, 3, 4):
        print(f"   {value:3d} -> {encode_zigzag_block(value, 2)}")
    print()

    # Pick a chunk length for a batch
    print("4. Comparing chunk lengths...")
    samples = [0, 3, -2, 17, -40, 5, 120, -1, 0, 9]
    for chunk_length in (2, 4, 6, 8):
        params = VariableWidthParams(width=16, chunk_length=chunk_length, signed=True)
        print(f"   chunk {chunk_length}: {encoded_size(samples, params)} bytes")

    params = VariableWidthParams(width=16, chunk_length=4, signed=True)
    data = encode(samples, params)
    assert decode(data, params, len(samples)) == samples
    print(f"   Fixed 16-bit: {2 * len(samples)} bytes")
    print()

    print("=" * 60)
    print("Example completed successfully!")
    print("=" * 60)


if __name__ == "__main__":
    main()
