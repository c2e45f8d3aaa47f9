"""Variable-width chunked encoding of fixed-width integers.

A value of total width W is written in chunks of ``chunk_length`` bits, least
significant chunk first. Every chunk is followed by a signal bit:

- 0: no more chunks to follow
- 1: more chunks to follow

For example 255 is encoded into ``1111 1 1111 0`` with chunk length 4 and
width 64. The last chunk is truncated and its signal bit omitted once the
entire payload of W bits has been written, so a value never takes more than
W plus one signal bit per full chunk.

The functions here only rely on ``write_bits()`` / ``read_bits()``, so any
writer or reader implementation can use them without inheriting from the
varbits base classes.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

from structlog import get_logger

from .zigzag import decode_zigzag_block, encode_zigzag_block

if TYPE_CHECKING:
    from .reader import BitReader
    from .writer import BitWriter

logger = get_logger()

VARIABLE_WIDTHS = (8, 16, 32, 64)


def check_params(chunk_length: int, width: int) -> None:
    """Validate the parameters shared by all variable-width operations.

    Raises:
        ValueError: If width is not 8, 16, 32 or 64, or chunk_length < 1
    """
    if width not in VARIABLE_WIDTHS:
        raise ValueError(f"width must be one of {VARIABLE_WIDTHS}, got {width}")
    if chunk_length < 1:
        raise ValueError(f"chunk_length must be >= 1, got {chunk_length}")


def check_unsigned(value: int, width: int) -> None:
    """Raise ValueError unless ``value`` fits in ``width`` unsigned bits."""
    if value < 0:
        raise ValueError(f"Unsigned encoding requires non-negative value, got {value}")
    if value >> width:
        raise ValueError(f"Value {value} requires more than {width} bits")


def check_signed(value: int, width: int) -> None:
    """Raise ValueError unless ``value`` fits in ``width`` two's complement bits."""
    min_value = -(1 << (width - 1))
    max_value = (1 << (width - 1)) - 1
    if value < min_value or value > max_value:
        raise ValueError(
            f"Value {value} doesn't fit in {width} bits (range: {min_value} to {max_value})"
        )


def check_zigzag_exponent(zigzag_exponent: int, width: int = 64) -> None:
    """Raise ValueError unless ``zigzag_exponent`` is in [0, width)."""
    if zigzag_exponent < 0 or zigzag_exponent >= width:
        raise ValueError(f"zigzag_exponent must be 0-{width - 1}, got {zigzag_exponent}")


def write_variable_width(
    writer: BitWriter, value: int, chunk_length: int, width: int = 64
) -> None:
    """Write an unsigned value of ``width`` bits in chunks of ``chunk_length``.

    Args:
        writer: Destination of the raw bits
        value: Unsigned integer that fits in ``width`` bits
        chunk_length: Number of payload bits per chunk (>= 1)
        width: Width of the value type (8, 16, 32 or 64)

    Raises:
        ValueError: If parameters are invalid or value doesn't fit in width
    """
    check_params(chunk_length, width)
    check_unsigned(value, width)

    payload_written = 0
    while payload_written < width:
        if payload_written + chunk_length >= width:
            # Last chunk, no need for the signal bit.
            writer.write_bits(value, width - payload_written)
            return

        writer.write_bits(value, chunk_length)
        payload_written += chunk_length
        value >>= chunk_length

        writer.write_bits(1 if value else 0, 1)
        if not value:
            return


def read_variable_width(reader: BitReader, chunk_length: int, width: int = 64) -> Optional[int]:
    """Read a value written with write_variable_width().

    Reader and writer must use the same ``chunk_length`` and ``width``.

    Args:
        reader: Source of the raw bits
        chunk_length: Number of payload bits per chunk (>= 1)
        width: Width of the value type (8, 16, 32 or 64)

    Returns:
        The decoded value, or None if the bit stream ends prematurely

    Raises:
        ValueError: If parameters are invalid
    """
    check_params(chunk_length, width)

    value = 0
    payload_read = 0
    while payload_read < width:
        read_length = min(chunk_length, width - payload_read)
        bits, num_read = reader.read_bits(read_length)
        if num_read != read_length:
            return _truncated(chunk_length, width, payload_read + num_read)
        value |= bits << payload_read
        payload_read += read_length

        if payload_read >= width:
            break

        more_to_come, num_read = reader.read_bits(1)
        if num_read != 1:
            return _truncated(chunk_length, width, payload_read)
        if not more_to_come:
            break

    return value


def _truncated(chunk_length: int, width: int, payload_read: int) -> None:
    logger.debug(
        "variable width read truncated",
        chunk_length=chunk_length,
        width=width,
        payload_read=payload_read,
    )
    return None


def write_variable_width_signed(
    writer: BitWriter,
    value: int,
    chunk_length: int,
    zigzag_exponent: int,
    width: int = 64,
) -> None:
    """Write a signed value of ``width`` bits, zigzag encoded with ``zigzag_exponent``.

    The zigzag result of a W-bit signed value fits in W unsigned bits as long
    as ``zigzag_exponent`` is below W, so it is written with the same width.

    Raises:
        ValueError: If parameters are invalid or value doesn't fit in width
    """
    check_params(chunk_length, width)
    check_zigzag_exponent(zigzag_exponent, width)
    check_signed(value, width)
    write_variable_width(writer, encode_zigzag_block(value, zigzag_exponent), chunk_length, width)


def read_variable_width_signed(
    reader: BitReader, chunk_length: int, zigzag_exponent: int, width: int = 64
) -> Optional[int]:
    """Read a value written with write_variable_width_signed().

    Returns:
        The decoded value, or None if the bit stream ends prematurely
    """
    check_params(chunk_length, width)
    check_zigzag_exponent(zigzag_exponent, width)
    encoded = read_variable_width(reader, chunk_length, width)
    if encoded is None:
        return None
    return decode_zigzag_block(encoded, zigzag_exponent)
