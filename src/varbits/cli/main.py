"""Main CLI entry point for varbits."""

from __future__ import annotations

import argparse
import logging
import sys

import structlog

from ..cli.commands import run_decode, run_encode
from ..exceptions import VarbitsError


def _add_params_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--width",
        type=int,
        choices=(8, 16, 32, 64),
        default=64,
        help="Width of the value type in bits (default: 64)",
    )
    parser.add_argument(
        "--chunk",
        type=int,
        required=True,
        help="Payload bits per chunk",
    )
    parser.add_argument(
        "--signed",
        action="store_true",
        help="Values are signed and zigzag encoded",
    )
    parser.add_argument(
        "--zigzag",
        type=int,
        default=0,
        metavar="K",
        help="Zigzag block exponent for signed values (default: 0)",
    )
    parser.add_argument(
        "--word-bits",
        type=int,
        choices=(8, 16, 32, 64),
        default=64,
        help="Storage word size of the stream (default: 64)",
    )


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser of the varbits CLI."""
    parser = argparse.ArgumentParser(
        prog="varbits",
        description="varbits: Variable-Width Bit Stream Codec",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  varbits encode --chunk 4 255                  Encode 255 in 4-bit chunks
  varbits encode --width 16 --chunk 3 --signed -- -5 7
  varbits decode --chunk 4 --count 1 ff01       Decode one value
  varbits -v decode --chunk 4 ff01              Decode with debug logs
  varbits --version                             Show version

The stream is not self-describing: decode with the parameters used to encode.
        """,
    )

    parser.add_argument(
        "--version",
        action="version",
        version="varbits 0.1.0",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Print debug logs to stderr",
    )

    subparsers = parser.add_subparsers(dest="command")

    encode_parser = subparsers.add_parser("encode", help="Encode integers to a bit stream")
    _add_params_arguments(encode_parser)
    encode_parser.add_argument("values", type=int, nargs="+", help="Integers to encode")

    decode_parser = subparsers.add_parser("decode", help="Decode integers from hex bytes")
    _add_params_arguments(decode_parser)
    decode_parser.add_argument(
        "--count",
        type=int,
        default=None,
        help="Number of values to decode (default: until only padding is left)",
    )
    decode_parser.add_argument("data", help="Hex encoded bytes of the stream")

    return parser


def setup_logging(verbose: bool = False) -> None:
    """Send logs to stderr, keeping stdout for command output.

    Only warnings and errors are shown unless ``verbose`` is set.
    """
    structlog.configure(
        wrapper_class=structlog.make_filtering_bound_logger(logging.DEBUG if verbose else logging.WARNING),
        logger_factory=structlog.PrintLoggerFactory(sys.stderr),
    )


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the varbits CLI.

    Args:
        argv: Command line arguments (default: sys.argv[1:])

    Returns:
        Exit code (0 for success, non-zero for error)
    """
    parser = create_parser()
    args = parser.parse_args(argv)
    setup_logging(args.verbose)

    if args.command is None:
        # If no command specified, show help
        parser.print_help()
        return 0

    try:
        if args.command == "encode":
            run_encode(args)
        else:
            run_decode(args)
    except (VarbitsError, ValueError) as e:
        # pydantic.ValidationError is a ValueError
        print(f"Error: {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
