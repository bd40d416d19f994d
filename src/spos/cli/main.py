"""Main CLI entry point for spos."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any, Callable

from .. import __version__
from ..cli.analyze import analyze_file
from ..codec import decode, encode
from ..config import OUTPUT_FORMATS, CodecOptions, load_schema
from ..exceptions import SposError
from ..utils import bits_to_hex, hex_to_bits


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the spos CLI.

    Returns:
        Exit code (0 for success, non-zero for error)
    """
    parser = argparse.ArgumentParser(
        prog="spos",
        description="spos: Small Payload Object Serializer",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  spos --analyze schema.json                       Analyze schema field sizes
  spos --schema schema.json --encode '{"a": 1}'    Encode a JSON value
  spos --schema schema.json --decode 0101          Decode a bit-string
  spos --version                                   Show version
        """,
    )

    parser.add_argument(
        "--analyze",
        metavar="FILE",
        type=str,
        help="Analyze a schema file and show field sizes",
    )
    parser.add_argument("--schema", metavar="FILE", type=str, help="Schema file (JSON or YAML)")

    action = parser.add_mutually_exclusive_group()
    action.add_argument("--encode", metavar="JSON", type=str, help="Encode a JSON value")
    action.add_argument("--decode", metavar="MESSAGE", type=str, help="Decode a message")

    parser.add_argument(
        "--output",
        choices=OUTPUT_FORMATS,
        default="bits",
        help="Render encoded messages as bits (default) or hex",
    )
    parser.add_argument("--hex", action="store_true", help="Message to decode is hex")
    parser.add_argument(
        "--bits",
        type=int,
        default=None,
        help="Bit count of a hex message (strips the padding nibble bits)",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    parser.add_argument(
        "--version",
        action="version",
        version=f"spos {__version__}",
    )

    args = parser.parse_args(argv)

    try:
        options = CodecOptions(
            output=args.output,
            hex_input=args.hex,
            message_bits=args.bits,
            verbose=args.verbose,
        )
    except ValueError as e:
        parser.error(str(e))

    if options.verbose and not logging.getLogger().handlers:
        logging.basicConfig(level=logging.DEBUG)

    # Handle --analyze
    if args.analyze:
        return _run(analyze_file, Path(args.analyze))

    if args.encode is not None or args.decode is not None:
        if not args.schema:
            parser.error("--encode and --decode need --schema")
        if args.encode is not None:
            return _run(_encode, Path(args.schema), args.encode, options)
        return _run(_decode, Path(args.schema), args.decode, options)

    # If no command specified, show help
    parser.print_help()
    return 0


def _run(command: Callable[..., None], file_path: Path, *args: Any) -> int:
    if not file_path.exists():
        print(f"Error: File not found: {file_path}", file=sys.stderr)
        return 1

    try:
        command(file_path, *args)
        return 0
    except (SposError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


def _encode(schema_path: Path, text: str, options: CodecOptions) -> None:
    message = encode(json.loads(text), load_schema(schema_path))
    print(bits_to_hex(message) if options.output == "hex" else message)


def _decode(schema_path: Path, message: str, options: CodecOptions) -> None:
    if options.hex_input:
        message = hex_to_bits(message, options.message_bits)
    print(json.dumps(decode(message, load_schema(schema_path))))


if __name__ == "__main__":
    sys.exit(main())
