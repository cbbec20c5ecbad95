"""Main CLI entry point for bitschema."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from .. import __version__
from ..exceptions import BitSchemaError
from ..registry import SchemaRegistry
from .analyze import analyze_file


def _parse_assignment(text: str) -> tuple[str, int]:
    name, sep, value = text.partition("=")
    if not sep or not name:
        raise argparse.ArgumentTypeError(f"expected NAME=VALUE, got {text!r}")
    try:
        return name, int(value, 0)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid integer for {name}: {value!r}") from None


def _parse_hex(text: str) -> bytes:
    cleaned = text.strip()
    if cleaned.lower().startswith("0x"):
        cleaned = cleaned[2:]
    try:
        return bytes.fromhex(cleaned)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid hex buffer: {text!r}") from None


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the bitschema CLI."""
    parser = argparse.ArgumentParser(
        prog="bitschema",
        description="bitschema: Bit-Packed Message Codec",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  bitschema analyze schemas.yaml                        Show field layout
  bitschema pack schemas.yaml sensor_data sensor_id=15 temperature=-125
  bitschema unpack schemas.yaml sensor_data 0f e1
  bitschema --version                                   Show version
        """,
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"bitschema {__version__}",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )

    subparsers = parser.add_subparsers(dest="command", metavar="COMMAND")

    analyze = subparsers.add_parser("analyze", help="Show the packed layout of each message type")
    analyze.add_argument("file", metavar="FILE", type=Path, help="JSON or YAML schema set")

    pack = subparsers.add_parser("pack", help="Pack field values and print the buffer as hex")
    pack.add_argument("file", metavar="FILE", type=Path, help="JSON or YAML schema set")
    pack.add_argument("message_type", metavar="TYPE", help="Message type to pack")
    pack.add_argument(
        "assignments",
        metavar="NAME=VALUE",
        nargs="*",
        type=_parse_assignment,
        help="Field values; unset fields are 0",
    )

    unpack = subparsers.add_parser("unpack", help="Unpack a hex buffer and print field values")
    unpack.add_argument("file", metavar="FILE", type=Path, help="JSON or YAML schema set")
    unpack.add_argument("message_type", metavar="TYPE", help="Message type to unpack")
    unpack.add_argument("data", metavar="HEX", nargs="+", help="Packed buffer as hex")

    return parser


def _run(args: argparse.Namespace) -> None:
    if args.command == "analyze":
        analyze_file(args.file)
        return

    registry = SchemaRegistry.from_file(args.file)
    message = registry.create(args.message_type)

    if args.command == "pack":
        message.set_fields(dict(args.assignments))
        print(message.pack().hex(" "))
        return

    message.unpack(_parse_hex("".join(args.data)))
    for name, value in message.to_dict().items():
        print(f"{name} = {value}")


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the bitschema CLI.

    Returns:
        Exit code (0 for success, non-zero for error)
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    # If no command specified, show help
    if args.command is None:
        parser.print_help()
        return 0

    if not args.file.exists():
        print(f"Error: File not found: {args.file}", file=sys.stderr)
        return 1

    try:
        _run(args)
    except argparse.ArgumentTypeError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except BitSchemaError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except OSError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
