"""Wren CLI — inspect, resolve and encode URIs from the shell.

Entry point registered as ``wren`` in ``pyproject.toml``::

    [project.scripts]
    wren = "wren.cli:main"
"""

import argparse
import logging
import sys


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for the ``wren`` command."""
    parser = argparse.ArgumentParser(
        prog="wren",
        description="Wren — parse, resolve, relativize and encode URIs and paths.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log debug output to stderr",
    )
    subparsers = parser.add_subparsers(dest="command")

    # -- wren parse -------------------------------------------------------
    parse_parser = subparsers.add_parser("parse", help="Show the components of a URI")
    parse_parser.add_argument("uri", help="URI to parse")
    parse_parser.add_argument("--json", action="store_true", help="Print components as JSON")

    # -- wren resolve -----------------------------------------------------
    resolve_parser = subparsers.add_parser("resolve", help="Resolve a reference against a base URI")
    resolve_parser.add_argument("base", help="Base URI")
    resolve_parser.add_argument("reference", help="Relative or absolute reference")

    # -- wren relativize --------------------------------------------------
    relativize_parser = subparsers.add_parser(
        "relativize", help="Compute the reference leading from a base URI to a target"
    )
    relativize_parser.add_argument("base", help="Base URI")
    relativize_parser.add_argument("target", help="Target URI")

    # -- wren normalize ---------------------------------------------------
    normalize_parser = subparsers.add_parser("normalize", help="Remove dot segments from a path")
    normalize_parser.add_argument("path", help="Path to normalize")

    # -- wren encode / decode ---------------------------------------------
    encode_parser = subparsers.add_parser("encode", help="Percent-encode text")
    encode_parser.add_argument("text", help="Text to encode")
    encode_parser.add_argument(
        "--no-escape",
        action="store_true",
        help="Keep spaces instead of writing '+'",
    )
    encode_parser.add_argument(
        "--no-encode",
        action="store_true",
        help="Keep non-ASCII characters instead of writing UTF-8 escapes",
    )
    decode_parser = subparsers.add_parser("decode", help="Percent-decode text")
    decode_parser.add_argument("text", help="Text to decode")

    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    if args.command == "parse":
        from wren.cli._parse import run_parse

        run_parse(args)
    elif args.command in ("resolve", "relativize", "normalize"):
        from wren.cli._paths import run_path_command

        run_path_command(args)
    elif args.command in ("encode", "decode"):
        from wren.cli._codec import run_codec

        run_codec(args)
