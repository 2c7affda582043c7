"""``wren encode`` and ``wren decode``."""

import argparse

from wren.codec import decode, encode


def run_codec(args: argparse.Namespace) -> None:
    if args.command == "encode":
        print(encode(args.text, escape=not args.no_escape, encode=not args.no_encode))
    else:
        print(decode(args.text))
