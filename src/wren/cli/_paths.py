"""``wren resolve``, ``wren relativize`` and ``wren normalize``."""

import argparse

from wren.paths import Path
from wren.uri import Uri


def run_path_command(args: argparse.Namespace) -> None:
    if args.command == "resolve":
        print(Uri(args.base).resolve(args.reference))
    elif args.command == "relativize":
        print(Uri(args.base).relativize(args.target))
    else:
        print(Path(args.path).normalize())
