"""``wren parse`` — print the components of a URI."""

import argparse
import json
import logging

from wren.uri import Uri

logger = logging.getLogger("wren.cli")


def describe(uri: Uri) -> dict[str, object]:
    """Components of *uri* as plain, JSON-serializable values."""
    return {
        "scheme": uri.scheme,
        "scheme_segments": list(uri.scheme_segments),
        "user_info": uri.user_info,
        "host": uri.host,
        "port": uri.port or None,
        "path": uri.path.get_path(),
        "path_segments": list(uri.path.segments),
        "query": uri.query_map(),
        "fragment": uri.fragment,
    }


def run_parse(args: argparse.Namespace) -> None:
    """Parse ``args.uri`` and print its components.

    Plain output prints one ``name: value`` line per component that is
    present; ``--json`` prints every component.
    """
    uri = Uri(args.uri)
    logger.debug("Parsed %r as %r", args.uri, uri)
    components = describe(uri)
    if args.json:
        print(json.dumps(components, indent=2, ensure_ascii=False))
        return
    for name, value in components.items():
        if value in (None, [], {}):
            continue
        print(f"{name}: {value}")
