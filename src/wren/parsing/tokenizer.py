"""Single-pass URI tokenizer.

Splits a loosely structured string into scheme segments, authority
parts, path, query and fragment with one forward scan and no
backtracking inside a component.  Malformed input never raises: a
component that does not match is skipped and scanning continues with
the next one.

Accepted shape (permissive, not validating)::

    URI       = (scheme-segment ":")* ["//" authority] path ["?" query] ["#" fragment]
    authority = [user-info "@"] host [":" port]
    path      = ("/" | "\\") segment (("/" | "\\") segment)* [("/" | "\\")]

Usage::

    from wren.parsing import tokenize

    tokens = tokenize("xx:yy:zz")
    tokens.scheme          # ("xx", "yy")
    tokens.path.segments   # ("zz",)
"""

from typing import Any

from wren.parsing.tokens import PathTokens, Tokens

_PATH_SEPARATORS = frozenset("/\\")
_SCHEME_STOPS = frozenset("/?#")
_AUTHORITY_STOPS = frozenset("/?#")
_PATH_STOPS = frozenset("?#")


def _substring(text: str, begin: int, end: int) -> str | None:
    if begin < 0 or end <= begin:
        return None
    return text[begin:end]


# ── Component scanners ───────────────────────────────────────────────
#
# Each scanner takes the text and a start index and returns the index
# where it stopped, or -1 when its component is not present there.
# Results are written into the ``found`` dict handed in by the caller.


def _scan_scheme(text: str, pos: int, include_tail: bool, found: dict[str, Any]) -> int:
    first = pos
    segments: list[str] = []
    while pos < len(text):
        ch = text[pos]
        if ch == ":":
            segments.append(text[first:pos])
            first = pos + 1
        elif ch in _SCHEME_STOPS:
            break
        pos += 1
    if include_tail:
        tail = _substring(text, first, pos)
        if tail is not None:
            segments.append(tail)
    else:
        pos = first
    found["scheme"] = tuple(segments)
    return pos


def _scan_authority(text: str, pos: int, check: bool, found: dict[str, Any]) -> int:
    n = len(text)
    if pos >= n:
        return -1
    if check:
        if not (pos < n - 2 and text[pos] == "/" and text[pos + 1] == "/"):
            return -1
        pos += 2

    start = pos
    host_start = pos
    port_pos = -1
    valid_port = False
    user_infos: list[str | None] = []
    while pos < n:
        ch = text[pos]
        if pos == host_start and ch == ".":
            break
        if ch in _AUTHORITY_STOPS:
            break
        if ch == "@":
            user_infos.append(_substring(text, start, pos))
            host_start = pos + 1
        elif ch == ":":
            port_pos = pos + 1
            valid_port = True
        elif port_pos > 0:
            valid_port = valid_port and "0" <= ch <= "9"
        pos += 1

    host_end = pos
    if port_pos >= 0 and valid_port and port_pos < n:
        # The candidate may have started inside the user-info (``u:1@``)
        digits = _substring(text, port_pos, pos)
        if digits is not None and digits.isascii() and digits.isdigit():
            found["port"] = int(digits)
            host_end = port_pos - 1

    found["user_infos"] = tuple(user_infos)
    found["host"] = _substring(text, host_start, host_end)
    return pos


def _scan_path(text: str, pos: int, found: dict[str, Any]) -> int:
    first = pos
    start = pos
    absolute = False
    separator = False
    segments: list[str] = []
    while pos < len(text):
        ch = text[pos]
        if ch in _PATH_STOPS:
            break
        separator = ch in _PATH_SEPARATORS
        if separator:
            if pos == first:
                # A leading separator makes the path absolute, never trailing
                absolute = True
                separator = False
            if pos > start:
                segments.append(text[start:pos])
            start = pos + 1
        pos += 1
    if pos > start:
        segments.append(text[start:pos])
    found["path"] = PathTokens(absolute, tuple(segments), separator)
    return pos


def _scan_query(text: str, pos: int, found: dict[str, Any]) -> int:
    if pos >= len(text) or text[pos] != "?":
        return -1
    pos += 1
    start = pos
    while pos < len(text) and text[pos] != "#":
        pos += 1
    found["query"] = _substring(text, start, pos)
    return pos


def _scan_fragment(text: str, pos: int, found: dict[str, Any]) -> int:
    if pos >= len(text) or text[pos] != "#":
        return -1
    found["fragment"] = _substring(text, pos + 1, len(text))
    return len(text)


def _scan_full_path(text: str, pos: int, found: dict[str, Any]) -> int:
    pos = _scan_path(text, pos, found)
    idx = _scan_query(text, pos, found)
    if idx >= 0:
        pos = idx
    idx = _scan_fragment(text, pos, found)
    if idx >= 0:
        pos = idx
    return pos


def _scan_scheme_and_authority(text: str, pos: int, found: dict[str, Any]) -> int:
    pos = _scan_scheme(text, pos, False, found)
    idx = _scan_authority(text, pos, True, found)
    if idx >= 0:
        pos = idx
    return pos


# ── Entry points ─────────────────────────────────────────────────────


def tokenize(text: str | None) -> Tokens:
    """Tokenize a complete URI: scheme, authority, path, query, fragment."""
    text = text or ""
    found: dict[str, Any] = {}
    pos = _scan_scheme_and_authority(text, 0, found)
    pos = _scan_full_path(text, pos, found)
    return Tokens(end=pos, **found)


def tokenize_scheme(text: str | None, include_tail: bool = False) -> Tokens:
    """Tokenize only the scheme segments.

    Args:
        text: Text to scan.
        include_tail: Treat the text after the last colon (up to the
            first ``/``, ``?`` or ``#``) as one more segment.  Used when
            the whole string is known to be a scheme, e.g. ``"a:b:c"``.
    """
    text = text or ""
    found: dict[str, Any] = {}
    pos = _scan_scheme(text, 0, include_tail, found)
    return Tokens(end=pos, **found)


def tokenize_authority(text: str | None, check: bool = False) -> Tokens:
    """Tokenize ``[user-info@]host[:port]``.

    With *check*, the text must start with ``//`` or nothing is found.
    """
    text = text or ""
    found: dict[str, Any] = {}
    pos = _scan_authority(text, 0, check, found)
    return Tokens(end=max(pos, 0), **found)


def tokenize_scheme_and_authority(text: str | None) -> Tokens:
    """Tokenize the scheme segments and, when ``//`` follows, the authority."""
    text = text or ""
    found: dict[str, Any] = {}
    pos = _scan_scheme_and_authority(text, 0, found)
    return Tokens(end=pos, **found)


def tokenize_full_path(text: str | None) -> Tokens:
    """Tokenize a path followed by optional query and fragment."""
    text = text or ""
    found: dict[str, Any] = {}
    pos = _scan_full_path(text, 0, found)
    return Tokens(end=pos, **found)


def tokenize_path(text: str | None) -> Tokens:
    """Tokenize a bare path.  ``?`` and ``#`` end the scan."""
    text = text or ""
    found: dict[str, Any] = {}
    pos = _scan_path(text, 0, found)
    return Tokens(end=pos, **found)
