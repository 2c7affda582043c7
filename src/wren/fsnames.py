"""Filesystem-safe names for arbitrary URI strings.

A lighter escaping than :mod:`wren.codec`: only characters that are
awkward in file names are touched, and escapes use lowercase hex.
Backslashes become forward slashes, spaces become ``+``, and newline,
tab, ``?``, ``:``, ``#`` and ``%`` become ``%xx``::

    to_fs_name("http://host:80/a b")   # "http%3a//host%3a80/a+b"
    from_fs_name("http%3a//host")      # "http://host"
"""

_FS_ESCAPED = frozenset("\n\t?:#%")
_HEX_DIGITS = frozenset("0123456789abcdefABCDEF")


def to_fs_name(text: str) -> str:
    out: list[str] = []
    for ch in text:
        if ch == "\\":
            out.append("/")
        elif ch == " ":
            out.append("+")
        elif ch in _FS_ESCAPED:
            out.append(f"%{ord(ch):02x}")
        else:
            out.append(ch)
    return "".join(out)


def from_fs_name(text: str) -> str:
    """Reverse :func:`to_fs_name`.  A malformed ``%`` escape is kept as is."""
    out: list[str] = []
    i = 0
    n = len(text)
    while i < n:
        ch = text[i]
        if ch == "+":
            out.append(" ")
        elif ch == "%" and i + 2 < n and all(c in _HEX_DIGITS for c in text[i + 1 : i + 3]):
            out.append(chr(int(text[i + 1 : i + 3], 16)))
            i += 3
            continue
        else:
            out.append(ch)
        i += 1
    return "".join(out)
