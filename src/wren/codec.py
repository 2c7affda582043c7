"""Percent-encoding codec for URI components.

Encoding has two independent toggles: ``escape`` turns spaces into ``+``
and ``encode`` expands non-ASCII characters into their UTF-8 bytes.
The reserved punctuation ``? ' " # % & +`` is escaped either way.

Decoding is lenient.  A truncated or non-hex ``%`` escape is kept as
literal text, and a multi-byte run cut short by an ordinary character
passes its bytes through one character each.

Usage::

    from wren.codec import decode, encode

    encode("a b")                            # "a+b"
    encode("мир", escape=False)              # "%D0%BC%D0%B8%D1%80"
    decode("%D0%BC%D0%B8%D1%80+x")           # "мир x"
"""

ALWAYS_ESCAPED = frozenset("?'\"#%&+")

_HEX_DIGITS = frozenset("0123456789abcdefABCDEF")

# Lead byte -> (sequence length, payload mask).  Anything else is a
# stray byte and decodes to the character with the same ordinal.
_UTF8_LEADS: tuple[tuple[int, int, int, int], ...] = (
    (0x00, 0x7F, 1, 0x7F),
    (0xC2, 0xDF, 2, 0x1F),
    (0xE0, 0xEF, 3, 0x0F),
    (0xF0, 0xF4, 4, 0x07),
)


def _sequence_length(byte: int) -> tuple[int, int]:
    for low, high, length, mask in _UTF8_LEADS:
        if low <= byte <= high:
            return length, mask
    return 1, 0xFF


def _hex_byte(value: str, index: int) -> int | None:
    """Return the byte encoded by the two characters at *index*, if any."""
    pair = value[index : index + 2]
    if len(pair) != 2 or not all(ch in _HEX_DIGITS for ch in pair):
        return None
    return int(pair, 16)


class PercentCodec:
    """Encode and decode text against the percent-encoding alphabet.

    Stateless.  Subclass and pass the instance through
    :class:`~wren.config.CodecConfig` to change how components are
    escaped without touching any shared state.
    """

    __slots__ = ()

    def __eq__(self, other: object) -> bool:
        return type(other) is type(self)

    def __hash__(self) -> int:
        return hash(type(self))

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"

    def encode(self, value: str, escape: bool = True, encode: bool = True) -> str:
        """Percent-encode *value*.

        Args:
            value: Text to encode.
            escape: Map ``' '`` to ``'+'``.
            encode: Expand non-ASCII characters to ``%XX`` UTF-8 bytes.
        """
        out: list[str] = []
        for ch in value:
            if ch == " ":
                out.append("+" if escape else " ")
            elif ch in ALWAYS_ESCAPED:
                out.append(f"%{ord(ch):02X}")
            elif encode and ord(ch) > 0x7F:
                data = ch.encode("utf-8", errors="surrogatepass")
                out.extend(f"%{byte:02X}" for byte in data)
            else:
                out.append(ch)
        return "".join(out)

    def decode(self, value: str) -> str:
        """Reverse :meth:`encode`.  Never raises."""
        out: list[str] = []
        pending: list[int] = []
        expected = 0
        code = 0

        def flush() -> None:
            out.extend(chr(byte) for byte in pending)
            pending.clear()

        i = 0
        n = len(value)
        while i < n:
            ch = value[i]
            byte = _hex_byte(value, i + 1) if ch == "%" else None
            if byte is None:
                flush()
                out.append(" " if ch == "+" else ch)
                i += 1
                continue
            i += 3

            if pending and byte & 0xC0 != 0x80:
                # A new lead byte interrupts the current sequence
                flush()
            if pending:
                pending.append(byte)
                code = (code << 6) | (byte & 0x3F)
                if len(pending) == expected:
                    out.append(chr(code))
                    pending.clear()
                continue

            expected, mask = _sequence_length(byte)
            if expected == 1:
                out.append(chr(byte))
            else:
                pending.append(byte)
                code = byte & mask
        flush()
        return "".join(out)


_default_codec = PercentCodec()


def encode(value: str, escape: bool = True, encode: bool = True) -> str:
    """Percent-encode *value* with the default codec."""
    return _default_codec.encode(value, escape, encode)


def decode(value: str) -> str:
    """Percent-decode *value* with the default codec."""
    return _default_codec.decode(value)
