"""Codec configuration.

CodecConfig is a frozen dataclass passed explicitly to parsing and
serialization calls.  There is no process-wide default encoder to swap
out; build a config with the codec you want and hand it over::

    config = CodecConfig(escape=False, encode=False)
    Path("/a b/c").to_string(config)   # "/a b/c"
"""

from dataclasses import dataclass, field

from wren.codec import PercentCodec
from wren.errors import ConfigurationError


@dataclass(frozen=True, slots=True)
class CodecConfig:
    """How URI components are decoded on input and encoded on output."""

    # Serialization
    escape: bool = True  # ' ' <-> '+'
    encode: bool = True  # non-ASCII -> %XX UTF-8 bytes

    # Parsing
    decode: bool = True  # percent-decode segments, query and fragment

    codec: PercentCodec = field(default_factory=PercentCodec)

    def __post_init__(self) -> None:
        if not isinstance(self.codec, PercentCodec):
            msg = (
                f"CodecConfig.codec must be a PercentCodec, "
                f"got {type(self.codec).__name__}"
            )
            raise ConfigurationError(msg)

    def encode_text(self, value: str) -> str:
        """Encode *value* for output.

        The reserved punctuation ``? ' " # % & +`` is escaped even with
        both toggles off.
        """
        return self.codec.encode(value, self.escape, self.encode)

    def decode_text(self, value: str) -> str:
        """Decode *value* from input when decoding is enabled."""
        return self.codec.decode(value) if self.decode else value


DEFAULT_CONFIG = CodecConfig()
RAW_CONFIG = CodecConfig(escape=False, encode=False, decode=False)
