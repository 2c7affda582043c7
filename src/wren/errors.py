"""Wren exception hierarchy.

Parsing never raises for malformed input: the tokenizer, codec, and
builders degrade to best-effort results.  The types here cover the
remaining failure mode, a bad configuration handed to the library.
"""


class WrenError(Exception):
    """Base for all wren-specific errors."""


class ConfigurationError(WrenError):
    """Raised when a codec config or prefix table is set up incorrectly.

    Typically raised at construction time, e.g. ``PrefixTable(delimiter="")``.
    """
