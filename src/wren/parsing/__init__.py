"""Parsing — single-pass tokenizer for URI and path strings.

The tokenizer never raises.  Each entry point returns a frozen
:class:`Tokens` record holding whichever components it found.
"""

from wren.parsing.tokenizer import (
    tokenize,
    tokenize_authority,
    tokenize_full_path,
    tokenize_path,
    tokenize_scheme,
    tokenize_scheme_and_authority,
)
from wren.parsing.tokens import PathTokens, Tokens

__all__ = [
    "PathTokens",
    "Tokens",
    "tokenize",
    "tokenize_authority",
    "tokenize_full_path",
    "tokenize_path",
    "tokenize_scheme",
    "tokenize_scheme_and_authority",
]
