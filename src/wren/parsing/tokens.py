"""Tokenizer result records.

Frozen, slotted dataclasses.  A field left at its default means the
corresponding component was not found (or not scanned by the entry
point that produced the record).
"""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class PathTokens:
    """Absolute flag, raw segments, and trailing-separator flag of a path."""

    absolute: bool = False
    segments: tuple[str, ...] = ()
    trailing_separator: bool = False


EMPTY_PATH_TOKENS = PathTokens()


@dataclass(frozen=True, slots=True)
class Tokens:
    """Components produced by one tokenizer run.

    Attributes:
        scheme: Raw scheme segments, in order.  Empty segments are ``""``.
        user_infos: Every user-info emission of the authority scan.  A
            second ``@`` emits again, covering the text from the start
            of the authority; the last emission is the effective one.
        host: Host text, ``None`` when empty.
        port: Port number, ``None`` when no valid port was found.
        path: Path tokens, ``None`` when the entry point skips paths.
        query: Raw query text after ``?``, ``None`` when empty.
        fragment: Raw fragment text after ``#``, ``None`` when empty.
        end: Index where scanning stopped.
    """

    scheme: tuple[str, ...] = ()
    user_infos: tuple[str | None, ...] = ()
    host: str | None = None
    port: int | None = None
    path: PathTokens | None = None
    query: str | None = None
    fragment: str | None = None
    end: int = 0

    @property
    def user_info(self) -> str | None:
        """The effective user-info: the last emission, if any."""
        return self.user_infos[-1] if self.user_infos else None

    @property
    def has_authority(self) -> bool:
        return bool(self.user_infos) or self.host is not None or self.port is not None
