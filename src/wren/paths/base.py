"""Read-only path API shared by Path and PathBuilder."""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING

from wren.config import DEFAULT_CONFIG, CodecConfig
from wren.paths import segments as _segments

if TYPE_CHECKING:
    from wren.paths.path import Path, PathBuilder


class PathView:
    """Queries and serialization over ``(absolute, segments, trailing)``.

    Subclasses provide the three fields.  Comparison is a total order
    (see :func:`~wren.paths.segments.compare_segments`) and equality means
    the comparison yields zero, so a ``Path`` and a ``PathBuilder`` with
    the same state compare equal.
    """

    __slots__ = ()

    @property
    def absolute(self) -> bool:
        raise NotImplementedError

    @property
    def trailing_separator(self) -> bool:
        raise NotImplementedError

    @property
    def segments(self) -> Sequence[str]:
        raise NotImplementedError

    # ── Segments ─────────────────────────────────────────────────────

    @property
    def segment_count(self) -> int:
        return len(self.segments)

    @property
    def is_empty(self) -> bool:
        """True for the "no path" form: relative with no segments."""
        return not self.absolute and not self.segments

    def segment(self, index: int) -> str | None:
        """Return the segment at *index*, or None when out of range."""
        segments = self.segments
        if 0 <= index < len(segments):
            return segments[index]
        return None

    @property
    def last_segment(self) -> str | None:
        segments = self.segments
        return segments[-1] if segments else None

    # ── File names ───────────────────────────────────────────────────

    @property
    def file_name(self) -> str | None:
        """The last segment, or None when the path names a directory."""
        if self.trailing_separator:
            return None
        return self.last_segment

    @property
    def extension(self) -> str | None:
        name = self.file_name
        if name is None:
            return None
        idx = name.rfind(".")
        return name[idx + 1 :] if idx >= 0 else None

    @property
    def name_without_extension(self) -> str | None:
        name = self.file_name
        if name is None:
            return None
        idx = name.rfind(".")
        return name[:idx] if idx >= 0 else name

    def directory(self, config: CodecConfig = DEFAULT_CONFIG) -> str:
        """Serialize the path without its file name, as a directory."""
        if self.trailing_separator:
            return self._format(config)
        count = max(0, len(self.segments) - 1)
        return self._format(config, count, trailing=count > 0)

    # ── Relations ────────────────────────────────────────────────────

    def common_prefix_length(self, other: PathView) -> int:
        return _segments.common_prefix_length(self.segments, other.segments)

    def common_suffix_length(self, other: PathView) -> int:
        return _segments.common_suffix_length(self.segments, other.segments)

    def starts_with(self, other: PathView) -> bool:
        """True when *other*'s segments are a prefix of this path's.

        A prefix with a trailing separator only matches when this path
        also continues past it or is itself a directory.
        """
        prefix_len = len(other.segments)
        if self.common_prefix_length(other) != prefix_len:
            return False
        return (
            len(self.segments) > prefix_len
            or self.trailing_separator
            or not other.trailing_separator
        )

    def compare(self, other: PathView) -> int:
        return _segments.compare_segments(self._key(), other._key())

    def _key(self) -> tuple[bool, Sequence[str], bool]:
        return (self.absolute, self.segments, self.trailing_separator)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PathView):
            return NotImplemented
        return self.compare(other) == 0

    def __lt__(self, other: PathView) -> bool:
        return self.compare(other) < 0

    def __le__(self, other: PathView) -> bool:
        return self.compare(other) <= 0

    def __gt__(self, other: PathView) -> bool:
        return self.compare(other) > 0

    def __ge__(self, other: PathView) -> bool:
        return self.compare(other) >= 0

    __hash__ = None  # type: ignore[assignment]

    # ── Serialization ────────────────────────────────────────────────

    def _format(
        self,
        config: CodecConfig,
        count: int | None = None,
        trailing: bool | None = None,
    ) -> str:
        segments = self.segments if count is None else self.segments[:count]
        out = "/" if self.absolute else ""
        out += "/".join(config.encode_text(segment) for segment in segments)
        if trailing is None:
            trailing = self.trailing_separator
        if trailing:
            out += "/"
        return out

    def get_path(self, config: CodecConfig = DEFAULT_CONFIG) -> str | None:
        """Serialize the path, or return None for the "no path" form."""
        if self.is_empty:
            return None
        return self._format(config)

    def to_string(self, config: CodecConfig = DEFAULT_CONFIG) -> str:
        return self._format(config)

    def __str__(self) -> str:
        return self._format(DEFAULT_CONFIG)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._format(DEFAULT_CONFIG)!r})"

    # ── Conversions ──────────────────────────────────────────────────

    def builder(self) -> PathBuilder:
        """Return a new builder seeded with this path's state."""
        from wren.paths.path import PathBuilder

        return PathBuilder(self)

    def build(self) -> Path:
        from wren.paths.path import Path

        return Path(self)
