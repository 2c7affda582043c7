"""Path value and its builder.

``Path`` is immutable: every transformation returns a new value, so
calls chain naturally.  ``PathBuilder`` holds the same three fields,
mutates them in place, and re-checks the path invariant after each
operation.  ``build()`` snapshots a builder into a ``Path``.

Usage::

    from wren.paths import Path, PathBuilder

    Path("/a/b/c/").resolve("../../d")        # Path('/a/d')
    Path("/a/b").relativize("/a/b/c")         # Path('b/c')

    builder = PathBuilder("/a/b/c/test.txt")
    builder.set_file_extension("md")
    builder.to_parent()
    builder.build()                           # Path('/a/b/c/')
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Sequence

from wren.config import DEFAULT_CONFIG, CodecConfig
from wren.parsing import tokenize_full_path
from wren.parsing.tokens import EMPTY_PATH_TOKENS
from wren.paths.base import PathView
from wren.paths.segments import remove_dot_segments


class PathBuilder(PathView):
    """Mutable path.  Confine each instance to a single caller.

    Invariant, restored after every mutation: when the segment list is
    empty, a relative path turns its trailing separator into the
    absolute flag (``"../"`` normalizes to the root ``"/"``) and the
    trailing flag is cleared.
    """

    __slots__ = ("_absolute", "_config", "_segments", "_trailing")

    def __init__(
        self,
        source: str | PathView | None = None,
        *,
        config: CodecConfig = DEFAULT_CONFIG,
    ) -> None:
        self._config = config
        self._segments: list[str] = []
        self._absolute = False
        self._trailing = False
        self.set_path(source)

    @property
    def absolute(self) -> bool:
        return self._absolute

    @property
    def trailing_separator(self) -> bool:
        return self._trailing

    @property
    def segments(self) -> tuple[str, ...]:
        return tuple(self._segments)

    @property
    def config(self) -> CodecConfig:
        return self._config

    def _check(self) -> None:
        if not self._segments:
            if not self._absolute:
                self._absolute = self._trailing
            self._trailing = False

    def _coerce(self, other: str | PathView | None) -> PathView:
        if other is None or isinstance(other, str):
            return Path(other, config=self._config)
        if isinstance(other, PathView):
            return other
        msg = f"expected a path or string, got {type(other).__name__}"
        raise TypeError(msg)

    # ── Whole-path setters ───────────────────────────────────────────

    def set_path(self, source: str | PathView | None) -> None:
        """Replace the state with a copy of *source* (parsed when a string)."""
        if isinstance(source, PathView):
            segments = list(source.segments)
            absolute = source.absolute
            trailing = source.trailing_separator
        else:
            tokens = tokenize_full_path(source).path or EMPTY_PATH_TOKENS
            segments = [self._config.decode_text(s) for s in tokens.segments]
            absolute = tokens.absolute
            trailing = tokens.trailing_separator
        self._segments = segments
        self._absolute = absolute
        self._trailing = trailing
        self._check()

    def clear(self) -> None:
        self._segments = []
        self._absolute = False
        self._trailing = False

    def copy(self) -> PathBuilder:
        return PathBuilder(self, config=self._config)

    def build(self) -> Path:
        return Path(self)

    # ── Concatenation ────────────────────────────────────────────────

    def append(self, other: str | PathView | None) -> None:
        """Append *other*'s segments.  The trailing flag becomes *other*'s."""
        self._concat(self._coerce(other), begin=False)

    def prepend(self, other: str | PathView | None) -> None:
        """Insert *other*'s segments in front.  Absoluteness becomes *other*'s."""
        self._concat(self._coerce(other), begin=True)

    def _concat(self, other: PathView, begin: bool) -> None:
        was_empty = not self._segments
        if not other.segments:
            # Only the root survives concatenation onto an empty path
            if was_empty and other.absolute:
                self._absolute = True
            self._check()
            return
        if begin:
            was_absolute = self._absolute
            self._segments[0:0] = other.segments
            self._absolute = other.absolute
            if was_empty:
                self._trailing = was_absolute
        else:
            self._segments.extend(other.segments)
            self._trailing = other.trailing_separator
            if was_empty:
                self._absolute = self._absolute or other.absolute
        self._check()

    def append_segments(self, segments: Iterable[str], begin: bool = False) -> None:
        """Add raw (already decoded) segments without parsing them."""
        segments = list(segments)
        if begin:
            self._segments[0:0] = segments
        else:
            self._segments.extend(segments)
        self._check()

    # ── Resolution ───────────────────────────────────────────────────

    def normalize(self) -> None:
        """Remove ``"."``, ``".."`` and empty segments in place."""
        remove_dot_segments(self._segments)
        self._check()

    def resolve(self, other: str | PathView | None) -> None:
        """Resolve *other* against this path, RFC 3986 merge style.

        An absolute *other* replaces the path.  Otherwise this path's
        last segment is dropped (unless it ends with a separator), the
        segments of *other* are appended, and the result is normalized.
        """
        other = self._coerce(other)
        if other.absolute:
            self._segments = list(other.segments)
            self._absolute = True
            self._trailing = other.trailing_separator
            self._check()
            return
        if not other.segments:
            return

        if self._segments and not self._trailing:
            self._segments.pop()
        self._check()
        self._segments.extend(other.segments)
        if remove_dot_segments(self._segments):
            self._trailing = other.trailing_separator
        elif not self._segments:
            self._trailing = other.trailing_separator
            self._absolute = False
        else:
            # Ended on "." or "..": the result names a directory
            self._trailing = True
        self._check()

    def relativize(self, target: str | PathView | None) -> None:
        """Turn this path into the relative path leading from it to *target*.

        A relative base with an absolute target yields the target; an
        absolute base with a relative target is left unchanged.
        """
        target = self._coerce(target)
        if self._absolute and not target.absolute:
            return
        if not self._absolute and target.absolute:
            self.set_path(target)
            return

        remove_dot_segments(self._segments)
        target_segments = list(target.segments)
        remove_dot_segments(target_segments)

        if self._segments and not self._trailing:
            self._segments.pop()
        compare_len = len(target_segments)
        if compare_len > 0 and not target.trailing_separator:
            compare_len -= 1
        limit = min(len(self._segments), compare_len)
        common = 0
        while common < limit and self._segments[common] == target_segments[common]:
            common += 1

        result = [".."] * (len(self._segments) - common)
        result.extend(target_segments[common:])
        self._segments = result or ["."]
        self._trailing = target.trailing_separator
        self._absolute = False
        self._check()

    # ── Segment removal ──────────────────────────────────────────────

    def to_parent(self) -> None:
        """Drop the last segment, leaving a directory path."""
        if not self._segments:
            return
        self._segments.pop()
        self._trailing = bool(self._segments)
        self._check()

    def to_directory(self) -> None:
        """Drop the file name, if the path has one, leaving a directory."""
        if not self._trailing:
            self.to_parent()

    def remove_first_segments(self, count: int) -> None:
        count = max(0, min(count, len(self._segments)))
        if count:
            del self._segments[:count]
            self._check()

    def remove_last_segments(self, count: int, folders_only: bool = False) -> None:
        """Drop up to *count* trailing segments.

        With *folders_only*, the file name (if any) is kept and the
        folders right before it are removed instead.
        """
        count = max(0, min(count, len(self._segments)))
        if not count:
            return
        end = len(self._segments)
        if folders_only and not self._trailing:
            end -= 1
        start = max(0, end - count)
        del self._segments[start:end]
        self._check()

    # ── Flags ────────────────────────────────────────────────────────

    def add_trailing_separator(self) -> None:
        if self._trailing:
            return
        if self._segments:
            self._trailing = True
        else:
            self._absolute = True
            self._trailing = False

    def remove_trailing_separator(self) -> None:
        if self._trailing:
            self._trailing = False
            self._check()

    def make_absolute(self) -> None:
        self._absolute = True
        self._check()

    def make_relative(self) -> None:
        self._absolute = False
        self._check()

    # ── File names ───────────────────────────────────────────────────

    def set_file_name(self, name: str | None) -> None:
        """Replace the file name; ``None`` removes it."""
        count = len(self._segments)
        if not self._trailing and count > 0:
            self._segments.pop()
            if count > 1:
                self._trailing = True
        if name is not None:
            self._trailing = False
            self._segments.append(name)
        self._check()

    def set_file_extension(self, extension: str | None) -> None:
        """Replace the extension of the file name.  Directories are untouched."""
        if self._trailing:
            return
        extension = (extension or "").strip()
        if extension.startswith("."):
            extension = extension[1:]
        suffix = f".{extension}" if extension else ""
        if self._segments:
            name = self._segments[-1]
            idx = name.rfind(".")
            if idx >= 0:
                name = name[:idx]
            self._segments[-1] = name + suffix
        elif suffix:
            self._segments.append(suffix)
        self._check()


class Path(PathView):
    """Immutable path: segments plus absolute and trailing-separator flags.

    Accepts a string (parsed and, by default, percent-decoded), another
    path or builder (copied), or None for the empty path.  Values hash
    and compare by state and are safe to share between threads.
    """

    __slots__ = ("_absolute", "_segments", "_trailing")

    _absolute: bool
    _segments: tuple[str, ...]
    _trailing: bool

    def __init__(
        self,
        source: str | PathView | None = None,
        *,
        config: CodecConfig = DEFAULT_CONFIG,
    ) -> None:
        if not isinstance(source, PathView):
            source = PathBuilder(source, config=config)
        object.__setattr__(self, "_absolute", source.absolute)
        object.__setattr__(self, "_segments", tuple(source.segments))
        object.__setattr__(self, "_trailing", source.trailing_separator)

    @classmethod
    def of(
        cls,
        segments: Iterable[str],
        absolute: bool = False,
        trailing_separator: bool = False,
    ) -> Path:
        """Build a path from already decoded segments."""
        builder = PathBuilder()
        builder.append_segments(segments)
        if absolute:
            builder.make_absolute()
        if trailing_separator:
            builder.add_trailing_separator()
        return cls(builder)

    def __setattr__(self, name: str, value: object) -> None:
        msg = f"{type(self).__name__} is immutable"
        raise AttributeError(msg)

    def __hash__(self) -> int:
        return hash((self._absolute, self._segments, self._trailing))

    def __reduce__(self) -> tuple[Callable[..., Path], tuple[Sequence[str], bool, bool]]:
        return (Path.of, (self._segments, self._absolute, self._trailing))

    @property
    def absolute(self) -> bool:
        return self._absolute

    @property
    def trailing_separator(self) -> bool:
        return self._trailing

    @property
    def segments(self) -> tuple[str, ...]:
        return self._segments

    # ── Transformations ──────────────────────────────────────────────

    def _with(self, operation: Callable[[PathBuilder], None]) -> Path:
        builder = PathBuilder(self)
        operation(builder)
        return Path(builder)

    def resolve(self, other: str | PathView | None) -> Path:
        return self._with(lambda b: b.resolve(other))

    def relativize(self, target: str | PathView | None) -> Path:
        """Return the relative path that resolves from this path to *target*."""
        return self._with(lambda b: b.relativize(target))

    def normalize(self) -> Path:
        return self._with(PathBuilder.normalize)

    def parent(self) -> Path:
        return self._with(PathBuilder.to_parent)

    def directory_path(self) -> Path:
        return self._with(PathBuilder.to_directory)

    def append(self, other: str | PathView | None) -> Path:
        return self._with(lambda b: b.append(other))

    def prepend(self, other: str | PathView | None) -> Path:
        return self._with(lambda b: b.prepend(other))

    def remove_first_segments(self, count: int) -> Path:
        return self._with(lambda b: b.remove_first_segments(count))

    def remove_last_segments(self, count: int, folders_only: bool = False) -> Path:
        return self._with(lambda b: b.remove_last_segments(count, folders_only))

    def with_file_name(self, name: str | None) -> Path:
        return self._with(lambda b: b.set_file_name(name))

    def with_file_extension(self, extension: str | None) -> Path:
        return self._with(lambda b: b.set_file_extension(extension))

    def with_trailing_separator(self) -> Path:
        return self._with(PathBuilder.add_trailing_separator)

    def without_trailing_separator(self) -> Path:
        return self._with(PathBuilder.remove_trailing_separator)

    def as_absolute(self) -> Path:
        return self._with(PathBuilder.make_absolute)

    def as_relative(self) -> Path:
        return self._with(PathBuilder.make_relative)


EMPTY_PATH = Path()
ROOT_PATH = Path("/")
