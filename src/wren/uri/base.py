"""Read-only URI API shared by Uri and UriBuilder."""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING, Any

from wren.config import DEFAULT_CONFIG, CodecConfig
from wren.paths import PathView
from wren.uri.query import QueryItem, QueryParams, format_query, format_query_raw

if TYPE_CHECKING:
    from wren.uri.uri import Uri, UriBuilder


class UriView:
    """Queries and serialization over the seven URI fields.

    Subclasses provide ``scheme_segments``, ``user_info``, ``host``,
    ``port``, ``path``, ``query_items`` and ``fragment``.  A ``Uri`` and
    a ``UriBuilder`` holding the same state compare equal.
    """

    __slots__ = ()

    scheme_segments: Sequence[str]
    user_info: str | None
    host: str | None
    port: int
    path: PathView
    query_items: Sequence[QueryItem]
    fragment: str | None

    # ── Scheme ───────────────────────────────────────────────────────

    @property
    def scheme(self) -> str | None:
        return self.get_scheme()

    def get_scheme(self, count: int = -1) -> str | None:
        """Join the first *count* scheme segments (all when negative) with ``:``."""
        segments = self.scheme_segments
        if count >= 0:
            segments = segments[:count]
        scheme = ":".join(segments)
        return scheme or None

    @property
    def has_scheme(self) -> bool:
        return bool(self.scheme_segments)

    @property
    def scheme_segment_count(self) -> int:
        return len(self.scheme_segments)

    def scheme_segment(self, index: int) -> str | None:
        segments = self.scheme_segments
        if 0 <= index < len(segments):
            return segments[index]
        return None

    # ── Authority ────────────────────────────────────────────────────

    def has_authority(self) -> bool:
        return self.user_info is not None or self.host is not None or self.port != 0

    def is_absolute_uri(self) -> bool:
        """True when the URI names a user-info or a host."""
        return self.user_info is not None or self.host is not None

    @property
    def authority(self) -> str | None:
        """``[user-info@][host][:port]``, or None when there is no authority."""
        if not self.has_authority():
            return None
        out = ""
        if self.user_info is not None:
            out += f"{self.user_info}@"
        if self.host is not None:
            out += self.host
        if self.port > 0:
            out += f":{self.port}"
        return out

    # ── Path, query, fragment ────────────────────────────────────────

    def get_path(self, config: CodecConfig = DEFAULT_CONFIG) -> str | None:
        return self.path.get_path(config)

    @property
    def query(self) -> str | None:
        """The query string without any encoding, or None when empty."""
        return format_query_raw(self.query_items) or None

    def get_query(self, config: CodecConfig = DEFAULT_CONFIG) -> str | None:
        query = format_query(self.query_items, config)
        return query or None

    def query_map(self) -> dict[str, list[str]]:
        """Query values grouped by name, names in first-seen order."""
        return self.query_params.to_dict()

    @property
    def query_params(self) -> QueryParams:
        return QueryParams(self.query_items)

    def get_fragment(self, config: CodecConfig = DEFAULT_CONFIG) -> str | None:
        if self.fragment is None:
            return None
        return config.encode_text(self.fragment)

    def full_path(self, config: CodecConfig = DEFAULT_CONFIG) -> str:
        """Path, query and fragment serialized together."""
        out = ""
        path = self.path
        if path.absolute or path.segments:
            out += path.to_string(config)
        query = self.get_query(config)
        if query:
            out += f"?{query}"
        fragment = self.get_fragment(config)
        if fragment:
            out += f"#{fragment}"
        return out

    # ── Serialization ────────────────────────────────────────────────

    def to_string(self, config: CodecConfig = DEFAULT_CONFIG) -> str:
        out = ""
        for segment in self.scheme_segments:
            if segment:
                out += config.encode_text(segment)
            out += ":"
        authority = self.authority
        if authority is not None:
            out += f"//{authority}"
        return out + self.full_path(config)

    def __str__(self) -> str:
        return self.to_string(DEFAULT_CONFIG)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.to_string(DEFAULT_CONFIG)!r})"

    # ── Comparison ───────────────────────────────────────────────────

    def _key(self) -> tuple[Any, ...]:
        return (
            tuple(self.scheme_segments),
            self.user_info,
            self.host,
            self.port,
            self.path,
            tuple(self.query_items),
            self.fragment,
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, UriView):
            return NotImplemented
        return self._key() == other._key()

    __hash__ = None  # type: ignore[assignment]

    # ── Conversions ──────────────────────────────────────────────────

    def builder(self) -> UriBuilder:
        """Return a new builder seeded with this URI's state."""
        from wren.uri.uri import UriBuilder

        return UriBuilder(self)

    def build(self) -> Uri:
        from wren.uri.uri import Uri

        return Uri(self)
