"""Query items and the read-only multi-value view over them.

A query is an ordered list of ``name=value`` items.  Order and
duplicate names are preserved; :class:`QueryParams` groups values by
name for lookups and implements ``Mapping[str, str]``.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass

from wren.config import DEFAULT_CONFIG, CodecConfig


@dataclass(frozen=True, slots=True)
class QueryItem:
    """One ``name=value`` pair, stored decoded."""

    name: str
    value: str = ""

    @classmethod
    def parse(
        cls,
        name: str | None,
        value: str | None,
        config: CodecConfig = DEFAULT_CONFIG,
    ) -> QueryItem:
        """Build an item from raw query text, decoding when *config* says so."""
        return cls(config.decode_text(name or ""), config.decode_text(value or ""))

    def render(self, config: CodecConfig = DEFAULT_CONFIG) -> str:
        return f"{config.encode_text(self.name)}={config.encode_text(self.value)}"

    def __str__(self) -> str:
        return self.render()


def parse_query(query: str | None, config: CodecConfig = DEFAULT_CONFIG) -> list[QueryItem]:
    """Split a raw query string into items.

    Pairs are separated by ``&`` and split on ``=``.  Names are stripped
    and pairs with an empty name are skipped; a missing value is ``""``.
    Text after a second ``=`` is ignored.
    """
    items: list[QueryItem] = []
    if not query:
        return items
    for pair in query.split("&"):
        parts = pair.split("=")
        name = parts[0].strip()
        if not name:
            continue
        value = parts[1] if len(parts) > 1 else None
        items.append(QueryItem.parse(name, value, config))
    return items


def format_query(items: Iterable[QueryItem], config: CodecConfig = DEFAULT_CONFIG) -> str:
    return "&".join(item.render(config) for item in items)


def format_query_raw(items: Iterable[QueryItem]) -> str:
    """Join items as ``name=value`` pairs with no escaping at all."""
    return "&".join(f"{item.name}={item.value}" for item in items)


class QueryParams(Mapping[str, str]):
    """Read-only lookups over an ordered tuple of query items.

    Indexing yields the first value carried under a name;
    :meth:`get_list` yields every value.  Names iterate in the order
    they first appear.
    """

    __slots__ = ("_items", "_names")

    _items: tuple[QueryItem, ...]
    _names: tuple[str, ...]

    def __init__(self, items: Iterable[QueryItem] = ()) -> None:
        items = tuple(items)
        object.__setattr__(self, "_items", items)
        object.__setattr__(self, "_names", tuple(dict.fromkeys(item.name for item in items)))

    def __setattr__(self, name: str, value: object) -> None:
        msg = f"{type(self).__name__} is immutable"
        raise AttributeError(msg)

    @classmethod
    def from_string(cls, query: str | None, config: CodecConfig = DEFAULT_CONFIG) -> QueryParams:
        return cls(parse_query(query, config))

    def _first(self, name: object) -> QueryItem | None:
        return next((item for item in self._items if item.name == name), None)

    def __getitem__(self, name: str) -> str:
        item = self._first(name)
        if item is None:
            raise KeyError(name)
        return item.value

    def __contains__(self, name: object) -> bool:
        return self._first(name) is not None

    def __iter__(self) -> Iterator[str]:
        return iter(self._names)

    def __len__(self) -> int:
        return len(self._names)

    def __repr__(self) -> str:
        return f"QueryParams({format_query(self._items)!r})"

    @property
    def items_list(self) -> tuple[QueryItem, ...]:
        """The underlying items, duplicates and order intact."""
        return self._items

    def get_list(self, name: str) -> list[str]:
        return [item.value for item in self._items if item.name == name]

    def to_dict(self) -> dict[str, list[str]]:
        """Name -> every value, names in first-seen order."""
        grouped: dict[str, list[str]] = {name: [] for name in self._names}
        for item in self._items:
            grouped[item.name].append(item.value)
        return grouped


def items_from_mapping(params: Mapping[str, str | Iterable[str]]) -> list[QueryItem]:
    """Flatten ``{name: value or values}`` into items, in mapping order."""
    items: list[QueryItem] = []
    for name, value in params.items():
        if isinstance(value, str):
            items.append(QueryItem(name, value))
        else:
            items.extend(QueryItem(name, v) for v in value)
    return items
