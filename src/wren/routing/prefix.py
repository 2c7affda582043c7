"""Sorted prefix table with longest-prefix-match lookup.

Free-threading safe: one lock covers each binary search together with
the insert or delete that follows it.

Usage::

    table: PrefixTable[str] = PrefixTable()
    table.add("/a", "A")
    table.add("a/b/c", "C")              # stored as "/a/b/c/"
    table.get_nearest_path("/a/b/d/")    # "/a/"
    table.get_nearest_value("/a/b/c/x")  # "C"
"""

import bisect
import logging
import threading
from collections.abc import Iterator
from dataclasses import dataclass
from typing import Generic, TypeVar

from wren.errors import ConfigurationError

logger = logging.getLogger("wren.routing")

V = TypeVar("V")


@dataclass(frozen=True, slots=True)
class PrefixEntry(Generic[V]):
    """A canonical prefix and the value registered under it."""

    prefix: str
    value: V


class PrefixTable(Generic[V]):
    """Map canonical path prefixes to values, answering nearest-prefix queries.

    The first value added under a prefix stays until the prefix is
    removed; adding again returns the canonical prefix without
    replacing anything.
    """

    __slots__ = ("_delimiter", "_entries", "_keys", "_lock")

    def __init__(self, delimiter: str = "/") -> None:
        if len(delimiter) != 1:
            msg = f"PrefixTable delimiter must be a single character, got {delimiter!r}"
            raise ConfigurationError(msg)
        self._delimiter = delimiter
        self._keys: list[str] = []
        self._entries: list[PrefixEntry[V]] = []
        self._lock = threading.Lock()

    @property
    def delimiter(self) -> str:
        return self._delimiter

    def canonicalize(self, path: str | None) -> str:
        """Bound *path* with the delimiter on both ends; None is the root."""
        d = self._delimiter
        if path is None:
            return d
        if not path.startswith(d):
            path = d + path
        if not path.endswith(d):
            path += d
        return path

    def _find(self, key: str) -> int:
        """Index of *key*, or ``-(insertion point + 1)`` when absent."""
        idx = bisect.bisect_left(self._keys, key)
        if idx < len(self._keys) and self._keys[idx] == key:
            return idx
        return -(idx + 1)

    def _strip_segment(self, key: str) -> str:
        """Drop the last segment of a canonical key: ``/a/b/`` -> ``/a/``."""
        idx = key.rfind(self._delimiter, 0, len(key) - 1)
        return key[: idx + 1] if idx >= 0 else ""

    # ── Mutation ─────────────────────────────────────────────────────

    def add(self, prefix: str | None, value: V) -> str:
        """Register *value* under *prefix* unless the prefix is taken.

        Returns:
            The canonical form of *prefix*.
        """
        key = self.canonicalize(prefix)
        with self._lock:
            pos = self._find(key)
            if pos < 0:
                pos = -(pos + 1)
                self._keys.insert(pos, key)
                self._entries.insert(pos, PrefixEntry(key, value))
                logger.debug("Registered prefix %s", key)
        return key

    def remove(self, prefix: str | None) -> PrefixEntry[V] | None:
        """Unregister *prefix*, returning its entry if it was present."""
        key = self.canonicalize(prefix)
        with self._lock:
            pos = self._find(key)
            if pos < 0:
                return None
            del self._keys[pos]
            entry = self._entries.pop(pos)
        logger.debug("Removed prefix %s", key)
        return entry

    def clear(self) -> None:
        with self._lock:
            self._keys.clear()
            self._entries.clear()

    # ── Exact lookup ─────────────────────────────────────────────────

    def exists(self, prefix: str | None) -> bool:
        key = self.canonicalize(prefix)
        with self._lock:
            return self._find(key) >= 0

    __contains__ = exists

    def get_exact_entry(self, prefix: str | None) -> PrefixEntry[V] | None:
        key = self.canonicalize(prefix)
        with self._lock:
            pos = self._find(key)
            return self._entries[pos] if pos >= 0 else None

    def get_exact_value(self, prefix: str | None) -> V | None:
        entry = self.get_exact_entry(prefix)
        return entry.value if entry is not None else None

    # ── Nearest lookup ───────────────────────────────────────────────

    def get_nearest_entry(self, path: str | None) -> PrefixEntry[V] | None:
        """Return the entry with the longest prefix of *path*, if any.

        Each round binary-searches for the key at or before the current
        candidate.  If that key is not a literal prefix of *path*, the
        candidate loses its last segment and the search repeats.
        """
        path = self.canonicalize(path)
        candidate = path
        with self._lock:
            while candidate:
                pos = self._find(candidate)
                if pos < 0:
                    pos = -(pos + 1)
                    if pos > 0:
                        pos -= 1
                if pos >= len(self._entries):
                    break
                entry = self._entries[pos]
                if path.startswith(entry.prefix):
                    return entry
                candidate = self._strip_segment(candidate)
        return None

    def get_nearest_path(self, path: str | None) -> str:
        """The longest registered prefix of *path*, or the root delimiter."""
        entry = self.get_nearest_entry(path)
        return entry.prefix if entry is not None else self._delimiter

    def get_nearest_value(self, path: str | None) -> V | None:
        entry = self.get_nearest_entry(path)
        return entry.value if entry is not None else None

    # ── Iteration ────────────────────────────────────────────────────

    def entries(self) -> list[PrefixEntry[V]]:
        """Snapshot of all entries, sorted by prefix."""
        with self._lock:
            return list(self._entries)

    def prefixes(self) -> list[str]:
        with self._lock:
            return list(self._keys)

    def __iter__(self) -> Iterator[PrefixEntry[V]]:
        return iter(self.entries())

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def __repr__(self) -> str:
        return f"PrefixTable({self.prefixes()!r})"
