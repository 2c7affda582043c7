"""Extension registry keyed by path prefix.

Each prefix holds a sorted list of extensions.  A lookup for a path
returns the list registered under the longest matching prefix, so a
handler registered for ``/a/`` also serves ``/a/b/c``.

Usage::

    registry: ExtensionRegistry[str] = ExtensionRegistry()
    registry.add_extension("/docs/", "markdown")
    registry.add_extension("/docs/", "html")
    registry.get_extensions("/docs/guide/intro")   # ["html", "markdown"]
"""

import bisect
import logging
import threading
from typing import Generic, TypeVar

from wren.routing.prefix import PrefixTable

logger = logging.getLogger("wren.registry")

E = TypeVar("E")


class ExtensionRegistry(Generic[E]):
    """Sorted extension lists per canonical prefix.

    Extensions must be orderable.  All methods hold the registry lock,
    so a read never observes a half-updated list.
    """

    __slots__ = ("_lock", "_table")

    def __init__(self, delimiter: str = "/") -> None:
        self._table: PrefixTable[list[E]] = PrefixTable(delimiter)
        self._lock = threading.Lock()

    def add_extension(self, prefix: str | None, extension: E) -> None:
        with self._lock:
            extensions = self._table.get_exact_value(prefix)
            if extensions is None:
                extensions = []
                self._table.add(prefix, extensions)
            bisect.insort(extensions, extension)
        logger.debug("Added extension %r under %s", extension, self._table.canonicalize(prefix))

    def get_extensions(self, path: str | None) -> list[E]:
        """Extensions of the nearest registered prefix; empty when none matches."""
        with self._lock:
            extensions = self._table.get_nearest_value(path)
            return list(extensions) if extensions is not None else []

    def get_nearest_prefix(self, path: str | None) -> str:
        return self._table.get_nearest_path(path)

    def prefixes(self) -> list[str]:
        return self._table.prefixes()

    def remove_extension(self, extension: E) -> bool:
        """Remove *extension* from every prefix.  True if anything was removed."""
        with self._lock:
            removed = False
            for prefix in self._table.prefixes():
                removed |= self._remove_at(prefix, extension)
            return removed

    def remove_extension_at(self, prefix: str | None, extension: E) -> bool:
        with self._lock:
            return self._remove_at(prefix, extension)

    def _remove_at(self, prefix: str | None, extension: E) -> bool:
        extensions = self._table.get_exact_value(prefix)
        if extensions is None:
            logger.warning("No extensions registered under %s", self._table.canonicalize(prefix))
            return False
        try:
            extensions.remove(extension)
        except ValueError:
            return False
        if not extensions:
            self._table.remove(prefix)
        logger.debug("Removed extension %r from %s", extension, self._table.canonicalize(prefix))
        return True

    def __len__(self) -> int:
        return len(self._table)

    def __repr__(self) -> str:
        return f"ExtensionRegistry({self._table.prefixes()!r})"
