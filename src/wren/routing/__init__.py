"""Routing — longest-prefix lookup tables keyed by path.

Prefixes are stored in canonical, delimiter-bounded form (``/a/b/``)
in a sorted list, so lookups are binary searches.  Tables are meant to
be shared: every operation runs under the table's lock.
"""

from wren.routing.prefix import PrefixEntry, PrefixTable
from wren.routing.registry import ExtensionRegistry

__all__ = ["ExtensionRegistry", "PrefixEntry", "PrefixTable"]
