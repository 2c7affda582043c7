"""Paths — segment model with resolve, relativize and normalize.

A path is an ordered list of decoded segments plus two flags: whether
it starts at the root and whether it ends with a separator.  Both
``/`` and ``\\`` separate segments on input; output always uses ``/``.
"""

from wren.paths.base import PathView
from wren.paths.path import EMPTY_PATH, ROOT_PATH, Path, PathBuilder

__all__ = ["EMPTY_PATH", "ROOT_PATH", "Path", "PathBuilder", "PathView"]
