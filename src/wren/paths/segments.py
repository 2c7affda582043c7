"""Segment-list algorithms behind Path and PathBuilder.

Plain functions over ``list[str]`` so the builder can run them in place
and the tests can exercise them without building paths.
"""

from collections.abc import Sequence

DOT_SEGMENTS = frozenset(("", ".", ".."))


def remove_dot_segments(segments: list[str]) -> bool:
    """Drop ``""``, ``"."`` and ``".."`` segments in place.

    A ``".."`` also removes the kept segment before it, if there is one.
    A leading ``".."`` is dropped without climbing above the start.

    Returns:
        True when the last segment examined was a real segment.
    """
    last_real = False
    i = 0
    while i < len(segments):
        segment = segments[i]
        if segment not in DOT_SEGMENTS:
            last_real = True
            i += 1
            continue
        last_real = False
        del segments[i]
        if segment == ".." and i > 0:
            i -= 1
            del segments[i]
    return last_real


def common_prefix_length(first: Sequence[str], second: Sequence[str]) -> int:
    """Number of leading segments the two sequences share."""
    count = 0
    for a, b in zip(first, second):
        if a != b:
            break
        count += 1
    return count


def common_suffix_length(first: Sequence[str], second: Sequence[str]) -> int:
    """Number of trailing segments the two sequences share."""
    count = 0
    for a, b in zip(reversed(first), reversed(second)):
        if a != b:
            break
        count += 1
    return count


def compare_segments(
    first: tuple[bool, Sequence[str], bool],
    second: tuple[bool, Sequence[str], bool],
) -> int:
    """Total order over ``(absolute, segments, trailing_separator)`` triples.

    Relative sorts before absolute, then segment by segment, then the
    shorter list first, then no trailing separator before trailing.
    Returns -1, 0 or 1.
    """
    abs_a, segs_a, trail_a = first
    abs_b, segs_b, trail_b = second
    if abs_a != abs_b:
        return 1 if abs_a else -1
    for a, b in zip(segs_a, segs_b):
        if a != b:
            return -1 if a < b else 1
    if len(segs_a) != len(segs_b):
        return -1 if len(segs_a) < len(segs_b) else 1
    if trail_a != trail_b:
        return 1 if trail_a else -1
    return 0
