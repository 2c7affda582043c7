"""Tests for algebraic properties across wren.paths, wren.codec and wren.routing."""

import itertools

import pytest

from wren.codec import decode, encode
from wren.paths import Path
from wren.routing import PrefixTable

ABSOLUTE_PATHS = [
    "/a",
    "/a/b",
    "/a/b/",
    "/a/b/c",
    "/a/b/c/",
    "/a/x/y.txt",
    "/q/r/s/t/",
    "/a/b/c/d/e",
]

PATHS = [
    "",
    "/",
    "a",
    "a/",
    "a/b",
    "../a",
    "./a/./b/",
    "/a/../b",
    "/a/b/../../..",
    "a/b/c/../../../d/",
    "/x/./y/../z/",
    *ABSOLUTE_PATHS,
]


class TestRelativizeResolve:
    @pytest.mark.parametrize(
        ("base", "target"),
        list(itertools.product(ABSOLUTE_PATHS, ABSOLUTE_PATHS)),
    )
    def test_resolve_undoes_relativize(self, base: str, target: str) -> None:
        b, t = Path(base), Path(target)
        assert b.resolve(b.relativize(t)) == t


class TestNormalize:
    @pytest.mark.parametrize("source", PATHS)
    def test_idempotent(self, source: str) -> None:
        once = Path(source).normalize()
        assert once.normalize() == once

    @pytest.mark.parametrize("source", PATHS)
    def test_no_dot_segments_left(self, source: str) -> None:
        segments = Path(source).normalize().segments
        assert not {"", ".", ".."} & set(segments)


class TestOrder:
    @pytest.mark.parametrize(("a", "b"), list(itertools.product(PATHS, PATHS)))
    def test_antisymmetric(self, a: str, b: str) -> None:
        pa, pb = Path(a), Path(b)
        assert pa.compare(pb) == -pb.compare(pa)

    @pytest.mark.parametrize("a", PATHS)
    def test_reflexive(self, a: str) -> None:
        assert Path(a).compare(Path(a)) == 0

    @pytest.mark.parametrize(
        ("relative", "absolute"),
        [("zzz/zzz", "/"), ("a", "/a"), ("", "/"), ("b/", "/a/")],
    )
    def test_absolute_sorts_after_relative(self, relative: str, absolute: str) -> None:
        assert Path(absolute).compare(Path(relative)) == 1


class TestCodec:
    @pytest.mark.parametrize(
        "text",
        [
            "hello world",
            "a+b=c&d",
            "#frag?query",
            "'single' \"double\"",
            "naïve café",
            "日本語のテキスト",
            "Ωμέγα",
            "mixed 😀 emoji 🎉",
            "\u0800\uffff",
        ],
    )
    def test_decode_inverts_encode(self, text: str) -> None:
        assert decode(encode(text, True, True)) == text

    @pytest.mark.parametrize("text", ["plain-ascii_text.~", "a b", "x#y"])
    def test_encoded_output_is_ascii(self, text: str) -> None:
        assert encode(text + "é").isascii()


REGISTERED = ["/a/", "/a/b/", "/a/b/c/d/", "/ab/", "/b/", "/b/c/", "/x/y/z/"]
QUERIES = [
    "/",
    "/a",
    "/a/b",
    "/a/b/c",
    "/a/b/c/d/e/f",
    "/ab",
    "/abc/d",
    "/a!/b",
    "/b/c/d",
    "/b/cc",
    "/x/y",
    "/x/y/z/w",
    "/zzz",
    "A/B",
]


class TestLongestMatch:
    @pytest.mark.parametrize("query", QUERIES)
    def test_nearest_is_longest_literal_prefix(self, query: str) -> None:
        table: PrefixTable[str] = PrefixTable()
        for prefix in REGISTERED:
            table.add(prefix, prefix)
        canonical = table.canonicalize(query)
        matches = [p for p in REGISTERED if canonical.startswith(p)]
        expected = max(matches, key=len) if matches else "/"
        assert table.get_nearest_path(query) == expected
