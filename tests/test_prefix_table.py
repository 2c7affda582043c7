"""Tests for wren.routing.prefix — sorted prefix table with nearest lookup."""

import threading

import pytest

from wren.errors import ConfigurationError
from wren.routing import PrefixEntry, PrefixTable


def _table(*prefixes: str) -> PrefixTable[str]:
    table: PrefixTable[str] = PrefixTable()
    for prefix in prefixes:
        table.add(prefix, prefix)
    return table


class TestCanonical:
    @pytest.mark.parametrize(
        ("prefix", "expected"),
        [
            ("a/b", "/a/b/"),
            ("/a/b", "/a/b/"),
            ("a/b/", "/a/b/"),
            ("/a/b/", "/a/b/"),
            ("", "/"),
            (None, "/"),
        ],
    )
    def test_canonicalize(self, prefix: str | None, expected: str) -> None:
        assert PrefixTable().canonicalize(prefix) == expected

    def test_add_returns_canonical_form(self) -> None:
        assert PrefixTable().add("a/b", 1) == "/a/b/"

    def test_custom_delimiter(self) -> None:
        table: PrefixTable[int] = PrefixTable(".")
        table.add("com.example", 1)
        assert table.prefixes() == [".com.example."]
        assert table.get_nearest_path("com.example.app") == ".com.example."

    @pytest.mark.parametrize("delimiter", ["", "//"])
    def test_bad_delimiter(self, delimiter: str) -> None:
        with pytest.raises(ConfigurationError, match="single character"):
            PrefixTable(delimiter)


class TestMutation:
    def test_add_and_remove(self) -> None:
        table = _table("/a/b/c/", "/a/")
        entry = table.remove("/a/b/c/")
        assert entry == PrefixEntry("/a/b/c/", "/a/b/c/")
        entry = table.remove("/a/")
        assert entry is not None
        assert entry.prefix == "/a/"
        assert len(table) == 0

    def test_remove_missing(self) -> None:
        assert _table("/a/").remove("/b/") is None

    def test_first_value_kept(self) -> None:
        table: PrefixTable[str] = PrefixTable()
        table.add("", "A")
        table.add("", "B")
        assert table.get_exact_value("/") == "A"
        assert len(table) == 1

    def test_sorted(self) -> None:
        table = _table("/x/", "/a/b/", "/a/")
        assert table.prefixes() == ["/a/", "/a/b/", "/x/"]
        assert [entry.prefix for entry in table] == ["/a/", "/a/b/", "/x/"]

    def test_exists(self) -> None:
        table = _table("/a/b/")
        assert table.exists("a/b")
        assert "/a/b/" in table
        assert not table.exists("/a/")

    def test_exact_entry(self) -> None:
        table = _table("/a/")
        assert table.get_exact_entry("a") == PrefixEntry("/a/", "/a/")
        assert table.get_exact_entry("/a/b/") is None
        assert table.get_exact_value("/zzz/") is None

    def test_clear(self) -> None:
        table = _table("/a/", "/b/")
        table.clear()
        assert table.prefixes() == []

    def test_repr(self) -> None:
        assert repr(_table("/a/")) == "PrefixTable(['/a/'])"


class TestNearest:
    @pytest.mark.parametrize(
        ("path", "expected"),
        [
            ("/a/", "/a/"),
            ("/a/b/", "/a/"),
            ("/a/b/d/", "/a/"),
            ("/a/b/c/", "/a/b/c/"),
            ("/a/b/c/x/", "/a/b/c/"),
            ("/a/b/c/d/", "/a/b/c/d/"),
            ("/A/B/", "/"),
            ("/", "/"),
            ("/x/y/z/A/B/C/", "/x/y/z/"),
        ],
    )
    def test_nearest_path(self, path: str, expected: str) -> None:
        table = _table("/a/b/c/", "/a/b/c/d/", "/a/", "/x/y/z/")
        assert table.get_nearest_path(path) == expected

    def test_file_below_prefix(self) -> None:
        table = _table("/", "/edit/", "/resources/img/")
        assert table.get_nearest_path("/resources/img/toto") == "/resources/img/"

    def test_entries_and_misses(self) -> None:
        table: PrefixTable[str] = PrefixTable()
        table.add("/a/", "/1/2/3")
        table.add("/a/b/c/", "/x/y/z/")
        assert table.get_nearest_path("/a/b/C/D") == "/a/"
        assert table.get_nearest_entry("/a/") == PrefixEntry("/a/", "/1/2/3")
        assert table.get_nearest_path("/x/") == "/"
        assert table.get_nearest_entry("/x/") is None

    def test_root_catches_everything(self) -> None:
        table: PrefixTable[str] = PrefixTable()
        table.add("/n", "N")
        table.add("/x", "X")
        table.add("", "A")
        table.add("", "B")
        assert table.get_nearest_value("/m") == "A"
        assert table.get_nearest_value("/n/m") == "N"
        assert table.get_nearest_value("/b") == "A"

    def test_segment_boundaries_respected(self) -> None:
        table = _table("/ab/")
        assert table.get_nearest_entry("/abc/") is None
        assert table.get_nearest_value("/ab/c") == "/ab/"

    def test_empty_table(self) -> None:
        table: PrefixTable[str] = PrefixTable()
        assert table.get_nearest_entry("/a/b") is None
        assert table.get_nearest_path("/a/b") == "/"
        assert table.get_nearest_value(None) is None


class TestConcurrency:
    def test_parallel_adds_stay_sorted(self) -> None:
        table: PrefixTable[int] = PrefixTable()

        def worker(base: int) -> None:
            for i in range(100):
                table.add(f"/p{base}/{i}/", i)

        threads = [threading.Thread(target=worker, args=(n,)) for n in range(8)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        prefixes = table.prefixes()
        assert len(prefixes) == 800
        assert prefixes == sorted(prefixes)
        assert table.get_nearest_value("/p3/42/deep/") == 42
