"""Tests for wren.routing.registry — extensions keyed by path prefix."""

import logging

import pytest

from wren.routing import ExtensionRegistry


@pytest.fixture
def registry() -> ExtensionRegistry[str]:
    reg: ExtensionRegistry[str] = ExtensionRegistry()
    reg.add_extension("/docs/", "markdown")
    reg.add_extension("/docs/", "html")
    reg.add_extension("/docs/api/", "openapi")
    reg.add_extension("", "fallback")
    return reg


class TestExtensionRegistry:
    def test_extensions_sorted_per_prefix(self, registry: ExtensionRegistry[str]) -> None:
        assert registry.get_extensions("/docs/") == ["html", "markdown"]

    def test_nearest_prefix_wins(self, registry: ExtensionRegistry[str]) -> None:
        assert registry.get_extensions("/docs/guide/intro") == ["html", "markdown"]
        assert registry.get_extensions("/docs/api/v1") == ["openapi"]
        assert registry.get_extensions("/blog/post") == ["fallback"]

    def test_nearest_prefix(self, registry: ExtensionRegistry[str]) -> None:
        assert registry.get_nearest_prefix("/docs/api/v1") == "/docs/api/"

    def test_no_match(self) -> None:
        reg: ExtensionRegistry[str] = ExtensionRegistry()
        reg.add_extension("/a/", "x")
        assert reg.get_extensions("/b/") == []

    def test_returned_list_is_a_copy(self, registry: ExtensionRegistry[str]) -> None:
        registry.get_extensions("/docs/").append("pdf")
        assert registry.get_extensions("/docs/") == ["html", "markdown"]

    def test_remove_everywhere(self) -> None:
        reg: ExtensionRegistry[str] = ExtensionRegistry()
        reg.add_extension("/a/", "x")
        reg.add_extension("/b/", "x")
        reg.add_extension("/b/", "y")
        assert reg.remove_extension("x")
        assert reg.prefixes() == ["/b/"]
        assert reg.get_extensions("/b/") == ["y"]
        assert not reg.remove_extension("x")

    def test_remove_at(self, registry: ExtensionRegistry[str]) -> None:
        assert registry.remove_extension_at("/docs/", "html")
        assert registry.get_extensions("/docs/") == ["markdown"]
        assert not registry.remove_extension_at("/docs/", "html")

    def test_empty_prefix_dropped(self, registry: ExtensionRegistry[str]) -> None:
        registry.remove_extension_at("/docs/api/", "openapi")
        assert "/docs/api/" not in registry.prefixes()
        assert registry.get_extensions("/docs/api/v1") == ["html", "markdown"]

    def test_remove_at_unknown_prefix_warns(
        self, registry: ExtensionRegistry[str], caplog: pytest.LogCaptureFixture
    ) -> None:
        with caplog.at_level(logging.WARNING, logger="wren.registry"):
            assert not registry.remove_extension_at("/nope/", "html")
        assert "/nope/" in caplog.text

    def test_len_counts_prefixes(self, registry: ExtensionRegistry[str]) -> None:
        assert len(registry) == 3

    def test_repr(self, registry: ExtensionRegistry[str]) -> None:
        assert repr(registry) == "ExtensionRegistry(['/', '/docs/', '/docs/api/'])"
