"""Tests for intl.i18n.resolver module."""

import pytest

from intl.i18n import (
    DictionaryCache,
    LoaderFailureError,
    LocaleRegistry,
    PathResolver,
    UndeclaredLocaleError,
    get_by_path,
)
from tests.factories.i18n import CountingLoader


def _resolver(dictionaries, default_locale="en-US"):
    registry = LocaleRegistry(dictionaries=dictionaries, default_locale=default_locale)
    return PathResolver(DictionaryCache(registry))


class TestGetByPath:
    """Tests for get_by_path()."""

    def test_nested_lookup(self):
        assert get_by_path({"a": {"b": "X"}}, "a.b") == "X"

    def test_missing_intermediate(self):
        assert get_by_path({"a": "leaf"}, "a.b") is None

    def test_missing_leaf(self):
        assert get_by_path({"a": {}}, "a.b") is None

    def test_empty_path_returns_tree(self):
        tree = {"a": 1}
        assert get_by_path(tree, "") is tree
        assert get_by_path(tree, None) is tree

    def test_list_index(self):
        assert get_by_path({"items": ["x", "y"]}, "items.1") == "y"
        assert get_by_path({"items": ["x", "y"]}, "items.5") is None

    def test_non_decimal_digit_segment_is_missing(self):
        """Unicode digits that are not decimal do not index lists."""
        assert get_by_path({"items": ["x", "y"]}, "items.²") is None

    def test_unicode_decimal_segment_indexes_list(self):
        assert get_by_path({"items": ["x", "y"]}, "items.١") == "y"

    def test_falsy_values_are_found(self):
        assert get_by_path({"a": {"count": 0, "flag": False}}, "a.count") == 0
        assert get_by_path({"a": {"count": 0, "flag": False}}, "a.flag") is False


class TestPathResolver:
    """Tests for PathResolver."""

    @pytest.mark.asyncio
    async def test_value_from_target_locale(self):
        resolver = _resolver({"en-US": {"a": "en"}, "fr-FR": {"a": "fr"}})
        assert await resolver.resolve_value("a", "fr-FR") == "fr"

    @pytest.mark.asyncio
    async def test_fallback_for_missing_leaf(self):
        """Missing keys in the target locale fall back to the default locale."""
        resolver = _resolver({"en-US": {"a": {"b": "X"}}, "fr-FR": {"a": {}}})
        assert await resolver.resolve_value("a.b", "fr-FR") == "X"

    @pytest.mark.asyncio
    async def test_fallback_for_missing_intermediate(self):
        resolver = _resolver({"en-US": {"a": {"b": "X"}}, "fr-FR": {}})
        assert await resolver.resolve_value("a.b", "fr-FR") == "X"

    @pytest.mark.asyncio
    async def test_fallback_is_per_value(self):
        """Fallback does not replace values the target locale has."""
        resolver = _resolver(
            {
                "en-US": {"a": {"b": "X", "c": "Y"}},
                "fr-FR": {"a": {"b": "Z"}},
            }
        )
        assert await resolver.resolve_value("a.b", "fr-FR") == "Z"
        assert await resolver.resolve_value("a.c", "fr-FR") == "Y"

    @pytest.mark.asyncio
    async def test_missing_everywhere_is_none(self):
        resolver = _resolver({"en-US": {"a": {}}, "fr-FR": {}})
        assert await resolver.resolve_value("a.b", "fr-FR") is None
        assert await resolver.resolve_value("a.b", "en-US") is None

    @pytest.mark.asyncio
    async def test_whole_dictionary_of_target(self):
        fr = {"a": "fr"}
        resolver = _resolver({"en-US": {"a": "en"}, "fr-FR": fr})
        assert await resolver.resolve_value("", "fr-FR") is fr
        assert await resolver.resolve_value(None, "fr-FR") is fr

    @pytest.mark.asyncio
    async def test_target_load_failure_falls_back_to_default(self):
        """A target dictionary that fails to load falls back wholesale."""
        en = {"a": {"b": "X"}}
        resolver = _resolver(
            {"en-US": en, "fr-FR": CountingLoader(failures=10)}
        )

        assert await resolver.resolve_value("a.b", "fr-FR") == "X"
        assert await resolver.resolve_value("a.missing", "fr-FR") is None
        assert await resolver.resolve_value(None, "fr-FR") is en

    @pytest.mark.asyncio
    async def test_default_load_failure_propagates(self):
        resolver = _resolver(
            {"en-US": CountingLoader(failures=10), "fr-FR": {"a": "fr"}}
        )
        with pytest.raises(LoaderFailureError):
            await resolver.resolve_value("a", "fr-FR")

    @pytest.mark.asyncio
    async def test_undeclared_locale_propagates(self):
        resolver = _resolver({"en-US": {"a": "en"}})
        with pytest.raises(UndeclaredLocaleError):
            await resolver.resolve_value("a", "de-DE")

    @pytest.mark.asyncio
    async def test_subtree_result(self):
        resolver = _resolver({"en-US": {"nav": {"home": "Home"}}})
        assert await resolver.resolve_value("nav", "en-US") == {"home": "Home"}

    @pytest.mark.asyncio
    async def test_superscript_segment_resolves_to_none(self):
        resolver = _resolver({"en-US": {"items": ["a", "b"]}})
        assert await resolver.resolve_value("items.²", "en-US") is None
