"""Tests for modtranslate.i18n.cache module."""

import pytest

from modtranslate.i18n import LocaleChainResolver, ResolvedLocaleCache, TranslationStore


def build(store, locale, **kwargs):
    return ResolvedLocaleCache.build(store, locale, "Test Mod", **kwargs)


class TestResolvedLocaleCache:
    """Tests for building and reading the resolved cache."""

    def test_first_locale_in_chain_wins(self, store):
        """Text comes from the most specific locale defining the key."""
        cache = build(store, "pt-BR")
        assert cache.get("farewell").text == "Tchau"
        assert cache.get("greeting").text == "Oi"
        assert cache.get("item.count").text == "{{count}} items"

    def test_source_locale_recorded(self, store):
        """Each entry records the chain locale that supplied its text."""
        cache = build(store, "pt-BR")
        assert cache.get("farewell").source_locale == "pt-br"
        assert cache.get("greeting").source_locale == "pt"
        assert cache.get("item.count").source_locale == "default"

    def test_active_locale_recorded(self, store):
        """Entries carry the active locale and owning mod."""
        entry = build(store, "PT-br").get("greeting")
        assert entry.locale == "pt-br"
        assert entry.mod_name == "Test Mod"

    def test_missing_keys_absent(self, store):
        """Keys no locale in the chain defines are not materialized."""
        cache = build(store, "en")
        assert cache.get("unknown") is None
        assert "unknown" not in cache

    def test_keys_outside_chain_absent(self, store):
        """Keys defined only by locales outside the chain are absent."""
        cache = build(store, "en")
        assert cache.get("farewell").text == "Bye"
        assert cache.get("welcome").text == "Welcome, {{name}}!"
        assert len(cache) == 4

    def test_case_insensitive_lookup(self, store):
        """Cache lookups ignore key case."""
        cache = build(store, "en")
        assert cache.get("GREETING") == cache.get("greeting")
        assert "Item.Count" in cache

    def test_unknown_locale_uses_default(self, store):
        """A locale with no translations resolves from the default locale."""
        cache = build(store, "de-DE")
        assert cache.chain == ("de-de", "de", "default")
        assert cache.get("greeting").text == "Hi"
        assert cache.get("welcome") is None

    def test_rebuild_is_idempotent(self, store):
        """Building twice from unchanged inputs yields identical entries."""
        first = build(store, "pt-BR")
        second = build(store, "pt-BR")
        assert first is not second
        assert first == second
        assert sorted(first.keys()) == sorted(second.keys())
        for key in first.keys():
            assert first.get(key) == second.get(key)

    def test_version_and_currency(self, store):
        """The cache records the store version it was built from."""
        cache = build(store, "en")
        assert cache.version == store.version
        assert cache.is_current("EN", store.version)
        store.replace_all({"en": {"greeting": "Hey"}})
        assert not cache.is_current("en", store.version)
        assert cache.get("greeting").text == "Hello"

    def test_custom_resolver(self, store):
        """The fallback locale comes from the resolver."""
        cache = build(store, "pt-BR", resolver=LocaleChainResolver("en"))
        assert cache.chain == ("pt-br", "pt", "en")
        assert cache.get("farewell").text == "Tchau"
        assert cache.get("item.count") is None

    def test_placeholder_flag_recorded(self, store):
        """The placeholder flag is copied onto every entry."""
        cache = build(store, "en", use_placeholder=True)
        assert all(entry.placeholder for entry in cache.entries())

    def test_entries_snapshot(self, store):
        """entries() returns a snapshot list."""
        cache = build(store, "en")
        entries = cache.entries()
        entries.clear()
        assert len(cache) == 4

    def test_empty_cache(self):
        """An empty cache has no entries."""
        cache = ResolvedLocaleCache.empty("EN")
        assert cache.locale == "en"
        assert len(cache) == 0
        assert cache.get("greeting") is None

    def test_build_from_empty_store(self):
        """Building from an empty store yields an empty cache."""
        cache = build(TranslationStore(), "en")
        assert len(cache) == 0
        assert cache.chain == ("en", "default")

    def test_cache_is_read_only(self, store):
        """The underlying mapping cannot be mutated."""
        cache = build(store, "en")
        with pytest.raises(TypeError):
            cache._entries["greeting"] = None
