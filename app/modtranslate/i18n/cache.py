"""Resolved translations for one active locale.

A ResolvedLocaleCache is built from scratch for each (store version, active
locale) pair and never mutated afterwards. Owners publish a rebuilt cache by
replacing their reference to it, so a reader sees either the old or the new
cache and never a partially built one.
"""

from types import MappingProxyType
from typing import Dict, List, Mapping, Optional, Tuple

from modtranslate.i18n.models import TranslationEntry, normalize_key, normalize_locale
from modtranslate.i18n.resolvers import LocaleChainResolver
from modtranslate.i18n.store import TranslationStore


class ResolvedLocaleCache:
    """Immutable key -> TranslationEntry index for the active locale.

    Attributes:
        locale: Active locale the cache was built for.
        version: Store version the cache was built from.
        chain: Fallback chain walked during the build.
    """

    def __init__(
        self,
        locale: str,
        version: int,
        chain: Tuple[str, ...],
        entries: Mapping[str, TranslationEntry],
    ):
        self.locale = locale
        self.version = version
        self.chain = chain
        self._entries = MappingProxyType(dict(entries))

    @classmethod
    def empty(cls, locale: str = "") -> "ResolvedLocaleCache":
        """Create a cache with no entries (e.g., before any table is loaded)."""
        return cls(locale=normalize_locale(locale), version=-1, chain=(), entries={})

    @classmethod
    def build(
        cls,
        store: TranslationStore,
        locale: str,
        mod_name: str,
        resolver: Optional[LocaleChainResolver] = None,
        use_placeholder: bool = False,
    ) -> "ResolvedLocaleCache":
        """Resolve every key reachable from the active locale's fallback chain.

        For each key, the text comes from the first locale in the chain that
        defines it. Keys no locale defines are left out.

        Args:
            store: Store holding the unresolved translation table.
            locale: Active locale.
            mod_name: Name of the owning mod, recorded on each entry.
            resolver: Fallback chain resolver (default: falls back to "default").
            use_placeholder: Placeholder flag recorded on each entry.

        Returns:
            New ResolvedLocaleCache.
        """
        resolver = resolver or LocaleChainResolver()
        active = normalize_locale(locale)
        chain = resolver.resolve(active)

        entries: Dict[str, TranslationEntry] = {}
        for next_locale in chain:
            # skip if locale not defined
            if not store.has_locale(next_locale):
                continue

            # add missing translations
            for key, text in store.entries(next_locale):
                normalized = normalize_key(key)
                if normalized in entries:
                    continue
                entries[normalized] = TranslationEntry(
                    mod_name=mod_name,
                    locale=active,
                    key=key,
                    text=text,
                    source_locale=next_locale,
                    placeholder=use_placeholder,
                )

        return cls(locale=active, version=store.version, chain=chain, entries=entries)

    def get(self, key: str) -> Optional[TranslationEntry]:
        """Get the resolved entry for a key, or None if no locale defines it."""
        return self._entries.get(normalize_key(key))

    def entries(self) -> List[TranslationEntry]:
        """Snapshot of all resolved entries."""
        return list(self._entries.values())

    def keys(self) -> List[str]:
        """Normalized keys present in the cache."""
        return list(self._entries.keys())

    def is_current(self, locale: str, version: int) -> bool:
        """Whether the cache was built for this locale and store version."""
        return self.locale == normalize_locale(locale) and self.version == version

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and normalize_key(key) in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ResolvedLocaleCache):
            return NotImplemented
        return (
            self.locale == other.locale
            and self.version == other.version
            and self.chain == other.chain
            and dict(self._entries) == dict(other._entries)
        )

    __hash__ = None  # type: ignore[assignment]
