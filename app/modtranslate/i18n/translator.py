"""Per-mod translation context.

Provides translations stored in a mod's translation files, with one table per
locale containing a flat key => value structure. Translations are fetched with
locale fallback, so missing translations are filled in from broader locales
(like pt-br < pt < default).
"""

from typing import Any, List, Mapping, Optional

from modtranslate.i18n.cache import ResolvedLocaleCache
from modtranslate.i18n.errors import TranslationHelperClosedError
from modtranslate.i18n.models import TranslationEntry, normalize_locale
from modtranslate.i18n.resolvers import LocaleChainResolver
from modtranslate.i18n.store import TranslationStore
from modtranslate.logging import get_module_logger

logger = get_module_logger()


class TranslationHelper:
    """Translation lookups for a single mod.

    Owns one TranslationStore and the ResolvedLocaleCache derived from it.
    Lookups only read the cache; it is rebuilt when the locale changes or
    the translations are replaced.

    Attributes:
        mod_id: Unique ID of the owning mod.
        mod_name: Name of the owning mod, recorded on every entry.
        resolver: Fallback chain resolver.
        use_placeholder: Whether entries render "(no translation:<key>)"
            when missing.
    """

    def __init__(
        self,
        mod_id: str,
        mod_name: str,
        locale: str,
        language_code: Any = None,
        resolver: Optional[LocaleChainResolver] = None,
        use_placeholder: bool = False,
    ):
        """Initialize a translation context.

        Args:
            mod_id: Unique ID of the owning mod.
            mod_name: Name of the owning mod.
            locale: Initial locale.
            language_code: Host language tag, stored for callers but not used
                for resolution.
            resolver: Fallback chain resolver (default: falls back to "default").
            use_placeholder: Render missing translations as a placeholder.
        """
        self.mod_id = mod_id
        self.mod_name = mod_name
        self.resolver = resolver or LocaleChainResolver()
        self.use_placeholder = use_placeholder
        self.log = logger.bind(mod_id=mod_id)

        self._store = TranslationStore(mod_name=mod_name)
        self._cache = ResolvedLocaleCache.empty(locale)
        self._locale = normalize_locale(locale)
        self._language_code = language_code
        self._closed = False

        self.set_locale(locale, language_code)

    @property
    def locale(self) -> str:
        """The current (normalized) locale."""
        return self._locale

    @property
    def language_code(self) -> Any:
        """The host's current language tag."""
        return self._language_code

    @property
    def store(self) -> TranslationStore:
        """The unresolved translation store."""
        return self._store

    @property
    def cache(self) -> ResolvedLocaleCache:
        """The currently published resolved cache."""
        return self._cache

    @property
    def closed(self) -> bool:
        """Whether close() has released this context."""
        return self._closed

    def get(self, key: str, tokens: Any = None) -> TranslationEntry:
        """Get a translation for the current locale.

        Args:
            key: Translation key (case-insensitive).
            tokens: Optional token source to bind (mapping, pairs, dataclass,
                NamedTuple, pydantic model, or plain object).

        Returns:
            The resolved entry, or a new entry without text if no locale in
            the fallback chain defines the key.

        Raises:
            ConfigurationError: If tokens is not a flat name/value structure.
        """
        entry = self._cache.get(key)
        if entry is None:
            entry = TranslationEntry(
                mod_name=self.mod_name,
                locale=self._locale,
                key=key,
                text=None,
                placeholder=self.use_placeholder,
            )
        if tokens is not None:
            entry = entry.with_tokens(tokens)
        return entry

    def get_all(self) -> List[TranslationEntry]:
        """Get all translations for the current locale."""
        return self._cache.entries()

    def to_text(self, entry: TranslationEntry) -> str:
        """Render an entry to its final text."""
        return entry.to_text()

    def set_translations(
        self, translations: Optional[Mapping[str, Mapping[str, str]]]
    ) -> "TranslationHelper":
        """Replace all translations and rebuild the cache.

        Args:
            translations: Mapping of locale -> mapping of key -> raw text.

        Returns:
            This helper.

        Raises:
            InvalidReplacementError: If the table is rejected; the previous
                translations and cache stay in place.
            TranslationHelperClosedError: If the helper was closed.
        """
        self._ensure_open()
        self._store.replace_all(translations)
        self._rebuild()
        return self

    def set_locale(self, locale: str, language_code: Any = None) -> None:
        """Set the current locale and precache translations.

        Args:
            locale: The current locale.
            language_code: The host's current language tag.

        Raises:
            TranslationHelperClosedError: If the helper was closed.
        """
        self._ensure_open()
        self._locale = normalize_locale(locale)
        self._language_code = language_code
        self._rebuild()

    def close(self) -> None:
        """Release translations when the owning mod is torn down."""
        self._store.clear()
        self._cache = ResolvedLocaleCache.empty(self._locale)
        self._closed = True
        self.log.debug("translation_helper_closed")

    def _ensure_open(self) -> None:
        if self._closed:
            raise TranslationHelperClosedError(self.mod_id)

    def _rebuild(self) -> None:
        cache = ResolvedLocaleCache.build(
            self._store,
            self._locale,
            self.mod_name,
            resolver=self.resolver,
            use_placeholder=self.use_placeholder,
        )
        # publish
        self._cache = cache
        self.log.debug(
            "locale_cache_rebuilt",
            locale=cache.locale,
            chain=list(cache.chain),
            entry_count=len(cache),
            version=cache.version,
        )

    def __enter__(self) -> "TranslationHelper":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def __repr__(self) -> str:
        return (
            f"TranslationHelper(mod_id={self.mod_id!r}, locale={self._locale!r}, "
            f"entries={len(self._cache)})"
        )
