"""Translation store holding the unresolved per-locale translation table."""

from collections.abc import Mapping
from types import MappingProxyType
from typing import Dict, Iterator, List, NamedTuple, Optional, Tuple

from modtranslate.i18n.errors import InvalidReplacementError
from modtranslate.i18n.models import normalize_key, normalize_locale
from modtranslate.logging import get_module_logger

logger = get_module_logger()


class StoredText(NamedTuple):
    """Raw text together with the key as spelled in the source table."""

    key: str
    text: str


class TranslationStore:
    """Owns the full translation table: locale -> (key -> raw text).

    Locales and keys are compared case-insensitively. The table is only ever
    replaced whole; a replacement is validated before it is installed, so a
    rejected table leaves the previous one in place.

    Attributes:
        version: Incremented on every successful replacement.
    """

    def __init__(self, mod_name: str = ""):
        """Initialize an empty store.

        Args:
            mod_name: Name of the owning mod, used for log context.
        """
        self.mod_name = mod_name
        self.version = 0
        self._tables: Mapping[str, Mapping[str, StoredText]] = MappingProxyType({})

    def replace_all(self, new_table: Optional[Mapping[str, Mapping[str, str]]]) -> None:
        """Discard all translations and install a new table.

        Args:
            new_table: Mapping of locale -> mapping of key -> raw text.

        Raises:
            InvalidReplacementError: If the table is None or malformed.
        """
        if new_table is None:
            logger.warning("translation_replacement_rejected", mod_name=self.mod_name, reason="none")
            raise InvalidReplacementError("Translation table must not be None")
        if not isinstance(new_table, Mapping):
            logger.warning(
                "translation_replacement_rejected",
                mod_name=self.mod_name,
                reason="not_a_mapping",
                table_type=type(new_table).__name__,
            )
            raise InvalidReplacementError(
                f"Translation table must be a mapping, got {type(new_table).__name__}"
            )

        tables: Dict[str, Mapping[str, StoredText]] = {}
        for locale, translations in new_table.items():
            normalized_locale = self._validate_locale(locale, translations)
            if normalized_locale in tables:
                logger.warning(
                    "duplicate_translation_locale",
                    mod_name=self.mod_name,
                    locale=normalized_locale,
                )
            tables[normalized_locale] = MappingProxyType(
                self._ingest_locale(normalized_locale, translations)
            )

        # publish the new table in a single swap
        self._tables = MappingProxyType(tables)
        self.version += 1

        logger.info(
            "translations_replaced",
            mod_name=self.mod_name,
            locale_count=len(tables),
            key_count=sum(len(t) for t in tables.values()),
            version=self.version,
        )

    def lookup_raw(self, locale: str, key: str) -> Optional[str]:
        """Get the raw text for a key in exactly one locale (no fallback).

        Args:
            locale: Locale to search.
            key: Translation key.

        Returns:
            Raw text, or None if the locale does not define the key.
        """
        translations = self._tables.get(normalize_locale(locale))
        if translations is None:
            return None
        stored = translations.get(normalize_key(key))
        return stored.text if stored is not None else None

    def has_locale(self, locale: str) -> bool:
        """Whether the table defines the given locale."""
        return normalize_locale(locale) in self._tables

    def locales(self) -> List[str]:
        """Get the normalized locales defined by the current table."""
        return list(self._tables.keys())

    def entries(self, locale: str) -> Iterator[Tuple[str, str]]:
        """Iterate (key, text) pairs for a locale, keys as spelled in the table."""
        translations = self._tables.get(normalize_locale(locale), {})
        for stored in translations.values():
            yield stored.key, stored.text

    def clear(self) -> None:
        """Drop all translations."""
        self._tables = MappingProxyType({})
        self.version += 1

    def __len__(self) -> int:
        return len(self._tables)

    def _validate_locale(self, locale, translations) -> str:
        if not isinstance(locale, str) or not locale.strip():
            raise InvalidReplacementError(f"Invalid locale identifier: {locale!r}")
        if not isinstance(translations, Mapping):
            raise InvalidReplacementError(
                f"Translations for locale '{locale}' must be a mapping, "
                f"got {type(translations).__name__}"
            )
        return normalize_locale(locale)

    def _ingest_locale(
        self, locale: str, translations: Mapping[str, str]
    ) -> Dict[str, StoredText]:
        ingested: Dict[str, StoredText] = {}
        for key, text in translations.items():
            if not isinstance(key, str):
                raise InvalidReplacementError(
                    f"Translation key in locale '{locale}' must be a string: {key!r}"
                )
            if not isinstance(text, str):
                raise InvalidReplacementError(
                    f"Translation '{key}' in locale '{locale}' must be a string, "
                    f"got {type(text).__name__}"
                )
            normalized = normalize_key(key)
            if normalized in ingested:
                logger.warning(
                    "duplicate_translation_key",
                    mod_name=self.mod_name,
                    locale=locale,
                    key=key,
                )
            ingested[normalized] = StoredText(key=key, text=text)
        return ingested
