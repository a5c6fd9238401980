"""Translation models for the i18n engine.

Defines locale/key normalization and the immutable TranslationEntry value
returned by every lookup.
"""

from dataclasses import dataclass, replace
from typing import Any, Dict, Optional

from modtranslate.i18n.tokens import TokenPairs, interpolate, normalize_tokens, token_lookup

DEFAULT_LOCALE = "default"

MISSING_PLACEHOLDER = "(no translation:{key})"


def normalize_locale(locale: Optional[str]) -> str:
    """Normalize a locale identifier (e.g., " pt-BR " -> "pt-br").

    Args:
        locale: Raw locale string. None is treated as empty.

    Returns:
        Lower-cased, trimmed locale identifier.
    """
    return (locale or "").strip().lower()


def normalize_key(key: str) -> str:
    """Normalize a translation key for case-insensitive comparison."""
    return key.lower()


@dataclass(frozen=True)
class TranslationEntry:
    """A resolved (or deliberately unresolved) translation.

    Frozen so entries can be shared between the cache and callers; binding
    tokens or a default text returns a new entry.

    Attributes:
        mod_name: Name of the mod owning the translation.
        locale: Active locale when the entry was produced.
        key: Translation key, as spelled in the translation table when found.
        text: Raw text, or None when no locale in the fallback chain has the key.
        tokens: Bound (name, value) pairs, or None if no tokens are bound.
        source_locale: Locale in the fallback chain that supplied the text.
        placeholder: Render a missing translation as "(no translation:<key>)"
            instead of an empty string.
    """

    mod_name: str
    locale: str
    key: str
    text: Optional[str] = None
    tokens: Optional[TokenPairs] = None
    source_locale: Optional[str] = None
    placeholder: bool = False

    def has_value(self) -> bool:
        """Whether the translation was found in the fallback chain."""
        return self.text is not None

    def with_tokens(self, source: Any) -> "TranslationEntry":
        """Return a copy with tokens bound from the given source.

        Args:
            source: Mapping, iterable of (name, value) pairs, dataclass,
                NamedTuple, pydantic model, or plain object. None clears bound tokens.

        Returns:
            New TranslationEntry; this entry is left unchanged.

        Raises:
            ConfigurationError: If the source is not a flat name/value structure.
        """
        return replace(self, tokens=normalize_tokens(source))

    def default(self, text: Optional[str]) -> "TranslationEntry":
        """Return a copy using ``text`` if this translation is missing."""
        if self.has_value():
            return self
        return replace(self, text=text)

    def use_placeholder(self, enabled: bool = True) -> "TranslationEntry":
        """Return a copy that renders a visible placeholder when missing."""
        return replace(self, placeholder=enabled)

    @property
    def token_values(self) -> Dict[str, str]:
        """Bound tokens keyed by lower-cased name."""
        return token_lookup(self.tokens) if self.tokens else {}

    def to_text(self) -> str:
        """Render the translation with bound tokens substituted.

        Returns:
            The interpolated text; an empty string (or the placeholder) when
            the translation is missing.
        """
        if self.text is None:
            return MISSING_PLACEHOLDER.format(key=self.key) if self.placeholder else ""
        return interpolate(self.text, self.tokens)

    def __str__(self) -> str:
        return self.to_text()


def with_tokens(entry: TranslationEntry, source: Any) -> TranslationEntry:
    """Bind tokens to an entry without mutating it."""
    return entry.with_tokens(source)


def to_text(entry: TranslationEntry) -> str:
    """Render an entry to its final text."""
    return entry.to_text()
