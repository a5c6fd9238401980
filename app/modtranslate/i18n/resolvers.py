"""Locale fallback chain resolution.

Translations are fetched with locale fallback, so missing translations are
filled in from broader locales (like pt-br < pt < default).
"""

from typing import List, Tuple

from modtranslate.i18n.models import DEFAULT_LOCALE, normalize_locale


class LocaleChainResolver:
    """Computes the ordered locales which can provide translations for a locale.

    The chain starts with the locale itself, then each broader locale obtained
    by stripping the last ``-region`` segment, then the fallback locale.

    Attributes:
        fallback_locale: Locale appended to every chain (usually "default").
    """

    def __init__(self, fallback_locale: str = DEFAULT_LOCALE):
        """Initialize locale chain resolver.

        Args:
            fallback_locale: Locale used when no more specific locale applies.
        """
        self.fallback_locale = normalize_locale(fallback_locale) or DEFAULT_LOCALE

    def resolve(self, locale: str) -> Tuple[str, ...]:
        """Get the locales to search for the given locale, in precedence order.

        Args:
            locale: Requested locale (any case, surrounding whitespace ignored).

        Returns:
            Finite, deduplicated tuple of normalized locale identifiers.

        Example:
            >>> LocaleChainResolver().resolve("pt-BR")
            ('pt-br', 'pt', 'default')
        """
        current = normalize_locale(locale)
        chain: List[str] = []

        if current:
            chain.append(current)

            # broader locales (like pt-br => pt)
            while True:
                dash_index = current.rfind("-")
                if dash_index <= 0:
                    break
                current = current[:dash_index]
                if current not in chain:
                    chain.append(current)

        if self.fallback_locale not in chain:
            chain.append(self.fallback_locale)

        return tuple(chain)


_default_resolver = LocaleChainResolver()


def resolve_locale_chain(locale: str) -> Tuple[str, ...]:
    """Resolve the fallback chain for a locale using the "default" fallback."""
    return _default_resolver.resolve(locale)
