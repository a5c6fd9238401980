"""i18n engine - locale-aware translation resolution.

Resolves the best available text for a translation key under the active
locale, falling back through broader locales (pt-br -> pt -> default).

Main components:
- resolvers: LocaleChainResolver computing fallback chains
- store: TranslationStore holding the unresolved per-locale table
- cache: ResolvedLocaleCache, the per-locale resolved index
- models: TranslationEntry with token binding and rendering
- translator: TranslationHelper, the per-mod lookup context
- loader: JSON and YAML translation file loaders
- registry: TranslationRegistry managing per-mod contexts
"""

from modtranslate.i18n.cache import ResolvedLocaleCache
from modtranslate.i18n.errors import (
    ConfigurationError,
    I18nError,
    InvalidReplacementError,
    ModAlreadyRegisteredError,
    ModNotRegisteredError,
    TranslationFileError,
    TranslationHelperClosedError,
)
from modtranslate.i18n.factory import create_loader, create_translation_helper
from modtranslate.i18n.loader import (
    JSONTranslationLoader,
    TranslationLoader,
    YAMLTranslationLoader,
    get_loader,
)
from modtranslate.i18n.models import (
    DEFAULT_LOCALE,
    TranslationEntry,
    normalize_key,
    normalize_locale,
    to_text,
    with_tokens,
)
from modtranslate.i18n.registry import TranslationRegistry
from modtranslate.i18n.resolvers import LocaleChainResolver, resolve_locale_chain
from modtranslate.i18n.store import TranslationStore
from modtranslate.i18n.translator import TranslationHelper

__all__ = [
    "DEFAULT_LOCALE",
    "ConfigurationError",
    "I18nError",
    "InvalidReplacementError",
    "JSONTranslationLoader",
    "LocaleChainResolver",
    "ModAlreadyRegisteredError",
    "ModNotRegisteredError",
    "ResolvedLocaleCache",
    "TranslationEntry",
    "TranslationFileError",
    "TranslationHelper",
    "TranslationHelperClosedError",
    "TranslationLoader",
    "TranslationRegistry",
    "TranslationStore",
    "YAMLTranslationLoader",
    "create_loader",
    "create_translation_helper",
    "get_loader",
    "normalize_key",
    "normalize_locale",
    "resolve_locale_chain",
    "to_text",
    "with_tokens",
]
