"""Custom exceptions for the translation engine.

Missing translations are not errors: a lookup that finds nothing returns an
entry without text so callers can decide whether that matters.
"""

from pathlib import Path
from typing import Optional


class I18nError(Exception):
    """Base exception for all translation engine errors.

    Example:
        try:
            helper.set_translations(table)
        except I18nError as e:
            logger.error("i18n_error", error=str(e))
    """

    pass


class ConfigurationError(I18nError, ValueError):
    """Raised when a token source cannot be read as flat name/value pairs.

    Indicates a programming error in the calling code, such as passing a
    nested mapping or a list as a token value.

    Example:
        >>> entry.with_tokens({"items": ["a", "b"]})
        Traceback (most recent call last):
        ...
        ConfigurationError: Token 'items' has a non-scalar value of type list
    """

    pass


class InvalidReplacementError(I18nError, ValueError):
    """Raised when a translation table is rejected by the store.

    The previously installed table stays in place when this is raised.

    Example:
        >>> store.replace_all(None)
        Traceback (most recent call last):
        ...
        InvalidReplacementError: Translation table must not be None
    """

    pass


class ModAlreadyRegisteredError(I18nError):
    """Raised when registering a translation context for a mod ID twice."""

    def __init__(self, mod_id: str):
        self.mod_id = mod_id
        super().__init__(f"Translations for mod '{mod_id}' are already registered")


class ModNotRegisteredError(I18nError, KeyError):
    """Raised when a mod ID has no registered translation context."""

    def __init__(self, mod_id: str):
        self.mod_id = mod_id
        super().__init__(f"No translations registered for mod '{mod_id}'")

    def __str__(self) -> str:
        return self.args[0]


class TranslationFileError(I18nError):
    """Describes a translation file that could not be used.

    Loaders log and skip such files; the error carries the file path and the
    locale derived from its name.
    """

    def __init__(self, path: Path, reason: str, locale: Optional[str] = None):
        self.path = Path(path)
        self.reason = reason
        self.locale = locale
        super().__init__(f"Invalid translation file {self.path.name}: {reason}")


class TranslationHelperClosedError(I18nError, RuntimeError):
    """Raised when a closed translation context is asked to change."""

    def __init__(self, mod_id: str):
        self.mod_id = mod_id
        super().__init__(f"Translation context for mod '{mod_id}' is closed")
