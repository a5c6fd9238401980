"""Translation loading interface and implementations.

Defines the contract for loading a mod's translation table and provides
file-based loaders. Each locale lives in its own file named after the locale
(like ``en.json``, ``pt-BR.json``, ``default.json``) containing a flat
key => text structure.
"""

import json
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Dict, Iterable, List, Tuple

import yaml

from modtranslate.i18n.errors import TranslationFileError
from modtranslate.i18n.models import normalize_key, normalize_locale
from modtranslate.logging import get_module_logger

logger = get_module_logger()

TranslationTable = Dict[str, Dict[str, str]]


class TranslationLoader(ABC):
    """Abstract base for translation loaders.

    Implementations produce the flat table consumed by
    TranslationHelper.set_translations().
    """

    @abstractmethod
    def load(self, locale: str) -> Dict[str, str]:
        """Load translations for a single locale.

        Args:
            locale: Locale to load.

        Returns:
            Mapping of key -> raw text.

        Raises:
            FileNotFoundError: If the locale has no translation file.
            TranslationFileError: If the translation file is invalid.
        """
        pass

    @abstractmethod
    def load_all(self) -> TranslationTable:
        """Load translations for every available locale.

        Returns:
            Mapping of locale -> mapping of key -> raw text.
        """
        pass


class FileTranslationLoader(TranslationLoader):
    """Loader for a directory holding one translation file per locale.

    Invalid files are logged and skipped by load_all() so one broken locale
    does not hide the others.

    Attributes:
        translations_dir: Directory containing the translation files.
        extensions: File extensions handled by this loader.
    """

    extensions: Tuple[str, ...] = ()

    def __init__(self, translations_dir: Path):
        """Initialize file translation loader.

        Args:
            translations_dir: Directory with translation files. It may not
                exist, in which case no translations are loaded.
        """
        self.translations_dir = Path(translations_dir)

    @abstractmethod
    def _read_pairs(self, path: Path) -> List[Tuple[Any, Any]]:
        """Parse a file into its top-level (key, value) pairs.

        Raises:
            TranslationFileError: If the file cannot be parsed or is not an object.
        """
        pass

    def files(self) -> List[Path]:
        """Get translation files in the directory, sorted by name."""
        if not self.translations_dir.is_dir():
            return []
        return sorted(
            path
            for path in self.translations_dir.iterdir()
            if path.is_file() and path.suffix.lower() in self.extensions
        )

    def load(self, locale: str) -> Dict[str, str]:
        normalized = normalize_locale(locale)
        for path in self.files():
            if normalize_locale(path.stem) == normalized:
                return self._load_file(path)
        raise FileNotFoundError(
            f"No translation file found for locale {locale} in {self.translations_dir}"
        )

    def load_all(self) -> TranslationTable:
        if not self.translations_dir.is_dir():
            logger.debug(
                "translations_dir_missing",
                translations_dir=str(self.translations_dir),
            )
            return {}

        result: TranslationTable = {}
        seen: Dict[str, Path] = {}
        for path in self.files():
            locale = path.stem
            normalized = normalize_locale(locale)
            if normalized in seen:
                logger.error(
                    "translation_file_invalid",
                    file=str(path),
                    locale=locale,
                    error=f"locale already loaded from {seen[normalized].name}",
                )
                continue

            try:
                result[locale] = self._load_file(path)
            except TranslationFileError as e:
                logger.error(
                    "translation_file_invalid",
                    file=str(e.path),
                    locale=e.locale,
                    error=e.reason,
                )
                continue
            seen[normalized] = path

        logger.info(
            "loaded_translations",
            translations_dir=str(self.translations_dir),
            locale_count=len(result),
        )
        return result

    def _load_file(self, path: Path) -> Dict[str, str]:
        return _build_translations(path, path.stem, self._read_pairs(path))


class JSONTranslationLoader(FileTranslationLoader):
    """Loader for ``<locale>.json`` translation files."""

    extensions = (".json",)

    def _read_pairs(self, path: Path) -> List[Tuple[Any, Any]]:
        try:
            with open(path, "r", encoding="utf-8-sig") as f:
                data = json.load(f, object_pairs_hook=_JSONObject)
        except (OSError, ValueError) as e:
            raise TranslationFileError(path, f"can't parse file: {e}", path.stem) from e

        if not isinstance(data, _JSONObject):
            raise TranslationFileError(
                path, "expected a flat object of translation keys", path.stem
            )
        return list(data)


class YAMLTranslationLoader(FileTranslationLoader):
    """Loader for ``<locale>.yml`` / ``<locale>.yaml`` translation files."""

    extensions = (".yml", ".yaml")

    def _read_pairs(self, path: Path) -> List[Tuple[Any, Any]]:
        try:
            with open(path, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except (OSError, yaml.YAMLError) as e:
            raise TranslationFileError(path, f"can't parse file: {e}", path.stem) from e

        if data is None:
            return []
        if not isinstance(data, dict):
            raise TranslationFileError(
                path, "expected a flat mapping of translation keys", path.stem
            )
        return list(data.items())


LOADERS = {
    "json": JSONTranslationLoader,
    "yaml": YAMLTranslationLoader,
}


def get_loader(file_format: str, translations_dir: Path) -> FileTranslationLoader:
    """Create the loader for a file format ('json' or 'yaml').

    Raises:
        ValueError: If the format is not supported.
    """
    fmt = file_format.strip().lower()
    if fmt == "yml":
        fmt = "yaml"
    try:
        loader_class = LOADERS[fmt]
    except KeyError as e:
        raise ValueError(f"Unsupported translation file format: {file_format}") from e
    return loader_class(translations_dir)


class _JSONObject(list):
    """Preserves every key/value pair of a JSON object, duplicates included."""


def _build_translations(
    path: Path, locale: str, pairs: Iterable[Tuple[Any, Any]]
) -> Dict[str, str]:
    translations: Dict[str, str] = {}
    seen: Dict[str, str] = {}
    duplicates: List[str] = []

    for key, value in pairs:
        if isinstance(key, (dict, list)) or key is None:
            raise TranslationFileError(path, f"invalid translation key: {key!r}", locale)
        key = str(key)

        if value is None:
            raise TranslationFileError(path, f"translation '{key}' has no value", locale)
        if isinstance(value, (dict, list)):
            raise TranslationFileError(
                path, f"translation '{key}' must be text, not a nested structure", locale
            )

        normalized = normalize_key(key)
        if normalized in seen:
            duplicates.append(key)
            continue
        seen[normalized] = key
        translations[key] = str(value)

    if duplicates:
        raise TranslationFileError(
            path, f"duplicate translation keys: {', '.join(duplicates)}", locale
        )
    return translations
