"""Registry of per-mod translation contexts.

Keeps one TranslationHelper per mod, forwards host locale changes to all of
them, and reloads translations from disk when files change.
"""

from pathlib import Path
from typing import Any, Dict, List, Optional

from modtranslate.configuration import settings
from modtranslate.i18n.errors import ModAlreadyRegisteredError, ModNotRegisteredError
from modtranslate.i18n.factory import create_loader, create_translation_helper
from modtranslate.i18n.loader import TranslationLoader
from modtranslate.i18n.translator import TranslationHelper
from modtranslate.logging import bind_mod_context, get_module_logger

logger = get_module_logger()


class TranslationRegistry:
    """Owns the translation contexts of every loaded mod.

    Mod IDs are compared case-insensitively. Each mod gets an independent
    store and cache; replacing or rebuilding one never affects another.

    Usage:
        registry = TranslationRegistry(locale="fr")
        helper = registry.register("Author.Mod", "Mod", mod_directory=Path("Mods/Mod"))

        # host language changed
        registry.set_locale("pt-BR", language_code="pt")

        # translation files edited
        registry.reload("Author.Mod")
    """

    def __init__(self, locale: Optional[str] = None, language_code: Any = None):
        """Initialize the registry.

        Args:
            locale: Locale for new helpers (default: settings.i18n.default_locale).
            language_code: Host language tag for new helpers.
        """
        self.locale = locale if locale is not None else settings.i18n.default_locale
        self.language_code = language_code
        self._helpers: Dict[str, TranslationHelper] = {}
        self._loaders: Dict[str, TranslationLoader] = {}

    def register(
        self,
        mod_id: str,
        mod_name: str,
        mod_directory: Optional[Path] = None,
        loader: Optional[TranslationLoader] = None,
    ) -> TranslationHelper:
        """Create the translation context for a mod.

        Args:
            mod_id: Unique ID of the mod.
            mod_name: Name of the mod.
            mod_directory: Root folder of the mod, used to locate its
                translation files when no loader is given.
            loader: Loader for the mod's translations.

        Returns:
            The new TranslationHelper.

        Raises:
            ModAlreadyRegisteredError: If the mod ID is already registered.
        """
        key = self._key(mod_id)
        if key in self._helpers:
            raise ModAlreadyRegisteredError(mod_id)

        if loader is None and mod_directory is not None:
            loader = create_loader(mod_directory)

        with bind_mod_context(mod_id, mod_name=mod_name):
            helper = create_translation_helper(
                mod_id,
                mod_name,
                locale=self.locale,
                language_code=self.language_code,
                loader=loader,
            )

        self._helpers[key] = helper
        if loader is not None:
            self._loaders[key] = loader
        return helper

    def get(self, mod_id: str) -> TranslationHelper:
        """Get the translation context for a mod.

        Raises:
            ModNotRegisteredError: If the mod ID is not registered.
        """
        try:
            return self._helpers[self._key(mod_id)]
        except KeyError:
            raise ModNotRegisteredError(mod_id) from None

    def unregister(self, mod_id: str) -> None:
        """Tear down a mod's translation context.

        Raises:
            ModNotRegisteredError: If the mod ID is not registered.
        """
        key = self._key(mod_id)
        helper = self._helpers.pop(key, None)
        if helper is None:
            raise ModNotRegisteredError(mod_id)
        self._loaders.pop(key, None)
        helper.close()
        logger.info("translation_helper_unregistered", mod_id=mod_id)

    def set_locale(self, locale: str, language_code: Any = None) -> None:
        """Switch every registered mod to a new locale.

        Args:
            locale: The new locale.
            language_code: The host's new language tag.
        """
        self.locale = locale
        self.language_code = language_code
        for helper in self._helpers.values():
            helper.set_locale(locale, language_code)
        logger.info(
            "locale_changed",
            locale=locale,
            language_code=str(language_code) if language_code is not None else None,
            mod_count=len(self._helpers),
        )

    def reload(self, mod_id: Optional[str] = None) -> List[str]:
        """Reload translations from each mod's loader.

        Args:
            mod_id: Mod to reload; all mods with a loader if omitted.

        Returns:
            IDs of the mods whose translations were reloaded.

        Raises:
            ModNotRegisteredError: If mod_id is given but not registered.
        """
        if mod_id is not None:
            keys = [self._key(mod_id)]
            if keys[0] not in self._helpers:
                raise ModNotRegisteredError(mod_id)
        else:
            keys = list(self._helpers.keys())

        reloaded = []
        for key in keys:
            loader = self._loaders.get(key)
            if loader is None:
                continue
            helper = self._helpers[key]
            with bind_mod_context(helper.mod_id, mod_name=helper.mod_name):
                helper.set_translations(loader.load_all())
                logger.info("translations_reloaded", entry_count=len(helper.cache))
            reloaded.append(helper.mod_id)
        return reloaded

    @property
    def mod_ids(self) -> List[str]:
        """IDs of registered mods, as given at registration."""
        return [helper.mod_id for helper in self._helpers.values()]

    def close(self) -> None:
        """Tear down every registered context."""
        for helper in self._helpers.values():
            helper.close()
        self._helpers.clear()
        self._loaders.clear()

    def __contains__(self, mod_id: object) -> bool:
        return isinstance(mod_id, str) and self._key(mod_id) in self._helpers

    def __len__(self) -> int:
        return len(self._helpers)

    @staticmethod
    def _key(mod_id: str) -> str:
        return mod_id.strip().lower()
