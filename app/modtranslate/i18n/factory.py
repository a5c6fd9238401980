"""Factory functions for creating i18n components.

Provides convenience functions for initializing translation helpers with
defaults taken from settings.
"""

from pathlib import Path
from typing import Any, Optional

from modtranslate.configuration import settings
from modtranslate.i18n.loader import FileTranslationLoader, TranslationLoader, get_loader
from modtranslate.i18n.resolvers import LocaleChainResolver
from modtranslate.i18n.translator import TranslationHelper
from modtranslate.logging import get_module_logger

logger = get_module_logger()


def create_loader(mod_directory: Path) -> FileTranslationLoader:
    """Create the configured file loader for a mod directory.

    Args:
        mod_directory: Root folder of the mod; translations are read from its
            ``settings.i18n.directory_name`` subfolder.

    Returns:
        Loader for the configured file format.
    """
    translations_dir = Path(mod_directory) / settings.i18n.directory_name
    return get_loader(settings.i18n.file_format, translations_dir)


def create_translation_helper(
    mod_id: str,
    mod_name: str,
    mod_directory: Optional[Path] = None,
    locale: Optional[str] = None,
    language_code: Any = None,
    loader: Optional[TranslationLoader] = None,
) -> TranslationHelper:
    """Create and configure a TranslationHelper for one mod.

    Args:
        mod_id: Unique ID of the mod.
        mod_name: Name of the mod.
        mod_directory: Root folder of the mod (used to build a loader when
            none is given).
        locale: Initial locale (default: settings.i18n.default_locale).
        language_code: Host language tag.
        loader: Loader for the mod's translations.

    Returns:
        TranslationHelper: Configured helper with translations loaded if a
        loader or mod directory was provided.

    Usage:
        helper = create_translation_helper(
            "Author.Mod", "Mod", mod_directory=Path("Mods/Mod"), locale="pt-BR"
        )
        helper.get("greeting").to_text()
    """
    if loader is None and mod_directory is not None:
        loader = create_loader(mod_directory)

    helper = TranslationHelper(
        mod_id=mod_id,
        mod_name=mod_name,
        locale=locale if locale is not None else settings.i18n.default_locale,
        language_code=language_code,
        resolver=LocaleChainResolver(settings.i18n.fallback_locale),
        use_placeholder=settings.i18n.use_placeholder,
    )

    if loader is not None:
        helper.set_translations(loader.load_all())

    logger.info(
        "translation_helper_created",
        mod_id=mod_id,
        locale=helper.locale,
        entry_count=len(helper.cache),
    )
    return helper
