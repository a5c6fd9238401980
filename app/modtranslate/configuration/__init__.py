"""Configuration module - public API.

Centralized configuration for the translation engine using Pydantic
BaseSettings.

Exports:
    settings: Singleton Settings instance (main configuration object)
    Settings: Main settings class (for testing/overrides)
    I18nSettings: Translation settings section (for testing)
"""

from modtranslate.configuration.i18n import I18nSettings
from modtranslate.configuration.settings import Settings, settings

__all__ = ["Settings", "I18nSettings", "settings"]
