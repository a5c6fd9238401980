"""Tests for modtranslate.configuration settings."""

import pytest
from pydantic import ValidationError

from modtranslate.configuration import I18nSettings, Settings


class TestI18nSettings:
    """Tests for I18nSettings."""

    def test_defaults(self, monkeypatch):
        for name in (
            "I18N_DEFAULT_LOCALE",
            "I18N_FALLBACK_LOCALE",
            "I18N_DIRECTORY_NAME",
            "I18N_FILE_FORMAT",
            "I18N_USE_PLACEHOLDER",
        ):
            monkeypatch.delenv(name, raising=False)

        i18n = I18nSettings(_env_file=None)

        assert i18n.default_locale == "en"
        assert i18n.fallback_locale == "default"
        assert i18n.directory_name == "i18n"
        assert i18n.file_format == "json"
        assert i18n.use_placeholder is False

    def test_environment_overrides(self, monkeypatch):
        monkeypatch.setenv("I18N_DEFAULT_LOCALE", "pt-BR")
        monkeypatch.setenv("I18N_FILE_FORMAT", "YML")
        monkeypatch.setenv("I18N_USE_PLACEHOLDER", "true")

        i18n = I18nSettings(_env_file=None)

        assert i18n.default_locale == "pt-BR"
        assert i18n.file_format == "yaml"
        assert i18n.use_placeholder is True

    def test_invalid_file_format(self, monkeypatch):
        monkeypatch.setenv("I18N_FILE_FORMAT", "xml")
        with pytest.raises(ValidationError):
            I18nSettings(_env_file=None)


class TestSettings:
    """Tests for the aggregated Settings."""

    def test_i18n_section_created(self, monkeypatch):
        monkeypatch.delenv("I18N_DEFAULT_LOCALE", raising=False)
        assert Settings().i18n.default_locale == "en"

    def test_section_override(self, monkeypatch):
        monkeypatch.setenv("I18N_DEFAULT_LOCALE", "fr")
        section = I18nSettings(_env_file=None)
        monkeypatch.delenv("I18N_DEFAULT_LOCALE")
        assert Settings(i18n=section).i18n.default_locale == "fr"

    @pytest.mark.parametrize(
        "environment,expected",
        [("production", True), (" Production ", True), ("development", False)],
    )
    def test_is_production(self, monkeypatch, environment, expected):
        monkeypatch.setenv("ENVIRONMENT", environment)
        assert Settings().is_production is expected
