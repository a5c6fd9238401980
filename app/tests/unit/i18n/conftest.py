"""Feature-level fixtures for i18n engine tests."""

import pytest

from modtranslate.i18n import TranslationStore
from tests.factories.i18n import (
    make_translation_helper,
    make_translation_table,
    write_translation_files,
)


@pytest.fixture
def translation_table():
    """Sample table with default, en, pt and pt-BR locales."""
    return make_translation_table()


@pytest.fixture
def store(translation_table):
    """TranslationStore loaded with the sample table."""
    store = TranslationStore(mod_name="Test Mod")
    store.replace_all(translation_table)
    return store


@pytest.fixture
def helper(translation_table):
    """TranslationHelper for the sample table with active locale en."""
    return make_translation_helper(translation_table, locale="en")


@pytest.fixture
def json_mod_dir(tmp_path, translation_table):
    """Mod folder with an i18n/ directory of JSON translation files."""
    write_translation_files(tmp_path / "i18n", translation_table, file_format="json")
    return tmp_path


@pytest.fixture
def yaml_translations_dir(tmp_path, translation_table):
    """Directory of YAML translation files."""
    return write_translation_files(
        tmp_path / "yaml-i18n", translation_table, file_format="yaml"
    )
