"""Tests for modtranslate.i18n.loader module."""

import pytest

from modtranslate.i18n import (
    JSONTranslationLoader,
    TranslationFileError,
    YAMLTranslationLoader,
    get_loader,
)


class TestJSONTranslationLoader:
    """Tests for JSONTranslationLoader."""

    def test_load_all(self, json_mod_dir, translation_table):
        """load_all() reads one locale per file."""
        loader = JSONTranslationLoader(json_mod_dir / "i18n")
        assert loader.load_all() == translation_table

    def test_load_single_locale(self, json_mod_dir):
        """load() reads the file matching a locale case-insensitively."""
        loader = JSONTranslationLoader(json_mod_dir / "i18n")
        assert loader.load("PT-br") == {"farewell": "Tchau"}

    def test_load_missing_locale(self, json_mod_dir):
        """load() raises FileNotFoundError for an unknown locale."""
        loader = JSONTranslationLoader(json_mod_dir / "i18n")
        with pytest.raises(FileNotFoundError):
            loader.load("fr")

    def test_missing_directory(self, tmp_path):
        """A missing directory yields an empty table."""
        loader = JSONTranslationLoader(tmp_path / "nope")
        assert loader.load_all() == {}
        assert loader.files() == []

    def test_ignores_other_files(self, tmp_path):
        """Only .json files are read."""
        (tmp_path / "en.json").write_text('{"a": "b"}', encoding="utf-8")
        (tmp_path / "notes.txt").write_text("ignored", encoding="utf-8")
        assert JSONTranslationLoader(tmp_path).load_all() == {"en": {"a": "b"}}

    def test_utf8_bom_accepted(self, tmp_path):
        """Files saved with a BOM still parse."""
        (tmp_path / "fr.json").write_bytes(
            '{"greeting": "Bonjour"}'.encode("utf-8-sig")
        )
        assert JSONTranslationLoader(tmp_path).load("fr") == {"greeting": "Bonjour"}

    def test_scalars_converted_to_text(self, tmp_path):
        """Non-string scalars are converted to text."""
        (tmp_path / "en.json").write_text('{"max": 10, "ratio": 0.5}', encoding="utf-8")
        assert JSONTranslationLoader(tmp_path).load("en") == {"max": "10", "ratio": "0.5"}

    def test_invalid_json_skipped(self, tmp_path):
        """A broken file is skipped; other locales still load."""
        (tmp_path / "en.json").write_text('{"a": "b"}', encoding="utf-8")
        (tmp_path / "fr.json").write_text('{"a": ', encoding="utf-8")
        assert JSONTranslationLoader(tmp_path).load_all() == {"en": {"a": "b"}}

    def test_invalid_json_raises_on_load(self, tmp_path):
        """load() surfaces the file error directly."""
        (tmp_path / "fr.json").write_text("not json", encoding="utf-8")
        with pytest.raises(TranslationFileError) as exc_info:
            JSONTranslationLoader(tmp_path).load("fr")
        assert exc_info.value.locale == "fr"
        assert exc_info.value.path.name == "fr.json"

    @pytest.mark.parametrize(
        "content",
        [
            '["a", "b"]',
            '{"a": {"nested": "x"}}',
            '{"a": ["x"]}',
            '{"a": null}',
            '{"a": "x", "A": "y"}',
            '{"a": "x", "a": "y"}',
        ],
    )
    def test_invalid_structure_skipped(self, tmp_path, content):
        """Non-flat, null-valued or duplicated files are skipped."""
        (tmp_path / "default.json").write_text('{"ok": "yes"}', encoding="utf-8")
        (tmp_path / "en.json").write_text(content, encoding="utf-8")
        loader = JSONTranslationLoader(tmp_path)
        assert loader.load_all() == {"default": {"ok": "yes"}}
        with pytest.raises(TranslationFileError):
            loader.load("en")

    def test_duplicate_keys_reported(self, tmp_path):
        """The error names the duplicated keys."""
        (tmp_path / "en.json").write_text('{"Key": "x", "KEY": "y"}', encoding="utf-8")
        with pytest.raises(TranslationFileError, match="duplicate translation keys: KEY"):
            JSONTranslationLoader(tmp_path).load("en")

    def test_case_colliding_file_names(self, tmp_path):
        """Only the first of two files for the same locale is used."""
        (tmp_path / "PT-BR.json").write_text('{"a": "1"}', encoding="utf-8")
        (tmp_path / "pt-br.json").write_text('{"a": "2"}', encoding="utf-8")
        assert JSONTranslationLoader(tmp_path).load_all() == {"PT-BR": {"a": "1"}}


class TestYAMLTranslationLoader:
    """Tests for YAMLTranslationLoader."""

    def test_load_all(self, yaml_translations_dir, translation_table):
        loader = YAMLTranslationLoader(yaml_translations_dir)
        assert loader.load_all() == translation_table

    def test_yaml_extension(self, tmp_path):
        (tmp_path / "de.yaml").write_text("greeting: Hallo\n", encoding="utf-8")
        assert YAMLTranslationLoader(tmp_path).load_all() == {"de": {"greeting": "Hallo"}}

    def test_empty_file(self, tmp_path):
        (tmp_path / "en.yml").write_text("", encoding="utf-8")
        assert YAMLTranslationLoader(tmp_path).load_all() == {"en": {}}

    def test_nested_yaml_skipped(self, tmp_path):
        (tmp_path / "en.yml").write_text("menu:\n  open: Open\n", encoding="utf-8")
        assert YAMLTranslationLoader(tmp_path).load_all() == {}

    def test_invalid_yaml_skipped(self, tmp_path):
        (tmp_path / "en.yml").write_text("a: [unclosed\n", encoding="utf-8")
        assert YAMLTranslationLoader(tmp_path).load_all() == {}

    def test_list_document_rejected(self, tmp_path):
        (tmp_path / "en.yml").write_text("- a\n- b\n", encoding="utf-8")
        with pytest.raises(TranslationFileError):
            YAMLTranslationLoader(tmp_path).load("en")


class TestGetLoader:
    """Tests for get_loader()."""

    @pytest.mark.parametrize(
        "file_format,loader_class",
        [
            ("json", JSONTranslationLoader),
            ("JSON", JSONTranslationLoader),
            ("yaml", YAMLTranslationLoader),
            ("yml", YAMLTranslationLoader),
        ],
    )
    def test_known_formats(self, tmp_path, file_format, loader_class):
        loader = get_loader(file_format, tmp_path)
        assert isinstance(loader, loader_class)
        assert loader.translations_dir == tmp_path

    def test_unknown_format(self, tmp_path):
        with pytest.raises(ValueError):
            get_loader("xml", tmp_path)
