"""Test data factories for deterministic test data generation."""

from tests.factories.i18n import (
    make_translation_entry,
    make_translation_helper,
    make_translation_table,
    write_translation_files,
)

__all__ = [
    "make_translation_entry",
    "make_translation_helper",
    "make_translation_table",
    "write_translation_files",
]
