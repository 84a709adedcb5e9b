"""Test data factories for deterministic test data generation."""

from tests.factories.i18n import (
    make_locale,
    make_locale_context,
    make_translation_catalog,
    make_translation_key,
    write_mo_file,
)

__all__ = [
    "make_locale",
    "make_locale_context",
    "make_translation_catalog",
    "make_translation_key",
    "write_mo_file",
]
