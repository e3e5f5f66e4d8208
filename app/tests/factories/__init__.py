"""Test data factories for deterministic test data generation."""

from tests.factories.i18n import (
    make_language_document,
    make_language_map,
    make_translator,
    write_language_file,
)

__all__ = [
    "make_language_document",
    "make_language_map",
    "make_translator",
    "write_language_file",
]
