"""Feature-level fixtures for i18n system tests."""

import pytest

from langmap.i18n import JSONLanguageLoader, Translator
from tests.factories.i18n import write_language_file

GENERAL_DOCUMENT = """
{
    "_.code": "en",
    "_.name": "English",

    "pageTitle": "Welcome to the page",
    "foo": "Foo",
    "page": "Single page|Many pages",
    "pageVars": "The page is named {name} and has {count} items",
    "nested": "This is {nested}",
    "priceMsg": "The price is ${price} with {discount}% discount",
    "statusMsg": "The system is {status} and auto-save is {autosave}",
    "mixedMsg": "User {user} has {count} items worth ${total} (active: {active})",
    "app.name": "MyApp",
    "nestedParams": "Welcome to {appName}"
}
"""

TYPES_DOCUMENT = """
{
    "_.code": "en",
    "_.name": "English",
    "template": "Value: {val}, Key: {key}",
    "numbers": "Int: {int}, Float: {float}, Negative: {neg}",
    "complex": "{a} {b} {c} {d} {e}"
}
"""


@pytest.fixture
def general_document():
    """Language map covering plurals, params and nested keys."""
    return GENERAL_DOCUMENT.encode("utf-8")


@pytest.fixture
def translator(general_document):
    """Translator built from the general document."""
    return Translator.from_bytes(general_document)


@pytest.fixture
def types_translator():
    """Translator with templates for parameter type rendering."""
    return Translator.from_bytes(TYPES_DOCUMENT.encode("utf-8"))


@pytest.fixture
def translations_dir(tmp_path):
    """Create a directory of language files.

    - en.json: full English map
    - fr.json: partial French map
    - broken.json: invalid JSON
    - nometa.json: valid map without reserved keys
    """
    write_language_file(
        tmp_path,
        "en",
        "English",
        {
            "pageTitle": "Welcome to the page",
            "page": "Single page|Many pages",
            "greeting": "Hello {name}",
        },
    )
    write_language_file(
        tmp_path,
        "fr",
        "Français",
        {
            "page": "Page unique|Plusieurs pages",
            "greeting": "Bonjour {name}",
        },
    )
    (tmp_path / "broken.json").write_text('{"_.code": "xx",', encoding="utf-8")
    (tmp_path / "nometa.json").write_text('{"foo": "bar"}', encoding="utf-8")
    return tmp_path


@pytest.fixture
def json_loader(translations_dir):
    """Create JSONLanguageLoader without caching."""
    return JSONLanguageLoader(translations_dir, use_cache=False)


@pytest.fixture
def json_loader_with_cache(translations_dir):
    """Create JSONLanguageLoader with caching enabled."""
    return JSONLanguageLoader(translations_dir, use_cache=True)
