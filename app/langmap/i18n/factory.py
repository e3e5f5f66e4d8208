"""Factory functions for creating i18n components.

Builds loaders and translators from the application settings.
"""

from pathlib import Path
from typing import Optional

import structlog

from langmap.configuration import I18nSettings, settings
from langmap.i18n.loader import JSONLanguageLoader
from langmap.i18n.translator import Translator

logger = structlog.get_logger()

# Bundled language maps: .../langmap/locales
DEFAULT_TRANSLATIONS_DIR = Path(__file__).resolve().parents[1] / "locales"


def create_loader(
    translations_dir: Optional[Path] = None,
    i18n_settings: Optional[I18nSettings] = None,
) -> JSONLanguageLoader:
    """Create a JSONLanguageLoader from settings.

    Args:
        translations_dir: Directory override (default: I18N_DIR, then the
            bundled locales directory).
        i18n_settings: Settings to use (default: ``settings.i18n``).

    Raises:
        ValueError: If the directory does not exist.
    """
    i18n_settings = i18n_settings or settings.i18n
    translations_dir = (
        translations_dir or i18n_settings.translations_dir or DEFAULT_TRANSLATIONS_DIR
    )

    return JSONLanguageLoader(
        translations_dir=translations_dir,
        use_cache=i18n_settings.use_cache,
        max_nesting_depth=i18n_settings.max_nesting_depth,
    )


def create_translator(
    language: Optional[str] = None,
    translations_dir: Optional[Path] = None,
    base_language: Optional[str] = None,
    i18n_settings: Optional[I18nSettings] = None,
) -> Translator:
    """Create a Translator for a language.

    Args:
        language: Language code (default: I18N_LANGUAGE).
        translations_dir: Directory of ``<code>.json`` files (default:
            I18N_DIR, then the bundled locales directory).
        base_language: Language to overlay on (default: I18N_BASE_LANGUAGE).
            Pass an empty string to load the language on its own.
        i18n_settings: Settings to use (default: ``settings.i18n``).

    Returns:
        Translator: Configured translator instance

    Raises:
        ValueError: If the translations directory does not exist
        FileNotFoundError: If a language file is missing
        DecodeError: If a language file is malformed
        MissingFieldError: If the language map lacks ``_.code`` or ``_.name``

    Usage:
        # Use defaults
        translator = create_translator()

        # French, falling back to English text for untranslated keys
        translator = create_translator("fr", translations_dir=Path("i18n"))
    """
    i18n_settings = i18n_settings or settings.i18n
    language = language or i18n_settings.language
    if base_language is None:
        base_language = i18n_settings.base_language

    loader = create_loader(translations_dir, i18n_settings)
    translator = loader.load(language, base=base_language or None)

    logger.info(
        "translator_created_from_settings",
        translations_dir=str(loader.translations_dir),
        code=translator.code,
        base=base_language or None,
    )

    return translator
