"""Language loading interface and implementations.

Defines the contract for loading language maps and provides a loader for
a directory of ``<code>.json`` files.
"""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Dict, List, Optional

import structlog

from langmap.i18n.codec import decode_document
from langmap.i18n.errors import DecodeError
from langmap.i18n.models import CODE_KEY, NAME_KEY, LanguageInfo
from langmap.i18n.translator import DEFAULT_MAX_NESTING_DEPTH, Translator

logger = structlog.get_logger()


class LanguageLoader(ABC):
    """Abstract base for language loaders."""

    @abstractmethod
    def load(self, code: str, base: Optional[str] = None) -> Translator:
        """Load the language map for ``code``.

        Args:
            code: Language code to load.
            base: Optional language code whose keys fill the gaps in ``code``.

        Returns:
            Translator for the requested language.

        Raises:
            FileNotFoundError: If the language is not available.
            DecodeError: If a language file is malformed.
            MissingFieldError: If the language map lacks a reserved key.
        """

    @abstractmethod
    def available(self) -> List[LanguageInfo]:
        """List the languages this loader can load."""


class JSONLanguageLoader(LanguageLoader):
    """Loader for a directory of JSON language maps.

    Expects one file per language named ``<code>.json``, e.g. ``en.json``
    and ``fr.json``.

    Attributes:
        translations_dir: Path to the directory containing JSON files.
        use_cache: Whether loaded translators are cached by (code, base).
        max_nesting_depth: Passed on to every Translator built.
        cache: Loaded translators keyed by (code, base).
    """

    def __init__(
        self,
        translations_dir: Path,
        use_cache: bool = True,
        max_nesting_depth: int = DEFAULT_MAX_NESTING_DEPTH,
    ):
        """Initialize JSON language loader.

        Raises:
            ValueError: If the directory does not exist.
        """
        self.translations_dir = Path(translations_dir)
        self.use_cache = use_cache
        self.max_nesting_depth = max_nesting_depth
        self.cache: Dict[tuple, Translator] = {}

        if not self.translations_dir.is_dir():
            raise ValueError(
                f"Translations directory not found: {self.translations_dir}"
            )

        logger.info(
            "initialized_json_loader",
            translations_dir=str(self.translations_dir),
            use_cache=use_cache,
        )

    def path_for(self, code: str) -> Path:
        """Return the file path for ``code`` inside the translations directory.

        Raises:
            ValueError: If ``code`` is empty or would resolve outside the
                directory (path separators or "..").
        """
        if not code or "/" in code or "\\" in code or ".." in code:
            logger.warning("invalid_language_code", code=code)
            raise ValueError(f"Invalid language code: {code!r}")
        return self.translations_dir / f"{code}.json"

    def _read(self, code: str) -> Dict[str, str]:
        path = self.path_for(code)
        if not path.is_file():
            raise FileNotFoundError(
                f"No language file found for {code} in {self.translations_dir}"
            )
        return decode_document(path.read_bytes(), source=str(path))

    def load(self, code: str, base: Optional[str] = None) -> Translator:
        """Load ``<code>.json``, optionally overlaid on ``<base>.json``.

        With a base language, keys missing from the requested language keep
        the base text while ``code`` and ``name`` are the requested
        language's. A base equal to ``code`` is ignored.

        Raises:
            ValueError: If ``code`` or ``base`` is not a plain language code.
        """
        if base == code:
            base = None

        cache_key = (code, base)
        if self.use_cache and cache_key in self.cache:
            logger.debug("loaded_from_cache", code=code, base=base)
            return self.cache[cache_key]

        entries = self._read(code)
        if base:
            entries = {**self._read(base), **entries}

        translator = Translator(entries, max_nesting_depth=self.max_nesting_depth)

        logger.info(
            "language_loaded",
            code=code,
            base=base,
            entry_count=len(translator),
        )

        if self.use_cache:
            self.cache[cache_key] = translator

        return translator

    def available(self) -> List[LanguageInfo]:
        """List languages found in the directory, sorted by file name.

        Files that are malformed or lack reserved keys are skipped.
        """
        languages = []
        for path in sorted(self.translations_dir.glob("*.json")):
            try:
                entries = decode_document(path.read_bytes(), source=str(path))
            except DecodeError:
                logger.warning("skipped_invalid_language_file", file=str(path))
                continue

            code, name = entries.get(CODE_KEY), entries.get(NAME_KEY)
            if not code or not name:
                logger.warning(
                    "skipped_language_file_without_metadata",
                    file=str(path),
                    missing=CODE_KEY if not code else NAME_KEY,
                )
                continue

            languages.append(LanguageInfo(code=code, name=name))

        return languages

    def clear_cache(self) -> None:
        """Clear all cached translators."""
        self.cache.clear()
        logger.info("cleared_language_cache")
