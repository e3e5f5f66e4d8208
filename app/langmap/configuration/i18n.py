"""Translation feature settings."""

from pathlib import Path
from typing import Optional

from pydantic import Field

from langmap.configuration.base import FeatureSettings


class I18nSettings(FeatureSettings):
    """Configuration for loading and resolving language maps.

    Environment Variables:
        I18N_DIR: Directory holding one ``<code>.json`` file per language.
            Defaults to the ``locales`` directory bundled with the package.
        I18N_LANGUAGE: Language code loaded by the default factory (default: en)
        I18N_BASE_LANGUAGE: Language the requested one is overlaid on, so keys
            missing from a partial translation keep the base text. Set to an
            empty string to disable the overlay (default: en)
        I18N_MAX_NESTING_DEPTH: Maximum passes of nested ``{key}`` resolution
            inside parameter values (default: 100)
        I18N_USE_CACHE: Cache loaded languages in the loader (default: True)

    Example:
        ```python
        from langmap.configuration import settings

        directory = settings.i18n.translations_dir
        language = settings.i18n.language
        ```
    """

    translations_dir: Optional[Path] = Field(
        default=None,
        alias="I18N_DIR",
        description="Directory of <code>.json language maps",
    )
    language: str = Field(
        default="en",
        alias="I18N_LANGUAGE",
        description="Language code to load",
    )
    base_language: str = Field(
        default="en",
        alias="I18N_BASE_LANGUAGE",
        description="Language to overlay the requested language on",
    )
    max_nesting_depth: int = Field(
        default=100,
        ge=1,
        alias="I18N_MAX_NESTING_DEPTH",
        description="Maximum passes of nested placeholder resolution",
    )
    use_cache: bool = Field(
        default=True,
        alias="I18N_USE_CACHE",
        description="Cache loaded languages in memory",
    )
