"""langmap - translations over flat JSON language maps.

Subpackages:
- configuration: Settings management (settings, I18nSettings)
- logging: Structured logging (configure_logging, get_module_logger)
- i18n: Translator, loaders and factories
"""

from langmap.i18n import (
    DecodeError,
    MissingFieldError,
    Translator,
    create_translator,
)

__all__ = [
    "Translator",
    "DecodeError",
    "MissingFieldError",
    "create_translator",
]
