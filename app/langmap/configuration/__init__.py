"""Configuration module - public API.

Centralized configuration for langmap using Pydantic BaseSettings.

Exports:
    settings: Singleton Settings instance (main configuration object)
    Settings: Main settings class (for testing/overrides)
    I18nSettings: Translation settings class (for testing)
"""

from langmap.configuration.i18n import I18nSettings
from langmap.configuration.settings import Settings, settings

__all__ = ["Settings", "I18nSettings", "settings"]
