"""i18n system - translation lookup over flat JSON language maps.

Main components:
- models: LanguageInfo, reserved keys and singular/plural helpers
- codec: JSON decoding and encoding of language maps
- formatting: stringify() for parameter values
- translator: Translator with t/tc/s/p/ts
- loader: LanguageLoader and JSONLanguageLoader
- factory: create_translator() and create_loader() from settings
"""

from langmap.i18n.errors import DecodeError, I18nError, MissingFieldError
from langmap.i18n.factory import create_loader, create_translator
from langmap.i18n.formatting import stringify
from langmap.i18n.loader import JSONLanguageLoader, LanguageLoader
from langmap.i18n.models import CODE_KEY, NAME_KEY, LanguageInfo
from langmap.i18n.translator import Translator

__all__ = [
    "CODE_KEY",
    "NAME_KEY",
    "LanguageInfo",
    "I18nError",
    "DecodeError",
    "MissingFieldError",
    "stringify",
    "Translator",
    "LanguageLoader",
    "JSONLanguageLoader",
    "create_loader",
    "create_translator",
]
