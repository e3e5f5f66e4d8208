"""Errors raised while building or merging language maps."""


class I18nError(Exception):
    """Base class for language map errors."""


class DecodeError(I18nError, ValueError):
    """Raised when a document is not a flat JSON object of strings.

    Attributes:
        message: human-friendly message
        source: where the document came from (file path or ``<bytes>``)
    """

    def __init__(self, message: str, source: str = "<bytes>"):
        super().__init__(message)
        self.source = source


class MissingFieldError(I18nError, LookupError):
    """Raised when a language map lacks a reserved key at construction.

    Attributes:
        field: the reserved key that was missing (``_.code`` or ``_.name``)
    """

    def __init__(self, field: str):
        super().__init__(f"missing {field} field in language file")
        self.field = field
