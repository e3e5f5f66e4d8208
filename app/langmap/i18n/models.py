"""Language map models and template form helpers.

A language map is a flat ``{key: template}`` dict. Templates may carry a
``singular | plural`` pair separated by a pipe.
"""

from dataclasses import dataclass

CODE_KEY = "_.code"
NAME_KEY = "_.name"

PLURAL_SEPARATOR = "|"


@dataclass(frozen=True)
class LanguageInfo:
    """Identifies a language map by its reserved keys.

    Attributes:
        code: Short language identifier (e.g., "en").
        name: Display name (e.g., "English").
    """

    code: str
    name: str

    def __str__(self) -> str:
        return f"{self.name} ({self.code})"


def singular(template: str) -> str:
    """Return the singular form of a ``singular | plural`` template.

    Templates without a pipe are returned unchanged.
    """
    if PLURAL_SEPARATOR not in template:
        return template

    return template.split(PLURAL_SEPARATOR)[0].strip()


def plural(template: str) -> str:
    """Return the plural form of a ``singular | plural`` template.

    Templates without a pipe are returned unchanged.
    """
    if PLURAL_SEPARATOR not in template:
        return template

    chunks = template.split(PLURAL_SEPARATOR)
    if len(chunks) == 2:
        return chunks[1].strip()

    # Known oddity: with more than one pipe the first chunk is returned,
    # not the second.
    return chunks[0].strip()
