"""Translator for flat language maps.

Resolves keys to templates with singular/plural selection and ``{param}``
substitution, in the manner of vue-i18n's ``t``/``tc``, so the same JSON
language file can serve a front-end and a Python back-end.
"""

import re
from pathlib import Path
from typing import Any, Dict, Union

from langmap.i18n.codec import decode_document, encode_document
from langmap.i18n.errors import MissingFieldError
from langmap.i18n.formatting import stringify
from langmap.i18n.models import CODE_KEY, NAME_KEY, LanguageInfo, plural, singular
from langmap.logging import get_module_logger

logger = get_module_logger()

DEFAULT_MAX_NESTING_DEPTH = 100

# {param} markers inside parameter values that resolve to other keys
PARAM_PATTERN = re.compile(r"\{([a-z0-9\-.]+)\}", re.IGNORECASE)


class Translator:
    """Translation functions over a single language map.

    The language map is a flat ``{key: template}`` dict that must carry the
    reserved ``_.code`` and ``_.name`` keys. Lookups never raise: a missing
    key resolves to the key itself.

    Attributes:
        max_nesting_depth: Passes of nested ``{key}`` resolution allowed
            inside a parameter value before giving up.
    """

    def __init__(
        self,
        entries: Dict[str, str],
        max_nesting_depth: int = DEFAULT_MAX_NESTING_DEPTH,
    ):
        """Initialize Translator.

        Args:
            entries: Decoded language map.
            max_nesting_depth: Limit for nested placeholder resolution.

        Raises:
            MissingFieldError: If ``_.code`` or ``_.name`` is missing or empty.
        """
        for field in (CODE_KEY, NAME_KEY):
            if not entries.get(field):
                logger.error("missing_language_field", field=field)
                raise MissingFieldError(field)

        self._entries: Dict[str, str] = dict(entries)
        self._code = entries[CODE_KEY]
        self._name = entries[NAME_KEY]
        self.max_nesting_depth = max_nesting_depth
        logger.info(
            "translator_created",
            code=self._code,
            entry_count=len(self._entries),
        )

    @classmethod
    def from_bytes(cls, document: Union[bytes, str], **kwargs) -> "Translator":
        """Build a Translator from a JSON language map.

        Raises:
            DecodeError: If the document is not a flat JSON object of strings.
            MissingFieldError: If a reserved key is missing.
        """
        return cls(decode_document(document), **kwargs)

    @classmethod
    def from_file(cls, path: Union[str, Path], **kwargs) -> "Translator":
        """Build a Translator from a JSON language file.

        Raises:
            OSError: If the file cannot be read.
            DecodeError: If the file is not a flat JSON object of strings.
            MissingFieldError: If a reserved key is missing.
        """
        path = Path(path)
        return cls(decode_document(path.read_bytes(), source=str(path)), **kwargs)

    def load(self, document: Union[bytes, str]) -> None:
        """Merge a JSON language map into this one.

        Keys in ``document`` overwrite existing keys. Reserved keys are
        optional here and never change ``code`` or ``name``. Not safe to
        call concurrently with lookups.

        Raises:
            DecodeError: If the document is malformed. Nothing is merged.
        """
        entries = decode_document(document)
        self._entries.update(entries)
        logger.info(
            "translations_merged",
            code=self._code,
            merged_count=len(entries),
            entry_count=len(self._entries),
        )

    def to_json(self) -> bytes:
        """Return the language map as a JSON object."""
        return encode_document(self._entries)

    @property
    def code(self) -> str:
        """Short language identifier (e.g., "en")."""
        return self._code

    @property
    def name(self) -> str:
        """Display name of the language (e.g., "English")."""
        return self._name

    @property
    def language(self) -> LanguageInfo:
        return LanguageInfo(code=self._code, name=self._name)

    @property
    def entries(self) -> Dict[str, str]:
        """Copy of the language map, reserved keys included."""
        return dict(self._entries)

    def has(self, key: str) -> bool:
        """Check whether the language map defines ``key``."""
        return key in self._entries

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(code={self._code!r}, name={self._name!r}, "
            f"entries={len(self._entries)})"
        )

    def t(self, key: str) -> str:
        """Return the translation for ``key`` (singular form).

        Placeholders are left as they are. A missing key returns ``key``.
        """
        template = self._entries.get(key)
        if template is None:
            logger.debug("translation_not_found", key=key, code=self._code)
            return key

        return singular(template)

    def tc(self, key: str, n: int) -> str:
        """Return the plural form of ``key`` if ``n > 1``, else the singular.

        Templates are written as ``Singular | Plural``.
        """
        template = self._entries.get(key)
        if template is None:
            logger.debug("translation_not_found", key=key, code=self._code)
            return key

        if n > 1:
            return plural(template)

        return singular(template)

    def s(self, key: str) -> str:
        """Return the singular form of ``key``."""
        return self.tc(key, 1)

    def p(self, key: str) -> str:
        """Return the plural form of ``key``."""
        return self.tc(key, 2)

    def ts(self, key: str, *params: Any) -> str:
        """Return the translation for ``key`` with ``{param}`` substitution.

        Parameters are passed as succeeding name/value pairs, so their count
        must be even. Values of any type are stringified, and ``{key}``
        markers inside a value are resolved against the language map:

            ts("globals.messages.notFound", "name", "campaigns", "count", 12)

        Placeholders without a matching pair are left as they are.

        Returns:
            The substituted translation, ``key`` if it is missing, or
            ``"<key>: invalid arguments"`` for an odd number of params.
        """
        if len(params) % 2 != 0:
            logger.warning(
                "invalid_translation_arguments",
                key=key,
                param_count=len(params),
            )
            return f"{key}: invalid arguments"

        template = self._entries.get(key)
        if template is None:
            logger.debug("translation_not_found", key=key, code=self._code)
            return key

        message = singular(template)
        for name, value in zip(params[::2], params[1::2]):
            placeholder = "{" + stringify(name) + "}"
            message = message.replace(placeholder, self._resolve_nested(value))

        return message

    def _lookup_match(self, match: "re.Match[str]") -> str:
        return self.t(match.group(1))

    def _resolve_nested(self, value: Any) -> str:
        """Stringify ``value`` and resolve ``{key}`` markers in it.

        Resolution repeats until the text stops changing, so a value can
        point at a key whose translation points at another key.
        """
        text = stringify(value)

        for _ in range(self.max_nesting_depth):
            if "{" not in text:
                return text

            resolved = PARAM_PATTERN.sub(self._lookup_match, text)
            if resolved == text:
                return text
            text = resolved

        if PARAM_PATTERN.sub(self._lookup_match, text) != text:
            logger.warning(
                "nested_substitution_depth_exceeded",
                code=self._code,
                max_depth=self.max_nesting_depth,
            )

        return text
