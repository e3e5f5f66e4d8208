"""JSON codec for flat language map documents."""

import json
from typing import Dict

import structlog

from langmap.i18n.errors import DecodeError

logger = structlog.get_logger()


def decode_document(document: bytes, source: str = "<bytes>") -> Dict[str, str]:
    """Decode a JSON document into a flat ``{key: template}`` dict.

    Args:
        document: Raw JSON bytes (or text).
        source: Where the document came from, for error messages.

    Returns:
        Dict mapping every key to its string template.

    Raises:
        DecodeError: If the document is not valid JSON, is not an object,
            or holds a value that is not a string.
    """
    try:
        data = json.loads(document)
    except (json.JSONDecodeError, UnicodeDecodeError, RecursionError) as e:
        # RecursionError: nesting too deep for the decoder
        logger.error("document_decode_failed", source=source, error=str(e))
        raise DecodeError(f"Failed to parse {source}: {e}", source=source) from e

    if not isinstance(data, dict):
        logger.error(
            "invalid_document_format",
            source=source,
            expected="object",
            got=type(data).__name__,
        )
        raise DecodeError(
            f"{source}: expected a JSON object, got {type(data).__name__}",
            source=source,
        )

    for key, value in data.items():
        if not isinstance(value, str):
            logger.error(
                "invalid_document_value",
                source=source,
                key=key,
                got=type(value).__name__,
            )
            raise DecodeError(
                f"{source}: value for {key!r} must be a string, got {type(value).__name__}",
                source=source,
            )

    return data


def encode_document(entries: Dict[str, str]) -> bytes:
    """Encode a language map as a UTF-8 JSON object."""
    return json.dumps(entries, ensure_ascii=False).encode("utf-8")
