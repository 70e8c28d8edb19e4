"""
Entry points for converting between JSON and ``SchemaNode`` trees.
"""

from __future__ import annotations

import json
from typing import Any

from .config import CodecConfig
from .errors import NestingTooDeepError, TextEncodingError
from .schema_ast import SchemaNode, SchemaParser, SchemaSerializer


def decode(value: Any, config: CodecConfig | None = None) -> SchemaNode:
    """Decode a JSON value (as returned by ``json.loads``) into a schema node."""
    return SchemaParser(config).parse(value)


def encode(node: SchemaNode) -> dict[str, Any]:
    """Encode a schema node into a JSON-compatible dictionary."""
    return SchemaSerializer().serialize(node)


def _ensure_text(data: str | bytes) -> str:
    """
    Check that the input is UTF-8 text and return it as ``str``.

    Raises:
        TextEncodingError: If bytes are not valid UTF-8, or a string holds
            characters that cannot be encoded as UTF-8 (lone surrogates)
    """
    if isinstance(data, (bytes, bytearray)):
        try:
            return bytes(data).decode("utf-8")
        except UnicodeDecodeError as e:
            raise TextEncodingError(f"Input is not valid UTF-8: {e.reason} at byte {e.start}") from e
    try:
        data.encode("utf-8")
    except UnicodeEncodeError as e:
        raise TextEncodingError(f"Input is not valid UTF-8 text: {e.reason} at index {e.start}") from e
    return data


def loads(data: str | bytes, config: CodecConfig | None = None) -> SchemaNode:
    """
    Build a schema node from JSON text.

    The text encoding is checked before anything is parsed; malformed JSON
    raises ``json.JSONDecodeError`` unchanged.

    Args:
        data: JSON text, as ``str`` or UTF-8 ``bytes``
        config: Codec configuration (defaults to ``CodecConfig()``)

    Returns:
        The decoded SchemaNode

    Raises:
        TextEncodingError: If the input is not valid UTF-8 text
        json.JSONDecodeError: If the text is not valid JSON
        SchemaDecodeError: If the JSON value is not a supported schema
    """
    text = _ensure_text(data)
    try:
        value = json.loads(text)
    except RecursionError as e:
        raise NestingTooDeepError("JSON text nests too deeply to be parsed") from e
    return decode(value, config)


def dumps(node: SchemaNode, config: CodecConfig | None = None) -> str:
    """Write a schema node as JSON text."""
    config = config or CodecConfig()
    return json.dumps(encode(node), indent=config.indent, sort_keys=config.sort_keys, ensure_ascii=False)
