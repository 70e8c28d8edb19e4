"""
Tests for the text entry points and the nesting guard.
"""

from __future__ import annotations

import json

import pytest

from json_schema_model import (
    CodecConfig,
    NestingTooDeepError,
    SchemaKind,
    SchemaNode,
    StructuralMismatchError,
    TextEncodingError,
    builders,
    decode,
    dumps,
    loads,
)


def nested_arrays(depth: int) -> dict:
    schema = {"type": "null"}
    for _ in range(depth):
        schema = {"type": "array", "items": schema}
    return schema


def test_loads_text():
    node = loads('{"type": "string", "minLength": 1, "maxLength": 10}')

    assert node.kind is SchemaKind.STRING
    assert node.string_schema.max_length == 10


def test_loads_utf8_bytes():
    node = loads('{"type": "string", "title": "Prénom"}'.encode("utf-8"))

    assert node.title == "Prénom"


def test_loads_rejects_invalid_utf8():
    with pytest.raises(TextEncodingError):
        loads(b'{"type": "string", "title": "\xff"}')


def test_loads_rejects_lone_surrogates():
    with pytest.raises(TextEncodingError):
        loads('{"type": "string", "title": "\udcff"}')


def test_encoding_is_checked_before_json_syntax():
    # Both invalid UTF-8 and invalid JSON
    with pytest.raises(TextEncodingError):
        loads(b"{\xff")


def test_malformed_json_passes_through():
    with pytest.raises(json.JSONDecodeError):
        loads('{"type": "string"')


def test_loads_decode_failure():
    with pytest.raises(StructuralMismatchError) as exc_info:
        loads('{"type": "string", "minLength": "oops"}')

    assert exc_info.value.path == "#/minLength"


def test_dumps_uses_config():
    node = builders.string(min_length=1, title="Name")

    assert dumps(node, CodecConfig(indent=None)) == '{"type": "string", "title": "Name", "minLength": 1}'
    assert dumps(node, CodecConfig(indent=None, sort_keys=True)) == '{"minLength": 1, "title": "Name", "type": "string"}'
    assert dumps(node) == json.dumps({"type": "string", "title": "Name", "minLength": 1}, indent=2)


def test_node_text_helpers():
    node = SchemaNode.from_json_string('{"anyOf": [{"type": "null"}, {"type": "boolean"}]}')

    assert node.kind is SchemaKind.ANY_OF
    assert SchemaNode.from_json_string(node.to_json_string()) == node


def test_depth_within_limit():
    node = decode(nested_arrays(2), CodecConfig(max_depth=2))

    assert node.array_schema.items.array_schema.items.kind is SchemaKind.NULL


def test_depth_over_limit():
    with pytest.raises(NestingTooDeepError) as exc_info:
        decode(nested_arrays(3), CodecConfig(max_depth=2))

    assert exc_info.value.path == "#/items/items/items"


def test_default_depth_limit():
    decode(nested_arrays(CodecConfig().max_depth))

    with pytest.raises(NestingTooDeepError):
        decode(nested_arrays(CodecConfig().max_depth + 1))


def test_depth_counts_every_container():
    schema = {"type": "object", "properties": {"a": {"oneOf": [{"type": "array", "items": {"type": "null"}}]}}}

    decode(schema, CodecConfig(max_depth=3))
    with pytest.raises(NestingTooDeepError):
        decode(schema, CodecConfig(max_depth=2))


def test_deep_json_text_is_a_decode_failure():
    text = '{"type": "array", "items": ' * 100000 + '{"type": "null"}' + "}" * 100000

    with pytest.raises(NestingTooDeepError):
        loads(text)


def test_depth_beyond_the_interpreter_stack():
    with pytest.raises(NestingTooDeepError) as exc_info:
        decode(nested_arrays(5000), CodecConfig(max_depth=10000))

    assert exc_info.value.path == "#"
