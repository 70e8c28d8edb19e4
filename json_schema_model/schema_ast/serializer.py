"""
Serializer that turns ``SchemaNode`` trees back into JSON values.

Payload fields are merged into the same object as the common fields. Absent
attributes are left out entirely rather than written as null.
"""

from __future__ import annotations

import copy
from typing import Any

from ..errors import SchemaInvariantError
from .nodes import (
    PAYLOAD_TYPES,
    ArraySchema,
    BooleanSchema,
    CombinedSchema,
    EnumSchema,
    IntegerSchema,
    NullSchema,
    NumberSchema,
    ObjectSchema,
    SchemaNode,
    StringSchema,
)


def _put(out: dict[str, Any], key: str, value: Any) -> None:
    """Set ``key`` only when the value is present."""
    if value is not None:
        out[key] = value


class SchemaSerializer:
    """Serializes ``SchemaNode`` trees into JSON-compatible dictionaries."""

    def serialize(self, node: SchemaNode) -> dict[str, Any]:
        """
        Serialize a schema node.

        Args:
            node: The node to serialize

        Returns:
            A dictionary ready for ``json.dumps``

        Raises:
            SchemaInvariantError: If the node holds an unknown payload
        """
        if not isinstance(node, SchemaNode):
            raise SchemaInvariantError(f"Expected a SchemaNode, got {type(node).__name__}")
        if not isinstance(node.payload, PAYLOAD_TYPES):
            raise SchemaInvariantError(f"Unsupported schema payload: {type(node.payload).__name__}")

        out: dict[str, Any] = {}
        if node.kind.has_type_keyword:
            out["type"] = node.kind.value
        _put(out, "title", node.title)
        _put(out, "description", node.description)
        self._serialize_payload(node.payload, out)
        return out

    def _serialize_payload(self, payload: Any, out: dict[str, Any]) -> None:
        """Merge the payload fields into ``out``."""
        if isinstance(payload, (BooleanSchema, NullSchema)):
            return
        if isinstance(payload, ArraySchema):
            self._serialize_array(payload, out)
        elif isinstance(payload, EnumSchema):
            out["enum"] = copy.deepcopy(list(payload.values))
        elif isinstance(payload, (IntegerSchema, NumberSchema)):
            _put(out, "minimum", payload.minimum)
            _put(out, "maximum", payload.maximum)
            _put(out, "exclusiveMinimum", payload.exclusive_minimum)
            _put(out, "exclusiveMaximum", payload.exclusive_maximum)
            _put(out, "multipleOf", payload.multiple_of)
        elif isinstance(payload, ObjectSchema):
            self._serialize_object(payload, out)
        elif isinstance(payload, StringSchema):
            _put(out, "minLength", payload.min_length)
            _put(out, "maxLength", payload.max_length)
            _put(out, "pattern", payload.pattern)
            _put(out, "format", payload.format)
        elif isinstance(payload, CombinedSchema):
            _put(out, "title", payload.title)
            out[payload.kind.value] = [self.serialize(schema) for schema in payload.schemas]
        else:
            raise SchemaInvariantError(f"Unsupported schema payload: {type(payload).__name__}")

    def _serialize_array(self, payload: ArraySchema, out: dict[str, Any]) -> None:
        if payload.items is not None:
            out["items"] = self.serialize(payload.items)
        if payload.prefix_items is not None:
            out["prefixItems"] = [self.serialize(item) for item in payload.prefix_items]
        _put(out, "minItems", payload.min_items)
        _put(out, "maxItems", payload.max_items)
        _put(out, "uniqueItems", payload.unique_items)

    def _serialize_object(self, payload: ObjectSchema, out: dict[str, Any]) -> None:
        if payload.properties is not None:
            out["properties"] = {name: self.serialize(prop) for name, prop in payload.properties.items()}
        if payload.required is not None:
            out["required"] = list(payload.required)
        if isinstance(payload.additional_properties, SchemaNode):
            out["additionalProperties"] = self.serialize(payload.additional_properties)
        else:
            _put(out, "additionalProperties", payload.additional_properties)
