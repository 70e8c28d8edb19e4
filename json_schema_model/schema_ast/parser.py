"""
JSON Schema parser that builds ``SchemaNode`` trees.

Every keyword of a schema lives in one flat JSON object: the common fields
(``title``, ``description``) and the kind-specific fields are read from the
same dictionary. The kind is resolved first, then the matching payload is
decoded from that dictionary.
"""

from __future__ import annotations

import logging
from typing import Any

from ..config import CodecConfig
from ..errors import DiscriminatorError, NestingTooDeepError, StructuralMismatchError
from .nodes import (
    TYPED_KINDS,
    ArraySchema,
    BooleanSchema,
    CombinedSchema,
    EnumSchema,
    IntegerSchema,
    NullSchema,
    NumberSchema,
    ObjectSchema,
    Payload,
    SchemaKind,
    SchemaNode,
    StringSchema,
)

logger = logging.getLogger(__name__)


def _infer_type(value: Any) -> str:
    """Name the JSON type of a decoded JSON value."""
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, int):
        return "integer"
    if isinstance(value, float):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, list):
        return "array"
    if isinstance(value, dict):
        return "object"
    return type(value).__name__


def _pointer_token(name: str) -> str:
    """Escape a property name for use in a JSON pointer path."""
    return name.replace("~", "~0").replace("/", "~1")


class SchemaParser:
    """Parses JSON Schema values into ``SchemaNode`` trees.

    The parser keeps no per-document state, so one instance can be shared.
    """

    # Keywords that imply the kind, in priority order
    KEYWORD_KINDS = (
        ("enum", SchemaKind.ENUM),
        ("oneOf", SchemaKind.ONE_OF),
        ("anyOf", SchemaKind.ANY_OF),
        ("allOf", SchemaKind.ALL_OF),
    )

    # Accepted values of the "type" keyword
    TYPE_KINDS = {kind.value: kind for kind in TYPED_KINDS}

    def __init__(self, config: CodecConfig | None = None):
        self.config = config or CodecConfig()

    def parse(self, schema: Any, path: str = "#") -> SchemaNode:
        """
        Parse a decoded JSON value into a schema node.

        Args:
            schema: The JSON Schema, as produced by ``json.loads``
            path: Path of the value in its document (for error messages)

        Returns:
            The parsed SchemaNode

        Raises:
            DiscriminatorError: If the kind of a schema cannot be resolved
            StructuralMismatchError: If a keyword holds the wrong kind of value
            NestingTooDeepError: If the schema nests deeper than ``config.max_depth``
                or deeper than the interpreter stack allows
        """
        try:
            return self._parse_schema_node(schema, path, 0)
        except RecursionError as e:
            raise NestingTooDeepError("Schema nests too deeply to be parsed", path) from e

    def _parse_schema_node(self, schema: Any, path: str, depth: int) -> SchemaNode:
        """Parse a schema node recursively."""
        if depth > self.config.max_depth:
            raise NestingTooDeepError(f"Schema nesting exceeds the maximum depth of {self.config.max_depth}", path)

        if not isinstance(schema, dict):
            raise StructuralMismatchError(f"Expected a schema object, got {_infer_type(schema)}", path)

        kind = self._resolve_kind(schema, path)
        logger.debug("Resolved schema kind %s at %s", kind.value, path)

        title = self._get_string(schema, "title", path)
        description = self._get_string(schema, "description", path)
        payload = self._parse_payload(kind, schema, path, depth)

        return SchemaNode(payload=payload, title=title, description=description)

    def _resolve_kind(self, schema: dict[str, Any], path: str) -> SchemaKind:
        """Resolve the schema kind from keyword presence, then from "type"."""
        for keyword, kind in self.KEYWORD_KINDS:
            if keyword in schema:
                if kind.is_combinator:
                    self._warn_ignored_combinators(schema, keyword, path)
                return kind

        if "type" not in schema:
            raise DiscriminatorError("Schema has no 'type' key and no enum, oneOf, anyOf or allOf keyword", path)

        type_value = schema["type"]
        kind = self.TYPE_KINDS.get(type_value) if isinstance(type_value, str) else None
        if kind is None:
            raise DiscriminatorError(f"Unsupported schema type {type_value!r}", f"{path}/type")
        return kind

    def _warn_ignored_combinators(self, schema: dict[str, Any], winner: str, path: str) -> None:
        ignored = [
            keyword for keyword, kind in self.KEYWORD_KINDS if kind.is_combinator and keyword != winner and keyword in schema
        ]
        if ignored:
            logger.warning("Ignoring %s at %s: %s takes precedence", ", ".join(ignored), path, winner)

    def _parse_payload(self, kind: SchemaKind, schema: dict[str, Any], path: str, depth: int) -> Payload:
        """Decode the payload matching ``kind`` from the same schema object."""
        if kind.is_combinator:
            return self._parse_combined(kind, schema, path, depth)
        if kind is SchemaKind.ARRAY:
            return self._parse_array(schema, path, depth)
        if kind is SchemaKind.BOOLEAN:
            return BooleanSchema()
        if kind is SchemaKind.ENUM:
            return self._parse_enum(schema, path)
        if kind is SchemaKind.INTEGER:
            return self._parse_integer(schema, path)
        if kind is SchemaKind.NULL:
            return NullSchema()
        if kind is SchemaKind.NUMBER:
            return self._parse_number(schema, path)
        if kind is SchemaKind.OBJECT:
            return self._parse_object(schema, path, depth)
        return self._parse_string(schema, path)

    def _parse_array(self, schema: dict[str, Any], path: str, depth: int) -> ArraySchema:
        """Parse the payload of an array schema."""
        items = None
        if schema.get("items") is not None:
            items = self._parse_schema_node(schema["items"], f"{path}/items", depth + 1)

        prefix_items = None
        prefix_schemas = self._get_list(schema, "prefixItems", path)
        if prefix_schemas is not None:
            prefix_items = tuple(
                self._parse_schema_node(item, f"{path}/prefixItems/{i}", depth + 1) for i, item in enumerate(prefix_schemas)
            )

        return ArraySchema(
            items=items,
            prefix_items=prefix_items,
            min_items=self._get_count(schema, "minItems", path),
            max_items=self._get_count(schema, "maxItems", path),
            unique_items=self._get_bool(schema, "uniqueItems", path),
        )

    def _parse_enum(self, schema: dict[str, Any], path: str) -> EnumSchema:
        """Parse the payload of an enum schema."""
        values = schema["enum"]
        if not isinstance(values, list):
            raise StructuralMismatchError(f"'enum' must be an array, got {_infer_type(values)}", f"{path}/enum")
        try:
            return EnumSchema(values=tuple(values))
        except TypeError as e:
            raise StructuralMismatchError(str(e), f"{path}/enum") from e

    def _parse_integer(self, schema: dict[str, Any], path: str) -> IntegerSchema:
        """Parse the payload of an integer schema."""
        return IntegerSchema(
            minimum=self._get_integer(schema, "minimum", path),
            maximum=self._get_integer(schema, "maximum", path),
            exclusive_minimum=self._get_integer(schema, "exclusiveMinimum", path),
            exclusive_maximum=self._get_integer(schema, "exclusiveMaximum", path),
            multiple_of=self._get_positive(self._get_integer(schema, "multipleOf", path), "multipleOf", path),
        )

    def _parse_number(self, schema: dict[str, Any], path: str) -> NumberSchema:
        """Parse the payload of a number schema."""
        return NumberSchema(
            minimum=self._get_number(schema, "minimum", path),
            maximum=self._get_number(schema, "maximum", path),
            exclusive_minimum=self._get_number(schema, "exclusiveMinimum", path),
            exclusive_maximum=self._get_number(schema, "exclusiveMaximum", path),
            multiple_of=self._get_positive(self._get_number(schema, "multipleOf", path), "multipleOf", path),
        )

    def _parse_object(self, schema: dict[str, Any], path: str, depth: int) -> ObjectSchema:
        """Parse the payload of an object schema."""
        properties = None
        property_schemas = self._get_value(schema, "properties", path, dict, "an object")
        if property_schemas is not None:
            for name in property_schemas:
                if not isinstance(name, str):
                    raise StructuralMismatchError(f"Property names must be strings, got {_infer_type(name)}", f"{path}/properties")
            properties = {
                name: self._parse_schema_node(prop_schema, f"{path}/properties/{_pointer_token(name)}", depth + 1)
                for name, prop_schema in property_schemas.items()
            }

        required = None
        required_names = self._get_list(schema, "required", path)
        if required_names is not None:
            for i, name in enumerate(required_names):
                if not isinstance(name, str):
                    raise StructuralMismatchError(f"Required property names must be strings, got {_infer_type(name)}", f"{path}/required/{i}")
            if len(set(required_names)) != len(required_names):
                raise StructuralMismatchError("'required' must not contain duplicate names", f"{path}/required")
            required = tuple(required_names)

        additional_properties = None
        additional = schema.get("additionalProperties")
        if isinstance(additional, bool):
            additional_properties = additional
        elif additional is not None:
            additional_properties = self._parse_schema_node(additional, f"{path}/additionalProperties", depth + 1)

        return ObjectSchema(
            properties=properties,
            required=required,
            additional_properties=additional_properties,
        )

    def _parse_string(self, schema: dict[str, Any], path: str) -> StringSchema:
        """Parse the payload of a string schema."""
        return StringSchema(
            min_length=self._get_count(schema, "minLength", path),
            max_length=self._get_count(schema, "maxLength", path),
            pattern=self._get_string(schema, "pattern", path),
            format=self._get_string(schema, "format", path),
        )

    def _parse_combined(self, kind: SchemaKind, schema: dict[str, Any], path: str, depth: int) -> CombinedSchema:
        """Parse the payload of a oneOf, anyOf or allOf schema."""
        keyword = kind.value
        variants = schema[keyword]
        if not isinstance(variants, list) or not variants:
            raise StructuralMismatchError(f"'{keyword}' must be a non-empty array of schemas", f"{path}/{keyword}")

        schemas = tuple(self._parse_schema_node(variant, f"{path}/{keyword}/{i}", depth + 1) for i, variant in enumerate(variants))

        # The payload title is read from the same object as the node title
        return CombinedSchema(kind=kind, schemas=schemas, title=self._get_string(schema, "title", path))

    def _get_value(self, schema: dict[str, Any], key: str, path: str, expected: type | tuple[type, ...], label: str) -> Any:
        """
        Read an optional keyword, checking its JSON type.

        Absent keys and explicit nulls both read as None. Booleans are
        rejected unless ``bool`` itself is expected.
        """
        value = schema.get(key)
        if value is None:
            return None
        expected_types = expected if isinstance(expected, tuple) else (expected,)
        if isinstance(value, bool) and bool not in expected_types:
            raise StructuralMismatchError(f"'{key}' must be {label}, got boolean", f"{path}/{key}")
        if not isinstance(value, expected_types):
            raise StructuralMismatchError(f"'{key}' must be {label}, got {_infer_type(value)}", f"{path}/{key}")
        return value

    def _get_string(self, schema: dict[str, Any], key: str, path: str) -> str | None:
        return self._get_value(schema, key, path, str, "a string")

    def _get_bool(self, schema: dict[str, Any], key: str, path: str) -> bool | None:
        return self._get_value(schema, key, path, bool, "a boolean")

    def _get_list(self, schema: dict[str, Any], key: str, path: str) -> list | None:
        return self._get_value(schema, key, path, list, "an array")

    def _get_integer(self, schema: dict[str, Any], key: str, path: str) -> int | None:
        return self._get_value(schema, key, path, int, "an integer")

    def _get_number(self, schema: dict[str, Any], key: str, path: str) -> int | float | None:
        return self._get_value(schema, key, path, (int, float), "a number")

    def _get_count(self, schema: dict[str, Any], key: str, path: str) -> int | None:
        """Read a non-negative integer keyword such as minLength or maxItems."""
        value = self._get_integer(schema, key, path)
        if value is not None and value < 0:
            raise StructuralMismatchError(f"'{key}' must be a non-negative integer, got {value}", f"{path}/{key}")
        return value

    def _get_positive(self, value: int | float | None, key: str, path: str) -> int | float | None:
        if value is not None and value <= 0:
            raise StructuralMismatchError(f"'{key}' must be strictly greater than 0, got {value}", f"{path}/{key}")
        return value
