"""
Node definitions for the JSON Schema model.

A schema is represented by a single ``SchemaNode`` type carrying the common
metadata (``title``, ``description``) and exactly one kind-specific payload.
The node kind is derived from the payload, so a node can never be, say, both
an enum and an object.

Constructors enforce the same type and range rules as the parser, so any node
that can be built can also be encoded and decoded back to an equal node.
Nodes holding other nodes or JSON values compare by value but are not
hashable.
"""

from __future__ import annotations

import copy
from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import TYPE_CHECKING, Any, Union

if TYPE_CHECKING:
    from ..config import CodecConfig


class SchemaKind(str, Enum):
    """Kind of schema node.

    The value is the JSON spelling: the ``type`` keyword value for the seven
    typed kinds, the keyword name for enum and the combinators.
    """

    ARRAY = "array"
    BOOLEAN = "boolean"
    ENUM = "enum"
    INTEGER = "integer"
    NULL = "null"
    NUMBER = "number"
    OBJECT = "object"
    STRING = "string"
    ONE_OF = "oneOf"
    ANY_OF = "anyOf"
    ALL_OF = "allOf"

    @property
    def is_combinator(self) -> bool:
        return self in COMBINATOR_KINDS

    @property
    def has_type_keyword(self) -> bool:
        """Whether this kind is written with an explicit ``type`` key."""
        return self in TYPED_KINDS


COMBINATOR_KINDS = (SchemaKind.ONE_OF, SchemaKind.ANY_OF, SchemaKind.ALL_OF)

TYPED_KINDS = (
    SchemaKind.ARRAY,
    SchemaKind.BOOLEAN,
    SchemaKind.INTEGER,
    SchemaKind.NULL,
    SchemaKind.NUMBER,
    SchemaKind.OBJECT,
    SchemaKind.STRING,
)


def _check_type(name: str, value: Any, expected: type | tuple[type, ...], label: str) -> None:
    """Reject a present value of the wrong type; bool only passes where it is expected."""
    if value is None:
        return
    expected_types = expected if isinstance(expected, tuple) else (expected,)
    if (isinstance(value, bool) and bool not in expected_types) or not isinstance(value, expected_types):
        raise TypeError(f"{name} must be {label}, got {type(value).__name__}")


def _check_count(name: str, value: int | None) -> None:
    _check_type(name, value, int, "an integer")
    if value is not None and value < 0:
        raise ValueError(f"{name} must be a non-negative integer, got {value}")


def _check_positive(name: str, value: float | None) -> None:
    if value is not None and value <= 0:
        raise ValueError(f"{name} must be strictly greater than 0, got {value}")


def _check_nodes(name: str, nodes: tuple[Any, ...]) -> None:
    for node in nodes:
        if not isinstance(node, SchemaNode):
            raise TypeError(f"{name} must hold SchemaNode values, got {type(node).__name__}")


def _check_json_value(value: Any) -> None:
    """Reject enum values that have no JSON spelling."""
    if value is None or isinstance(value, (bool, int, float, str)):
        return
    if isinstance(value, list):
        for item in value:
            _check_json_value(item)
    elif isinstance(value, dict):
        for key, item in value.items():
            if not isinstance(key, str):
                raise TypeError(f"Enum object keys must be strings, got {type(key).__name__}")
            _check_json_value(item)
    else:
        raise TypeError(f"Enum values must be JSON values, got {type(value).__name__}")


@dataclass(frozen=True)
class ArraySchema:
    """Payload of an ``array`` schema."""

    items: SchemaNode | None = None
    prefix_items: tuple[SchemaNode, ...] | None = None
    min_items: int | None = None
    max_items: int | None = None
    unique_items: bool | None = None

    __hash__ = None

    def __post_init__(self) -> None:
        if self.items is not None:
            _check_nodes("items", (self.items,))
        if self.prefix_items is not None:
            object.__setattr__(self, "prefix_items", tuple(self.prefix_items))
            _check_nodes("prefixItems", self.prefix_items)
        _check_count("minItems", self.min_items)
        _check_count("maxItems", self.max_items)
        _check_type("uniqueItems", self.unique_items, bool, "a boolean")


@dataclass(frozen=True)
class BooleanSchema:
    """Payload of a ``boolean`` schema (no validation keywords)."""


@dataclass(frozen=True)
class EnumSchema:
    """Payload of an ``enum`` schema: the permitted literal values, in order.

    The values are deep-copied, so later changes to the caller's lists and
    dicts do not reach the node.
    """

    values: tuple[Any, ...] = ()

    __hash__ = None

    def __post_init__(self) -> None:
        values = list(self.values)
        for value in values:
            _check_json_value(value)
        object.__setattr__(self, "values", tuple(copy.deepcopy(values)))


@dataclass(frozen=True)
class IntegerSchema:
    """Payload of an ``integer`` schema."""

    minimum: int | None = None
    maximum: int | None = None
    exclusive_minimum: int | None = None
    exclusive_maximum: int | None = None
    multiple_of: int | None = None

    def __post_init__(self) -> None:
        _check_type("minimum", self.minimum, int, "an integer")
        _check_type("maximum", self.maximum, int, "an integer")
        _check_type("exclusiveMinimum", self.exclusive_minimum, int, "an integer")
        _check_type("exclusiveMaximum", self.exclusive_maximum, int, "an integer")
        _check_type("multipleOf", self.multiple_of, int, "an integer")
        _check_positive("multipleOf", self.multiple_of)


@dataclass(frozen=True)
class NullSchema:
    """Payload of a ``null`` schema (no validation keywords)."""


@dataclass(frozen=True)
class NumberSchema:
    """Payload of a ``number`` schema."""

    minimum: float | None = None
    maximum: float | None = None
    exclusive_minimum: float | None = None
    exclusive_maximum: float | None = None
    multiple_of: float | None = None

    def __post_init__(self) -> None:
        _check_type("minimum", self.minimum, (int, float), "a number")
        _check_type("maximum", self.maximum, (int, float), "a number")
        _check_type("exclusiveMinimum", self.exclusive_minimum, (int, float), "a number")
        _check_type("exclusiveMaximum", self.exclusive_maximum, (int, float), "a number")
        _check_type("multipleOf", self.multiple_of, (int, float), "a number")
        _check_positive("multipleOf", self.multiple_of)


@dataclass(frozen=True)
class ObjectSchema:
    """Payload of an ``object`` schema.

    Attributes:
        properties: Property name to schema, in insertion order (read-only view)
        required: Names of required properties, without duplicates
        additional_properties: ``True``/``False`` or a schema for extra properties
    """

    properties: Mapping[str, SchemaNode] | None = None
    required: tuple[str, ...] | None = None
    additional_properties: bool | SchemaNode | None = None

    __hash__ = None

    def __post_init__(self) -> None:
        if self.properties is not None:
            properties = dict(self.properties)
            for name in properties:
                _check_type("Property names", name, str, "strings")
            _check_nodes("properties", tuple(properties.values()))
            object.__setattr__(self, "properties", MappingProxyType(properties))
        if self.required is not None:
            if isinstance(self.required, str):
                raise TypeError("required must be a sequence of names, got str")
            required = tuple(self.required)
            for name in required:
                _check_type("Required property names", name, str, "strings")
            if len(set(required)) != len(required):
                raise ValueError("required must not contain duplicate names")
            object.__setattr__(self, "required", required)
        _check_type("additionalProperties", self.additional_properties, (bool, SchemaNode), "a boolean or a SchemaNode")


@dataclass(frozen=True)
class StringSchema:
    """Payload of a ``string`` schema."""

    min_length: int | None = None
    max_length: int | None = None
    pattern: str | None = None
    format: str | None = None

    def __post_init__(self) -> None:
        _check_count("minLength", self.min_length)
        _check_count("maxLength", self.max_length)
        _check_type("pattern", self.pattern, str, "a string")
        _check_type("format", self.format, str, "a string")


@dataclass(frozen=True)
class CombinedSchema:
    """Payload of a ``oneOf``, ``anyOf`` or ``allOf`` schema.

    The combinator in effect is ``kind``; the sub-schemas are kept in
    ``schemas``. The title duplicates the owning node's title since both are
    read from the same JSON key.
    """

    kind: SchemaKind = SchemaKind.ONE_OF
    schemas: tuple[SchemaNode, ...] = ()
    title: str | None = None

    __hash__ = None

    def __post_init__(self) -> None:
        kind = SchemaKind(self.kind)
        if not kind.is_combinator:
            raise ValueError(f"CombinedSchema kind must be oneOf, anyOf or allOf, got {kind.value}")
        object.__setattr__(self, "kind", kind)
        object.__setattr__(self, "schemas", tuple(self.schemas))
        if not self.schemas:
            raise ValueError(f"{kind.value} requires at least one schema")
        _check_nodes(kind.value, self.schemas)
        _check_type("title", self.title, str, "a string")

    def _schemas_for(self, kind: SchemaKind) -> tuple[SchemaNode, ...] | None:
        return self.schemas if self.kind is kind else None

    @property
    def one_of(self) -> tuple[SchemaNode, ...] | None:
        return self._schemas_for(SchemaKind.ONE_OF)

    @property
    def any_of(self) -> tuple[SchemaNode, ...] | None:
        return self._schemas_for(SchemaKind.ANY_OF)

    @property
    def all_of(self) -> tuple[SchemaNode, ...] | None:
        return self._schemas_for(SchemaKind.ALL_OF)


Payload = Union[
    ArraySchema,
    BooleanSchema,
    EnumSchema,
    IntegerSchema,
    NullSchema,
    NumberSchema,
    ObjectSchema,
    StringSchema,
    CombinedSchema,
]

# Payload class for each kind that has a dedicated one
PAYLOAD_KINDS: dict[type, SchemaKind] = {
    ArraySchema: SchemaKind.ARRAY,
    BooleanSchema: SchemaKind.BOOLEAN,
    EnumSchema: SchemaKind.ENUM,
    IntegerSchema: SchemaKind.INTEGER,
    NullSchema: SchemaKind.NULL,
    NumberSchema: SchemaKind.NUMBER,
    ObjectSchema: SchemaKind.OBJECT,
    StringSchema: SchemaKind.STRING,
}

PAYLOAD_TYPES = (*PAYLOAD_KINDS, CombinedSchema)


@dataclass(frozen=True)
class SchemaNode:
    """A single JSON Schema construct: common metadata plus one payload."""

    payload: Payload
    title: str | None = None
    description: str | None = None

    __hash__ = None

    def __post_init__(self) -> None:
        _check_type("title", self.title, str, "a string")
        _check_type("description", self.description, str, "a string")
        if isinstance(self.payload, CombinedSchema):
            if self.payload.title != self.title:
                raise ValueError(
                    f"Combined schema title {self.payload.title!r} does not match node title {self.title!r}"
                )
        elif not isinstance(self.payload, PAYLOAD_TYPES):
            raise TypeError(f"Unsupported schema payload: {type(self.payload).__name__}")

    @property
    def kind(self) -> SchemaKind:
        if isinstance(self.payload, CombinedSchema):
            return self.payload.kind
        for payload_type, kind in PAYLOAD_KINDS.items():
            if isinstance(self.payload, payload_type):
                return kind
        raise TypeError(f"Unsupported schema payload: {type(self.payload).__name__}")

    def _payload_as(self, payload_type: type) -> Any:
        return self.payload if isinstance(self.payload, payload_type) else None

    @property
    def array_schema(self) -> ArraySchema | None:
        return self._payload_as(ArraySchema)

    @property
    def boolean_schema(self) -> BooleanSchema | None:
        return self._payload_as(BooleanSchema)

    @property
    def enum_schema(self) -> EnumSchema | None:
        return self._payload_as(EnumSchema)

    @property
    def integer_schema(self) -> IntegerSchema | None:
        return self._payload_as(IntegerSchema)

    @property
    def null_schema(self) -> NullSchema | None:
        return self._payload_as(NullSchema)

    @property
    def number_schema(self) -> NumberSchema | None:
        return self._payload_as(NumberSchema)

    @property
    def object_schema(self) -> ObjectSchema | None:
        return self._payload_as(ObjectSchema)

    @property
    def string_schema(self) -> StringSchema | None:
        return self._payload_as(StringSchema)

    @property
    def combined_schema(self) -> CombinedSchema | None:
        return self._payload_as(CombinedSchema)

    @classmethod
    def from_json_string(cls, text: str | bytes, config: CodecConfig | None = None) -> SchemaNode:
        """Build a node from JSON text. See ``json_schema_model.codec.loads``."""
        from ..codec import loads

        return loads(text, config)

    def to_json_string(self, config: CodecConfig | None = None) -> str:
        """Write this node as JSON text. See ``json_schema_model.codec.dumps``."""
        from ..codec import dumps

        return dumps(self, config)
