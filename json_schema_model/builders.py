"""
Convenience constructors, one per schema kind.

Each builder returns a fully formed ``SchemaNode`` with only the matching
payload populated. Use them through the module, e.g. ``builders.string(...)``,
since several names shadow builtins.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

from .schema_ast.nodes import (
    ArraySchema,
    BooleanSchema,
    CombinedSchema,
    EnumSchema,
    IntegerSchema,
    NullSchema,
    NumberSchema,
    ObjectSchema,
    SchemaKind,
    SchemaNode,
    StringSchema,
)


def array(
    title: str | None = None,
    description: str | None = None,
    items: SchemaNode | None = None,
    prefix_items: Iterable[SchemaNode] | None = None,
    min_items: int | None = None,
    max_items: int | None = None,
    unique_items: bool | None = None,
) -> SchemaNode:
    """
    Create an array schema.

    Args:
        title: An optional title for the schema
        description: An optional description of the schema
        items: Schema every item must match
        prefix_items: Schemas for the leading items, by position
        min_items: Minimum number of items
        max_items: Maximum number of items
        unique_items: Whether all items must be distinct

    Returns:
        A SchemaNode of kind ``array``
    """
    return SchemaNode(
        payload=ArraySchema(
            items=items,
            prefix_items=tuple(prefix_items) if prefix_items is not None else None,
            min_items=min_items,
            max_items=max_items,
            unique_items=unique_items,
        ),
        title=title,
        description=description,
    )


def boolean(title: str | None = None, description: str | None = None) -> SchemaNode:
    """Create a boolean schema."""
    return SchemaNode(payload=BooleanSchema(), title=title, description=description)


def enum(values: Iterable[Any], title: str | None = None, description: str | None = None) -> SchemaNode:
    """Create an enum schema allowing exactly ``values``, in order."""
    return SchemaNode(payload=EnumSchema(values=tuple(values)), title=title, description=description)


def integer(
    title: str | None = None,
    description: str | None = None,
    minimum: int | None = None,
    maximum: int | None = None,
    exclusive_minimum: int | None = None,
    exclusive_maximum: int | None = None,
    multiple_of: int | None = None,
) -> SchemaNode:
    """Create an integer schema."""
    return SchemaNode(
        payload=IntegerSchema(
            minimum=minimum,
            maximum=maximum,
            exclusive_minimum=exclusive_minimum,
            exclusive_maximum=exclusive_maximum,
            multiple_of=multiple_of,
        ),
        title=title,
        description=description,
    )


def null(title: str | None = None, description: str | None = None) -> SchemaNode:
    """Create a null schema."""
    return SchemaNode(payload=NullSchema(), title=title, description=description)


def number(
    title: str | None = None,
    description: str | None = None,
    minimum: float | None = None,
    maximum: float | None = None,
    exclusive_minimum: float | None = None,
    exclusive_maximum: float | None = None,
    multiple_of: float | None = None,
) -> SchemaNode:
    """Create a number schema."""
    return SchemaNode(
        payload=NumberSchema(
            minimum=minimum,
            maximum=maximum,
            exclusive_minimum=exclusive_minimum,
            exclusive_maximum=exclusive_maximum,
            multiple_of=multiple_of,
        ),
        title=title,
        description=description,
    )


def object(
    title: str | None = None,
    description: str | None = None,
    properties: Mapping[str, SchemaNode] | None = None,
    required: Iterable[str] | None = None,
    additional_properties: bool | SchemaNode | None = None,
) -> SchemaNode:
    """
    Create an object schema.

    Args:
        title: An optional title for the schema
        description: An optional description of the schema
        properties: Property name to schema; the order is kept on output
        required: Names of the required properties
        additional_properties: Whether extra properties are allowed, or their schema

    Returns:
        A SchemaNode of kind ``object``
    """
    return SchemaNode(
        payload=ObjectSchema(
            properties=properties,
            required=required,
            additional_properties=additional_properties,
        ),
        title=title,
        description=description,
    )


def string(
    description: str | None = None,
    min_length: int | None = None,
    max_length: int | None = None,
    pattern: str | None = None,
    format: str | None = None,
    title: str | None = None,
) -> SchemaNode:
    """
    Create a string schema.

    Args:
        description: An optional description of the schema
        min_length: Minimum length of the string
        max_length: Maximum length of the string
        pattern: Regular expression the string must match
        format: Format of the string (e.g. "date-time", "email")
        title: An optional title for the schema

    Returns:
        A SchemaNode of kind ``string``
    """
    return SchemaNode(
        payload=StringSchema(min_length=min_length, max_length=max_length, pattern=pattern, format=format),
        title=title,
        description=description,
    )


def _combined(kind: SchemaKind, schemas: Iterable[SchemaNode], title: str | None, description: str | None) -> SchemaNode:
    return SchemaNode(
        payload=CombinedSchema(kind=kind, schemas=tuple(schemas), title=title),
        title=title,
        description=description,
    )


def one_of(schemas: Iterable[SchemaNode], title: str | None = None, description: str | None = None) -> SchemaNode:
    """Create a schema valid when exactly one of ``schemas`` validates."""
    return _combined(SchemaKind.ONE_OF, schemas, title, description)


def any_of(schemas: Iterable[SchemaNode], title: str | None = None, description: str | None = None) -> SchemaNode:
    """Create a schema valid when at least one of ``schemas`` validates."""
    return _combined(SchemaKind.ANY_OF, schemas, title, description)


def all_of(schemas: Iterable[SchemaNode], title: str | None = None, description: str | None = None) -> SchemaNode:
    """Create a schema valid when all of ``schemas`` validate."""
    return _combined(SchemaKind.ALL_OF, schemas, title, description)
