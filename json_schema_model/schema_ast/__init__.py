"""
Schema AST module.

Contains the node definitions, the parser (JSON value to nodes) and the
serializer (nodes to JSON value).
"""

from __future__ import annotations

from .nodes import (
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
from .parser import SchemaParser
from .serializer import SchemaSerializer

__all__ = [
    "SchemaKind",
    "SchemaNode",
    "ArraySchema",
    "BooleanSchema",
    "EnumSchema",
    "IntegerSchema",
    "NullSchema",
    "NumberSchema",
    "ObjectSchema",
    "StringSchema",
    "CombinedSchema",
    "SchemaParser",
    "SchemaSerializer",
]
