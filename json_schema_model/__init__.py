"""JSON Schema Model

A Python package for representing JSON Schema documents (draft 2020-12
subset) as typed, immutable nodes, and for converting them to and from
JSON.
"""

__version__ = "1.0.1"

from . import builders
from .codec import decode, dumps, encode, loads
from .config import CodecConfig
from .errors import (
    DiscriminatorError,
    NestingTooDeepError,
    SchemaDecodeError,
    SchemaError,
    SchemaInvariantError,
    StructuralMismatchError,
    TextEncodingError,
)
from .schema_ast import (
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
    SchemaParser,
    SchemaSerializer,
    StringSchema,
)

__all__ = [
    "builders",
    "decode",
    "encode",
    "loads",
    "dumps",
    "CodecConfig",
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
    "SchemaError",
    "SchemaDecodeError",
    "TextEncodingError",
    "DiscriminatorError",
    "StructuralMismatchError",
    "NestingTooDeepError",
    "SchemaInvariantError",
]
