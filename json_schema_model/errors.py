"""
Exceptions raised while decoding or encoding schema documents.
"""

from __future__ import annotations


class SchemaError(Exception):
    """Base class for all errors raised by json_schema_model."""

    pass


class SchemaDecodeError(SchemaError, ValueError):
    """Raised when a JSON value cannot be turned into a ``SchemaNode``.

    Attributes:
        path: Location of the offending value, e.g. ``#/properties/name/minLength``
    """

    def __init__(self, message: str, path: str = "#"):
        super().__init__(f"{message} (at {path})")
        self.message = message
        self.path = path


class TextEncodingError(SchemaDecodeError):
    """Raised when the input cannot be interpreted as UTF-8 text."""

    pass


class DiscriminatorError(SchemaDecodeError):
    """Raised when the schema kind cannot be resolved.

    This happens when the object has no ``enum``/``oneOf``/``anyOf``/``allOf``
    key and its ``type`` key is missing or not one of the supported types.
    """

    pass


class StructuralMismatchError(SchemaDecodeError):
    """Raised when a key holds the wrong kind of JSON value.

    This covers:
    - A schema position that does not hold a JSON object
    - A keyword whose value has the wrong JSON type (``minLength: "oops"``)
    - A keyword whose value is out of range (negative ``maxItems``)
    """

    pass


class NestingTooDeepError(SchemaDecodeError):
    """Raised when a document nests deeper than ``CodecConfig.max_depth``."""

    pass


class SchemaInvariantError(SchemaError):
    """Raised when encoding a node that violates the model's invariants.

    Nodes built through the public constructors can always be encoded, so this
    signals a programming error rather than bad input.
    """

    pass
