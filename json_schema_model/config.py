"""
Configuration for the schema codec.
"""

from __future__ import annotations

from dataclasses import dataclass, fields


def _is_count(value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and value >= 0


@dataclass
class CodecConfig:
    """Configuration options for decoding and encoding schemas."""

    # Deepest schema nesting accepted by the parser (root is depth 0)
    max_depth: int = 64

    # Indentation used when writing JSON text (None = compact)
    indent: int | None = 2

    # Sort object keys when writing JSON text
    sort_keys: bool = False

    @staticmethod
    def from_dict(d: dict) -> CodecConfig:
        """
        Create a config from a dictionary.

        Unknown keys are ignored.

        Raises:
            ValueError: If ``d`` is not a dictionary or an option has the wrong type
        """
        if not isinstance(d, dict):
            raise ValueError(f"Config must be a JSON object, got {type(d).__name__}")
        config = CodecConfig()
        names = {f.name for f in fields(config)}
        for k, v in d.items():
            if k in names:
                setattr(config, k, v)
        config.validate()
        return config

    def validate(self) -> None:
        """Check that every option holds a value of the expected type."""
        if not _is_count(self.max_depth):
            raise ValueError(f"max_depth must be a non-negative integer, got {self.max_depth!r}")
        if self.indent is not None and not _is_count(self.indent):
            raise ValueError(f"indent must be a non-negative integer or null, got {self.indent!r}")
        if not isinstance(self.sort_keys, bool):
            raise ValueError(f"sort_keys must be a boolean, got {self.sort_keys!r}")

    def to_dict(self) -> dict:
        """Convert config to a dictionary."""
        return {
            "max_depth": self.max_depth,
            "indent": self.indent,
            "sort_keys": self.sort_keys,
        }
