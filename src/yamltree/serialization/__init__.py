"""
yamltree serialization components.

This package provides the tree-to-text serializer and its quoting rules.
"""

from yamltree.serialization.serializer import (
    YamlSerializer,
    format_scalar,
    is_representable_key,
    needs_quoting,
    serialize_yaml,
)

__all__ = [
    "YamlSerializer",
    "format_scalar",
    "is_representable_key",
    "needs_quoting",
    "serialize_yaml",
]
