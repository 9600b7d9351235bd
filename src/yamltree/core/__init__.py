"""
Core yamltree components.

This package provides the tree type definitions, number literal handling and
path addressing shared by the parser, serializer and editing session.
"""

from yamltree.core.path_utils import (
    coerce_edit_value,
    get_by_path,
    normalize_path,
    set_by_path,
    walk_scalars,
)
from yamltree.core.scalars import format_number, is_numeric, parse_number
from yamltree.core.types import KeyPath, Mapping, Node, Scalar

__all__ = [
    "KeyPath",
    "Mapping",
    "Node",
    "Scalar",
    "coerce_edit_value",
    "format_number",
    "get_by_path",
    "is_numeric",
    "normalize_path",
    "parse_number",
    "set_by_path",
    "walk_scalars",
]
