"""
Core type definitions for yamltree.

This module contains the type aliases describing a parsed document tree.
"""

from collections.abc import Sequence
from typing import TypeAlias, Union

Scalar: TypeAlias = str | int | float | bool | None

Node: TypeAlias = Union[Scalar, "Mapping"]

Mapping: TypeAlias = dict[str, Node]

KeyPath: TypeAlias = Sequence[str]
