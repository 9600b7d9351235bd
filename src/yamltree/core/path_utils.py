"""
Path addressing utilities for document trees.

A path is an ordered sequence of mapping keys leading from the root mapping to
a node. Reads never raise for missing keys; writes produce a new tree and
leave the input untouched.
"""

import copy
from collections.abc import Iterable, Iterator
from typing import Any

from yamltree.core.scalars import parse_number
from yamltree.core.types import Mapping, Node, Scalar
from yamltree.exceptions import PathNotFoundError


def normalize_path(path: Iterable[str]) -> tuple[str, ...]:
    """
    Convert a path into a tuple of keys.

    Params:
        path: Any iterable of keys (list, tuple, generator)

    Returns:
        Tuple of keys in order

    Raises:
        PathNotFoundError: If a bare string is given instead of a key sequence
    """
    if isinstance(path, str):
        raise PathNotFoundError(path, "expected a sequence of keys, not a string")
    return tuple(path)


def get_by_path(tree: Mapping, path: Iterable[str], default: Any = None) -> Any:
    """
    Look up the node at a path.

    Params:
        tree: Root mapping
        path: Keys leading to the node
        default: Returned when the path does not resolve

    Returns:
        The node at the path, or `default` if the path is empty, a key is
        absent, or an intermediate node is not a mapping
    """
    keys = normalize_path(path)
    if not keys:
        return default

    current: Node = tree
    for key in keys:
        if not isinstance(current, dict) or key not in current:
            return default
        current = current[key]
    return current


def set_by_path(tree: Mapping, path: Iterable[str], value: Node) -> Mapping:
    """
    Return a copy of the tree with the node at a path replaced.

    The whole tree is deep-copied before the write. The final key may be new,
    in which case it is appended to its parent mapping.

    Params:
        tree: Root mapping (not modified)
        path: Non-empty keys leading to the node
        value: Replacement node

    Returns:
        New root mapping

    Raises:
        PathNotFoundError: If the path is empty or an intermediate key is
            missing or does not hold a mapping
    """
    keys = normalize_path(path)
    if not keys:
        raise PathNotFoundError(keys, "path must not be empty")

    new_tree = copy.deepcopy(tree)
    parent: Node = new_tree
    for depth, key in enumerate(keys[:-1]):
        if key not in parent:
            raise PathNotFoundError(keys, f"key '{key}' does not exist")
        parent = parent[key]
        if not isinstance(parent, dict):
            raise PathNotFoundError(
                keys, f"'{'.'.join(keys[: depth + 1])}' is not a mapping"
            )

    parent[keys[-1]] = copy.deepcopy(value)
    return new_tree


def coerce_edit_value(raw: str) -> Scalar:
    """
    Convert editor text into a typed scalar.

    Params:
        raw: Text as typed by the user

    Returns:
        `True`/`False` for exactly "true"/"false", a number when the trimmed
        text is numeric, otherwise the text unchanged (newlines included)
    """
    if raw == "true":
        return True
    if raw == "false":
        return False

    number = parse_number(raw)
    if number is not None:
        return number

    return raw


def walk_scalars(
    tree: Mapping, prefix: tuple[str, ...] = ()
) -> Iterator[tuple[tuple[str, ...], Scalar]]:
    """
    Yield every non-mapping leaf with its path, depth first in key order.

    Params:
        tree: Mapping to walk
        prefix: Path of `tree` relative to the document root

    Yields:
        (path, value) pairs
    """
    for key, value in tree.items():
        path = prefix + (key,)
        if isinstance(value, dict):
            yield from walk_scalars(value, path)
        else:
            yield path, value
