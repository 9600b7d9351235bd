"""
Serializer for document trees.

Writes a mapping tree back to YAML text that `YamlParser` reads as an equal
tree. Strings that would be re-read as another type (or that contain YAML
indicator characters) are double-quoted; strings containing newlines are
written as literal block scalars.
"""

import re

from yamltree.core.scalars import format_number, is_numeric
from yamltree.core.types import Mapping, Node
from yamltree.exceptions import SerializationError
from yamltree.options import DEFAULT_OPTIONS, FormatOptions

RESERVED_WORDS = frozenset({"true", "false", "null", "yes", "no", "on", "off"})

_LEADING_INDICATOR_PATTERN = re.compile(r"^[0-9+\-]")
_SPECIAL_CHARACTER_PATTERN = re.compile(r"[:\[\]{},#&*!|>'\"%@`]")


def needs_quoting(value: str) -> bool:
    """
    Check whether a single-line string must be written double-quoted.

    Params:
        value: String scalar

    Returns:
        True when the string is empty, starts like a number, reads as a
        reserved word or number literal, contains an indicator character,
        or has surrounding whitespace
    """
    return bool(
        value == ""
        or _LEADING_INDICATOR_PATTERN.match(value)
        or value.lower() in RESERVED_WORDS
        or _SPECIAL_CHARACTER_PATTERN.search(value)
        or value.strip() != value
        or is_numeric(value)
    )


def is_representable_key(key: str) -> bool:
    """
    Check whether a mapping key reads back unchanged from a `key: value` line.

    Params:
        key: Mapping key

    Returns:
        False for empty keys, keys with surrounding whitespace, keys starting
        with `#`, and keys containing a colon or a line break
    """
    return bool(
        key
        and key.strip() == key
        and not key.startswith("#")
        and ":" not in key
        and "\n" not in key
        and "\r" not in key
    )


def quote(value: str) -> str:
    """Wrap a string in double quotes, escaping embedded double quotes."""
    escaped = value.replace('"', '\\"')
    return f'"{escaped}"'


def format_scalar(value: Node, path: tuple[str, ...] = ()) -> str:
    """
    Render an inline scalar value.

    Params:
        value: Scalar to render (multi-line strings are handled by the caller)
        path: Location of the value, used in error messages

    Returns:
        Inline YAML text for the value

    Raises:
        SerializationError: If the value is not a supported scalar type
    """
    # bool before numbers: bool subclasses int
    if isinstance(value, bool):
        return "true" if value else "false"
    if value is None:
        return "null"
    if isinstance(value, str):
        return quote(value) if needs_quoting(value) else value
    if isinstance(value, (int, float)):
        return format_number(value)
    raise SerializationError(path, value)


class YamlSerializer:
    """
    Renders a mapping tree as YAML text, one line per entry.

    Attributes:
        options: Layout settings (indentation width per level)
    """

    def __init__(self, options: FormatOptions | None = None):
        self.options = options or DEFAULT_OPTIONS

    def serialize(self, tree: Mapping) -> str:
        """
        Serialize a root mapping.

        Params:
            tree: Root mapping

        Returns:
            YAML text; every line, including the last, ends with a newline

        Raises:
            SerializationError: If the tree holds an unsupported value or key
        """
        if not isinstance(tree, dict):
            raise SerializationError((), tree)
        return "".join(self._serialize_mapping(tree, 0, ()))

    def _serialize_mapping(self, mapping: Mapping, depth: int, path: tuple[str, ...]):
        indent = " " * (self.options.indent_width * depth)
        child_indent = " " * (self.options.indent_width * (depth + 1))

        for key, value in mapping.items():
            entry_path = path + (key,)
            if not isinstance(key, str) or not is_representable_key(key):
                raise SerializationError(entry_path, key)

            if isinstance(value, dict):
                if value:
                    yield f"{indent}{key}:\n"
                    yield from self._serialize_mapping(value, depth + 1, entry_path)
                else:
                    yield f"{indent}{key}: {{}}\n"
            elif isinstance(value, str) and "\n" in value:
                yield f"{indent}{key}: |\n"
                for line in value.split("\n"):
                    yield f"{child_indent}{line}\n"
            else:
                yield f"{indent}{key}: {format_scalar(value, entry_path)}\n"


def serialize_yaml(tree: Mapping, options: FormatOptions | None = None) -> str:
    """
    Convenience function to serialize a tree.

    Params:
        tree: Root mapping
        options: Optional layout settings

    Returns:
        YAML text

    Raises:
        SerializationError: If the tree holds an unsupported value or key
    """
    serializer = YamlSerializer(options)
    return serializer.serialize(tree)
