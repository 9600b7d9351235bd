"""
Exception classes for yamltree document processing.

This module defines specific exception types for the error conditions that
can occur while loading, parsing, addressing, and serializing YAML documents.
"""

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any


@dataclass
class ErrorContext:
    """
    Location information for parse error messages.

    Params:
        line_number: 1-based line number in the source text
        line_text: The raw source line being processed when the error occurred
    """

    line_number: int | None = None
    line_text: str | None = None

    def format_location(self) -> str:
        """
        Format location information for inclusion in an error message.

        Returns:
            Formatted location string, empty when nothing is known
        """
        lines = []

        if self.line_number is not None:
            lines.append(f"  at line {self.line_number}")

        if self.line_text is not None:
            lines.append(f"  source: {self.line_text.rstrip()}")

        return "\n".join(lines)


def _format_path(path: Sequence[str] | Any) -> str:
    if isinstance(path, (list, tuple)):
        return ".".join(str(part) for part in path) or "<root>"
    return repr(path)


class YamlTreeError(Exception):
    """Base exception for all yamltree errors."""

    pass


class ParseError(YamlTreeError):
    """Raised when parsing terminates unexpectedly; no partial tree is returned."""

    def __init__(self, message: str, context: ErrorContext | None = None):
        """
        Initialize the exception.

        Params:
            message: Human-readable description of the failure
            context: Optional location of the line being parsed
        """
        self.message = message
        self.context = context

        location_info = context.format_location() if context else ""
        if location_info:
            super().__init__(f"{message}\n{location_info}")
        else:
            super().__init__(message)


class PathNotFoundError(YamlTreeError):
    """Raised when a path cannot be resolved inside a document tree."""

    def __init__(self, path: Sequence[str] | Any, reason: str):
        """
        Initialize the exception.

        Params:
            path: The path that failed to resolve
            reason: Why the path could not be resolved
        """
        self.path = path
        self.reason = reason
        super().__init__(f"Path '{_format_path(path)}' not found: {reason}")


class UnsupportedFileTypeError(YamlTreeError):
    """Raised when a source file name lacks a .yaml or .yml extension."""

    def __init__(self, file_name: str):
        """
        Initialize the exception.

        Params:
            file_name: The rejected file name
        """
        self.file_name = file_name
        super().__init__(
            f"Unsupported file type '{file_name}': expected a .yaml or .yml file"
        )


class SerializationError(YamlTreeError):
    """Raised when a tree holds a value that has no YAML representation."""

    def __init__(self, path: Sequence[str], value: Any):
        """
        Initialize the exception.

        Params:
            path: Location of the offending value
            value: The value that cannot be serialized
        """
        self.path = path
        self.value = value
        super().__init__(
            f"Cannot serialize value of type {type(value).__name__} "
            f"at '{_format_path(path)}'"
        )
