"""
yamltree exception classes.

This package provides all exception types used throughout yamltree for
consistent error handling and reporting.
"""

from yamltree.exceptions.core import (
    ErrorContext,
    ParseError,
    PathNotFoundError,
    SerializationError,
    UnsupportedFileTypeError,
    YamlTreeError,
)

__all__ = [
    "YamlTreeError",
    "ErrorContext",
    "ParseError",
    "PathNotFoundError",
    "SerializationError",
    "UnsupportedFileTypeError",
]
