"""
yamltree - parse, edit, and write back a minimal YAML subset

yamltree reads indentation-structured YAML into plain nested dictionaries,
supports path-addressed edits that return new trees, and serializes trees back
to YAML text that reads as the same values.
"""

from importlib.metadata import version

from yamltree.core.path_utils import get_by_path, set_by_path
from yamltree.exceptions import (
    ParseError,
    PathNotFoundError,
    SerializationError,
    UnsupportedFileTypeError,
    YamlTreeError,
)
from yamltree.options import FormatOptions
from yamltree.parsing.parser import parse_yaml
from yamltree.serialization.serializer import serialize_yaml
from yamltree.session.editor import EditSession

__version__ = version("yamltree")

__all__ = [
    "__version__",
    "parse_yaml",
    "serialize_yaml",
    "get_by_path",
    "set_by_path",
    "EditSession",
    "FormatOptions",
    "YamlTreeError",
    "ParseError",
    "PathNotFoundError",
    "SerializationError",
    "UnsupportedFileTypeError",
]
