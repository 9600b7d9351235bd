"""
Editing session state for an interactive YAML editor front-end.

The session owns the current document tree and the state of the single edit
in progress. Each committed edit replaces the document with a new tree, so a
front-end can render `document` directly and never mutate it.
"""

import logging
from enum import Enum
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict

from yamltree.core.path_utils import (
    coerce_edit_value,
    get_by_path,
    normalize_path,
    set_by_path,
)
from yamltree.core.scalars import format_number
from yamltree.core.types import Mapping, Node
from yamltree.exceptions import ParseError, PathNotFoundError, UnsupportedFileTypeError
from yamltree.options import DEFAULT_OPTIONS, FormatOptions
from yamltree.parsing.parser import parse_yaml
from yamltree.serialization.serializer import serialize_yaml

logger = logging.getLogger(__name__)

YAML_EXTENSIONS = (".yaml", ".yml")
UNSUPPORTED_FILE_MESSAGE = "Please upload a YAML file (.yaml or .yml)"

_MISSING = object()


class ValueKind(Enum):
    """Display category of a node, as distinguished by a renderer."""

    MAPPING = "mapping"
    EMPTY = "empty"
    MULTILINE = "multiline"
    STRING = "string"
    NUMBER = "number"
    BOOLEAN = "boolean"


def check_file_type(file_name: str) -> None:
    """
    Reject file names without a YAML extension.

    Params:
        file_name: Name of the source file (case-insensitive extension check)

    Raises:
        UnsupportedFileTypeError: If the name ends in neither .yaml nor .yml
    """
    if not file_name.lower().endswith(YAML_EXTENSIONS):
        raise UnsupportedFileTypeError(file_name)


def classify_value(value: Node) -> ValueKind:
    """Return the display category of a node."""
    if isinstance(value, dict):
        return ValueKind.MAPPING
    if value is None or value == "":
        return ValueKind.EMPTY
    if isinstance(value, bool):
        return ValueKind.BOOLEAN
    if isinstance(value, (int, float)):
        return ValueKind.NUMBER
    if "\n" in value:
        return ValueKind.MULTILINE
    return ValueKind.STRING


def format_edit_value(value: Node) -> str:
    """
    Render a scalar as the initial text of an editor field.

    Params:
        value: Scalar being edited

    Returns:
        "" for empty values, "true"/"false" for booleans, decimal text for
        numbers, the string itself otherwise
    """
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float)):
        return format_number(value)
    return str(value)


class EditSession(BaseModel):
    """
    Holder of the loaded document and the edit in progress.

    Responsibilities:
      - Gate sources on their file extension and parse them.
      - Track which leaf is being edited and its live text.
      - Commit edits through `set_by_path`, replacing the document wholesale.
      - Serialize the current document for saving under its original name.

    Notes:
      - Failures are recorded in `error` as a user-facing message and re-raised.
    """

    model_config = ConfigDict(validate_assignment=True, arbitrary_types_allowed=True)

    file_name: str = ""
    document: dict[str, Any] | None = None
    error: str = ""
    editing_path: tuple[str, ...] | None = None
    edit_value: str = ""
    options: FormatOptions = DEFAULT_OPTIONS

    @property
    def has_document(self) -> bool:
        return self.document is not None

    @property
    def is_editing(self) -> bool:
        return self.editing_path is not None

    @property
    def editing_multiline(self) -> bool:
        """Whether the value under edit needs a multi-line editor."""
        if self.editing_path is None or self.document is None:
            return False
        value = get_by_path(self.document, self.editing_path)
        return classify_value(value) is ValueKind.MULTILINE

    def load(self, file_name: str, text: str) -> Mapping:
        """
        Parse source text and make it the current document.

        Params:
            file_name: Name of the source file, kept for saving
            text: Complete source text

        Returns:
            The new document tree

        Raises:
            UnsupportedFileTypeError: If the name has no YAML extension (the
                current document is kept)
            ParseError: If parsing fails (the current document is dropped)
        """
        self._check_file_type(file_name)
        return self._parse_document(file_name, text)

    def load_file(self, path: Path) -> Mapping:
        """Read a UTF-8 file from disk and load it under its own name."""
        path = Path(path)
        self._check_file_type(path.name)
        return self._parse_document(path.name, path.read_text(encoding="utf-8"))

    def _parse_document(self, file_name: str, text: str) -> Mapping:
        try:
            document = parse_yaml(text, self.options)
        except ParseError as e:
            self.document = None
            self._reset_edit()
            self.error = f"Error parsing YAML file: {e.message}"
            logger.warning("Failed to parse '%s': %s", file_name, e.message)
            raise

        self.document = document
        self.file_name = file_name
        self.error = ""
        self._reset_edit()
        logger.info("Loaded '%s' with %d top-level keys", file_name, len(document))
        return self.document

    def start_editing(self, path: list[str] | tuple[str, ...]) -> None:
        """
        Open the scalar at `path` for editing.

        Params:
            path: Keys leading to an existing scalar

        Raises:
            PathNotFoundError: If no document is loaded, the path does not
                exist, or it addresses a mapping
        """
        keys = normalize_path(path)
        if self.document is None:
            raise PathNotFoundError(keys, "no document is loaded")

        value = get_by_path(self.document, keys, _MISSING)
        if value is _MISSING:
            raise PathNotFoundError(keys, "path does not exist")
        if isinstance(value, dict):
            raise PathNotFoundError(keys, "path addresses a mapping, not a scalar")

        self.editing_path = keys
        self.edit_value = format_edit_value(value)

    def update_edit_value(self, text: str) -> None:
        self.edit_value = text

    def save_edit(self) -> Mapping | None:
        """
        Commit the edit in progress.

        Returns:
            The new document tree, or None when nothing was being edited

        Raises:
            PathNotFoundError: If the edited path no longer resolves
        """
        if self.editing_path is None or self.document is None:
            return None

        value = coerce_edit_value(self.edit_value)
        self.document = set_by_path(self.document, self.editing_path, value)
        logger.debug("Committed %r at %s", value, ".".join(self.editing_path))
        self._reset_edit()
        return self.document

    def cancel_edit(self) -> None:
        self._reset_edit()

    def export(self) -> tuple[str, str] | None:
        """
        Serialize the current document.

        Returns:
            (file_name, yaml_text), or None when no document is loaded
        """
        if self.document is None or not self.file_name:
            return None
        return self.file_name, serialize_yaml(self.document, self.options)

    def write_to(self, directory: Path) -> Path | None:
        """
        Write the serialized document under its original name.

        Params:
            directory: Destination directory

        Returns:
            Path of the written file, or None when no document is loaded
        """
        exported = self.export()
        if exported is None:
            return None

        file_name, text = exported
        target = Path(directory) / file_name
        target.write_text(text, encoding="utf-8")
        logger.info("Wrote '%s'", target)
        return target

    def clear(self) -> None:
        """Discard the document and all session state."""
        self.document = None
        self.file_name = ""
        self.error = ""
        self._reset_edit()

    def _check_file_type(self, file_name: str) -> None:
        try:
            check_file_type(file_name)
        except UnsupportedFileTypeError:
            self.error = UNSUPPORTED_FILE_MESSAGE
            logger.warning("Rejected non-YAML source '%s'", file_name)
            raise

    def _reset_edit(self) -> None:
        self.editing_path = None
        self.edit_value = ""
