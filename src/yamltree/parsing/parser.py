"""
Parser for the supported YAML subset.

This module converts indentation-structured YAML text into a tree of nested
mappings and scalar values. The dialect covers `key: value` lines, nested
mappings introduced by an empty value (or `{}`), literal block scalars
introduced by `|`, and `#` comment lines. Anything else is skipped rather than
reported, so a document always parses to the best mapping that can be
recovered from it.
"""

import logging
from dataclasses import dataclass
from enum import Enum

from yamltree.core.scalars import parse_number
from yamltree.core.types import Mapping, Scalar
from yamltree.exceptions import ErrorContext, ParseError
from yamltree.options import DEFAULT_OPTIONS, FormatOptions

logger = logging.getLogger(__name__)

LITERAL_BLOCK_INDICATOR = "|"
EMPTY_MAPPING_INDICATOR = "{}"


class SkipReason(Enum):
    """Why the parser ignored a line."""

    OVER_INDENTED = "over_indented"
    MISSING_COLON = "missing_colon"


@dataclass
class SkippedLine:
    """A source line the parser ignored while building the tree."""

    line_number: int  # 1-based
    text: str
    reason: SkipReason


def _indent_of(line: str) -> int:
    return len(line) - len(line.lstrip())


def _is_ignorable(stripped: str) -> bool:
    return not stripped or stripped.startswith("#")


class YamlParser:
    """
    Recursive-descent parser over a forward-only line cursor.

    Each nesting level is parsed by `_parse_level` at a fixed base indentation.
    The cursor is shared by all levels and never moves backwards, so a line is
    either consumed by the level it belongs to or left for an enclosing level.

    Attributes:
        options: Layout settings (indentation width per level)
        skipped_lines: Lines ignored during the most recent `parse` call
    """

    def __init__(self, options: FormatOptions | None = None):
        self.options = options or DEFAULT_OPTIONS
        self.skipped_lines: list[SkippedLine] = []
        self._lines: list[str] = []
        self._index = 0

    def parse(self, text: str) -> Mapping:
        """
        Parse YAML text into a mapping tree.

        Params:
            text: Complete document text

        Returns:
            Root mapping (possibly empty)

        Raises:
            ParseError: If the input is not text or parsing terminates unexpectedly
        """
        if not isinstance(text, str):
            raise ParseError(f"Expected YAML text, got {type(text).__name__}")

        self.skipped_lines = []
        self._lines = text.replace("\r\n", "\n").split("\n")
        self._index = 0

        try:
            return self._parse_level(0)
        except Exception as e:
            raise ParseError(
                f"Unable to parse YAML text: {e!r}", self._current_context()
            ) from e

    def _current_context(self) -> ErrorContext | None:
        if self._index < len(self._lines):
            return ErrorContext(
                line_number=self._index + 1, line_text=self._lines[self._index]
            )
        return None

    def _skip(self, line: str, reason: SkipReason) -> None:
        skipped = SkippedLine(line_number=self._index + 1, text=line, reason=reason)
        self.skipped_lines.append(skipped)
        logger.debug(
            "Skipping line %d (%s): %r", skipped.line_number, reason.value, line
        )
        self._index += 1

    def _parse_level(self, base_indent: int) -> Mapping:
        """
        Parse consecutive `key: value` lines at exactly `base_indent`.

        Params:
            base_indent: Indentation of the keys belonging to this level

        Returns:
            Mapping of the keys found at this level, in order of appearance
        """
        mapping: Mapping = {}

        while self._index < len(self._lines):
            line = self._lines[self._index]
            stripped = line.strip()

            if _is_ignorable(stripped):
                self._index += 1
                continue

            indent = _indent_of(line)

            # Dedent closes this level; the line belongs to an enclosing one
            if indent < base_indent:
                break

            if indent > base_indent:
                self._skip(line, SkipReason.OVER_INDENTED)
                continue

            key, colon, value = stripped.partition(":")
            if not colon:
                self._skip(line, SkipReason.MISSING_COLON)
                continue

            key = key.strip()
            value = value.strip()
            self._index += 1

            if value == LITERAL_BLOCK_INDICATOR:
                mapping[key] = self._parse_literal_block(base_indent)
            elif value in ("", EMPTY_MAPPING_INDICATOR):
                children = self._parse_level(base_indent + self.options.indent_width)
                if children or value == EMPTY_MAPPING_INDICATOR:
                    mapping[key] = children
                else:
                    mapping[key] = ""
            else:
                mapping[key] = self._parse_value(value)

        return mapping

    def _parse_literal_block(self, base_indent: int) -> str:
        """
        Collect the content lines of a `|` block scalar.

        Blank lines are kept, comment lines are dropped, and the first line
        indented at or below `base_indent` ends the block without being
        consumed. Content lines lose exactly one level of indentation.

        Params:
            base_indent: Indentation of the key that introduced the block

        Returns:
            Block text joined with newlines, trailing whitespace removed
        """
        content_indent = base_indent + self.options.indent_width
        block_lines: list[str] = []

        while self._index < len(self._lines):
            line = self._lines[self._index]
            stripped = line.strip()

            if not stripped:
                block_lines.append("")
                self._index += 1
                continue

            if stripped.startswith("#"):
                self._index += 1
                continue

            if _indent_of(line) <= base_indent:
                break

            block_lines.append(line[content_indent:] or stripped)
            self._index += 1

        return "\n".join(block_lines).rstrip()

    def _parse_value(self, value_str: str) -> Scalar:
        """
        Coerce an inline value to a scalar.

        Precedence: number, `true`/`false`, `null`, quoted string (quotes
        stripped, no escape processing), plain string.

        Params:
            value_str: Trimmed, non-empty text after the key's colon

        Returns:
            Coerced scalar value
        """
        number = parse_number(value_str)
        if number is not None:
            return number

        if value_str == "true":
            return True
        if value_str == "false":
            return False
        if value_str == "null":
            return None

        # A lone quote character counts as both opening and closing quote
        if value_str[0] == value_str[-1] and value_str[0] in ("'", '"'):
            return value_str[1:-1]

        return value_str


def parse_yaml(text: str, options: FormatOptions | None = None) -> Mapping:
    """
    Convenience function to parse YAML text.

    Params:
        text: The document text to parse
        options: Optional layout settings

    Returns:
        Root mapping of the document

    Raises:
        ParseError: If parsing terminates unexpectedly
    """
    parser = YamlParser(options)
    return parser.parse(text)


def parse_with_diagnostics(
    text: str, options: FormatOptions | None = None
) -> tuple[Mapping, list[SkippedLine]]:
    """
    Parse YAML text and report the lines that were skipped.

    Params:
        text: The document text to parse
        options: Optional layout settings

    Returns:
        Tuple of the root mapping and the skipped lines in source order

    Raises:
        ParseError: If parsing terminates unexpectedly
    """
    parser = YamlParser(options)
    tree = parser.parse(text)
    return tree, list(parser.skipped_lines)
