"""
yamltree parsing components.

This package provides the YAML subset parser and its skipped-line diagnostics.
"""

from yamltree.parsing.parser import (
    SkippedLine,
    SkipReason,
    YamlParser,
    parse_with_diagnostics,
    parse_yaml,
)

__all__ = [
    "SkippedLine",
    "SkipReason",
    "YamlParser",
    "parse_with_diagnostics",
    "parse_yaml",
]
