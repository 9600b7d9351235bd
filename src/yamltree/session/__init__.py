"""
yamltree editing session.

This package provides the state holder used by interactive editor front-ends.
"""

from yamltree.session.editor import (
    EditSession,
    ValueKind,
    check_file_type,
    classify_value,
    format_edit_value,
)

__all__ = [
    "EditSession",
    "ValueKind",
    "check_file_type",
    "classify_value",
    "format_edit_value",
]
