"""
Tests for the editing session state holder.
"""

import pytest

from yamltree.exceptions import ParseError, PathNotFoundError, UnsupportedFileTypeError
from yamltree.session.editor import (
    UNSUPPORTED_FILE_MESSAGE,
    EditSession,
    ValueKind,
    check_file_type,
    classify_value,
    format_edit_value,
)


@pytest.fixture
def session(profile_text):
    """Session with the profile document loaded."""
    session = EditSession()
    session.load("profile.yaml", profile_text)
    return session


class TestFileTypeGate:
    """Tests for check_file_type."""

    @pytest.mark.parametrize("name", ["a.yaml", "a.yml", "CONFIG.YAML", "b.Yml"])
    def test_yaml_names_accepted(self, name):
        """YAML extensions pass regardless of case."""
        check_file_type(name)

    @pytest.mark.parametrize("name", ["a.json", "yaml", "a.yaml.bak", "notes.txt"])
    def test_other_names_rejected(self, name):
        """Anything else is an unsupported file type."""
        with pytest.raises(UnsupportedFileTypeError):
            check_file_type(name)


class TestValueHelpers:
    """Tests for classify_value and format_edit_value."""

    @pytest.mark.parametrize(
        "value,kind",
        [
            ({"a": 1}, ValueKind.MAPPING),
            ({}, ValueKind.MAPPING),
            (None, ValueKind.EMPTY),
            ("", ValueKind.EMPTY),
            ("a\nb", ValueKind.MULTILINE),
            ("text", ValueKind.STRING),
            (0, ValueKind.NUMBER),
            (2.5, ValueKind.NUMBER),
            (False, ValueKind.BOOLEAN),
        ],
    )
    def test_classify(self, value, kind):
        """Values fall into their display category."""
        assert classify_value(value) is kind

    @pytest.mark.parametrize(
        "value,text",
        [(None, ""), (True, "true"), (30, "30"), (1.0, "1"), ("x\ny", "x\ny")],
    )
    def test_format_edit_value(self, value, text):
        """Editor text mirrors the serialized form without quoting."""
        assert format_edit_value(value) == text


class TestLoading:
    """Loading and clearing documents."""

    def test_load_sets_document(self, session, profile_tree):
        """A successful load replaces the document and clears errors."""
        assert session.has_document
        assert session.document == profile_tree
        assert session.file_name == "profile.yaml"
        assert session.error == ""

    def test_unsupported_file_keeps_document(self, session, profile_tree):
        """A rejected file records a message and keeps the current document."""
        with pytest.raises(UnsupportedFileTypeError):
            session.load("data.json", "a: 1")

        assert session.error == UNSUPPORTED_FILE_MESSAGE
        assert session.document == profile_tree
        assert session.file_name == "profile.yaml"

    def test_parse_failure_ends_edit(self, session):
        """A failed load leaves no edit open on the dropped document."""
        session.start_editing(["age"])
        with pytest.raises(ParseError):
            session.load("broken.yaml", None)

        assert not session.is_editing
        assert session.edit_value == ""

    def test_parse_failure_drops_document(self, session):
        """A parse failure records a message and drops the document."""
        with pytest.raises(ParseError):
            session.load("broken.yaml", None)

        assert session.document is None
        assert session.error.startswith("Error parsing YAML file: ")

    def test_successful_load_clears_previous_error(self, session):
        """Errors are reset by the next successful load."""
        with pytest.raises(UnsupportedFileTypeError):
            session.load("x.txt", "")
        session.load("other.yml", "a: 1")
        assert session.error == ""
        assert session.document == {"a": 1}

    def test_load_cancels_edit(self, session):
        """Loading a new document ends any edit in progress."""
        session.start_editing(["age"])
        session.load("other.yml", "a: 1")
        assert not session.is_editing
        assert session.edit_value == ""

    def test_load_file(self, tmp_path, profile_text, profile_tree):
        """Files are read as UTF-8 and loaded under their own name."""
        source = tmp_path / "profile.yml"
        source.write_text(profile_text, encoding="utf-8")

        session = EditSession()
        assert session.load_file(source) == profile_tree
        assert session.file_name == "profile.yml"

    def test_load_file_rejects_before_reading(self, tmp_path):
        """The extension gate runs before the file is opened."""
        session = EditSession()
        with pytest.raises(UnsupportedFileTypeError):
            session.load_file(tmp_path / "missing.txt")
        assert session.error == UNSUPPORTED_FILE_MESSAGE

    def test_clear(self, session):
        """Clearing discards everything."""
        session.start_editing(["name"])
        session.clear()

        assert session.document is None
        assert session.file_name == ""
        assert not session.is_editing


class TestEditing:
    """Editing, committing and cancelling."""

    def test_start_editing(self, session):
        """The edit buffer starts with the value's text."""
        session.start_editing(["age"])
        assert session.is_editing
        assert session.editing_path == ("age",)
        assert session.edit_value == "30"
        assert not session.editing_multiline

    def test_multiline_detection(self, session):
        """Multi-line strings need a multi-line editor."""
        session.start_editing(["bio"])
        assert session.editing_multiline
        assert session.edit_value == "Line one\n\nLine three"

    def test_commit_number_changes_only_that_line(self, session, profile_text):
        """Committing a number rewrites just the edited line."""
        original = session.document
        session.start_editing(["age"])
        session.update_edit_value("31")
        updated = session.save_edit()

        assert updated["age"] == 31
        assert original["age"] == 30
        assert not session.is_editing

        _, text = session.export()
        expected = profile_text.replace("age: 30", "age: 31").replace(
            "\n\n", "\n  \n"
        )
        assert text == expected

    @pytest.mark.parametrize(
        "raw,expected",
        [
            ("true", True),
            ("2.5", 2.5),
            ("Bob", "Bob"),
            ("", ""),
            ("two\nlines", "two\nlines"),
        ],
    )
    def test_commit_coerces_text(self, session, raw, expected):
        """Editor text is coerced before it is written."""
        session.start_editing(["name"])
        session.update_edit_value(raw)
        session.save_edit()
        assert session.document["name"] == expected

    def test_cancel_keeps_document(self, session, profile_tree):
        """Cancelling discards the buffer."""
        session.start_editing(["name"])
        session.update_edit_value("Mallory")
        session.cancel_edit()

        assert session.save_edit() is None
        assert session.document == profile_tree

    def test_cannot_edit_mapping(self):
        """Only scalars are editable."""
        session = EditSession()
        session.load("n.yaml", "outer:\n  inner: 1\n")
        with pytest.raises(PathNotFoundError):
            session.start_editing(["outer"])

    def test_cannot_edit_missing_path(self, session):
        """Unknown paths are rejected."""
        with pytest.raises(PathNotFoundError):
            session.start_editing(["unknown"])

    def test_cannot_edit_without_document(self):
        """Editing requires a loaded document."""
        with pytest.raises(PathNotFoundError):
            EditSession().start_editing(["a"])

    def test_empty_value_edits_as_empty_text(self):
        """Empty and null values open with an empty buffer."""
        session = EditSession()
        session.load("e.yaml", "a:\nb: null\n")
        session.start_editing(["b"])
        assert session.edit_value == ""
        session.start_editing(["a"])
        assert session.edit_value == ""


class TestExport:
    """Serializing the session's document."""

    def test_export_without_document(self):
        """Nothing is exported before a load."""
        assert EditSession().export() is None

    def test_write_to_uses_original_name(self, session, tmp_path, profile_tree):
        """The written file re-loads to the same document."""
        target = session.write_to(tmp_path)

        assert target == tmp_path / "profile.yaml"
        reloaded = EditSession()
        reloaded.load_file(target)
        assert reloaded.document == profile_tree

    def test_write_to_without_document(self, tmp_path):
        """Nothing is written before a load."""
        assert EditSession().write_to(tmp_path) is None
        assert list(tmp_path.iterdir()) == []
