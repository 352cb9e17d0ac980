"""Tests for utility functions."""

import os

import pytest

from emlbox.models.mail_message import MailMessage
from emlbox.utils.filename_utils import extract_subject, sanitize_filename
from emlbox.utils.header_utils import get_header_value, iter_header_lines
from emlbox.utils.path_utils import ensure_file_path, find_eml_files


class TestHeaderLookup:
    """Test raw header line lookup."""

    def test_finds_header_value(self):
        lines = ["From: a@x.com\n", "Subject: Hello\n", "\n", "body\n"]
        assert get_header_value(lines, "Subject") == "Hello"

    def test_lookup_is_case_insensitive(self):
        assert get_header_value(["SUBJECT: Hello\n"], "subject") == "Hello"

    def test_missing_header_returns_none(self):
        assert get_header_value(["From: a@x.com\n"], "subject") is None

    def test_header_block_ends_at_blank_line(self):
        lines = ["From: a@x.com\n", "\r\n", "Subject: in the body\n"]
        assert list(iter_header_lines(lines)) == ["From: a@x.com\n"]
        assert get_header_value(lines, "subject") is None

    def test_value_keeps_inner_colons(self):
        assert get_header_value(["Subject: Re: Fwd: plan\n"], "subject") == "Re: Fwd: plan"


class TestMailMessage:
    """Test message line splitting."""

    def test_from_content_keeps_terminators(self):
        message = MailMessage.from_content("a\r\nb\n\nc")
        assert message.lines == ["a\r\n", "b\n", "\n", "c"]
        assert message.content == "a\r\nb\n\nc"

    def test_from_content_trailing_newline(self):
        assert MailMessage.from_content("a\n").lines == ["a\n"]

    def test_from_empty_content(self):
        assert MailMessage.from_content("").lines == []

    def test_lone_carriage_return_is_content(self):
        assert MailMessage.from_content("a\rb\n").lines == ["a\rb\n"]


class TestSanitizeFilename:
    """Test filename sanitization."""

    def test_plain_text_unchanged(self):
        assert sanitize_filename("Weekly report") == "Weekly report"

    def test_illegal_characters_removed(self):
        assert sanitize_filename('Re: "Q3" plan/budget?') == "Re Q3 planbudget"

    def test_control_characters_removed(self):
        assert sanitize_filename("a\tb\x00c") == "abc"

    def test_reserved_dot_names(self):
        assert sanitize_filename("..") == ""
        assert sanitize_filename(".") == ""

    def test_windows_device_names(self):
        assert sanitize_filename("CON") == ""
        assert sanitize_filename("nul.txt") == ""
        assert sanitize_filename("CONTRACT") == "CONTRACT"

    def test_trailing_dots_and_spaces_removed(self):
        assert sanitize_filename("Hello.  ") == "Hello"

    def test_unicode_is_kept(self):
        assert sanitize_filename("会议纪要") == "会议纪要"

    def test_truncates_without_splitting_characters(self):
        """Test truncation stops on a character boundary."""
        result = sanitize_filename("é" * 150, max_bytes=201)
        assert result == "é" * 100
        assert len(result.encode("utf-8")) <= 201

    def test_is_deterministic(self):
        value = "Re: <urgent> *** update ***"
        assert sanitize_filename(value) == sanitize_filename(value)


class TestExtractSubject:
    """Test subject slug extraction."""

    def test_subject_slug(self):
        assert extract_subject(["Subject: Weekly report\n", "\n"]) == "Weekly report"

    def test_lowercase_header_name(self):
        assert extract_subject(["subject: lower\n"]) == "lower"

    def test_missing_subject(self):
        assert extract_subject(["From: a@x.com\n", "\n"]) is None

    def test_blank_subject(self):
        assert extract_subject(["Subject:    \n"]) is None

    def test_subject_with_no_safe_characters(self):
        assert extract_subject(["Subject: ???\n"]) is None

    def test_subject_is_sanitized(self):
        assert extract_subject(["Subject: Re: plan/budget?\n"]) == "Re planbudget"


class TestEnsureFilePath:
    """Test file path argument validation."""

    def test_plain_path(self):
        assert str(ensure_file_path("out/archive.mbox")) == os.path.join("out", "archive.mbox")

    @pytest.mark.parametrize("value", ["out/", "out\\", "/"])
    def test_trailing_separator_rejected(self, value):
        with pytest.raises(ValueError, match="appears to be a directory"):
            ensure_file_path(value)


class TestFindEmlFiles:
    """Test recursive eml discovery."""

    def test_nested_files_sorted(self, tmp_path):
        (tmp_path / "c" / "d").mkdir(parents=True)
        (tmp_path / "a").mkdir()
        for rel in ["c/d/y.eml", "b.eml", "a/x.eml"]:
            (tmp_path / rel).write_text("Subject: x\n")

        found = find_eml_files(tmp_path)

        assert found == [tmp_path / "a" / "x.eml", tmp_path / "b.eml", tmp_path / "c" / "d" / "y.eml"]

    def test_other_extensions_ignored(self, tmp_path):
        (tmp_path / "note.txt").write_text("x")
        (tmp_path / "archive.mbox").write_text("x")
        (tmp_path / "message.eml").write_text("x")

        assert find_eml_files(tmp_path) == [tmp_path / "message.eml"]

    def test_directory_named_eml_is_walked_not_collected(self, tmp_path):
        (tmp_path / "folder.eml").mkdir()
        (tmp_path / "folder.eml" / "inner.eml").write_text("x")

        assert find_eml_files(tmp_path) == [tmp_path / "folder.eml" / "inner.eml"]

    def test_empty_directory(self, tmp_path):
        assert find_eml_files(tmp_path) == []

    def test_deep_tree(self, tmp_path):
        """Test a deeply nested tree is walked without recursion."""
        directory = tmp_path
        for i in range(200):
            directory = directory / f"d{i}"
        directory.mkdir(parents=True)
        (directory / "deep.eml").write_text("x")

        assert find_eml_files(tmp_path) == [directory / "deep.eml"]

    def test_symlink_loop_visited_once(self, tmp_path):
        (tmp_path / "m.eml").write_text("x")
        os.symlink(tmp_path, tmp_path / "loop")

        assert find_eml_files(tmp_path) == [tmp_path / "m.eml"]

    def test_missing_directory_raises(self, tmp_path):
        with pytest.raises(OSError):
            find_eml_files(tmp_path / "missing")
