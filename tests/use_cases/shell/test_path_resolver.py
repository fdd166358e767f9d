"""
Tests for the path resolver functions.
"""

import pytest

from zipshell.use_cases.shell.path_resolver import (
    display_path,
    is_invalid_token,
    parent,
    resolve_directory,
    resolve_file,
)


class TestParent:
    """Test cases for parent()."""

    @pytest.mark.parametrize(
        "path, expected",
        [
            ("", ""),
            ("/", "/"),
            ("a/", ""),
            ("a", ""),
            ("a/b/", "a/"),
            ("a/b", "a/"),
            ("a/b/c/", "a/b/"),
        ],
    )
    def test_parent(self, path, expected):
        """Test parent paths keep the trailing separator convention."""
        assert parent(path) == expected

    def test_parent_of_parent_reaches_root(self):
        """Test two steps up from a two-level path is the root."""
        assert parent(parent("a/b/")) == ""

    def test_root_is_fixed_point(self):
        """Test the root is its own parent."""
        assert parent(parent("")) == ""


class TestResolve:
    """Test cases for resolve_directory() and resolve_file()."""

    def test_resolve_directory_appends_separator(self):
        assert resolve_directory("", "dir1") == "dir1/"
        assert resolve_directory("dir1/", "sub") == "dir1/sub/"

    def test_resolve_directory_keeps_existing_separator(self):
        assert resolve_directory("dir1/", "sub/") == "dir1/sub/"

    def test_resolve_file_appends_nothing(self):
        assert resolve_file("", "file1.txt") == "file1.txt"
        assert resolve_file("dir1/", "file2.txt") == "dir1/file2.txt"


class TestTokens:
    """Test cases for token validation and display."""

    @pytest.mark.parametrize("token", [".", "..", "./a", ".hidden", "/", "/etc"])
    def test_invalid_tokens(self, token):
        assert is_invalid_token(token) is True

    @pytest.mark.parametrize("token", ["dir1", "a.b", "dir1/sub", "file1.txt"])
    def test_valid_tokens(self, token):
        assert is_invalid_token(token) is False

    def test_display_path(self):
        assert display_path("") == "/"
        assert display_path("dir1/") == "/dir1/"
