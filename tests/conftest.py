"""
Pytest configuration and shared fixtures.
"""

import zipfile
from pathlib import Path
from typing import Callable
from unittest.mock import MagicMock

import pytest

from zipshell.adapters.archive.zip_archive_adapter import ZipArchiveAdapter
from zipshell.ports.session.session_store_port import SessionStorePort
from zipshell.ports.terminal.terminal_port import TerminalPort
from zipshell.use_cases.shell.command_engine import CommandEngine
from zipshell.use_cases.shell.session_log import SessionLog


@pytest.fixture
def make_zip(tmp_path: Path) -> Callable[..., str]:
    """
    Factory writing a ZIP archive from (name, content) pairs, in order.

    Names ending with '/' are stored as directory records.

    Returns:
        Function returning the archive path
    """

    def _make(entries: list[tuple[str, bytes]], name: str = "test.zip") -> str:
        zip_path = tmp_path / name
        with zipfile.ZipFile(zip_path, "w") as zf:
            for entry_name, content in entries:
                zf.writestr(entry_name, content)
        return str(zip_path)

    return _make


@pytest.fixture
def sample_zip(make_zip) -> str:
    """Two files, no explicit directory records."""
    return make_zip(
        [
            ("file1.txt", b"Hello, world!"),
            ("dir1/file2.txt", b"Another file"),
        ]
    )


@pytest.fixture
def nested_zip(make_zip) -> str:
    """Explicit directory records, nesting, an empty directory and a binary file."""
    return make_zip(
        [
            ("docs/", b""),
            ("docs/readme.md", b"# Readme\n"),
            ("docs/guides/", b""),
            ("docs/guides/intro.txt", b"Welcome"),
            ("docs/guides/advanced.txt", b"Deep dive"),
            ("empty/", b""),
            ("notes.txt", "привет".encode("utf-8")),
            ("image.bin", b"\xff\xfe\x00\x81"),
        ]
    )


@pytest.fixture
def mock_logger():
    """
    Create a mock logger for testing.

    Returns:
        Mock logger instance
    """
    return MagicMock()


@pytest.fixture
def mock_terminal():
    return MagicMock(spec=TerminalPort)


@pytest.fixture
def mock_store():
    return MagicMock(spec=SessionStorePort)


@pytest.fixture
def session_log(mock_store, mock_logger) -> SessionLog:
    return SessionLog("test_user", mock_store, mock_logger)


@pytest.fixture
def sample_engine(sample_zip, session_log, mock_terminal, mock_logger):
    """CommandEngine over the two-file sample archive."""
    with ZipArchiveAdapter(sample_zip, mock_logger) as archive:
        yield CommandEngine(archive, session_log, mock_terminal, mock_logger)


@pytest.fixture
def nested_engine(nested_zip, session_log, mock_terminal, mock_logger):
    """CommandEngine over the nested archive."""
    with ZipArchiveAdapter(nested_zip, mock_logger) as archive:
        yield CommandEngine(archive, session_log, mock_terminal, mock_logger)
