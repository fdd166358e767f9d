"""
Tests for the SessionLog use case.
"""

import pytest

from zipshell.entities.log_entry import LogEntry, Session
from zipshell.exceptions import SessionStoreError
from zipshell.use_cases.shell.session_log import SessionLog


class TestSessionLog:
    """Test cases for the SessionLog use case."""

    def test_record_appends_in_order(self, session_log: SessionLog):
        """Test entries are stamped with the user and kept in order."""
        session_log.record("cd", "navigated to /dir1/")
        session_log.record("ls", "listing of /dir1/")

        assert session_log.entries == (
            LogEntry("test_user", "cd", "navigated to /dir1/"),
            LogEntry("test_user", "ls", "listing of /dir1/"),
        )

    def test_entries_cannot_be_altered(self, session_log: SessionLog):
        """Test the exposed entries are a snapshot."""
        session_log.record("clear", "screen cleared")

        snapshot = session_log.entries
        session_log.record("exit", "shell exited")

        assert len(snapshot) == 1
        assert len(session_log.entries) == 2

    def test_flush_saves_session(self, session_log: SessionLog, mock_store):
        """Test flush hands every entry to the store."""
        session_log.record("clear", "screen cleared")
        session_log.record("exit", "shell exited")

        session = session_log.flush()

        mock_store.save.assert_called_once_with(session)
        assert session == Session(
            user="test_user",
            log=[
                LogEntry("test_user", "clear", "screen cleared"),
                LogEntry("test_user", "exit", "shell exited"),
            ],
        )

    def test_flush_error_propagates(self, session_log: SessionLog, mock_store):
        """Test store failures are raised to the caller."""
        mock_store.save.side_effect = SessionStoreError("disk full")

        with pytest.raises(SessionStoreError, match="disk full"):
            session_log.flush()

    def test_initialization_without_logger(self, mock_store):
        """Test a default logger is created."""
        session_log = SessionLog("someone", mock_store)

        assert session_log._logger is not None
        assert session_log.user == "someone"
