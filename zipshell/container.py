"""
Dependency injection container for managing application dependencies.
"""

import logging

from zipshell.adapters.archive.zip_archive_adapter import ZipArchiveAdapter
from zipshell.adapters.session.json_session_store import JsonSessionStore
from zipshell.adapters.terminal.rich_terminal import RichTerminal
from zipshell.config.settings import Settings
from zipshell.ports.archive.archive_index_port import ArchiveIndexPort
from zipshell.ports.session.session_store_port import SessionStorePort
from zipshell.ports.terminal.terminal_port import TerminalPort
from zipshell.use_cases.shell.command_engine import CommandEngine
from zipshell.use_cases.shell.repl import ShellRepl
from zipshell.use_cases.shell.session_log import SessionLog


class DependencyContainer:
    """
    Container for managing application dependencies using dependency injection.
    """

    def __init__(self, settings: Settings, logger: logging.Logger | None = None):
        self.settings = settings
        self._instances = {}
        self._logger = logger or logging.getLogger(__name__)

    def get_archive(self) -> ArchiveIndexPort:
        """
        Get archive index adapter instance; opens the archive on first use.

        Returns:
            ArchiveIndexPort implementation

        Raises:
            ArchiveError: If the archive cannot be opened
        """
        if "archive" not in self._instances:
            self._instances["archive"] = ZipArchiveAdapter(
                self.settings.archive_path, self._logger
            )
        return self._instances["archive"]

    def get_session_store(self) -> SessionStorePort:
        if "session_store" not in self._instances:
            self._instances["session_store"] = JsonSessionStore(
                self.settings.log_path, self._logger
            )
        return self._instances["session_store"]

    def get_terminal(self) -> TerminalPort:
        if "terminal" not in self._instances:
            self._instances["terminal"] = RichTerminal()
        return self._instances["terminal"]

    def get_session_log(self) -> SessionLog:
        """
        Get the session log with its store injected.

        Returns:
            Configured SessionLog
        """
        if "session_log" not in self._instances:
            self._instances["session_log"] = SessionLog(
                self.settings.user, self.get_session_store(), self._logger
            )
        return self._instances["session_log"]

    def get_command_engine(self) -> CommandEngine:
        """
        Get the command engine with injected dependencies.

        Returns:
            Configured CommandEngine
        """
        if "command_engine" not in self._instances:
            self._instances["command_engine"] = CommandEngine(
                self.get_archive(),
                self.get_session_log(),
                self.get_terminal(),
                self._logger,
            )
        return self._instances["command_engine"]

    def get_repl(self) -> ShellRepl:
        if "repl" not in self._instances:
            self._instances["repl"] = ShellRepl(
                self.get_command_engine(),
                self.get_terminal(),
                self.settings.user,
                self.settings.computer,
                self._logger,
            )
        return self._instances["repl"]

    def close(self) -> None:
        """Close the archive if it was opened."""
        archive = self._instances.get("archive")
        if archive is not None:
            archive.close()

    def reset(self):
        """Reset all instances (useful for testing)."""
        self.close()
        self._instances.clear()
