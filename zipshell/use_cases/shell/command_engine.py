"""
Use case implementing the shell commands over a read-only archive.
"""

import logging
from typing import Optional

from zipshell.exceptions import ArchiveError, SessionStoreError
from zipshell.ports.archive.archive_index_port import ArchiveIndexPort
from zipshell.ports.terminal.terminal_port import TerminalPort
from zipshell.use_cases.shell.path_resolver import (
    ROOT,
    display_path,
    is_invalid_token,
    parent,
    resolve_directory,
    resolve_file,
)
from zipshell.use_cases.shell.session_log import SessionLog

SHELL_NAME = "mysh"

LS = "ls"
CD = "cd"
CAT = "cat"
PWD = "pwd"
CLEAR = "clear"
EXIT = "exit"
EASTER_EGG = ".?."

INVALID_PATH_MESSAGE = "path must not start with . or /"


class CommandEngine:
    """
    Executes shell commands against the archive and owns the current directory.

    The cursor is "" at the root, otherwise a directory path ending with '/'
    that was validated against the archive by a successful ``cd``. Every
    command except ``pwd`` records exactly one session log entry, and no
    command lets an archive error escape.
    """

    def __init__(
        self,
        archive: ArchiveIndexPort,
        session_log: SessionLog,
        terminal: TerminalPort,
        logger: Optional[logging.Logger] = None,
    ):
        """
        Initialize the engine at the archive root.

        Args:
            archive: Archive index the commands resolve against
            session_log: Log receiving one entry per command
            terminal: Output target for listings, file content and diagnostics
            logger: Logger instance to use for logging
        """
        self._archive = archive
        self._session_log = session_log
        self._terminal = terminal
        self._logger = logger or logging.getLogger(__name__)
        self._cursor = ROOT

    @property
    def cursor(self) -> str:
        return self._cursor

    def _fail(self, command: str, message: str) -> None:
        """Print a diagnostic and record it in the session log."""
        text = f"{SHELL_NAME}: {command}: {message}"
        self._terminal.write_line(text)
        self._session_log.record(command, text)

    def _children(self, prefix: str) -> list[str]:
        """Distinct first path segments below a prefix, in first-seen order."""
        children: list[str] = []
        seen: set[str] = set()
        for name in self._archive.list_entries():
            if not name.startswith(prefix):
                continue
            remainder = name[len(prefix) :]
            if remainder in ("", "/"):
                continue
            child = remainder.split("/", 1)[0]
            if child and child not in seen:
                seen.add(child)
                children.append(child)
        return children

    def ls(self, token: str = "") -> None:
        """
        List the immediate children of a directory.

        ``""`` and ``"."`` list the current directory, ``".."`` lists the root
        only when already there and is otherwise ignored, any other token is a
        subdirectory of the current directory.
        """
        if token == EASTER_EGG:
            self._terminal.write_line("CONGRATULATIONS!!! YOU FOUND EASTER EGG")
            self._terminal.write_line(
                "".join(f"{name} " for name in self._archive.list_entries())
            )
            self._session_log.record("easter egg", "easter egg found")
            return

        if token in ("", "."):
            target = self._cursor
        elif token == "..":
            if self._cursor != ROOT:
                self._logger.debug(f"Ignoring 'ls ..' in {self._cursor}")
                self._session_log.record(LS, "listing of /..")
                return
            target = ROOT
        else:
            target = resolve_directory(self._cursor, token)

        children = self._children(target)
        self._logger.debug(f"Listing {display_path(target)}: {len(children)} entries")
        if children:
            self._terminal.write_line("".join(f"{child} " for child in children))
        self._session_log.record(LS, f"listing of {display_path(target)}")

    def _navigated(self) -> None:
        if self._cursor == ROOT:
            self._session_log.record(CD, "navigated to root")
        else:
            self._session_log.record(CD, f"navigated to {display_path(self._cursor)}")

    def cd(self, token: str = "") -> None:
        """Change the current directory; the cursor is left untouched on failure."""
        if token in ("", "/"):
            self._cursor = ROOT
            self._navigated()
            return

        if token == "..":
            self._cursor = parent(self._cursor)
            self._navigated()
            return

        if is_invalid_token(token):
            self._fail(CD, INVALID_PATH_MESSAGE)
            return

        fullpath = resolve_directory(self._cursor, token)
        try:
            entry = self._archive.lookup(fullpath)
        except ArchiveError as e:
            self._fail(CD, str(e))
            return

        if not entry.is_directory():
            self._fail(CD, f"{fullpath} is not a directory")
            return

        self._cursor = fullpath
        self._navigated()

    def cat(self, token: str) -> None:
        """Print the text content of a file."""
        if is_invalid_token(token):
            self._fail(CAT, INVALID_PATH_MESSAGE)
            return

        fullpath = resolve_file(self._cursor, token)
        try:
            entry = self._archive.lookup(fullpath)
        except ArchiveError as e:
            self._fail(CAT, str(e))
            return

        if entry.is_directory():
            self._fail(CAT, f"{fullpath} is a directory")
            return

        if fullpath.endswith("/"):
            self._fail(CAT, f"{fullpath}: Not a directory")
            return

        try:
            body = entry.read_to_string()
        except ArchiveError as e:
            self._fail(CAT, f"{fullpath}: {e}")
            return

        self._terminal.write_line(body)
        self._session_log.record(CAT, f"read {display_path(fullpath)}")

    def pwd(self) -> None:
        self._terminal.write_line(display_path(self._cursor))

    def clear(self) -> None:
        self._terminal.clear_screen()
        self._session_log.record(CLEAR, "screen cleared")

    def exit(self) -> bool:
        """
        Record the exit and persist the session.

        Returns:
            True if the session log was saved
        """
        self._session_log.record(EXIT, "shell exited")
        try:
            self._session_log.flush()
        except SessionStoreError as e:
            self._logger.error(f"Error saving session: {e}")
            self._terminal.write_line(f"{SHELL_NAME}: {EXIT}: {e}")
            return False
        return True
