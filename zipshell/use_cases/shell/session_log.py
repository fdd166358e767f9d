"""
Use case accumulating the session log and flushing it at shutdown.
"""

import logging
from typing import Optional

from zipshell.entities.log_entry import LogEntry, Session
from zipshell.ports.session.session_store_port import SessionStorePort


class SessionLog:
    """Append-only record of executed commands for a single user."""

    def __init__(
        self,
        user: str,
        store: SessionStorePort,
        logger: Optional[logging.Logger] = None,
    ):
        """
        Initialize the session log.

        Args:
            user: User name stamped on every entry
            store: Persistence target used by flush()
            logger: Logger instance to use for logging
        """
        self.user = user
        self._store = store
        self._entries: list[LogEntry] = []
        self._logger = logger or logging.getLogger(__name__)

    @property
    def entries(self) -> tuple[LogEntry, ...]:
        return tuple(self._entries)

    def record(self, command: str, details: str) -> LogEntry:
        entry = LogEntry(user=self.user, command=command, details=details)
        self._entries.append(entry)
        self._logger.debug(f"Logged {command}: {details}")
        return entry

    def to_session(self) -> Session:
        return Session(user=self.user, log=list(self._entries))

    def flush(self) -> Session:
        """
        Persist every entry recorded so far.

        Returns:
            The persisted Session

        Raises:
            SessionStoreError: If the store cannot write the session
        """
        session = self.to_session()
        self._store.save(session)
        return session
