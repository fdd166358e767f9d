"""
JSON file adapter implementation for session persistence.
"""

import json
import logging
import os

from typing_extensions import override

from zipshell.entities.log_entry import Session
from zipshell.exceptions import SessionStoreError
from zipshell.ports.session.session_store_port import SessionStorePort


class JsonSessionStore(SessionStorePort):
    """Writes the session as a pretty-printed JSON document."""

    def __init__(self, log_path: str, logger: logging.Logger | None = None):
        """
        Initialize the store.

        Args:
            log_path: Target file; overwritten on every save
            logger: Logger instance to use for logging. If None, a default logger will be created.
        """
        self.log_path = log_path
        self._logger: logging.Logger = logger or logging.getLogger(__name__)

    @override
    def save(self, session: Session) -> None:
        try:
            parent = os.path.dirname(self.log_path)
            if parent:
                os.makedirs(parent, exist_ok=True)
            with open(self.log_path, "w", encoding="utf-8") as f:
                json.dump(session.to_dict(), f, indent=2, ensure_ascii=False)
                f.write("\n")
        except Exception as e:
            self._logger.error(f"Could not write session log {self.log_path}: {e}")
            raise SessionStoreError(
                f"Failed to write session log {self.log_path}: {str(e)}"
            )
        self._logger.info(
            f"Saved {len(session.log)} log entries to {self.log_path}"
        )
