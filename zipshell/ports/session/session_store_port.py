"""
Session store port interface defining the contract for session log persistence.
"""

from abc import ABC, abstractmethod

from zipshell.entities.log_entry import Session


class SessionStorePort(ABC):
    """Port interface for persisting a shell session."""

    @abstractmethod
    def save(self, session: Session) -> None:
        """
        Persist the session, replacing any previous content.

        Args:
            session: Session to persist

        Raises:
            SessionStoreError: If the session cannot be written
        """
        pass
