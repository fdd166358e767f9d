"""
Archive index port interface defining the contract for read-only archive access.
"""

from abc import ABC, abstractmethod

from zipshell.entities.archive_entry import ArchiveEntry


class ArchiveIndexPort(ABC):
    """Port interface for archive index operations."""

    @abstractmethod
    def list_entries(self) -> list[str]:
        """
        List every entry path stored in the archive.

        Returns:
            Entry paths in archive order

        Raises:
            ArchiveError: If the archive cannot be read
        """
        pass

    @abstractmethod
    def lookup(self, path: str) -> ArchiveEntry:
        """
        Find the entry stored under a path.

        Args:
            path: Entry path, without leading separator

        Returns:
            The matching ArchiveEntry

        Raises:
            EntryNotFoundError: If no entry matches the path
            ArchiveError: If the entry cannot be read
        """
        pass

    def close(self) -> None:
        """Release the underlying archive, if any."""
        pass
