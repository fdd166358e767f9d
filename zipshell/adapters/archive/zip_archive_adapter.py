"""
ZIP archive adapter implementation for archive index operations.
"""

import logging
import os
import zipfile

from typing_extensions import override

from zipshell.entities.archive_entry import ArchiveEntry, EntryKind
from zipshell.exceptions import ArchiveError, EntryNotFoundError
from zipshell.ports.archive.archive_index_port import ArchiveIndexPort

NOT_FOUND_MESSAGE = "specified file not found in archive"


class ZipArchiveAdapter(ArchiveIndexPort):
    """ZIP file implementation of the archive index port."""

    def __init__(self, archive_path: str, logger: logging.Logger | None = None):
        """
        Open the archive and index its entry names.

        Args:
            archive_path: Path to the ZIP file
            logger: Logger instance to use for logging. If None, a default logger will be created.

        Raises:
            ArchiveError: If the file is missing or is not a valid ZIP archive
        """
        self._logger: logging.Logger = logger or logging.getLogger(__name__)
        self.archive_path = archive_path

        if not os.path.isfile(archive_path):
            raise ArchiveError(f"Archive does not exist: {archive_path}")

        try:
            self._zip = zipfile.ZipFile(archive_path, "r")
        except zipfile.BadZipFile as e:
            raise ArchiveError(f"Invalid ZIP archive {archive_path}: {str(e)}")
        except Exception as e:
            raise ArchiveError(f"Failed to open archive {archive_path}: {str(e)}")

        self._names: list[str] = self._zip.namelist()
        self._infos: dict[str, zipfile.ZipInfo] = {
            info.filename: info for info in self._zip.infolist()
        }
        self._logger.info(
            f"Opened archive {archive_path} with {len(self._names)} entries"
        )

    def __enter__(self) -> "ZipArchiveAdapter":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    @override
    def close(self) -> None:
        self._zip.close()

    @override
    def list_entries(self) -> list[str]:
        return list(self._names)

    def _has_children(self, directory: str) -> bool:
        """Check whether any entry lives under a directory prefix."""
        return any(
            name.startswith(directory) and name != directory for name in self._names
        )

    def _read_member(self, info: zipfile.ZipInfo) -> bytes:
        """
        Decompress a ZIP member.

        Raises:
            ArchiveError: If the member content cannot be read
        """
        try:
            return self._zip.read(info)
        except Exception as e:
            self._logger.error(f"Could not read entry {info.filename}: {e}")
            raise ArchiveError(f"Failed to read {info.filename}: {str(e)}")

    def _make_entry(self, name: str) -> ArchiveEntry:
        """Build an ArchiveEntry from a stored ZIP member; content is read on demand."""
        info = self._infos[name]
        if info.is_dir():
            return ArchiveEntry(name, EntryKind.DIRECTORY)
        return ArchiveEntry(name, EntryKind.FILE, lambda: self._read_member(info))

    @override
    def lookup(self, path: str) -> ArchiveEntry:
        """
        Find the entry stored under a path.

        Resolution order: the exact member name, the same name with its
        trailing separator toggled, then an implied directory (any member
        stored under ``path/``). Archives written without explicit directory
        records can therefore still be navigated.

        Args:
            path: Entry path, without leading separator

        Returns:
            The matching ArchiveEntry

        Raises:
            EntryNotFoundError: If no entry matches the path
            ArchiveError: If the entry cannot be read
        """
        if path in self._infos:
            return self._make_entry(path)

        toggled = path[:-1] if path.endswith("/") else path + "/"
        if toggled and toggled in self._infos:
            return self._make_entry(toggled)

        directory = path if path.endswith("/") else path + "/"
        if path and self._has_children(directory):
            self._logger.debug(f"Resolved implied directory {directory}")
            return ArchiveEntry(directory, EntryKind.DIRECTORY)

        raise EntryNotFoundError(f"{NOT_FOUND_MESSAGE}: {path}")
