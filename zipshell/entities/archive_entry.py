"""
Archive entry domain entity.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Optional

from zipshell.exceptions import EntryDecodeError


class EntryKind(str, Enum):
    """Kind of record stored in the archive."""

    FILE = "file"
    DIRECTORY = "directory"


@dataclass(frozen=True)
class ArchiveEntry:
    """
    One file-or-directory record inside the archive, identified by its full path.

    Paths use '/' as separator and never start with it; directory paths
    conventionally end with '/'. File content is only fetched from the
    archive when it is read.
    """

    path: str
    kind: EntryKind
    reader: Optional[Callable[[], bytes]] = field(
        default=None, repr=False, compare=False
    )

    def is_directory(self) -> bool:
        """Return True if the entry is a directory."""
        return self.kind is EntryKind.DIRECTORY

    def read_bytes(self) -> bytes:
        """
        Fetch the raw entry content.

        Raises:
            ArchiveError: If the archive member cannot be read
        """
        if self.reader is None:
            return b""
        return self.reader()

    def read_to_string(self, encoding: str = "utf-8") -> str:
        """
        Decode the entry content as text.

        Args:
            encoding: Text encoding of the content (default: UTF-8)

        Returns:
            The decoded content

        Raises:
            EntryDecodeError: If the entry is a directory or the content is not valid text
            ArchiveError: If the archive member cannot be read
        """
        if self.is_directory():
            raise EntryDecodeError(f"{self.path} is a directory")
        try:
            return self.read_bytes().decode(encoding)
        except UnicodeDecodeError as e:
            raise EntryDecodeError(f"stream did not contain valid {encoding}: {e.reason}")
