"""
Session log domain entities.
"""

from dataclasses import asdict, dataclass, field
from typing import Any


@dataclass(frozen=True)
class LogEntry:
    """Record of one executed command."""

    user: str
    command: str
    details: str


@dataclass(frozen=True)
class Session:
    """Ordered record of every command executed by a user, persisted at shutdown."""

    user: str
    log: list[LogEntry] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {"user": self.user, "log": [asdict(entry) for entry in self.log]}
