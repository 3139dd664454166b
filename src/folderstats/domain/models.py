"""Domain models for folder stats processing."""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any, Dict, List

from folderstats.domain.exceptions import ConfigurationError


class StatsCommandType(Enum):
    """Closed set of stats commands that can run against folder text."""

    SCAN_MOST_POPULAR_WORD = "scan_most_popular_word"
    WORD_COUNT = "word_count"
    AVERAGE_WORD_LENGTH = "average_word_length"

    @classmethod
    def parse(cls, name: str) -> "StatsCommandType":
        """
        Resolve a command from its value or member name.

        Matching is case-insensitive, so "word_count", "WORD_COUNT" and
        "Word_Count" all resolve to WORD_COUNT.

        Raises:
            ConfigurationError: If no command matches
        """
        if isinstance(name, cls):
            return name

        key = str(name).strip().lower()
        for member in cls:
            if key in (member.value, member.name.lower()):
                return member

        valid = ", ".join(m.value for m in cls)
        raise ConfigurationError(f"Unknown stats command: {name!r} (valid: {valid})")


@dataclass
class StatsCommand:
    """Stored result of running one stats command against one folder."""

    command: str
    folder_name: str
    results: List[str] = field(default_factory=list)
    processed_date: datetime = field(default_factory=datetime.now)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to a JSON-friendly dict."""
        return {
            "command": self.command,
            "folder_name": self.folder_name,
            "results": list(self.results),
            "processed_date": self.processed_date.isoformat(),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "StatsCommand":
        """Build a record from a dict produced by to_dict()."""
        return cls(
            command=data["command"],
            folder_name=data["folder_name"],
            results=list(data.get("results", [])),
            processed_date=datetime.fromisoformat(data["processed_date"]),
        )

    def is_same_month(self, when: datetime) -> bool:
        """Check if this record was processed in the same calendar month as `when`."""
        return (self.processed_date.year, self.processed_date.month) == (when.year, when.month)
