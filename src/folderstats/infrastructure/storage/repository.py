"""Local stats record repositories."""

import json
import threading
from pathlib import Path
from typing import List, Union

from folderstats.domain.exceptions import StorageError
from folderstats.domain.models import StatsCommand
from folderstats.shared.logging import get_logger


class InMemoryStatsRepository:
    """Keeps records in a list. Useful for dry runs and tests."""

    def __init__(self):
        self._records: List[StatsCommand] = []

    def add(self, record: StatsCommand) -> None:
        self._records.append(record)

    def list_for_folder(self, folder_id: str) -> List[StatsCommand]:
        return [r for r in self._records if r.folder_name == folder_id]

    def all(self) -> List[StatsCommand]:
        return list(self._records)


class JsonlStatsRepository:
    """Append-only JSON Lines file, one record per line."""

    def __init__(self, path: Union[str, Path], encoding: str = "utf-8"):
        """
        Initialize repository.

        Args:
            path: JSON Lines file (created on first write)
            encoding: File encoding
        """
        self.path = Path(path)
        self.encoding = encoding
        self._lock = threading.Lock()
        self._logger = get_logger(__name__)

    def add(self, record: StatsCommand) -> None:
        """Append a record to the file."""
        line = json.dumps(record.to_dict(), ensure_ascii=False)

        try:
            with self._lock:
                self.path.parent.mkdir(parents=True, exist_ok=True)
                with open(self.path, 'a', encoding=self.encoding) as f:
                    f.write(line + "\n")
        except OSError as e:
            raise StorageError(f"Failed to write stats record to {self.path}: {e}") from e

        self._logger.debug(f"Stored {record.command} for '{record.folder_name}' in {self.path}")

    def list_for_folder(self, folder_id: str) -> List[StatsCommand]:
        return [r for r in self.load() if r.folder_name == folder_id]

    def load(self) -> List[StatsCommand]:
        """
        Read every record in the file.

        Returns:
            Records in write order, empty if the file does not exist

        Raises:
            StorageError: If the file cannot be read or a line is malformed
        """
        if not self.path.exists():
            return []

        records = []
        try:
            with open(self.path, 'r', encoding=self.encoding) as f:
                for line_no, line in enumerate(f, start=1):
                    if not line.strip():
                        continue
                    records.append(self._parse_line(line, line_no))
        except OSError as e:
            raise StorageError(f"Failed to read stats records from {self.path}: {e}") from e

        return records

    def _parse_line(self, line: str, line_no: int) -> StatsCommand:
        try:
            return StatsCommand.from_dict(json.loads(line))
        except (ValueError, KeyError, TypeError) as e:
            raise StorageError(f"Malformed record at {self.path}:{line_no}: {e}") from e
