"""Results processor: turns command results into stored records."""

import asyncio
from datetime import datetime
from typing import Callable, List, Optional, Sequence

from folderstats.domain.models import StatsCommand, StatsCommandType
from folderstats.domain.protocols import IStatsRepository, ILogger
from folderstats.shared.logging import get_logger, LoggerAdapter


class StatsCommandProcessorService:
    """
    Records command results through a stats repository.
    Implements IResultsSink protocol.
    """

    def __init__(
        self,
        repository: IStatsRepository,
        clock: Callable[[], datetime] = datetime.now,
        logger: Optional[ILogger] = None
    ):
        self._repository = repository
        self._clock = clock
        self._logger = logger or LoggerAdapter(get_logger(__name__))

    async def record(
        self,
        folder_id: str,
        command_type: StatsCommandType,
        results: Sequence[str]
    ) -> None:
        """Store the full result list of one command for one folder."""
        record = StatsCommand(
            command=command_type.value,
            folder_name=folder_id,
            results=list(results),
            processed_date=self._clock(),
        )
        await asyncio.to_thread(self._repository.add, record)
        self._logger.info(f"Recorded {record.command} for '{folder_id}' ({len(record.results)} result(s))")

    def processed_for_month(self, folder_id: str, when: Optional[datetime] = None) -> List[StatsCommand]:
        """Records for a folder processed in the same calendar month as `when` (default: now)."""
        when = when or self._clock()
        return [r for r in self._repository.list_for_folder(folder_id) if r.is_same_month(when)]

    def history(self, folder_id: str) -> List[StatsCommand]:
        """All records stored for a folder."""
        return self._repository.list_for_folder(folder_id)
