"""Batch dispatcher: runs stats commands over a list of folders."""

from typing import Optional, Sequence

from folderstats.domain.models import StatsCommandType
from folderstats.domain.protocols import (
    ITextSource, ICommandExecutor, IResultsSink, ILogger, IMetricsCollector
)
from folderstats.shared.logging import get_logger, LoggerAdapter
from folderstats.shared.metrics import MetricsCollector


class BatchDispatcher:
    """
    Drives a folder x command batch to completion.

    Folders are processed in list order, and within a folder the commands run
    in list order. Each folder's text is resolved once and reused for all of
    its commands. Every await completes before the next step starts.

    Nothing is retried or skipped: the first failure from the text source,
    executor or sink is re-raised as-is and ends the batch.
    """

    def __init__(
        self,
        text_source: ITextSource,
        executor: ICommandExecutor,
        sink: IResultsSink,
        logger: Optional[ILogger] = None,
        metrics: Optional[IMetricsCollector] = None
    ):
        self._text_source = text_source
        self._executor = executor
        self._sink = sink
        self._logger = logger or LoggerAdapter(get_logger(__name__))
        self._metrics = metrics or MetricsCollector()

    @property
    def metrics(self) -> IMetricsCollector:
        return self._metrics

    async def process_all_folders(
        self,
        folder_ids: Sequence[str],
        command_types: Sequence[StatsCommandType]
    ) -> None:
        """
        Run every command against every folder.

        Args:
            folder_ids: Folders to process, in order. Duplicates are processed again.
            command_types: Commands to run per folder, in order.
        """
        self._logger.info(
            f"Starting batch: {len(folder_ids)} folder(s) x {len(command_types)} command(s)"
        )
        self._metrics.start_timer('batch')
        try:
            for folder_id in folder_ids:
                try:
                    text = await self._text_source.resolve(folder_id)
                except Exception:
                    self._logger.error(f"Batch aborted resolving folder '{folder_id}'")
                    raise

                self._metrics.increment_counter('folders_processed')

                for command_type in command_types:
                    self._logger.debug(f"Running {command_type.value} on '{folder_id}'")
                    try:
                        results = await self._executor.execute(command_type, text)
                        await self._sink.record(folder_id, command_type, results)
                    except Exception:
                        self._logger.error(
                            f"Batch aborted at folder '{folder_id}', command {command_type.value}"
                        )
                        raise

                    self._metrics.increment_counter('commands_executed')
        finally:
            elapsed = self._metrics.stop_timer('batch')

        self._logger.info(f"Batch finished in {elapsed:.2f}s")
