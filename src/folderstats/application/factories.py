"""Factory for wiring the dispatcher from configuration."""

from typing import Optional

from folderstats.application.dispatcher import BatchDispatcher
from folderstats.application.processor import StatsCommandProcessorService
from folderstats.domain.exceptions import ConfigurationError
from folderstats.domain.protocols import ITextSource, IStatsRepository, ILogger, IMetricsCollector
from folderstats.infrastructure.commands import StatsCommandHandler
from folderstats.infrastructure.config import StatsConfig
from folderstats.infrastructure.sources import PlaceholderTextSource, FileSystemTextSource
from folderstats.infrastructure.storage import (
    InMemoryStatsRepository, JsonlStatsRepository, B2Credentials, B2StatsRepository
)
from folderstats.infrastructure.storage.b2_repository import DEFAULT_ENDPOINT
from folderstats.shared.logging import get_logger


class DispatcherFactory:
    """
    Builds the dispatcher and its collaborators from a StatsConfig.

        factory = DispatcherFactory(config)
        dispatcher = factory.create_dispatcher()
        await dispatcher.process_all_folders(config.folders, config.commands)
    """

    def __init__(self, config: StatsConfig):
        self.config = config
        self._logger = get_logger(__name__)
        self._repository: Optional[IStatsRepository] = None

    def create_text_source(self) -> ITextSource:
        """Create the configured text source."""
        if self.config.text_source == "placeholder":
            self._logger.debug("Using placeholder text source")
            return PlaceholderTextSource()

        if self.config.text_source == "filesystem":
            self._logger.info(f"Reading folders under {self.config.root_dir}")
            return FileSystemTextSource(self.config.root_dir, pattern=self.config.file_pattern)

        raise ConfigurationError(f"Unknown text source: {self.config.text_source}")

    def create_repository(self) -> IStatsRepository:
        """Create the configured repository. Repeated calls return the same instance."""
        if self._repository is None:
            self._repository = self._build_repository()
        return self._repository

    def _build_repository(self) -> IStatsRepository:
        sink = self.config.sink

        if sink == "memory":
            return InMemoryStatsRepository()

        if sink == "jsonl":
            self._logger.info(f"Writing results to {self.config.results_path}")
            return JsonlStatsRepository(self.config.results_path)

        if sink == "b2":
            credentials = B2Credentials(
                key_id=self.config.b2_key or "",
                application_key=self.config.b2_secret or "",
                bucket=self.config.b2_bucket or "",
                endpoint=self.config.b2_endpoint or DEFAULT_ENDPOINT,
            )
            self._logger.info(f"Writing results to s3://{credentials.bucket}/{self.config.b2_prefix}")
            return B2StatsRepository(credentials, prefix=self.config.b2_prefix)

        raise ConfigurationError(f"Unknown sink: {sink}")

    def create_processor(self, logger: Optional[ILogger] = None) -> StatsCommandProcessorService:
        return StatsCommandProcessorService(self.create_repository(), logger=logger)

    def create_dispatcher(
        self,
        logger: Optional[ILogger] = None,
        metrics: Optional[IMetricsCollector] = None
    ) -> BatchDispatcher:
        """Create a dispatcher wired to the configured source, handler and sink."""
        return BatchDispatcher(
            text_source=self.create_text_source(),
            executor=StatsCommandHandler(top_n=self.config.top_n),
            sink=self.create_processor(logger=logger),
            logger=logger,
            metrics=metrics,
        )
