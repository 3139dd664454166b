"""Protocol definitions for dependency inversion."""

from typing import Protocol, List, Sequence

from folderstats.domain.models import StatsCommand, StatsCommandType


class ITextSource(Protocol):
    """Interface for resolving a folder into its text content."""

    async def resolve(self, folder_id: str) -> str:
        """Return the text content of a folder."""
        ...


class ICommandExecutor(Protocol):
    """Interface for running a stats command against text."""

    async def execute(self, command_type: StatsCommandType, text: str) -> List[str]:
        """Run a command and return its ordered result lines."""
        ...


class IResultsSink(Protocol):
    """Interface for recording the results of one (folder, command) pair."""

    async def record(
        self,
        folder_id: str,
        command_type: StatsCommandType,
        results: Sequence[str]
    ) -> None:
        """Record command results for a folder."""
        ...


class IStatsRepository(Protocol):
    """Interface for persisting stats command records."""

    def add(self, record: StatsCommand) -> None:
        """Persist a single record."""
        ...

    def list_for_folder(self, folder_id: str) -> List[StatsCommand]:
        """Return all records stored for a folder, oldest first."""
        ...


class ILogger(Protocol):
    """Interface for logging."""

    def debug(self, message: str, **kwargs) -> None:
        """Log debug message."""
        ...

    def info(self, message: str, **kwargs) -> None:
        """Log info message."""
        ...

    def warning(self, message: str, **kwargs) -> None:
        """Log warning message."""
        ...

    def error(self, message: str, **kwargs) -> None:
        """Log error message."""
        ...

    def exception(self, message: str, **kwargs) -> None:
        """Log exception with traceback."""
        ...


class IMetricsCollector(Protocol):
    """Interface for collecting metrics."""

    def start_timer(self, name: str) -> None:
        """Start a named timer."""
        ...

    def stop_timer(self, name: str) -> float:
        """Stop a named timer and return elapsed time."""
        ...

    def increment_counter(self, name: str, amount: int = 1) -> None:
        """Increment a named counter."""
        ...

    def get_summary(self) -> dict:
        """Get summary of all metrics."""
        ...
