"""Domain layer package."""

from .models import StatsCommand, StatsCommandType
from .exceptions import (
    DomainException,
    ConfigurationError,
    FolderNotFoundError,
    UnsupportedCommandError,
    StorageError,
)
from .protocols import (
    ITextSource,
    ICommandExecutor,
    IResultsSink,
    IStatsRepository,
    ILogger,
    IMetricsCollector,
)

__all__ = [
    # Models
    "StatsCommand",
    "StatsCommandType",
    # Exceptions
    "DomainException",
    "ConfigurationError",
    "FolderNotFoundError",
    "UnsupportedCommandError",
    "StorageError",
    # Protocols
    "ITextSource",
    "ICommandExecutor",
    "IResultsSink",
    "IStatsRepository",
    "ILogger",
    "IMetricsCollector",
]
