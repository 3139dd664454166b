"""Application layer package."""

from folderstats.application.dispatcher import BatchDispatcher
from folderstats.application.processor import StatsCommandProcessorService
from folderstats.application.factories import DispatcherFactory

__all__ = ["BatchDispatcher", "StatsCommandProcessorService", "DispatcherFactory"]
