"""Stats record storage."""

from folderstats.infrastructure.storage.repository import InMemoryStatsRepository, JsonlStatsRepository
from folderstats.infrastructure.storage.b2_repository import B2Credentials, B2StatsRepository

__all__ = ['InMemoryStatsRepository', 'JsonlStatsRepository', 'B2Credentials', 'B2StatsRepository']
