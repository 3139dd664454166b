"""Configuration package."""

from folderstats.infrastructure.config.loader import ConfigLoader, StatsConfig

__all__ = ["ConfigLoader", "StatsConfig"]
