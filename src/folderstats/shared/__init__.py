"""Shared utilities package."""

from folderstats.shared.logging import setup_logger, get_logger, LoggerAdapter
from folderstats.shared.metrics import MetricsCollector

__all__ = [
    "setup_logger",
    "get_logger",
    "LoggerAdapter",
    "MetricsCollector",
]
