"""Folder text sources."""

from folderstats.infrastructure.sources.placeholder import PlaceholderTextSource
from folderstats.infrastructure.sources.filesystem import FileSystemTextSource

__all__ = ['PlaceholderTextSource', 'FileSystemTextSource']
