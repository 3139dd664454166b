"""Folder text statistics batch runner."""

__version__ = "0.1.0"
