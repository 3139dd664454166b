"""Presentation layer package."""

from folderstats.presentation.cli import main

__all__ = ["main"]
