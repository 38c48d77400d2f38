"""Installer exceptions."""

from pathlib import Path


class DotfilesError(Exception):
    """Base class for installer errors."""


class SourceNotFoundError(DotfilesError):
    """The source configuration tree does not exist."""

    def __init__(self, source_dir: Path):
        self.source_dir = source_dir
        super().__init__(f"Source directory not found: {source_dir}")
