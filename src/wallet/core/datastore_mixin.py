#!/usr/bin/env python3
"""
DataStore Mixin - Common functionality for file-backed DataStore implementations.

Provides shared implementation of metadata methods so each store only has to
answer the questions specific to its file format.
"""

from abc import abstractmethod
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path


@dataclass
class DataSummary:
    """Snapshot of a DataStore's on-disk state for display."""

    exists: bool
    last_updated: datetime | None
    age_days: int | None
    item_count: int | None
    size_bytes: int | None
    summary_text: str


class DataStoreMixin:
    """
    Mixin providing common DataStore functionality.

    Provides:
    - File stat helpers
    - Common metadata methods (age_days, to_summary)

    Subclasses must implement:
    - exists() -> bool
    - last_modified() -> datetime | None
    - item_count() -> int | None
    - size_bytes() -> int | None
    - summary_text() -> str
    """

    def _file_mtime(self, path: Path) -> datetime | None:
        """Modification time of a file, or None if it doesn't exist."""
        if not path.exists():
            return None
        return datetime.fromtimestamp(path.stat().st_mtime)

    def _file_size(self, path: Path) -> int | None:
        """Size of a file in bytes, or None if it doesn't exist."""
        if not path.exists():
            return None
        return path.stat().st_size

    @abstractmethod
    def exists(self) -> bool:
        """Check if data exists in storage."""
        ...

    @abstractmethod
    def last_modified(self) -> datetime | None:
        """Get timestamp of most recent data modification."""
        ...

    @abstractmethod
    def item_count(self) -> int | None:
        """Get count of items/records in stored data."""
        ...

    @abstractmethod
    def size_bytes(self) -> int | None:
        """Get total storage size in bytes."""
        ...

    @abstractmethod
    def summary_text(self) -> str:
        """Get human-readable summary of current data state."""
        ...

    def age_days(self) -> int | None:
        """
        Get age of data in days since last modification.

        Returns:
            Number of days since last modification, or None if data doesn't exist
        """
        last_mod = self.last_modified()
        if last_mod is None:
            return None
        return (datetime.now() - last_mod).days

    def to_summary(self) -> DataSummary:
        """Collect the store's metadata into a DataSummary."""
        return DataSummary(
            exists=self.exists(),
            last_updated=self.last_modified(),
            age_days=self.age_days(),
            item_count=self.item_count(),
            size_bytes=self.size_bytes(),
            summary_text=self.summary_text(),
        )
