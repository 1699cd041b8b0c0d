"""
Result objects for the destination and category install steps.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import List

from .category import Category


@dataclass
class InitResult:
    """What the destination initializer had to do."""
    root: Path
    created_ignore: bool = False
    initialized_repo: bool = False


@dataclass
class SyncReport:
    """
    Outcome of mirroring one category.

    Paths are relative to the category directory. A file lands in exactly
    one list: ``new_files`` if it did not exist at the destination before
    the copy, ``updated_files`` if it was overwritten in place.
    """
    category: Category
    new_files: List[str] = field(default_factory=list)
    updated_files: List[str] = field(default_factory=list)

    @property
    def new_count(self) -> int:
        return len(self.new_files)

    @property
    def updated_count(self) -> int:
        return len(self.updated_files)

    def summary_line(self) -> str:
        """One-line summary, e.g. ``agents: 2 new, 0 updated``."""
        return f"{self.category.value}: {self.new_count} new, {self.updated_count} updated"
