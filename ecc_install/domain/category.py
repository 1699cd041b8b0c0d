"""
Asset categories installed by ecc-install.
"""

from enum import Enum
from pathlib import Path


class Category(Enum):
    """
    One of the fixed asset kinds.

    Each category is a directory of the same name under both the source
    root and the destination root. Declaration order is install order.
    """
    AGENTS = "agents"
    COMMANDS = "commands"
    RULES = "rules"
    SKILLS = "skills"

    def source_dir(self, source_root: Path) -> Path:
        """Directory holding this category in the source tree."""
        return Path(source_root) / self.value

    def dest_dir(self, dest_root: Path) -> Path:
        """Directory holding this category under the destination root."""
        return Path(dest_root) / self.value


CATEGORIES = tuple(Category)
