"""
Category installer for ecc-install.

Mirrors one category directory from the source tree into the
destination root and reports how many files were new and how many
were updated. Files removed from the source are left in place at the
destination.
"""

import logging
from pathlib import Path
from typing import Optional

from ..domain.category import Category
from ..domain.report import SyncReport
from ..exit_codes import SourceNotFoundError
from ..infra.mirror import ChangeKind, Mirror, RsyncMirror

logger = logging.getLogger(__name__)


class CategoryInstaller:
    """
    Copy-if-newer install of a single category.

    Example:
        installer = CategoryInstaller(source_root, dest_root)
        report = installer.install(Category.AGENTS)
        print(report.summary_line())  # "agents: 2 new, 0 updated"
    """

    def __init__(
        self,
        source_root: Path,
        dest_root: Path,
        mirror: Optional[Mirror] = None
    ):
        """
        Initialize CategoryInstaller.

        Args:
            source_root: Directory containing the category directories
            dest_root: Destination root (e.g. ~/.claude)
            mirror: Mirror adapter (RsyncMirror if None)
        """
        self.source_root = Path(source_root)
        self.dest_root = Path(dest_root)
        self.mirror = mirror or RsyncMirror()

    def install(self, category: Category) -> SyncReport:
        """
        Mirror one category.

        Raises:
            SourceNotFoundError: the category has no source directory
            MirrorError: the mirroring tool failed
            OSError: the destination could not be written
        """
        source = category.source_dir(self.source_root)
        dest = category.dest_dir(self.dest_root)

        if not source.is_dir():
            raise SourceNotFoundError(str(source))

        dest.mkdir(parents=True, exist_ok=True)

        logger.info(f"Installing {category.value} from {source} to {dest} ({self.mirror.name})")
        entries = self.mirror.mirror(source, dest)

        report = SyncReport(category=category)
        for entry in entries:
            if entry.kind == ChangeKind.NEW:
                report.new_files.append(entry.path)
            else:
                report.updated_files.append(entry.path)

        return report
