"""
Destination initializer for ecc-install.

Makes sure the destination root exists, carries an ignore list for the
runtime files the consuming application writes there, and is a git
repository. Every step is skipped when its result is already present.
"""

import logging
from pathlib import Path
from typing import Optional

from ..domain.report import InitResult
from ..infra.git_client import GitClient

logger = logging.getLogger(__name__)

IGNORE_FILENAME = ".gitignore"

# Caches, logs and session state written by the application at runtime
IGNORE_PATTERNS = (
    "cache/",
    "debug/",
    "file-history/",
    "paste-cache/",
    "plugins/",
    "projects/",
    "session-env/",
    "statsig/",
    "todos/",
    "history.jsonl",
    "stats-cache.json",
    "shell-snapshots/",
    ".credentials.json",
)


def ignore_file_content() -> str:
    """Content written to a fresh ignore list."""
    return '\n'.join(IGNORE_PATTERNS) + '\n'


class DestinationService:
    """
    Idempotent setup of the destination root.

    Example:
        service = DestinationService()
        result = service.initialize(Path("~/.claude").expanduser())
        if result.initialized_repo:
            print("new repository")
    """

    def __init__(self, git_client: Optional[GitClient] = None):
        self.git = git_client or GitClient()

    def initialize(self, root: Path) -> InitResult:
        """
        Prepare root for installation.

        An existing ignore file is never rewritten, so user edits to it
        survive. Errors from mkdir, the file write or ``git init``
        propagate unchanged.
        """
        root = Path(root)
        result = InitResult(root=root)

        root.mkdir(parents=True, exist_ok=True)

        ignore_path = root / IGNORE_FILENAME
        if not ignore_path.exists():
            logger.info(f"Writing {ignore_path}")
            ignore_path.write_text(ignore_file_content())
            result.created_ignore = True

        if not self.git.is_git_repo(root):
            logger.info(f"Initializing git repository in {root}")
            self.git.init(root)
            result.initialized_repo = True

        return result
