"""
Change committer for ecc-install.

Stages everything in the destination repository, classifies the staged
paths as added / modified / deleted and commits them with a message
listing each path.
"""

import logging
from pathlib import Path
from typing import Optional

from ..domain.change_set import ChangeSet, CommitResult, CommitStatus, DEFAULT_MESSAGE_PREFIX
from ..infra.git_client import GitClient, ADDED, MODIFIED, DELETED

logger = logging.getLogger(__name__)


class CommitService:
    """
    Commit pending changes in the destination repository.

    A clean working tree is not an error: commit() returns a result
    with status NO_CHANGES and touches neither the index nor history.

    Example:
        service = CommitService()
        result = service.commit(Path("~/.claude").expanduser())
        if result.committed:
            print(result.change_set.tally())
    """

    def __init__(
        self,
        git_client: Optional[GitClient] = None,
        message_prefix: str = DEFAULT_MESSAGE_PREFIX
    ):
        self.git = git_client or GitClient()
        self.message_prefix = message_prefix

    def collect_changes(self, root: Path) -> ChangeSet:
        """Classify what is currently staged in root."""
        return ChangeSet(
            added=self.git.staged_paths(root, ADDED),
            modified=self.git.staged_paths(root, MODIFIED),
            deleted=self.git.staged_paths(root, DELETED),
        )

    def commit(self, root: Path) -> CommitResult:
        """
        Stage and commit all working-tree changes under root.

        Raises:
            GitCommandError: status, add or commit failed (for example
                when no author identity is configured)
        """
        root = Path(root)

        status = self.git.status(root)
        if status.clean:
            logger.info(f"No changes in {root}")
            return CommitResult(status=CommitStatus.NO_CHANGES)

        self.git.add_all(root)
        change_set = self.collect_changes(root)
        message = change_set.commit_message(self.message_prefix)

        logger.info(f"Committing {change_set.tally() or 'changes'} in {root}")
        self.git.commit(root, message)

        return CommitResult(
            status=CommitStatus.COMMITTED,
            change_set=change_set,
            message=message,
        )
