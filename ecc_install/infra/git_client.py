"""
Git client infrastructure for ecc-install.

Provides a clean abstraction over git command execution.
All git operations go through this client, making them:
- Easy to mock for testing
- Consistent in error handling
- Isolated from business logic

Unlike a read-only status probe, every call here is part of an install
run, so a failing git command raises GitCommandError instead of being
reported as an empty result.
"""

import subprocess
from dataclasses import dataclass
from typing import Optional, List
from pathlib import Path
import logging

from ..exit_codes import GitCommandError

logger = logging.getLogger(__name__)

# Diff filters understood by staged_paths()
ADDED = "A"
MODIFIED = "M"
DELETED = "D"


@dataclass
class GitStatus:
    """Result of git status --porcelain."""
    clean: bool = True

    @classmethod
    def from_porcelain(cls, output: str) -> "GitStatus":
        """Parse ``git status --porcelain`` (v1) output."""
        return cls(clean=not any(line.strip() for line in output.split('\n')))


class GitClient:
    """
    Abstraction over git commands.

    Example:
        client = GitClient()
        if not client.is_git_repo(root):
            client.init(root)
        if not client.status(root).clean:
            client.add_all(root)
            client.commit(root, "message")
    """

    def __init__(self, binary: str = "git"):
        """
        Initialize GitClient.

        Args:
            binary: git executable to run (default: "git" on PATH)
        """
        self.binary = binary

    def _run(
        self,
        args: List[str],
        cwd: Path,
        input: Optional[str] = None,
    ) -> str:
        """
        Run a git command and return its stdout.

        Args:
            args: Arguments after the git executable
            cwd: Working directory
            input: Text fed to the command's stdin

        Raises:
            GitCommandError: git is missing or exited non-zero
        """
        cmd = [self.binary] + list(args)
        logger.debug(f"Running {' '.join(cmd)} in {cwd}")

        try:
            result = subprocess.run(
                cmd,
                cwd=str(cwd),
                input=input,
                capture_output=True,
                text=True,
            )
        except FileNotFoundError as e:
            raise GitCommandError(cmd, stderr=f"{self.binary} executable not found") from e

        if result.returncode != 0:
            raise GitCommandError(cmd, result.returncode, result.stderr)

        return result.stdout

    def is_git_repo(self, path: Path) -> bool:
        """Check if path already holds repository metadata."""
        return (Path(path) / ".git").exists()

    def init(self, path: Path) -> None:
        """Create an empty repository at path."""
        self._run(["init", "-q"], cwd=path)

    def status(self, path: Path) -> GitStatus:
        """
        Get working-tree status.

        Args:
            path: Path to git repository

        Returns:
            GitStatus; ``clean`` is True when there is nothing to commit
        """
        output = self._run(["status", "--porcelain"], cwd=path)
        return GitStatus.from_porcelain(output)

    def add_all(self, path: Path) -> None:
        """Stage every change in the working tree, deletions included."""
        self._run(["add", "-A"], cwd=path)

    def staged_paths(self, path: Path, diff_filter: str) -> List[str]:
        """
        List staged paths with the given diff status.

        Renames are reported as a deletion plus an addition so that
        every staged path falls under A, M or D.

        Args:
            path: Path to git repository
            diff_filter: One of ADDED, MODIFIED, DELETED

        Returns:
            Paths relative to the repository root, in git's order.
            An empty list when nothing matches.
        """
        output = self._run(
            ["diff", "--cached", "--name-only", "--no-renames", "-z",
             f"--diff-filter={diff_filter}"],
            cwd=path,
        )
        return [name for name in output.split('\0') if name]

    def commit(self, path: Path, message: str) -> None:
        """Commit the index with a multi-line message read from stdin."""
        self._run(["commit", "-q", "-F", "-"], cwd=path, input=message)

