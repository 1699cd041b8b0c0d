"""
Install orchestration for ecc-install.

Runs the destination initializer, the category installers and the
change committer in their fixed order and reports progress as it goes.
Used by the install commands.
"""

import logging
from dataclasses import dataclass, field
from typing import Dict, Any, Generator, List, Optional

from ..config import load_config, get_source_root, get_destination_root
from ..domain.category import Category, CATEGORIES
from ..domain.change_set import CommitResult, DEFAULT_MESSAGE_PREFIX
from ..domain.report import InitResult, SyncReport
from ..infra.git_client import GitClient
from ..infra.mirror import Mirror, create_mirror
from .category_service import CategoryInstaller
from .commit_service import CommitService
from .destination_service import DestinationService, IGNORE_FILENAME

logger = logging.getLogger(__name__)


@dataclass
class InstallSummary:
    """Everything one install run did."""
    init: Optional[InitResult] = None
    reports: List[SyncReport] = field(default_factory=list)
    commit: Optional[CommitResult] = None


class InstallService:
    """
    Service for installing asset categories into the destination root.

    Steps always run in the same order: initialize the destination,
    install the requested categories, then (full install only) commit.
    The first failing step raises and later steps do not run.

    Example:
        service = InstallService()

        for progress in service.install_all():
            print(progress)  # "agents: 2 new, 0 updated"

        summary = service.last_result
        print(summary.commit.status)
    """

    def __init__(
        self,
        config: Optional[Dict[str, Any]] = None,
        git_client: Optional[GitClient] = None,
        mirror: Optional[Mirror] = None
    ):
        """
        Initialize InstallService.

        Args:
            config: Configuration dict (loads default if None)
            git_client: GitClient instance (creates new if None)
            mirror: Mirror adapter (built from config if None)
        """
        self.config = config if config is not None else load_config()
        self.git = git_client or GitClient(
            binary=self.config.get('git', {}).get('binary', 'git')
        )
        self.mirror = mirror or create_mirror(self.config)

        self.source_root = get_source_root(self.config)
        self.dest_root = get_destination_root(self.config)

        prefix = str(self.config.get('commit', {}).get('message_prefix') or DEFAULT_MESSAGE_PREFIX)
        self.destination = DestinationService(git_client=self.git)
        self.installer = CategoryInstaller(self.source_root, self.dest_root, mirror=self.mirror)
        self.committer = CommitService(git_client=self.git, message_prefix=prefix)

        self.last_result: Optional[InstallSummary] = None

    def install_all(self) -> Generator[str, None, InstallSummary]:
        """
        Full install: initialize, every category, commit.

        Yields:
            Progress messages

        Returns:
            InstallSummary with the per-step results
        """
        summary = InstallSummary()
        self.last_result = summary

        yield from self._initialize(summary)
        for category in CATEGORIES:
            yield from self._install(category, summary)
        yield from self._commit(summary)

        return summary

    def install_category(self, category: Category) -> Generator[str, None, InstallSummary]:
        """
        Initialize and install one category. Nothing is committed.

        Yields:
            Progress messages

        Returns:
            InstallSummary with a single report
        """
        summary = InstallSummary()
        self.last_result = summary

        yield from self._initialize(summary)
        yield from self._install(category, summary)

        return summary

    def _initialize(self, summary: InstallSummary) -> Generator[str, None, None]:
        result = self.destination.initialize(self.dest_root)
        summary.init = result

        if result.created_ignore:
            yield f"Creating {IGNORE_FILENAME} in {self.dest_root}... done."
        if result.initialized_repo:
            yield f"Initializing git repository in {self.dest_root}... done."

    def _install(self, category: Category, summary: InstallSummary) -> Generator[str, None, None]:
        report = self.installer.install(category)
        summary.reports.append(report)
        yield report.summary_line()

    def _commit(self, summary: InstallSummary) -> Generator[str, None, None]:
        result = self.committer.commit(self.dest_root)
        summary.commit = result

        if result.committed:
            yield f"Committing changes in {self.dest_root}... done."
        else:
            yield "No changes to commit."
