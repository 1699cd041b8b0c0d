"""
ecc-install - Installer for everything-claude-code assets.

Copies the agents, commands, rules and skills directories of a checkout
into ~/.claude, copying only files that are new or newer than the
installed ones, and commits the result in a git repository kept at
~/.claude so every install can be inspected and reverted.

Quick Start:
    from ecc_install import InstallService

    service = InstallService()
    for message in service.install_all():
        print(message)   # "agents: 2 new, 0 updated", ...

    summary = service.last_result
    print(summary.commit.change_set.tally())   # "+2 ~1"

Domain Objects:
    Category - One of agents, commands, rules, skills
    SyncReport - New/updated files for one category
    ChangeSet - Added/modified/deleted paths in a commit

Services:
    DestinationService - Destination root, .gitignore and git init
    CategoryInstaller - Copy-if-newer install of one category
    CommitService - Stage, classify and commit
    InstallService - All of the above in order
"""

__version__ = "0.1.0"

# Domain objects
from .domain import (
    Category,
    CATEGORIES,
    InitResult,
    SyncReport,
    ChangeSet,
    CommitResult,
    CommitStatus,
)

# Services
from .services import (
    DestinationService,
    CategoryInstaller,
    CommitService,
    InstallService,
    InstallSummary,
)

# Configuration
from .config import load_config

__all__ = [
    # Version
    "__version__",
    # Domain objects
    "Category",
    "CATEGORIES",
    "InitResult",
    "SyncReport",
    "ChangeSet",
    "CommitResult",
    "CommitStatus",
    # Services
    "DestinationService",
    "CategoryInstaller",
    "CommitService",
    "InstallService",
    "InstallSummary",
    # Configuration
    "load_config",
]
