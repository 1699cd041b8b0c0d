"""
Service layer for ecc-install.

Contains business logic that orchestrates domain objects and infrastructure:
- DestinationService: Destination root, ignore list and repository setup
- CategoryInstaller: Copy-if-newer install of one category
- CommitService: Stage, classify and commit destination changes
- InstallService: Runs the steps above in order with progress reporting

Services are the primary API for commands to use.
"""

from .destination_service import DestinationService
from .category_service import CategoryInstaller
from .commit_service import CommitService
from .install_service import InstallService, InstallSummary

__all__ = [
    'DestinationService',
    'CategoryInstaller',
    'CommitService',
    'InstallService',
    'InstallSummary',
]
