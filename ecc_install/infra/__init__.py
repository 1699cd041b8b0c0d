"""
Infrastructure layer for ecc-install.

Contains abstractions for external systems:
- GitClient: Git command execution
- Mirror: Copy-if-newer directory mirroring (rsync or shutil)

These provide clean interfaces that can be mocked for testing.
"""

from .git_client import GitClient, GitStatus
from .mirror import (
    ChangeKind,
    CopyMirror,
    Mirror,
    MirrorEntry,
    RsyncMirror,
    create_mirror,
    parse_itemized_changes,
)

__all__ = [
    'GitClient',
    'GitStatus',
    'ChangeKind',
    'CopyMirror',
    'Mirror',
    'MirrorEntry',
    'RsyncMirror',
    'create_mirror',
    'parse_itemized_changes',
]
