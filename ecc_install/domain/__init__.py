"""
Domain layer for ecc-install.

Contains pure domain objects with no I/O or side effects:
- Category: The fixed set of asset kinds (agents, commands, rules, skills)
- SyncReport: New/updated files copied for one category
- ChangeSet: Added/modified/deleted paths staged for commit

These objects provide serialization methods for JSON output.
"""

from .category import Category, CATEGORIES
from .report import InitResult, SyncReport
from .change_set import ChangeSet, CommitResult, CommitStatus, DEFAULT_MESSAGE_PREFIX

__all__ = [
    'Category',
    'CATEGORIES',
    'InitResult',
    'SyncReport',
    'ChangeSet',
    'CommitResult',
    'CommitStatus',
    'DEFAULT_MESSAGE_PREFIX',
]
