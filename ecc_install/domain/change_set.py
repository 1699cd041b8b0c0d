"""
Change set domain objects for ecc-install.

A change set is the added / modified / deleted classification of the
paths staged in the destination repository. It knows how to render
itself as a commit message; it does no I/O.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional

DEFAULT_MESSAGE_PREFIX = "Update from everything-claude-code"


class CommitStatus(Enum):
    """Terminal state of a commit attempt."""
    COMMITTED = "committed"
    NO_CHANGES = "no_changes"


@dataclass
class ChangeSet:
    """
    Staged paths grouped by diff status.

    Each list keeps the order git reported it in (lexicographic by path).
    """
    added: List[str] = field(default_factory=list)
    modified: List[str] = field(default_factory=list)
    deleted: List[str] = field(default_factory=list)

    def tally(self) -> str:
        """
        Compact count string such as ``+2 ~1 -3``.

        Terms with a zero count are left out entirely, so an add-only
        change set renders as just ``+2``.
        """
        terms = []
        if self.added:
            terms.append(f"+{len(self.added)}")
        if self.modified:
            terms.append(f"~{len(self.modified)}")
        if self.deleted:
            terms.append(f"-{len(self.deleted)}")
        return ' '.join(terms)

    def summary(self, prefix: str = DEFAULT_MESSAGE_PREFIX) -> str:
        """First line of the commit message."""
        tally = self.tally()
        if not tally:
            return prefix
        return f"{prefix} ({tally})"

    def commit_message(self, prefix: str = DEFAULT_MESSAGE_PREFIX) -> str:
        """
        Build the full commit message.

        Example:
            Update from everything-claude-code (+2 ~1)

            New files:
              + agents/planner.md
              + agents/reviewer.md

            Modified files:
              ~ rules/style.md
        """
        sections = [self.summary(prefix)]

        for title, marker, paths in (
            ("New files:", "+", self.added),
            ("Modified files:", "~", self.modified),
            ("Deleted files:", "-", self.deleted),
        ):
            if not paths:
                continue
            lines = [title] + [f"  {marker} {path}" for path in paths]
            sections.append('\n'.join(lines))

        return '\n\n'.join(sections) + '\n'


@dataclass
class CommitResult:
    """Result of the change committer."""
    status: CommitStatus
    change_set: ChangeSet = field(default_factory=ChangeSet)
    message: Optional[str] = None

    @property
    def committed(self) -> bool:
        return self.status == CommitStatus.COMMITTED
