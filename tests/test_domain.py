"""
Tests for domain objects: categories, sync reports and change sets.
"""

from pathlib import Path

from ecc_install.domain import (
    Category,
    CATEGORIES,
    ChangeSet,
    CommitResult,
    CommitStatus,
    SyncReport,
)


class TestCategory:
    """Tests for the Category enum."""

    def test_fixed_order(self):
        assert [c.value for c in CATEGORIES] == ['agents', 'commands', 'rules', 'skills']

    def test_directories(self, tmp_path):
        assert Category.RULES.source_dir(tmp_path) == tmp_path / 'rules'
        assert Category.RULES.dest_dir(Path('/home/u/.claude')) == Path('/home/u/.claude/rules')

    def test_values_are_directory_names(self):
        assert Category('skills') is Category.SKILLS


class TestSyncReport:
    """Tests for SyncReport."""

    def test_empty_report(self):
        report = SyncReport(category=Category.AGENTS)

        assert report.new_count == 0
        assert report.updated_count == 0
        assert report.summary_line() == "agents: 0 new, 0 updated"

    def test_summary_line(self):
        report = SyncReport(
            category=Category.AGENTS,
            new_files=['a.md', 'b.md'],
        )

        assert report.summary_line() == "agents: 2 new, 0 updated"

    def test_counts(self):
        report = SyncReport(
            category=Category.SKILLS,
            new_files=['tdd/SKILL.md'],
            updated_files=['review/SKILL.md', 'plan/SKILL.md'],
        )

        assert (report.new_count, report.updated_count) == (1, 2)
        assert report.summary_line() == "skills: 1 new, 2 updated"


class TestChangeSet:
    """Tests for tally and commit message rendering."""

    def test_tally_all_terms(self):
        changes = ChangeSet(added=['a', 'b'], modified=['c'], deleted=['d', 'e', 'f'])
        assert changes.tally() == "+2 ~1 -3"

    def test_tally_omits_zero_terms(self):
        assert ChangeSet(added=['a', 'b']).tally() == "+2"
        assert ChangeSet(modified=['a']).tally() == "~1"
        assert ChangeSet(added=['a'], deleted=['b']).tally() == "+1 -1"
        assert ChangeSet().tally() == ""

    def test_tally_matches_list_lengths(self):
        changes = ChangeSet(
            added=[f"a{i}" for i in range(5)],
            modified=[f"m{i}" for i in range(12)],
            deleted=[],
        )
        assert changes.tally() == "+5 ~12"
        assert "-" not in changes.tally()

    def test_message_added_only(self):
        changes = ChangeSet(added=['agents/planner.md', 'agents/reviewer.md'])

        message = changes.commit_message()

        assert message == (
            "Update from everything-claude-code (+2)\n"
            "\n"
            "New files:\n"
            "  + agents/planner.md\n"
            "  + agents/reviewer.md\n"
        )

    def test_message_all_sections(self):
        changes = ChangeSet(
            added=['skills/tdd/SKILL.md'],
            modified=['rules/style.md'],
            deleted=['commands/old.md'],
        )

        lines = changes.commit_message().splitlines()

        assert lines[0] == "Update from everything-claude-code (+1 ~1 -1)"
        assert lines[2] == "New files:"
        assert lines[3] == "  + skills/tdd/SKILL.md"
        assert lines[5] == "Modified files:"
        assert lines[6] == "  ~ rules/style.md"
        assert lines[8] == "Deleted files:"
        assert lines[9] == "  - commands/old.md"

    def test_message_skips_empty_sections(self):
        message = ChangeSet(modified=['rules/a.md']).commit_message()

        assert "New files:" not in message
        assert "Deleted files:" not in message
        assert "Modified files:" in message

    def test_message_preserves_order(self):
        changes = ChangeSet(added=['b.md', 'a.md'])
        lines = changes.commit_message().splitlines()
        assert lines[3:5] == ["  + b.md", "  + a.md"]

    def test_custom_prefix(self):
        changes = ChangeSet(deleted=['x'])
        assert changes.summary("Sync") == "Sync (-1)"

    def test_summary_without_tally(self):
        assert ChangeSet().summary() == "Update from everything-claude-code"


class TestCommitResult:
    def test_no_changes(self):
        result = CommitResult(status=CommitStatus.NO_CHANGES)

        assert result.committed is False
        assert result.change_set.tally() == ""
        assert result.message is None

    def test_committed(self):
        result = CommitResult(
            status=CommitStatus.COMMITTED,
            change_set=ChangeSet(added=['a']),
            message="msg",
        )

        assert result.committed is True
        assert result.change_set.tally() == '+1'
