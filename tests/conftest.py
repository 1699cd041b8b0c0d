"""
Shared fixtures: in-memory stand-ins for git and the mirror tool, and an
isolated environment for tests that run the real git binary.
"""

from pathlib import Path

import pytest

from ecc_install.exit_codes import GitCommandError
from ecc_install.infra.git_client import GitStatus
from ecc_install.infra.mirror import Mirror


class FakeGitClient:
    """
    In-memory GitClient.

    ``status_lines`` is what ``git status --porcelain`` would print and
    ``staged`` maps a diff filter (A/M/D) to the paths it returns.
    Commands named in ``fail_on`` raise GitCommandError.
    """

    def __init__(self):
        self.repos = set()
        self.status_lines = []
        self.staged = {'A': [], 'M': [], 'D': []}
        self.fail_on = set()
        self.commits = []
        self.calls = []

    def _record(self, name, path):
        self.calls.append((name, Path(path)))
        if name in self.fail_on:
            raise GitCommandError(['git', name], 128, f"fatal: {name} failed")

    @property
    def call_names(self):
        return [name for name, _ in self.calls]

    def is_git_repo(self, path):
        return Path(path) in self.repos

    def init(self, path):
        self._record('init', path)
        self.repos.add(Path(path))

    def status(self, path):
        self._record('status', path)
        return GitStatus.from_porcelain('\n'.join(self.status_lines))

    def add_all(self, path):
        self._record('add', path)

    def staged_paths(self, path, diff_filter):
        self._record('diff', path)
        return list(self.staged.get(diff_filter, []))

    def commit(self, path, message):
        self._record('commit', path)
        self.commits.append(message)
        self.status_lines = []


class FakeMirror(Mirror):
    """Mirror returning canned entries keyed by source directory name."""

    name = "fake"

    def __init__(self, results=None):
        self.results = results or {}
        self.calls = []

    def mirror(self, source, dest):
        self.calls.append((Path(source), Path(dest)))
        return list(self.results.get(Path(source).name, []))


@pytest.fixture
def fake_git():
    return FakeGitClient()


@pytest.fixture
def fake_mirror():
    return FakeMirror()


@pytest.fixture
def git_env(monkeypatch, tmp_path):
    """Author identity and an empty global config for real git runs."""
    gitconfig = tmp_path / 'gitconfig'
    gitconfig.write_text('[init]\n\tdefaultBranch = main\n')
    monkeypatch.setenv('GIT_CONFIG_GLOBAL', str(gitconfig))
    monkeypatch.setenv('GIT_CONFIG_NOSYSTEM', '1')
    monkeypatch.setenv('GIT_AUTHOR_NAME', 'Test User')
    monkeypatch.setenv('GIT_AUTHOR_EMAIL', 'test@example.com')
    monkeypatch.setenv('GIT_COMMITTER_NAME', 'Test User')
    monkeypatch.setenv('GIT_COMMITTER_EMAIL', 'test@example.com')
    return gitconfig


@pytest.fixture
def source_tree(tmp_path):
    """A checkout with all four category directories, one agent in it."""
    root = tmp_path / 'checkout'
    for name in ('agents', 'commands', 'rules', 'skills'):
        (root / name).mkdir(parents=True)
    (root / 'agents' / 'planner.md').write_text('# planner\n')
    return root
