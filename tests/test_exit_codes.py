"""
Tests for exit codes and the error hierarchy.
"""

import pytest

from ecc_install.exit_codes import (
    CONFIG_ERROR,
    GENERAL_ERROR,
    INTERRUPTED,
    IO_ERROR,
    PERMISSION_ERROR,
    TOOL_ERROR,
    CommandError,
    ConfigError,
    GitCommandError,
    MirrorError,
    SourceNotFoundError,
    ToolInvocationError,
    get_exit_code_for_exception,
)


class TestExitCodeMapping:

    @pytest.mark.parametrize("exc, code", [
        (PermissionError("denied"), PERMISSION_ERROR),
        (OSError(28, "No space left on device"), IO_ERROR),
        (IsADirectoryError("dir"), IO_ERROR),
        (FileNotFoundError("missing"), IO_ERROR),
        (KeyboardInterrupt(), INTERRUPTED),
        (RuntimeError("bug"), GENERAL_ERROR),
    ])
    def test_builtin_exceptions(self, exc, code):
        assert get_exit_code_for_exception(exc) == code

    def test_command_errors_use_their_code(self):
        assert get_exit_code_for_exception(ConfigError("bad")) == CONFIG_ERROR
        assert get_exit_code_for_exception(GitCommandError(['git', 'init'], 1)) == TOOL_ERROR
        assert get_exit_code_for_exception(SourceNotFoundError('/x/agents')) == GENERAL_ERROR


class TestToolInvocationError:

    def test_message_includes_command_and_stderr(self):
        error = GitCommandError(
            ['git', 'commit', '-q', '-F', '-'], 128,
            "Author identity unknown\n",
        )

        assert isinstance(error, ToolInvocationError)
        assert isinstance(error, CommandError)
        assert error.tool == 'git'
        assert error.returncode == 128
        assert error.stderr == "Author identity unknown\n"
        assert str(error) == "git failed (exit 128): git commit -q -F -\nAuthor identity unknown"

    def test_without_returncode(self):
        error = MirrorError(['rsync', '-a'], stderr="rsync executable not found")

        assert str(error) == "rsync failed: rsync -a\nrsync executable not found"
        assert error.exit_code == TOOL_ERROR

    def test_source_not_found(self):
        error = SourceNotFoundError('/checkout/agents')

        assert error.path == '/checkout/agents'
        assert 'Source directory not found' in str(error)
