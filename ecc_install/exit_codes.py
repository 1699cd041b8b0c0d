"""
Standard exit codes for ecc-install commands.

Following Unix/POSIX conventions for command-line tools.
"""
from typing import Optional

# Standard POSIX exit codes
GENERAL_ERROR = 1        # General errors

# Application-specific exit codes (64-113 are typically available)
TOOL_ERROR = 65          # External tool (git, rsync) failed
CONFIG_ERROR = 66        # Configuration file error
PERMISSION_ERROR = 67    # Insufficient permissions
IO_ERROR = 74            # Filesystem error (disk full, read-only, ...)
INTERRUPTED = 130        # Terminated by Ctrl+C (SIGINT)

# Exit code mappings for common exceptions
EXCEPTION_EXIT_CODES = {
    'PermissionError': PERMISSION_ERROR,
    'IsADirectoryError': IO_ERROR,
    'NotADirectoryError': IO_ERROR,
    'OSError': IO_ERROR,
    'ConfigError': CONFIG_ERROR,
    'KeyboardInterrupt': INTERRUPTED,
}


def get_exit_code_for_exception(exc: BaseException) -> int:
    """
    Get the appropriate exit code for an exception.

    Args:
        exc: The exception that occurred

    Returns:
        Appropriate exit code
    """
    if isinstance(exc, CommandError):
        return exc.exit_code
    # Most specific class wins, so PermissionError beats OSError
    for cls in type(exc).__mro__:
        if cls.__name__ in EXCEPTION_EXIT_CODES:
            return EXCEPTION_EXIT_CODES[cls.__name__]
    return GENERAL_ERROR


class CommandError(Exception):
    """
    Exception that commands can raise to indicate specific exit codes.
    """
    def __init__(self, message: str, exit_code: int = GENERAL_ERROR):
        super().__init__(message)
        self.exit_code = exit_code


class ConfigError(CommandError):
    """Raised when there's a configuration error."""
    def __init__(self, message: str):
        super().__init__(message, CONFIG_ERROR)


class SourceNotFoundError(CommandError):
    """Raised when a category's source directory does not exist."""
    def __init__(self, path: str):
        super().__init__(f"Source directory not found: {path}", GENERAL_ERROR)
        self.path = path


class ToolInvocationError(CommandError):
    """
    Raised when an external tool exits with a failure.

    The tool's own stderr is kept verbatim in ``stderr`` and appended
    to the message.
    """
    def __init__(self, tool: str, args: list, returncode: Optional[int] = None,
                 stderr: str = ""):
        command = ' '.join(str(a) for a in args)
        message = f"{tool} failed"
        if returncode is not None:
            message += f" (exit {returncode})"
        message += f": {command}"
        if stderr:
            message += f"\n{stderr.rstrip()}"
        super().__init__(message, TOOL_ERROR)
        self.tool = tool
        self.args_list = list(args)
        self.returncode = returncode
        self.stderr = stderr


class GitCommandError(ToolInvocationError):
    """Raised when a git command fails."""
    def __init__(self, args: list, returncode: Optional[int] = None, stderr: str = ""):
        super().__init__("git", args, returncode, stderr)


class MirrorError(ToolInvocationError):
    """Raised when the directory mirroring tool fails."""
    def __init__(self, args: list, returncode: Optional[int] = None, stderr: str = ""):
        super().__init__("rsync", args, returncode, stderr)
