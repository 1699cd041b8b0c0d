"""
Common CLI utilities and decorators for consistent command behavior.
"""

import sys
import click
from functools import wraps
from typing import Iterable

from rich.console import Console
from rich.markup import escape

from .exit_codes import (
    INTERRUPTED,
    get_exit_code_for_exception, CommandError
)

# Progress lines go to stdout; soft_wrap keeps long paths on one line
console = Console(highlight=False, soft_wrap=True)


def handle_errors(func):
    """
    Decorator that gives every command the same failure behavior:
    - CommandError: print the message, exit with its exit code
    - OSError: print the message, exit with the mapped code
    - KeyboardInterrupt: exit 130

    Messages go to stderr as ``Error: <message>``. Nothing is retried.
    """
    @wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except click.ClickException:
            # Click exceptions already have their exit code
            raise
        except KeyboardInterrupt:
            click.echo("Interrupted by user", err=True)
            sys.exit(INTERRUPTED)
        except (CommandError, OSError) as e:
            click.echo(f"Error: {e}", err=True)
            sys.exit(get_exit_code_for_exception(e))

    return wrapper


def print_progress(messages: Iterable[str]) -> None:
    """Print each progress message as soon as it is produced."""
    for message in messages:
        console.print(escape(message))
