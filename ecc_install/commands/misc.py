"""
Fixed-output commands: clean and help.
"""

import click

USAGE = """\
ecc-install - install everything-claude-code assets into ~/.claude

Usage: ecc-install [command]

Commands:
  install          Install all components (agents, commands, rules, skills)
  install-agents   Install agents only
  install-commands Install commands only
  install-rules    Install rules only
  install-skills   Install skills only
  clean            Clean local build artifacts (there are none)
  help             Show this help message

Only files newer than installed versions are copied.
Changes are auto-committed with detailed file listing."""


@click.command('clean')
def clean_handler():
    """Clean local build artifacts (there are none)."""
    click.echo("Nothing to clean.")


@click.command('help')
def help_handler():
    """Show this help message."""
    click.echo(USAGE)
