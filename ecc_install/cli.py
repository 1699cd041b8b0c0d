#!/usr/bin/env python3

import click

from ecc_install import __version__
from ecc_install.commands.install import install_handler, CATEGORY_HANDLERS
from ecc_install.commands.misc import clean_handler, help_handler


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name='ecc-install')
@click.pass_context
def cli(ctx):
    """ecc-install - Install everything-claude-code assets into ~/.claude.

    Copies agents, commands, rules and skills from the current directory,
    skipping files that are already up to date, and commits the result in
    a git repository at the destination. Runs 'install' when no command
    is given.
    """
    if ctx.invoked_subcommand is None:
        ctx.invoke(install_handler)


cli.add_command(install_handler, name='install')
for handler in CATEGORY_HANDLERS.values():
    cli.add_command(handler)
cli.add_command(clean_handler, name='clean')
cli.add_command(help_handler, name='help')


def main():
    cli()

if __name__ == "__main__":
    main()
