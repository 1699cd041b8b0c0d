"""
Install commands for ecc-install.

``install`` copies every category and commits the result;
``install-<category>`` copies a single category and does not commit.
"""

import click

from ..cli_utils import handle_errors, print_progress
from ..config import load_config, setup_logging
from ..domain.category import Category, CATEGORIES
from ..services.install_service import InstallService


def _create_service() -> InstallService:
    config = load_config()
    setup_logging(config)
    return InstallService(config=config)


@click.command('install')
@handle_errors
def install_handler():
    """
    Install all components (agents, commands, rules, skills).

    Copies only files that are new or newer than the installed copy,
    then commits the changes in the destination repository with a
    message listing every added, modified and deleted file.
    """
    service = _create_service()
    print_progress(service.install_all())


def _category_handler(category: Category) -> click.Command:
    """Build the install-<category> command for one category."""

    @handle_errors
    def handler():
        service = _create_service()
        print_progress(service.install_category(category))

    handler.__name__ = f"install_{category.value}_handler"
    return click.command(
        f'install-{category.value}',
        help=f"Install {category.value} only (no commit).",
    )(handler)


CATEGORY_HANDLERS = {category: _category_handler(category) for category in CATEGORIES}
