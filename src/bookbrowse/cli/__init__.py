# ABOUTME: CLI package for Bookbrowse, built on Click.
# ABOUTME: Defines the root command group and registers subcommands.

import click

from bookbrowse.cli.commands import (
    browse_cmd,
    info_cmd,
    ls_cmd,
    options_cmd,
    search_cmd,
    theme_cmd,
)


@click.group()
@click.version_option(package_name="bookbrowse")
def cli() -> None:
    """Bookbrowse - a terminal browser for a book catalog."""


cli.add_command(ls_cmd.ls)
cli.add_command(search_cmd.search)
cli.add_command(info_cmd.info)
cli.add_command(options_cmd.authors)
cli.add_command(options_cmd.genres)
cli.add_command(theme_cmd.theme)
cli.add_command(browse_cmd.browse)
