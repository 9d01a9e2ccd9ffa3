# ABOUTME: The `bookbrowse theme` command for showing the resolved start-up theme.
# ABOUTME: Reports day or night and the colour pair it applies.

import click
from rich.console import Console

from bookbrowse.cli.console_sink import RichSink
from bookbrowse.core import THEME_COLORS
from bookbrowse.core.theme import ThemeResolver, ThemeState


@click.command("theme")
def theme() -> None:
    """Show the theme picked from the environment's colour-scheme preference."""
    console = Console()
    resolver = ThemeResolver(RichSink(console), ThemeState())
    current = resolver.initialize()
    colors = THEME_COLORS[current]

    console.print(f"Theme: [bold]{current.value}[/bold]")
    console.print(f"  dark:  rgb{colors.dark}")
    console.print(f"  light: rgb{colors.light}")
