"""
Utility functions for the fancy-logs command line.

  - Version lookup from installed package metadata
  - Header panel shown before the demo output
"""

from importlib.metadata import PackageNotFoundError, version

from rich import box
from rich.panel import Panel

from .config import CONFIG_FILE, LoggerConfig
from .console import console


def get_version() -> str:
    """Get the installed package version from Python package metadata.

    Returns "dev" when running from source without installing.
    """
    try:
        return version("fancy-logs")
    except PackageNotFoundError:
        return "dev"


def _on_off(value: bool) -> str:
    return "[green]on[/green]" if value else "[red]off[/red]"


def print_header(config: LoggerConfig):
    """Print a bordered panel with the version and the active configuration."""
    header_text = f"""[bold]fancy-logs[/bold] [dim]v{get_version()}[/dim]
[dim]Config file: {CONFIG_FILE}[/dim]

  color      {_on_off(config.color)}
  icon       {_on_off(config.icon)}
  underline  {_on_off(config.underline)}
  fake       {_on_off(config.fake)}"""

    console.print(Panel(header_text, box=box.ROUNDED, expand=False))
