"""
audkit CLI Utilities.

Shared utility functions used across CLI modules.
"""

import logging
import platform
import shutil
from pathlib import Path

import typer

from audkit._version import get_version

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def version_callback(value: bool) -> None:
    """Display version and environment information."""
    if value:
        typer.echo(f"audkit {get_version()}")
        typer.echo(f"Python {platform.python_version()} ({platform.python_implementation()})")

        # External tools the create pipeline delegates to
        for tool in ("dart", "git"):
            location = shutil.which(tool)
            typer.echo(f"{tool}: {location or 'not found'}")

        raise typer.Exit()


def configure_logging(verbose: bool = False) -> None:
    """Send audkit log records to stderr; DEBUG includes every command line."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format=LOG_FORMAT,
        force=True,
    )


def checkout_directory(start: Path | None = None) -> Path:
    """
    Directory where repositories are checked out side by side.

    This is the parent of the git checkout containing ``start`` (the
    current directory by default), or ``start`` itself when it is not
    inside a checkout.
    """
    current = (start or Path.cwd()).resolve()
    for candidate in (current, *current.parents):
        if (candidate / ".git").exists():
            return candidate.parent
    return current
