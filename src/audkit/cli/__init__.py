"""
audkit CLI Package.

- create.py: Package creation commands
- utils.py: Shared utilities
"""

import typer

from audkit.cli.create import create_dart_package_command
from audkit.cli.utils import version_callback

app = typer.Typer(
    help="""audkit – scaffolding for inlavigo packages

Commands:
  • create-dart-package
    → Create, configure and commit a new dart package
""",
    no_args_is_help=True,
)


@app.callback()
def main_callback(
    version: bool | None = typer.Option(
        None,
        "--version",
        "-v",
        callback=version_callback,
        is_eager=True,
        help="Show version and environment information",
    ),
) -> None:
    """audkit CLI main callback for global options."""
    pass


app.command(name="create-dart-package")(create_dart_package_command)


def main() -> None:
    app(standalone_mode=True)


__all__ = ["app", "main", "create_dart_package_command", "version_callback"]
