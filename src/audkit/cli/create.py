"""
Package creation commands for audkit CLI.

- create-dart-package: Scaffold a new dart package
"""

from __future__ import annotations

import json
from pathlib import Path

import typer
from rich.console import Console
from rich.table import Table

from audkit.cli.utils import checkout_directory, configure_logging
from audkit.core.config import ScaffoldConfig, load_config
from audkit.core.create_impl import CreateReport, PackageCreator, build_spec
from audkit.core.errors import ScaffoldError

console = Console()
err_console = Console(stderr=True)


def _print_failure(error: ScaffoldError, stage: str | None = None) -> None:
    where = f" in stage [bold]{stage}[/bold]" if stage else ""
    err_console.print(f"\n[red]Package creation failed{where}[/red] ({error.kind.value})")
    err_console.print(str(error), markup=False, highlight=False, soft_wrap=True)


def _print_stage_table(report: CreateReport) -> None:
    table = Table(title="Stages", show_header=True)
    table.add_column("Stage")
    table.add_column("Status")
    table.add_column("Duration", justify="right")

    colors = {"passed": "green", "failed": "red", "skipped": "yellow"}
    for stage in report.stages:
        color = colors.get(stage.status.value, "white")
        table.add_row(
            stage.name,
            f"[{color}]{stage.status.value}[/{color}]",
            f"{stage.duration_ms} ms",
        )
    err_console.print(table)


def create_dart_package_command(
    name: str = typer.Option(..., "--name", "-n", help="Package name"),
    description: str = typer.Option(
        ..., "--description", "-d", help="Package description. Minimum 60 chars long."
    ),
    output: str | None = typer.Option(
        None, "--output", "-o", help="Output directory (defaults to the checkout directory)"
    ),
    open_source: bool = typer.Option(
        False, "--open-source/--no-open-source", "-s", help="Is the package open source?"
    ),
    prepare_github: bool = typer.Option(
        True, "--prepare-github/--no-prepare-github", "-p", help="Prepares pushing the repo to GitHub."
    ),
    force: bool = typer.Option(
        False, "--force/--no-force", "-f", help="Force recreation. Existing package will be deleted."
    ),
    config_file: str | None = typer.Option(
        None, "--config", "-c", help="TOML file with an [audkit] table"
    ),
    json_output: bool = typer.Option(False, "--json", help="Print the run report as JSON"),
    verbose: bool = typer.Option(False, "--verbose", "-V", help="Log every external command"),
) -> None:
    """
    Create a new dart package for our repository.

    Runs dart create, overlays the shared assets, prepares pubspec.yaml,
    README.md and CHANGELOG.md, installs dev dependencies, fixes and formats
    the code and makes the initial git commit.

    Examples:
        audkit create-dart-package -n gg_widgets -s -d "..."
        audkit create-dart-package -n aud_widgets -d "..." --no-prepare-github
        audkit create-dart-package -n gg_widgets -s -d "..." -o ~/dev --force
    """
    configure_logging(verbose)

    try:
        config = load_config(Path(config_file).expanduser()) if config_file else ScaffoldConfig()
    except ScaffoldError as e:
        _print_failure(e)
        raise typer.Exit(code=1)

    try:
        spec = build_spec(
            output_dir=Path(output) if output else checkout_directory(),
            package_name=name,
            description=description,
            is_open_source=open_source,
            prepare_github=prepare_github,
            force=force,
        )
    except ScaffoldError as e:
        _print_failure(e)
        raise typer.Exit(code=1)

    # Keep stdout clean for the JSON report
    progress_console = err_console if json_output else console

    def progress(msg: str) -> None:
        progress_console.print(msg, markup=False, highlight=False, soft_wrap=True)

    report = PackageCreator(spec, config=config, progress_callback=progress).run()

    if json_output:
        typer.echo(json.dumps(report.to_dict(), indent=2))

    if report.error is not None:
        failed = report.failed_stage
        _print_failure(report.error, failed.name if failed else None)
        if verbose:
            _print_stage_table(report)
        raise typer.Exit(code=1)
