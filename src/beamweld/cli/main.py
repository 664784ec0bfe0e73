"""Typer CLI for offcut allocation."""

import logging
from pathlib import Path
from typing import Annotated

import typer

from beamweld.application import AllocateBeamsCommand
from beamweld.application.config import (
    BeamweldConfiguration,
    ConfigError,
    load_config,
    merge_config_with_cli,
)
from beamweld.domain import ReportStyle
from beamweld.infrastructure import AllocationReportFormatter, InputError

logger = logging.getLogger(__name__)

app = typer.Typer(
    name="beamweld",
    help="Build required beam lengths from welded offcuts.",
    add_completion=False,
)


def _configure_logging(level: str) -> None:
    """Send diagnostics to stderr so stdout carries only the report."""
    logging.basicConfig(
        level=logging.WARNING,
        format="%(asctime)s - %(levelname)s - %(name)s - %(message)s",
    )
    logging.getLogger("beamweld").setLevel(level)


@app.command()
def allocate(
    requirements_file: Annotated[
        Path,
        typer.Argument(help="Beam requirements file: size followed by weld budgets per line"),
    ],
    offcuts_file: Annotated[
        Path,
        typer.Argument(help="Offcuts file: whitespace-separated piece lengths"),
    ],
    style: Annotated[
        ReportStyle | None,
        typer.Option("--style", "-s", help="Report style: verbose or terse"),
    ] = None,
    units: Annotated[
        str | None,
        typer.Option("--units", help="Unit suffix printed after lengths (default: mm)"),
    ] = None,
    config_file: Annotated[
        Path | None,
        typer.Option("--config", "-c", help="Path to JSON configuration file"),
    ] = None,
    log_level: Annotated[
        str | None,
        typer.Option("--log-level", help="Diagnostic log level: DEBUG, INFO, WARNING, ERROR"),
    ] = None,
) -> None:
    """Allocate offcuts to every beam requirement and print the report.

    Beams are processed longest first. Each weld budget listed for a beam is
    tried in order against the same shared pool, and pieces used by a
    successful plan are not available to later attempts.

    Examples:
        beamweld beams.txt offcuts.txt
        beamweld beams.txt offcuts.txt --style terse
        beamweld beams.txt offcuts.txt --config beamweld.json --log-level DEBUG
    """
    config = BeamweldConfiguration()
    if config_file is not None:
        try:
            config = load_config(config_file)
        except ConfigError as e:
            typer.echo(f"Error: {e}", err=True)
            raise typer.Exit(code=1)

    try:
        config = merge_config_with_cli(config, style=style, units=units, log_level=log_level)
    except ValueError as e:
        # pydantic's ValidationError is a ValueError
        typer.echo(f"Error: invalid option: {e}", err=True)
        raise typer.Exit(code=1)

    _configure_logging(config.logging.level)

    command = AllocateBeamsCommand()
    try:
        output = command.execute_files(requirements_file, offcuts_file)
    except InputError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)

    formatter = AllocationReportFormatter(style=config.report.style, units=config.report.units)
    typer.echo(formatter.format(output))


def main() -> None:
    app(prog_name="beamweld")


if __name__ == "__main__":
    main()
