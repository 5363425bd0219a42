"""Main analysis command."""

from pathlib import Path
from typing import List, Optional

import typer
from rich.markup import escape

from .. import __version__
from ..api import analyze
from ..exceptions import ShccnError
from ..formatters import get_formatter
from ..logging_config import setup_logging
from . import app
from ._common import VALID_FORMATS, console, resolve_config


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"shccn version {__version__}")
        raise typer.Exit(0)


@app.command(no_args_is_help=True)
def main(
    paths: List[Path] = typer.Argument(
        ...,
        help="Shell scripts or directories to analyze",
    ),
    fmt: str = typer.Option(
        "text",
        "--format",
        "-f",
        help="Output format: text (default), rich, json, csv",
    ),
    output: Optional[Path] = typer.Option(
        None,
        "--output",
        "-o",
        help="Write the report to this file instead of stdout",
        dir_okay=False,
    ),
    config: Optional[Path] = typer.Option(
        None,
        "--config",
        "-c",
        help="Configuration file path (TOML format)",
        exists=True,
        file_okay=True,
        dir_okay=False,
        readable=True,
    ),
    fail_above: Optional[int] = typer.Option(
        None,
        "--fail-above",
        help="Exit 1 if any function's CCN exceeds this value (for CI gating)",
        min=1,
    ),
    sort_by: Optional[str] = typer.Option(
        None,
        "--sort",
        "-s",
        help="Function order: name (file order), ccn, code",
    ),
    workers: Optional[int] = typer.Option(
        None,
        "--workers",
        "-w",
        help="Number of parallel workers (default: sequential)",
        min=1,
        max=32,
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable verbose (DEBUG) logging",
    ),
    quiet: bool = typer.Option(
        False,
        "--quiet",
        "-q",
        help="Suppress all but ERROR logging",
    ),
    log_file: Optional[Path] = typer.Option(
        None,
        "--log-file",
        help="Also append log records to this file",
        dir_okay=False,
    ),
    version: bool = typer.Option(
        False,
        "--version",
        help="Show version and exit",
        callback=_version_callback,
        is_eager=True,
    ),
):
    """
    Count lines and measure per-function complexity of shell scripts.

    [bold cyan]Examples:[/bold cyan]

      shccn deploy.sh

      shccn scripts/ --format rich --sort ccn

      shccn . --format json | jq .

      shccn scripts/ --fail-above 10
    """
    if verbose and quiet:
        console.print("[red]Error:[/red] --verbose and --quiet are mutually exclusive")
        raise typer.Exit(1)

    if fmt not in VALID_FORMATS:
        console.print(f"[red]Error:[/red] --format must be one of: {', '.join(VALID_FORMATS)}")
        raise typer.Exit(1)

    try:
        settings = resolve_config(
            config=config, workers=workers, sort_by=sort_by, verbose=verbose, quiet=quiet
        )
    except ShccnError as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)

    quiet = settings.verbosity == "quiet"
    verbose = settings.verbosity == "verbose"
    logger = setup_logging(settings.verbosity, log_file=log_file)
    logger.debug(f"Loaded config: {settings}")

    try:
        result = analyze(paths, config=settings)
        formatter = get_formatter(fmt)

        if output is not None:
            output.write_text(formatter.format(result, settings.sort_by), encoding="utf-8")
            if not quiet:
                console.print(f"[green]Report written to[/green] {escape(str(output))}")
        else:
            formatter.render(result, settings.sort_by)

    except ShccnError as e:
        logger.error(f"{e.__class__.__name__}: {e}")
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)

    except KeyboardInterrupt:
        logger.info("Analysis interrupted by user")
        console.print("\n[yellow]Analysis interrupted[/yellow]")
        raise typer.Exit(130)

    except OSError as e:
        logger.exception("Could not write report")
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)

    except Exception as e:
        logger.exception("Unexpected error during analysis")
        console.print(f"[red]Unexpected error:[/red] {escape(str(e))}")
        if verbose:
            console.print_exception()
        raise typer.Exit(1)

    if fail_above is not None and result.max_ccn > fail_above:
        if not quiet:
            console.print(
                f"[red]FAIL:[/red] Max CCN {result.max_ccn} exceeds threshold {fail_above}"
            )
        raise typer.Exit(1)

    if result.errors:
        raise typer.Exit(1)
