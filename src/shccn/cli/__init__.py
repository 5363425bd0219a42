"""CLI entry point."""

import typer

app = typer.Typer(
    name="shccn",
    help="shccn - line counts and cyclomatic complexity for shell scripts",
    add_completion=False,
    rich_markup_mode="rich",
)

# Import the command module to register it
from .analyze import main as _main_command  # noqa: F401, E402


def main() -> None:
    app()
