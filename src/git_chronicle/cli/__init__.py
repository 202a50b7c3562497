"""CLI entry point: registers all subcommands."""

from typing import Optional

import typer

from .. import __version__
from ._common import console

app = typer.Typer(
    name="git-chronicle",
    help="git-chronicle - Repository History Analytics",
    add_completion=False,
    rich_markup_mode="rich",
)


def _version_callback(value: bool) -> None:
    if value:
        console.print(f"git-chronicle {__version__}")
        raise typer.Exit(0)


@app.callback()
def _root(
    version: Optional[bool] = typer.Option(
        None,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
):
    """Analyze how a git repository grew, who changed it, and where it is hot."""


def main() -> None:
    app()


# Import subcommands to register them
from .report import report as _report  # noqa: F401, E402
