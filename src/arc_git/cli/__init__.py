"""CLI entry point: registers all subcommands."""

import typer

from .. import __version__
from ._common import console

app = typer.Typer(
    name="arc-git",
    help="Git integration with AI-powered history annotation.",
    add_completion=False,
    rich_markup_mode="rich",
    no_args_is_help=True,
)


def _version_callback(value: bool) -> None:
    if value:
        console.print(f"[bold cyan]arc-git[/bold cyan] version [green]{__version__}[/green]")
        raise typer.Exit(0)


@app.callback()
def main(
    version: bool = typer.Option(
        False,
        "--version",
        help="Show version and exit",
        callback=_version_callback,
        is_eager=True,
    ),
):
    """
    Git integration with AI-powered features for history analysis and
    automated documentation of code changes.

    [bold cyan]Examples:[/bold cyan]

      arc-git annotate --since 10

      arc-git annotate --from HEAD~5 --to HEAD

      git log --show-notes=ai
    """


# Import subcommands to register them
from .annotate import annotate as _annotate  # noqa: F401, E402
