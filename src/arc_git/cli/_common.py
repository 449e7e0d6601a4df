"""Shared CLI helpers."""

from rich.console import Console
from rich.markup import escape

from ..exceptions import ArcGitError

console = Console(highlight=False, soft_wrap=True)
err_console = Console(stderr=True, highlight=False, soft_wrap=True)


def print_error(error: ArcGitError) -> None:
    """Print a fatal error (and its hint, if any) to stderr."""
    err_console.print(f"[red]Error:[/red] {escape(str(error))}")
    if error.hint:
        err_console.print(f"[dim]Hint: {escape(error.hint)}[/dim]")
