"""Rich terminal formatter for arc-git."""

from typing import Optional

from rich.console import Console
from rich.markup import escape

from ..models import (
    ALREADY_ANNOTATED,
    NO_DIFF,
    AnnotationOutcome,
    AnnotationStatus,
    RunSummary,
)
from ..git.models import Commit
from .base import BaseFormatter


def _sentence(message: str) -> str:
    return message[:1].upper() + message[1:]


class TextFormatter(BaseFormatter):
    """Progress lines while running, then a short summary block."""

    def __init__(self, console: Optional[Console] = None):
        self.console = console or Console(highlight=False, soft_wrap=True)

    def on_begin(self) -> None:
        self.console.print("Starting git history annotation...")

    def on_start(self, total: int) -> None:
        if total == 0:
            self.console.print("No commits to annotate.")
        else:
            self.console.print(f"Found {total} commits to annotate")

    def on_commit(self, index: int, total: int, commit: Commit) -> None:
        self.console.print()
        self.console.print(
            f"\\[{index}/{total}] Processing [bold]{commit.short_hash}[/bold] "
            f"[dim]{escape(commit.message)}[/dim]"
        )

    def on_generating(self, commit: Commit) -> None:
        self.console.print("  Generating AI annotation...")

    def on_outcome(self, commit: Commit, outcome: AnnotationOutcome) -> None:
        status = outcome.status
        if status is AnnotationStatus.SKIPPED:
            if outcome.message == ALREADY_ANNOTATED:
                self.console.print(
                    "  [yellow]Already annotated (use --force to re-annotate)[/yellow]"
                )
            elif outcome.message == NO_DIFF:
                self.console.print("  [yellow]No diff (merge commit?), skipping[/yellow]")
            else:
                self.console.print(f"  [yellow]Skipped: {escape(outcome.message or '')}[/yellow]")
        elif status is AnnotationStatus.FAILED:
            self.console.print(f"  [red]{escape(_sentence(outcome.message or 'failed'))}[/red]")
        elif status is AnnotationStatus.PREVIEW:
            self.console.print()
            self.console.print(f"[bold cyan]--- Annotation for {commit.short_hash} ---[/bold cyan]")
            self.console.print(escape(outcome.annotation or ""))
        else:
            self.console.print("  [green]Annotated successfully[/green]")

    def render(self, summary: RunSummary) -> None:
        if summary.total == 0:
            return
        self.console.print()
        self.console.print("[bold]=== Annotation Complete ===[/bold]")
        self.console.print(f"Annotated: [green]{summary.annotated}[/green]")
        self.console.print(f"Skipped: [yellow]{summary.skipped}[/yellow]")
        self.console.print(f"Failed: [red]{summary.failed}[/red]")
        self.console.print()
        if summary.dry_run:
            self.console.print("(Dry run - no notes were added)")
            self.console.print("Run without --dry-run to save annotations")
        else:
            self.console.print(
                f"View annotations with: [cyan]git log --show-notes={escape(summary.namespace)}[/cyan]"
            )

    def format(self, summary: RunSummary) -> str:
        if summary.total == 0:
            return ""
        lines = [
            "=== Annotation Complete ===",
            f"Annotated: {summary.annotated}",
            f"Skipped: {summary.skipped}",
            f"Failed: {summary.failed}",
            "",
        ]
        if summary.dry_run:
            lines.append("(Dry run - no notes were added)")
            lines.append("Run without --dry-run to save annotations")
        else:
            lines.append(f"View annotations with: git log --show-notes={summary.namespace}")
        return "\n".join(lines)
