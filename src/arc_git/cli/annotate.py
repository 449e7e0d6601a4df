"""annotate command: write AI notes for a range of commits."""

from pathlib import Path
from typing import Optional

import typer
from rich.markup import escape

from ..annotate import AnnotateOptions, run_annotate
from ..config import load_config
from ..exceptions import ArcGitError
from ..formatters import OutputMode, get_formatter
from ..logging_config import setup_logging
from . import app
from ._common import err_console, print_error


def _non_empty_rev(value: str) -> str:
    if not value.strip():
        raise typer.BadParameter("revision must not be empty")
    return value


@app.command()
def annotate(
    since: int = typer.Option(
        10,
        "--since",
        help="Annotate last N commits",
        min=1,
    ),
    from_rev: Optional[str] = typer.Option(
        None,
        "--from",
        help="Start commit (e.g., HEAD~20); takes precedence over --since",
    ),
    to_rev: str = typer.Option(
        "HEAD",
        "--to",
        help="End commit",
        callback=_non_empty_rev,
    ),
    provider: Optional[str] = typer.Option(
        None,
        "--provider",
        help="AI provider (anthropic, claude, openrouter, openai)",
    ),
    model: Optional[str] = typer.Option(
        None,
        "--model",
        help="Model to use",
    ),
    api_key: Optional[str] = typer.Option(
        None,
        "--api-key",
        help="API key",
    ),
    dry_run: bool = typer.Option(
        False,
        "--dry-run",
        help="Preview annotations without saving",
    ),
    force: bool = typer.Option(
        False,
        "--force",
        help="Re-annotate existing commits",
    ),
    output: OutputMode = typer.Option(
        OutputMode.TEXT,
        "--output",
        "-o",
        help="Output format: text (default), table, json, yaml, quiet",
        case_sensitive=False,
    ),
    config: Optional[Path] = typer.Option(
        None,
        "--config",
        "-c",
        help="Configuration file path (TOML format, [ai] table)",
        exists=True,
        file_okay=True,
        dir_okay=False,
        readable=True,
    ),
    repo: Path = typer.Option(
        Path("."),
        "--repo",
        "-C",
        help="Repository to annotate",
        file_okay=False,
        dir_okay=True,
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable verbose (DEBUG) logging",
    ),
):
    """
    Annotate git commits with AI-generated notes explaining the changes.

    Each commit's diff and message are sent to the AI provider and the
    reply is stored as a git note under the "ai" notes ref. Commits that
    already have a note are skipped unless --force is given.

    [bold cyan]Examples:[/bold cyan]

      arc-git annotate --since 10

      arc-git annotate --from HEAD~5 --to HEAD

      arc-git annotate --since 20 --provider openrouter

      arc-git annotate --since 5 --dry-run

      arc-git annotate --since 10 --force

      arc-git annotate --since 20 --output json
    """
    # Structured and quiet output keep stderr to errors unless -v is given.
    logger = setup_logging(verbose=verbose, quiet=not verbose and not output.shows_progress)

    try:
        cfg = load_config(
            config_file=config,
            project_dir=repo,
            provider=provider,
            model=model,
            api_key=api_key,
        )
        options = AnnotateOptions(
            since=since,
            from_rev=from_rev or None,
            to_rev=to_rev,
            dry_run=dry_run,
            force=force,
            namespace=cfg.namespace,
        )
        run_annotate(cfg, options, get_formatter(output), repo_path=str(repo))

    except ArcGitError as e:
        logger.debug("%s: %s", e.__class__.__name__, e)
        print_error(e)
        raise typer.Exit(1)

    except KeyboardInterrupt:
        err_console.print("\n[yellow]Annotation interrupted[/yellow]")
        raise typer.Exit(130)

    except Exception as e:
        logger.exception("Unexpected error during annotation")
        err_console.print(f"[red]Unexpected error:[/red] {escape(str(e))}")
        raise typer.Exit(1)
