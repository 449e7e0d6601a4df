"""The annotate workflow: select, gate, diff, generate, write, report.

Commits are processed one at a time in the order git lists them. A failure
at any stage ends that commit's processing with a ``failed`` outcome and the
loop moves on; only config validation, commit listing, and summary encoding
abort the run.
"""

from dataclasses import dataclass
from typing import List, Optional

from ..ai.client import GenerativeClient, LiteLLMClient
from ..config import AIConfig, validate_config
from ..exceptions import GenerationError, GitError
from ..formatters.base import BaseFormatter
from ..formatters.quiet_formatter import QuietFormatter
from ..git.models import Commit
from ..git.repository import GitRepository, VersionControl
from ..logging_config import get_logger
from ..models import (
    ALREADY_ANNOTATED,
    NO_DIFF,
    AnnotationOutcome,
    AnnotationStatus,
    RunSummary,
)
from .generator import AnnotationGenerator

logger = get_logger(__name__)


@dataclass(frozen=True)
class AnnotateOptions:
    """What to annotate and how, as given on the command line."""

    since: int = 10
    from_rev: Optional[str] = None
    to_rev: str = "HEAD"
    dry_run: bool = False
    force: bool = False
    namespace: str = "ai"

    def __post_init__(self) -> None:
        if self.from_rev is None and self.since < 1:
            raise ValueError("since must be at least 1")
        if not self.to_rev:
            raise ValueError("to_rev must not be empty")


class Annotator:
    """Runs the per-commit annotation state machine over a commit range."""

    def __init__(
        self,
        repo: VersionControl,
        generator: AnnotationGenerator,
        options: AnnotateOptions,
        formatter: Optional[BaseFormatter] = None,
    ):
        self.repo = repo
        self.generator = generator
        self.options = options
        self.formatter = formatter or QuietFormatter()

    def select_commits(self) -> List[Commit]:
        """List candidate commits; RetrievalError propagates."""
        return self.repo.enumerate_commits(
            since=self.options.since,
            from_rev=self.options.from_rev,
            to_rev=self.options.to_rev,
        )

    def is_annotated(self, commit: Commit) -> bool:
        return self.repo.note_exists(commit.hash, self.options.namespace)

    def process(self, commit: Commit) -> AnnotationOutcome:
        """Take one commit through gate, diff, generation and note write."""
        short = commit.short_hash
        ns = self.options.namespace

        if not self.options.force:
            try:
                annotated = self.is_annotated(commit)
            except GitError as e:
                return AnnotationOutcome(
                    short, AnnotationStatus.FAILED, message=f"failed to check note: {e}"
                )
            if annotated:
                return AnnotationOutcome(short, AnnotationStatus.SKIPPED, message=ALREADY_ANNOTATED)

        try:
            diff = self.repo.commit_diff(commit.hash)
        except GitError as e:
            return AnnotationOutcome(
                short, AnnotationStatus.FAILED, message=f"failed to get diff: {e}"
            )

        if not diff:
            return AnnotationOutcome(short, AnnotationStatus.SKIPPED, message=NO_DIFF)

        self.formatter.on_generating(commit)
        try:
            annotation = self.generator.generate(commit, diff)
        except GenerationError as e:
            return AnnotationOutcome(
                short, AnnotationStatus.FAILED, message=f"failed to generate annotation: {e}"
            )

        if self.options.dry_run:
            return AnnotationOutcome(short, AnnotationStatus.PREVIEW, annotation=annotation)

        try:
            self.repo.add_note(commit.hash, ns, annotation, force=self.options.force)
        except GitError as e:
            return AnnotationOutcome(
                short, AnnotationStatus.FAILED, message=f"failed to add note: {e}"
            )

        return AnnotationOutcome(short, AnnotationStatus.SUCCESS, annotation=annotation)

    def run(self) -> RunSummary:
        """Annotate every candidate commit and return the summary.

        Raises:
            RetrievalError: If the commit list cannot be read
        """
        self.formatter.on_begin()
        commits = self.select_commits()
        self.formatter.on_start(len(commits))

        summary = RunSummary(
            total=len(commits), dry_run=self.options.dry_run, namespace=self.options.namespace
        )
        for index, commit in enumerate(commits, start=1):
            self.formatter.on_commit(index, len(commits), commit)
            outcome = self.process(commit)
            if outcome.status is AnnotationStatus.FAILED:
                logger.debug("%s failed: %s", commit.short_hash, outcome.message)
            summary.add(outcome, commit_hash=commit.hash)
            self.formatter.on_outcome(commit, outcome)

        logger.debug(
            "Run complete: %d annotated, %d skipped, %d failed of %d",
            summary.annotated,
            summary.skipped,
            summary.failed,
            summary.total,
        )
        return summary


def run_annotate(
    config: AIConfig,
    options: AnnotateOptions,
    formatter: BaseFormatter,
    repo: Optional[VersionControl] = None,
    client: Optional[GenerativeClient] = None,
    repo_path: str = ".",
) -> RunSummary:
    """Validate config, run the annotation loop, and render the summary.

    Raises:
        ConfigurationError: If the AI configuration is invalid
        RetrievalError: If the commit list cannot be read
        OutputEncodingError: If the summary cannot be encoded
    """
    validate_config(config)
    logger.debug("AI config: %s", config.redacted())

    annotator = Annotator(
        repo=repo or GitRepository(repo_path),
        generator=AnnotationGenerator(
            client or LiteLLMClient(config),
            model=config.model,
            max_diff_chars=config.max_diff_chars,
        ),
        options=options,
        formatter=formatter,
    )
    summary = annotator.run()
    formatter.render(summary)
    return summary
