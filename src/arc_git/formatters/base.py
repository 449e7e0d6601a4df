"""Base formatter interface for arc-git output rendering."""

from abc import ABC, abstractmethod

from ..models import AnnotationOutcome, RunSummary
from ..git.models import Commit


class BaseFormatter(ABC):
    """Abstract base class for output formatters.

    The progress hooks are called by the pipeline while it runs and do
    nothing by default; only render() is called once at the end.
    """

    def on_begin(self) -> None:
        """Called before commits are listed."""

    def on_start(self, total: int) -> None:
        """Called once the candidate commits are known."""

    def on_commit(self, index: int, total: int, commit: Commit) -> None:
        """Called before a commit is processed (index is 1-based)."""

    def on_generating(self, commit: Commit) -> None:
        """Called right before the backend is asked for an annotation."""

    def on_outcome(self, commit: Commit, outcome: AnnotationOutcome) -> None:
        """Called once per commit with its final outcome."""

    @abstractmethod
    def render(self, summary: RunSummary) -> None:
        """Write the final summary to stdout."""

    @abstractmethod
    def format(self, summary: RunSummary) -> str:
        """Return formatted string representation of the summary."""
