"""Turn a commit and its diff into annotation text."""

from typing import Optional

from ..ai.client import GenerativeClient
from ..ai.prompts import ANNOTATE_COMMIT_MODEL, annotate_commit
from ..exceptions import GenerationError
from ..git.models import Commit
from ..logging_config import get_logger

logger = get_logger(__name__)

TRUNCATION_MARKER = "\n... [diff truncated: {shown} of {total} characters shown]\n"


class AnnotationGenerator:
    """Build the annotation prompt, call the backend, trim the reply."""

    def __init__(
        self,
        client: GenerativeClient,
        model: Optional[str] = None,
        max_diff_chars: Optional[int] = None,
    ):
        self.client = client
        self.model = model or ANNOTATE_COMMIT_MODEL
        self.max_diff_chars = max_diff_chars

    def _prepare_diff(self, commit: Commit, diff: str) -> str:
        if self.max_diff_chars is None or len(diff) <= self.max_diff_chars:
            return diff
        logger.warning(
            "Diff for %s is %d characters; sending the first %d",
            commit.short_hash,
            len(diff),
            self.max_diff_chars,
        )
        return diff[: self.max_diff_chars] + TRUNCATION_MARKER.format(
            shown=self.max_diff_chars, total=len(diff)
        )

    def generate(self, commit: Commit, diff: str) -> str:
        """Return the trimmed annotation for one commit.

        Raises:
            GenerationError: If the backend fails or replies with blank text
        """
        system, user = annotate_commit(
            commit.short_hash,
            commit.message,
            commit.author,
            commit.date,
            self._prepare_diff(commit, diff),
        )
        response = self.client.complete(system=system, prompt=user, model=self.model)
        text = response.text.strip()
        if not text:
            raise GenerationError("empty response", model=self.model)
        return text
