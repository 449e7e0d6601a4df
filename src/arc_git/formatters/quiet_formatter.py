"""Quiet formatter: no progress, no summary."""

from ..models import RunSummary
from .base import BaseFormatter


class QuietFormatter(BaseFormatter):
    """Render nothing; the exit code is the only signal."""

    def render(self, summary: RunSummary) -> None:
        return None

    def format(self, summary: RunSummary) -> str:
        return ""
