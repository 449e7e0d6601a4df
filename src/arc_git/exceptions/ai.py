"""Generative backend exceptions."""

from typing import Optional

from .base import ArcGitError


class GenerationError(ArcGitError):
    """Raised when the generative backend does not return usable text."""

    def __init__(self, reason: str, model: Optional[str] = None):
        details = {}
        if model:
            details["model"] = model
        super().__init__(f"AI request failed: {reason}", details=details)
        self.reason = reason
        self.model = model
