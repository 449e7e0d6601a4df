"""Base exception for arc-git."""

from typing import Dict, Optional


class ArcGitError(Exception):
    """Base exception for all arc-git errors."""

    def __init__(
        self,
        message: str,
        details: Optional[Dict[str, str]] = None,
        hint: Optional[str] = None,
    ):
        super().__init__(message)
        self.message = message
        self.details = details or {}
        self.hint = hint

    def __str__(self) -> str:
        if self.details:
            details_str = ", ".join(f"{k}={v}" for k, v in self.details.items())
            return f"{self.message} ({details_str})"
        return self.message
