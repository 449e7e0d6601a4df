"""Output rendering exceptions."""

from .base import ArcGitError


class OutputEncodingError(ArcGitError):
    """Raised when a run summary cannot be encoded in the requested format."""

    def __init__(self, fmt: str, reason: str):
        super().__init__(
            f"failed to encode {fmt.upper()}: {reason}",
            hint="Try --output text instead",
        )
        self.fmt = fmt
        self.reason = reason
