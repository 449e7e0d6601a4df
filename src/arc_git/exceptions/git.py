"""git-related exceptions: commit listing, diffs, notes."""

from typing import List, Optional

from .base import ArcGitError


class GitError(ArcGitError):
    """Raised when a git command fails."""

    def __init__(self, args: List[str], reason: str, returncode: Optional[int] = None):
        details = {"reason": reason}
        if returncode is not None:
            details["exit"] = str(returncode)
        super().__init__(f"git {' '.join(args)} failed", details=details)
        self.git_args = args
        self.reason = reason
        self.returncode = returncode


class RetrievalError(ArcGitError):
    """Raised when the candidate commit list cannot be read.

    This aborts the whole run.
    """

    def __init__(self, reason: str):
        super().__init__(
            f"failed to get commits: {reason}",
            hint="Check that --repo points at a git repository and that --from/--to are valid revisions",
        )
        self.reason = reason


class NoteWriteError(GitError):
    """Raised when a note cannot be attached to a commit."""

    def __init__(self, commit_hash: str, ref: str, reason: str, returncode: Optional[int] = None):
        super().__init__(["notes", "--ref", ref, "add", commit_hash[:7]], reason, returncode)
        self.commit_hash = commit_hash
        self.ref = ref
