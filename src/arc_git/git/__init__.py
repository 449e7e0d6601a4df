"""git access for arc-git: commit listing, diffs and notes."""

from .models import Commit
from .repository import GitRepository, VersionControl, parse_log

__all__ = ["Commit", "GitRepository", "VersionControl", "parse_log"]
