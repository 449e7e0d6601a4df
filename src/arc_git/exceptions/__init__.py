"""Exception hierarchy for arc-git."""

from .ai import GenerationError
from .base import ArcGitError
from .config import ConfigurationError, InvalidConfigError
from .git import GitError, NoteWriteError, RetrievalError
from .output import OutputEncodingError

__all__ = [
    "ArcGitError",
    "ConfigurationError",
    "InvalidConfigError",
    "GitError",
    "RetrievalError",
    "NoteWriteError",
    "GenerationError",
    "OutputEncodingError",
]
