"""Generative backend access for arc-git."""

from .client import CompletionResponse, GenerativeClient, LiteLLMClient
from .prompts import ANNOTATE_COMMIT_MODEL, annotate_commit

__all__ = [
    "ANNOTATE_COMMIT_MODEL",
    "CompletionResponse",
    "GenerativeClient",
    "LiteLLMClient",
    "annotate_commit",
]
