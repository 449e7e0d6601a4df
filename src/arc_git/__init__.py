"""
arc-git - AI-written notes for git history

Annotates commits with short technical explanations generated by an LLM and
stores them as git notes under refs/notes/ai, viewable with
``git log --show-notes=ai``.
"""

__version__ = "0.1.0"

from .annotate import AnnotateOptions, Annotator, run_annotate
from .config import AIConfig, load_config, validate_config
from .models import AnnotationOutcome, AnnotationStatus, RunSummary

__all__ = [
    "AIConfig",
    "AnnotateOptions",
    "AnnotationOutcome",
    "AnnotationStatus",
    "Annotator",
    "RunSummary",
    "load_config",
    "run_annotate",
    "validate_config",
]
