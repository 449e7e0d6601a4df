"""Commit annotation pipeline."""

from .generator import AnnotationGenerator
from .pipeline import AnnotateOptions, Annotator, run_annotate

__all__ = [
    "AnnotateOptions",
    "AnnotationGenerator",
    "Annotator",
    "run_annotate",
]
