"""Per-commit annotation outcomes and the run summary."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional, Set


class AnnotationStatus(str, Enum):
    SUCCESS = "success"
    SKIPPED = "skipped"
    FAILED = "failed"
    PREVIEW = "preview"


# Skip reasons reported in AnnotationOutcome.message
ALREADY_ANNOTATED = "already annotated"
NO_DIFF = "no diff (merge commit?)"


@dataclass(frozen=True)
class AnnotationOutcome:
    hash: str  # short (7-char) hash
    status: AnnotationStatus
    message: Optional[str] = None
    annotation: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {"hash": self.hash, "status": self.status.value}
        if self.message:
            data["message"] = self.message
        if self.annotation:
            data["annotation"] = self.annotation
        return data


@dataclass
class RunSummary:
    """Outcomes of one annotate run, in processing order.

    Previews count as annotated, so ``annotated + skipped + failed`` equals
    ``total`` once every candidate has an outcome.
    """

    total: int
    dry_run: bool = False
    namespace: str = "ai"  # notes ref; not part of the encoded summary
    results: List[AnnotationOutcome] = field(default_factory=list)
    _seen: Set[str] = field(default_factory=set, init=False, repr=False, compare=False)

    def add(self, outcome: AnnotationOutcome, commit_hash: Optional[str] = None) -> None:
        """Record one outcome. Short hashes can collide, so pass the full hash."""
        key = commit_hash or outcome.hash
        if key in self._seen:
            raise ValueError(f"duplicate outcome for commit {key}")
        if len(self.results) >= self.total:
            raise ValueError(f"more outcomes than candidates ({self.total})")
        self._seen.add(key)
        self.results.append(outcome)

    def _count(self, *statuses: AnnotationStatus) -> int:
        return sum(1 for r in self.results if r.status in statuses)

    @property
    def annotated(self) -> int:
        return self._count(AnnotationStatus.SUCCESS, AnnotationStatus.PREVIEW)

    @property
    def skipped(self) -> int:
        return self._count(AnnotationStatus.SKIPPED)

    @property
    def failed(self) -> int:
        return self._count(AnnotationStatus.FAILED)

    @property
    def complete(self) -> bool:
        return len(self.results) == self.total

    def to_dict(self) -> Dict[str, Any]:
        return {
            "total": self.total,
            "annotated": self.annotated,
            "skipped": self.skipped,
            "failed": self.failed,
            "dry_run": self.dry_run,
            "results": [r.to_dict() for r in self.results],
        }
