"""Read commits and read/write notes via the git CLI."""

import os
import subprocess
import tempfile
from abc import ABC, abstractmethod
from pathlib import Path
from typing import List, Optional

from ..exceptions import GitError, NoteWriteError, RetrievalError
from ..logging_config import get_logger
from .models import Commit

logger = get_logger(__name__)

# One record per commit: hash, "author <email>", date, subject
LOG_FORMAT = "%H%n%an <%ae>%n%ad%n%s"
_RECORD_LINES = 4


class VersionControl(ABC):
    """The git capabilities the annotation pipeline relies on."""

    @abstractmethod
    def enumerate_commits(
        self, since: int = 10, from_rev: Optional[str] = None, to_rev: str = "HEAD"
    ) -> List[Commit]:
        """Return non-merge commits, most recent first.

        ``from_rev`` takes precedence over ``since``: when given, the range
        ``from_rev..to_rev`` is listed instead of the last ``since`` commits.

        Raises:
            RetrievalError: If the history cannot be read
        """

    @abstractmethod
    def commit_diff(self, commit_hash: str) -> str:
        """Return the diff a commit introduces relative to its parent."""

    @abstractmethod
    def note_exists(self, commit_hash: str, ref: str) -> bool:
        """Return True if a note is attached to the commit under ``ref``."""

    @abstractmethod
    def add_note(self, commit_hash: str, ref: str, text: str, force: bool = False) -> None:
        """Attach ``text`` to the commit under ``ref``.

        An existing note is replaced only when ``force`` is True.

        Raises:
            NoteWriteError: If the note could not be attached
        """

    @abstractmethod
    def show_note(self, commit_hash: str, ref: str) -> Optional[str]:
        """Return the note text under ``ref``, or None if there is none."""


def parse_log(raw: str) -> List[Commit]:
    """Parse ``git log --format=LOG_FORMAT`` output into Commits.

    Output is read in fixed four-line records. A short trailing record or
    an empty hash line ends the list.
    """
    commits: List[Commit] = []
    lines = raw.strip().split("\n")
    for i in range(0, len(lines) - _RECORD_LINES + 1, _RECORD_LINES):
        if lines[i] == "":
            break
        commits.append(
            Commit(
                hash=lines[i],
                author=lines[i + 1],
                date=lines[i + 2],
                message=lines[i + 3],
            )
        )
    return commits


class GitRepository(VersionControl):
    """VersionControl backed by the git binary, run with ``git -C <repo>``."""

    def __init__(self, repo_path: str = "."):
        self.repo_path = str(Path(repo_path).resolve())

    def _run(
        self, args: List[str], check: bool = True
    ) -> subprocess.CompletedProcess:
        cmd = ["git", "-C", self.repo_path, *args]
        logger.debug("Running git command: %s", " ".join(cmd))
        try:
            completed = subprocess.run(
                cmd,
                capture_output=True,
                text=True,
                encoding="utf-8",
                errors="replace",
                check=False,
            )
        except OSError as e:
            raise GitError(args, f"failed to execute git: {e}")

        if check and completed.returncode != 0:
            stderr = completed.stderr.strip()
            logger.debug("git stderr: %s", stderr)
            raise GitError(args, stderr or "unknown error", completed.returncode)

        return completed

    def enumerate_commits(
        self, since: int = 10, from_rev: Optional[str] = None, to_rev: str = "HEAD"
    ) -> List[Commit]:
        args = ["log", f"--format={LOG_FORMAT}", "--no-merges"]
        if from_rev:
            args.append(f"{from_rev}..{to_rev}")
        else:
            args.append(f"-n{since}")

        try:
            raw = self._run(args).stdout
        except GitError as e:
            raise RetrievalError(f"git log failed: {e.reason}")

        commits = parse_log(raw)
        logger.debug("git log returned %d commits", len(commits))
        return commits

    def commit_diff(self, commit_hash: str) -> str:
        return self._run(["show", "--format=", commit_hash]).stdout

    def note_exists(self, commit_hash: str, ref: str) -> bool:
        return self._run(["notes", "--ref", ref, "show", commit_hash], check=False).returncode == 0

    def show_note(self, commit_hash: str, ref: str) -> Optional[str]:
        completed = self._run(["notes", "--ref", ref, "show", commit_hash], check=False)
        if completed.returncode != 0:
            return None
        return completed.stdout.rstrip("\n")

    def add_note(self, commit_hash: str, ref: str, text: str, force: bool = False) -> None:
        try:
            fd, note_path = tempfile.mkstemp(prefix="arc-git-note-", suffix=".txt")
        except OSError as e:
            raise NoteWriteError(commit_hash, ref, f"failed to create temp file: {e}")

        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(text)

            args = ["notes", "--ref", ref, "add"]
            if force:
                args.append("-f")
            args.extend(["-F", note_path, commit_hash])

            completed = self._run(args, check=False)
            if completed.returncode != 0:
                raise NoteWriteError(
                    commit_hash,
                    ref,
                    completed.stderr.strip() or completed.stdout.strip() or "unknown error",
                    completed.returncode,
                )
        except OSError as e:
            raise NoteWriteError(commit_hash, ref, f"failed to write note: {e}")
        finally:
            try:
                os.unlink(note_path)
            except FileNotFoundError:
                pass

        logger.debug("Attached note to %s under refs/notes/%s", commit_hash[:7], ref)
