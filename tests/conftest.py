"""Shared test fixtures for arc-git: in-memory git/AI fakes and temp repos."""

import hashlib
import shutil
import subprocess
from pathlib import Path
from typing import Dict, List, Optional

import pytest

from arc_git.ai.client import CompletionResponse, GenerativeClient
from arc_git.exceptions import GenerationError, GitError, NoteWriteError, RetrievalError
from arc_git.git.models import Commit
from arc_git.git.repository import VersionControl

requires_git = pytest.mark.skipif(shutil.which("git") is None, reason="git not found")

_ENV_VARS = (
    "ARC_AI_PROVIDER",
    "ARC_AI_MODEL",
    "ARC_AI_API_KEY",
    "ARC_AI_NAMESPACE",
    "ARC_AI_MAX_DIFF_CHARS",
    "ANTHROPIC_API_KEY",
    "OPENROUTER_API_KEY",
    "OPENAI_API_KEY",
)


@pytest.fixture(autouse=True)
def isolated_env(tmp_path, monkeypatch):
    """Keep user config files and provider keys out of every test."""
    home = tmp_path / "home"
    cwd = tmp_path / "cwd"
    home.mkdir()
    cwd.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.setenv("GIT_CONFIG_NOSYSTEM", "1")
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(cwd)
    return cwd


def make_commit(n: int, message: Optional[str] = None) -> Commit:
    """Commit with a deterministic, unique hash."""
    return Commit(
        hash=hashlib.sha1(str(n).encode()).hexdigest(),
        author=f"Dev {n} <dev{n}@example.com>",
        date="Mon Jan 6 10:00:00 2025 +0000",
        message=message or f"change number {n}",
    )


class FakeRepository(VersionControl):
    """In-memory VersionControl that behaves like git for notes."""

    def __init__(
        self,
        commits: List[Commit],
        diffs: Optional[Dict[str, str]] = None,
        fail_diff: Optional[set] = None,
        fail_note: Optional[set] = None,
        fail_log: bool = False,
    ):
        self.commits = commits
        self.diffs = diffs if diffs is not None else {c.hash: f"diff --git a/{c.hash[:7]}\n+x\n" for c in commits}
        self.fail_diff = fail_diff or set()
        self.fail_note = fail_note or set()
        self.fail_log = fail_log
        self.notes: Dict[str, Dict[str, str]] = {}
        self.diff_calls: List[str] = []
        self.log_calls: List[dict] = []

    def enumerate_commits(self, since=10, from_rev=None, to_rev="HEAD"):
        self.log_calls.append({"since": since, "from_rev": from_rev, "to_rev": to_rev})
        if self.fail_log:
            raise RetrievalError("git log failed: not a git repository")
        if from_rev:
            return list(self.commits)
        return list(self.commits[:since])

    def commit_diff(self, commit_hash):
        self.diff_calls.append(commit_hash)
        if commit_hash in self.fail_diff:
            raise GitError(["show", "--format=", commit_hash], "bad object", 128)
        return self.diffs.get(commit_hash, "")

    def note_exists(self, commit_hash, ref):
        return commit_hash in self.notes.get(ref, {})

    def show_note(self, commit_hash, ref):
        return self.notes.get(ref, {}).get(commit_hash)

    def add_note(self, commit_hash, ref, text, force=False):
        if commit_hash in self.fail_note:
            raise NoteWriteError(commit_hash, ref, "unable to write note object")
        if self.note_exists(commit_hash, ref) and not force:
            raise NoteWriteError(commit_hash, ref, "Cannot add notes. Found existing notes")
        self.notes.setdefault(ref, {})[commit_hash] = text


class FakeClient(GenerativeClient):
    """Returns a canned annotation naming the commit; fails on request."""

    def __init__(self, fail_for: Optional[set] = None, text: Optional[str] = None):
        self.fail_for = fail_for or set()
        self.text = text
        self.calls: List[dict] = []

    def complete(self, system, prompt, model):
        self.calls.append({"system": system, "prompt": prompt, "model": model})
        short = prompt.split("Commit: ", 1)[1].split("\n", 1)[0]
        if short in self.fail_for:
            raise GenerationError("rate limited", model=model)
        text = self.text if self.text is not None else f"  Explains commit {short}.\n"
        return CompletionResponse(text=text, model=model)


@pytest.fixture
def commits():
    return [make_commit(i) for i in range(1, 4)]


@pytest.fixture
def fake_repo(commits):
    return FakeRepository(commits)


@pytest.fixture
def fake_client():
    return FakeClient()


def git(repo: Path, *args: str) -> str:
    return subprocess.run(
        ["git", "-C", str(repo), *args], capture_output=True, text=True, check=True
    ).stdout


@pytest.fixture
def git_repo_factory(tmp_path):
    """Create a temp repo with ``n`` linear commits, each touching a file."""

    def _make(n: int = 3, name: str = "repo") -> Path:
        repo = tmp_path / name
        repo.mkdir()
        git(repo, "init", "-q")
        git(repo, "config", "user.email", "test@test.com")
        git(repo, "config", "user.name", "Test")
        git(repo, "config", "commit.gpgsign", "false")
        for i in range(1, n + 1):
            (repo / f"file{i}.py").write_text(f"value = {i}\n")
            git(repo, "add", ".")
            git(repo, "commit", "-q", "-m", f"add file{i}")
        return repo

    return _make
