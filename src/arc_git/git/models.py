"""Data models for commits read from git."""

from dataclasses import dataclass

SHORT_HASH_LEN = 7


@dataclass(frozen=True)
class Commit:
    hash: str  # full 40-char hash
    author: str  # "Name <email>"
    date: str  # as printed by git log %ad
    message: str  # subject line only

    @property
    def short_hash(self) -> str:
        return self.hash[:SHORT_HASH_LEN]
