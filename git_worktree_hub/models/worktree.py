"""Worktree data models."""

from dataclasses import dataclass
from typing import Optional

from git_worktree_hub.constants import SHORT_HASH_LENGTH


@dataclass(frozen=True)
class Worktree:
    """A worktree as reported by the engine.

    ``path`` is unique within a single listing and identifies the worktree
    for display and removal.
    """

    path: str
    head_hash: str = ""
    branch: Optional[str] = None  # None = detached HEAD

    @property
    def is_detached(self) -> bool:
        return not self.branch

    @property
    def short_hash(self) -> str:
        return self.head_hash[:SHORT_HASH_LENGTH]

    def __str__(self) -> str:
        """String representation of worktree."""
        branch = self.branch or "detached"
        return f"{branch} @ {self.path} [{self.short_hash}]"
