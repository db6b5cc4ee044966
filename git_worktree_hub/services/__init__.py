"""Engine and operation services for git-worktree-hub."""

from .engine import WorktreeEngine
from .git_engine import GitWorktreeEngine, parse_worktree_list
from .runner import OperationRunner

__all__ = [
    "WorktreeEngine",
    "GitWorktreeEngine",
    "parse_worktree_list",
    "OperationRunner",
]
