"""Data models for git-worktree-hub."""

from .worktree import Worktree
from .form import FormState

__all__ = ["Worktree", "FormState"]
