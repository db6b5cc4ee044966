"""
git-worktree-hub - Manage git worktrees under a shared root directory
"""

from .__version__ import __version__
from .controller import InteractionController
from .store import WorktreeStore
from .services.runner import OperationRunner
from .cli import main

__all__ = ["InteractionController", "WorktreeStore", "OperationRunner", "main", "__version__"]
