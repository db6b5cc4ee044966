"""Contract for the worktree engine."""

from abc import ABC, abstractmethod
from typing import List, Optional

from git_worktree_hub.models.worktree import Worktree


class WorktreeEngine(ABC):
    """Backend that performs the actual worktree operations.

    Every method blocks until the operation finishes and raises
    ``EngineError`` when it is rejected.
    """

    @abstractmethod
    def list_worktrees(self, project_path: str) -> List[Worktree]:
        """Return the worktrees of the repository at ``project_path``."""

    @abstractmethod
    def create_worktree(
        self, project_path: str, path: str, branch: str, base: Optional[str] = None
    ) -> None:
        """Create ``path`` on a new ``branch``, starting from ``base`` when given."""

    @abstractmethod
    def remove_worktree(
        self, project_path: str, worktree_path: str, branch: Optional[str] = None
    ) -> None:
        """Remove the worktree at ``worktree_path`` and, when given, its ``branch``."""

    @abstractmethod
    def open_folder(self, path: str) -> None:
        """Open ``path`` in the platform file manager."""
