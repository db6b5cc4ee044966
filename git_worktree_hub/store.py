"""Session state for git-worktree-hub."""

from typing import List, Optional

from git_worktree_hub.models.form import FormState
from git_worktree_hub.models.worktree import Worktree
from git_worktree_hub.paths import derive_preview_path, is_under_root
from git_worktree_hub.logging_config import get_logger

logger = get_logger(__name__)


class WorktreeStore:
    """Single source of truth for the selected project, root and worktrees.

    Derived values (``preview_path``, ``visible_worktrees``) are recomputed
    on every read from the current fields.
    """

    def __init__(
        self,
        project_path: str = "",
        global_root: str = "",
        strict_root_match: bool = True,
    ):
        self.project_path = project_path
        self.global_root = global_root
        self.strict_root_match = strict_root_match
        self.worktrees: List[Worktree] = []
        self.form = FormState()

    def set_project(self, path: str) -> None:
        logger.debug(f"Project set to {path!r}")
        self.project_path = path

    def set_global_root(self, path: str) -> None:
        logger.debug(f"Global root set to {path!r}")
        self.global_root = path

    def replace_worktrees(self, worktrees: List[Worktree]) -> None:
        """Replace the known worktrees with a fresh listing from the engine."""
        self.worktrees = list(worktrees)
        logger.debug(f"Stored {len(self.worktrees)} worktrees")

    def visible_worktrees(self) -> List[Worktree]:
        """Worktrees under the global root, in the order the engine reported them."""
        return [
            wt
            for wt in self.worktrees
            if is_under_root(wt.path, self.global_root, strict=self.strict_root_match)
        ]

    def find_worktree(self, path: str) -> Optional[Worktree]:
        """Look up a known worktree by its exact reported path."""
        for wt in self.worktrees:
            if wt.path == path:
                return wt
        return None

    @property
    def preview_path(self) -> str:
        """Target path for the worktree described by the create form."""
        return derive_preview_path(
            self.global_root, self.project_path, self.form.branch_name.strip()
        )
