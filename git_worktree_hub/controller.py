"""User intents for git-worktree-hub.

The controller turns user actions into store updates and engine calls. The
directory picker and the destructive confirmation are injected, so the TUI
provides modal screens and tests provide plain doubles.
"""

from typing import Optional, Protocol

from git_worktree_hub.constants import TITLE_SELECT_PROJECT, TITLE_SELECT_ROOT
from git_worktree_hub.exceptions import DialogError
from git_worktree_hub.formatters import format_removal_confirmation
from git_worktree_hub.models.worktree import Worktree
from git_worktree_hub.paths import derive_default_root
from git_worktree_hub.services.runner import OperationRunner
from git_worktree_hub.store import WorktreeStore
from git_worktree_hub.logging_config import get_logger

logger = get_logger(__name__)


class DirectoryPicker(Protocol):
    async def pick_directory(self, title: str) -> Optional[str]:
        """Ask for a single directory. Returns None when the user cancels."""
        ...


class Confirmer(Protocol):
    async def confirm(self, message: str) -> bool:
        """Ask the user to acknowledge ``message``. Returns False when declined."""
        ...


class InteractionController:
    """Drives the store and the runner from user intents."""

    def __init__(
        self,
        store: WorktreeStore,
        runner: OperationRunner,
        picker: DirectoryPicker,
        confirmer: Confirmer,
    ):
        self.store = store
        self.runner = runner
        self.picker = picker
        self.confirmer = confirmer

    @property
    def preview_path(self) -> str:
        return self.store.preview_path

    @property
    def can_submit(self) -> bool:
        """Whether the create form can be submitted right now."""
        return bool(self.store.global_root and self.store.form.branch_name.strip())

    async def _pick(self, title: str) -> Optional[str]:
        try:
            selected = await self.picker.pick_directory(title)
        except Exception as e:
            error = e if isinstance(e, DialogError) else DialogError("directory picker", str(e))
            logger.error(f"Directory picker failed: {e}")
            self.runner.report_error(str(error))
            return None
        return selected or None

    async def select_project(self) -> bool:
        """Pick the project repository and load its worktrees.

        The first project picked while no root is configured also seeds the
        root with the project's parent directory.
        """
        selected = await self._pick(TITLE_SELECT_PROJECT)
        if not selected:
            return False

        self.store.set_project(selected)
        if not self.store.global_root:
            default_root = derive_default_root(selected)
            if default_root:
                logger.info(f"Defaulting global root to {default_root}")
                self.store.set_global_root(default_root)

        await self.runner.refresh()
        return True

    async def select_global_root(self) -> bool:
        """Pick the global worktree root, replacing any current one."""
        selected = await self._pick(TITLE_SELECT_ROOT)
        if not selected:
            return False
        self.store.set_global_root(selected)
        self.runner.notify_change()
        return True

    def open_create_form(self) -> None:
        self.store.form.visible = True

    def cancel_create_form(self) -> None:
        self.store.form.reset()

    def set_branch_name(self, value: str) -> None:
        self.store.form.branch_name = value

    def set_base_branch(self, value: str) -> None:
        self.store.form.base_branch = value

    async def submit_create(self) -> bool:
        """Create a worktree at the current preview path.

        No-op unless a branch name and a global root are set. A blank base
        branch is passed as None and left for the engine to interpret.
        """
        if not self.can_submit:
            logger.debug("Create submitted without branch name or root, ignoring")
            return False

        form = self.store.form
        branch = form.branch_name.strip()
        target_path = self.store.preview_path
        base = form.base_branch.strip() or None

        ok = await self.runner.create(self.store.project_path, target_path, branch, base)
        if ok:
            form.reset()
        return ok

    async def remove_worktree(self, worktree: Worktree) -> bool:
        """Remove ``worktree`` and its branch after explicit confirmation."""
        message = format_removal_confirmation(worktree.path, worktree.branch)
        try:
            confirmed = await self.confirmer.confirm(message)
        except Exception as e:
            error = e if isinstance(e, DialogError) else DialogError("confirmation", str(e))
            logger.error(f"Confirmation dialog failed: {e}")
            self.runner.report_error(str(error))
            return False

        if not confirmed:
            logger.debug(f"Removal of {worktree.path} declined")
            return False

        return await self.runner.remove(self.store.project_path, worktree.path, worktree.branch)

    async def open_folder(self, path: str) -> bool:
        return await self.runner.open_folder(path)

    async def refresh(self) -> bool:
        return await self.runner.refresh()
