"""Loading/error lifecycle around engine calls."""

import asyncio
from typing import Any, Callable, List, Optional

from git_worktree_hub.services.engine import WorktreeEngine
from git_worktree_hub.store import WorktreeStore
from git_worktree_hub.logging_config import get_logger

logger = get_logger(__name__)


class OperationRunner:
    """Runs engine operations and tracks the shared ``loading``/``error_message`` state.

    Every wrapped call clears the previous error, holds ``loading`` while the
    engine works and always releases it afterwards. Failures are stored as a
    single human-readable message; nothing is retried. Successful mutations
    are followed by a fresh listing, the store never guesses the result.

    Engine calls block, so they run in a worker thread via ``asyncio.to_thread``.
    All state changes happen on the event loop.
    """

    def __init__(
        self,
        engine: WorktreeEngine,
        store: WorktreeStore,
        on_change: Optional[Callable[[], None]] = None,
    ):
        self.engine = engine
        self.store = store
        self.loading = False
        self.error_message: Optional[str] = None
        self._listeners: List[Callable[[], None]] = []
        if on_change is not None:
            self._listeners.append(on_change)

    def add_listener(self, listener: Callable[[], None]) -> None:
        """Register a callback invoked whenever loading, error or worktrees change."""
        self._listeners.append(listener)

    def notify_change(self) -> None:
        for listener in self._listeners:
            listener()

    def report_error(self, message: str) -> None:
        """Make ``message`` the current error, replacing any previous one."""
        self.error_message = message
        self.notify_change()

    def clear_error(self) -> None:
        self.error_message = None
        self.notify_change()

    async def _run(self, operation: str, func: Callable[..., Any], *args: Any) -> tuple[bool, Any]:
        """Run one engine call with the loading flag held.

        Returns:
            Tuple of (success, result). result is None on failure.
        """
        self.error_message = None
        self.loading = True
        self.notify_change()
        try:
            result = await asyncio.to_thread(func, *args)
            return True, result
        except Exception as e:
            logger.error(f"Worktree operation '{operation}' failed: {e}", exc_info=True)
            self.error_message = str(e) or f"Worktree operation '{operation}' failed"
            return False, None
        finally:
            self.loading = False
            self.notify_change()

    async def refresh(self) -> bool:
        """Fetch the worktree list for the current project.

        Skipped without error when no project is selected.
        """
        project_path = self.store.project_path
        if not project_path:
            logger.debug("No project selected, skipping worktree listing")
            return False

        ok, worktrees = await self._run("list", self.engine.list_worktrees, project_path)
        if ok:
            self.store.replace_worktrees(worktrees)
            self.notify_change()
        return ok

    async def create(
        self, project_path: str, path: str, branch: str, base: Optional[str] = None
    ) -> bool:
        ok, _ = await self._run(
            "create", self.engine.create_worktree, project_path, path, branch, base
        )
        if ok:
            logger.info(f"Created worktree {path}")
            await self.refresh()
        return ok

    async def remove(
        self, project_path: str, worktree_path: str, branch: Optional[str] = None
    ) -> bool:
        ok, _ = await self._run(
            "remove", self.engine.remove_worktree, project_path, worktree_path, branch
        )
        if ok:
            logger.info(f"Removed worktree {worktree_path}")
            await self.refresh()
        return ok

    async def open_folder(self, path: str) -> bool:
        """Open ``path`` via the engine.

        Does not touch ``loading`` or the worktree list; a failure only sets the error.
        """
        self.error_message = None
        self.notify_change()
        try:
            await asyncio.to_thread(self.engine.open_folder, path)
            return True
        except Exception as e:
            logger.error(f"Failed to open folder {path}: {e}")
            self.report_error(str(e) or f"Failed to open folder '{path}'")
            return False
