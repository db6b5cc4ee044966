"""Worktree engine backed by the git command line (via GitPython)."""

import os
import subprocess
import sys
from typing import Any, Dict, List, Optional

import git

from git_worktree_hub.exceptions import EngineError
from git_worktree_hub.models.worktree import Worktree
from git_worktree_hub.services.engine import WorktreeEngine
from git_worktree_hub.logging_config import get_logger

logger = get_logger(__name__)

BRANCH_REF_PREFIX = "refs/heads/"


def _git_error_text(error: git.exc.GitCommandError) -> str:
    """Extract git's own stderr message from a GitCommandError."""
    stderr = (error.stderr if hasattr(error, "stderr") else "") or ""
    stderr = stderr.strip()
    # GitPython wraps stderr as "stderr: '<message>'"
    if stderr.startswith("stderr:"):
        stderr = stderr[len("stderr:"):].strip()
    if len(stderr) >= 2 and stderr[0] == stderr[-1] == "'":
        stderr = stderr[1:-1]
    stderr = stderr.strip()
    if stderr:
        return stderr
    status = error.status if hasattr(error, "status") else "unknown"
    return f"git exited with code {status}"


def parse_worktree_list(output: str) -> List[Worktree]:
    """Parse ``git worktree list --porcelain`` output.

    Format:
        worktree /path/to/worktree
        HEAD commit_sha
        branch refs/heads/branch-name   (or "detached")
        (blank line between worktrees)
    """
    worktrees: List[Worktree] = []
    current: Dict[str, Any] = {}

    def flush() -> None:
        if current.get("path"):
            worktrees.append(
                Worktree(
                    path=current["path"],
                    head_hash=current.get("head", ""),
                    branch=current.get("branch"),
                )
            )
        current.clear()

    for line in output.splitlines():
        line = line.rstrip("\r")
        if not line:
            flush()
            continue

        if line.startswith("worktree "):
            current["path"] = line[len("worktree "):]
        elif line.startswith("HEAD "):
            current["head"] = line[len("HEAD "):]
        elif line.startswith("branch "):
            ref = line[len("branch "):]
            if ref.startswith(BRANCH_REF_PREFIX):
                ref = ref[len(BRANCH_REF_PREFIX):]
            current["branch"] = ref

    # Last entry may not be followed by a blank line
    flush()
    return worktrees


class GitWorktreeEngine(WorktreeEngine):
    """Engine that runs ``git worktree`` commands in the project repository."""

    def _open_repo(self, project_path: str, operation: str) -> git.Repo:
        """Open a fresh repo instance for the project."""
        if not project_path:
            # git.Repo("") would silently use the current directory
            raise EngineError(operation, "No project repository selected")
        try:
            return git.Repo(project_path)
        except (git.exc.InvalidGitRepositoryError, git.exc.NoSuchPathError) as e:
            raise EngineError(
                operation, f"Failed to execute git command at '{project_path}': {e}"
            ) from e

    def list_worktrees(self, project_path: str) -> List[Worktree]:
        with self._open_repo(project_path, "list") as repo:
            try:
                output = repo.git.worktree("list", "--porcelain")
            except git.exc.GitCommandError as e:
                error_msg = f"Git Error at '{project_path}': {_git_error_text(e)}"
                logger.error(error_msg)
                raise EngineError("list", error_msg) from e

        worktrees = parse_worktree_list(output)
        logger.debug(f"Found {len(worktrees)} worktrees in {project_path}")
        for wt in worktrees:
            logger.debug(f"  {wt}")
        return worktrees

    def create_worktree(
        self, project_path: str, path: str, branch: str, base: Optional[str] = None
    ) -> None:
        args = ["add", "-b", branch, path]
        if base:
            args.append(base)

        with self._open_repo(project_path, "create") as repo:
            try:
                repo.git.worktree(*args)
            except git.exc.GitCommandError as e:
                error_msg = _git_error_text(e)
                logger.error(f"Failed to create worktree at {path}: {error_msg}")
                raise EngineError("create", error_msg) from e

        logger.info(f"Created worktree at {path} on branch {branch}")

    def remove_worktree(
        self, project_path: str, worktree_path: str, branch: Optional[str] = None
    ) -> None:
        with self._open_repo(project_path, "remove") as repo:
            try:
                repo.git.worktree("remove", "--force", worktree_path)
            except git.exc.GitCommandError as e:
                error_msg = _git_error_text(e)
                logger.error(f"Failed to remove worktree at {worktree_path}: {error_msg}")
                raise EngineError("remove", error_msg) from e
            logger.info(f"Removed worktree at {worktree_path}")

            if not branch:
                return

            try:
                repo.git.branch("-D", branch)
            except git.exc.GitCommandError as e:
                error_msg = (
                    f"Worktree removed, but failed to delete branch '{branch}': "
                    f"{_git_error_text(e)}"
                )
                logger.error(error_msg)
                raise EngineError("remove", error_msg) from e
            logger.info(f"Deleted branch {branch}")

    def open_folder(self, path: str) -> None:
        logger.debug(f"Opening folder {path!r}")
        try:
            if sys.platform == "win32":
                os.startfile(path.replace("/", "\\"))  # type: ignore[attr-defined]
            else:
                opener = "open" if sys.platform == "darwin" else "xdg-open"
                subprocess.run([opener, path], check=True, capture_output=True)
        except (OSError, subprocess.CalledProcessError) as e:
            error_msg = f"Failed to open folder '{path}': {e}"
            logger.error(error_msg)
            raise EngineError("open", error_msg) from e
