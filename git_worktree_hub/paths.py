"""Path derivation for new worktrees and root containment checks.

Everything here is plain string arithmetic. Nothing touches the filesystem,
and both ``/`` and ``\\`` are accepted as separators on every platform so
that paths reported by a Windows engine compare the same way as POSIX ones.
"""

import re

from git_worktree_hub.constants import FALLBACK_PROJECT_NAME, PATH_SEPARATORS

_SEPARATOR_RE = re.compile(r"[\\/]")


def _split_segments(path: str) -> list[str]:
    return _SEPARATOR_RE.split(path)


def derive_project_name(project_path: str) -> str:
    """Return the last non-empty segment of ``project_path``.

    Falls back to ``"Repo"`` when the path is empty or has no named segment.
    """
    if not project_path:
        return FALLBACK_PROJECT_NAME
    segments = [segment for segment in _split_segments(project_path) if segment]
    return segments[-1] if segments else FALLBACK_PROJECT_NAME


def sanitize_branch_for_path(branch_name: str) -> str:
    """Turn a branch name into a single path segment (``feature/x`` -> ``feature-x``).

    Branch name legality is left to git.
    """
    return _SEPARATOR_RE.sub("-", branch_name)


def derive_preview_path(global_root: str, project_path: str, branch_name: str) -> str:
    """Compute the target path for a new worktree.

    Returns ``<root>/<project>-<branch>`` with a forward slash join, or an
    empty string unless both ``global_root`` and ``branch_name`` are set.
    A trailing separator on ``global_root`` is dropped before the join, so
    ``/wt/`` gives ``/wt/<project>-<branch>`` and ``/`` gives ``/<project>-<branch>``
    rather than a doubled slash.
    The result is a target for the engine, not a verified filesystem path.
    """
    if not global_root or not branch_name:
        return ""
    root = global_root.rstrip("/\\") or global_root
    if root in PATH_SEPARATORS:
        root = ""
    return f"{root}/{derive_project_name(project_path)}-{sanitize_branch_for_path(branch_name)}"


def derive_default_root(project_path: str) -> str:
    """Return the parent directory of ``project_path``.

    Used to seed the global root the first time a project is selected, so
    new worktrees land next to the repository by default. The separator
    style of the input is kept.
    """
    trimmed = project_path.rstrip("/\\")
    if not trimmed:
        return ""
    separator = "/" if "/" in trimmed or "\\" not in trimmed else "\\"
    segments = _split_segments(trimmed)
    parent = separator.join(segments[:-1])
    if not parent and len(segments) > 1:
        # Project directly under the filesystem root
        return separator
    return parent


def normalize_path_for_comparison(path: str) -> str:
    """Normalize a path for containment checks only.

    Separators become ``/``, the result is lower-cased and a single trailing
    separator is dropped. Never pass the result to the engine.
    """
    normalized = path.replace("\\", "/").lower()
    if normalized.endswith("/"):
        normalized = normalized[:-1]
    return normalized


def is_under_root(worktree_path: str, global_root: str, strict: bool = True) -> bool:
    """Check whether ``worktree_path`` lies under ``global_root``.

    An empty root disables filtering. With ``strict`` the match must end on
    a segment boundary, so ``/a/b`` contains ``/a/b`` and ``/a/b/c`` but not
    ``/a/bc``. Without it the raw string-prefix test is used.
    """
    if not global_root:
        return True

    path = normalize_path_for_comparison(worktree_path)
    root = normalize_path_for_comparison(global_root)

    if not strict:
        return path.startswith(root)
    return path == root or path.startswith(root + "/")
