"""Display formatting shared by the CLI and the TUI."""

from typing import List, Optional

from rich.table import Table
from rich.text import Text

from git_worktree_hub.constants import COLUMNS, LABEL_DETACHED, LABEL_UNSET, TUI_COLORS
from git_worktree_hub.models.worktree import Worktree


def format_branch(worktree: Worktree) -> Text:
    """Branch name, or a detached marker."""
    if worktree.is_detached:
        return Text(LABEL_DETACHED, style=TUI_COLORS["detached"])
    return Text(worktree.branch or "", style=TUI_COLORS["branch"])


def format_hash(worktree: Worktree) -> Text:
    return Text(worktree.short_hash, style=TUI_COLORS["hash"])


def format_setting(value: str) -> Text:
    """A configured path, or a dim placeholder when unset."""
    if not value:
        return Text(LABEL_UNSET, style=TUI_COLORS["unset"])
    return Text(value)


def format_worktree_row(worktree: Worktree) -> List[Text]:
    """Cells for one worktree, in COLUMNS order."""
    return [format_branch(worktree), Text(worktree.path), format_hash(worktree)]


def build_worktree_table(worktrees: List[Worktree], title: Optional[str] = None) -> Table:
    """Rich table of worktrees for text-mode output."""
    table = Table(title=title, show_lines=False)
    for col in COLUMNS:
        table.add_column(col.label, no_wrap=col.key != "path")
    for wt in worktrees:
        table.add_row(*format_worktree_row(wt))
    return table


def format_removal_confirmation(worktree_path: str, branch: Optional[str]) -> str:
    """Message for the destructive removal confirmation."""
    message = f"Are you sure you want to delete the worktree at:\n{worktree_path}"
    if branch:
        message += f"\n\nThe branch '{branch}' will also be deleted."
    else:
        message += "\n\nThe worktree has no branch (detached HEAD)."
    message += "\n\nThis cannot be undone."
    return message
