"""Textual screens and widgets for git-worktree-hub."""

from .screens import ConfirmScreen, DirectoryPickerScreen, ErrorScreen
from .widgets import NonExpandingHeader

__all__ = ["ConfirmScreen", "DirectoryPickerScreen", "ErrorScreen", "NonExpandingHeader"]
