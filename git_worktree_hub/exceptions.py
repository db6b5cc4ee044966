"""Custom exceptions for git-worktree-hub"""

from typing import Optional


class WorktreeHubError(Exception):
    """Base exception for all git-worktree-hub errors."""
    pass


class EngineError(WorktreeHubError):
    """Exception raised when the worktree engine rejects an operation."""

    def __init__(self, operation: str, message: Optional[str] = None):
        self.operation = operation
        self.message = message

        # Engine messages are already user-facing, show them as-is
        super().__init__(message or f"Worktree operation '{operation}' failed")


class DialogError(WorktreeHubError):
    """Exception raised when a dialog (picker or confirmation) cannot be shown."""

    def __init__(self, dialog: str, message: Optional[str] = None):
        self.dialog = dialog
        self.message = message

        error_msg = f"Failed to open {dialog} dialog"
        if message:
            error_msg += f": {message}"

        super().__init__(error_msg)
