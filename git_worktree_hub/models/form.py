"""Create-worktree form state."""

from dataclasses import dataclass


@dataclass
class FormState:
    """Transient state of the create-worktree form."""

    branch_name: str = ""
    base_branch: str = ""
    visible: bool = False

    def reset(self) -> None:
        """Hide the form and clear the branch name. The base branch is kept."""
        self.branch_name = ""
        self.visible = False
