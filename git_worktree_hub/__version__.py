"""Version information for git-worktree-hub."""

__version__ = "0.1.0"
