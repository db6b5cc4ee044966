"""Shared constants for git-worktree-hub."""

from dataclasses import dataclass
from typing import List


# Project name used when no project is selected
FALLBACK_PROJECT_NAME = "Repo"

# Characters treated as path separators, regardless of platform
PATH_SEPARATORS = ("/", "\\")

# Number of commit hash characters shown in listings
SHORT_HASH_LENGTH = 7


@dataclass
class ColumnDefinition:
    """Definition of a table column."""

    key: str
    label: str
    width: int = 0  # 0 means auto-width


# Unified column definitions for both CLI and TUI
COLUMNS: List[ColumnDefinition] = [
    ColumnDefinition("branch", "Branch", 30),
    ColumnDefinition("path", "Path", 60),
    ColumnDefinition("head", "HEAD", 9),
]


# Labels
LABEL_DETACHED = "(detached)"
LABEL_UNSET = "(not set)"


# Directory picker titles
TITLE_SELECT_PROJECT = "Select Git Repository"
TITLE_SELECT_ROOT = "Select Global Worktree Root"


# TUI colors (color names for Textual/Rich markup)
TUI_COLORS = {
    "branch": "green",
    "detached": "yellow",
    "hash": "cyan",
    "unset": "dim",
}
