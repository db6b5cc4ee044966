"""Command-line argument parsing for git-worktree-hub."""

import argparse
from typing import List, Optional

from git_worktree_hub.__version__ import __version__


def parse_args(argv: Optional[List[str]] = None):
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        description="Create, list and remove git worktrees under a shared root directory",
        epilog="New worktrees are created at <root>/<project>-<branch>. "
        "The root defaults to the parent directory of the first project selected.",
    )
    parser.add_argument("--version", action="version", version=f"git-worktree-hub {__version__}")
    parser.add_argument("--project", metavar="PATH", default="", help="Git repository to manage")
    parser.add_argument(
        "--root",
        metavar="PATH",
        default="",
        help="Global root directory for new worktrees (only worktrees under it are shown)",
    )
    parser.add_argument(
        "--loose-root-match",
        action="store_true",
        help="Match the root as a plain string prefix (a root of /a/b also matches /a/bc)",
    )
    parser.add_argument(
        "--no-interactive",
        action="store_true",
        help="Print the worktrees under the root and exit instead of starting the TUI",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Show verbose output")
    parser.add_argument(
        "--debug", action="store_true", help="Show debug information for troubleshooting"
    )

    return parser.parse_args(argv)
