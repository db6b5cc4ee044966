"""Command-line interface for git-worktree-hub"""

import asyncio
import os
import sys
from typing import List, Optional

from rich.console import Console

from .args import parse_args
from .config import Config
from .formatters import build_worktree_table
from .logging_config import get_log_file, get_logger, setup_logging
from .paths import derive_default_root, derive_project_name
from .services.git_engine import GitWorktreeEngine
from .services.runner import OperationRunner
from .store import WorktreeStore

console = Console()
logger = get_logger(__name__)


def build_config(parsed_args) -> Config:
    """Build a Config from parsed arguments, seeding the root from the project."""
    project_path = os.path.abspath(parsed_args.project) if parsed_args.project else ""
    global_root = os.path.abspath(parsed_args.root) if parsed_args.root else ""
    if project_path and not global_root:
        global_root = derive_default_root(project_path)

    return Config(
        project_path=project_path,
        global_root=global_root,
        strict_root_match=not parsed_args.loose_root_match,
        interactive=not parsed_args.no_interactive,
        verbose=parsed_args.verbose,
        debug=parsed_args.debug,
    )


def list_worktrees(config: Config) -> int:
    """Print the worktrees under the configured root."""
    if not config.project_path:
        console.print("[red]Error: --project is required with --no-interactive[/red]")
        return 1

    store = WorktreeStore(
        project_path=config.project_path,
        global_root=config.global_root,
        strict_root_match=config.strict_root_match,
    )
    runner = OperationRunner(GitWorktreeEngine(), store)
    asyncio.run(runner.refresh())

    if runner.error_message:
        console.print(f"[red]Error: {runner.error_message}[/red]")
        return 1

    visible = store.visible_worktrees()
    title = f"{derive_project_name(config.project_path)} worktrees under {config.global_root or '(any root)'}"
    console.print(build_worktree_table(visible, title=title))
    hidden = len(store.worktrees) - len(visible)
    if hidden:
        console.print(f"[dim]{hidden} worktree(s) outside the root not shown[/dim]")
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the application."""
    parsed_args = None
    try:
        parsed_args = parse_args(argv)
        config = build_config(parsed_args)

        setup_logging(verbose=config.verbose, debug=config.debug, tui_mode=config.interactive)

        if config.debug:
            console.print("[yellow]Configuration:[/yellow]")
            for key, value in config.to_dict().items():
                console.print(f"  {key}: {value}")
            console.print(f"  log file: {get_log_file()}")

        if not config.interactive:
            return list_worktrees(config)

        from git_worktree_hub.tui import WorktreeHubApp
        app = WorktreeHubApp(config)
        app.run()
        return 0
    except KeyboardInterrupt:
        console.print("\n[yellow]Operation cancelled by user[/yellow]")
        return 1
    except Exception as e:
        console.print(f"[red]Error: {e}[/red]")
        if parsed_args is not None and parsed_args.debug:
            console.print_exception()
        return 1


if __name__ == "__main__":
    sys.exit(main())
