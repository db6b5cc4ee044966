import sys

from git_worktree_hub.cli import main

sys.exit(main())
