"""Configuration handling for git-worktree-hub"""

from dataclasses import dataclass


@dataclass
class Config:
    """Session configuration for git-worktree-hub with validation.

    Nothing here is persisted; values come from the command line and live
    for the lifetime of the process.
    """

    # Initial selections (empty means unset)
    project_path: str = ""
    global_root: str = ""

    # Root containment: True requires a path-segment boundary after the root,
    # False keeps the raw string-prefix test ("/a/b" also matches "/a/bc")
    strict_root_match: bool = True

    # Execution modes
    interactive: bool = True
    verbose: bool = False
    debug: bool = False

    def __post_init__(self):
        """Validate configuration after initialization."""
        self._validate_paths()

    def _validate_paths(self):
        """Validate path fields are strings and strip surrounding whitespace."""
        for name in ("project_path", "global_root"):
            value = getattr(self, name)
            if value is None:
                value = ""
            if not isinstance(value, str):
                raise ValueError(f"{name} must be a string, got {type(value).__name__}")
            setattr(self, name, value.strip())

    def to_dict(self) -> dict:
        """Convert config to dictionary."""
        return {
            "project_path": self.project_path,
            "global_root": self.global_root,
            "strict_root_match": self.strict_root_match,
            "interactive": self.interactive,
            "verbose": self.verbose,
            "debug": self.debug,
        }

    def get(self, key: str, default=None):
        """Get config value by key."""
        return getattr(self, key, default)

    @classmethod
    def from_dict(cls, config_dict: dict) -> "Config":
        """Create Config from dictionary, ignoring unknown keys."""
        known_fields = {
            "project_path",
            "global_root",
            "strict_root_match",
            "interactive",
            "verbose",
            "debug",
        }

        filtered = {k: v for k, v in config_dict.items() if k in known_fields}
        return cls(**filtered)
