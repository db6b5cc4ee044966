"""Tests for worktree path derivation and root containment"""
import pytest

from git_worktree_hub.paths import (
    derive_default_root,
    derive_preview_path,
    derive_project_name,
    is_under_root,
    normalize_path_for_comparison,
    sanitize_branch_for_path,
)


class TestDeriveProjectName:
    """Test project name extraction."""

    def test_posix_path(self):
        assert derive_project_name("/a/b/Repo") == "Repo"

    def test_windows_path(self):
        assert derive_project_name("C:\\work\\my-app") == "my-app"

    def test_trailing_separator_ignored(self):
        assert derive_project_name("/a/b/Repo/") == "Repo"

    def test_empty_falls_back(self):
        assert derive_project_name("") == "Repo"

    def test_root_only_falls_back(self):
        assert derive_project_name("/") == "Repo"


class TestSanitizeBranchForPath:
    """Test branch names are flattened into one path segment."""

    def test_forward_slash(self):
        assert sanitize_branch_for_path("feature/x") == "feature-x"

    def test_mixed_separators(self):
        assert sanitize_branch_for_path("a\\b/c") == "a-b-c"

    def test_plain_branch_unchanged(self):
        assert sanitize_branch_for_path("bugfix-42") == "bugfix-42"


class TestDerivePreviewPath:
    """Test the target path for new worktrees."""

    def test_builds_root_project_branch(self):
        assert derive_preview_path("/wt", "/src/Repo", "feature/login") == "/wt/Repo-feature-login"

    def test_forward_slash_join_on_windows_root(self):
        assert derive_preview_path("C:\\wt", "C:\\src\\app", "fix") == "C:\\wt/app-fix"

    def test_unset_project_uses_fallback_name(self):
        assert derive_preview_path("/wt", "", "dev") == "/wt/Repo-dev"

    def test_trailing_separator_on_root(self):
        assert derive_preview_path("/wt/", "/src/Repo", "dev") == "/wt/Repo-dev"
        assert derive_preview_path("C:\\wt\\", "C:\\src\\app", "fix") == "C:\\wt/app-fix"

    def test_filesystem_root(self):
        assert derive_preview_path("/", "/src/Repo", "dev") == "/Repo-dev"

    @pytest.mark.parametrize("root, project, branch", [
        ("", "/src/Repo", "dev"),
        ("/wt", "/src/Repo", ""),
        ("", "", ""),
        ("", "/src/Repo", "feature/x"),
    ])
    def test_empty_without_root_or_branch(self, root, project, branch):
        assert derive_preview_path(root, project, branch) == ""


class TestDeriveDefaultRoot:
    """Test the default root is the project's parent directory."""

    def test_posix_parent(self):
        assert derive_default_root("/home/dev/src/repo") == "/home/dev/src"

    def test_windows_parent_keeps_backslashes(self):
        assert derive_default_root("C:\\Users\\dev\\repo") == "C:\\Users\\dev"

    def test_trailing_separator(self):
        assert derive_default_root("/home/dev/repo/") == "/home/dev"

    def test_directly_under_filesystem_root(self):
        assert derive_default_root("/repo") == "/"

    def test_no_parent(self):
        assert derive_default_root("repo") == ""

    def test_empty(self):
        assert derive_default_root("") == ""


class TestNormalizePathForComparison:
    """Test comparison normalization."""

    def test_backslashes_lowercase_and_trailing_separator(self):
        assert normalize_path_for_comparison("C:\\Work\\Trees\\") == "c:/work/trees"

    def test_strips_only_one_trailing_separator(self):
        assert normalize_path_for_comparison("/a/b//") == "/a/b/"


class TestIsUnderRoot:
    """Test root containment."""

    @pytest.mark.parametrize("path", ["/anything", "C:\\x", ""])
    def test_empty_root_matches_everything(self, path):
        assert is_under_root(path, "") is True

    def test_child_path(self):
        assert is_under_root("/root/sub/x", "/root/sub") is True

    def test_other_path(self):
        assert is_under_root("/root/other", "/root/sub") is False

    @pytest.mark.parametrize("path, root", [
        ("/root/sub/", "/root/sub"),
        ("/root/sub", "/root/sub/"),
        ("/root/sub/", "/root/sub/"),
    ])
    def test_trailing_separator_either_side(self, path, root):
        assert is_under_root(path, root) is True

    def test_case_insensitive(self):
        assert is_under_root("/Root/Sub/x", "/root/sub") is True

    def test_mixed_separators(self):
        assert is_under_root("C:\\wt\\repo-dev", "c:/WT") is True

    def test_sibling_with_shared_prefix_excluded(self):
        assert is_under_root("/a/bc", "/a/b") is False

    def test_sibling_with_shared_prefix_loose(self):
        assert is_under_root("/a/bc", "/a/b", strict=False) is True

    def test_loose_still_requires_prefix(self):
        assert is_under_root("/root/other", "/root/sub", strict=False) is False

    def test_filesystem_root_contains_everything(self):
        assert is_under_root("/home/dev/x", "/") is True
