"""Tests for OperationRunner"""
from unittest.mock import Mock
import pytest

from git_worktree_hub.exceptions import EngineError
from git_worktree_hub.services.runner import OperationRunner
from git_worktree_hub.store import WorktreeStore

from conftest import PROJECT_PATH


class TestRefresh:
    """Test worktree listing."""

    @pytest.mark.asyncio
    async def test_success_replaces_worktrees(self, runner, store, mock_engine, sample_worktrees):
        assert await runner.refresh() is True
        mock_engine.list_worktrees.assert_called_once_with(PROJECT_PATH)
        assert store.worktrees == sample_worktrees
        assert runner.loading is False
        assert runner.error_message is None

    @pytest.mark.asyncio
    async def test_skipped_without_project(self, mock_engine):
        store = WorktreeStore()
        runner = OperationRunner(mock_engine, store)
        assert await runner.refresh() is False
        mock_engine.list_worktrees.assert_not_called()
        assert runner.error_message is None
        assert runner.loading is False

    @pytest.mark.asyncio
    async def test_failure_sets_error_and_clears_loading(self, runner, store, mock_engine):
        mock_engine.list_worktrees.side_effect = EngineError("list", "Git Error at '/x': not a repo")
        assert await runner.refresh() is False
        assert runner.loading is False
        assert runner.error_message == "Git Error at '/x': not a repo"
        assert store.worktrees == []

    @pytest.mark.asyncio
    async def test_unexpected_exception_is_captured(self, runner, mock_engine):
        mock_engine.list_worktrees.side_effect = RuntimeError("boom")
        assert await runner.refresh() is False
        assert runner.error_message == "boom"

    @pytest.mark.asyncio
    async def test_previous_error_cleared_on_dispatch(self, runner):
        runner.report_error("old failure")
        await runner.refresh()
        assert runner.error_message is None

    @pytest.mark.asyncio
    async def test_loading_true_while_engine_runs(self, runner, mock_engine, sample_worktrees):
        seen = []

        def list_worktrees(project_path):
            seen.append(runner.loading)
            return sample_worktrees

        mock_engine.list_worktrees.side_effect = list_worktrees
        await runner.refresh()
        assert seen == [True]
        assert runner.loading is False


class TestMutations:
    """Test create/remove followed by a fresh listing."""

    @pytest.mark.asyncio
    async def test_create_refreshes_once(self, runner, mock_engine):
        ok = await runner.create(PROJECT_PATH, "/wt/repo-dev", "dev", None)
        assert ok is True
        mock_engine.create_worktree.assert_called_once_with(PROJECT_PATH, "/wt/repo-dev", "dev", None)
        mock_engine.list_worktrees.assert_called_once_with(PROJECT_PATH)

    @pytest.mark.asyncio
    async def test_create_failure_does_not_refresh(self, runner, mock_engine):
        mock_engine.create_worktree.side_effect = EngineError("create", "fatal: a branch named 'dev' already exists")
        ok = await runner.create(PROJECT_PATH, "/wt/repo-dev", "dev", None)
        assert ok is False
        mock_engine.list_worktrees.assert_not_called()
        assert runner.loading is False
        assert "already exists" in runner.error_message

    @pytest.mark.asyncio
    async def test_list_runs_after_create_completes(self, runner, mock_engine, sample_worktrees):
        calls = []
        mock_engine.create_worktree.side_effect = lambda *args: calls.append("create")

        def list_worktrees(project_path):
            calls.append("list")
            return sample_worktrees

        mock_engine.list_worktrees.side_effect = list_worktrees
        await runner.create(PROJECT_PATH, "/wt/repo-dev", "dev", "main")
        assert calls == ["create", "list"]

    @pytest.mark.asyncio
    async def test_remove_refreshes_once(self, runner, mock_engine):
        ok = await runner.remove(PROJECT_PATH, "/wt/repo-dev", "dev")
        assert ok is True
        mock_engine.remove_worktree.assert_called_once_with(PROJECT_PATH, "/wt/repo-dev", "dev")
        mock_engine.list_worktrees.assert_called_once_with(PROJECT_PATH)

    @pytest.mark.asyncio
    async def test_remove_failure(self, runner, mock_engine):
        mock_engine.remove_worktree.side_effect = EngineError("remove", "fatal: not a working tree")
        assert await runner.remove(PROJECT_PATH, "/wt/x", None) is False
        assert runner.loading is False
        assert runner.error_message == "fatal: not a working tree"
        mock_engine.list_worktrees.assert_not_called()


class TestOpenFolder:
    """Test opening folders."""

    @pytest.mark.asyncio
    async def test_success(self, runner, mock_engine):
        assert await runner.open_folder("/wt/repo-dev") is True
        mock_engine.open_folder.assert_called_once_with("/wt/repo-dev")
        assert runner.error_message is None

    @pytest.mark.asyncio
    async def test_failure_does_not_touch_loading_or_list(self, runner, store, mock_engine, sample_worktrees):
        store.replace_worktrees(sample_worktrees)
        loading_seen = []
        runner.add_listener(lambda: loading_seen.append(runner.loading))
        mock_engine.open_folder.side_effect = EngineError("open", "Failed to open folder '/x': no opener")

        assert await runner.open_folder("/x") is False
        assert runner.error_message == "Failed to open folder '/x': no opener"
        assert True not in loading_seen
        assert store.worktrees == sample_worktrees
        mock_engine.list_worktrees.assert_not_called()


class TestListeners:
    """Test change notifications."""

    @pytest.mark.asyncio
    async def test_listener_called_on_changes(self, mock_engine, store):
        listener = Mock()
        runner = OperationRunner(mock_engine, store, on_change=listener)
        await runner.refresh()
        assert listener.call_count >= 2

    def test_report_and_clear_error(self, runner):
        runner.report_error("first")
        runner.report_error("second")
        assert runner.error_message == "second"
        runner.clear_error()
        assert runner.error_message is None
