"""Pytest fixtures for git-worktree-hub tests"""
import tempfile
from pathlib import Path
from typing import List, Optional
from unittest.mock import Mock
import pytest
import git

from git_worktree_hub.controller import InteractionController
from git_worktree_hub.models.worktree import Worktree
from git_worktree_hub.services.engine import WorktreeEngine
from git_worktree_hub.services.runner import OperationRunner
from git_worktree_hub.store import WorktreeStore


PROJECT_PATH = "/home/dev/src/repo"
GLOBAL_ROOT = "/home/dev/src"


class StubPicker:
    """Directory picker double returning queued answers."""

    def __init__(self, *answers: Optional[str]):
        self.answers = list(answers)
        self.titles: List[str] = []

    async def pick_directory(self, title: str) -> Optional[str]:
        self.titles.append(title)
        answer = self.answers.pop(0) if self.answers else None
        if isinstance(answer, Exception):
            raise answer
        return answer


class StubConfirmer:
    """Confirmation double that records messages and answers with a fixed value."""

    def __init__(self, answer: bool = True):
        self.answer = answer
        self.messages: List[str] = []

    async def confirm(self, message: str) -> bool:
        self.messages.append(message)
        return self.answer


@pytest.fixture
def temp_dir():
    """Create a temporary directory for testing."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def git_repo(temp_dir):
    """Create a real Git repository for testing."""
    repo_path = temp_dir / "test_repo"
    repo_path.mkdir()

    repo = git.Repo.init(repo_path)

    repo.config_writer().set_value("user", "name", "Test User").release()
    repo.config_writer().set_value("user", "email", "test@example.com").release()

    test_file = repo_path / "README.md"
    test_file.write_text("# Test Repository\n")
    repo.index.add(["README.md"])
    repo.index.commit("Initial commit")

    # Rename master to main if needed
    try:
        repo.git.branch('-M', 'main')
    except Exception:
        pass

    yield repo

    repo.close()


@pytest.fixture
def sample_worktrees():
    """Worktrees as an engine would report them, main checkout first."""
    return [
        Worktree(path=PROJECT_PATH, head_hash="a1b2c3d4e5f6a7b8", branch="main"),
        Worktree(path=f"{GLOBAL_ROOT}/repo-feature-login", head_hash="b2c3d4e5f6a7b8c9", branch="feature/login"),
        Worktree(path="/tmp/elsewhere/scratch", head_hash="c3d4e5f6a7b8c9d0", branch="scratch"),
        Worktree(path=f"{GLOBAL_ROOT}/repo-detached", head_hash="d4e5f6a7b8c9d0e1", branch=None),
    ]


@pytest.fixture
def mock_engine(sample_worktrees):
    """Create a mock worktree engine."""
    engine = Mock(spec=WorktreeEngine)
    engine.list_worktrees = Mock(return_value=sample_worktrees)
    engine.create_worktree = Mock(return_value=None)
    engine.remove_worktree = Mock(return_value=None)
    engine.open_folder = Mock(return_value=None)
    return engine


@pytest.fixture
def store():
    """Store with a project and root already selected."""
    return WorktreeStore(project_path=PROJECT_PATH, global_root=GLOBAL_ROOT)


@pytest.fixture
def runner(mock_engine, store):
    return OperationRunner(mock_engine, store)


@pytest.fixture
def confirmer():
    return StubConfirmer(answer=True)


@pytest.fixture
def picker():
    return StubPicker()


@pytest.fixture
def controller(store, runner, picker, confirmer):
    return InteractionController(store, runner, picker, confirmer)
