"""Custom widgets for git-worktree-hub TUI."""

from textual.app import ComposeResult, RenderResult
from textual.events import Click
from textual.reactive import reactive
from textual.widgets import Header
from textual.widgets._header import HeaderIcon, HeaderTitle, HeaderClockSpace
from rich.text import Text

from git_worktree_hub.__version__ import __version__


class ProjectDisplay(HeaderClockSpace):
    """Shows the selected project and the version in place of the clock."""

    DEFAULT_CSS = """
    ProjectDisplay {
        width: auto;
        dock: right;
        padding: 0 1;
        background: $foreground 5%;
        color: $text;
        text-align: center;
        text-opacity: 85%;
    }
    """

    project_name: reactive[str] = reactive("")

    def render(self) -> RenderResult:
        text = Text()
        if self.project_name:
            text.append(self.project_name, style="bold")
            text.append("  ")
        text.append(f"v{__version__}")
        return text


class NonExpandingHeader(Header):
    """Header that keeps its height on click and shows the current project."""

    project_name: reactive[str] = reactive("")

    def compose(self) -> ComposeResult:
        yield HeaderIcon().data_bind(Header.icon)
        yield HeaderTitle()
        if self._show_clock:
            yield ProjectDisplay().data_bind(NonExpandingHeader.project_name)
        else:
            yield HeaderClockSpace()

    def on_click(self, event: Click) -> None:
        # Header toggles its tall mode on click
        event.stop()
