"""Modal screens for git-worktree-hub TUI."""

import os
from pathlib import Path
from typing import Optional

from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Container, Vertical
from textual.screen import ModalScreen
from textual.widgets import Button, DirectoryTree, Input, Label, Static


class ConfirmScreen(ModalScreen[bool]):
    """Modal confirmation dialog for destructive actions."""

    DEFAULT_CSS = """
    ConfirmScreen {
        align: center middle;
    }

    #confirm-dialog {
        width: 80%;
        height: auto;
        border: thick $error 80%;
        background: $surface;
        padding: 1 2;
    }

    #confirm-message {
        width: 100%;
        height: auto;
        padding: 1 0;
    }

    #button-container {
        width: 100%;
        height: auto;
        align: center middle;
        padding: 1 0;
    }

    Button {
        margin: 0 1;
    }
    """

    BINDINGS = [Binding("escape", "decline", "No")]

    def __init__(self, message: str):
        super().__init__()
        self.message = message

    def compose(self) -> ComposeResult:
        with Vertical(id="confirm-dialog"):
            yield Static(self.message, id="confirm-message", markup=False)
            with Container(id="button-container"):
                yield Button("Yes", variant="error", id="yes")
                yield Button("No", variant="primary", id="no")

    def on_mount(self) -> None:
        # Default to the safe answer
        self.query_one("#no", Button).focus()

    def on_button_pressed(self, event: Button.Pressed) -> None:
        event.stop()
        self.dismiss(event.button.id == "yes")

    def action_decline(self) -> None:
        self.dismiss(False)


class ErrorScreen(ModalScreen[None]):
    """Modal error display, closed explicitly by the user."""

    DEFAULT_CSS = """
    ErrorScreen {
        align: center middle;
    }

    #error-dialog {
        width: 80%;
        height: auto;
        border: thick $error 80%;
        background: $surface;
        padding: 1 2;
    }

    #error-title {
        text-style: bold;
        color: $error;
    }

    #error-content {
        width: 100%;
        height: auto;
        padding: 1 0;
    }

    #error-button-container {
        width: 100%;
        height: auto;
        align: center middle;
        padding: 1 0;
    }
    """

    BINDINGS = [
        Binding("escape", "close", "Close"),
        Binding("enter", "close", "Close", show=False),
    ]

    def __init__(self, message: str):
        super().__init__()
        self.message = message

    def compose(self) -> ComposeResult:
        with Vertical(id="error-dialog"):
            yield Label("Error", id="error-title")
            yield Static(self.message, id="error-content", markup=False)
            with Container(id="error-button-container"):
                yield Button("Dismiss", variant="primary", id="close")

    def on_button_pressed(self, event: Button.Pressed) -> None:
        event.stop()
        self.dismiss()

    def action_close(self) -> None:
        self.dismiss()


class DirectoryPickerScreen(ModalScreen[Optional[str]]):
    """Pick a single directory from a tree or by typing its path.

    Dismisses with the absolute path of an existing directory, or None when
    cancelled. Anything else typed into the path field is rejected in place.
    """

    DEFAULT_CSS = """
    DirectoryPickerScreen {
        align: center middle;
    }

    #picker-dialog {
        width: 80%;
        height: 80%;
        border: thick $primary;
        background: $surface;
        padding: 1 2;
    }

    #picker-title {
        width: 100%;
        text-align: center;
        text-style: bold;
        margin-bottom: 1;
    }

    #picker-notice {
        color: $error;
        height: auto;
    }

    #picker-tree {
        height: 1fr;
        border: solid $secondary;
        margin: 1 0;
    }

    #picker-buttons {
        width: 100%;
        height: auto;
        align: center middle;
    }

    Button {
        margin: 0 1;
    }
    """

    BINDINGS = [Binding("escape", "cancel", "Cancel")]

    def __init__(self, title: str, start_path: Optional[str] = None):
        super().__init__()
        self.title_text = title
        self.start_path = start_path if start_path and os.path.isdir(start_path) else str(Path.home())

    def compose(self) -> ComposeResult:
        with Vertical(id="picker-dialog"):
            yield Label(self.title_text, id="picker-title")
            yield Input(value=self.start_path, placeholder="Directory path", id="picker-path")
            yield Static("", id="picker-notice", markup=False)
            yield DirectoryTree(self.start_path, id="picker-tree")
            with Container(id="picker-buttons"):
                yield Button("Select", variant="primary", id="select")
                yield Button("Cancel", id="cancel")

    def on_mount(self) -> None:
        self.query_one("#picker-tree", DirectoryTree).focus()
        self.query_one("#picker-notice", Static).display = False

    def on_directory_tree_directory_selected(self, event: DirectoryTree.DirectorySelected) -> None:
        self.query_one("#picker-path", Input).value = str(event.path)
        self.query_one("#picker-notice", Static).display = False

    def on_input_submitted(self, event: Input.Submitted) -> None:
        event.stop()
        self._select()

    def on_button_pressed(self, event: Button.Pressed) -> None:
        event.stop()
        if event.button.id == "select":
            self._select()
        else:
            self.dismiss(None)

    def action_cancel(self) -> None:
        self.dismiss(None)

    def _select(self) -> None:
        value = self.query_one("#picker-path", Input).value.strip()
        if not value:
            self.dismiss(None)
            return
        path = os.path.abspath(os.path.expanduser(value))
        if not os.path.isdir(path):
            # Stay open so the user can correct the path
            notice = self.query_one("#picker-notice", Static)
            notice.update(f"Not a directory: {path}")
            notice.display = True
            return
        self.dismiss(path)
