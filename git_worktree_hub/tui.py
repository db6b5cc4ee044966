"""Interactive TUI for git-worktree-hub using Textual."""

from typing import Optional

from textual import work
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, Vertical
from textual.screen import Screen
from textual.widgets import Button, DataTable, Footer, Input, Label, Static
from rich.text import Text

from .__version__ import __version__
from .config import Config
from .constants import COLUMNS
from .controller import InteractionController
from .formatters import format_setting, format_worktree_row
from .models.worktree import Worktree
from .paths import derive_project_name
from .services.engine import WorktreeEngine
from .services.git_engine import GitWorktreeEngine
from .services.runner import OperationRunner
from .store import WorktreeStore
from .ui.screens import ConfirmScreen, DirectoryPickerScreen, ErrorScreen
from .ui.widgets import NonExpandingHeader
from .logging_config import get_logger

logger = get_logger(__name__)


class ScreenDirectoryPicker:
    """Directory picker backed by a modal screen."""

    def __init__(self, app: App):
        self.app = app

    async def pick_directory(self, title: str) -> Optional[str]:
        return await self.app.push_screen_wait(DirectoryPickerScreen(title))


class ScreenConfirmer:
    """Yes/No confirmation backed by a modal screen."""

    def __init__(self, app: App):
        self.app = app

    async def confirm(self, message: str) -> bool:
        return bool(await self.app.push_screen_wait(ConfirmScreen(message)))


class WorktreeHubApp(App):
    """Interactive TUI for git-worktree-hub."""

    TITLE = "Git Worktree Hub"
    SUB_TITLE = f"v{__version__}"

    CSS = """
    Screen {
        background: $surface;
    }

    #settings {
        height: auto;
        padding: 0 1;
        background: $panel;
    }

    #create-form {
        height: auto;
        padding: 1;
        border: round $primary;
        display: none;
    }

    #create-form.visible {
        display: block;
    }

    #create-form Input {
        width: 1fr;
        margin: 0 1 0 0;
    }

    #create-form Horizontal {
        height: auto;
    }

    #preview {
        padding: 1 0 0 0;
    }

    DataTable {
        height: 1fr;
    }

    #status-bar {
        dock: bottom;
        height: auto;
        background: $panel;
        padding: 0 1;
    }
    """

    BINDINGS = [
        Binding("q", "quit", "Quit"),
        Binding("p", "select_project", "Project"),
        Binding("g", "select_root", "Global Root"),
        Binding("n", "open_create_form", "New Worktree"),
        Binding("escape", "cancel_create_form", "Cancel", show=False),
        Binding("d", "remove_worktree", "Remove"),
        Binding("o", "open_folder", "Open Folder"),
        Binding("r", "refresh", "Refresh"),
    ]

    def __init__(self, config: Optional[Config] = None, engine: Optional[WorktreeEngine] = None):
        super().__init__()
        self.hub_config = config or Config()
        self.store = WorktreeStore(
            project_path=self.hub_config.project_path,
            global_root=self.hub_config.global_root,
            strict_root_match=self.hub_config.strict_root_match,
        )
        self.runner = OperationRunner(engine or GitWorktreeEngine(), self.store)
        self.controller = InteractionController(
            self.store,
            self.runner,
            picker=ScreenDirectoryPicker(self),
            confirmer=ScreenConfirmer(self),
        )
        self._showing_error = False
        self._view: Optional[Screen] = None

    def compose(self) -> ComposeResult:
        yield NonExpandingHeader(show_clock=True, icon="")
        yield Static(id="settings")
        with Vertical(id="create-form"):
            yield Label("New worktree")
            with Horizontal():
                yield Input(placeholder="Branch name (e.g. feature/login)", id="branch-input")
                yield Input(placeholder="Base branch (blank = current)", id="base-input")
            yield Static(id="preview")
            with Horizontal():
                yield Button("Create", variant="primary", id="create")
                yield Button("Cancel", id="cancel")
        yield DataTable(id="worktree-table", cursor_type="row", zebra_stripes=True)
        yield Static(id="status-bar")
        yield Footer()

    def on_mount(self) -> None:
        # Widgets live on the main screen even while a modal is on top
        self._view = self.screen
        table = self._view.query_one(DataTable)
        for col in COLUMNS:
            table.add_column(col.label, width=None, key=col.key)

        self.runner.add_listener(self._sync_view)
        self._sync_view()

        if self.store.project_path:
            self.refresh_worktrees()

    # View synchronisation

    def _sync_view(self) -> None:
        """Bring every widget in line with the store and runner state."""
        self._sync_settings()
        self._sync_form()
        self._populate_table()
        self._update_status()

    def _sync_settings(self) -> None:
        self._view.query_one(NonExpandingHeader).project_name = (
            derive_project_name(self.store.project_path) if self.store.project_path else ""
        )
        settings = Text()
        settings.append("Project: ", style="bold")
        settings.append_text(format_setting(self.store.project_path))
        settings.append("    Global root: ", style="bold")
        settings.append_text(format_setting(self.store.global_root))
        self._view.query_one("#settings", Static).update(settings)

    def _sync_form(self) -> None:
        form = self.store.form
        self._view.query_one("#create-form").set_class(form.visible, "visible")

        branch_input = self._view.query_one("#branch-input", Input)
        if branch_input.value != form.branch_name:
            branch_input.value = form.branch_name

        preview = self.controller.preview_path
        if preview:
            preview_text = Text.assemble(("Will be created at: ", "bold"), preview)
        elif not self.store.global_root:
            preview_text = Text("Select a global root (g) before creating worktrees", style="yellow")
        else:
            preview_text = Text("Enter a branch name", style="dim")
        self._view.query_one("#preview", Static).update(preview_text)

        self._view.query_one("#create", Button).disabled = (
            not self.controller.can_submit or self.runner.loading
        )

    def _populate_table(self) -> None:
        table = self._view.query_one(DataTable)
        saved_row = table.cursor_row
        table.clear()
        for wt in self.store.visible_worktrees():
            table.add_row(*format_worktree_row(wt), key=wt.path)
        if table.row_count and saved_row is not None:
            table.move_cursor(row=min(saved_row, table.row_count - 1))
        table.loading = self.runner.loading

    def _update_status(self) -> None:
        visible = len(self.store.visible_worktrees())
        total = len(self.store.worktrees)
        if not self.store.project_path:
            status = "No project selected. Press p to choose a repository."
        elif self.runner.loading:
            status = "Working..."
        else:
            status = f"{visible} of {total} worktrees under the global root"
        self._view.query_one("#status-bar", Static).update(status)

    def _selected_worktree(self) -> Optional[Worktree]:
        table = self._view.query_one(DataTable)
        if table.row_count == 0:
            return None
        row_key = table.coordinate_to_cell_key(table.cursor_coordinate).row_key
        return self.store.find_worktree(row_key.value)

    def _show_pending_error(self) -> None:
        """Surface the current error until the user dismisses it.

        Only one error modal is open at a time. An error that replaces the
        displayed one while it is open is shown once the modal is dismissed.
        """
        message = self.runner.error_message
        if not message or self._showing_error:
            return
        self._showing_error = True

        def on_dismiss(_: None) -> None:
            self._showing_error = False
            if self.runner.error_message == message:
                self.runner.clear_error()
            else:
                self._show_pending_error()

        self.push_screen(ErrorScreen(message), on_dismiss)

    # Intents (each runs in its own worker so dialogs can be awaited)

    @work(group="intents")
    async def refresh_worktrees(self) -> None:
        await self.controller.refresh()
        self._show_pending_error()

    @work(group="intents")
    async def select_project(self) -> None:
        await self.controller.select_project()
        self._sync_view()
        self._show_pending_error()

    @work(group="intents")
    async def select_root(self) -> None:
        await self.controller.select_global_root()
        self._sync_view()
        self._show_pending_error()

    @work(group="intents")
    async def submit_create(self) -> None:
        if await self.controller.submit_create():
            self.notify("Worktree created")
        self._sync_view()
        self._show_pending_error()

    @work(group="intents")
    async def remove_worktree(self, worktree: Worktree) -> None:
        if await self.controller.remove_worktree(worktree):
            self.notify(f"Removed {worktree.path}")
        self._show_pending_error()

    @work(group="intents")
    async def open_folder(self, path: str) -> None:
        await self.controller.open_folder(path)
        self._show_pending_error()

    # Actions

    def action_select_project(self) -> None:
        self.select_project()

    def action_select_root(self) -> None:
        self.select_root()

    def action_refresh(self) -> None:
        if not self.store.project_path:
            self.notify("No project selected", severity="warning")
            return
        self.refresh_worktrees()

    def action_open_create_form(self) -> None:
        self.controller.open_create_form()
        self._sync_form()
        self._view.query_one("#branch-input", Input).focus()

    def action_cancel_create_form(self) -> None:
        if not self.store.form.visible:
            return
        self.controller.cancel_create_form()
        self._sync_form()
        self._view.query_one(DataTable).focus()

    def action_submit_create(self) -> None:
        if not self.controller.can_submit:
            self.notify("A branch name and a global root are required", severity="warning")
            return
        self.submit_create()

    def action_remove_worktree(self) -> None:
        worktree = self._selected_worktree()
        if worktree is None:
            self.notify("No worktree selected", severity="warning")
            return
        self.remove_worktree(worktree)

    def action_open_folder(self) -> None:
        worktree = self._selected_worktree()
        if worktree is None:
            self.notify("No worktree selected", severity="warning")
            return
        self.open_folder(worktree.path)

    # Widget events

    def on_input_changed(self, event: Input.Changed) -> None:
        if event.input.id == "branch-input":
            self.controller.set_branch_name(event.value)
        elif event.input.id == "base-input":
            self.controller.set_base_branch(event.value)
        self._sync_form()

    def on_input_submitted(self, event: Input.Submitted) -> None:
        if event.input.id in ("branch-input", "base-input"):
            self.action_submit_create()

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == "create":
            self.action_submit_create()
        elif event.button.id == "cancel":
            self.action_cancel_create_form()

    async def action_quit(self) -> None:
        # Engine calls cannot be interrupted; pending workers are dropped
        self.workers.cancel_all()
        self.exit()
