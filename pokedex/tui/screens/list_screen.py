"""ListScreen - two-column grid of the first catalog page."""

import logging
from typing import ClassVar

from textual import work
from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Center, Grid
from textual.reactive import reactive
from textual.screen import Screen
from textual.widgets import Footer, Header, LoadingIndicator, Static

from pokedex import formatting
from pokedex.clients import CatalogError
from pokedex.models import CatalogEntry
from pokedex.services import CatalogService
from pokedex.tui.screens.detail_modal import CreatureModal
from pokedex.tui.screens.detail_screen import DetailScreen
from pokedex.tui.state import FetchState
from pokedex.tui.widgets import CreatureCard

logger = logging.getLogger(__name__)


class ListScreen(Screen[None]):
    """Catalog grid with an in-place detail overlay.

    The grid is all-or-nothing: if any enrichment request fails the error is
    logged and the screen keeps showing the loading state.
    """

    DEFAULT_CSS = """
    ListScreen {
        background: #000000;
    }
    ListScreen #loading-container {
        height: 1fr;
        align: center middle;
    }
    ListScreen #loading-text {
        width: auto;
        margin-top: 1;
    }
    ListScreen #grid {
        display: none;
        grid-size: 2;
        grid-gutter: 0 1;
        grid-rows: 7;
        padding: 1;
        height: 1fr;
        overflow-y: auto;
    }
    """

    BINDINGS: ClassVar[list[Binding]] = [
        Binding("q", "app.quit", "Quit"),
    ]

    state: reactive[FetchState] = reactive(FetchState.IDLE, init=False)

    def __init__(self, service: CatalogService) -> None:
        super().__init__()
        self._service = service
        self.entries: list[CatalogEntry] = []
        self.selected_entry: CatalogEntry | None = None

    def compose(self) -> ComposeResult:
        yield Header()
        with Center(id="loading-container"):
            yield LoadingIndicator(id="loading")
            yield Static(formatting.LIST_LOADING_TEXT, id="loading-text")
        yield Grid(id="grid")
        yield Footer()

    def on_mount(self) -> None:
        self.title = formatting.LIST_TITLE
        self.state = FetchState.LOADING
        self._load_catalog()

    def watch_state(self, state: FetchState) -> None:
        self.query_one("#loading-container").display = state is FetchState.LOADING
        self.query_one("#grid").display = state is FetchState.SUCCESS

    @work(exclusive=True)
    async def _load_catalog(self) -> None:
        try:
            entries = await self._service.load_catalog()
        except CatalogError as e:
            # No partial grid, the screen stays in its loading state
            logger.error(f"Error fetching Pokemon list: {e.detail}")
            return

        await self._show_catalog(entries)

    async def _show_catalog(self, entries: list[CatalogEntry]) -> None:
        if not self.is_mounted:
            return
        self.entries = entries

        grid = self.query_one("#grid", Grid)
        await grid.remove_children()
        await grid.mount_all(
            CreatureCard(entry, id=f"card-{entry.id}") for entry in entries
        )
        self.state = FetchState.SUCCESS

        if entries:
            grid.children[0].focus()

    def on_creature_card_selected(self, message: CreatureCard.Selected) -> None:
        self.open_overlay(message.entry)

    def on_creature_card_open_page(self, message: CreatureCard.OpenPage) -> None:
        self.app.push_screen(DetailScreen(self._service, message.entry.id))

    def open_overlay(self, entry: CatalogEntry) -> None:
        """Show the detail overlay for ``entry``; each open fetches afresh."""
        self.selected_entry = entry
        self.app.push_screen(CreatureModal(self._service, entry), self._on_overlay_closed)

    def _on_overlay_closed(self, result: None = None) -> None:
        self.selected_entry = None
