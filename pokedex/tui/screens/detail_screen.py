"""DetailScreen - dedicated information page for one Pokemon."""

import logging
from typing import ClassVar

from textual import work
from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Center, VerticalScroll
from textual.reactive import reactive
from textual.screen import Screen
from textual.widgets import Footer, Header, LoadingIndicator, Static

from pokedex import formatting
from pokedex.clients import CatalogError
from pokedex.models import CreatureRecord
from pokedex.services import CatalogService
from pokedex.tui.state import FetchState
from pokedex.tui.widgets import CreatureDetail
from pokedex.views import build_detail_view

logger = logging.getLogger(__name__)


class DetailScreen(Screen[None]):
    """Fetches ``{base}/pokemon/{creature_id}`` on mount and on every id change.

    Loading, error and success are mutually exclusive. On success the
    screen title becomes the capitalized name.
    """

    DEFAULT_CSS = """
    DetailScreen #loading-container {
        height: 1fr;
        align: center middle;
    }
    DetailScreen #loading-text {
        width: auto;
        margin-top: 1;
    }
    DetailScreen #error-text {
        display: none;
        width: 100%;
        height: 1fr;
        content-align: center middle;
        text-align: center;
        color: #ff6b6b;
        padding: 1 2;
    }
    DetailScreen #detail-scroll {
        display: none;
        height: 1fr;
    }
    """

    BINDINGS: ClassVar[list[Binding]] = [
        Binding("escape", "back", "Back"),
        Binding("q", "app.quit", "Quit"),
    ]

    # Navigation parameter
    creature_id: reactive[str] = reactive("", init=False)
    state: reactive[FetchState] = reactive(FetchState.IDLE, init=False)

    def __init__(self, service: CatalogService, creature_id: str | int) -> None:
        super().__init__()
        self._service = service
        self.record: CreatureRecord | None = None
        self.error: str | None = None
        self.set_reactive(DetailScreen.creature_id, str(creature_id))

    def compose(self) -> ComposeResult:
        yield Header()
        with Center(id="loading-container"):
            yield LoadingIndicator(id="loading")
            yield Static(formatting.LIST_LOADING_TEXT, id="loading-text")
        yield Static("", id="error-text", markup=False)
        yield VerticalScroll(id="detail-scroll")
        yield Footer()

    def on_mount(self) -> None:
        self._begin_loading()

    def watch_creature_id(self, creature_id: str) -> None:
        self._begin_loading()

    def watch_state(self, state: FetchState) -> None:
        self.query_one("#loading-container").display = state is FetchState.LOADING
        self.query_one("#error-text").display = state is FetchState.ERROR
        self.query_one("#detail-scroll").display = state is FetchState.SUCCESS

    def _begin_loading(self) -> None:
        self.title = self.app.title
        self.record = None
        self.error = None
        self.state = FetchState.LOADING
        self._load_record(self.creature_id)

    @work(exclusive=True)
    async def _load_record(self, creature_id: str) -> None:
        logger.info(f"Fetching Pokemon with ID: {creature_id}")
        try:
            record = await self._service.get_creature(creature_id)
        except CatalogError as e:
            logger.error(f"Error fetching Pokemon {creature_id}: {e.detail}")
            self._show_error(e.detail)
            return

        logger.info(f"Pokemon data received: {record.name}")
        await self._show_record(record)

    def _show_error(self, message: str) -> None:
        if not self.is_mounted:
            return
        self.error = message
        self.query_one("#error-text", Static).update(formatting.detail_error_text(message))
        self.state = FetchState.ERROR

    async def _show_record(self, record: CreatureRecord) -> None:
        if not self.is_mounted:
            return
        self.record = record
        view = build_detail_view(record)

        scroll = self.query_one("#detail-scroll", VerticalScroll)
        await scroll.remove_children()
        await scroll.mount(CreatureDetail(view, id="detail"))
        self.title = view.title
        self.state = FetchState.SUCCESS

    def action_back(self) -> None:
        # The default screen sits at the bottom of the stack
        if len(self.app.screen_stack) > 2:
            self.app.pop_screen()
