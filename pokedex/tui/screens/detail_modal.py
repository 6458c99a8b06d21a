"""CreatureModal - detail overlay opened from the catalog grid."""

import logging
from typing import ClassVar

from textual import events, work
from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Center, Horizontal, Vertical, VerticalScroll
from textual.reactive import reactive
from textual.screen import ModalScreen
from textual.widgets import Button, LoadingIndicator, Static

from pokedex import formatting
from pokedex.clients import CatalogError
from pokedex.models import CatalogEntry, CreatureRecord
from pokedex.services import CatalogService
from pokedex.tui.state import FetchState
from pokedex.tui.widgets import CreatureDetail
from pokedex.views import build_detail_view

logger = logging.getLogger(__name__)


class CreatureModal(ModalScreen[None]):
    """Overlay with its own loading state.

    Opens in loading and always issues a fresh fetch of the entry's detail
    URL. The fetched record lives and dies with the modal, so reopening the
    same entry starts from loading again.
    """

    DEFAULT_CSS = """
    CreatureModal {
        align: center middle;
        background: black 80%;
    }
    CreatureModal #container {
        width: 90%;
        height: 80%;
        border: round #1E5631;
        background: #000000;
        padding: 0 1;
    }
    CreatureModal #header {
        height: 1;
    }
    CreatureModal #header-spacer {
        width: 1fr;
    }
    CreatureModal #close-x {
        width: 3;
        color: #FF3B30;
        text-style: bold;
    }
    CreatureModal #loading-container {
        height: 5;
        align: center middle;
    }
    CreatureModal #loading-text {
        width: auto;
    }
    CreatureModal #error-text {
        display: none;
        width: 100%;
        text-align: center;
        color: #ff6b6b;
        padding: 1;
    }
    CreatureModal #detail-scroll {
        display: none;
        height: 1fr;
    }
    CreatureModal #buttons {
        display: none;
        height: auto;
        align: center middle;
    }
    """

    BINDINGS: ClassVar[list[Binding]] = [
        Binding("escape", "close", "Close", show=False),
        Binding("x", "close", "Close", show=False),
    ]

    state: reactive[FetchState] = reactive(FetchState.IDLE, init=False)

    def __init__(self, service: CatalogService, entry: CatalogEntry) -> None:
        super().__init__()
        self._service = service
        self.entry = entry
        self.record: CreatureRecord | None = None

    def compose(self) -> ComposeResult:
        with Vertical(id="container"):
            with Horizontal(id="header"):
                yield Static("", id="header-spacer")
                yield Static("x", id="close-x")

            with Center(id="loading-container"):
                yield LoadingIndicator(id="loading")
                yield Static(formatting.DETAIL_LOADING_TEXT, id="loading-text")

            yield Static(formatting.DETAILS_UNAVAILABLE_TEXT, id="error-text")
            yield VerticalScroll(id="detail-scroll")

            with Horizontal(id="buttons"):
                yield Button(formatting.CLOSE_TEXT, id="close-btn", variant="success")

    def on_mount(self) -> None:
        self.state = FetchState.LOADING
        self._load_details()

    def watch_state(self, state: FetchState) -> None:
        self.query_one("#loading-container").display = state is FetchState.LOADING
        self.query_one("#error-text").display = state is FetchState.ERROR
        self.query_one("#detail-scroll").display = state is FetchState.SUCCESS
        self.query_one("#buttons").display = state is FetchState.SUCCESS

    @work(exclusive=True)
    async def _load_details(self) -> None:
        try:
            record = await self._service.get_creature_at(self.entry.detail_url)
        except CatalogError as e:
            logger.error(f"Error fetching Pokemon details: {e.detail}")
            if self.is_mounted:
                self.state = FetchState.ERROR
            return

        await self._show_details(record)

    async def _show_details(self, record: CreatureRecord) -> None:
        if not self.is_mounted:
            return
        self.record = record

        scroll = self.query_one("#detail-scroll", VerticalScroll)
        await scroll.remove_children()
        await scroll.mount(CreatureDetail(build_detail_view(record), id="detail"))
        self.state = FetchState.SUCCESS

    def on_click(self, event: events.Click) -> None:
        """Handle click on close button."""
        if event.widget is None:
            return
        for widget in event.widget.ancestors_with_self:
            if getattr(widget, "id", None) == "close-x":
                self.action_close()
                return

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == "close-btn":
            self.action_close()

    def action_close(self) -> None:
        self.record = None
        self.dismiss(None)
