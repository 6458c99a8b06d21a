"""CreatureCard - one cell of the two-column catalog grid."""

from typing import ClassVar

from textual import events
from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Vertical
from textual.message import Message
from textual.widgets import Static

from pokedex.models import CatalogCell, CatalogEntry
from pokedex.tui.widgets.sprite import SpriteLink
from pokedex.views import build_cell


class CreatureCard(Vertical, can_focus=True):
    """Focusable card showing sprite, capitalized name and ``#<id>`` badge.

    Click or Enter posts ``Selected`` (open the overlay), ``d`` posts
    ``OpenPage`` (navigate to the detail screen).
    """

    DEFAULT_CSS = """
    CreatureCard {
        height: 7;
        border: round #1E5631;
        background: #111111;
        padding: 0 1;
    }
    CreatureCard:focus {
        border: round #50FA7B;
    }
    CreatureCard .badge {
        width: 100%;
        text-align: right;
        color: #ffffff;
        text-style: bold;
    }
    CreatureCard .name {
        width: 100%;
        text-align: center;
        color: #ffffff;
    }
    """

    BINDINGS: ClassVar[list[Binding]] = [
        Binding("enter", "select", "Details"),
        Binding("d", "open_page", "Page"),
    ]

    class Selected(Message):
        """Posted when the card is tapped."""

        def __init__(self, entry: CatalogEntry) -> None:
            super().__init__()
            self.entry = entry

    class OpenPage(Message):
        """Posted when the card's full page is requested."""

        def __init__(self, entry: CatalogEntry) -> None:
            super().__init__()
            self.entry = entry

    def __init__(self, entry: CatalogEntry, **kwargs) -> None:
        super().__init__(**kwargs)
        self.entry = entry
        self.cell: CatalogCell = build_cell(entry)

    def compose(self) -> ComposeResult:
        yield Static(self.cell.badge, classes="badge")
        yield SpriteLink(self.cell.image_url, classes="sprite")
        yield Static(self.cell.display_name, classes="name", markup=False)

    def on_click(self, event: events.Click) -> None:
        self.focus()
        self.action_select()

    def action_select(self) -> None:
        self.post_message(self.Selected(self.entry))

    def action_open_page(self) -> None:
        self.post_message(self.OpenPage(self.entry))
