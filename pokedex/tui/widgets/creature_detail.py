"""CreatureDetail - full information page for one Pokemon.

Used both by the detail screen and by the overlay on the list screen, so
both render the same sections from the same ``CreatureDetailView``.
"""

from textual.app import ComposeResult
from textual.containers import VerticalGroup
from textual.widgets import Label, Static

from pokedex import formatting
from pokedex.models import CreatureDetailView
from pokedex.tui.widgets.sprite import SpriteLink
from pokedex.tui.widgets.stat_bar import StatRow


class CreatureDetail(VerticalGroup):
    """Image, title, basic info, stat bars and abilities."""

    DEFAULT_CSS = """
    CreatureDetail {
        padding: 1 2;
    }
    CreatureDetail #title {
        width: 100%;
        text-align: center;
        text-style: bold;
        margin-bottom: 1;
    }
    CreatureDetail .section-title {
        width: 100%;
        color: #1E5631;
        text-style: bold;
        border-bottom: solid #1E5631;
        margin-top: 1;
    }
    CreatureDetail .info-text {
        color: #dddddd;
    }
    """

    def __init__(self, view: CreatureDetailView, **kwargs) -> None:
        super().__init__(**kwargs)
        self.view = view

    def compose(self) -> ComposeResult:
        yield SpriteLink(self.view.image_url, id="sprite")
        yield Static(self.view.title, id="title", markup=False)

        yield Label(formatting.BASIC_INFO_TITLE, classes="section-title")
        yield Static(self.view.height_label, id="height", classes="info-text")
        yield Static(self.view.weight_label, id="weight", classes="info-text")
        yield Static(self.view.types_label, id="types", classes="info-text", markup=False)

        yield Label(formatting.STATS_TITLE, classes="section-title")
        for stat in self.view.stats:
            yield StatRow(stat, classes="stat-row")

        yield Label(formatting.ABILITIES_TITLE, classes="section-title")
        for ability in self.view.abilities:
            yield Static(ability, classes="info-text ability", markup=False)
