"""StatBar and StatRow - one labeled base stat with a horizontal bar."""

from textual.app import ComposeResult
from textual.containers import HorizontalGroup
from textual.widget import Widget
from textual.widgets import Static

from pokedex.models import StatBarView

FILLED = "█"
EMPTY = "░"


class StatBar(Widget):
    """Fixed-width bar filled to ``percent`` of its width."""

    DEFAULT_CSS = """
    StatBar {
        width: 1fr;
        height: 1;
        color: #1E5631;
    }
    """

    BAR_WIDTH = 20

    def __init__(self, percent: int, **kwargs) -> None:
        super().__init__(**kwargs)
        self.percent = percent

    @property
    def filled_cells(self) -> int:
        filled = round(self.percent * self.BAR_WIDTH / 100)
        return max(0, min(filled, self.BAR_WIDTH))

    def render(self) -> str:
        filled = self.filled_cells
        return FILLED * filled + EMPTY * (self.BAR_WIDTH - filled)


class StatRow(HorizontalGroup):
    """Stat label, uncapped value and its bar."""

    DEFAULT_CSS = """
    StatRow {
        height: 1;
        margin-bottom: 1;
    }
    StatRow .stat-name {
        width: 16;
        color: #cccccc;
    }
    StatRow .stat-value {
        width: 5;
        text-align: right;
        margin-right: 1;
    }
    """

    def __init__(self, stat: StatBarView, **kwargs) -> None:
        super().__init__(**kwargs)
        self.stat = stat

    def compose(self) -> ComposeResult:
        yield Static(f"{self.stat.label}:", classes="stat-name", markup=False)
        yield Static(str(self.stat.value), classes="stat-value")
        yield StatBar(self.stat.percent)
