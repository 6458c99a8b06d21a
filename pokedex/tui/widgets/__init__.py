"""Reusable widgets for the Pokedex screens."""

from pokedex.tui.widgets.creature_card import CreatureCard
from pokedex.tui.widgets.creature_detail import CreatureDetail
from pokedex.tui.widgets.sprite import SpriteLink
from pokedex.tui.widgets.stat_bar import StatBar, StatRow

__all__ = ["CreatureCard", "CreatureDetail", "SpriteLink", "StatBar", "StatRow"]
