"""Screens for the Pokedex app."""

from pokedex.tui.screens.detail_modal import CreatureModal
from pokedex.tui.screens.detail_screen import DetailScreen
from pokedex.tui.screens.list_screen import ListScreen

__all__ = ["CreatureModal", "DetailScreen", "ListScreen"]
