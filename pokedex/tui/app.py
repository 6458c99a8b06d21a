"""Pokedex - Textual app hosting the catalog grid and detail screens."""

import argparse
import logging
import os

from textual.app import App
from textual.binding import Binding
from textual.logging import TextualHandler

from pokedex.clients import PokeAPIClient
from pokedex.services import CatalogService
from pokedex.tui.screens import DetailScreen, ListScreen


class PokedexApp(App):
    """Pushes the list screen, or the detail screen when started with an id."""

    CSS_PATH = "pokedex.tcss"
    TITLE = "Pokédex"
    ENABLE_COMMAND_PALETTE = False

    BINDINGS = [
        Binding("q", "quit", "Quit"),
    ]

    def __init__(self, service: CatalogService, creature_id: str | None = None) -> None:
        super().__init__()
        self._service = service
        self._creature_id = creature_id

    def on_mount(self) -> None:
        if self._creature_id:
            self.push_screen(DetailScreen(self._service, self._creature_id))
        else:
            self.push_screen(ListScreen(self._service))

    async def on_unmount(self) -> None:
        await self._service.close()


def main(argv: list[str] | None = None) -> None:
    """Entry point for the application."""
    parser = argparse.ArgumentParser(
        prog="pokedex",
        description="Browse the first page of the PokeAPI catalog.",
    )
    parser.add_argument("creature_id", nargs="?", help="open the detail page for this id or name")
    parser.add_argument(
        "--log-level",
        default=os.getenv("POKEDEX_LOG_LEVEL", "INFO"),
        help="logging level (default: %(default)s)",
    )
    args = parser.parse_args(argv)

    # Log records go to the Textual devtools console instead of the terminal
    logging.basicConfig(level=args.log_level.upper(), handlers=[TextualHandler()])

    service = CatalogService(poke_client=PokeAPIClient())
    app = PokedexApp(service, creature_id=args.creature_id)
    app.run()


if __name__ == "__main__":
    main()
