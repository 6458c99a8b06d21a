"""Entry point for running the Pokedex as a module.

Usage:
    python -m pokedex [ID]
"""

from pokedex.tui.app import main

if __name__ == "__main__":
    main()
