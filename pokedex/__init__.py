"""Pokedex screens: a catalog grid and per-Pokemon detail pages over PokeAPI."""
