"""Shared PokeAPI payloads for the Pokedex tests."""

from collections.abc import Callable
from typing import Any

import pytest

BASE_URL = "https://pokeapi.co/api/v2"


def _record_payload(
    pokemon_id: int = 25,
    name: str = "pikachu",
    height: int = 4,
    weight: int = 60,
    **overrides: Any,
) -> dict[str, Any]:
    payload = {
        "id": pokemon_id,
        "name": name,
        "height": height,
        "weight": weight,
        "base_experience": 112,
        "sprites": {
            "front_default": f"https://raw.githubusercontent.com/PokeAPI/sprites/master/sprites/pokemon/{pokemon_id}.png",
            "back_default": None,
        },
        "types": [{"slot": 1, "type": {"name": "electric", "url": f"{BASE_URL}/type/13/"}}],
        "stats": [
            {"base_stat": 35, "effort": 0, "stat": {"name": "hp", "url": f"{BASE_URL}/stat/1/"}},
            {"base_stat": 55, "effort": 0, "stat": {"name": "attack", "url": f"{BASE_URL}/stat/2/"}},
            {"base_stat": 40, "effort": 0, "stat": {"name": "defense", "url": f"{BASE_URL}/stat/3/"}},
            {"base_stat": 50, "effort": 0, "stat": {"name": "special-attack", "url": f"{BASE_URL}/stat/4/"}},
            {"base_stat": 50, "effort": 0, "stat": {"name": "special-defense", "url": f"{BASE_URL}/stat/5/"}},
            {"base_stat": 90, "effort": 2, "stat": {"name": "speed", "url": f"{BASE_URL}/stat/6/"}},
        ],
        "abilities": [
            {"ability": {"name": "static", "url": f"{BASE_URL}/ability/9/"}, "is_hidden": False, "slot": 1},
            {"ability": {"name": "lightning-rod", "url": f"{BASE_URL}/ability/31/"}, "is_hidden": True, "slot": 3},
        ],
    }
    payload.update(overrides)
    return payload


@pytest.fixture
def record_payload() -> Callable[..., dict[str, Any]]:
    """Factory for a /pokemon/{id} response body (defaults to Pikachu)."""
    return _record_payload


@pytest.fixture
def index_payload() -> Callable[[list[tuple[int, str]]], dict[str, Any]]:
    """Factory for a /pokemon?limit=..&offset=.. response body."""

    def build(entries: list[tuple[int, str]]) -> dict[str, Any]:
        return {
            "count": 1302,
            "next": f"{BASE_URL}/pokemon?offset=20&limit=20",
            "previous": None,
            "results": [
                {"name": name, "url": f"{BASE_URL}/pokemon/{pokemon_id}/"}
                for pokemon_id, name in entries
            ],
        }

    return build
