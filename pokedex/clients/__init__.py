"""Client modules for external API communication."""
from .pokeapi_client import (
    PAGE_SIZE,
    CatalogError,
    DataUnavailable,
    NetworkError,
    PokeAPIClient,
)

__all__ = [
    'PAGE_SIZE',
    'PokeAPIClient',
    'CatalogError',
    'NetworkError',
    'DataUnavailable',
]
