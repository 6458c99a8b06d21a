from pokedex.clients import PokeAPIClient
from pokedex.services import CatalogService
from fastapi import Depends

_poke_client = None

def get_poke_client() -> PokeAPIClient:
    global _poke_client
    if _poke_client is None:
        _poke_client = PokeAPIClient()
    return _poke_client

def get_catalog_service(
    poke_client: PokeAPIClient = Depends(get_poke_client),
) -> CatalogService:
    return CatalogService(poke_client=poke_client)
