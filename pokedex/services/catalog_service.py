import asyncio
import logging
from pokedex.clients.pokeapi_client import PAGE_SIZE, PokeAPIClient
from pokedex.models import (
    CatalogCell,
    CatalogEntry,
    CreatureDetailView,
    CreatureRecord,
    NamedResource,
)
from pokedex.views import build_cell, build_detail_view

logger = logging.getLogger(__name__)

class CatalogService:
    # Service requires the catalog client via Dependency Injection
    def __init__(self, poke_client: PokeAPIClient):
        self._poke_client = poke_client

    async def load_catalog(self) -> list[CatalogEntry]:
        """
        Fetches the first index page, then enriches every entry with its
        detail record. Enrichment requests run concurrently and are awaited
        together: the first failure propagates and no partial list is returned.
        """
        page = await self._poke_client.list_page(limit=PAGE_SIZE, offset=0)

        # Each enrichment writes to its own slot, gather keeps index order
        entries = await asyncio.gather(*(self._enrich(ref) for ref in page.results))

        logger.info(f"Catalog enriched with {len(entries)} entries")
        return list(entries)

    async def _enrich(self, ref: NamedResource) -> CatalogEntry:
        # Index references always carry a URL, fall back to the name endpoint otherwise
        detail_url = ref.url or f"{self._poke_client.base_url}/pokemon/{ref.name}"
        record = await self._poke_client.fetch_record(detail_url)
        return CatalogEntry(
            id=record.id,
            name=record.name,
            image_url=record.sprites.front_default,
            detail_url=detail_url,
        )

    async def get_creature(self, identifier: str | int) -> CreatureRecord:
        return await self._poke_client.get_creature(identifier)

    async def get_creature_at(self, url: str) -> CreatureRecord:
        """Always a fresh fetch, enrichment results are never reused."""
        return await self._poke_client.fetch_record(url)

    async def get_catalog_cells(self) -> list[CatalogCell]:
        entries = await self.load_catalog()
        return [build_cell(entry) for entry in entries]

    async def get_detail_view(self, identifier: str | int) -> CreatureDetailView:
        record = await self.get_creature(identifier)
        return build_detail_view(record)

    async def close(self):
        await self._poke_client.close()
