import asyncio
import pytest
from unittest.mock import AsyncMock
from pokedex.services.catalog_service import CatalogService
from pokedex.clients.pokeapi_client import NetworkError
from pokedex.models import (
    CatalogCell,
    CatalogEntry,
    CatalogPage,
    CreatureDetailView,
    CreatureRecord,
)

BASE_URL = "https://pokeapi.co/api/v2"

def make_page(entries):
    return CatalogPage.model_validate({
        "results": [
            {"name": name, "url": f"{BASE_URL}/pokemon/{pokemon_id}/"}
            for pokemon_id, name in entries
        ]
    })

@pytest.fixture
def mock_client(record_payload):
    # Use AsyncMock for methods that are awaited
    poke_client = AsyncMock()
    poke_client.base_url = BASE_URL
    poke_client.close = AsyncMock()

    # Resolve every detail URL to a record whose id matches the URL
    async def fetch_record(url):
        pokemon_id = int(url.rstrip("/").rsplit("/", 1)[1])
        return CreatureRecord.model_validate(
            record_payload(pokemon_id=pokemon_id, name=f"mon-{pokemon_id}")
        )

    poke_client.fetch_record.side_effect = fetch_record
    poke_client.list_page.return_value = make_page([(1, "mon-1"), (4, "mon-4"), (7, "mon-7")])
    poke_client.get_creature.return_value = CreatureRecord.model_validate(record_payload())
    return poke_client

@pytest.fixture
def catalog_service(mock_client):
    return CatalogService(poke_client=mock_client)


@pytest.mark.asyncio
async def test_load_catalog_enriches_every_entry(catalog_service, mock_client):
    """
    Verifies the index is fetched once (20 at offset 0) and every entry is
    enriched with id, name and sprite from its own detail URL.
    """
    # ACT
    entries = await catalog_service.load_catalog()

    # ASSERT
    mock_client.list_page.assert_called_once_with(limit=20, offset=0)
    assert mock_client.fetch_record.await_count == 3

    assert all(isinstance(entry, CatalogEntry) for entry in entries)
    # Order follows the index, not completion order
    assert [entry.id for entry in entries] == [1, 4, 7]
    assert entries[1].name == "mon-4"
    assert entries[1].detail_url == f"{BASE_URL}/pokemon/4/"
    assert entries[1].image_url.endswith("/4.png")


@pytest.mark.asyncio
async def test_load_catalog_runs_enrichment_concurrently(catalog_service, mock_client, record_payload):
    """All enrichment requests are in flight before any of them completes."""
    in_flight = 0
    max_in_flight = 0
    release = asyncio.Event()

    async def slow_fetch(url):
        nonlocal in_flight, max_in_flight
        in_flight += 1
        max_in_flight = max(max_in_flight, in_flight)
        if max_in_flight == 3:
            release.set()
        await release.wait()
        in_flight -= 1
        pokemon_id = int(url.rstrip("/").rsplit("/", 1)[1])
        return CreatureRecord.model_validate(record_payload(pokemon_id=pokemon_id))

    mock_client.fetch_record.side_effect = slow_fetch

    entries = await asyncio.wait_for(catalog_service.load_catalog(), timeout=5)

    assert max_in_flight == 3
    assert len(entries) == 3


@pytest.mark.asyncio
async def test_load_catalog_is_all_or_nothing(catalog_service, mock_client, record_payload):
    """
    A single failed enrichment fails the whole catalog, no partial list is returned.
    """
    async def one_fails(url):
        if url.endswith("/4/"):
            raise NetworkError(status_code=500, detail="API error: 500")
        pokemon_id = int(url.rstrip("/").rsplit("/", 1)[1])
        return CreatureRecord.model_validate(record_payload(pokemon_id=pokemon_id))

    mock_client.fetch_record.side_effect = one_fails

    with pytest.raises(NetworkError) as excinfo:
        await catalog_service.load_catalog()

    assert excinfo.value.status_code == 500


@pytest.mark.asyncio
async def test_index_failure_skips_enrichment(catalog_service, mock_client):
    mock_client.list_page.side_effect = NetworkError(status_code=None, detail="Connection refused")

    with pytest.raises(NetworkError):
        await catalog_service.load_catalog()

    mock_client.fetch_record.assert_not_called()


@pytest.mark.asyncio
async def test_get_creature_at_always_fetches_again(catalog_service, mock_client):
    """Opening a detail never reuses the enrichment result for the same URL."""
    await catalog_service.load_catalog()
    before = mock_client.fetch_record.await_count

    record = await catalog_service.get_creature_at(f"{BASE_URL}/pokemon/4/")

    assert record.id == 4
    assert mock_client.fetch_record.await_count == before + 1


@pytest.mark.asyncio
async def test_get_catalog_cells_maps_to_grid_cells(catalog_service):
    cells = await catalog_service.get_catalog_cells()

    assert all(isinstance(cell, CatalogCell) for cell in cells)
    assert [cell.badge for cell in cells] == ["#1", "#4", "#7"]
    assert cells[0].display_name == "Mon-1"


@pytest.mark.asyncio
async def test_get_detail_view_maps_record(catalog_service, mock_client):
    view = await catalog_service.get_detail_view("25")

    mock_client.get_creature.assert_called_once_with("25")
    assert isinstance(view, CreatureDetailView)
    assert view.title == "Pikachu"
    assert view.height_label == "Altura: 0.4 m"
    assert view.weight_label == "Peso: 6 kg"


@pytest.mark.asyncio
async def test_close_closes_client(catalog_service, mock_client):
    await catalog_service.close()

    mock_client.close.assert_awaited_once()
