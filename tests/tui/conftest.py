"""Fixtures for Textual screen tests."""

from unittest.mock import AsyncMock, MagicMock

import pytest

from pokedex.models import CreatureRecord
from pokedex.services import CatalogService


@pytest.fixture
def pikachu(record_payload) -> CreatureRecord:
    return CreatureRecord.model_validate(record_payload())


@pytest.fixture
def mock_service(pikachu) -> MagicMock:
    """CatalogService mock resolving every fetch to Pikachu by default."""
    service = MagicMock(spec=CatalogService)
    service.load_catalog = AsyncMock(return_value=[])
    service.get_creature = AsyncMock(return_value=pikachu)
    service.get_creature_at = AsyncMock(return_value=pikachu)
    service.close = AsyncMock()
    return service
