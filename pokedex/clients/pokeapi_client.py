import os
import httpx
import logging
from pydantic import BaseModel, ValidationError
from pokedex.models import CatalogPage, CreatureRecord

logger = logging.getLogger(__name__)

PAGE_SIZE = 20

# Base class for every failure a fetch site has to map to an error state
class CatalogError(Exception):
    def __init__(self, detail: str):
        super().__init__(detail)
        self.detail = detail

# Failed fetch: non-2xx status (status_code set) or transport failure (status_code None)
class NetworkError(CatalogError):
    def __init__(self, status_code: int | None, detail: str):
        super().__init__(detail)
        self.status_code = status_code

# Response arrived but the expected fields are missing or malformed
class DataUnavailable(CatalogError):
    pass

def _timeout_from_env() -> float | None:
    # No timeout unless configured, a hung request keeps its screen loading
    value = os.getenv("POKEAPI_TIMEOUT")
    if not value:
        return None
    return float(value)

class PokeAPIClient:
    BASE_URL = "https://pokeapi.co/api/v2"

    def __init__(self, base_url: str = None, timeout: float | None = None):
        # Use environment variables if not provided
        if base_url is None:
            base_url = os.getenv("POKEAPI_BASE_URL", self.BASE_URL)
        if timeout is None:
            timeout = _timeout_from_env()
        self.base_url = base_url.rstrip("/")
        self.client = httpx.AsyncClient(base_url=self.base_url, timeout=timeout)

    async def _get_json(self, url: str, params: dict | None = None) -> dict:
        """Internal method to GET a resource with error handling."""
        logger.info(f"Fetching {url}")

        try:
            response = await self.client.get(url, params=params)
            response.raise_for_status()  # Raises for 4xx/5xx status codes
            return response.json()

        except httpx.HTTPStatusError as e:
            status_code = e.response.status_code
            logger.error(f"PokeAPI returned status {status_code} for {url}")
            raise NetworkError(status_code=status_code, detail=f"API error: {status_code}")
        except httpx.RequestError as e:
            # Handle network failures/timeouts
            logger.error(f"PokeAPI network error for {url}: {e}")
            raise NetworkError(status_code=None, detail=str(e) or type(e).__name__)
        except httpx.InvalidURL as e:
            # Raised before any request is sent, e.g. control characters in the id
            logger.error(f"Invalid PokeAPI URL {url!r}: {e}")
            raise NetworkError(status_code=None, detail=str(e))
        except ValueError:
            logger.error(f"PokeAPI returned a non-JSON body for {url}")
            raise DataUnavailable(f"Invalid response body from {url}")

    def _validate(self, model: type[BaseModel], data: dict, url: str):
        try:
            return model.model_validate(data)
        except ValidationError as e:
            logger.error(f"Unexpected {model.__name__} payload from {url}: {e.error_count()} errors")
            raise DataUnavailable(f"Unexpected response format from {url}")

    async def list_page(self, limit: int = PAGE_SIZE, offset: int = 0) -> CatalogPage:
        """Fetches one page of the catalog index (name + detail URL per entry)."""
        data = await self._get_json("/pokemon", params={"limit": limit, "offset": offset})
        page = self._validate(CatalogPage, data, "/pokemon")
        logger.info(f"Catalog page received with {len(page.results)} entries")
        return page

    async def fetch_record(self, url: str) -> CreatureRecord:
        """Fetches a full record from an absolute detail URL."""
        data = await self._get_json(url)
        return self._validate(CreatureRecord, data, url)

    async def get_creature(self, identifier: str | int) -> CreatureRecord:
        """Fetches a full record by numeric id or name."""
        normalized = str(identifier).strip().lower()
        return await self.fetch_record(f"{self.base_url}/pokemon/{normalized}")

    async def close(self):
        """Close the HTTP client (call on app shutdown)."""
        await self.client.aclose()
