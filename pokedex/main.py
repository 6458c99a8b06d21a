from fastapi import FastAPI, Depends, status, HTTPException
from pokedex.services.catalog_service import CatalogService
from pokedex.dependencies import get_catalog_service
from pokedex.models import CatalogCell, CreatureDetailView
from pokedex.clients.pokeapi_client import CatalogError, NetworkError

app = FastAPI(
    title="Pokedex View API",
    description="Serves the list grid and detail page exactly as the Pokedex screens render them.",
)

def _to_http_error(error: CatalogError, identifier: str | None = None) -> HTTPException:
    # External 404s map to a standard 404, everything else means the catalog is unavailable
    if isinstance(error, NetworkError) and error.status_code == 404 and identifier is not None:
        return HTTPException(status_code=404, detail=f"Pokemon '{identifier}' not found.")
    return HTTPException(
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        detail=f"External API Error: {error.detail}",
    )

# Endpoint 1: List screen grid
@app.get(
    "/catalog",
    response_model=list[CatalogCell],
    summary="Returns the first catalog page as grid cells",
)
async def get_catalog(
    service: CatalogService = Depends(get_catalog_service),
):
    """Index page plus enrichment, all-or-nothing: one failed entry fails the whole grid."""
    try:
        return await service.get_catalog_cells()
    except CatalogError as e:
        raise _to_http_error(e)


# Endpoint 2: Detail page
@app.get(
    "/catalog/{identifier}",
    response_model=CreatureDetailView,
    summary="Returns the detail page for one Pokemon",
)
async def get_catalog_detail(
    identifier: str,
    service: CatalogService = Depends(get_catalog_service),
):
    """Height, weight, types, stat bars and abilities, formatted for display."""
    try:
        return await service.get_detail_view(identifier)
    except CatalogError as e:
        raise _to_http_error(e, identifier)
