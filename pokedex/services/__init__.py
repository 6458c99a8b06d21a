"""Service layer shared by the Textual screens and the view API."""
from .catalog_service import CatalogService

__all__ = ['CatalogService']
