"""FastAPI dependencies shared by the endpoint modules."""

from fastapi import Request

from virtual_catalog_api.app.services.catalog_service import CatalogService


def get_catalog(request: Request) -> CatalogService:
    """Return the catalog service owned by the running application."""
    return request.app.state.catalog
