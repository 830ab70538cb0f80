import pytest
from fastapi.testclient import TestClient

from virtual_catalog_api.app.core.config import Settings
from virtual_catalog_api.app.main import create_app
from virtual_catalog_api.app.services.catalog_service import CatalogService


@pytest.fixture
def small_catalog():
    return CatalogService(50, search_result_cap=10)


@pytest.fixture
def catalog():
    return CatalogService()


@pytest.fixture
def app_settings():
    return Settings(catalog_size=200, search_result_cap=1000)


@pytest.fixture
def client(app_settings):
    with TestClient(create_app(app_settings)) as test_client:
        yield test_client
