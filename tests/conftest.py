import pytest

from itsm_catalog.core.storage import MemoryStorage
from itsm_catalog.main import CatalogApp, create_app
from itsm_catalog.repositories.entity_store import EntityStore

STORAGE_KEY = "ITSM_CATALOG_TEST"


@pytest.fixture
def storage_key():
    return STORAGE_KEY


@pytest.fixture
def storage():
    return MemoryStorage()


@pytest.fixture
def store(storage):
    return EntityStore(storage, STORAGE_KEY)


@pytest.fixture
def app(storage) -> CatalogApp:
    return create_app(storage, STORAGE_KEY)


@pytest.fixture
def billing():
    return {"name": "Billing", "owner": "Admin", "criticality": "Alta", "status": "Activo"}
