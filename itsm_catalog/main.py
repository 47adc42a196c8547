# itsm_catalog/main.py
"""
Punto de entrada para la capa de presentación: arma el store, los settings y
los casos de uso sobre el almacenamiento configurado.
"""
import logging
from datetime import date
from pathlib import Path
from typing import Optional, Union

from itsm_catalog.core.config import settings
from itsm_catalog.core.storage import KeyValueStorage, close_storage, get_storage
from itsm_catalog.repositories.entity_store import EntityStore
from itsm_catalog.services import backup_service
from itsm_catalog.services.catalog_service import CatalogService
from itsm_catalog.services.settings_service import SettingsStore

logger = logging.getLogger(__name__)


def configure_logging(level: Optional[str] = None) -> None:
    logging.basicConfig(
        level=(level or settings.log_level),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


class CatalogApp:
    def __init__(self, store: EntityStore):
        self.store = store
        self.settings = SettingsStore(store)
        self.catalog = CatalogService(store)

    def export_backup(self, directory: Union[str, Path, None] = None, day: Optional[date] = None) -> Path:
        return backup_service.export_backup(self.store, directory, day)

    def import_backup(self, path: Union[str, Path]) -> bool:
        return backup_service.import_backup(self.store, path)


def create_app(storage: Optional[KeyValueStorage] = None, storage_key: Optional[str] = None) -> CatalogApp:
    # load() aplica las migraciones pendientes (idempotente)
    store = EntityStore(storage or get_storage(), storage_key or settings.storage_key)
    logger.info(
        "Catálogo inicializado (%s, versión %s)",
        store.storage_key, store.data.get("version"),
    )
    return CatalogApp(store)


def shutdown() -> None:
    close_storage()


if __name__ == "__main__":
    configure_logging()
    app = create_app()
    for name, schema in app.catalog.schemas().items():
        logger.info("%s %s: %d registros", schema.icon, schema.label, len(app.store.get_all(name)))
    shutdown()
