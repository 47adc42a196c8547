# itsm_catalog/repositories/entity_store.py
"""
EntityStore: CRUD genérico sobre las colecciones del catálogo.

Todo el estado vive en un único blob JSON bajo `storage_key`. Cada operación
que muta escribe el blob completo (lectura-modificación-escritura); no hay
persistencia parcial ni transacciones que abarquen varias llamadas.
"""
from __future__ import annotations

import json
import logging
import uuid
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional, Union

from itsm_catalog.core.errors import UnknownCollectionError
from itsm_catalog.core.migrations import empty_state, migrate_state
from itsm_catalog.core.settings_schema import SETTING_KEYS
from itsm_catalog.core.storage import KeyValueStorage
from itsm_catalog.models.common import COLLECTIONS, Record

logger = logging.getLogger(__name__)

# Campos que asigna el store y que nunca cambian tras la creación
IMMUTABLE_FIELDS = ("id", "createdAt")


def _now_iso() -> str:
    return datetime.now(timezone.utc).isoformat()


class EntityStore:
    def __init__(self, storage: KeyValueStorage, storage_key: str = "ITSM_CATALOG_DATA_V1"):
        self.storage = storage
        self.storage_key = storage_key
        self.data: Dict[str, Any] = self.load()

    # ------------------------
    # Persistencia
    # ------------------------
    def load(self) -> Dict[str, Any]:
        stored = self.storage.get_item(self.storage_key)
        if stored is None:
            return empty_state()
        try:
            parsed = json.loads(stored)
            if not isinstance(parsed, dict):
                raise ValueError("el blob persistido no es un objeto JSON")
        except ValueError as e:
            # se conserva el blob ilegible para recuperación manual
            logger.exception("Estado persistido ilegible en %s: %s", self.storage_key, e)
            self.storage.set_item(f"{self.storage_key}.corrupt", stored)
            return empty_state()
        before = parsed.get("version")
        state = migrate_state(parsed)
        if state.get("version") != before:
            logger.info("load: estado migrado de versión %s a %s", before, state["version"])
        return state

    def _write(self, state: Dict[str, Any]) -> None:
        self.storage.set_item(self.storage_key, json.dumps(state, ensure_ascii=False))

    def save(self) -> None:
        self._write(self.data)

    def reset(self) -> None:
        """Borra el blob persistido y vuelve al estado vacío."""
        self.storage.remove_item(self.storage_key)
        self.data = empty_state()
        logger.info("reset: catálogo reiniciado")

    # ------------------------
    # Settings
    # ------------------------
    def get_settings(self) -> Dict[str, List[str]]:
        return self.data["settings"]

    def update_setting_list(self, key: str, values: List[str]) -> bool:
        if key not in SETTING_KEYS or key not in self.data["settings"]:
            return False
        self.data["settings"][key] = list(values)
        self.save()
        return True

    # ------------------------
    # CRUD
    # ------------------------
    def _collection(self, collection: str) -> Optional[List[Record]]:
        if collection not in COLLECTIONS:
            return None
        return self.data.get(collection)

    def _new_id(self, items: List[Record]) -> str:
        taken = {i.get("id") for i in items}
        new_id = uuid.uuid4().hex
        while new_id in taken:
            new_id = uuid.uuid4().hex
        return new_id

    def get_all(self, collection: str) -> List[Record]:
        items = self._collection(collection)
        return items if items is not None else []

    def get(self, collection: str, item_id: str) -> Optional[Record]:
        return next((i for i in self.get_all(collection) if i.get("id") == item_id), None)

    def add(self, collection: str, item: Record) -> Record:
        items = self._collection(collection)
        if items is None:
            raise UnknownCollectionError(collection)
        record = dict(item)
        record["id"] = self._new_id(items)
        record["createdAt"] = _now_iso()
        items.append(record)
        try:
            self.save()
        except OSError:
            # la memoria no debe adelantarse al blob persistido
            items.pop()
            raise
        return record

    def update(self, collection: str, item_id: str, updates: Record) -> bool:
        items = self.get_all(collection)
        index = next((n for n, i in enumerate(items) if i.get("id") == item_id), -1)
        if index < 0:
            return False
        patch = {k: v for k, v in updates.items() if k not in IMMUTABLE_FIELDS}
        previous = dict(items[index])
        items[index].update(patch)
        try:
            self.save()
        except OSError:
            items[index].clear()
            items[index].update(previous)
            raise
        return True

    def delete(self, collection: str, item_id: str) -> None:
        items = self._collection(collection)
        if items is not None:
            # en sitio: get_all devuelve la lista viva
            items[:] = [i for i in items if i.get("id") != item_id]
        self.save()

    # ------------------------
    # Import / export del estado completo
    # ------------------------
    def import_whole_state(self, raw: Union[str, bytes]) -> bool:
        try:
            parsed = json.loads(raw)
        except (ValueError, TypeError) as e:
            logger.error("Import fallido: %s", e)
            return False
        if not isinstance(parsed, dict) or not isinstance(parsed.get("services"), list):
            logger.error("Import fallido: falta la colección 'services'")
            return False
        state = migrate_state(parsed, trust_version=False)
        try:
            self._write(state)
        except OSError as e:
            logger.error("Import fallido: no se pudo persistir el estado: %s", e)
            return False
        self.data = state
        logger.info(
            "Import correcto: %s",
            ", ".join(f"{name}={len(self.data[name])}" for name in COLLECTIONS),
        )
        return True

    def export_whole_state(self) -> str:
        return json.dumps(self.data, ensure_ascii=False, indent=2)
