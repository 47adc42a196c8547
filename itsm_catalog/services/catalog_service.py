# itsm_catalog/services/catalog_service.py
import json
import logging
from typing import Any, Dict, List, Mapping, Optional

from itsm_catalog.core.errors import UnknownCollectionError
from itsm_catalog.core.schemas import schemas_for
from itsm_catalog.models.common import CLOSED_STATUSES, INACTIVE_STATUS, UNNAMED_CARD, Record
from itsm_catalog.models.schema import Schema
from itsm_catalog.repositories.entity_store import EntityStore
from itsm_catalog.services import relations
from itsm_catalog.services.forms import FormField, build_form, collect_form
from itsm_catalog.services.validation import ensure_required

logger = logging.getLogger(__name__)


def display_name(record: Record) -> str:
    return record.get("name") or record.get("category") or UNNAMED_CARD


def can_deactivate(record: Record) -> bool:
    return record.get("status") not in CLOSED_STATUSES


def relation_counts(schema: Schema, record: Record) -> Dict[str, int]:
    counts: Dict[str, int] = {}
    for rel in schema.relations:
        n = len(relations.selected_ids(record.get(rel.name)))
        if n:
            counts[rel.label] = n
    return counts


def card_summary(schema: Schema, record: Record) -> Dict[str, Any]:
    # la tarjeta muestra los campos 2 a 4 del esquema que tengan valor
    out: Dict[str, Any] = {}
    for f in schema.fields[1:4]:
        value = record.get(f.name)
        if value:
            out[f.label] = "..." if isinstance(value, (dict, list)) else value
    return out


class CatalogService:
    """Casos de uso que la capa de presentación invoca sobre el catálogo."""

    def __init__(self, store: EntityStore):
        self.store = store

    def schemas(self) -> Dict[str, Schema]:
        return schemas_for(self.store.get_settings())

    def schema(self, collection: str) -> Schema:
        schema = self.schemas().get(collection)
        if schema is None:
            raise UnknownCollectionError(collection)
        return schema

    def form(self, collection: str, item_id: Optional[str] = None) -> List[FormField]:
        record = self.store.get(collection, item_id) if item_id else None
        return build_form(self.schema(collection), record, self.store.get_all)

    def save(self, collection: str, form_data: Mapping[str, Any], item_id: Optional[str] = None) -> Optional[Record]:
        """
        Crea (sin `item_id`) o actualiza un registro desde datos de formulario.
        Devuelve el registro guardado, o None si `item_id` no existe.
        """
        schema = self.schema(collection)
        data = collect_form(schema, form_data)

        if not item_id:
            ensure_required(collection, schema, data)
            record = self.store.add(collection, data)
            logger.info("%s: registro %s creado", collection, record["id"])
            return record

        existing = self.store.get(collection, item_id)
        if existing is None:
            return None
        ensure_required(collection, schema, {**existing, **data})
        self.store.update(collection, item_id, data)
        logger.info("%s: registro %s actualizado", collection, item_id)
        return self.store.get(collection, item_id)

    def deactivate(self, collection: str, item_id: str) -> bool:
        """Baja lógica: el registro pasa a estado Inactivo y sigue en la colección."""
        ok = self.store.update(collection, item_id, {"status": INACTIVE_STATUS})
        if ok:
            logger.info("%s: registro %s inactivado", collection, item_id)
        return ok

    def delete(self, collection: str, item_id: str) -> None:
        # no hay borrado en cascada: las referencias a este id quedan colgando
        self.store.delete(collection, item_id)
        logger.info("%s: registro %s eliminado", collection, item_id)

    def search(self, collection: str, text: str = "") -> List[Record]:
        needle = (text or "").lower()
        return [
            item for item in self.store.get_all(collection)
            if needle in json.dumps(item, ensure_ascii=False).lower()
        ]

    def resolve_relations(self, collection: str, record: Record) -> Dict[str, List[relations.ResolvedReference]]:
        schema = self.schema(collection)
        return {
            rel.name: relations.resolve(record.get(rel.name), self.store.get_all(rel.target))
            for rel in schema.relations
        }
