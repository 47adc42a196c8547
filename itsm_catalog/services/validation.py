# itsm_catalog/services/validation.py
from typing import Any, Dict, List, Mapping

from itsm_catalog.core.errors import MissingRequiredFieldsError
from itsm_catalog.models.schema import Schema


def _is_blank(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    if isinstance(value, (list, tuple)):
        return len(value) == 0
    return False


def validate_required(schema: Schema, data: Mapping[str, Any]) -> List[str]:
    """Nombres de los campos obligatorios sin valor, en el orden del esquema."""
    return [name for name in schema.required_fields() if _is_blank(data.get(name))]


def ensure_required(collection: str, schema: Schema, data: Dict[str, Any]) -> None:
    missing = validate_required(schema, data)
    if missing:
        raise MissingRequiredFieldsError(collection, missing)
