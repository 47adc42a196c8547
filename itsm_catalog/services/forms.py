# itsm_catalog/services/forms.py
"""
Construcción y lectura de formularios a partir del esquema.

`build_form` produce la descripción de campos que la capa de presentación
pinta; `collect_form` convierte lo enviado en el parche que se guarda.
"""
import math
from typing import Any, Callable, List, Literal, Mapping, Optional, Sequence

from pydantic import BaseModel, Field

from itsm_catalog.core.errors import InvalidFieldValueError
from itsm_catalog.models.common import Record
from itsm_catalog.models.schema import FieldDefinition, Schema
from itsm_catalog.services import relations

TargetLookup = Callable[[str], Sequence[Record]]


class FormField(BaseModel):
    kind: Literal["field", "relation"] = "field"
    name: str
    label: str
    type: str
    required: bool = False
    multiple: bool = False
    value: Any = ""
    placeholder: Optional[str] = None
    options: List[str] = Field(default_factory=list)
    relation_options: List[relations.RelationOption] = Field(default_factory=list)


def build_form(schema: Schema, record: Optional[Record], targets: TargetLookup) -> List[FormField]:
    """
    `targets(collection)` devuelve los registros candidatos de una relación,
    normalmente `store.get_all`.
    """
    item = record or {}
    form: List[FormField] = []

    for f in schema.fields:
        value = item.get(f.name)
        form.append(FormField(
            name=f.name,
            label=f.label,
            type=f.type,
            required=f.required,
            value="" if value is None else value,
            placeholder=f.placeholder,
            options=list(f.options or []),
        ))

    for rel in schema.relations:
        saved = item.get(rel.name)
        form.append(FormField(
            kind="relation",
            name=rel.name,
            label=rel.label,
            type="select",
            multiple=rel.multiple,
            value=relations.collect_value(rel, saved),
            relation_options=relations.build_options(rel, targets(rel.target), saved),
        ))

    return form


def coerce_number(field: FieldDefinition, value: Any) -> Any:
    if isinstance(value, bool):
        raise InvalidFieldValueError(field.name, value)
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        if not math.isfinite(value):
            raise InvalidFieldValueError(field.name, value)
        return value
    s = str(value).strip()
    if not s:
        return ""
    try:
        return int(s)
    except ValueError:
        pass
    try:
        number = float(s)
    except ValueError:
        raise InvalidFieldValueError(field.name, value)
    # NaN e Infinity no son JSON válido en el respaldo exportado
    if not math.isfinite(number):
        raise InvalidFieldValueError(field.name, value)
    return number


def collect_form(schema: Schema, form_data: Mapping[str, Any]) -> Record:
    """
    Solo se incluyen los campos presentes en `form_data`; un campo presente
    pero vacío se guarda como "" y sobrescribe el valor previo. Las relaciones
    múltiples siempre se incluyen (lista vacía si no hay selección).
    """
    data: Record = {}
    for f in schema.fields:
        if f.name not in form_data:
            continue
        value = form_data[f.name]
        if f.type == "number":
            data[f.name] = coerce_number(f, value)
        else:
            data[f.name] = "" if value is None else str(value)

    for rel in schema.relations:
        if rel.multiple or rel.name in form_data:
            data[rel.name] = relations.collect_value(rel, form_data.get(rel.name))

    return data
