# itsm_catalog/services/relations.py
"""
Traducción entre el valor almacenado de una relación (id o lista de ids) y
su representación de formulario (opciones seleccionadas), en ambos sentidos.

No se verifica que los ids referenciados existan todavía: una referencia a un
registro borrado aparece como id sin resolver y es el consumidor quien decide
cómo mostrarla.
"""
from typing import Any, Dict, List, Optional, Sequence, Union

from pydantic import BaseModel

from itsm_catalog.models.common import NONE_SELECTED, NONE_SELECTED_LABEL, UNNAMED_OPTION, Record
from itsm_catalog.models.schema import RelationDefinition

RelationValue = Union[str, List[str]]


class RelationOption(BaseModel):
    value: str
    label: str
    selected: bool = False


class ResolvedReference(BaseModel):
    id: str
    record: Optional[Dict[str, Any]] = None

    @property
    def resolved(self) -> bool:
        return self.record is not None


def option_label(record: Record) -> str:
    return str(record.get("name") or record.get("category") or UNNAMED_OPTION)


def build_options(relation: RelationDefinition, targets: Sequence[Record], saved: Any) -> List[RelationOption]:
    """Opciones para editar/visualizar una relación con la selección actual marcada."""
    # registros sin id no se pueden referenciar
    ids = [(str(t["id"]), t) for t in targets if t.get("id")]
    if relation.multiple:
        saved_ids = {str(s) for s in saved} if isinstance(saved, (list, tuple)) else set()
        return [
            RelationOption(value=i, label=option_label(t), selected=i in saved_ids)
            for i, t in ids
        ]

    current = str(saved) if saved else None
    options = [
        RelationOption(value=i, label=option_label(t), selected=i == current)
        for i, t in ids
    ]
    sentinel = RelationOption(
        value=NONE_SELECTED,
        label=NONE_SELECTED_LABEL,
        selected=not any(o.selected for o in options),
    )
    return [sentinel] + options


def collect_value(relation: RelationDefinition, submitted: Any) -> RelationValue:
    """
    Valor a guardar a partir de lo enviado por el formulario.
    Simple: el id tal cual ("" = sin asignar). Múltiple: lista ordenada de ids.
    """
    if relation.multiple:
        if submitted is None or submitted == "":
            return []
        if isinstance(submitted, str):
            return [submitted]
        return [str(v) for v in submitted]

    if submitted is None:
        return NONE_SELECTED
    if isinstance(submitted, (list, tuple)):
        # un <select> simple solo entrega una opción; se toma la primera
        return str(submitted[0]) if submitted else NONE_SELECTED
    return str(submitted)


def selected_ids(value: Any) -> List[str]:
    if isinstance(value, (list, tuple)):
        return [v for v in value if v]
    return [value] if value else []


def resolve(value: Any, targets: Sequence[Record]) -> List[ResolvedReference]:
    by_id = {t.get("id"): t for t in targets}
    return [ResolvedReference(id=i, record=by_id.get(i)) for i in selected_ids(value)]
