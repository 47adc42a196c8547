# itsm_catalog/models/common.py
from typing import Dict, List, Literal, Union

CollectionName = Literal["services", "components", "requests", "technical"]
FieldType = Literal["text", "textarea", "number", "select"]

# Orden canónico de las colecciones en el estado persistido
COLLECTIONS: List[str] = ["services", "components", "requests", "technical"]

# Valor cerrado de un campo: texto, número o lista de ids (relación múltiple)
RecordValue = Union[str, int, float, List[str]]
Record = Dict[str, RecordValue]

INACTIVE_STATUS = "Inactivo"
RETIRED_STATUS = "Retirado"
CLOSED_STATUSES = {INACTIVE_STATUS, RETIRED_STATUS}

NONE_SELECTED = ""
NONE_SELECTED_LABEL = "-- Seleccionar --"
UNNAMED_OPTION = "Unnamed"
UNNAMED_CARD = "Sin Nombre"
