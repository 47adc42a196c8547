# itsm_catalog/core/settings_schema.py
from pydantic import BaseModel
from typing import Dict, List


class CatalogSettings(BaseModel):
    """Listas de opciones configurables que alimentan los campos `select`."""
    criticalities: List[str] = ["Alta", "Media", "Baja", "Crítica", "Extrema"]
    statuses: List[str] = ["En Desarrollo", "Activo", "Inactivo", "Retirado"]
    ci_types: List[str] = ["Servidor", "Aplicación", "Red", "Base de Datos", "Hardware"]
    ci_statuses: List[str] = ["Operativo", "En Mantenimiento", "Fuera de Servicio"]
    request_types: List[str] = ["Solicitud de Servicio", "Info", "Acceso"]
    assignment_groups: List[str] = ["Mesa de Ayuda", "Infraestructura", "Desarrollo", "Seguridad"]
    contacts: List[str] = ["Admin", "Soporte", "Gerente IT"]


SETTING_KEYS: List[str] = list(CatalogSettings.model_fields.keys())

SETTING_LABELS: Dict[str, str] = {
    "criticalities": "Niveles de Criticidad",
    "statuses": "Estados de Servicio",
    "ci_types": "Tipos de CI",
    "ci_statuses": "Estados de CI",
    "request_types": "Tipos de Solicitud",
    "assignment_groups": "Grupos de Asignación",
    "contacts": "Contactos / Personas",
}


def default_settings() -> Dict[str, List[str]]:
    # model_dump crea listas nuevas: ninguna instancia comparte estado mutable
    return CatalogSettings().model_dump()
