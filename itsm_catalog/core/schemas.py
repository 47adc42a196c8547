# itsm_catalog/core/schemas.py
"""
Registro de esquemas del catálogo.

Los esquemas son una función pura de la configuración vigente: cada llamada
a `schemas_for` vuelve a derivar las opciones de los campos `select` desde las
listas de settings, de modo que un cambio en settings se refleja de inmediato
en el siguiente formulario. No hay caché.
"""
from typing import Dict, List, Mapping, Optional, Union

from itsm_catalog.core.settings_schema import CatalogSettings
from itsm_catalog.models.schema import FieldDefinition, RelationDefinition, Schema

APPROVAL_OPTIONS = ["Ninguna", "Manager", "Owner", "Director"]
TECH_PRIORITY_OPTIONS = ["P1", "P2", "P3", "P4"]

SettingsLike = Union[CatalogSettings, Mapping[str, List[str]]]


def _options(settings: Mapping[str, List[str]], key: str) -> List[str]:
    # copia: el consumidor del esquema no debe poder mutar la lista de settings
    return list(settings.get(key) or [])


def schemas_for(settings: SettingsLike) -> Dict[str, Schema]:
    s = settings.model_dump() if isinstance(settings, CatalogSettings) else settings
    contacts = _options(s, "contacts")
    groups = _options(s, "assignment_groups")

    return {
        "services": Schema(
            label="Servicio de Negocio",
            icon="💼",
            fields=[
                FieldDefinition(name="name", label="Nombre del Servicio", type="text", required=True),
                FieldDefinition(name="description", label="Descripción", type="textarea", required=True),
                FieldDefinition(name="owner", label="Propietario (Service Owner)", type="select", options=contacts, required=True),
                FieldDefinition(name="manager", label="Gestor (Service Manager)", type="select", options=list(contacts)),
                FieldDefinition(name="criticality", label="Criticidad", type="select", options=_options(s, "criticalities"), required=True),
                FieldDefinition(name="availability", label="Horario Disponibilidad", type="text", placeholder="Ej. 24/7, Lun-Vie 9-6"),
                FieldDefinition(name="sla_response", label="SLA Respuesta (Horas)", type="number"),
                FieldDefinition(name="cost", label="Costo Mensual ($)", type="number"),
                FieldDefinition(name="status", label="Estado", type="select", options=_options(s, "statuses"), required=True),
                FieldDefinition(name="customers", label="Clientes/Usuarios", type="text"),
            ],
            relations=[
                RelationDefinition(name="linked_cis", label="CIs Relacionados", target="components", multiple=True),
                RelationDefinition(name="linked_requests", label="Peticiones Asociadas", target="requests", multiple=True),
            ],
        ),
        "components": Schema(
            label="Componente (CI)",
            icon="🧩",
            fields=[
                FieldDefinition(name="name", label="Nombre del CI", type="text", required=True),
                FieldDefinition(name="type", label="Tipo de CI", type="select", options=_options(s, "ci_types"), required=True),
                FieldDefinition(name="status", label="Estado", type="select", options=_options(s, "ci_statuses"), required=True),
                FieldDefinition(name="tech_owner", label="Propietario Técnico", type="select", options=list(contacts)),
                FieldDefinition(name="location", label="Ubicación Física/Lógica", type="text"),
                FieldDefinition(name="version", label="Versión/Modelo", type="text"),
            ],
            relations=[
                RelationDefinition(name="parent_service", label="Servicio Padre", target="services", multiple=False),
            ],
        ),
        "requests": Schema(
            label="Catálogo de Peticiones",
            icon="📋",
            fields=[
                FieldDefinition(name="name", label="Nombre Solicitud", type="text", required=True),
                FieldDefinition(name="type", label="Tipo", type="select", options=_options(s, "request_types"), required=True),
                FieldDefinition(name="category", label="Categoría", type="text"),
                FieldDefinition(name="tat", label="Tiempo Cumplimiento (Días)", type="number"),
                FieldDefinition(name="approvals", label="Aprobaciones Requeridas", type="select", options=list(APPROVAL_OPTIONS)),
                FieldDefinition(name="cost", label="Costo ($)", type="number"),
            ],
            relations=[
                RelationDefinition(name="related_service", label="Servicio Asociado", target="services", multiple=False),
            ],
        ),
        "technical": Schema(
            label="Información Técnica",
            icon="🔧",
            fields=[
                FieldDefinition(name="category", label="Categoría Incidente", type="text", required=True),
                FieldDefinition(name="subcategory", label="Subcategoría", type="text"),
                FieldDefinition(name="L1_group", label="Grupo Asignación L1", type="select", options=groups, required=True),
                FieldDefinition(name="L2_group", label="Grupo Asignación L2", type="select", options=list(groups)),
                FieldDefinition(name="escalation", label="Procedimiento Escalado", type="textarea"),
                FieldDefinition(name="priority", label="Prioridad Técnica", type="select", options=list(TECH_PRIORITY_OPTIONS)),
                FieldDefinition(name="kb_articles", label="Artículos KB Relacionados", type="textarea"),
            ],
            relations=[
                RelationDefinition(name="related_service_tech", label="Aplica al Servicio", target="services", multiple=True),
            ],
        ),
    }


def schema_for(collection: str, settings: SettingsLike) -> Optional[Schema]:
    return schemas_for(settings).get(collection)
