from itsm_catalog.core.schemas import schema_for, schemas_for
from itsm_catalog.core.settings_schema import CatalogSettings, default_settings
from itsm_catalog.services.settings_service import SettingsStore


def test_four_collections_with_labels_and_icons():
    schemas = schemas_for(default_settings())
    assert list(schemas) == ["services", "components", "requests", "technical"]
    assert schemas["services"].label == "Servicio de Negocio"
    assert schemas["technical"].icon == "🔧"


def test_select_options_come_from_settings():
    s = default_settings()
    services = schemas_for(s)["services"]
    assert services.field("owner").options == s["contacts"]
    assert services.field("criticality").options == s["criticalities"]
    assert schemas_for(s)["technical"].field("L1_group").options == s["assignment_groups"]


def test_static_options_do_not_depend_on_settings():
    schemas = schemas_for(default_settings())
    assert schemas["requests"].field("approvals").options == ["Ninguna", "Manager", "Owner", "Director"]
    assert schemas["technical"].field("priority").options == ["P1", "P2", "P3", "P4"]


def test_relations_declared_per_collection():
    schemas = schemas_for(default_settings())
    linked = schemas["services"].relation("linked_cis")
    assert (linked.target, linked.multiple) == ("components", True)
    parent = schemas["components"].relation("parent_service")
    assert (parent.target, parent.multiple) == ("services", False)
    assert schemas["requests"].relation("related_service").multiple is False
    assert schemas["technical"].relation("related_service_tech").multiple is True


def test_required_fields():
    schemas = schemas_for(default_settings())
    assert schemas["services"].required_fields() == ["name", "description", "owner", "criticality", "status"]
    assert schemas["technical"].required_fields() == ["category", "L1_group"]


def test_settings_change_is_visible_in_next_schema(store):
    """Agregar 'Legal' a contactos aparece en el campo owner sin otro cambio."""
    SettingsStore(store).add_value("contacts", "Legal")
    owner = schemas_for(store.get_settings())["services"].field("owner")
    assert "Legal" in owner.options


def test_schema_options_are_copies(store):
    owner = schemas_for(store.get_settings())["services"].field("owner")
    owner.options.append("Intruso")
    assert "Intruso" not in store.get_settings()["contacts"]


def test_accepts_settings_model_and_missing_keys():
    assert schemas_for(CatalogSettings())["components"].field("type").options[0] == "Servidor"
    assert schemas_for({})["services"].field("owner").options == []
    assert schema_for("desconocida", {}) is None
