from itsm_catalog.repositories.entity_store import EntityStore
from itsm_catalog.services.settings_service import SettingsStore


def test_get_returns_copy(store):
    settings = SettingsStore(store)
    contacts = settings.get("contacts")
    contacts.append("X")
    assert "X" not in settings.get("contacts")
    assert settings.get("inventada") == []


def test_set_replaces_and_persists(storage, storage_key, store):
    settings = SettingsStore(store)
    assert settings.set("statuses", ["Activo", "Retirado"]) is True
    reloaded = EntityStore(storage, storage_key)
    assert reloaded.get_settings()["statuses"] == ["Activo", "Retirado"]


def test_set_unknown_key_is_noop(storage, storage_key, store):
    assert SettingsStore(store).set("colores", ["rojo"]) is False
    assert "colores" not in store.get_settings()
    assert storage.get_item(storage_key) is None


def test_set_drops_duplicates_keeping_order(store):
    settings = SettingsStore(store)
    settings.set("ci_types", ["Red", "Servidor", "Red"])
    assert settings.get("ci_types") == ["Red", "Servidor"]


def test_add_value_dedups_and_trims(store):
    settings = SettingsStore(store)
    assert settings.add_value("contacts", "  Legal ") is True
    assert settings.add_value("contacts", "Legal") is False
    assert settings.add_value("contacts", "   ") is False
    assert settings.add_value("inventada", "x") is False
    assert settings.get("contacts") == ["Admin", "Soporte", "Gerente IT", "Legal"]


def test_remove_value_by_value(store):
    """El borrado es por valor: no depende de la posición en la lista."""
    settings = SettingsStore(store)
    settings.add_value("contacts", "Legal")
    assert settings.remove_value("contacts", "Soporte") is True
    assert settings.remove_value("contacts", "Soporte") is False
    assert settings.get("contacts") == ["Admin", "Gerente IT", "Legal"]


def test_labels_cover_every_list(store):
    labels = SettingsStore(store).labels()
    assert set(labels) == set(store.get_settings())
    assert labels["contacts"] == "Contactos / Personas"
