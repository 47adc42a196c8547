from itsm_catalog.core import storage as storage_module
from itsm_catalog.main import create_app, shutdown


def test_create_app_on_configured_file_storage(tmp_path, monkeypatch):
    """Sin almacenamiento explícito se usa el FileStorage global de settings.data_dir."""
    monkeypatch.setattr(storage_module.settings, "data_dir", tmp_path)
    storage_module.close_storage()
    try:
        app = create_app(storage_key="MAIN_TEST")
        rec = app.store.add("requests", {"name": "Alta VPN", "type": "Acceso"})
        assert (tmp_path / "MAIN_TEST.json").exists()
        assert create_app(storage_key="MAIN_TEST").store.get("requests", rec["id"])["name"] == "Alta VPN"
    finally:
        shutdown()

