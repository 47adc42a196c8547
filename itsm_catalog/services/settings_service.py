# itsm_catalog/services/settings_service.py
import logging
from typing import Dict, List

from itsm_catalog.core.settings_schema import SETTING_KEYS, SETTING_LABELS
from itsm_catalog.repositories.entity_store import EntityStore

logger = logging.getLogger(__name__)


class SettingsStore:
    """
    Listas de opciones con nombre (criticidades, estados, contactos...).
    Comparte el blob del EntityStore: toda escritura pasa por
    `store.update_setting_list`, que persiste.

    Cada lista se trata como un conjunto ordenado: sin duplicados y con
    borrado por valor, nunca por posición.
    """

    def __init__(self, store: EntityStore):
        self.store = store

    def get(self, key: str) -> List[str]:
        return list(self.store.get_settings().get(key) or [])

    def set(self, key: str, values: List[str]) -> bool:
        if key not in SETTING_KEYS:
            return False
        # conserva el primer valor de cada duplicado
        unique = list(dict.fromkeys(values))
        return self.store.update_setting_list(key, unique)

    def add_value(self, key: str, value: str) -> bool:
        val = (value or "").strip()
        if not val or key not in SETTING_KEYS:
            return False
        current = self.get(key)
        if val in current:
            return False
        current.append(val)
        self.store.update_setting_list(key, current)
        logger.info("settings: '%s' agregado a %s", val, key)
        return True

    def remove_value(self, key: str, value: str) -> bool:
        current = self.get(key)
        if value not in current:
            return False
        current.remove(value)
        self.store.update_setting_list(key, current)
        logger.info("settings: '%s' eliminado de %s", value, key)
        return True

    def labels(self) -> Dict[str, str]:
        return {key: SETTING_LABELS.get(key, key) for key in SETTING_KEYS}
