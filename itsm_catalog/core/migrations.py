# itsm_catalog/core/migrations.py
"""
Migraciones del estado persistido.

El blob lleva una etiqueta `version`. Al cargar (o importar) se aplican en
orden los pasos cuya versión destino sea mayor que la del blob. Cada paso es
idempotente y recibe/devuelve el dict del estado.
"""
import logging
from typing import Any, Callable, Dict, List, Tuple

from itsm_catalog.core.settings_schema import SETTING_KEYS, default_settings
from itsm_catalog.models.common import COLLECTIONS

logger = logging.getLogger(__name__)

State = Dict[str, Any]


def _ensure_settings(state: State) -> State:
    # Blobs anteriores no tenían `settings`
    if not isinstance(state.get("settings"), dict):
        state["settings"] = default_settings()
        logger.info("migración: settings inyectados con valores por defecto")
    return state


def _ensure_collections(state: State) -> State:
    for name in COLLECTIONS:
        if not isinstance(state.get(name), list):
            state[name] = []
    return state


def _ensure_setting_keys(state: State) -> State:
    defaults = default_settings()
    current = state["settings"]
    for key in SETTING_KEYS:
        if not isinstance(current.get(key), list):
            current[key] = defaults[key]
    return state


def _drop_invalid_records(state: State) -> State:
    # solo objetos JSON pueden ser registros
    for name in COLLECTIONS:
        items = state.get(name)
        if not isinstance(items, list):
            continue
        valid = [i for i in items if isinstance(i, dict)]
        if len(valid) != len(items):
            logger.warning("migración: %d entradas inválidas descartadas de %s", len(items) - len(valid), name)
            state[name] = valid
    return state


MIGRATIONS: List[Tuple[int, Callable[[State], State]]] = [
    (1, _ensure_settings),
    (2, _ensure_collections),
    (3, _ensure_setting_keys),
    (4, _drop_invalid_records),
]

CURRENT_VERSION = MIGRATIONS[-1][0]


def empty_state() -> State:
    state: State = {name: [] for name in COLLECTIONS}
    state["settings"] = default_settings()
    state["version"] = CURRENT_VERSION
    return state


def migrate_state(state: State, trust_version: bool = True) -> State:
    """
    Aplica las migraciones pendientes. Modifica `state` en sitio y lo devuelve.

    Con `trust_version=False` se ignora la etiqueta del blob y se recorre la
    cadena completa (estado importado desde un archivo externo).
    """
    version = state.get("version") if trust_version else 0
    if not isinstance(version, int) or isinstance(version, bool):
        version = 0
    for target, step in MIGRATIONS:
        if version < target:
            state = step(state)
            version = target
    state["version"] = version
    return state
