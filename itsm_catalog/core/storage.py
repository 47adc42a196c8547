# itsm_catalog/core/storage.py
import logging
import os
from pathlib import Path
from typing import Dict, Optional, Protocol

from itsm_catalog.core.config import settings

logger = logging.getLogger(__name__)


class KeyValueStorage(Protocol):
    def get_item(self, key: str) -> Optional[str]: ...
    def set_item(self, key: str, value: str) -> None: ...
    def remove_item(self, key: str) -> None: ...


class MemoryStorage:
    """Almacenamiento volátil (tests / uso embebido)."""

    def __init__(self, initial: Optional[Dict[str, str]] = None):
        self._items: Dict[str, str] = dict(initial or {})

    def get_item(self, key: str) -> Optional[str]:
        return self._items.get(key)

    def set_item(self, key: str, value: str) -> None:
        self._items[key] = value

    def remove_item(self, key: str) -> None:
        self._items.pop(key, None)


class FileStorage:
    """
    Un archivo de texto por clave dentro de `data_dir`.
    La escritura va a un temporal y se renombra, así un corte a mitad de
    escritura nunca deja el blob truncado.
    """

    def __init__(self, data_dir: Path):
        self.data_dir = Path(data_dir)

    def _path(self, key: str) -> Path:
        return self.data_dir / f"{key}.json"

    def get_item(self, key: str) -> Optional[str]:
        path = self._path(key)
        if not path.exists():
            return None
        return path.read_text(encoding="utf-8")

    def set_item(self, key: str, value: str) -> None:
        self.data_dir.mkdir(parents=True, exist_ok=True)
        path = self._path(key)
        tmp = path.with_suffix(".json.tmp")
        tmp.write_text(value, encoding="utf-8")
        os.replace(tmp, path)

    def remove_item(self, key: str) -> None:
        try:
            self._path(key).unlink()
        except FileNotFoundError:
            pass


_storage: Optional[KeyValueStorage] = None


def get_storage() -> KeyValueStorage:
    """
    Crea un único almacenamiento de archivos en `settings.data_dir`.
    """
    global _storage
    if _storage is None:
        _storage = FileStorage(settings.data_dir)
        logger.info("Almacenamiento local en %s", Path(settings.data_dir).resolve())
    return _storage


def close_storage() -> None:
    """
    Libera el almacenamiento global. Usado por tests y por main.py.
    """
    global _storage
    _storage = None
