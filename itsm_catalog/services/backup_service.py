# itsm_catalog/services/backup_service.py
import logging
from datetime import date
from pathlib import Path
from typing import Optional, Union

from itsm_catalog.core.config import settings
from itsm_catalog.repositories.entity_store import EntityStore

logger = logging.getLogger(__name__)


def backup_filename(day: Optional[date] = None, prefix: Optional[str] = None) -> str:
    day = day or date.today()
    return f"{prefix or settings.backup_prefix}-{day.isoformat()}.json"


def export_backup(store: EntityStore, directory: Union[str, Path, None] = None, day: Optional[date] = None) -> Path:
    target_dir = Path(directory) if directory is not None else Path(settings.backup_dir)
    target_dir.mkdir(parents=True, exist_ok=True)
    path = target_dir / backup_filename(day)
    path.write_text(store.export_whole_state(), encoding="utf-8")
    logger.info("Respaldo exportado en %s", path)
    return path


def import_backup(store: EntityStore, path: Union[str, Path]) -> bool:
    """Reemplaza el estado completo con el contenido del archivo. Todo o nada."""
    try:
        raw = Path(path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        logger.error("No se pudo leer el respaldo %s: %s", path, e)
        return False
    return store.import_whole_state(raw)
