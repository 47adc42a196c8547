# itsm_catalog/core/config.py
from pathlib import Path

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # === Almacenamiento local ===
    storage_key: str = "ITSM_CATALOG_DATA_V1"
    data_dir: Path = Path(".itsm_catalog")

    # === Respaldos (export / import) ===
    backup_dir: Path = Path(".")
    backup_prefix: str = "itsm-backup"

    # === Logging ===
    log_level: str = "INFO"

    @field_validator("log_level", mode="before")
    @classmethod
    def _parse_log_level(cls, v):
        if v is None:
            return "INFO"
        s = str(v).strip().upper()
        return s or "INFO"

    @field_validator("storage_key")
    @classmethod
    def _check_storage_key(cls, v: str) -> str:
        s = v.strip()
        if not s:
            raise ValueError("storage_key no puede estar vacío")
        # la clave se usa como nombre de archivo en FileStorage
        if "/" in s or "\\" in s:
            raise ValueError("storage_key no puede contener separadores de ruta")
        return s

    # Mapeo a variables de entorno en mayúsculas: ITSM_STORAGE_KEY, ITSM_DATA_DIR, ...
    model_config = SettingsConfigDict(
        env_prefix="ITSM_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )


# Instancia global usada por main.py
settings = Settings()
