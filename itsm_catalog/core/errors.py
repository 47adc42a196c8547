# itsm_catalog/core/errors.py
from typing import List


class CatalogError(Exception):
    pass


class UnknownCollectionError(CatalogError, KeyError):
    def __init__(self, collection: str):
        self.collection = collection
        super().__init__(f"Colección desconocida: {collection}")

    def __str__(self) -> str:
        return self.args[0]


class MissingRequiredFieldsError(CatalogError, ValueError):
    """Uno o más campos obligatorios no tienen valor."""

    def __init__(self, collection: str, missing: List[str]):
        self.collection = collection
        self.missing = list(missing)
        super().__init__(f"Campos obligatorios faltantes en {collection}: {', '.join(self.missing)}")


class InvalidFieldValueError(CatalogError, ValueError):
    def __init__(self, field: str, value):
        self.field = field
        self.value = value
        super().__init__(f"Valor inválido para {field}: {value!r}")
