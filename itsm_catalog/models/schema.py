# itsm_catalog/models/schema.py
from pydantic import BaseModel, Field
from typing import List, Optional
from itsm_catalog.models.common import FieldType, CollectionName


class FieldDefinition(BaseModel):
    name: str
    label: str
    type: FieldType = "text"
    required: bool = False
    options: Optional[List[str]] = None   # solo para type == "select"
    placeholder: Optional[str] = None


class RelationDefinition(BaseModel):
    name: str
    label: str
    target: CollectionName
    multiple: bool = False


class Schema(BaseModel):
    label: str
    icon: str
    fields: List[FieldDefinition] = Field(default_factory=list)
    relations: List[RelationDefinition] = Field(default_factory=list)

    def field(self, name: str) -> Optional[FieldDefinition]:
        return next((f for f in self.fields if f.name == name), None)

    def relation(self, name: str) -> Optional[RelationDefinition]:
        return next((r for r in self.relations if r.name == name), None)

    def required_fields(self) -> List[str]:
        return [f.name for f in self.fields if f.required]
