from datetime import datetime
from typing import List, Optional
from pydantic import BaseModel, field_validator


def _required(v: str) -> str:
    v = (v or "").strip()
    if not v:
        raise ValueError("campo requerido")
    return v


class BadgeOut(BaseModel):
    id: str
    shop: str
    productId: str
    name: str
    color: str
    createdAt: datetime


class PublicBadgeOut(BaseModel):
    name: str
    color: str


class PublicLookupOut(BaseModel):
    badge: Optional[PublicBadgeOut] = None


# ==== Acciones del panel (una por request) ====

class DeleteBadgeIn(BaseModel):
    delete_id: str

    @field_validator("delete_id")
    @classmethod
    def valid_id(cls, v: str) -> str:
        return _required(v)


class EditBadgeIn(BaseModel):
    editing_id: str
    name: str
    color: str

    @field_validator("editing_id", "name", "color")
    @classmethod
    def valid_fields(cls, v: str) -> str:
        return _required(v)


class CreateBadgesIn(BaseModel):
    product_ids: List[str]
    name: str
    color: str

    @field_validator("name", "color")
    @classmethod
    def valid_fields(cls, v: str) -> str:
        return _required(v)

    @field_validator("product_ids")
    @classmethod
    def valid_ids(cls, v: List[str]) -> List[str]:
        if not v:
            raise ValueError("selecciona al menos un producto")
        return [_required(pid) for pid in v]


class AdminActionOut(BaseModel):
    deletedId: Optional[str] = None
    updatedRecord: Optional[BadgeOut] = None
    createdRecords: Optional[List[BadgeOut]] = None


class CatalogProductOut(BaseModel):
    id: str
    title: str
    handle: str
    image: Optional[str] = None


class AdminPageOut(BaseModel):
    products: List[CatalogProductOut]
    badges: List[BadgeOut]
