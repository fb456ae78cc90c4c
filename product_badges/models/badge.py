import uuid
from sqlalchemy import Column, String, DateTime, Index
from sqlalchemy.dialects import mysql
from product_badges.db import Base

def _new_id() -> str:
    return uuid.uuid4().hex

CREATED_AT_TYPE = DateTime(timezone=True).with_variant(mysql.DATETIME(fsp=6), "mysql")

class Badge(Base):
    """
    Etiqueta (nombre + color) que un comercio asocia a un producto del catálogo.
    (shop, product_id) NO es única: un producto puede tener varias badges.
    """
    __tablename__ = "badges"

    id = Column(String(32), primary_key=True, default=_new_id)
    shop = Column(String(255), nullable=False)
    product_id = Column(String(255), nullable=False)  # gid://shopify/Product/<n>
    name = Column(String(120), nullable=False)
    color = Column(String(32), nullable=False)
    # se asigna desde Python (ver BadgeStore): el orden dentro de un lote depende de los µs,
    # por eso en MySQL se pide DATETIME(6) (por defecto trunca a segundos)
    created_at = Column(CREATED_AT_TYPE, nullable=False)

    __table_args__ = (
        Index("ix_badges_shop", "shop"),
        Index("ix_badges_shop_product_id", "shop", "product_id"),
    )

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "shop": self.shop,
            "productId": self.product_id,
            "name": self.name,
            "color": self.color,
            "createdAt": self.created_at,
        }
