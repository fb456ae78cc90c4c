from datetime import datetime, timedelta, timezone
from typing import Iterable, List, Optional

from sqlalchemy import select, update, delete, desc
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from product_badges.models.badge import Badge
from product_badges.domain.badges.errors import PersistenceError

# Orden por defecto: más reciente primero, desempate estable por id
NEWEST_FIRST = (desc(Badge.created_at), desc(Badge.id))


class BadgeStore:
    """
    Persistencia de badges acotada por tienda.
    Toda lectura/escritura por id filtra también por `shop`: un id de otra
    tienda se comporta como inexistente.
    """

    def __init__(self, db: Session):
        self.db = db

    # --------------------------
    # Escrituras
    # --------------------------

    def create(self, shop: str, product_id: str, name: str, color: str) -> Badge:
        return self.create_many(shop, [product_id], name, color)[0]

    def create_many(self, shop: str, product_ids: Iterable[str], name: str, color: str) -> List[Badge]:
        """
        Inserta una badge por producto dentro de UNA transacción.
        Si cualquier insert falla no queda nada persistido (rollback) y se
        lanza un único PersistenceError.
        """
        now = datetime.now(timezone.utc)
        created: List[Badge] = []
        try:
            for i, pid in enumerate(product_ids):
                # -i µs: el primero de la lista es el más reciente (newest first = orden de entrada)
                b = Badge(shop=shop, product_id=pid, name=name, color=color,
                          created_at=now - timedelta(microseconds=i))
                self.db.add(b)
                self.db.flush()
                created.append(b)
            self.db.commit()
        except SQLAlchemyError as e:
            self.db.rollback()
            raise PersistenceError(f"bulk create failed for {shop}: {e}") from e
        for b in created:
            self.db.refresh(b)
        return created

    def update_by_id(self, shop: str, badge_id: str, name: str, color: str) -> Optional[Badge]:
        """Cambia solo name/color. Devuelve None si el id no existe en esta tienda."""
        try:
            res = self.db.execute(
                update(Badge)
                .where(Badge.id == badge_id, Badge.shop == shop)
                .values(name=name, color=color)
                .execution_options(synchronize_session=False)
            )
            self.db.commit()
        except SQLAlchemyError as e:
            self.db.rollback()
            raise PersistenceError(f"update failed for {shop}/{badge_id}: {e}") from e
        if res.rowcount == 0:
            return None
        return self.get(shop, badge_id)

    def delete_by_id(self, shop: str, badge_id: str) -> bool:
        """True si se borró; False (no-op) si el id no existe en esta tienda."""
        try:
            res = self.db.execute(
                delete(Badge)
                .where(Badge.id == badge_id, Badge.shop == shop)
                .execution_options(synchronize_session=False)
            )
            self.db.commit()
        except SQLAlchemyError as e:
            self.db.rollback()
            raise PersistenceError(f"delete failed for {shop}/{badge_id}: {e}") from e
        return res.rowcount > 0

    def delete_all_for_shop(self, shop: str) -> int:
        """Idempotente: una segunda llamada devuelve 0."""
        try:
            res = self.db.execute(
                delete(Badge)
                .where(Badge.shop == shop)
                .execution_options(synchronize_session=False)
            )
            self.db.commit()
        except SQLAlchemyError as e:
            self.db.rollback()
            raise PersistenceError(f"purge failed for {shop}: {e}") from e
        return int(res.rowcount or 0)

    # --------------------------
    # Lecturas
    # --------------------------

    def get(self, shop: str, badge_id: str) -> Optional[Badge]:
        return self.db.execute(
            select(Badge).where(Badge.id == badge_id, Badge.shop == shop)
        ).scalar_one_or_none()

    def find_one(self, shop: str, product_id: str) -> Optional[Badge]:
        """Si hay varias badges para el mismo producto, gana la más reciente."""
        return self.db.execute(
            select(Badge)
            .where(Badge.shop == shop, Badge.product_id == product_id)
            .order_by(*NEWEST_FIRST)
            .limit(1)
        ).scalars().first()

    def list_by_shop(self, shop: str) -> List[Badge]:
        return list(
            self.db.execute(
                select(Badge).where(Badge.shop == shop).order_by(*NEWEST_FIRST)
            ).scalars().all()
        )
