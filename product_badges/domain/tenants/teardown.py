import logging
from dataclasses import dataclass, field
from typing import List, Optional

from sqlalchemy import delete, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from product_badges.models.shop_session import ShopSession
from product_badges.domain.badges.errors import BestEffortCleanupError, PersistenceError
from product_badges.domain.badges.store import BadgeStore

log = logging.getLogger("teardown")


@dataclass
class UninstallEvent:
    shop: str
    session_present: bool
    topic: str = "APP_UNINSTALLED"


@dataclass
class TeardownResult:
    handled: bool = False
    sessions_deleted: int = 0
    badges_deleted: Optional[int] = None
    # canal "advisory": fallos que se registran pero nunca se propagan
    advisory: List[BestEffortCleanupError] = field(default_factory=list)


def has_session(db: Session, shop: str) -> bool:
    return db.execute(
        select(ShopSession.id).where(ShopSession.shop == shop).limit(1)
    ).first() is not None


def delete_sessions(db: Session, shop: str) -> int:
    """Parte obligatoria del teardown: si falla, el error sube."""
    try:
        res = db.execute(delete(ShopSession).where(ShopSession.shop == shop))
        db.commit()
    except SQLAlchemyError as e:
        db.rollback()
        raise PersistenceError(f"session purge failed for {shop}: {e}") from e
    return int(res.rowcount or 0)


def handle_app_uninstalled(db: Session, event: UninstallEvent) -> TeardownResult:
    """
    El evento puede llegar varias veces, incluso después de desinstalar:
    sin sesión activa ya se limpió antes y no se hace nada.
    """
    log.info("Received %s webhook for %s", event.topic, event.shop)
    result = TeardownResult()
    if not event.session_present:
        return result

    result.handled = True
    result.sessions_deleted = delete_sessions(db, event.shop)

    # limpieza de badges best-effort
    try:
        result.badges_deleted = BadgeStore(db).delete_all_for_shop(event.shop)
    except PersistenceError as e:
        err = BestEffortCleanupError(event.shop, e)
        log.warning("Failed to delete badges for shop %s: %s", event.shop, e)
        result.advisory.append(err)
    return result
