import json
import logging
from typing import Mapping, Optional, Union

from pydantic import ValidationError

from product_badges.domain.badges.errors import BadgeValidationError
from product_badges.domain.badges.store import BadgeStore
from product_badges.schemas.badge import (
    AdminActionOut, BadgeOut, CreateBadgesIn, DeleteBadgeIn, EditBadgeIn,
)

log = logging.getLogger("badges")

AdminAction = Union[DeleteBadgeIn, EditBadgeIn, CreateBadgesIn]


def _present(form: Mapping[str, Optional[str]], key: str) -> bool:
    v = form.get(key)
    return v is not None and str(v).strip() != ""


def _parse_product_ids(raw: Optional[str]) -> list:
    if raw is None or not str(raw).strip():
        raise BadgeValidationError("productIds es requerido")
    try:
        ids = json.loads(raw)
    except (TypeError, ValueError) as e:
        raise BadgeValidationError(f"productIds no es JSON válido: {e}") from e
    if not isinstance(ids, list):
        raise BadgeValidationError("productIds debe ser una lista")
    return ids


def parse_admin_action(form: Mapping[str, Optional[str]]) -> AdminAction:
    """
    Elige UNA acción según los campos presentes, en este orden:
    deleteId > editingId > (productIds, name, color).
    Cualquier entrada mal formada -> BadgeValidationError (sin tocar la DB).
    """
    try:
        if _present(form, "deleteId"):
            return DeleteBadgeIn(delete_id=form["deleteId"])
        if _present(form, "editingId"):
            return EditBadgeIn(
                editing_id=form["editingId"],
                name=form.get("name") or "",
                color=form.get("color") or "",
            )
        return CreateBadgesIn(
            product_ids=_parse_product_ids(form.get("productIds")),
            name=form.get("name") or "",
            color=form.get("color") or "",
        )
    except ValidationError as e:
        raise BadgeValidationError(str(e)) from e


def handle_admin_action(store: BadgeStore, shop: str, action: AdminAction) -> AdminActionOut:
    """
    Aplica la acción sobre las badges de `shop`.
    delete/edit sobre un id ajeno (u inexistente) es un no-op: deletedId/updatedRecord = None.
    """
    if isinstance(action, DeleteBadgeIn):
        deleted = store.delete_by_id(shop, action.delete_id)
        if not deleted:
            log.info("delete no-op: %s not found in %s", action.delete_id, shop)
        return AdminActionOut(deletedId=action.delete_id if deleted else None)

    if isinstance(action, EditBadgeIn):
        b = store.update_by_id(shop, action.editing_id, action.name, action.color)
        if b is None:
            log.info("edit no-op: %s not found in %s", action.editing_id, shop)
            return AdminActionOut(updatedRecord=None)
        return AdminActionOut(updatedRecord=BadgeOut(**b.to_dict()))

    # PersistenceError sube tal cual: el lote completo ya se revirtió
    created = store.create_many(shop, action.product_ids, action.name, action.color)
    log.info("created %d badges for %s", len(created), shop)
    return AdminActionOut(createdRecords=[BadgeOut(**b.to_dict()) for b in created])
