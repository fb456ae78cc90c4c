from typing import Optional
from fastapi import APIRouter, Depends, Form, HTTPException

from product_badges.deps import get_current_shop, get_store, get_catalog
from product_badges.domain.badges.errors import BadgeValidationError, PersistenceError
from product_badges.domain.badges.service import parse_admin_action, handle_admin_action
from product_badges.domain.badges.store import BadgeStore
from product_badges.schemas.badge import AdminActionOut, AdminPageOut, BadgeOut

router = APIRouter(prefix="/app/badges", tags=["admin"])

@router.get("", response_model=AdminPageOut)
def admin_page(
    shop: str = Depends(get_current_shop),
    store: BadgeStore = Depends(get_store),
    catalog=Depends(get_catalog),
):
    """Productos del catálogo + badges de la tienda (más recientes primero)."""
    return AdminPageOut(
        products=catalog.list_products(),
        badges=[BadgeOut(**b.to_dict()) for b in store.list_by_shop(shop)],
    )

@router.post("", response_model=AdminActionOut, response_model_exclude_unset=True)
def badge_action(
    deleteId: Optional[str] = Form(None),
    editingId: Optional[str] = Form(None),
    productIds: Optional[str] = Form(None),
    name: Optional[str] = Form(None),
    color: Optional[str] = Form(None),
    shop: str = Depends(get_current_shop),
    store: BadgeStore = Depends(get_store),
):
    form = {
        "deleteId": deleteId,
        "editingId": editingId,
        "productIds": productIds,
        "name": name,
        "color": color,
    }
    try:
        action = parse_admin_action(form)
    except BadgeValidationError as e:
        raise HTTPException(status_code=422, detail=str(e))

    try:
        return handle_admin_action(store, shop, action)
    except PersistenceError as e:
        raise HTTPException(status_code=500, detail=f"No se pudo guardar: {e}")
