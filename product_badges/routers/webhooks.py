from fastapi import APIRouter, Depends, Header, HTTPException, Response
from sqlalchemy.orm import Session

from product_badges.db import get_db
from product_badges.domain.badges.errors import PersistenceError
from product_badges.domain.tenants.teardown import UninstallEvent, handle_app_uninstalled, has_session

router = APIRouter(prefix="/webhooks", tags=["webhooks"])

# La entrega y la firma (HMAC) del webhook las valida la plataforma/proxy antes de llegar aquí.

@router.post("/app/uninstalled")
def app_uninstalled(
    x_shopify_shop_domain: str | None = Header(None),
    x_shopify_topic: str = Header("APP_UNINSTALLED"),
    db: Session = Depends(get_db),
):
    if not x_shopify_shop_domain:
        raise HTTPException(status_code=400, detail="Falta X-Shopify-Shop-Domain")
    shop = x_shopify_shop_domain.strip().lower()

    event = UninstallEvent(shop=shop, session_present=has_session(db, shop), topic=x_shopify_topic)
    try:
        handle_app_uninstalled(db, event)
    except PersistenceError as e:
        # borrar sesiones es obligatorio: que la plataforma reintente
        raise HTTPException(status_code=500, detail=str(e))
    return Response(status_code=200)
