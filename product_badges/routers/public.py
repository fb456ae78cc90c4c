from typing import Optional
from fastapi import APIRouter, Depends, Request, Response

from product_badges.core.settings import SHOP_DOMAIN_HEADER
from product_badges.deps import get_store
from product_badges.domain.badges.lookup import lookup_badge
from product_badges.domain.badges.store import BadgeStore
from product_badges.schemas.badge import PublicLookupOut

router = APIRouter(prefix="/api", tags=["public"])

@router.get("/badge", response_model=PublicLookupOut)
def public_badge(
    request: Request,
    response: Response,
    productId: Optional[str] = None,
    store: BadgeStore = Depends(get_store),
):
    """
    Endpoint del widget de la tienda: sin auth, cualquier origen, siempre 200.
    {"badge": {"name", "color"}} o {"badge": null}
    """
    response.headers["Access-Control-Allow-Origin"] = "*"
    return lookup_badge(
        store,
        productId,
        header_shop=request.headers.get(SHOP_DOMAIN_HEADER),
        referer=request.headers.get("referer"),
    )
