"""
Lectura pública (widget de la tienda, sin autenticación).

Resolución de la tienda, en dos pasos:
  1. header de confianza (X-Shopify-Shop-Domain por defecto), en minúsculas;
  2. si no hay header, el host del Referer: esquema http/https obligatorio,
     sin credenciales ni puerto, en minúsculas.
Si ninguno resuelve, no se busca nada: nunca hay búsqueda sin tienda.
"""
import logging
import re
from typing import Optional

from sqlalchemy.exc import SQLAlchemyError

from product_badges.core.settings import PRODUCT_GID_PREFIX
from product_badges.domain.badges.store import BadgeStore
from product_badges.schemas.badge import PublicBadgeOut, PublicLookupOut

log = logging.getLogger("lookup")

# https://user@Shop.example.com:8443/products/x -> shop.example.com
REFERER_HOST_RE = re.compile(r"^https?://(?:[^@/?#]*@)?([^:/?#]+)", re.IGNORECASE)
# id numérico del catálogo, o un gid ya canónico
NUMERIC_ID_RE = re.compile(r"^\d+$")


def shop_from_referer(referer: Optional[str]) -> Optional[str]:
    if not referer:
        return None
    m = REFERER_HOST_RE.match(referer.strip())
    if not m:
        return None
    return m.group(1).lower()


def resolve_shop(header_shop: Optional[str], referer: Optional[str]) -> Optional[str]:
    if header_shop and header_shop.strip():
        return header_shop.strip().lower()
    return shop_from_referer(referer)


def normalize_product_id(raw: Optional[str]) -> Optional[str]:
    """'123' -> 'gid://shopify/Product/123'; un gid canónico se deja igual; lo demás -> None."""
    if raw is None:
        return None
    v = raw.strip()
    if v.startswith(PRODUCT_GID_PREFIX):
        v = v[len(PRODUCT_GID_PREFIX):]
    if not NUMERIC_ID_RE.match(v):
        return None
    return PRODUCT_GID_PREFIX + v


def lookup_badge(store: BadgeStore, product_ref: Optional[str],
                 header_shop: Optional[str], referer: Optional[str]) -> PublicLookupOut:
    shop = resolve_shop(header_shop, referer)
    product_id = normalize_product_id(product_ref)
    if not shop or not product_id:
        return PublicLookupOut(badge=None)

    try:
        b = store.find_one(shop, product_id)
    except SQLAlchemyError as e:
        # el widget trata "sin badge" como caso normal: nunca devolvemos error
        log.warning("badge lookup failed for %s: %s", shop, e)
        return PublicLookupOut(badge=None)
    if b is None:
        return PublicLookupOut(badge=None)
    return PublicLookupOut(badge=PublicBadgeOut(name=b.name, color=b.color))
