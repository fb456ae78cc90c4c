from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy import select
from sqlalchemy.orm import Session
from jose import JWTError

from product_badges.db import get_db
from product_badges.domain.badges.store import BadgeStore
from product_badges.models.shop_session import ShopSession
from product_badges.security import decode_session_token, shop_from_claims
from product_badges.services.catalog import EmptyCatalog, ShopifyCatalog

bearer_scheme = HTTPBearer(auto_error=False)

def get_current_shop(creds: HTTPAuthorizationCredentials | None = Depends(bearer_scheme)) -> str:
    """La tienda (tenant) de la request del panel, sacada del session token."""
    cred_exc = HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Session token inválido",
        headers={"WWW-Authenticate": "Bearer"},
    )
    if creds is None:
        raise cred_exc
    try:
        return shop_from_claims(decode_session_token(creds.credentials))
    except JWTError:
        raise cred_exc

def get_store(db: Session = Depends(get_db)) -> BadgeStore:
    return BadgeStore(db)

def get_catalog(shop: str = Depends(get_current_shop), db: Session = Depends(get_db)):
    # sesión offline de la tienda -> access token para la Admin API
    row = db.execute(
        select(ShopSession)
        .where(ShopSession.shop == shop, ShopSession.is_online.is_(False))
        .limit(1)
    ).scalar_one_or_none()
    if row is None:
        return EmptyCatalog()
    return ShopifyCatalog(shop, row.access_token)
