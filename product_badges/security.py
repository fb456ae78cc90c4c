from datetime import datetime, timedelta, timezone
from typing import Optional
from urllib.parse import urlparse

from jose import JWTError, jwt

from product_badges.core.settings import SHOPIFY_API_KEY, SHOPIFY_API_SECRET

ALGORITHM = "HS256"
SESSION_TOKEN_EXPIRE_SECONDS = 60

# Los session tokens los emite la plataforma; aquí solo se validan.
# create_session_token existe para desarrollo y tests.

def create_session_token(shop: str, user_id: str = "1", expires_delta: Optional[timedelta] = None) -> str:
    now = datetime.now(tz=timezone.utc)
    expire = now + (expires_delta or timedelta(seconds=SESSION_TOKEN_EXPIRE_SECONDS))
    to_encode = {
        "iss": f"https://{shop}/admin",
        "dest": f"https://{shop}",
        "sub": user_id,
        "iat": now,
        "nbf": now,
        "exp": expire,
    }
    if SHOPIFY_API_KEY:
        to_encode["aud"] = SHOPIFY_API_KEY
    return jwt.encode(to_encode, SHOPIFY_API_SECRET, algorithm=ALGORITHM)

def decode_session_token(token: str) -> dict:
    return jwt.decode(
        token,
        SHOPIFY_API_SECRET,
        algorithms=[ALGORITHM],
        audience=SHOPIFY_API_KEY or None,
        options={"verify_aud": bool(SHOPIFY_API_KEY)},
    )

def shop_from_claims(claims: dict) -> str:
    """dest = https://<shop>  ->  <shop> (en minúsculas)."""
    host = urlparse(claims.get("dest") or "").hostname
    if not host:
        raise JWTError("session token sin 'dest'")
    return host.lower()
