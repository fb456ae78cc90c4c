import os
from dotenv import load_dotenv

load_dotenv()

# === Base de datos ===
DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///./badges.db")
DEV_AUTO_CREATE = os.getenv("DEV_AUTO_CREATE", "0") == "1"

# === CORS del panel de administración ===
# El endpoint público NO usa esta lista: siempre responde con origen abierto.
_origins = os.getenv("CORS_ORIGINS", "")
CORS_ORIGINS = [o.strip() for o in _origins.split(",") if o.strip()] or ["http://localhost:3000"]

# === Plataforma (Shopify) ===
SHOPIFY_API_KEY = os.getenv("SHOPIFY_API_KEY", "")
SHOPIFY_API_SECRET = os.getenv("SHOPIFY_API_SECRET", "change-me")
SHOPIFY_API_VERSION = os.getenv("SHOPIFY_API_VERSION", "2024-10")

PRODUCT_GID_PREFIX = os.getenv("PRODUCT_GID_PREFIX", "gid://shopify/Product/")
SHOP_DOMAIN_HEADER = os.getenv("SHOP_DOMAIN_HEADER", "X-Shopify-Shop-Domain")

# === Catálogo ===
CATALOG_PAGE_SIZE = int(os.getenv("CATALOG_PAGE_SIZE", "50"))
CATALOG_TIMEOUT = float(os.getenv("CATALOG_TIMEOUT", "10"))

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
