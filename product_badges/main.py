import logging
from fastapi import FastAPI

from product_badges.core.cors import ShopCORSMiddleware
from product_badges.core.settings import CORS_ORIGINS, DEV_AUTO_CREATE, LOG_LEVEL
from product_badges.db import Base, engine
from product_badges.models import badge, shop_session  # noqa: F401  (registra las tablas)

from product_badges.routers import admin as admin_router
from product_badges.routers import public as public_router
from product_badges.routers import webhooks as webhooks_router

logging.basicConfig(level=LOG_LEVEL, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

app = FastAPI(title="Product Badges API")

# ==== CORS ====
# Panel: CORS_ORIGINS. /api/ (widget): cualquier origen, preflight incluido
app.add_middleware(
    ShopCORSMiddleware,
    public_prefix="/api/",
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

if DEV_AUTO_CREATE:
    Base.metadata.create_all(bind=engine)

# ==== Routers ====
app.include_router(admin_router.router)
app.include_router(public_router.router)
app.include_router(webhooks_router.router)

@app.get("/health")
def health():
    return {"status": "ok"}
