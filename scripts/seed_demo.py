# scripts/seed_demo.py
import sys
from pathlib import Path
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from sqlalchemy import select
from product_badges.db import SessionLocal
from product_badges.domain.badges.store import BadgeStore
from product_badges.models.shop_session import ShopSession
from product_badges.security import create_session_token

SHOP = "demo-shop.myshopify.com"

SEEDS = [
    # product_id,                      name,         color
    ("gid://shopify/Product/1001",     "Sale",       "#ef4444"),
    ("gid://shopify/Product/1002",     "Nuevo",      "#3b82f6"),
    ("gid://shopify/Product/1003",     "Últimas",    "#f59e0b"),
]

def upsert_session(db, shop, access_token):
    sid = f"offline_{shop}"
    row = db.execute(select(ShopSession).where(ShopSession.id == sid)).scalar_one_or_none()
    if row:
        row.access_token = access_token
    else:
        row = ShopSession(id=sid, shop=shop, state="", is_online=False, access_token=access_token)
        db.add(row)
    db.commit()

def main():
    db = SessionLocal()
    try:
        upsert_session(db, SHOP, "shpat_demo")
        store = BadgeStore(db)
        existing = {b.product_id for b in store.list_by_shop(SHOP)}
        for pid, name, color in SEEDS:
            if pid not in existing:
                store.create(SHOP, pid, name, color)
        print("Demo seed OK")
        print(f"Bearer {create_session_token(SHOP)}")
    finally:
        db.close()

if __name__ == "__main__":
    main()
