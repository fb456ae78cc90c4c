import os

os.environ.setdefault("DATABASE_URL", "sqlite://")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from product_badges.db import Base, get_db
from product_badges.deps import get_catalog
from product_badges.domain.badges.store import BadgeStore
from product_badges.main import app
from product_badges.models.shop_session import ShopSession
from product_badges.schemas.badge import CatalogProductOut
from product_badges.security import create_session_token


class FakeCatalog:
    def __init__(self, products=None):
        self.products = products or [
            CatalogProductOut(id="gid://shopify/Product/1001", title="Camiseta", handle="camiseta", image=None),
            CatalogProductOut(id="gid://shopify/Product/1002", title="Gorra", handle="gorra",
                              image="https://cdn.example/gorra.png"),
        ]

    def list_products(self, first: int = 50):
        return self.products[:first]


@pytest.fixture
def engine():
    eng = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=eng)
    yield eng
    Base.metadata.drop_all(bind=eng)
    eng.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db(session_factory):
    s = session_factory()
    try:
        yield s
    finally:
        s.close()


@pytest.fixture
def store(db):
    return BadgeStore(db)


@pytest.fixture
def add_session(db):
    def _add(shop: str, access_token: str = "shpat_test"):
        db.add(ShopSession(id=f"offline_{shop}", shop=shop, state="", is_online=False,
                           access_token=access_token))
        db.commit()
    return _add


@pytest.fixture
def client(session_factory):
    def _get_db():
        s = session_factory()
        try:
            yield s
        finally:
            s.close()

    app.dependency_overrides[get_db] = _get_db
    app.dependency_overrides[get_catalog] = lambda: FakeCatalog()
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture
def auth_headers():
    def _headers(shop: str) -> dict:
        return {"Authorization": f"Bearer {create_session_token(shop)}"}
    return _headers
