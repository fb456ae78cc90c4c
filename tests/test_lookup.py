import pytest

from product_badges.domain.badges.lookup import (
    lookup_badge, normalize_product_id, resolve_shop, shop_from_referer,
)

GID = "gid://shopify/Product/"


@pytest.mark.parametrize("referer,expected", [
    ("https://s1.example/products/gorra", "s1.example"),
    ("http://S1.Example:8080/", "s1.example"),
    ("https://user:pw@s1.example/x?y=1", "s1.example"),
    ("https://s1.example", "s1.example"),
    ("ftp://s1.example/", None),
    ("s1.example/products", None),
    ("", None),
    (None, None),
])
def test_shop_from_referer(referer, expected):
    assert shop_from_referer(referer) == expected


def test_header_wins_over_referer():
    assert resolve_shop("S2.example", "https://s1.example/p") == "s2.example"
    assert resolve_shop("  ", "https://s1.example/p") == "s1.example"
    assert resolve_shop(None, None) is None


@pytest.mark.parametrize("raw,expected", [
    ("1001", GID + "1001"),
    (" 1001 ", GID + "1001"),
    (GID + "1001", GID + "1001"),
    ("abc", None),
    ("", None),
    (None, None),
    ("gid://shopify/Collection/5", None),
])
def test_normalize_product_id(raw, expected):
    assert normalize_product_id(raw) == expected


def test_lookup_is_scoped_by_shop(store):
    store.create("s1.example", GID + "1001", "Sale", "#ef4444")

    hit = lookup_badge(store, "1001", "s1.example", None)
    assert hit.badge.name == "Sale"
    assert hit.badge.color == "#ef4444"

    assert lookup_badge(store, "1001", "s2.example", None).badge is None
    assert lookup_badge(store, "1001", None, "https://s2.example/products/x").badge is None


def test_lookup_unresolved_returns_null(store):
    store.create("s1.example", GID + "1001", "Sale", "#ef4444")
    assert lookup_badge(store, "1001", None, None).badge is None
    assert lookup_badge(store, None, "s1.example", None).badge is None
    assert lookup_badge(store, "9999", "s1.example", None).badge is None


def test_lookup_picks_newest_badge(store):
    store.create("s1.example", GID + "1001", "Viejo", "#000000")
    store.create("s1.example", GID + "1001", "Nuevo", "#3b82f6")
    assert lookup_badge(store, "1001", "s1.example", None).badge.name == "Nuevo"
