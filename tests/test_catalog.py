import requests

from product_badges.services.catalog import ShopifyCatalog


class FakeResponse:
    def __init__(self, payload, status=200):
        self.payload = payload
        self.status_code = status

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code}")

    def json(self):
        return self.payload


class FakeHTTP:
    def __init__(self, response=None, exc=None):
        self.response = response
        self.exc = exc
        self.calls = []

    def post(self, url, **kwargs):
        self.calls.append((url, kwargs))
        if self.exc:
            raise self.exc
        return self.response


PAYLOAD = {"data": {"products": {"edges": [
    {"node": {"id": "gid://shopify/Product/1", "title": "Camiseta", "handle": "camiseta",
              "images": {"edges": [{"node": {"url": "https://cdn.example/c.png"}}]}}},
    {"node": {"id": "gid://shopify/Product/2", "title": "Gorra", "handle": "gorra",
              "images": {"edges": []}}},
]}}}


def test_list_products_maps_nodes():
    http = FakeHTTP(FakeResponse(PAYLOAD))
    products = ShopifyCatalog("s1.example", "shpat_x", session=http).list_products(first=2)

    assert [(p.id, p.title, p.handle, p.image) for p in products] == [
        ("gid://shopify/Product/1", "Camiseta", "camiseta", "https://cdn.example/c.png"),
        ("gid://shopify/Product/2", "Gorra", "gorra", None),
    ]
    url, kwargs = http.calls[0]
    assert url.startswith("https://s1.example/admin/api/")
    assert kwargs["headers"]["X-Shopify-Access-Token"] == "shpat_x"
    assert kwargs["json"]["variables"] == {"first": 2}


def test_list_products_degrades_to_empty():
    assert ShopifyCatalog("s1.example", "t", session=FakeHTTP(exc=requests.ConnectionError("down"))).list_products() == []
    assert ShopifyCatalog("s1.example", "t", session=FakeHTTP(FakeResponse({}, status=401))).list_products() == []
    assert ShopifyCatalog("s1.example", "t", session=FakeHTTP(FakeResponse({"errors": ["x"]}))).list_products() == []
