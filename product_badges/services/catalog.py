import logging
from typing import List

import requests

from product_badges.core.settings import SHOPIFY_API_VERSION, CATALOG_PAGE_SIZE, CATALOG_TIMEOUT
from product_badges.schemas.badge import CatalogProductOut

log = logging.getLogger("catalog")

PRODUCTS_QUERY = """
query ($first: Int!) {
  products(first: $first) {
    edges {
      node {
        id
        title
        handle
        images(first: 1) { edges { node { url } } }
      }
    }
  }
}
"""


def _node_to_product(node: dict) -> CatalogProductOut:
    images = ((node.get("images") or {}).get("edges") or [])
    image = (images[0].get("node") or {}).get("url") if images else None
    return CatalogProductOut(
        id=node["id"],
        title=node.get("title") or "",
        handle=node.get("handle") or "",
        image=image,
    )


class ShopifyCatalog:
    """Catálogo externo de la plataforma. Solo lectura."""

    def __init__(self, shop: str, access_token: str, session: requests.Session | None = None):
        self.shop = shop
        self.access_token = access_token
        self.http = session or requests.Session()

    @property
    def graphql_url(self) -> str:
        return f"https://{self.shop}/admin/api/{SHOPIFY_API_VERSION}/graphql.json"

    def list_products(self, first: int = CATALOG_PAGE_SIZE) -> List[CatalogProductOut]:
        """
        Lista de productos para el selector del panel.
        Si la plataforma falla se devuelve [] (el panel sigue mostrando las badges).
        """
        try:
            r = self.http.post(
                self.graphql_url,
                json={"query": PRODUCTS_QUERY, "variables": {"first": first}},
                headers={"X-Shopify-Access-Token": self.access_token},
                timeout=CATALOG_TIMEOUT,
            )
            r.raise_for_status()
            data = r.json()
        except (requests.RequestException, ValueError) as e:
            log.warning("catalog query failed for %s: %s", self.shop, e)
            return []

        edges = (((data or {}).get("data") or {}).get("products") or {}).get("edges") or []
        return [_node_to_product(e["node"]) for e in edges if e.get("node")]


class EmptyCatalog:
    """Sin sesión offline no hay token para consultar el catálogo."""

    def list_products(self, first: int = CATALOG_PAGE_SIZE) -> List[CatalogProductOut]:
        return []
