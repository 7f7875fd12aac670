# catalog/services/catalog_client.py
import os

import requests

from catalog.utils.logging import get_logger
from catalog.utils.retry import http_retry
from catalog.utils.settings import PORT

logger = get_logger(__name__)


def resolve_base_url(base_url: str | None = None) -> str:
    """
    Kolejnosc: argument, CATALOG_BASE_URL, CATALOG_PORT, lokalny PORT z ustawien.
    """
    if base_url:
        return base_url.rstrip("/")

    env_url = os.getenv("CATALOG_BASE_URL")
    if env_url:
        return env_url.rstrip("/")

    port = os.getenv("CATALOG_PORT")
    if port:
        return f"http://localhost:{port}"

    return f"http://localhost:{PORT}"


class CatalogClient:
    """Klient HTTP do uruchomionego serwisu (smoke / load testy)."""

    def __init__(self, base_url: str | None = None, timeout: int = 2):
        self.base_url = resolve_base_url(base_url)
        self.timeout = timeout
        logger.info(f"CatalogClient using base url {self.base_url}")

    @http_retry()
    def _request(self, method: str, path: str, **kwargs):
        url = f"{self.base_url}{path}"
        logger.info(f"CatalogClient {method} {url}")

        resp = requests.request(method, url, timeout=self.timeout, **kwargs)
        resp.raise_for_status()
        return resp.json()

    def health(self) -> dict:
        return self._request("GET", "/health")

    def create_product(self, name: str, price: float) -> dict:
        return self._request("POST", "/api/products", json={"name": name, "price": price})

    def list_products(self) -> list:
        return self._request("GET", "/api/products")

    def get_product(self, product_id: int) -> dict:
        return self._request("GET", f"/api/products/{product_id}")

    def update_price(self, product_id: int, price: float) -> dict:
        return self._request("PUT", f"/api/products/{product_id}", json={"price": price})
