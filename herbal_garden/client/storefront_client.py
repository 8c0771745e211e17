# herbal_garden/client/storefront_client.py
from typing import Any, Dict, List
from urllib.parse import quote

import requests
from requests import RequestException

from herbal_garden.client.catalog import Catalog
from herbal_garden.data.snapshot import load_snapshot
from herbal_garden.domain.schemas import (
    ContactIn,
    ContactReceipt,
    OrderReceipt,
    OrderSubmission,
    Product,
)
from herbal_garden.utils.settings import HTTP_TIMEOUT, STOREFRONT_URL
from herbal_garden.utils.logging import get_logger

logger = get_logger(__name__)


class StorefrontError(Exception):
    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class StorefrontClient:
    """
    Klient HTTP do API sklepu. Bez retry: blad od razu trafia do wywolujacego.
    """

    def __init__(
        self,
        base_url: str | None = None,
        timeout: int = HTTP_TIMEOUT,
        session=None,
        snapshot_path: str | None = None,
    ):
        self.base_url = (base_url or STOREFRONT_URL).rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()
        self.snapshot_path = snapshot_path

    # katalog
    def fetch_products(
        self,
        search: str | None = None,
        category: str | None = None,
        min_price=None,
        max_price=None,
        featured: bool = False,
    ) -> List[Product]:
        params = {
            "search": search,
            "category": category,
            "minPrice": min_price,
            "maxPrice": max_price,
            "featured": "true" if featured else None,
        }
        params = {k: str(v) for k, v in params.items() if v is not None}
        payload = self._request("GET", "/api/products", params=params)
        return [Product.model_validate(p) for p in payload.get("data") or []]

    def fetch_product(self, product_id) -> Product:
        payload = self._request("GET", f"/api/products/{product_id}")
        return Product.model_validate(payload["data"])

    def search_products(self, query: str) -> List[Product]:
        payload = self._request("GET", f"/api/products/search/{quote(query, safe='')}")
        return [Product.model_validate(p) for p in payload.get("data") or []]

    def load_catalog(self) -> Catalog:
        """Katalog z API, a gdy API nie odpowiada, ze statycznego snapshotu."""
        try:
            products = self.fetch_products()
            logger.info(f"Loaded {len(products)} products from API")
            return Catalog(products, source="api")
        except (StorefrontError, ValueError) as e:
            logger.warning(f"Error loading products from API ({e}), falling back to local snapshot")

        try:
            products = load_snapshot(self.snapshot_path)
        except (OSError, ValueError) as e:
            logger.error(f"Failed to load products: {e}")
            raise StorefrontError("Unable to load products. Please try again later.") from e
        logger.info(f"Loaded {len(products)} products from local snapshot")
        return Catalog(products, source="snapshot")

    # zamowienia i kontakt
    def place_order(self, submission: OrderSubmission) -> OrderReceipt:
        body = submission.model_dump(mode="json", by_alias=True, exclude_none=True)
        payload = self._request("POST", "/api/orders", json=body)
        return OrderReceipt.model_validate(payload["data"])

    def submit_contact(self, contact: ContactIn | dict) -> ContactReceipt:
        if isinstance(contact, dict):
            contact = ContactIn.model_validate(contact)
        fields = {f: (getattr(contact, f) or "").strip() for f in ("name", "email", "subject", "message")}
        if not all(fields.values()):
            raise ValueError("Please fill all required fields")

        payload = self._request("POST", "/api/contact", json=fields)
        return ContactReceipt.model_validate(payload["data"])

    def health(self) -> Dict[str, Any]:
        return self._request("GET", "/health", envelope=False)

    def _request(self, method: str, path: str, envelope: bool = True, **kwargs) -> Dict[str, Any]:
        url = f"{self.base_url}{path}"
        logger.info(f"StorefrontClient {method} {url}")

        try:
            resp = self.session.request(method, url, timeout=self.timeout, **kwargs)
        except RequestException as e:
            raise StorefrontError(f"Storefront unreachable: {e}") from e

        try:
            payload = resp.json()
        except ValueError as e:
            raise StorefrontError(f"Unexpected response ({resp.status_code})", resp.status_code) from e
        if not isinstance(payload, dict):
            raise StorefrontError(f"Unexpected response ({resp.status_code})", resp.status_code)

        if envelope and not payload.get("success"):
            message = payload.get("message") or f"Request failed with status {resp.status_code}"
            raise StorefrontError(message, resp.status_code)
        if not envelope and resp.status_code >= 400:
            raise StorefrontError(f"Request failed with status {resp.status_code}", resp.status_code)
        return payload
