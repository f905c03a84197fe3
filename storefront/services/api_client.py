"""
Storefront API Client

HTTP client for the remote catalog and order API.
Converts transport and HTTP failures into CatalogAPIError so callers only
ever deal with one exception family and a human-readable message.
"""

import logging
from typing import Optional, Any

import httpx
from pydantic import ValidationError

from ..models.product import Product, ProductPage, SortKey
from ..models.order import Order, OrderRequest

logger = logging.getLogger(__name__)


class CatalogAPIError(Exception):
    """Base exception for catalog and order API errors"""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class ProductNotFoundError(CatalogAPIError):
    """Requested product does not exist"""
    pass


class StorefrontAPIClient:
    """
    Client for the storefront backend.

    Usage:
        async with StorefrontAPIClient("http://localhost:5000/api") as client:
            page = await client.search_products(page=1, limit=10)
            product = await client.get_product(page.products[0].id)
    """

    def __init__(
        self,
        base_url: str,
        auth_token: Optional[str] = None,
        timeout: float = 30.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """
        Initialize API client.

        Args:
            base_url: Base URL of the storefront API
            auth_token: Bearer token from the identity provider, if signed in
            timeout: Request timeout in seconds
            transport: Optional httpx transport, used to stub the backend
        """
        self.base_url = base_url.rstrip("/")
        self.auth_token = auth_token
        self._http_client = httpx.AsyncClient(timeout=timeout, transport=transport)

    async def __aenter__(self) -> "StorefrontAPIClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.close()

    async def close(self) -> None:
        """Close HTTP client"""
        await self._http_client.aclose()

    def _generate_headers(self) -> dict[str, str]:
        """Generate headers including the bearer token if available"""
        headers = {
            "Content-Type": "application/json",
            "Accept": "application/json",
        }
        if self.auth_token:
            headers["Authorization"] = f"Bearer {self.auth_token}"
        return headers

    async def _request(
        self,
        method: str,
        path: str,
        params: Optional[dict[str, str]] = None,
        body: Optional[dict] = None,
        default_error: str = "Request failed",
    ) -> Any:
        """Make an HTTP request and return the decoded JSON body"""
        url = f"{self.base_url}{path}"

        try:
            response = await self._http_client.request(
                method=method,
                url=url,
                params=params,
                headers=self._generate_headers(),
                json=body,
            )
        except httpx.HTTPError as exc:
            logger.error(f"Request failed: {method} {url} - {exc}")
            raise CatalogAPIError(default_error) from exc

        if response.status_code >= 400:
            logger.error(f"Request failed: {response.status_code} - {response.text}")
            message = self._error_message(response) or default_error
            if response.status_code == 404:
                raise ProductNotFoundError(message, status_code=404)
            raise CatalogAPIError(message, status_code=response.status_code)

        try:
            return response.json()
        except ValueError as exc:
            logger.error(f"Non-JSON response from {method} {url}: {response.text[:200]!r}")
            raise CatalogAPIError(default_error, status_code=response.status_code) from exc

    @staticmethod
    def _error_message(response: httpx.Response) -> Optional[str]:
        """Pull the server-supplied message out of an error body"""
        try:
            data = response.json()
        except ValueError:
            return None
        if isinstance(data, dict) and isinstance(data.get("message"), str):
            return data["message"]
        return None

    # ==================== Product APIs ====================

    async def search_products(
        self,
        page: int = 1,
        limit: int = 10,
        category: Optional[str] = None,
        search: Optional[str] = None,
        sort: Optional[SortKey] = None,
    ) -> ProductPage:
        """Search products in the catalog"""
        params = {"page": str(page), "limit": str(limit)}
        if category and category != "all":
            params["category"] = category
        if search:
            params["search"] = search
        if sort:
            params["sort"] = SortKey(sort).value

        default_error = "Failed to fetch products"
        data = await self._request(
            "GET", "/products", params=params, default_error=default_error
        )

        # The backend answers either {"products": [...]} or a bare array
        raw_products = data.get("products", []) if isinstance(data, dict) else data
        try:
            products = [Product.model_validate(item) for item in raw_products]
        except (ValidationError, TypeError) as exc:
            logger.error(f"Malformed product list: {exc}")
            raise CatalogAPIError(default_error) from exc

        total = data.get("total") if isinstance(data, dict) else None
        if not isinstance(total, int):
            total = len(products)

        logger.debug(f"Fetched {len(products)} products (total {total})")
        return ProductPage(products=products, total=total)

    async def get_product(self, product_id: str) -> Product:
        """Get product details"""
        default_error = "Failed to fetch product details"
        data = await self._request(
            "GET", f"/products/{product_id}", default_error=default_error
        )
        try:
            return Product.model_validate(data)
        except ValidationError as exc:
            logger.error(f"Malformed product {product_id}: {exc}")
            raise CatalogAPIError(default_error) from exc

    # ==================== Order APIs ====================

    async def place_order(self, order: OrderRequest) -> Order:
        """Submit the cart contents as a new order"""
        data = await self._request(
            "POST",
            "/orders",
            body=order.model_dump(mode="json", by_alias=True),
            default_error="Failed to place order",
        )
        try:
            return Order.model_validate(data)
        except ValidationError as exc:
            logger.error(f"Malformed order response: {exc}")
            raise CatalogAPIError("Failed to place order") from exc

    async def get_my_orders(self) -> list[Order]:
        """Get the signed-in shopper's order history"""
        default_error = "Failed to fetch orders"
        data = await self._request(
            "GET", "/orders/my-orders", default_error=default_error
        )
        if not isinstance(data, list):
            logger.error(f"Order history is not a list: {type(data).__name__}")
            raise CatalogAPIError(default_error)
        try:
            return [Order.model_validate(item) for item in data]
        except ValidationError as exc:
            logger.error(f"Malformed order history: {exc}")
            raise CatalogAPIError(default_error) from exc
