# Services

from .api_client import StorefrontAPIClient, CatalogAPIError, ProductNotFoundError

__all__ = ["StorefrontAPIClient", "CatalogAPIError", "ProductNotFoundError"]
