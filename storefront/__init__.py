"""Client-side catalog and cart state engine for the storefront"""

from .state import CatalogEngine, Ledger, StorefrontSession
from .app import storefront_session

__version__ = "1.0.0"

__all__ = ["CatalogEngine", "Ledger", "StorefrontSession", "storefront_session"]
