# State: catalog query engine, cart & wishlist ledger, session

from .catalog import (
    CatalogEngine,
    CatalogState,
    DetailState,
    FetchStatus,
    FilterCriteria,
    PaginationState,
    reduce_catalog,
)
from .ledger import (
    Ledger,
    LedgerState,
    reduce_ledger,
    subtotal,
    total_item_count,
)
from .selectors import ViewMode, build_order_request, checkout_summary, displayed_products
from .session import StorefrontSession

__all__ = [
    "CatalogEngine",
    "CatalogState",
    "DetailState",
    "FetchStatus",
    "FilterCriteria",
    "PaginationState",
    "reduce_catalog",
    "Ledger",
    "LedgerState",
    "reduce_ledger",
    "subtotal",
    "total_item_count",
    "ViewMode",
    "build_order_request",
    "checkout_summary",
    "displayed_products",
    "StorefrontSession",
]
