# Storefront Models

from .product import (
    Product,
    ProductCategory,
    ProductDetails,
    ProductReview,
    ProductPage,
    PriceRange,
    SortKey,
    CATEGORIES,
    SORT_OPTIONS,
)
from .cart import LineItem, CheckoutSummary
from .order import (
    Order,
    OrderItem,
    OrderRequest,
    OrderStatus,
    ShippingAddress,
)

__all__ = [
    "Product",
    "ProductCategory",
    "ProductDetails",
    "ProductReview",
    "ProductPage",
    "PriceRange",
    "SortKey",
    "CATEGORIES",
    "SORT_OPTIONS",
    "LineItem",
    "CheckoutSummary",
    "Order",
    "OrderItem",
    "OrderRequest",
    "OrderStatus",
    "ShippingAddress",
]
