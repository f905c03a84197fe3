"""
Storefront actions

One immutable dataclass per state transition. Catalog and ledger reducers
accept only their own union of action classes.
"""

from dataclasses import dataclass
from typing import Union

from ..models.product import PriceRange, Product, ProductPage


# ==================== Catalog filter actions ====================

@dataclass(frozen=True)
class SetCategory:
    category: str


@dataclass(frozen=True)
class SetPriceRange:
    price_range: PriceRange


@dataclass(frozen=True)
class SetSearchQuery:
    query: str


@dataclass(frozen=True)
class SetSortBy:
    sort_by: str


@dataclass(frozen=True)
class ClearFilters:
    pass


@dataclass(frozen=True)
class SetCurrentPage:
    page: int


# ==================== Catalog fetch lifecycle ====================

@dataclass(frozen=True)
class ListRequested:
    request_id: int


@dataclass(frozen=True)
class ListSucceeded:
    request_id: int
    page: ProductPage


@dataclass(frozen=True)
class ListFailed:
    request_id: int
    error: str


@dataclass(frozen=True)
class DetailRequested:
    request_id: int
    product_id: str


@dataclass(frozen=True)
class DetailSucceeded:
    request_id: int
    product: Product


@dataclass(frozen=True)
class DetailFailed:
    request_id: int
    error: str


# ==================== Cart actions ====================

@dataclass(frozen=True)
class AddToCart:
    product: Product
    quantity: int = 1


@dataclass(frozen=True)
class RemoveFromCart:
    product_id: str


@dataclass(frozen=True)
class UpdateQuantity:
    product_id: str
    quantity: int


@dataclass(frozen=True)
class ClearCart:
    pass


# ==================== Wishlist actions ====================

@dataclass(frozen=True)
class AddToWishlist:
    product: Product


@dataclass(frozen=True)
class RemoveFromWishlist:
    product_id: str


@dataclass(frozen=True)
class ToggleWishlist:
    product: Product


@dataclass(frozen=True)
class ClearWishlist:
    pass


CatalogAction = Union[
    SetCategory,
    SetPriceRange,
    SetSearchQuery,
    SetSortBy,
    ClearFilters,
    SetCurrentPage,
    ListRequested,
    ListSucceeded,
    ListFailed,
    DetailRequested,
    DetailSucceeded,
    DetailFailed,
]

LedgerAction = Union[
    AddToCart,
    RemoveFromCart,
    UpdateQuantity,
    ClearCart,
    AddToWishlist,
    RemoveFromWishlist,
    ToggleWishlist,
    ClearWishlist,
]
