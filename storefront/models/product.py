"""Product models for the storefront catalog"""

from pydantic import BaseModel, ConfigDict, Field
from typing import Optional
from enum import Enum


class ProductCategory(str, Enum):
    ALL = "all"
    ELECTRONICS = "electronics"
    CLOTHING = "clothing"
    BOOKS = "books"
    HOME = "home"
    SPORTS = "sports"


class SortKey(str, Enum):
    """Sort orders understood by the catalog API"""
    NAME_ASC = "name_asc"
    NAME_DESC = "name_desc"
    PRICE_ASC = "price_asc"
    PRICE_DESC = "price_desc"
    RATING_DESC = "rating_desc"


CATEGORIES: dict[str, str] = {
    ProductCategory.ALL.value: "All Categories",
    ProductCategory.ELECTRONICS.value: "Electronics",
    ProductCategory.CLOTHING.value: "Clothing",
    ProductCategory.BOOKS.value: "Books",
    ProductCategory.HOME.value: "Home & Living",
    ProductCategory.SPORTS.value: "Sports & Outdoors",
}

SORT_OPTIONS: dict[SortKey, str] = {
    SortKey.NAME_ASC: "Name (A-Z)",
    SortKey.NAME_DESC: "Name (Z-A)",
    SortKey.PRICE_ASC: "Price (Low to High)",
    SortKey.PRICE_DESC: "Price (High to Low)",
    SortKey.RATING_DESC: "Highest Rated",
}


class ProductDetails(BaseModel):
    """Physical details shown on the product page"""
    model_config = ConfigDict(frozen=True)

    material: Optional[str] = None
    dimensions: Optional[str] = None
    weight: Optional[str] = None


class ProductReview(BaseModel):
    """A single shopper review"""
    model_config = ConfigDict(frozen=True)

    rating: float = Field(ge=0, le=5)
    review: str = ""
    user: str = ""
    date: Optional[str] = None


class Product(BaseModel):
    """
    Read-only product snapshot returned by the catalog API.

    The list endpoint fills the basic fields; the detail endpoint may add
    details, features, specifications and reviews.
    """
    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        extra="ignore",
    )

    id: str = Field(alias="_id")
    name: str
    description: str = ""
    price: float = Field(ge=0)
    images: tuple[str, ...] = ()
    category: str = ProductCategory.ALL.value
    stock: int = Field(ge=0, default=0)
    rating: Optional[float] = Field(default=None, ge=0, le=5)

    details: Optional[ProductDetails] = None
    features: tuple[str, ...] = ()
    specifications: dict[str, str] = Field(default_factory=dict)
    ratings: tuple[ProductReview, ...] = ()
    average_rating: Optional[float] = Field(default=None, alias="averageRating")

    @property
    def primary_image(self) -> Optional[str]:
        """First image, used as the cart thumbnail"""
        return self.images[0] if self.images else None

    @property
    def in_stock(self) -> bool:
        return self.stock > 0


class PriceRange(BaseModel):
    """Inclusive price bounds for catalog filtering"""
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    min: float = 0
    max: float = 10000


class ProductPage(BaseModel):
    """One page of catalog search results"""
    products: list[Product]
    total: int
