"""Cart models for the storefront ledger"""

from pydantic import BaseModel, ConfigDict, Field
from typing import Optional

from .product import Product


class LineItem(BaseModel):
    """Item in a shopping cart, priced at the moment it was added"""
    model_config = ConfigDict(frozen=True)

    product_id: str
    name: str
    price: float = Field(ge=0)
    image: Optional[str] = None
    quantity: int = Field(gt=0)

    @classmethod
    def from_product(cls, product: Product, quantity: int = 1) -> "LineItem":
        """Snapshot a catalog product into a cart line"""
        return cls(
            product_id=product.id,
            name=product.name,
            price=product.price,
            image=product.primary_image,
            quantity=quantity,
        )


class CheckoutSummary(BaseModel):
    """Totals shown on the cart page"""
    subtotal: float = 0.0
    shipping: float = 0.0
    total: float = 0.0
    item_count: int = 0
    currency: str = "USD"
