"""Order models exchanged with the order API"""

from pydantic import BaseModel, ConfigDict, Field
from typing import Optional
from datetime import datetime
from enum import Enum


class OrderStatus(str, Enum):
    PENDING = "Pending"
    PROCESSING = "Processing"
    SHIPPED = "Shipped"
    DELIVERED = "Delivered"
    CANCELLED = "Cancelled"


class ShippingAddress(BaseModel):
    """Shipping address for an order"""
    name: str
    street: str
    city: str
    state: str
    postal_code: str = Field(alias="postalCode")
    country: str = "US"

    model_config = ConfigDict(populate_by_name=True)


class OrderItem(BaseModel):
    """Item in an order"""
    product_id: str = Field(alias="product")
    name: str
    price: float
    quantity: int = Field(gt=0)
    image: Optional[str] = None

    model_config = ConfigDict(populate_by_name=True, extra="ignore")


class OrderRequest(BaseModel):
    """Body of an order placement request"""
    items: list[OrderItem]
    shipping_address: ShippingAddress = Field(alias="shippingAddress")
    subtotal: float
    shipping: float
    total: float

    model_config = ConfigDict(populate_by_name=True)


class Order(BaseModel):
    """Order as reported back by the order API"""
    id: str = Field(alias="_id")
    items: list[OrderItem] = []
    total: float
    status: OrderStatus = OrderStatus.PENDING
    created_at: Optional[datetime] = Field(default=None, alias="createdAt")

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    @property
    def short_id(self) -> str:
        """Last six characters, used as the human-facing order number"""
        return self.id[-6:]
