"""Derived views over catalog and ledger state"""

from enum import Enum

from ..models.cart import CheckoutSummary, LineItem
from ..models.order import OrderItem, OrderRequest, ShippingAddress
from ..models.product import Product
from .catalog import CatalogState
from .ledger import LedgerState, subtotal, total_item_count


class ViewMode(str, Enum):
    """Which collection the product grid shows"""
    ALL = "all"
    WISHLIST = "wishlist"


def displayed_products(
    catalog: CatalogState,
    ledger: LedgerState,
    mode: ViewMode = ViewMode.ALL,
) -> tuple[Product, ...]:
    """Products for the grid: the loaded catalog page or the wishlist"""
    if ViewMode(mode) == ViewMode.WISHLIST:
        return ledger.wishlist
    return catalog.items


def checkout_summary(
    cart: tuple[LineItem, ...],
    free_shipping_threshold: float = 100.0,
    shipping_fee: float = 10.0,
    currency: str = "USD",
) -> CheckoutSummary:
    """
    Totals for the cart page.

    Shipping is free once the subtotal exceeds the threshold and is never
    charged on an empty cart.
    """
    amount = subtotal(cart)
    if not cart or amount > free_shipping_threshold:
        shipping = 0.0
    else:
        shipping = shipping_fee
    return CheckoutSummary(
        subtotal=amount,
        shipping=shipping,
        total=round(amount + shipping, 2),
        item_count=total_item_count(cart),
        currency=currency,
    )


def build_order_request(
    cart: tuple[LineItem, ...],
    shipping_address: ShippingAddress,
    free_shipping_threshold: float = 100.0,
    shipping_fee: float = 10.0,
) -> OrderRequest:
    """Turn the cart into an order placement request"""
    if not cart:
        raise ValueError("Cannot place an order for an empty cart")

    summary = checkout_summary(cart, free_shipping_threshold, shipping_fee)
    items = [
        OrderItem(
            product_id=item.product_id,
            name=item.name,
            price=item.price,
            quantity=item.quantity,
            image=item.image,
        )
        for item in cart
    ]
    return OrderRequest(
        items=items,
        shipping_address=shipping_address,
        subtotal=summary.subtotal,
        shipping=summary.shipping,
        total=summary.total,
    )
