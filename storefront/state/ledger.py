"""
Cart & Wishlist Ledger

Two independent collections keyed by product id. The cart merges repeated
adds into one line; the wishlist holds full product snapshots with
idempotent membership.
"""

import logging
from dataclasses import dataclass, replace
from typing import Optional

from ..models.cart import LineItem
from ..models.product import Product
from .actions import (
    AddToCart,
    AddToWishlist,
    ClearCart,
    ClearWishlist,
    LedgerAction,
    RemoveFromCart,
    RemoveFromWishlist,
    ToggleWishlist,
    UpdateQuantity,
)
from .store import Store

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LedgerState:
    cart: tuple[LineItem, ...] = ()
    wishlist: tuple[Product, ...] = ()


def find_line(cart: tuple[LineItem, ...], product_id: str) -> Optional[LineItem]:
    """Cart line for a product, if present"""
    return next((item for item in cart if item.product_id == product_id), None)


def is_in_wishlist(wishlist: tuple[Product, ...], product_id: str) -> bool:
    return any(product.id == product_id for product in wishlist)


def subtotal(cart: tuple[LineItem, ...]) -> float:
    """Sum of price x quantity over every cart line"""
    return round(sum(item.price * item.quantity for item in cart), 2)


def total_item_count(cart: tuple[LineItem, ...]) -> int:
    """Number of units in the cart, shown on the cart badge"""
    return sum(item.quantity for item in cart)


def _set_quantity(
    cart: tuple[LineItem, ...], product_id: str, quantity: int
) -> tuple[LineItem, ...]:
    return tuple(
        item.model_copy(update={"quantity": quantity})
        if item.product_id == product_id
        else item
        for item in cart
    )


def _reduce_cart(state: LedgerState, action: LedgerAction) -> LedgerState:
    cart = state.cart

    if isinstance(action, AddToCart):
        existing = find_line(cart, action.product.id)
        if existing:
            # A repeated add always bumps by one unit
            return replace(state, cart=_set_quantity(cart, existing.product_id, existing.quantity + 1))
        if action.quantity < 1:
            logger.debug(f"Rejected add of {action.product.id} with quantity {action.quantity}")
            return state
        line = LineItem.from_product(action.product, action.quantity)
        return replace(state, cart=cart + (line,))

    if isinstance(action, RemoveFromCart):
        if not find_line(cart, action.product_id):
            return state
        return replace(
            state,
            cart=tuple(item for item in cart if item.product_id != action.product_id),
        )

    if isinstance(action, UpdateQuantity):
        if action.quantity < 1:
            logger.debug(f"Rejected quantity {action.quantity} for {action.product_id}")
            return state
        if not find_line(cart, action.product_id):
            return state
        return replace(state, cart=_set_quantity(cart, action.product_id, action.quantity))

    if isinstance(action, ClearCart):
        return replace(state, cart=())

    return state


def _reduce_wishlist(state: LedgerState, action: LedgerAction) -> LedgerState:
    wishlist = state.wishlist

    if isinstance(action, AddToWishlist):
        if is_in_wishlist(wishlist, action.product.id):
            return state
        return replace(state, wishlist=wishlist + (action.product,))

    if isinstance(action, RemoveFromWishlist):
        if not is_in_wishlist(wishlist, action.product_id):
            return state
        return replace(
            state,
            wishlist=tuple(p for p in wishlist if p.id != action.product_id),
        )

    if isinstance(action, ToggleWishlist):
        if is_in_wishlist(wishlist, action.product.id):
            return _reduce_wishlist(state, RemoveFromWishlist(action.product.id))
        return _reduce_wishlist(state, AddToWishlist(action.product))

    if isinstance(action, ClearWishlist):
        return replace(state, wishlist=())

    return state


_CART_ACTIONS = (AddToCart, RemoveFromCart, UpdateQuantity, ClearCart)
_WISHLIST_ACTIONS = (AddToWishlist, RemoveFromWishlist, ToggleWishlist, ClearWishlist)


def reduce_ledger(state: LedgerState, action: LedgerAction) -> LedgerState:
    """Pure reducer for the cart and wishlist"""
    if isinstance(action, _CART_ACTIONS):
        return _reduce_cart(state, action)
    if isinstance(action, _WISHLIST_ACTIONS):
        return _reduce_wishlist(state, action)
    raise TypeError(f"Unsupported ledger action: {type(action).__name__}")


class Ledger(Store[LedgerState, LedgerAction]):
    """Cart and wishlist owned by one shopping session"""

    def __init__(self):
        super().__init__(LedgerState(), reduce_ledger)

    @property
    def cart(self) -> tuple[LineItem, ...]:
        return self.state.cart

    @property
    def wishlist(self) -> tuple[Product, ...]:
        return self.state.wishlist

    @property
    def subtotal(self) -> float:
        return subtotal(self.state.cart)

    @property
    def total_item_count(self) -> int:
        return total_item_count(self.state.cart)

    # ==================== Cart ====================

    def add_to_cart(self, product: Product, quantity: int = 1) -> LedgerState:
        return self.dispatch(AddToCart(product, quantity))

    def remove_from_cart(self, product_id: str) -> LedgerState:
        return self.dispatch(RemoveFromCart(product_id))

    def update_quantity(self, product_id: str, quantity: int) -> LedgerState:
        return self.dispatch(UpdateQuantity(product_id, quantity))

    def clear_cart(self) -> LedgerState:
        return self.dispatch(ClearCart())

    # ==================== Wishlist ====================

    def add_to_wishlist(self, product: Product) -> LedgerState:
        return self.dispatch(AddToWishlist(product))

    def remove_from_wishlist(self, product_id: str) -> LedgerState:
        return self.dispatch(RemoveFromWishlist(product_id))

    def toggle_wishlist(self, product: Product) -> LedgerState:
        return self.dispatch(ToggleWishlist(product))

    def clear_wishlist(self) -> LedgerState:
        return self.dispatch(ClearWishlist())
