import pytest

from storefront.models import ShippingAddress
from storefront.state import (
    CatalogState,
    Ledger,
    ViewMode,
    build_order_request,
    checkout_summary,
    displayed_products,
)


def test_checkout_summary_charges_shipping_below_threshold(make_product):
    ledger = Ledger()
    ledger.add_to_cart(make_product("p1", 40.0), 2)

    summary = checkout_summary(ledger.cart)

    assert summary.subtotal == 80.0
    assert summary.shipping == 10.0
    assert summary.total == 90.0
    assert summary.item_count == 2


def test_checkout_summary_free_shipping_above_threshold(make_product):
    ledger = Ledger()
    ledger.add_to_cart(make_product("p1", 100.01))

    summary = checkout_summary(ledger.cart)

    assert summary.shipping == 0.0
    assert summary.total == 100.01


def test_checkout_summary_threshold_is_exclusive(make_product):
    ledger = Ledger()
    ledger.add_to_cart(make_product("p1", 100.0))
    assert checkout_summary(ledger.cart).shipping == 10.0


def test_checkout_summary_empty_cart():
    summary = checkout_summary(())
    assert summary.subtotal == 0
    assert summary.shipping == 0
    assert summary.total == 0


def test_displayed_products_switches_between_catalog_and_wishlist(make_product):
    catalog = CatalogState(items=(make_product("p1"), make_product("p2")))
    ledger = Ledger()
    ledger.add_to_wishlist(make_product("w1"))

    assert [p.id for p in displayed_products(catalog, ledger.state)] == ["p1", "p2"]
    assert [p.id for p in displayed_products(catalog, ledger.state, ViewMode.WISHLIST)] == ["w1"]
    assert [p.id for p in displayed_products(catalog, ledger.state, "wishlist")] == ["w1"]


def test_build_order_request_from_cart(make_product):
    ledger = Ledger()
    ledger.add_to_cart(make_product("p1", 60.0))
    ledger.add_to_cart(make_product("p2", 25.0), 2)
    address = ShippingAddress(
        name="Ada", street="1 Main", city="Springfield", state="IL", postal_code="62701"
    )

    request = build_order_request(ledger.cart, address)

    assert [(i.product_id, i.quantity) for i in request.items] == [("p1", 1), ("p2", 2)]
    assert request.items[0].image == "/img/p1-1.jpg"
    assert request.subtotal == 110.0
    assert request.shipping == 0.0
    assert request.total == 110.0


def test_build_order_request_rejects_empty_cart():
    address = ShippingAddress(
        name="Ada", street="1 Main", city="Springfield", state="IL", postal_code="62701"
    )
    with pytest.raises(ValueError):
        build_order_request((), address)
