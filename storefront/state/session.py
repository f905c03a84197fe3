"""Shopping session: the owner of catalog and ledger state"""

import logging
import uuid
from datetime import datetime, timezone
from dataclasses import dataclass, field
from typing import Optional

from ..core.config import Settings, get_settings
from ..models.cart import CheckoutSummary
from ..models.order import Order, ShippingAddress
from ..services.api_client import StorefrontAPIClient
from .catalog import CatalogEngine
from .ledger import Ledger
from .selectors import build_order_request, checkout_summary

logger = logging.getLogger(__name__)


@dataclass
class StorefrontSession:
    """
    One shopper's session.

    Passed by reference to the view layer; holds no global state and has no
    teardown beyond closing its API client.
    """
    client: StorefrontAPIClient
    catalog: CatalogEngine
    ledger: Ledger
    settings: Settings
    session_id: str = field(default_factory=lambda: str(uuid.uuid4()))
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @classmethod
    def create(
        cls,
        settings: Optional[Settings] = None,
        client: Optional[StorefrontAPIClient] = None,
    ) -> "StorefrontSession":
        """Build a session with empty catalog and ledger state"""
        settings = settings or get_settings()
        if client is None:
            client = StorefrontAPIClient(
                base_url=settings.api_base_url,
                auth_token=settings.auth_token,
                timeout=settings.request_timeout,
            )
        catalog = CatalogEngine(
            client,
            page_size=settings.page_size,
            default_max_price=settings.default_max_price,
            discard_stale_responses=settings.discard_stale_responses,
        )
        session = cls(client=client, catalog=catalog, ledger=Ledger(), settings=settings)
        logger.info(f"Session {session.session_id} created against {client.base_url}")
        return session

    def checkout_summary(self) -> CheckoutSummary:
        return checkout_summary(
            self.ledger.cart,
            free_shipping_threshold=self.settings.free_shipping_threshold,
            shipping_fee=self.settings.shipping_fee,
            currency=self.settings.currency,
        )

    async def place_order(self, shipping_address: ShippingAddress) -> Order:
        """
        Submit the cart as an order and remove the ordered lines once the
        API accepts it. Lines added while the request was in flight stay.

        Errors from the order API propagate to the caller with the cart
        left intact.
        """
        request = build_order_request(
            self.ledger.cart,
            shipping_address,
            free_shipping_threshold=self.settings.free_shipping_threshold,
            shipping_fee=self.settings.shipping_fee,
        )
        order = await self.client.place_order(request)
        logger.info(f"Order {order.short_id} placed for {request.total:.2f}")
        for item in request.items:
            self.ledger.remove_from_cart(item.product_id)
        return order

    async def order_history(self) -> list[Order]:
        """Orders previously placed by the signed-in shopper"""
        return await self.client.get_my_orders()

    async def close(self) -> None:
        await self.client.close()
