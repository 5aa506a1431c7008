"""Order placement — turns a user's cart into a persisted, numbered order.

Callers must hold the store lock for the whole call: order-id allocation
scans existing order documents, and the scan and the write must not
interleave with another placement.
"""

from collections.abc import Callable
from dataclasses import dataclass

import structlog

from simplestore.cart.repository import CartRepository
from simplestore.config import StoreConfig
from simplestore.order.confirmation import compose_confirmation
from simplestore.order.order import Order
from simplestore.order.repository import OrderRepository
from simplestore.payment.port import PaymentResolution
from simplestore.payment.resolver import PaymentResolver

logger = structlog.get_logger(__name__)

OrderPlacedCallback = Callable[[Order, str], None]


@dataclass(frozen=True)
class PlacedOrder:
    """A persisted order together with the payment outcome and buyer message."""

    order: Order
    payment: PaymentResolution
    message: str


class OrderPlacement:
    def __init__(
        self,
        config: StoreConfig,
        carts: CartRepository,
        orders: OrderRepository,
        resolver: PaymentResolver,
        order_placed: OrderPlacedCallback | None = None,
    ) -> None:
        self.config = config
        self.carts = carts
        self.orders = orders
        self.resolver = resolver
        self.order_placed = order_placed

    def place(self, user_id) -> PlacedOrder | None:
        """Place an order for the user's current cart.

        Returns None, without touching any state, when the cart is empty.
        Persistence failures propagate; payment failures only suppress the
        payment instructions.
        """
        cart = self.carts.get(user_id)
        if cart.is_empty():
            return None

        order_id = self.orders.next_id(user_id)
        order = Order.place(
            user_id=user_id,
            order_id=order_id,
            cart=cart,
            ship_charge=self.config.ship_charge,
        )

        rate = self.resolver.current_rate()
        if rate is not None:
            order.exchange_rate = rate

        resolution = self.resolver.resolve(order)
        order.record_payment(resolution.pay_type, resolution.invoice)

        message = compose_confirmation(
            order,
            resolution,
            base_currency=self.config.base_currency,
            settlement_currency=self.config.settlement_currency,
            validity_minutes=self.config.invoice_validity_minutes,
        )
        self._notify(order, message)

        self.orders.add(order)
        self.carts.remove(user_id)

        logger.info(
            "Order placed",
            user_id=str(user_id),
            order_id=order.order_id,
            total_cents=order.total_cents(),
            pay_type=order.pay_type,
        )
        return PlacedOrder(order=order, payment=resolution, message=message)

    def _notify(self, order: Order, message: str) -> None:
        if self.order_placed is None:
            return
        try:
            self.order_placed(order, message)
        except Exception as exc:
            logger.error(
                "Order placed callback failed",
                user_id=str(order.user_id),
                order_id=order.order_id,
                error=str(exc),
            )
