"""Order persistence — ``orders/<user>/order-<id>.json``, one file per order."""

import structlog
from protean.exceptions import ObjectNotFoundError, ValidationError

from simplestore.order.order import Order
from simplestore.persistence.patterns import DecimalFilePattern
from simplestore.persistence.port import DocumentStore, PersistenceError, key_segment

logger = structlog.get_logger(__name__)

ORDERS_PREFIX = "orders"
ORDER_FILENAME = DecimalFilePattern(prefix="order-", suffix=".json")


class OrderRepository:
    def __init__(self, store: DocumentStore) -> None:
        self.store = store

    @staticmethod
    def prefix_for(user_id) -> str:
        return f"{ORDERS_PREFIX}/{key_segment(user_id)}"

    def key_for(self, user_id, order_id: int) -> str:
        return f"{self.prefix_for(user_id)}/{ORDER_FILENAME.filename_for(order_id)}"

    def next_id(self, user_id) -> int:
        """Scan the user's orders and return the next sequence number (1 for a new user)."""
        return ORDER_FILENAME.last(self.store.list(self.prefix_for(user_id))) + 1

    def add(self, order: Order) -> None:
        self.store.put(self.key_for(order.user_id, order.order_id), order.to_document())

    def get(self, user_id, order_id: int) -> Order:
        """Load one order. Raises ObjectNotFoundError when it does not exist."""
        return Order.from_document(self.store.get(self.key_for(user_id, order_id)))

    def list_for(self, user_id) -> list[Order]:
        """Load every readable order of a user, ordered by order id.

        Documents that cannot be read or decoded are skipped with a warning.
        """
        orders = []
        for key in self.store.list(self.prefix_for(user_id)):
            try:
                orders.append(Order.from_document(self.store.get(key)))
            except (
                AttributeError,
                KeyError,
                ObjectNotFoundError,
                PersistenceError,
                TypeError,
                ValidationError,
                ValueError,
            ) as exc:
                logger.warning("Unable to read order", key=key, error=str(exc))
                continue
        return sorted(orders, key=lambda order: order.order_id)
