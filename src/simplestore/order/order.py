"""Order aggregate — an immutable snapshot of a cart plus payment metadata.

Orders are numbered per user (1, 2, 3...) and written exactly once, at
placement. Later status changes belong to fulfillment tooling outside the
store.
"""

from datetime import UTC, datetime
from enum import Enum

from protean.exceptions import ValidationError
from protean.fields import DateTime, Float, HasMany, Identifier, Integer, String, Text, ValueObject

from simplestore.catalog.product import Product
from simplestore.domain import simplestore
from simplestore.order.events import OrderPlaced
from simplestore.shared.money import settlement_atoms, to_cents
from simplestore.shared.timestamps import parse_timestamp


# ---------------------------------------------------------------------------
# Enums
# ---------------------------------------------------------------------------
class OrderStatus(Enum):
    PLACED = "placed"
    # Reserved for fulfillment workflows; never produced by the store itself.
    SHIPPED = "shipped"
    COMPLETED = "completed"
    CANCELED = "canceled"


class PayType(Enum):
    NONE = "none"
    ONCHAIN = "onchain"
    LN = "ln"


# ---------------------------------------------------------------------------
# Entities
# ---------------------------------------------------------------------------
@simplestore.entity(part_of="Order")
class OrderItem:
    """A cart line frozen at placement time: product as it was sold, and quantity."""

    product = ValueObject(Product, required=True)
    quantity = Integer(required=True, min_value=1)

    def subtotal_cents(self) -> int:
        return self.quantity * to_cents(self.product.price)


# ---------------------------------------------------------------------------
# Aggregate Root
# ---------------------------------------------------------------------------
@simplestore.aggregate
class Order:
    user_id = Identifier(required=True)
    order_id = Integer(required=True, min_value=1)
    items = HasMany(OrderItem)
    cart_updated_at = DateTime()
    status = String(choices=OrderStatus, default=OrderStatus.PLACED.value)
    placed_at = DateTime()
    ship_charge = Float(default=0.0, min_value=0.0)
    exchange_rate = Float()
    pay_type = String(choices=PayType, default=PayType.NONE.value)
    invoice = Text()

    # -------------------------------------------------------------------
    # Factory method
    # -------------------------------------------------------------------
    @classmethod
    def place(cls, user_id, order_id, cart, ship_charge=0.0):
        """Create a placed order from a non-empty cart.

        The cart's items are copied; later changes to the cart (or the
        catalog) never affect the order.
        """
        if cart.is_empty():
            raise ValidationError({"cart": ["Cannot place an order for an empty cart"]})

        order = cls(
            user_id=str(user_id),
            order_id=order_id,
            cart_updated_at=cart.updated_at,
            status=OrderStatus.PLACED.value,
            placed_at=datetime.now(UTC),
            ship_charge=ship_charge,
        )
        for item in cart.items:
            order.add_items(OrderItem(product=item.product, quantity=item.quantity))

        order.raise_(
            OrderPlaced(
                user_id=str(order.user_id),
                order_id=order.order_id,
                item_count=len(order.items),
                total_cents=order.total_cents(),
                placed_at=order.placed_at,
            )
        )
        return order

    # -------------------------------------------------------------------
    # Totals
    # -------------------------------------------------------------------
    def item_total_cents(self) -> int:
        return sum(item.subtotal_cents() for item in self.items)

    def ship_charge_cents(self) -> int:
        return to_cents(self.ship_charge or 0.0)

    def charges_shipping(self) -> bool:
        return self.ship_charge_cents() > 0 and self.item_total_cents() > 0

    def total_cents(self) -> int:
        """Grand total: items plus shipping, when both are positive."""
        total = self.item_total_cents()
        if self.charges_shipping():
            total += self.ship_charge_cents()
        return total

    def total_atoms(self) -> int:
        """Grand total converted at the recorded exchange rate (0 without a usable rate)."""
        return settlement_atoms(self.total_cents(), self.exchange_rate)

    # -------------------------------------------------------------------
    # Payment
    # -------------------------------------------------------------------
    def record_payment(self, pay_type: PayType, invoice: str | None) -> None:
        """Attach the resolved payment channel before the order is persisted."""
        self.pay_type = pay_type.value
        self.invoice = invoice

    # -------------------------------------------------------------------
    # Serialization
    # -------------------------------------------------------------------
    def to_document(self) -> dict:
        return {
            "user_id": str(self.user_id),
            "order_id": self.order_id,
            "cart": {
                "items": [
                    {"product": item.product.to_document(), "quantity": item.quantity}
                    for item in self.items
                ],
                "updated_at": self.cart_updated_at.isoformat() if self.cart_updated_at else None,
            },
            "status": self.status,
            "placed_at": self.placed_at.isoformat() if self.placed_at else None,
            "ship_charge": self.ship_charge,
            "exchange_rate": self.exchange_rate,
            "pay_type": self.pay_type,
            "invoice": self.invoice,
        }

    @classmethod
    def from_document(cls, data: dict) -> "Order":
        cart = data.get("cart") or {}
        order = cls(
            user_id=data["user_id"],
            order_id=int(data["order_id"]),
            cart_updated_at=parse_timestamp(cart.get("updated_at")),
            status=data.get("status") or OrderStatus.PLACED.value,
            placed_at=parse_timestamp(data.get("placed_at")),
            ship_charge=float(data.get("ship_charge") or 0.0),
            exchange_rate=data.get("exchange_rate"),
            pay_type=data.get("pay_type") or PayType.NONE.value,
            invoice=data.get("invoice"),
        )
        for item in cart.get("items") or []:
            order.add_items(
                OrderItem(
                    product=Product.from_document(item["product"]),
                    quantity=int(item["quantity"]),
                )
            )
        return order
