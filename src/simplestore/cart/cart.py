"""Cart aggregate — the pending selection of products for one user.

A user has at most one cart. It is created by the first add-to-cart,
grows with each subsequent add and is removed once an order is placed.
"""

from datetime import UTC, datetime

from protean.fields import DateTime, HasMany, Identifier, Integer, ValueObject

from simplestore.cart.events import CartItemAdded
from simplestore.catalog.product import Product
from simplestore.domain import simplestore
from simplestore.shared.money import to_cents
from simplestore.shared.timestamps import parse_timestamp


@simplestore.entity(part_of="Cart")
class CartItem:
    product = ValueObject(Product, required=True)
    quantity = Integer(required=True, min_value=1)

    def subtotal_cents(self) -> int:
        return self.quantity * to_cents(self.product.price)


@simplestore.aggregate
class Cart:
    user_id = Identifier(required=True)
    items = HasMany(CartItem)
    updated_at = DateTime()

    # -------------------------------------------------------------------
    # Factory
    # -------------------------------------------------------------------
    @classmethod
    def create(cls, user_id):
        return cls(user_id=user_id)

    # -------------------------------------------------------------------
    # Item management
    # -------------------------------------------------------------------
    def add_product(self, product: Product) -> CartItem:
        """Add one unit of ``product``, bumping the quantity if it is already in the cart."""
        existing = next((i for i in self.items if i.product.sku == product.sku), None)

        if existing:
            existing.quantity += 1
            item = existing
        else:
            item = CartItem(product=product, quantity=1)
            self.add_items(item)

        self.updated_at = datetime.now(UTC)

        self.raise_(
            CartItemAdded(
                user_id=str(self.user_id),
                sku=product.sku,
                quantity=item.quantity,
            )
        )
        return item

    def is_empty(self) -> bool:
        return not self.items

    def total_cents(self) -> int:
        return sum(item.subtotal_cents() for item in self.items)

    # -------------------------------------------------------------------
    # Serialization
    # -------------------------------------------------------------------
    def to_document(self) -> dict:
        return {
            "user_id": str(self.user_id),
            "items": [
                {"product": item.product.to_document(), "quantity": item.quantity}
                for item in self.items
            ],
            "updated_at": self.updated_at.isoformat() if self.updated_at else None,
        }

    @classmethod
    def from_document(cls, data: dict) -> "Cart":
        cart = cls(
            user_id=data["user_id"],
            updated_at=parse_timestamp(data.get("updated_at")),
        )
        for item in data.get("items") or []:
            cart.add_items(
                CartItem(
                    product=Product.from_document(item["product"]),
                    quantity=int(item["quantity"]),
                )
            )
        return cart
