"""Domain events for the Cart aggregate."""

from protean.fields import Identifier, Integer, String

from simplestore.domain import simplestore


@simplestore.event(part_of="Cart")
class CartItemAdded:
    """A product was added to a user's cart (or its quantity bumped)."""

    __version__ = 1

    user_id = Identifier(required=True)
    sku = String(required=True, max_length=64)
    quantity = Integer(required=True)
