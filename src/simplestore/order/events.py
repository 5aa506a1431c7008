"""Domain events for the Order aggregate."""

from protean.fields import DateTime, Identifier, Integer

from simplestore.domain import simplestore


@simplestore.event(part_of="Order")
class OrderPlaced:
    """A cart was converted into a placed order."""

    __version__ = 1

    user_id = Identifier(required=True)
    order_id = Integer(required=True)
    item_count = Integer(required=True)
    total_cents = Integer(required=True)
    placed_at = DateTime(required=True)
