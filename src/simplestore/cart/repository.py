"""Cart persistence — one document per user under ``carts/``."""

from protean.exceptions import ObjectNotFoundError

from simplestore.cart.cart import Cart
from simplestore.persistence.port import DocumentStore, key_segment

CARTS_PREFIX = "carts"


class CartRepository:
    def __init__(self, store: DocumentStore) -> None:
        self.store = store

    @staticmethod
    def key_for(user_id) -> str:
        return f"{CARTS_PREFIX}/{key_segment(user_id)}"

    def get(self, user_id) -> Cart:
        """Return the user's cart; a user without one gets a fresh empty cart."""
        try:
            document = self.store.get(self.key_for(user_id))
        except ObjectNotFoundError:
            return Cart.create(user_id=str(user_id))
        return Cart.from_document(document)

    def add(self, cart: Cart) -> None:
        self.store.put(self.key_for(cart.user_id), cart.to_document())

    def remove(self, user_id) -> None:
        self.store.delete(self.key_for(user_id))
