"""Template renderer port (abstract interface).

Lets the store hand a named template and a context object to whatever
presentation layer is plugged in, without knowing how documents look.
"""

from abc import ABC, abstractmethod

INDEX_TEMPLATE = "index"
PRODUCT_TEMPLATE = "product"
ADD_TO_CART_TEMPLATE = "addtocart"
CART_TEMPLATE = "cart"
ORDER_PLACED_TEMPLATE = "orderplaced"
ORDERS_TEMPLATE = "orders"
ORDER_TEMPLATE = "order"


class RenderError(Exception):
    """A template could not be executed."""


class TemplateRenderer(ABC):
    @abstractmethod
    def render(self, name: str, context) -> bytes:
        """Render template ``name`` against ``context``. Raises RenderError on failure."""
        ...
