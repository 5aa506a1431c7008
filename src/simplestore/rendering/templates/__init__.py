"""Template registry — maps template names to template classes.

Each template renders a context object to text.
"""

from simplestore.rendering.port import (
    ADD_TO_CART_TEMPLATE,
    CART_TEMPLATE,
    INDEX_TEMPLATE,
    ORDER_PLACED_TEMPLATE,
    ORDER_TEMPLATE,
    ORDERS_TEMPLATE,
    PRODUCT_TEMPLATE,
)
from simplestore.rendering.templates.cart import AddToCartTemplate, CartTemplate
from simplestore.rendering.templates.catalog import IndexTemplate, ProductTemplate
from simplestore.rendering.templates.orders import OrderPlacedTemplate, OrdersTemplate, OrderTemplate

TEMPLATE_REGISTRY: dict[str, type] = {
    INDEX_TEMPLATE: IndexTemplate,
    PRODUCT_TEMPLATE: ProductTemplate,
    ADD_TO_CART_TEMPLATE: AddToCartTemplate,
    CART_TEMPLATE: CartTemplate,
    ORDER_PLACED_TEMPLATE: OrderPlacedTemplate,
    ORDERS_TEMPLATE: OrdersTemplate,
    ORDER_TEMPLATE: OrderTemplate,
}


def get_template(name: str):
    """Look up a template class by name."""
    template_cls = TEMPLATE_REGISTRY.get(name)
    if template_cls is None:
        raise ValueError(f"No template registered with name: {name}")
    return template_cls
