"""Context objects handed to templates."""

from dataclasses import dataclass, field

from simplestore.cart.cart import Cart
from simplestore.catalog.product import Product
from simplestore.order.order import Order


@dataclass(frozen=True)
class IndexContext:
    products: list[Product]
    is_admin: bool = False


@dataclass(frozen=True)
class AddToCartContext:
    product: Product
    cart: Cart


@dataclass(frozen=True)
class OrdersContext:
    orders: list[Order] = field(default_factory=list)
