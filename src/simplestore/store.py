"""Store — the context object behind every resource a peer can fetch.

A Store owns its catalog, configuration, document storage, renderer and
payment providers, plus a single lock. Every handler that touches shared
state holds the lock for its whole duration, so cart updates and order
placements of all users are strictly serialized.

Routing on the first path segment:

    index                 catalog listing
    product/<sku>         product page
    cart                  current cart
    addtocart/<sku>       add one unit to the cart
    placeorder            turn the cart into an order
    orders                order history
    order/<id>            a single order

Anything else is answered with a NOT_FOUND reply.

The simplestore domain must be initialized (``simplestore.init()``) before a
Store serves requests.
"""

import threading

import structlog
from protean.exceptions import ObjectNotFoundError, ValidationError

from simplestore.cart.repository import CartRepository
from simplestore.catalog.product import Catalog
from simplestore.config import StoreConfig
from simplestore.domain import simplestore
from simplestore.order.placement import OrderPlacedCallback, OrderPlacement
from simplestore.order.repository import OrderRepository
from simplestore.payment.port import AddressProvider, ExchangeRateProvider, InvoiceProvider
from simplestore.payment.resolver import PaymentResolver
from simplestore.persistence.file_store import FileDocumentStore
from simplestore.persistence.patterns import parse_sequence_id
from simplestore.persistence.port import DocumentStore
from simplestore.rendering.contexts import AddToCartContext, IndexContext, OrdersContext
from simplestore.rendering.port import (
    ADD_TO_CART_TEMPLATE,
    CART_TEMPLATE,
    INDEX_TEMPLATE,
    ORDER_PLACED_TEMPLATE,
    ORDER_TEMPLATE,
    ORDERS_TEMPLATE,
    PRODUCT_TEMPLATE,
    TemplateRenderer,
)
from simplestore.rendering.renderer import TextRenderer
from simplestore.resource import FetchReply, FetchRequest, ResourceStatus
from simplestore.utils.logging import log_context

logger = structlog.get_logger(__name__)

NO_ITEMS_REPLY = b"No items in order"


class Store:
    def __init__(
        self,
        config: StoreConfig,
        catalog: Catalog,
        documents: DocumentStore | None = None,
        renderer: TemplateRenderer | None = None,
        exchange_rates: ExchangeRateProvider | None = None,
        addresses: AddressProvider | None = None,
        invoices: InvoiceProvider | None = None,
        order_placed: OrderPlacedCallback | None = None,
    ) -> None:
        self.config = config
        self.catalog = catalog
        self.documents = documents if documents is not None else FileDocumentStore(config.root)
        self.renderer = renderer if renderer is not None else TextRenderer()
        self.carts = CartRepository(self.documents)
        self.orders = OrderRepository(self.documents)
        self.resolver = PaymentResolver(
            pay_type=config.pay_type,
            account=config.account,
            exchange_rates=exchange_rates,
            addresses=addresses,
            invoices=invoices,
        )
        self.placement = OrderPlacement(
            config=config,
            carts=self.carts,
            orders=self.orders,
            resolver=self.resolver,
            order_placed=order_placed,
        )
        self._lock = threading.Lock()

        self._handlers = {
            "index": self.handle_index,
            "product": self.handle_product,
            "cart": self.handle_cart,
            "addtocart": self.handle_add_to_cart,
            "placeorder": self.handle_place_order,
            "orders": self.handle_orders,
            "order": self.handle_order,
        }
        # Handlers that address one item and need a second path segment.
        self._needs_target = {"product", "addtocart", "order"}

    # -------------------------------------------------------------------
    # Routing
    # -------------------------------------------------------------------
    def fetch(self, user_id, request: FetchRequest) -> FetchReply:
        """Dispatch ``request`` to its handler and return the reply.

        Handler errors propagate to the caller; no reply is produced for them.
        """
        resource = request.segment(0)
        handler = self._handlers.get(resource)
        if handler is None or (resource in self._needs_target and request.segment(1) is None):
            handler = self.handle_not_found

        with simplestore.domain_context(), log_context(user_id=str(user_id), resource="/".join(request.path)):
            return handler(user_id, request)

    def handle_not_found(self, user_id, request: FetchRequest) -> FetchReply:
        logger.debug("Resource not found", path=list(request.path))
        return FetchReply(status=ResourceStatus.NOT_FOUND)

    def _reply(self, template: str, context) -> FetchReply:
        return FetchReply(data=self.renderer.render(template, context), status=ResourceStatus.OK)

    # -------------------------------------------------------------------
    # Catalog
    # -------------------------------------------------------------------
    def handle_index(self, user_id, request: FetchRequest) -> FetchReply:
        with self._lock:
            context = IndexContext(
                products=self.catalog.products,
                is_admin=bool(self.config.operator_id) and str(user_id) == self.config.operator_id,
            )
            return self._reply(INDEX_TEMPLATE, context)

    def handle_product(self, user_id, request: FetchRequest) -> FetchReply:
        with self._lock:
            product = self.catalog.get(request.segment(1))

        if product is None:
            return self.handle_not_found(user_id, request)
        return self._reply(PRODUCT_TEMPLATE, product)

    def reload_products(self, catalog: Catalog) -> None:
        """Swap in a freshly loaded catalog. Carts keep the product copies they already hold."""
        with self._lock:
            self.catalog = catalog
        logger.info("Catalog reloaded", product_count=len(catalog))

    # -------------------------------------------------------------------
    # Cart
    # -------------------------------------------------------------------
    def handle_cart(self, user_id, request: FetchRequest) -> FetchReply:
        with self._lock:
            cart = self.carts.get(user_id)

        return self._reply(CART_TEMPLATE, cart)

    def handle_add_to_cart(self, user_id, request: FetchRequest) -> FetchReply:
        sku = request.segment(1)

        with self._lock:
            product = self.catalog.get(sku)
            if product is None:
                raise ValidationError({"sku": ["product does not exist"]})

            cart = self.carts.get(user_id)
            cart.add_product(product)
            self.carts.add(cart)

            logger.info("Product added to cart", sku=sku, item_count=len(cart.items))
            return self._reply(ADD_TO_CART_TEMPLATE, AddToCartContext(product=product, cart=cart))

    # -------------------------------------------------------------------
    # Orders
    # -------------------------------------------------------------------
    def handle_place_order(self, user_id, request: FetchRequest) -> FetchReply:
        with self._lock:
            placed = self.placement.place(user_id)
            if placed is None:
                return FetchReply(data=NO_ITEMS_REPLY, status=ResourceStatus.OK)

            return self._reply(ORDER_PLACED_TEMPLATE, placed)

    def handle_orders(self, user_id, request: FetchRequest) -> FetchReply:
        with self._lock:
            orders = self.orders.list_for(user_id)
            return self._reply(ORDERS_TEMPLATE, OrdersContext(orders=orders))

    def handle_order(self, user_id, request: FetchRequest) -> FetchReply:
        order_id = parse_sequence_id(request.segment(1))
        if order_id is None:
            return self.handle_not_found(user_id, request)

        with self._lock:
            try:
                order = self.orders.get(user_id, order_id)
            except ObjectNotFoundError:
                return self.handle_not_found(user_id, request)

        return self._reply(ORDER_TEMPLATE, order)
