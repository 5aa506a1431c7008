"""Tests for the template registry and the text renderer."""

import pytest
from simplestore.cart.cart import Cart
from simplestore.catalog.product import Product
from simplestore.order.order import Order, PayType
from simplestore.order.placement import PlacedOrder
from simplestore.payment.port import PaymentResolution
from simplestore.payment.resolver import CONTACT_INSTRUCTIONS
from simplestore.rendering.contexts import AddToCartContext, IndexContext, OrdersContext
from simplestore.rendering.port import RenderError
from simplestore.rendering.renderer import TextRenderer
from simplestore.rendering.templates import TEMPLATE_REGISTRY, get_template


@pytest.fixture()
def renderer():
    return TextRenderer()


def _placed_order(product):
    cart = Cart.create(user_id="alice")
    cart.add_product(product)
    return Order.place(user_id="alice", order_id=1, cart=cart)


class TestRegistry:
    def test_every_store_template_is_registered(self):
        assert set(TEMPLATE_REGISTRY) == {"index", "product", "addtocart", "cart", "orderplaced", "orders", "order"}

    def test_unknown_template(self):
        with pytest.raises(ValueError):
            get_template("nope")


class TestRenderer:
    def test_index_lists_products(self, renderer, catalog):
        data = renderer.render("index", IndexContext(products=catalog.products))
        assert isinstance(data, bytes)
        assert b"[A1] Sticker pack - $9.99" in data
        assert b"operator" not in data

    def test_index_flags_operator(self, renderer, catalog):
        data = renderer.render("index", IndexContext(products=catalog.products, is_admin=True))
        assert b"You are the operator of this store." in data

    def test_product_page(self, renderer):
        product = Product(sku="A1", title="Sticker pack", price=9.99, description="Ten stickers")
        data = renderer.render("product", product).decode()
        assert "SKU: A1" in data
        assert "Ten stickers" in data
        assert "addtocart/A1" in data

    def test_empty_cart(self, renderer):
        assert b"Your cart is empty" in renderer.render("cart", Cart.create(user_id="alice"))

    def test_add_to_cart(self, renderer, sticker_pack):
        cart = Cart.create(user_id="alice")
        cart.add_product(sticker_pack)
        data = renderer.render("addtocart", AddToCartContext(product=sticker_pack, cart=cart)).decode()
        assert data.startswith("Added Sticker pack to your cart")
        assert "1 x [A1] Sticker pack - $9.99" in data

    def test_order_placed_shows_payment(self, renderer, sticker_pack):
        order = _placed_order(sticker_pack)
        payment = PaymentResolution(
            pay_type=PayType.LN, invoice="lnfake123", instructions="LN Invoice for payment: lnfake123"
        )
        order.record_payment(payment.pay_type, payment.invoice)
        data = renderer.render("orderplaced", PlacedOrder(order=order, payment=payment, message="")).decode()
        assert "Order #1 - placed" in data
        assert data.endswith("\nLN Invoice for payment: lnfake123\n")

    def test_order_placed_shows_contact_note_for_manual_payment(self, renderer, sticker_pack):
        payment = PaymentResolution(instructions=CONTACT_INSTRUCTIONS)
        placed = PlacedOrder(order=_placed_order(sticker_pack), payment=payment, message="")
        assert CONTACT_INSTRUCTIONS in renderer.render("orderplaced", placed).decode()

    def test_order_placed_without_payment_instructions(self, renderer, sticker_pack):
        placed = PlacedOrder(order=_placed_order(sticker_pack), payment=PaymentResolution(), message="")
        data = renderer.render("orderplaced", placed).decode()
        assert data.endswith("Total: $9.99\n")
        assert CONTACT_INSTRUCTIONS not in data

    def test_stored_order_without_payment_has_no_contact_note(self, renderer, sticker_pack):
        data = renderer.render("order", _placed_order(sticker_pack)).decode()
        assert data.endswith("Total: $9.99\n")
        assert CONTACT_INSTRUCTIONS not in data

    def test_no_orders(self, renderer):
        assert renderer.render("orders", OrdersContext()) == b"You have not placed any orders\n"

    def test_unknown_template_is_a_render_error(self, renderer):
        with pytest.raises(RenderError, match="unable to execute missing template"):
            renderer.render("missing", None)

    def test_bad_context_is_a_render_error(self, renderer):
        with pytest.raises(RenderError, match="unable to execute index template"):
            renderer.render("index", object())
