"""Cart templates."""

from simplestore.shared.money import format_cents


def _cart_lines(cart) -> list[str]:
    if cart.is_empty():
        return ["Your cart is empty"]

    lines = []
    for item in cart.items:
        lines.append(
            f"  {item.quantity} x [{item.product.sku}] {item.product.title} - {format_cents(item.subtotal_cents())}"
        )
    lines.append(f"Total: {format_cents(cart.total_cents())}")
    return lines


class CartTemplate:
    @staticmethod
    def render(cart) -> str:
        return "\n".join(["Cart", "", *_cart_lines(cart), "", "Place order: placeorder"]) + "\n"


class AddToCartTemplate:
    @staticmethod
    def render(context) -> str:
        header = f"Added {context.product.title} to your cart"
        return "\n".join([header, "", *_cart_lines(context.cart), "", "Place order: placeorder"]) + "\n"
