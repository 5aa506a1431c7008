"""Order templates — confirmation, history and single order."""

from simplestore.order.order import PayType
from simplestore.shared.money import format_cents, to_cents


def _order_lines(order) -> list[str]:
    lines = [f"Order #{order.order_id} - {order.status}"]
    if order.placed_at:
        lines.append(f"Placed: {order.placed_at:%Y-%m-%d %H:%M:%S %Z}".rstrip())
    for item in order.items:
        lines.append(
            f"  {item.quantity} x [{item.product.sku}] {item.product.title}"
            f" @ {format_cents(to_cents(item.product.price))} = {format_cents(item.subtotal_cents())}"
        )
    if order.charges_shipping():
        lines.append(f"Shipping: {format_cents(order.ship_charge_cents())}")
    lines.append(f"Total: {format_cents(order.total_cents())}")
    return lines


def _payment_lines(order) -> list[str]:
    if order.pay_type == PayType.ONCHAIN.value:
        return [f"On-chain Payment Address: {order.invoice}"]
    if order.pay_type == PayType.LN.value:
        return [f"LN Invoice for payment: {order.invoice}"]
    return []


class OrderPlacedTemplate:
    @staticmethod
    def render(placed) -> str:
        order = placed.order
        lines = [f"Thank you for placing your order #{order.order_id}", ""]
        lines += _order_lines(order)
        if placed.payment.instructions:
            lines += ["", placed.payment.instructions]
        return "\n".join(lines) + "\n"


class OrderTemplate:
    @staticmethod
    def render(order) -> str:
        return "\n".join([*_order_lines(order), *_payment_lines(order)]) + "\n"


class OrdersTemplate:
    @staticmethod
    def render(context) -> str:
        if not context.orders:
            return "You have not placed any orders\n"

        blocks = []
        for order in context.orders:
            blocks.append("\n".join(_order_lines(order)))
        return "Orders\n\n" + "\n\n".join(blocks) + "\n"
