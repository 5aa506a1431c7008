"""Buyer-facing confirmation text for a placed order."""

from simplestore.order.order import Order
from simplestore.payment.port import PaymentResolution
from simplestore.payment.resolver import CONTACT_INSTRUCTIONS
from simplestore.shared.money import format_atoms, format_cents, to_cents


def compose_confirmation(
    order: Order,
    resolution: PaymentResolution,
    base_currency: str = "USD",
    settlement_currency: str = "DCR",
    validity_minutes: int = 60,
) -> str:
    lines = [
        f"Thank you for placing your order #{order.order_id}",
        "The following were the items in your order:",
    ]
    for item in order.items:
        product = item.product
        lines.append(
            f"  SKU {product.sku} - {product.title} - {item.quantity} units - "
            f"{format_cents(to_cents(product.price))}/item - {format_cents(item.subtotal_cents())}"
        )

    if order.charges_shipping():
        lines.append(f"Total item amount: {format_cents(order.item_total_cents())} {base_currency}")
        lines.append(f"Shipping and handling charge: {format_cents(order.ship_charge_cents())} {base_currency}")
    lines.append(f"Total amount: {format_cents(order.total_cents())} {base_currency}")

    total_atoms = order.total_atoms()
    if total_atoms > 0:
        lines.append(
            f"Using the current exchange rate of {order.exchange_rate:.2f} {base_currency}/{settlement_currency}, "
            f"your order is {format_atoms(total_atoms, settlement_currency)}, "
            f"valid for the next {validity_minutes} minutes"
        )

    if resolution.instructions == CONTACT_INSTRUCTIONS:
        lines.append("")
    if resolution.instructions:
        lines.append(resolution.instructions)

    return "\n".join(lines) + "\n"
