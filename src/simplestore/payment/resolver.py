"""Payment resolution for newly placed orders.

The resolver walks a fixed priority of checks and returns a
PaymentResolution; it never raises. Missing configuration and provider
failures are logged and leave the order without payment instructions, but
the order itself is still placed.
"""

import math

import structlog

from simplestore.order.order import Order, PayType
from simplestore.payment.port import (
    AddressProvider,
    ExchangeRateProvider,
    InvoiceProvider,
    PaymentResolution,
)
from simplestore.shared.money import MATOMS_PER_ATOM

logger = structlog.get_logger(__name__)

CONTACT_INSTRUCTIONS = "You will be contacted with payment details shortly"


class PaymentResolver:
    def __init__(
        self,
        pay_type: PayType = PayType.NONE,
        account: str = "default",
        exchange_rates: ExchangeRateProvider | None = None,
        addresses: AddressProvider | None = None,
        invoices: InvoiceProvider | None = None,
    ) -> None:
        self.pay_type = pay_type
        self.account = account
        self.exchange_rates = exchange_rates
        self.addresses = addresses
        self.invoices = invoices

    def current_rate(self) -> float | None:
        """Fetch the exchange rate, or None when no provider is configured.

        A failing provider, or one returning NaN or infinity, is reported as
        a zero rate so the order is placed without payment instructions.
        """
        if self.exchange_rates is None:
            return None
        try:
            rate = float(self.exchange_rates.current_rate())
        except Exception as exc:
            logger.error("Unable to fetch exchange rate", error=str(exc))
            return 0.0

        if not math.isfinite(rate):
            logger.warning("Exchange rate is not a finite number", exchange_rate=str(rate))
            return 0.0
        return rate

    def resolve(self, order: Order) -> PaymentResolution:
        """Decide how ``order`` will be paid, using its recorded exchange rate."""
        log = logger.bind(user_id=str(order.user_id), order_id=order.order_id)
        total_atoms = order.total_atoms()

        if self.exchange_rates is None:
            log.warning("No exchange rate provider configured")
            return PaymentResolution()

        rate = order.exchange_rate
        if not rate or not math.isfinite(rate) or rate <= 0:
            log.warning("Invalid exchange rate to charge user", exchange_rate=order.exchange_rate)
            return PaymentResolution()

        if total_atoms == 0:
            log.warning("Order has zero settlement amount")
            return PaymentResolution()

        if self.pay_type == PayType.ONCHAIN:
            return self._resolve_onchain(order, log)

        if self.pay_type == PayType.LN:
            return self._resolve_ln(order, total_atoms, log)

        return PaymentResolution(instructions=CONTACT_INSTRUCTIONS)

    def _resolve_onchain(self, order: Order, log) -> PaymentResolution:
        if self.addresses is None:
            log.warning("Unable to generate on-chain address: no address provider configured")
            return PaymentResolution()

        try:
            address = self.addresses.onchain_receive_address(str(order.user_id), self.account)
        except Exception as exc:
            log.error("Unable to generate on-chain address for user", error=str(exc))
            return PaymentResolution()

        return PaymentResolution(
            pay_type=PayType.ONCHAIN,
            invoice=address,
            instructions=f"On-chain Payment Address: {address}",
        )

    def _resolve_ln(self, order: Order, total_atoms: int, log) -> PaymentResolution:
        if self.invoices is None:
            log.warning("Unable to generate LN invoice: LN not set up")
            return PaymentResolution()

        try:
            invoice = self.invoices.get_invoice(total_atoms * MATOMS_PER_ATOM, None)
        except Exception as exc:
            log.warning("Unable to generate LN invoice for user", error=str(exc))
            return PaymentResolution()

        return PaymentResolution(
            pay_type=PayType.LN,
            invoice=invoice,
            instructions=f"LN Invoice for payment: {invoice}",
        )
