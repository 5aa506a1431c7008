"""Payment provider ports (abstract interfaces).

The store never settles payments itself. It asks these collaborators for
a receiving address, a Lightning invoice or the current exchange rate, and
records whatever they return on the order. Adapters wrap a wallet, an LN
node or a price feed; FakeAddressProvider and friends serve dev and tests.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass

from simplestore.order.order import PayType


@dataclass(frozen=True)
class PaymentResolution:
    """Outcome of resolving how an order will be paid."""

    pay_type: PayType = PayType.NONE
    invoice: str | None = None
    instructions: str | None = None


class AddressProvider(ABC):
    """Generates on-chain receiving addresses."""

    @abstractmethod
    def onchain_receive_address(self, user_id: str, account: str) -> str:
        """Return a fresh address in ``account`` dedicated to ``user_id``."""
        ...


class InvoiceProvider(ABC):
    """Generates Lightning Network invoices."""

    @abstractmethod
    def get_invoice(self, amount_matoms: int, metadata: dict | None = None) -> str:
        """Return an encoded invoice for ``amount_matoms`` milli-atoms."""
        ...


class ExchangeRateProvider(ABC):
    """Supplies the base-currency price of one settlement coin."""

    @abstractmethod
    def current_rate(self) -> float:
        ...
