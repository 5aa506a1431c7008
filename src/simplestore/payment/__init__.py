"""Payment resolution — ports, resolver and fake adapters."""

from simplestore.payment.fake_adapter import FakeAddressProvider, FakeInvoiceProvider, FixedExchangeRate
from simplestore.payment.port import (
    AddressProvider,
    ExchangeRateProvider,
    InvoiceProvider,
    PaymentResolution,
)
from simplestore.payment.resolver import CONTACT_INSTRUCTIONS, PaymentResolver

__all__ = [
    "CONTACT_INSTRUCTIONS",
    "AddressProvider",
    "ExchangeRateProvider",
    "FakeAddressProvider",
    "FakeInvoiceProvider",
    "FixedExchangeRate",
    "InvoiceProvider",
    "PaymentResolution",
    "PaymentResolver",
]
