"""Configurable fake payment providers for development and testing.

They mimic a wallet, an LN node and a price feed without any external
calls, and record every call for test assertions.
"""

from uuid import uuid4

from simplestore.payment.port import AddressProvider, ExchangeRateProvider, InvoiceProvider


class FakeAddressProvider(AddressProvider):
    def __init__(self) -> None:
        self.should_succeed: bool = True
        self.failure_reason: str = "Wallet unavailable"
        self.calls: list[dict] = []

    def configure(self, should_succeed: bool, failure_reason: str = "Wallet unavailable") -> None:
        self.should_succeed = should_succeed
        self.failure_reason = failure_reason

    def onchain_receive_address(self, user_id: str, account: str) -> str:
        self.calls.append({"user_id": user_id, "account": account})
        if not self.should_succeed:
            raise RuntimeError(self.failure_reason)
        return f"TsFake{uuid4().hex[:28]}"


class FakeInvoiceProvider(InvoiceProvider):
    def __init__(self) -> None:
        self.should_succeed: bool = True
        self.failure_reason: str = "LN node unavailable"
        self.calls: list[dict] = []

    def configure(self, should_succeed: bool, failure_reason: str = "LN node unavailable") -> None:
        self.should_succeed = should_succeed
        self.failure_reason = failure_reason

    def get_invoice(self, amount_matoms: int, metadata: dict | None = None) -> str:
        self.calls.append({"amount_matoms": amount_matoms, "metadata": metadata})
        if not self.should_succeed:
            raise RuntimeError(self.failure_reason)
        return f"lnfake{amount_matoms}n1{uuid4().hex}"


class FixedExchangeRate(ExchangeRateProvider):
    """Always reports the same rate (base currency per coin)."""

    def __init__(self, rate: float) -> None:
        self.rate = rate

    def current_rate(self) -> float:
        return self.rate
