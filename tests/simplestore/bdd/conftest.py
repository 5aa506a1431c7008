"""Shared BDD fixtures and step definitions for store scenarios."""

import pytest
from pytest_bdd import given, parsers
from simplestore.catalog.product import Catalog, Product
from simplestore.config import StoreConfig
from simplestore.order.order import PayType
from simplestore.payment.fake_adapter import FakeAddressProvider, FixedExchangeRate
from simplestore.resource import FetchRequest
from simplestore.store import Store


@pytest.fixture()
def world(tmp_path):
    """Mutable scenario state; the store is built lazily on first use."""
    return {
        "root": tmp_path / "store",
        "products": [],
        "config": {},
        "exchange_rate": None,
        "addresses": FakeAddressProvider(),
        "store": None,
        "reply": None,
    }


def get_store(world) -> Store:
    if world["store"] is None:
        world["store"] = Store(
            config=StoreConfig(root=world["root"], **world["config"]),
            catalog=Catalog(world["products"]),
            exchange_rates=FixedExchangeRate(world["exchange_rate"]) if world["exchange_rate"] is not None else None,
            addresses=world["addresses"],
        )
    return world["store"]


def fetch(world, user_id, *path):
    world["reply"] = get_store(world).fetch(user_id, FetchRequest(path=path))
    return world["reply"]


@pytest.fixture()
def store_of(world):
    return lambda: get_store(world)


@pytest.fixture()
def fetch_in(world):
    return lambda user_id, *path: fetch(world, user_id, *path)


# ---------------------------------------------------------------------------
# Given steps
# ---------------------------------------------------------------------------
@given(parsers.cfparse('a store selling "{sku}" "{title}" at {price:f}'))
def _(world, sku, title, price):
    world["products"].append(Product(sku=sku, title=title, price=price))


@given(parsers.cfparse("the store takes on-chain payments at an exchange rate of {rate:f}"))
def _(world, rate):
    world["config"]["pay_type"] = PayType.ONCHAIN
    world["exchange_rate"] = rate


@given(parsers.cfparse("the store charges {amount:f} for shipping"))
def _(world, amount):
    world["config"]["ship_charge"] = amount


@given("the wallet is unavailable")
def _(world):
    world["addresses"].configure(should_succeed=False)
