import pytest
from protean.integrations.pytest import DomainFixture
from simplestore.catalog.product import Catalog, Product
from simplestore.config import StoreConfig
from simplestore.payment.fake_adapter import FakeAddressProvider, FakeInvoiceProvider, FixedExchangeRate
from simplestore.resource import FetchRequest
from simplestore.store import Store


@pytest.fixture(scope="session")
def simplestore_bed():
    from simplestore.domain import simplestore

    bed = DomainFixture(simplestore)
    bed.setup()
    yield bed
    bed.teardown()


@pytest.fixture(autouse=True)
def _ctx(simplestore_bed):
    with simplestore_bed.domain_context():
        yield


# ---------------------------------------------------------------------------
# Catalog and configuration
# ---------------------------------------------------------------------------
@pytest.fixture()
def sticker_pack():
    return Product(sku="A1", title="Sticker pack", price=9.99)


@pytest.fixture()
def mug():
    return Product(sku="B2", title="Mug", price=12.5)


@pytest.fixture()
def booklet():
    return Product(sku="FREE", title="Catalog booklet", price=0.0)


@pytest.fixture()
def catalog(sticker_pack, mug, booklet):
    return Catalog([sticker_pack, mug, booklet])


@pytest.fixture()
def store_root(tmp_path):
    return tmp_path / "store"


@pytest.fixture()
def make_config(store_root):
    def _make(**overrides):
        return StoreConfig(root=store_root, **overrides)

    return _make


# ---------------------------------------------------------------------------
# Payment providers
# ---------------------------------------------------------------------------
@pytest.fixture()
def address_provider():
    return FakeAddressProvider()


@pytest.fixture()
def invoice_provider():
    return FakeInvoiceProvider()


# ---------------------------------------------------------------------------
# Store
# ---------------------------------------------------------------------------
@pytest.fixture()
def make_store(catalog, make_config, address_provider, invoice_provider):
    def _make(exchange_rate=None, order_placed=None, documents=None, renderer=None, **config):
        return Store(
            config=make_config(**config),
            catalog=catalog,
            documents=documents,
            renderer=renderer,
            exchange_rates=FixedExchangeRate(exchange_rate) if exchange_rate is not None else None,
            addresses=address_provider,
            invoices=invoice_provider,
            order_placed=order_placed,
        )

    return _make


@pytest.fixture()
def store(make_store):
    return make_store()


def fetch(store, user_id, *path):
    return store.fetch(user_id, FetchRequest(path=path))


@pytest.fixture()
def fetch_as():
    return fetch
