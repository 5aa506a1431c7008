"""Concurrent fetches against one store are serialized by its lock."""

from concurrent.futures import ThreadPoolExecutor

from simplestore.resource import FetchRequest


def test_concurrent_adds_are_not_lost(store):
    with ThreadPoolExecutor(max_workers=8) as pool:
        list(pool.map(lambda _: store.fetch("alice", FetchRequest(path=("addtocart", "A1"))), range(20)))

    cart = store.carts.get("alice")
    assert len(cart.items) == 1
    assert cart.items[0].quantity == 20


def test_concurrent_placements_get_distinct_ids(store, store_root):
    def add_and_place(_):
        store.fetch("alice", FetchRequest(path=("addtocart", "A1")))
        return store.fetch("alice", FetchRequest(path=("placeorder",)))

    with ThreadPoolExecutor(max_workers=6) as pool:
        list(pool.map(add_and_place, range(6)))

    names = sorted(p.name for p in (store_root / "orders" / "alice").iterdir())
    ids = sorted(int(name.removeprefix("order-").removesuffix(".json")) for name in names)
    # Some placements may find the cart already emptied by another thread.
    assert ids == list(range(1, len(ids) + 1))
    assert len(ids) >= 1
