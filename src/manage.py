"""SimpleStore operator CLI.

Runs fetches against a local store so the operator can inspect what peers
see, and lists the loaded catalog.

Usage:
    python src/manage.py --products products.toml products
    python src/manage.py --products products.toml fetch --user <id> index
    python src/manage.py --products products.toml fetch --user <id> addtocart A1
"""

import argparse
import os
import sys

import structlog


def build_store(args):
    """Initialize the domain and assemble a Store from the CLI options."""
    from simplestore.catalog.loader import load_products
    from simplestore.config import load_config
    from simplestore.domain import simplestore
    from simplestore.payment.fake_adapter import FixedExchangeRate
    from simplestore.store import Store

    simplestore.init()

    config = load_config(args.config)
    catalog = load_products(args.products)
    exchange_rates = FixedExchangeRate(args.exchange_rate) if args.exchange_rate is not None else None

    def print_confirmation(order, message):
        print(f"--- order #{order.order_id} placed by {order.user_id} ---")
        print(message)

    return Store(
        config=config,
        catalog=catalog,
        exchange_rates=exchange_rates,
        order_placed=print_confirmation,
    )


def fetch(args):
    from simplestore.resource import FetchRequest

    store = build_store(args)
    reply = store.fetch(args.user, FetchRequest(path=tuple(args.path)))
    print(f"Status: {int(reply.status)} {reply.status.name}")
    print()
    sys.stdout.write(reply.data.decode("utf-8", errors="replace"))


def list_products(args):
    store = build_store(args)
    for product in store.catalog:
        print(f"{product.sku}\t{product.price:.2f}\t{product.title}")


def main():
    from simplestore.utils.logging import configure_logging

    parser = argparse.ArgumentParser(description="SimpleStore management")
    parser.add_argument(
        "--config",
        default=os.getenv("SIMPLESTORE_CONFIG", "simplestore.toml"),
        help="Store configuration file (default: $SIMPLESTORE_CONFIG or simplestore.toml)",
    )
    parser.add_argument("--products", default="products.toml", help="Catalog file")
    parser.add_argument("--exchange-rate", type=float, help="Use a fixed exchange rate (base currency per coin)")
    parser.add_argument("--log-dir", help="Also write rotating log files to this directory (default: $LOG_DIR)")
    subparsers = parser.add_subparsers(dest="command", required=True)

    fetch_parser = subparsers.add_parser("fetch", help="Fetch a resource as a given user")
    fetch_parser.add_argument("--user", required=True, help="Requesting user id")
    fetch_parser.add_argument("path", nargs="+", help="Resource path segments, e.g. product A1")

    subparsers.add_parser("products", help="List the catalog")

    args = parser.parse_args()
    configure_logging(args.log_dir)

    try:
        if args.command == "fetch":
            fetch(args)
        elif args.command == "products":
            list_products(args)
        else:
            parser.print_help()
            sys.exit(1)
    except Exception as exc:
        structlog.get_logger(__name__).error("Command failed", command=args.command, error=str(exc))
        sys.exit(1)


if __name__ == "__main__":
    main()
