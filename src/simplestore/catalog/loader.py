"""Catalog loading from a TOML file.

Each product is a ``[[products]]`` table::

    [[products]]
    sku = "A1"
    title = "Sticker pack"
    price = 9.99
    description = "Ten assorted stickers."
"""

import os
import tomllib
from pathlib import Path

import structlog
from protean.exceptions import ValidationError

from simplestore.catalog.product import Catalog, Product

logger = structlog.get_logger(__name__)


def load_products(path: str | os.PathLike) -> Catalog:
    """Read a catalog file and return the populated Catalog."""
    path = Path(path)
    with path.open("rb") as f:
        document = tomllib.load(f)

    entries = document.get("products", [])
    if not isinstance(entries, list):
        raise ValidationError({"products": ["Expected an array of [[products]] tables"]})

    products = []
    for entry in entries:
        missing = [name for name in ("sku", "title", "price") if name not in entry]
        if missing:
            raise ValidationError({"products": [f"Product entry is missing {', '.join(missing)}: {entry}"]})
        products.append(Product.from_document(entry))

    catalog = Catalog(products)
    logger.info("Catalog loaded", path=str(path), product_count=len(catalog))
    return catalog
