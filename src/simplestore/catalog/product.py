"""Product value object and the in-memory catalog of a store."""

from protean import invariant
from protean.exceptions import ValidationError
from protean.fields import Float, String, Text

from simplestore.domain import simplestore


@simplestore.value_object
class Product:
    """An item for sale. Immutable once the catalog is loaded."""

    sku = String(required=True, max_length=64)
    title = String(required=True, max_length=255)
    price = Float(required=True, min_value=0.0)
    description = Text()

    @invariant.post
    def sku_must_be_a_single_path_segment(self):
        sku = self.sku or ""
        if not sku.strip():
            raise ValidationError({"sku": ["SKU must not be blank"]})
        if "/" in sku or sku in (".", ".."):
            raise ValidationError({"sku": ["SKU must be usable as a single path segment"]})

    def to_document(self) -> dict:
        return {
            "sku": self.sku,
            "title": self.title,
            "price": self.price,
            "description": self.description,
        }

    @classmethod
    def from_document(cls, data: dict) -> "Product":
        return cls(
            sku=data["sku"],
            title=data["title"],
            price=float(data["price"]),
            description=data.get("description"),
        )


class Catalog:
    """Mapping of SKU to Product, in insertion order."""

    def __init__(self, products=()) -> None:
        self._products: dict[str, Product] = {}
        for product in products:
            if product.sku in self._products:
                raise ValidationError({"sku": [f"Duplicate SKU in catalog: {product.sku}"]})
            self._products[product.sku] = product

    def get(self, sku: str) -> Product | None:
        return self._products.get(sku)

    def __contains__(self, sku) -> bool:
        return sku in self._products

    def __iter__(self):
        return iter(self._products.values())

    def __len__(self) -> int:
        return len(self._products)

    @property
    def products(self) -> list[Product]:
        return list(self._products.values())
