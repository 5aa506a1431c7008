"""Tests for the Product value object and the Catalog."""

import pytest
from protean.exceptions import IncorrectUsageError, InvalidOperationError, ValidationError
from simplestore.catalog.product import Catalog, Product


class TestProduct:
    def test_product_fields(self):
        product = Product(sku="A1", title="Sticker pack", price=9.99, description="Ten stickers")
        assert product.sku == "A1"
        assert product.title == "Sticker pack"
        assert product.price == 9.99
        assert product.description == "Ten stickers"

    def test_products_with_same_values_are_equal(self):
        assert Product(sku="A1", title="Sticker pack", price=9.99) == Product(
            sku="A1", title="Sticker pack", price=9.99
        )

    def test_negative_price_is_rejected(self):
        with pytest.raises(ValidationError):
            Product(sku="A1", title="Sticker pack", price=-1.0)

    def test_sku_is_required(self):
        with pytest.raises(ValidationError):
            Product(title="Sticker pack", price=1.0)

    @pytest.mark.parametrize("sku", ["a/b", "..", "   "])
    def test_sku_must_be_a_single_path_segment(self, sku):
        with pytest.raises(ValidationError):
            Product(sku=sku, title="Bad", price=1.0)

    def test_product_is_immutable(self, sticker_pack):
        with pytest.raises((IncorrectUsageError, InvalidOperationError, AttributeError)):
            sticker_pack.price = 1.0

    def test_document_round_trip(self, sticker_pack):
        assert Product.from_document(sticker_pack.to_document()) == sticker_pack


class TestCatalog:
    def test_lookup_by_sku(self, catalog, sticker_pack):
        assert catalog.get("A1") == sticker_pack
        assert "A1" in catalog

    def test_unknown_sku(self, catalog):
        assert catalog.get("ZZZ") is None
        assert "ZZZ" not in catalog

    def test_products_keep_insertion_order(self, catalog):
        assert [p.sku for p in catalog.products] == ["A1", "B2", "FREE"]
        assert len(catalog) == 3

    def test_duplicate_sku_is_rejected(self, sticker_pack):
        with pytest.raises(ValidationError):
            Catalog([sticker_pack, Product(sku="A1", title="Other", price=1.0)])
