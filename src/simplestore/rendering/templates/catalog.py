"""Catalog templates — product listing and product page."""

from simplestore.shared.money import format_cents, to_cents


class IndexTemplate:
    @staticmethod
    def render(context) -> str:
        lines = ["Products", ""]
        for product in context.products:
            lines.append(f"  [{product.sku}] {product.title} - {format_cents(to_cents(product.price))}")
        if not context.products:
            lines.append("  No products available")
        if context.is_admin:
            lines += ["", "You are the operator of this store."]
        return "\n".join(lines) + "\n"


class ProductTemplate:
    @staticmethod
    def render(product) -> str:
        lines = [
            product.title,
            f"SKU: {product.sku}",
            f"Price: {format_cents(to_cents(product.price))}",
        ]
        if product.description:
            lines += ["", product.description]
        lines += ["", f"Add to cart: addtocart/{product.sku}"]
        return "\n".join(lines) + "\n"
