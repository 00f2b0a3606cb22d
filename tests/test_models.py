# tests/test_models.py

"""Tests for the Product, PricedProduct, GoldPriceQuote and QuerySpec models."""

import dataclasses
import unittest
from datetime import datetime, timezone

from helpers import make_product
from src.models.gold_quote import GoldPriceQuote
from src.models.product import PricedProduct, Product
from src.models.query_spec import QuerySpec


class TestProductModel(unittest.TestCase):
    """Product and PricedProduct dataclasses."""

    def test_product_is_immutable(self) -> None:
        """Catalog products cannot be mutated after load."""
        product = make_product("Ring")
        with self.assertRaises(dataclasses.FrozenInstanceError):
            product.weight = 3.0  # type: ignore[misc]

    def test_product_has_no_price(self) -> None:
        """Price is derived, never stored on the catalog entry."""
        self.assertNotIn(
            "price", {f.name for f in dataclasses.fields(Product)}
        )

    def test_from_product_copies_fields(self) -> None:
        """from_product carries every catalog field plus the price."""
        product = make_product("Ring", popularity_score=0.3, weight=1.5)
        priced = PricedProduct.from_product(product, 123.45)
        self.assertEqual(priced.name, "Ring")
        self.assertEqual(priced.popularity_score, 0.3)
        self.assertEqual(priced.weight, 1.5)
        self.assertEqual(priced.price, 123.45)
        self.assertEqual(priced.images, product.images)
        self.assertIsNot(priced.images, product.images)

    def test_to_dict_wire_shape(self) -> None:
        """to_dict uses the camelCase keys of the JSON API."""
        priced = PricedProduct.from_product(make_product("Ring"), 10.0)
        data = priced.to_dict()
        self.assertEqual(
            list(data),
            ["name", "popularityScore", "weight", "price", "images"],
        )
        self.assertEqual(data["popularityScore"], 0.5)
        self.assertEqual(
            data["images"],
            {
                "yellow": "/images/ring-yellow.jpg",
                "rose": "/images/ring-rose.jpg",
                "white": "/images/ring-white.jpg",
            },
        )

    def test_equality_ignores_images(self) -> None:
        """Identity is name, score and weight."""
        a = Product(name="A", popularity_score=0.1, weight=1.0)
        b = Product(
            name="A", popularity_score=0.1, weight=1.0,
            images={"rose": "x.jpg"},
        )
        self.assertEqual(a, b)
        self.assertEqual(hash(a), hash(b))


class TestGoldPriceQuote(unittest.TestCase):
    """Troy ounce to gram conversion."""

    def test_price_per_gram(self) -> None:
        """Per-gram price divides by 31.1035 without rounding."""
        quote = GoldPriceQuote(
            price_per_ounce=1860.63,
            fetched_at=datetime.now(timezone.utc),
        )
        self.assertEqual(quote.price_per_gram, 1860.63 / 31.1035)
        self.assertAlmostEqual(quote.price_per_gram, 59.8206, places=4)


class TestQuerySpec(unittest.TestCase):
    """QuerySpec defaults and helpers."""

    def test_defaults(self) -> None:
        """No bounds, name ascending."""
        spec = QuerySpec()
        self.assertTrue(all(v is None for v in spec.bounds.values()))
        self.assertEqual(spec.sort_by, "name")
        self.assertEqual(spec.sort_order, "asc")
        self.assertFalse(spec.has_active_filters)

    def test_bound_makes_filters_active(self) -> None:
        self.assertTrue(QuerySpec(max_weight=3.0).has_active_filters)

    def test_zero_bound_is_active(self) -> None:
        """A bound of 0 is set, not absent."""
        self.assertTrue(QuerySpec(min_price=0.0).has_active_filters)

    def test_non_default_sort_is_active(self) -> None:
        self.assertTrue(QuerySpec(sort_order="desc").has_active_filters)
        self.assertTrue(QuerySpec(sort_by="price").has_active_filters)


if __name__ == "__main__":
    unittest.main()
