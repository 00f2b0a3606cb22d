# src/filters/product_filter.py

"""Range filtering of priced products."""

import logging

from src.models.product import PricedProduct
from src.models.query_spec import QuerySpec

logger = logging.getLogger("gold_catalog.filters")


def _within(
    value: float,
    low: float | None,
    high: float | None,
) -> bool:
    """Inclusive range check; a ``None`` end is open."""
    if low is not None and value < low:
        return False
    if high is not None and value > high:
        return False
    return True


class ProductFilter:
    """Filter priced products by the bounds of a query."""

    @staticmethod
    def matches(product: PricedProduct, spec: QuerySpec) -> bool:
        """True when the product satisfies every active bound."""
        return (
            _within(product.price, spec.min_price, spec.max_price)
            and _within(product.weight, spec.min_weight, spec.max_weight)
            and _within(
                product.popularity_score,
                spec.min_popularity,
                spec.max_popularity,
            )
        )

    @staticmethod
    def filter_by_bounds(
        products: list[PricedProduct],
        spec: QuerySpec,
    ) -> tuple[list[PricedProduct], int]:
        """Keep products inside all price, weight and popularity bounds.

        Returns the filtered list and the count of excluded products.
        """
        kept = [p for p in products if ProductFilter.matches(p, spec)]
        excluded = len(products) - len(kept)

        if excluded:
            logger.debug(
                "Filtered out %d of %d products by range bounds",
                excluded,
                len(products),
            )

        return kept, excluded
