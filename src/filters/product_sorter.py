# src/filters/product_sorter.py

"""Stable ordering of priced products."""

import logging
from collections.abc import Callable

from src.models.product import PricedProduct

logger = logging.getLogger("gold_catalog.filters")

_SORT_KEYS: dict[str, Callable[[PricedProduct], str | float]] = {
    "name": lambda p: p.name.lower(),
    "price": lambda p: p.price,
    "weight": lambda p: p.weight,
    "popularity": lambda p: p.popularity_score,
}


class ProductSorter:
    """Order products by a named field."""

    @staticmethod
    def sort(
        products: list[PricedProduct],
        sort_by: str = "name",
        sort_order: str = "asc",
    ) -> list[PricedProduct]:
        """Return a new list ordered by ``sort_by``.

        ``sorted`` is stable in both directions (``reverse=True`` keeps
        equal keys in input order), so ties always follow catalog order.
        Unknown fields fall back to case-insensitive name order.
        """
        key = _SORT_KEYS.get(sort_by)
        if key is None:
            logger.debug(
                "Unknown sort field '%s', falling back to name", sort_by
            )
            key = _SORT_KEYS["name"]

        return sorted(products, key=key, reverse=sort_order == "desc")
