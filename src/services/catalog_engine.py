# src/services/catalog_engine.py

"""Price, filter and sort the catalog for a single query."""

import logging
from dataclasses import dataclass, field

from src.filters.product_filter import ProductFilter
from src.filters.product_sorter import ProductSorter
from src.models.product import PricedProduct, Product
from src.models.query_spec import QuerySpec
from src.services.gold_price_oracle import GoldPriceOracle
from src.services.pricing import price_catalog

logger = logging.getLogger("gold_catalog.engine")


@dataclass
class QueryResult:
    """Container for a completed catalog query."""

    products: list[PricedProduct] = field(
        default_factory=lambda: list[PricedProduct]()
    )
    price_per_gram: float = 0.0
    quote_from_cache: bool = False
    total_before_filter: int = 0
    excluded_count: int = 0


def apply_query(
    catalog: list[Product],
    spec: QuerySpec,
    price_per_gram: float,
) -> QueryResult:
    """Run the pure pipeline against one per-gram rate.

    Every product is priced before filtering so that price bounds see
    the same numbers the caller receives.
    """
    priced = price_catalog(catalog, price_per_gram)
    kept, excluded = ProductFilter.filter_by_bounds(priced, spec)
    ordered = ProductSorter.sort(kept, spec.sort_by, spec.sort_order)
    return QueryResult(
        products=ordered,
        price_per_gram=price_per_gram,
        total_before_filter=len(priced),
        excluded_count=excluded,
    )


class CatalogQueryEngine:
    """Stateless query pipeline; the only shared state is the oracle."""

    def __init__(self, oracle: GoldPriceOracle) -> None:
        self.oracle = oracle

    def execute(
        self,
        catalog: list[Product],
        spec: QuerySpec,
    ) -> QueryResult:
        """Fetch one quote and run the pipeline with it.

        Raises ``UpstreamUnavailable`` when no price can be obtained.
        """
        price_per_gram, from_cache = self.oracle.get()
        result = apply_query(catalog, spec, price_per_gram)
        result.quote_from_cache = from_cache
        logger.debug(
            "Query %s → %d/%d products (%.4f USD/g, cached=%s)",
            spec,
            len(result.products),
            result.total_before_filter,
            price_per_gram,
            from_cache,
        )
        return result

    def query(
        self,
        catalog: list[Product],
        spec: QuerySpec,
    ) -> list[PricedProduct]:
        """Priced, filtered, sorted products for ``spec``."""
        return self.execute(catalog, spec).products
