# src/services/catalog_service.py

"""Binds the loaded catalog to the query engine and price oracle."""

import logging
from pathlib import Path

from src.models.product import Product
from src.models.query_spec import QuerySpec
from src.services.catalog_engine import CatalogQueryEngine, QueryResult
from src.services.gold_price_oracle import GoldPriceOracle
from src.storage.catalog_loader import load_catalog

logger = logging.getLogger("gold_catalog.service")


class CatalogService:
    """Process-wide entry point used by the API and the CLI."""

    def __init__(
        self,
        catalog: list[Product] | None = None,
        oracle: GoldPriceOracle | None = None,
        catalog_path: Path | None = None,
    ) -> None:
        self.catalog: list[Product] = (
            list(catalog) if catalog is not None
            else load_catalog(catalog_path)
        )
        self.oracle = oracle or GoldPriceOracle()
        self.engine = CatalogQueryEngine(self.oracle)
        logger.debug(
            "CatalogService initialised with %d products",
            len(self.catalog),
        )

    def run_query(self, spec: QuerySpec | None = None) -> QueryResult:
        """Run one query against the catalog."""
        return self.engine.execute(self.catalog, spec or QuerySpec())
