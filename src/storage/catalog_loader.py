# src/storage/catalog_loader.py

"""Loads the static product catalog from disk."""

import json
import logging
from pathlib import Path
from typing import Any

from src.config.settings import Settings
from src.errors import CatalogError
from src.filters.product_validator import ProductValidator
from src.models.product import Product

logger = logging.getLogger("gold_catalog.storage")


def load_catalog(path: Path | None = None) -> list[Product]:
    """Read a JSON list of catalog entries and validate it.

    Raises :class:`CatalogError` when the file is missing, is not valid
    JSON, or does not hold a list of objects.
    """
    catalog_path = path or Settings.CATALOG_PATH
    try:
        with open(catalog_path, encoding="utf-8") as f:
            raw: Any = json.load(f)
    except FileNotFoundError as exc:
        raise CatalogError(
            f"Catalog file not found: {catalog_path}"
        ) from exc
    except json.JSONDecodeError as exc:
        raise CatalogError(
            f"Catalog file is not valid JSON: {catalog_path} ({exc})"
        ) from exc

    if not isinstance(raw, list) or not all(
        isinstance(e, dict) for e in raw
    ):
        raise CatalogError(
            f"Catalog file must contain a list of objects: {catalog_path}"
        )

    products, dropped = ProductValidator.validate(raw)
    logger.info(
        "Loaded %d catalog products from %s (%d dropped)",
        len(products),
        catalog_path,
        dropped,
    )
    return products
