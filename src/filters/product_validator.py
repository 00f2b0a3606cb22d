# src/filters/product_validator.py

"""Catalog validation: drop malformed entries before they reach a query."""

import logging
import math
from typing import Any

from src.config.settings import Settings
from src.models.product import Product

logger = logging.getLogger("gold_catalog.filters")


def _as_number(value: Any) -> float | None:
    """Return a finite float, or None for bools/strings/NaN."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    number = float(value)
    return number if math.isfinite(number) else None


class ProductValidator:
    """Validate raw catalog entries and build Product objects."""

    @staticmethod
    def validate(
        entries: list[dict[str, Any]],
    ) -> tuple[list[Product], int]:
        """Drop entries with bad names, weights, scores or duplicates.

        Returns the valid products (catalog order preserved) and the
        count of dropped entries.
        """
        valid: list[Product] = []
        seen: set[str] = set()
        dropped = 0

        for index, entry in enumerate(entries):
            name = entry.get("name")
            if not isinstance(name, str) or not name.strip():
                logger.warning(
                    "Dropped catalog entry %d with empty name", index
                )
                dropped += 1
                continue
            if name in seen:
                logger.warning(
                    "Dropped duplicate catalog entry '%s'", name
                )
                dropped += 1
                continue

            weight = _as_number(entry.get("weight"))
            if weight is None or weight <= 0:
                logger.warning(
                    "Dropped '%s': weight must be a positive number "
                    "(got %r)",
                    name,
                    entry.get("weight"),
                )
                dropped += 1
                continue

            score = _as_number(entry.get("popularityScore"))
            if score is None or not 0.0 <= score <= 1.0:
                logger.warning(
                    "Dropped '%s': popularityScore must be in [0, 1] "
                    "(got %r)",
                    name,
                    entry.get("popularityScore"),
                )
                dropped += 1
                continue

            raw_images = entry.get("images") or {}
            images = {
                color: str(raw_images[color])
                for color in Settings.COLOR_VARIANTS
                if isinstance(raw_images, dict) and raw_images.get(color)
            }

            seen.add(name)
            valid.append(
                Product(
                    name=name,
                    popularity_score=score,
                    weight=weight,
                    images=images,
                )
            )

        if dropped:
            logger.info(
                "Catalog validation dropped %d invalid entries", dropped
            )

        return valid, dropped
