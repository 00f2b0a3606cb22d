# src/services/pricing.py

"""Gold-anchored pricing model for catalog products."""

from decimal import ROUND_HALF_UP, Decimal

from src.models.product import PricedProduct, Product

_CENTS = Decimal("0.01")


def round_half_up(value: float) -> float:
    """Round to 2 decimals, halves away from zero.

    Goes through the float's shortest repr so that ``0.125`` rounds to
    ``0.13`` instead of falling victim to binary representation.
    """
    return float(Decimal(repr(value)).quantize(_CENTS, rounding=ROUND_HALF_UP))


def compute_price(product: Product, price_per_gram: float) -> float:
    """Popularity acts as a 1x-2x markup on the product's gold value."""
    raw = (product.popularity_score + 1) * product.weight * price_per_gram
    return round_half_up(raw)


def price_catalog(
    catalog: list[Product],
    price_per_gram: float,
) -> list[PricedProduct]:
    """Price every catalog entry from the same per-gram rate."""
    return [
        PricedProduct.from_product(p, compute_price(p, price_per_gram))
        for p in catalog
    ]
