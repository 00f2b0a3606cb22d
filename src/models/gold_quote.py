# src/models/gold_quote.py

"""Gold spot price quote model."""

from dataclasses import dataclass
from datetime import datetime

from src.config.settings import Settings


@dataclass(frozen=True)
class GoldPriceQuote:
    """A single XAU spot price sample, in USD per troy ounce."""

    price_per_ounce: float
    fetched_at: datetime

    @property
    def price_per_gram(self) -> float:
        """USD per gram; the conversion is not rounded."""
        return self.price_per_ounce / Settings.TROY_OUNCE_GRAMS
