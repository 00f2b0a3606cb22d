# tests/helpers.py

"""Builders shared by the test modules."""

from unittest.mock import MagicMock

from src.models.product import Product
from src.services.gold_price_oracle import GoldPriceOracle

# 31.1035 * 60: exactly 60 USD per gram
OUNCE_AT_60_PER_GRAM = 1866.21


def make_product(
    name: str,
    popularity_score: float = 0.5,
    weight: float = 2.0,
) -> Product:
    """Create a Product with all three color variants."""
    slug = name.lower().replace(" ", "-")
    return Product(
        name=name,
        popularity_score=popularity_score,
        weight=weight,
        images={
            color: f"/images/{slug}-{color}.jpg"
            for color in ("yellow", "rose", "white")
        },
    )


def make_response(
    status_code: int = 200,
    payload: object = None,
    json_error: Exception | None = None,
) -> MagicMock:
    """Fake curl_cffi response."""
    resp = MagicMock()
    resp.status_code = status_code
    if json_error is not None:
        resp.json.side_effect = json_error
    else:
        resp.json.return_value = payload
    return resp


class FixedOracle:
    """Oracle stand-in that always answers with the same rate."""

    def __init__(
        self, price_per_gram: float = 60.0, from_cache: bool = False,
    ) -> None:
        self.price_per_gram = price_per_gram
        self.from_cache = from_cache
        self.calls = 0
        self.has_quote = True

    def get(self, now: float | None = None) -> tuple[float, bool]:
        self.calls += 1
        return self.price_per_gram, self.from_cache

    def quote_age(self, now: float | None = None) -> float | None:
        return 12.0


def make_oracle(
    price_per_ounce: float = OUNCE_AT_60_PER_GRAM,
    ttl: float = 3600.0,
    failure_cooldown: float = 60.0,
) -> GoldPriceOracle:
    """Real oracle whose HTTP session is replaced by a mock."""
    oracle = GoldPriceOracle(
        url="https://feed.example/price/XAU",
        ttl=ttl,
        timeout=5,
        failure_cooldown=failure_cooldown,
        clock=lambda: 0.0,
    )
    oracle.session = MagicMock()
    oracle.session.get.return_value = make_response(
        payload={"price": price_per_ounce}
    )
    return oracle
