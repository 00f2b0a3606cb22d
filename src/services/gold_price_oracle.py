# src/services/gold_price_oracle.py

"""Gold spot price adapter with a rate-limited, single-flight cache."""

import logging
import math
import threading
import time
from collections.abc import Callable
from datetime import datetime, timezone
from typing import Any

from curl_cffi import requests as curl_requests

from src.config.settings import Settings
from src.errors import UpstreamUnavailable
from src.models.gold_quote import GoldPriceQuote

logger = logging.getLogger("gold_catalog.oracle")


class GoldPriceOracle:
    """Serves the XAU price per gram from a time-bounded cache.

    The feed is rate limited, so at most one outbound request is made
    per TTL window.  Refreshes happen under a lock: concurrent callers
    that find the cache stale wait for the single in-flight fetch and
    then read its result instead of issuing their own.

    Failure policy:

    * a failed refresh with a cached quote (even an expired one) logs a
      warning and keeps serving that quote until the next window;
    * a failed refresh on a cold cache raises ``UpstreamUnavailable``,
      and further attempts are held back for the failure cooldown.
    """

    def __init__(
        self,
        url: str | None = None,
        ttl: float | None = None,
        timeout: int | None = None,
        failure_cooldown: float | None = None,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.settings = Settings()
        self.url = url or self.settings.GOLD_PRICE_URL
        self.ttl = ttl if ttl is not None else self.settings.GOLD_PRICE_TTL
        self.timeout = timeout or self.settings.GOLD_PRICE_TIMEOUT
        self.failure_cooldown = (
            failure_cooldown
            if failure_cooldown is not None
            else self.settings.GOLD_PRICE_FAILURE_COOLDOWN
        )
        self.session = curl_requests.Session(
            impersonate=self.settings.IMPERSONATE_BROWSER
        )
        self._clock = clock
        self._lock = threading.Lock()
        self._quote: GoldPriceQuote | None = None
        self._quote_at: float = 0.0
        self._last_attempt: float | None = None
        self.fetch_count: int = 0

    # ── Public API ───────────────────────────────────────

    def get(self, now: float | None = None) -> tuple[float, bool]:
        """Return ``(price_per_gram, from_cache)``.

        ``now`` is a monotonic timestamp; it defaults to the injected
        clock.
        """
        quote, from_cache = self._resolve(now)
        return quote.price_per_gram, from_cache

    def get_price_per_gram(self) -> float:
        """Current USD price per gram of gold."""
        price_per_gram, _ = self.get()
        return price_per_gram

    def get_quote(self, now: float | None = None) -> GoldPriceQuote:
        """The quote backing the current price, refreshing if due."""
        quote, _ = self._resolve(now)
        return quote

    @property
    def has_quote(self) -> bool:
        """True once any quote has been fetched successfully."""
        return self._quote is not None

    def quote_age(self, now: float | None = None) -> float | None:
        """Seconds since the cached quote was fetched, or None."""
        if self._quote is None:
            return None
        current = self._clock() if now is None else now
        return current - self._quote_at

    def clear(self) -> bool:
        """Drop the cached quote and the attempt history.

        Returns whether a quote was cached.
        """
        with self._lock:
            had_quote = self._quote is not None
            self._quote = None
            self._quote_at = 0.0
            self._last_attempt = None
        logger.info("Gold quote cache cleared")
        return had_quote

    # ── Cache lifecycle ──────────────────────────────────

    def _refresh_due(self, now: float) -> bool:
        """Whether the rate budget allows a fetch at ``now``."""
        if self._last_attempt is None:
            return True
        interval = (
            self.ttl if self._quote is not None else self.failure_cooldown
        )
        return now - self._last_attempt >= interval

    def _resolve(
        self, now: float | None,
    ) -> tuple[GoldPriceQuote, bool]:
        current = self._clock() if now is None else now

        with self._lock:
            if not self._refresh_due(current):
                if self._quote is None:
                    raise UpstreamUnavailable(
                        "Gold price feed unavailable and no cached quote "
                        "(retry held back by cooldown)"
                    )
                return self._quote, True

            self._last_attempt = current
            try:
                quote = self._fetch_quote()
            except UpstreamUnavailable as exc:
                if self._quote is None:
                    logger.error(
                        "Gold price refresh failed on cold cache: %s", exc
                    )
                    raise
                logger.warning(
                    "Gold price refresh failed, serving stale quote "
                    "(age %.0fs): %s",
                    current - self._quote_at,
                    exc,
                )
                return self._quote, True

            self._quote = quote
            self._quote_at = current
            logger.info(
                "Gold quote refreshed: %.2f USD/oz (%.4f USD/g)",
                quote.price_per_ounce,
                quote.price_per_gram,
            )
            return quote, False

    # ── Network ──────────────────────────────────────────

    def _fetch_quote(self) -> GoldPriceQuote:
        """Single GET against the feed; no retries."""
        self.fetch_count += 1
        try:
            resp = self.session.get(
                self.url,
                headers=self.settings.DEFAULT_HEADERS,
                timeout=self.timeout,
            )
        except Exception as exc:
            raise UpstreamUnavailable(
                f"Gold price request failed: {exc}"
            ) from exc

        if resp.status_code != 200:
            raise UpstreamUnavailable(
                f"Gold price feed returned HTTP {resp.status_code}"
            )

        try:
            payload: Any = resp.json()
        except ValueError as exc:
            raise UpstreamUnavailable(
                "Gold price feed returned invalid JSON"
            ) from exc

        price = payload.get("price") if isinstance(payload, dict) else None
        if (
            isinstance(price, bool)
            or not isinstance(price, (int, float))
            or not math.isfinite(price)
            or price <= 0
        ):
            raise UpstreamUnavailable(
                f"Gold price feed returned malformed price: {price!r}"
            )

        return GoldPriceQuote(
            price_per_ounce=float(price),
            fetched_at=datetime.now(timezone.utc),
        )
