# src/services/health_checker.py

"""Gold price feed connectivity health checker."""

import asyncio
import logging
import time
from dataclasses import dataclass

from curl_cffi import requests as curl_requests

from src.config.settings import Settings

logger = logging.getLogger("gold_catalog.health")


@dataclass
class HealthResult:
    """Result of a gold feed health probe."""

    source_id: str
    status: str  # "ok", "slow", "down"
    latency_ms: float
    message: str


def probe_feed(
    url: str | None = None,
    session: curl_requests.Session | None = None,
) -> HealthResult:
    """Probe the gold price feed once, bypassing the quote cache."""
    target = url or Settings.GOLD_PRICE_URL
    client = session or curl_requests.Session(
        impersonate=Settings.IMPERSONATE_BROWSER
    )

    start = time.monotonic()
    try:
        resp = client.get(
            target,
            headers=Settings.DEFAULT_HEADERS,
            timeout=Settings.GOLD_PRICE_TIMEOUT,
        )
        elapsed_ms = (time.monotonic() - start) * 1000

        if resp.status_code != 200:
            return HealthResult(
                source_id="gold_feed",
                status="down",
                latency_ms=elapsed_ms,
                message=f"HTTP {resp.status_code}",
            )

        if elapsed_ms > Settings.HEALTH_SLOW_MS:
            return HealthResult(
                source_id="gold_feed",
                status="slow",
                latency_ms=elapsed_ms,
                message="High latency",
            )

        return HealthResult(
            source_id="gold_feed",
            status="ok",
            latency_ms=elapsed_ms,
            message="",
        )

    except Exception as exc:
        elapsed_ms = (time.monotonic() - start) * 1000
        return HealthResult(
            source_id="gold_feed",
            status="down",
            latency_ms=elapsed_ms,
            message=str(exc)[:80],
        )


class HealthChecker:
    """Runs the feed probe off the event loop."""

    def __init__(self, url: str | None = None) -> None:
        self.url = url or Settings.GOLD_PRICE_URL

    async def check(self) -> HealthResult:
        """Probe the gold feed and log the outcome."""
        result = await asyncio.to_thread(probe_feed, self.url)
        logger.info(
            "Health check %s: %s (%.0fms) %s",
            result.source_id,
            result.status,
            result.latency_ms,
            result.message,
        )
        return result
