# src/config/settings.py

"""Central configuration for the gold_catalog service."""

import os
from pathlib import Path

from curl_cffi.requests import BrowserTypeLiteral
from dotenv import load_dotenv

load_dotenv()


class Settings:
    """Central configuration for the gold_catalog service."""

    # --- Gold price feed ---
    GOLD_PRICE_URL: str = os.getenv(
        "GOLD_PRICE_URL", "https://api.gold-api.com/price/XAU"
    )
    GOLD_PRICE_TTL: float = float(
        os.getenv("GOLD_PRICE_TTL", "3600")
    )                                   # Seconds a quote stays fresh
    GOLD_PRICE_TIMEOUT: int = int(
        os.getenv("GOLD_PRICE_TIMEOUT", "10")
    )                                   # Seconds before the fetch gives up
    GOLD_PRICE_FAILURE_COOLDOWN: float = float(
        os.getenv("GOLD_PRICE_FAILURE_COOLDOWN", "60")
    )                                   # Cold-start retry spacing
    TROY_OUNCE_GRAMS: float = 31.1035
    HEALTH_SLOW_MS: float = 5000.0

    # --- HTTP client ---
    IMPERSONATE_BROWSER: BrowserTypeLiteral = "chrome131"
    DEFAULT_HEADERS: dict[str, str] = {
        "Accept": "application/json",
        "Content-Type": "application/json",
        "Accept-Language": "en-US,en;q=0.9",
    }

    # --- Catalog query ---
    SORT_FIELDS: list[str] = ["name", "price", "weight", "popularity"]
    SORT_ORDERS: list[str] = ["asc", "desc"]
    DEFAULT_SORT_BY: str = "name"
    DEFAULT_SORT_ORDER: str = "asc"
    COLOR_VARIANTS: list[str] = ["yellow", "rose", "white"]

    # --- API server ---
    API_HOST: str = os.getenv("API_HOST", "127.0.0.1")
    API_PORT: int = int(os.getenv("API_PORT", "8000"))

    # --- Paths ---
    BASE_DIR: Path = Path(__file__).resolve().parent.parent.parent
    CATALOG_PATH: Path = Path(
        os.getenv(
            "CATALOG_PATH",
            str(BASE_DIR / "src" / "config" / "products.json"),
        )
    )
    LOGS_DIR: Path = BASE_DIR / "logs"
