# src/filters/query_parser.py

"""Typed parsing of catalog query parameters.

Turns the raw, stringly-typed parameters of a catalog request into a
validated :class:`QuerySpec`.  Parsing is lenient: a bound that cannot
be parsed is dropped (treated as absent) instead of failing the whole
request, and unknown sort selections fall back to the defaults.

Parameter names follow the wire casing used by the HTTP API:

    minPrice, maxPrice, minWeight, maxWeight,
    minPopularity, maxPopularity, sortBy, sortOrder
"""

import logging
import math
from collections.abc import Mapping

from src.config.settings import Settings
from src.errors import InvalidQueryParameter
from src.models.query_spec import QuerySpec

logger = logging.getLogger("gold_catalog.query_parser")

# Wire name → QuerySpec field
BOUND_PARAMS: dict[str, str] = {
    "minPrice": "min_price",
    "maxPrice": "max_price",
    "minWeight": "min_weight",
    "maxWeight": "max_weight",
    "minPopularity": "min_popularity",
    "maxPopularity": "max_popularity",
}


# ── Field parsers ────────────────────────────────────────


def parse_bound(raw: str | None, name: str) -> float | None:
    """Parse a decimal string into a finite float.

    ``None`` and blank strings mean "not provided".  Anything else that
    is not a finite decimal raises :class:`InvalidQueryParameter`.
    """
    if raw is None:
        return None
    text = raw.strip()
    if not text:
        return None
    try:
        value = float(text)
    except ValueError:
        raise InvalidQueryParameter(name, raw) from None
    if not math.isfinite(value):
        raise InvalidQueryParameter(name, raw)
    return value


def parse_sort_by(raw: str | None) -> str:
    """Return a known sort field, defaulting to ``name``."""
    if raw and raw in Settings.SORT_FIELDS:
        return raw
    if raw:
        logger.debug("Unknown sortBy '%s', using default", raw)
    return Settings.DEFAULT_SORT_BY


def parse_sort_order(raw: str | None) -> str:
    """Return ``desc`` only when asked for explicitly."""
    if raw and raw in Settings.SORT_ORDERS:
        return raw
    if raw:
        logger.debug("Unknown sortOrder '%s', using default", raw)
    return Settings.DEFAULT_SORT_ORDER


# ── Public entry point ───────────────────────────────────


def parse_query_spec(params: Mapping[str, str | None]) -> QuerySpec:
    """Build a :class:`QuerySpec` from raw request parameters."""
    bounds: dict[str, float | None] = {}
    for wire_name, field_name in BOUND_PARAMS.items():
        try:
            bounds[field_name] = parse_bound(
                params.get(wire_name), wire_name
            )
        except InvalidQueryParameter as exc:
            logger.debug("Ignoring bound: %s", exc)
            bounds[field_name] = None

    return QuerySpec(
        **bounds,
        sort_by=parse_sort_by(params.get("sortBy")),
        sort_order=parse_sort_order(params.get("sortOrder")),
    )
