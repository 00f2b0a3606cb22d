# src/api/app.py

"""FastAPI application serving the priced jewelry catalog."""

import logging
from typing import Optional

from fastapi import FastAPI, Query, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from src.errors import UpstreamUnavailable
from src.filters.query_parser import parse_query_spec
from src.services.catalog_service import CatalogService

logger = logging.getLogger("gold_catalog.api")


class PricedProductResponse(BaseModel):
    """Wire shape of one priced catalog entry."""

    name: str
    popularityScore: float
    weight: float
    price: float
    images: dict[str, str]


class HealthResponse(BaseModel):
    status: str
    products: int
    quote_cached: bool
    quote_age_seconds: Optional[float] = None


def create_app(service: CatalogService | None = None) -> FastAPI:
    """Build the API around a catalog service.

    Tests pass a service wired to a stubbed oracle; the server entry
    point lets it default to the shipped catalog and the live feed.
    """
    catalog_service = service or CatalogService()

    app = FastAPI(
        title="Gold Catalog API",
        description="Jewelry catalog priced from the live gold spot price",
        version="1.0.0",
    )
    app.state.catalog_service = catalog_service

    # The presentation layer is served from another origin
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["GET"],
        allow_headers=["*"],
    )

    @app.exception_handler(UpstreamUnavailable)
    async def upstream_unavailable_handler(
        request: Request, exc: UpstreamUnavailable,
    ) -> JSONResponse:
        logger.error("Query failed for %s: %s", request.url.path, exc)
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={"detail": "Gold price unavailable, try again later"},
        )

    @app.get(
        "/api/products",
        response_model=list[PricedProductResponse],
        tags=["Catalog"],
    )
    def list_products(
        minPrice: Optional[str] = Query(None),
        maxPrice: Optional[str] = Query(None),
        minWeight: Optional[str] = Query(None),
        maxWeight: Optional[str] = Query(None),
        minPopularity: Optional[str] = Query(None),
        maxPopularity: Optional[str] = Query(None),
        sortBy: Optional[str] = Query(None),
        sortOrder: Optional[str] = Query(None),
    ) -> list[dict[str, object]]:
        """Priced catalog, filtered and sorted per the query string.

        Unparsable numeric bounds are ignored rather than rejected.
        """
        spec = parse_query_spec({
            "minPrice": minPrice,
            "maxPrice": maxPrice,
            "minWeight": minWeight,
            "maxWeight": maxWeight,
            "minPopularity": minPopularity,
            "maxPopularity": maxPopularity,
            "sortBy": sortBy,
            "sortOrder": sortOrder,
        })
        result = catalog_service.run_query(spec)
        return [p.to_dict() for p in result.products]

    @app.get("/health", response_model=HealthResponse, tags=["Health"])
    def health() -> HealthResponse:
        """Liveness plus cache state; never calls the gold feed."""
        oracle = catalog_service.oracle
        return HealthResponse(
            status="ok",
            products=len(catalog_service.catalog),
            quote_cached=oracle.has_quote,
            quote_age_seconds=oracle.quote_age(),
        )

    return app
