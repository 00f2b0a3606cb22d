# src/cli/runner.py

"""Headless CLI: one-off catalog queries, feed health, API server."""

import json
import logging
import sys

from rich.console import Console
from rich.table import Table

from src.config.settings import Settings
from src.errors import CatalogError, UpstreamUnavailable
from src.filters.query_parser import parse_query_spec
from src.models.product import PricedProduct
from src.services.catalog_service import CatalogService

logger = logging.getLogger("gold_catalog.cli")

# Stderr console for status messages so stdout stays clean for JSON
_err = Console(stderr=True)


def _print_table(
    products: list[PricedProduct],
    price_per_gram: float,
) -> None:
    """Render a Rich table of priced products to stdout."""
    table = Table(
        title=f"Catalog (gold {price_per_gram:,.4f} USD/g)",
        show_lines=True,
        title_style="bold cyan",
    )
    table.add_column("#", style="dim", width=4)
    table.add_column("Name", max_width=40)
    table.add_column("Price", justify="right", style="green")
    table.add_column("Weight", justify="right")
    table.add_column("Popularity", justify="center")
    table.add_column("Colors", style="magenta")

    for idx, p in enumerate(products, 1):
        table.add_row(
            str(idx),
            p.name,
            f"${p.price:,.2f}",
            f"{p.weight:g} g",
            f"{p.popularity_score * 5:.1f}/5",
            ", ".join(sorted(p.images)) or "—",
        )

    Console().print(table)


def cli_query(
    params: dict[str, str | None],
    output_format: str = "json",
    service: CatalogService | None = None,
) -> int:
    """Run one catalog query and return an exit code (0=ok, 1=fail).

    ``params`` uses the same names as the HTTP query string.
    """
    spec = parse_query_spec(params)

    try:
        catalog_service = service or CatalogService()
        result = catalog_service.run_query(spec)
    except UpstreamUnavailable as exc:
        logger.error("Query failed: %s", exc)
        _err.print(f"[red]Gold price unavailable: {exc}[/red]")
        return 1
    except CatalogError as exc:
        logger.error("Catalog load failed: %s", exc)
        _err.print(f"[red]{exc}[/red]")
        return 1

    cache_note = " (cached quote)" if result.quote_from_cache else ""
    _err.print(
        f"[green]✓ {len(result.products)} products"
        f" of {result.total_before_filter}{cache_note}[/green]"
    )

    if output_format == "table":
        _print_table(result.products, result.price_per_gram)
    else:
        json.dump(
            [p.to_dict() for p in result.products],
            sys.stdout,
            ensure_ascii=False,
            indent=2,
        )
        sys.stdout.write("\n")

    return 0


async def run_health_check() -> int:
    """Probe the gold price feed and print a status table."""
    from src.services.health_checker import HealthChecker

    _err.print("[bold]Checking gold price feed...[/bold]")
    result = await HealthChecker().check()

    table = Table(
        title="Gold Feed Health Check",
        show_lines=True,
        title_style="bold cyan",
    )
    table.add_column("Source", style="bold")
    table.add_column("Status", justify="center")
    table.add_column("Latency", justify="right")
    table.add_column("Notes", style="dim")

    if result.status == "ok":
        status = "[green]✅ OK[/green]"
    elif result.status == "slow":
        status = "[yellow]⚠️  SLOW[/yellow]"
    else:
        status = "[red]❌ DOWN[/red]"

    latency = (
        f"{result.latency_ms:.0f}ms" if result.latency_ms > 0 else "—"
    )
    table.add_row(result.source_id, status, latency, result.message)

    Console().print(table)
    return 1 if result.status == "down" else 0


def run_server(host: str | None = None, port: int | None = None) -> int:
    """Serve the catalog API with uvicorn until interrupted."""
    import uvicorn

    from src.api.app import create_app

    try:
        app = create_app()
    except CatalogError as exc:
        logger.critical("Cannot start API: %s", exc)
        _err.print(f"[red]{exc}[/red]")
        return 1

    bind_host = host or Settings.API_HOST
    bind_port = port or Settings.API_PORT
    logger.info("Serving catalog API on %s:%d", bind_host, bind_port)
    uvicorn.run(app, host=bind_host, port=bind_port)
    return 0
