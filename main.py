# main.py

"""Entry point for the gold_catalog service (API server or headless CLI)."""

import argparse
import asyncio
import logging
import sys

from src.config.logging_config import setup_logging
from src.config.settings import Settings

logger = logging.getLogger("gold_catalog.main")

# argparse dest → query-string name
_BOUND_ARGS: dict[str, str] = {
    "min_price": "minPrice",
    "max_price": "maxPrice",
    "min_weight": "minWeight",
    "max_weight": "maxWeight",
    "min_popularity": "minPopularity",
    "max_popularity": "maxPopularity",
}


def _build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the CLI."""
    parser = argparse.ArgumentParser(
        prog="gold_catalog",
        description="Jewelry catalog priced from the live gold spot price.",
    )
    parser.add_argument(
        "--health",
        action="store_true",
        default=False,
        help="Probe the gold price feed and exit.",
    )
    sub = parser.add_subparsers(dest="command")

    serve = sub.add_parser("serve", help="Run the HTTP API.")
    serve.add_argument(
        "--host",
        default=None,
        help=f"Bind address (default: {Settings.API_HOST}).",
    )
    serve.add_argument(
        "--port",
        type=int,
        default=None,
        help=f"Bind port (default: {Settings.API_PORT}).",
    )

    query = sub.add_parser("query", help="Run one catalog query.")
    for dest, wire in _BOUND_ARGS.items():
        query.add_argument(
            f"--{dest.replace('_', '-')}",
            dest=dest,
            default=None,
            help=f"Inclusive bound ({wire}).",
        )
    query.add_argument(
        "--sort-by",
        choices=Settings.SORT_FIELDS,
        default=Settings.DEFAULT_SORT_BY,
        help="Sort field (default: name).",
    )
    query.add_argument(
        "--sort-order",
        choices=Settings.SORT_ORDERS,
        default=Settings.DEFAULT_SORT_ORDER,
        help="Sort direction (default: asc).",
    )
    query.add_argument(
        "-f",
        "--format",
        choices=["json", "table"],
        default="json",
        dest="output_format",
        help="Output format (default: json).",
    )
    return parser


def _run_query(args: argparse.Namespace) -> None:
    """Run a headless catalog query and exit."""
    from src.cli.runner import cli_query

    params: dict[str, str | None] = {
        wire: getattr(args, dest) for dest, wire in _BOUND_ARGS.items()
    }
    params["sortBy"] = args.sort_by
    params["sortOrder"] = args.sort_order
    sys.exit(cli_query(params, args.output_format))


def _run_health_check() -> None:
    """Run gold feed connectivity health check."""
    from src.cli.runner import run_health_check

    sys.exit(asyncio.run(run_health_check()))


def _run_server(args: argparse.Namespace) -> None:
    from src.cli.runner import run_server

    try:
        exit_code = run_server(args.host, args.port)
    except Exception:
        logger.critical("Fatal error while serving", exc_info=True)
        raise
    finally:
        logger.info("gold_catalog API shutting down")
    sys.exit(exit_code)


def main() -> None:
    """Route to the API server, a one-off query, or the health probe."""
    parser = _build_parser()
    args = parser.parse_args()

    log_file = setup_logging(include_server=args.command == "serve")
    logger.info("gold_catalog starting, log file: %s", log_file)

    if args.health:
        _run_health_check()
    elif args.command == "serve":
        _run_server(args)
    elif args.command == "query":
        _run_query(args)
    else:
        parser.print_help()
        sys.exit(2)


if __name__ == "__main__":
    main()
