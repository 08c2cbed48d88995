"""Entry point: ``python -m starfield``.

Supports two modes:
  - ``python -m starfield``          → Launch the FastAPI server
  - ``python -m starfield cli``      → Headless dump of one view and one station market
"""

from __future__ import annotations

import argparse
import logging

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Deterministic procedural starfield")
    sub = parser.add_subparsers(dest="command")

    # --- Server mode (default) ---
    srv = sub.add_parser("serve", help="Start the FastAPI server (default)")
    srv.add_argument("--host", type=str, default="127.0.0.1")
    srv.add_argument("--port", type=int, default=8000)
    srv.add_argument("--seed", type=int, default=42)
    srv.add_argument("--log-level", type=str, default="INFO", choices=["DEBUG", "INFO", "WARNING"])

    # --- Headless CLI mode ---
    cli = sub.add_parser("cli", help="Generate one view and print a station market")
    cli.add_argument("--seed", type=int, default=42)
    cli.add_argument("--x", type=float, default=0.0, help="Camera left edge")
    cli.add_argument("--y", type=float, default=0.0, help="Camera top edge")
    cli.add_argument("--width", type=float, default=1280.0)
    cli.add_argument("--height", type=float, default=720.0)
    cli.add_argument("--station", type=str, default=None, help="Station id (default: first station in view)")
    cli.add_argument("--visit", type=int, default=0)
    cli.add_argument("--log-level", type=str, default="INFO", choices=["DEBUG", "INFO", "WARNING"])

    return parser


def _run_server(args: argparse.Namespace) -> None:
    import uvicorn

    from starfield.api.app import create_app
    from starfield.config import StarfieldConfig

    config = StarfieldConfig(world_seed=args.seed, log_level=args.log_level)
    app = create_app(config)
    uvicorn.run(app, host=args.host, port=args.port, log_level=args.log_level.lower())


def _run_cli(args: argparse.Namespace) -> None:
    from starfield.api.galaxy_service import GalaxyService
    from starfield.config import StarfieldConfig
    from starfield.core.commodities import commodity_unit
    from starfield.core.models import Asteroid, Star, Station
    from starfield.utils.fingerprint import fingerprint_market, fingerprint_objects
    from starfield.utils.logging import setup_logging

    config = StarfieldConfig(world_seed=args.seed, log_level=args.log_level)
    setup_logging(config.log_level)
    service = GalaxyService(config)

    objects = service.objects_in_view(args.x, args.y, args.width, args.height)
    stars = sum(1 for o in objects if isinstance(o, Star))
    asteroids = sum(1 for o in objects if isinstance(o, Asteroid))
    stations = [o for o in objects if isinstance(o, Station)]
    logger.info(
        "View (%.0f, %.0f, %.0fx%.0f): %d stars, %d asteroids, %d stations over %d cells [%s]",
        args.x, args.y, args.width, args.height, stars, asteroids, len(stations),
        service.cached_cell_count, fingerprint_objects(objects),
    )
    for station in stations:
        logger.info(
            "  %-22s %-32s %-18s %s size=%.1f",
            station.id, station.name, station.economy_type, station.tech_level, station.size,
        )

    station_id = args.station or (stations[0].id if stations else None)
    if station_id is None:
        logger.info("No station in view; pass --station to price one.")
        return

    result = service.market(station_id, args.visit)
    if result is None:
        logger.warning("Station %s not found.", station_id)
        return
    station, snapshot = result
    logger.info(
        "Market at %s '%s' (visit %d) [%s]",
        station.id, station.name, snapshot.timestamp, fingerprint_market(snapshot),
    )
    for key, state in snapshot.entries():
        logger.info("  %-12s %6d cr  %5d %s", key, state.price, state.quantity, commodity_unit(key).value)


def main() -> None:
    parser = _build_parser()
    args = parser.parse_args()

    # Default to serve mode if no subcommand given
    if args.command is None or args.command == "serve":
        if args.command is None:
            args = parser.parse_args(["serve"])
        _run_server(args)
    elif args.command == "cli":
        _run_cli(args)


if __name__ == "__main__":
    main()
