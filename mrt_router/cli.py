"""Command-line entry point.

    mrt-router route BFT BNK
    mrt-router route BFT BNK --network data/mrt.json --transfer-weight 3
    mrt-router convert mrt_stations.json data/mrt.json
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from pydantic import ValidationError

from .adapters.network import JSONNetworkRepository, load_raw_stations, write_network
from .config import AppConfig, get_config
from .domain.errors import MRTRouterError
from .services import RoutePlannerService

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="mrt-router",
        description="Find the shortest route between two MRT stations.",
    )
    commands = parser.add_subparsers(dest="command", required=True)

    route = commands.add_parser("route", help="Describe the route between two stations")
    route.add_argument("start", help="Start station id (e.g. BFT)")
    route.add_argument("destination", help="Destination station id (e.g. BNK)")
    route.add_argument("--network", type=Path, help="Path to the network JSON file")
    route.add_argument("--language", choices=["en", "zh", "ta"], help="Station name language")
    route.add_argument("--transfer-weight", type=int, help="Cost of one change of lines")

    convert = commands.add_parser("convert", help="Build network JSON from a raw station list")
    convert.add_argument("raw", type=Path, help="Raw station list JSON")
    convert.add_argument("output", type=Path, help="Network JSON to write")

    return parser


def configure_logging(config: AppConfig) -> None:
    logging.basicConfig(
        level=config.observability.level,
        format=config.observability.format,
    )


def _route(args: argparse.Namespace, config: AppConfig) -> str:
    routing = config.routing
    updates = {}
    if args.language:
        updates["language"] = args.language
    if args.transfer_weight is not None:
        updates["transfer_weight"] = args.transfer_weight
    if updates:
        routing = routing.model_copy(update=updates)

    repository = JSONNetworkRepository(config.network, path=args.network)
    planner = RoutePlannerService(repository, routing)
    return planner.plan(args.start, args.destination).description


def _convert(args: argparse.Namespace) -> str:
    record = load_raw_stations(args.raw)
    write_network(record, args.output)
    return f"Wrote {len(record.stations)} stations and {len(record.lines)} lines to {args.output}"


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    try:
        config = get_config()
    except ValidationError as e:
        print(f"Error: invalid configuration\n{e}", file=sys.stderr)
        return 1
    configure_logging(config)

    try:
        if args.command == "route":
            output = _route(args, config)
        else:
            output = _convert(args)
    except MRTRouterError as e:
        logger.debug("Command failed", exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(output)
    return 0


if __name__ == "__main__":
    sys.exit(main())
