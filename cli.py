"""Solve the scheduling or the routing problem from a JSON data file and print the result."""

import argparse
import logging
import sys
from typing import List, Optional

import pandas as pd

from exceptions.custom_errors import CUSTOM_ERRORS
from routing.builder import build_routing_model
from scheduler.builder import build_schedule_model
from utils.constants import NUM_SEARCH_WORKERS, ROUTING_TIME_LIMIT, SOLVER_TIME_LIMIT
from utils.loader import load_routing_data, load_scheduling_data
from utils.logger import configure_logging

logger = logging.getLogger(__name__)


def run_schedule(args: argparse.Namespace) -> None:
    data = load_scheduling_data(args.data)
    schedule, summary, penalties, metrics = build_schedule_model(
        data,
        timeout=args.time_limit,
        num_workers=args.workers,
        seed=args.seed,
    )

    print(schedule.to_string())
    print()
    print(summary.to_string())
    print()
    print("Penalties:", penalties)
    print("Metrics:", metrics)

    if args.output:
        schedule.to_csv(args.output, index_label="Employee")
        print(f"Schedule saved to: {args.output}")


def run_route(args: argparse.Namespace) -> None:
    data = load_routing_data(args.data)
    stops, totals = build_routing_model(data, time_limit=args.time_limit)

    with pd.option_context("display.max_rows", None):
        print(stops.to_string(index=False))
    print()
    print("Totals:", totals)

    if args.output:
        stops.to_csv(args.output, index=False)
        print(f"Stops saved to: {args.output}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Compile and solve a shift scheduling or vehicle routing model."
    )
    sub = parser.add_subparsers(dest="command", required=True)

    schedule = sub.add_parser("schedule", help="Solve a shift scheduling instance.")
    schedule.add_argument(
        "--data",
        default=None,
        help="Path to the scheduling JSON file (default: config/scheduling_demo.json).",
    )
    schedule.add_argument(
        "--time-limit",
        type=float,
        default=SOLVER_TIME_LIMIT,
        help=f"Solver time limit in seconds (default: {SOLVER_TIME_LIMIT}).",
    )
    schedule.add_argument("--workers", type=int, default=NUM_SEARCH_WORKERS)
    schedule.add_argument("--seed", type=int, default=None)
    schedule.add_argument("--output", default=None, help="Write the schedule to this CSV file.")
    schedule.set_defaults(handler=run_schedule)

    route = sub.add_parser("route", help="Solve a vehicle routing instance.")
    route.add_argument(
        "--data",
        default=None,
        help="Path to the routing JSON file (default: config/routing_demo.json).",
    )
    route.add_argument(
        "--time-limit",
        type=int,
        default=ROUTING_TIME_LIMIT,
        help=f"Search time limit in seconds (default: {ROUTING_TIME_LIMIT}).",
    )
    route.add_argument("--output", default=None, help="Write the stops to this CSV file.")
    route.set_defaults(handler=run_route)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging()
    try:
        args.handler(args)
    except tuple(CUSTOM_ERRORS) as e:
        logger.error(f"❌ {type(e).__name__}: {e}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
