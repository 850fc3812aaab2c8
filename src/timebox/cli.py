from __future__ import annotations

import argparse
import logging
import sys
from typing import Any, Optional, Sequence

import orjson

from .logging import configure_logging


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Timebox command line interface.")
    parser.add_argument("--log-level", default=None, help="Override TIMEBOX_LOG_LEVEL.")
    subparsers = parser.add_subparsers(dest="command", required=True)

    api_parser = subparsers.add_parser("api", help="Start the local HTTP API.")
    api_parser.add_argument("--host", default="127.0.0.1")
    api_parser.add_argument("--port", type=int, default=8000)

    dashboard_parser = subparsers.add_parser("dashboard", help="Print today's agenda, upcoming and urgent items.")
    dashboard_parser.add_argument("--owner", default=None, help="Only load activities of this owner.")
    dashboard_parser.add_argument("--today", default=None, help="Reference date, YYYY-MM-DD.")
    dashboard_parser.add_argument("--now", default=None, help="Reference time of day, HH:MM.")

    layout_parser = subparsers.add_parser("layout", help="Print the grid layout of a day or week.")
    layout_parser.add_argument("day", help="Any date inside the requested view, YYYY-MM-DD.")
    layout_parser.add_argument("--view", choices=("day", "week"), default="day")
    layout_parser.add_argument("--owner", default=None, help="Only load activities of this owner.")

    return parser


def _emit(payload: Any) -> None:
    sys.stdout.write(orjson.dumps(payload, option=orjson.OPT_INDENT_2).decode("utf-8") + "\n")


def main(argv: Optional[Sequence[str]] = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.log_level)
    logging.getLogger(__name__).info("Timebox CLI starting: %s", args.command)

    # deferred so that --help works without a configured store
    from .api import call_api

    if args.command == "api":
        from .services.http import run_local_server

        run_local_server(host=args.host, port=args.port)
    elif args.command == "dashboard":
        call_api("refresh_activities", owner=args.owner)
        _emit(call_api("dashboard", today=args.today, now=args.now))
    elif args.command == "layout":
        call_api("refresh_activities", owner=args.owner)
        name = "day_layout" if args.view == "day" else "week_layout"
        _emit(call_api(name, day=args.day))
    else:  # pragma: no cover - argparse enforces choices
        parser.print_help()


if __name__ == "__main__":
    main()
