"""Command line front end.

Usage
-----
::

    quakecache --store quakes.json refresh
    quakecache --store quakes.json list --search alaska --sort magnitude
    quakecache --store quakes.json show nc73912345
    quakecache --store quakes.json add 100

The store path can also be set with ``QUAKE_STORE_PATH``.
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from collections.abc import Sequence
from datetime import date

from quakecache.app import QuakeApp
from quakecache.config import QuakeConfig
from quakecache.exceptions import QuakeError
from quakecache.models.quake import Quake
from quakecache.models.query import SortKey, SortOrder
from quakecache.state.store import QuakeStore


def _parse_date(value: str) -> date:
    try:
        return date.fromisoformat(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"expected YYYY-MM-DD, got {value!r}") from exc


def _non_negative_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"expected an integer, got {value!r}") from exc
    if number < 0:
        raise argparse.ArgumentTypeError(f"must be >= 0, got {number}")
    return number


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="quakecache", description="Browse a local earthquake store")
    parser.add_argument("--store", default=None, help="JSON store file (default: $QUAKE_STORE_PATH)")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    sub = parser.add_subparsers(dest="command", required=True)

    list_cmd = sub.add_parser("list", help="List quakes")
    list_cmd.add_argument("--search", default="", help="Case-insensitive location filter")
    list_cmd.add_argument("--date", type=_parse_date, default=None, help="Only quakes on this day (YYYY-MM-DD)")
    list_cmd.add_argument("--sort", choices=[k.value for k in SortKey], default=SortKey.TIME.value)
    list_cmd.add_argument("--order", choices=[o.value for o in SortOrder], default=SortOrder.DESCENDING.value)
    list_cmd.add_argument("--limit", type=_non_negative_int, default=None, help="Show at most this many rows")

    show_cmd = sub.add_parser("show", help="Show the detail pane for one quake")
    show_cmd.add_argument("quake_id")
    show_cmd.add_argument("--narrow", action="store_true", help="Render the narrow layout")

    add_cmd = sub.add_parser("add", help="Add random quakes")
    add_cmd.add_argument("count", type=_non_negative_int, nargs="?", default=None)

    delete_cmd = sub.add_parser("delete", help="Delete a quake by id")
    delete_cmd.add_argument("quake_id")

    sub.add_parser("refresh", help="Fetch the USGS feed into the store")
    sub.add_parser("summary", help="Show store totals")
    return parser


def _format_row(quake: Quake) -> str:
    return f"{quake.id:<38} {quake.magnitude_string:>5}  {quake.time:%Y-%m-%d %H:%M:%S}  {quake.location.name}"


async def _run(args: argparse.Namespace, config: QuakeConfig) -> int:
    if config.store_path is None:
        print("No store configured (use --store or QUAKE_STORE_PATH)", file=sys.stderr)
        return 2

    store = QuakeStore.open(config.store_path, tz=config.tzinfo)
    app = QuakeApp(store, config=config)

    if args.command == "list":
        app.view_model.set_search_text(args.search)
        app.view_model.set_search_date(args.date)
        app.view_model.set_sort(SortKey(args.sort), SortOrder(args.order))
        quakes = app.visible_quakes()
        for quake in quakes[: args.limit] if args.limit is not None else quakes:
            print(_format_row(quake))
        return 0

    if args.command == "show":
        app.select_from_list(args.quake_id)
        view = app.detail(wide=not args.narrow)
        for line in (view.title, view.subtitle, view.body):
            if line:
                print(line)
        return 0 if view.has_selection else 1

    if args.command == "add":
        result = app.add_random(args.count)
        print(f"Added {result.inserted} quakes ({result.dropped} dropped)")
    elif args.command == "delete":
        app.select_from_list(args.quake_id)
        deleted = app.delete_selected()
        if deleted is None:
            print(f"No quake with id {args.quake_id}", file=sys.stderr)
            return 1
        print(f"Deleted {deleted.id}")
    elif args.command == "refresh":
        refreshed = await app.refresh()
        print(f"{refreshed.created} new, {refreshed.updated} updated, {refreshed.skipped} skipped")
    elif args.command == "summary":
        summary = app.view_model.summary
        print(f"Total: {summary.total}")
        if summary.total:
            print(f"Earliest: {summary.earliest:%Y-%m-%d %H:%M:%S %Z}")
            print(f"Latest: {summary.latest:%Y-%m-%d %H:%M:%S %Z}")
            print(f"Largest: {summary.largest:.1f}")
        return 0

    app.save()
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    try:
        overrides = {"store_path": args.store} if args.store else {}
        config = QuakeConfig.from_env(**overrides)
        return asyncio.run(_run(args, config))
    except QuakeError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
