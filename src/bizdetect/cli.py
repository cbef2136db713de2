"""Summary: Command-line interface for bizdetect.

Importance: Provides a local-first entry point for classification and map workflows.
Alternatives: Build a web UI or desktop client first.
"""

from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import Sequence

from bizdetect.app import build_classifier, build_services
from bizdetect.categories import get_all_categories
from bizdetect.config import AppConfig
from bizdetect.markers import JsonMarkerSource
from bizdetect.models import Marker
from bizdetect.rename import rename_business_marker


def build_parser() -> argparse.ArgumentParser:
    """Summary: Build the CLI argument parser.

    Importance: Defines supported commands for local operation.
    Alternatives: Use a CLI framework like Typer or Click.
    """

    parser = argparse.ArgumentParser(description="bizdetect CLI")
    subparsers = parser.add_subparsers(dest="command", required=True)

    classify = subparsers.add_parser("classify", help="Classify a business name")
    classify.add_argument("name", type=str)
    classify.add_argument("--address", type=str, default=None)

    subparsers.add_parser("list-categories", help="List business categories")

    rename = subparsers.add_parser("rename", help="Expand a business code in a name")
    rename.add_argument("name", type=str)

    create_map = subparsers.add_parser("create-map", help="Create a map")
    create_map.add_argument("name", type=str)
    create_map.add_argument("--description", type=str, default=None)

    subparsers.add_parser("list-maps", help="List maps")

    add_marker = subparsers.add_parser("add-marker", help="Classify and add a marker to a map")
    add_marker.add_argument("map_id", type=int)
    add_marker.add_argument("name", type=str)
    add_marker.add_argument("lat", type=float)
    add_marker.add_argument("lng", type=float)
    add_marker.add_argument("--address", type=str, default="")
    add_marker.add_argument("--type", type=str, default="pin")

    import_markers = subparsers.add_parser("import-markers", help="Import markers from JSON")
    import_markers.add_argument("map_id", type=int)
    import_markers.add_argument(
        "--fixture", type=str, default=str(Path("data") / "mock_markers.json")
    )
    import_markers.add_argument("--limit", type=int, default=500)
    import_markers.add_argument(
        "--expand-codes", action="store_true", help="Replace store codes with business names"
    )

    list_markers = subparsers.add_parser("list-markers", help="List markers on a map")
    list_markers.add_argument("map_id", type=int)

    recategorize = subparsers.add_parser("recategorize", help="Reclassify markers on a map")
    recategorize.add_argument("map_id", type=int)

    stats = subparsers.add_parser("stats", help="Show category counts for a map")
    stats.add_argument("map_id", type=int)

    return parser


def run_cli(argv: Sequence[str] | None = None) -> None:
    """Summary: Execute CLI commands based on arguments.

    Importance: Drives the local user experience without a UI.
    Alternatives: Invoke services via the HTTP API.
    """

    parser = build_parser()
    args = parser.parse_args(argv)
    config = AppConfig.from_env()
    logging.basicConfig(level=config.log_level, format="%(levelname)s %(name)s: %(message)s")

    if args.command == "list-categories":
        for category in get_all_categories():
            print(f"{category.icon} {category.id}: {category.name} ({category.color})")
        return

    if args.command == "rename":
        result = rename_business_marker(args.name)
        print(f"{result.renamed_name} [{result.method}, {result.confidence}]")
        return

    if args.command == "classify":
        result = build_classifier(config).classify(args.name, args.address)
        print(
            f"{result.category.icon} {result.category.id} "
            f"confidence={result.confidence} matched={result.matched_term!r}"
        )
        return

    services = build_services(config)

    if args.command == "create-map":
        map_id = services.maps.create_map(args.name, args.description)
        print(f"Created map {map_id} ({args.name}).")
        return

    if args.command == "list-maps":
        for stored in services.maps.list_maps():
            print(f"{stored.id}: {stored.name} - {stored.description or ''}")
        return

    if args.command == "add-marker":
        services.maps.require_map(args.map_id)
        marker = Marker(
            name=args.name, address=args.address, lat=args.lat, lng=args.lng, type=args.type
        )
        marker_id, result = services.markers.add_marker(args.map_id, marker)
        print(f"Added marker {marker_id} as {result.category.id} ({result.confidence}).")
        return

    if args.command == "import-markers":
        services.maps.require_map(args.map_id)
        markers = JsonMarkerSource(Path(args.fixture)).fetch(args.limit)
        ids = services.markers.import_markers(
            args.map_id, markers, expand_codes=args.expand_codes
        )
        print(f"Imported {len(ids)} markers.")
        return

    if args.command == "list-markers":
        services.maps.require_map(args.map_id)
        for stored in services.markers.list_markers(args.map_id):
            print(
                f"{stored.id}: {stored.name} [{stored.category_id} {stored.confidence}] "
                f"({stored.address})"
            )
        return

    if args.command == "recategorize":
        changed = services.markers.recategorize_map(args.map_id)
        print(f"Updated {changed} markers.")
        return

    if args.command == "stats":
        for row in services.stats.category_breakdown(args.map_id):
            print(f"{row['icon']} {row['id']}: {row['count']}")
        return


if __name__ == "__main__":
    run_cli()
