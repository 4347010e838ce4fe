"""Command line interface for restaurant_booking."""
from __future__ import annotations

import argparse
import csv
import logging
import sys
from pathlib import Path
from typing import List, Sequence

from .config import build_chain
from .csv_loader import DEFAULT_CHAIN_NAME, BookingRequest, load_chain_config, load_requests
from .errors import BookingError, NoAvailableTableError
from .models import Reservation
from .service import BookingService, format_tables

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_CONFIG = 2


def setup_logging(verbose: bool = False) -> None:
    """Configure root logging for command line runs."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler(sys.stderr)],
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Restaurant chain table booking")
    parser.add_argument("--restaurants", required=True, help="Path to restaurants.csv")
    parser.add_argument("--requests", help="Path to requests.csv (holder_name,restaurant,party_size)")
    parser.add_argument("--chain-name", default=DEFAULT_CHAIN_NAME, help="Name of the restaurant chain.")
    parser.add_argument("--max-restaurants", type=int,
                        help="Refuse configurations with more restaurants than this.")
    parser.add_argument("--no-alternatives", action="store_true",
                        help="Do not move a party to another restaurant when the requested one is full.")
    parser.add_argument("--out-reservations", type=Path,
                        help="Write reservations CSV: reservation,holder,party_size,restaurant,table.")
    parser.add_argument("--out-report", type=Path,
                        help="Write per-restaurant occupancy report CSV.")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging on stderr.")
    return parser


def process_request(service: BookingService, request: BookingRequest, allow_alternatives: bool = True) -> str:
    """Book one request and return a one line outcome."""
    prefix = f"{request.holder_name},{request.restaurant},{request.party_size}"
    try:
        if allow_alternatives:
            # Batch runs keep the holder name when moving to another restaurant.
            reservation = service.reserve_with_fallback(
                request.restaurant, request.party_size, request.holder_name
            )
        else:
            reservation = service.reserve(request.restaurant, request.party_size, request.holder_name)
    except NoAvailableTableError:
        return f"{prefix} -> FULL"
    outcome = f"{prefix} -> {reservation.restaurant_name} table {reservation.table_id}"
    if reservation.restaurant_name != request.restaurant:
        outcome += " (alternative)"
    return outcome


def occupancy_report(service: BookingService) -> List[dict]:
    rows = []
    for name in service.list_restaurant_names():
        tables = service.describe_restaurant(name)
        reserved = [t for t in tables if t.occupied]
        rows.append({
            "restaurant": name,
            "tables": len(tables),
            "reserved": len(reserved),
            "free": len(tables) - len(reserved),
            "seats": sum(t.capacity for t in tables),
            "diners": sum(t.party_size or 0 for t in reserved),
        })
    return rows


def write_reservations(path: Path, reservations: List[Reservation]) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", newline="") as f:
        w = csv.writer(f)
        w.writerow(["reservation", "holder", "party_size", "restaurant", "table"])
        for r in reservations:
            w.writerow([r.reservation_id, r.holder_name, r.party_size, r.restaurant_name, r.table_id])


def write_report(path: Path, rows: List[dict]) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", newline="") as f:
        w = csv.DictWriter(f, fieldnames=["restaurant", "tables", "reserved", "free", "seats", "diners"])
        w.writeheader()
        w.writerows(rows)


def main(argv: Sequence[str] | None = None) -> int:
    """Entry point used by ``python -m restaurant_booking.cli``."""
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(args.verbose)

    try:
        config = load_chain_config(args.restaurants, chain_name=args.chain_name,
                                   max_restaurants=args.max_restaurants)
        service = BookingService(build_chain(config))
        requests = load_requests(args.requests) if args.requests else []
    except (BookingError, OSError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return EXIT_CONFIG
    logger.debug("Loaded %d restaurants and %d requests", len(config.restaurants), len(requests))

    for request in requests:
        try:
            outcome = process_request(service, request, allow_alternatives=not args.no_alternatives)
        except BookingError as exc:
            outcome = f"{request.holder_name},{request.restaurant},{request.party_size} -> ERROR {exc}"
        print(outcome)

    for name in service.list_restaurant_names():
        print(f"[{name}]")
        print(format_tables(service.describe_restaurant(name)))

    report = occupancy_report(service)
    for row in report:
        print(f"[REPORT] {row['restaurant']} reserved={row['reserved']}/{row['tables']} "
              f"diners={row['diners']}/{row['seats']}")

    if args.out_reservations:
        write_reservations(args.out_reservations, service.reservations())
    if args.out_report:
        write_report(args.out_report, report)
    return EXIT_OK


if __name__ == "__main__":  # pragma: no cover - CLI entry point
    sys.exit(main())
