"""
Command-line shell for a parking lot.

    parking-lot 3 "Unconstrained,Unconstrained,Constrained" --mode live

Test mode builds the lot and prints its initial summary; live mode then reads
commands from stdin until "4" or end of input.
"""

import argparse
import logging
import sys
from typing import Callable, List, Optional

from .config import ConfigError, configure_logging, load_config
from .events import ConsoleDisplay, LoggingObserver, ParkingEventNotifier
from .exceptions import InvalidRequestError, InvalidSpotTypeError, UnsupportedAdminTypeError
from .lot import ParkingLot
from .models import VehicleType

log = logging.getLogger(__name__)

MODES = ("test", "live")

MENU = """
Select an option:
1. Print Lot Summary
2. Park Vehicle
3. Remove Vehicle
4. Exit"""


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="parking-lot", description="Parking lot allocation shell")
    ap.add_argument("rows", nargs="?", help="number of rows (positive integer)")
    ap.add_argument("row_sequence", nargs="?",
                    help='comma-separated spot types per row, e.g. "Unconstrained,Constrained"')
    ap.add_argument("--admin-type", help="lot administrator type (default COMPACT_REGULAR)")
    ap.add_argument("--mode", type=str.lower, choices=MODES)
    ap.add_argument("--config", default="parking.json",
                    help="JSON config file merged over the defaults when it exists "
                         "(default: parking.json in the current directory)")
    ap.add_argument("--log-level", help="DEBUG, INFO, WARNING, ...")
    ap.add_argument("--display", action="store_true",
                    help="echo parking events to the console")
    return ap


def _fail(message: str) -> int:
    print(f"Error: {message}", file=sys.stderr)
    print("Parking lot creation failed.", file=sys.stderr)
    return 1


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        cfg = load_config(args.config)
        configure_logging(args.log_level or cfg["log_level"])
    except ConfigError as e:
        return _fail(str(e))

    raw_rows = args.rows if args.rows is not None else cfg["rows"]
    try:
        rows = int(raw_rows)
        if rows <= 0:
            raise ValueError(raw_rows)
    except (TypeError, ValueError):
        return _fail("<rows> must be a positive integer.")

    row_sequence = str(args.row_sequence if args.row_sequence is not None
                       else cfg["row_sequence"]).strip()
    if not row_sequence:
        return _fail("<row_sequence> must be a non-empty string.")

    mode = args.mode or str(cfg["mode"]).lower()
    if mode not in MODES:
        return _fail(f"mode must be one of {', '.join(MODES)}.")

    notifier = ParkingEventNotifier()
    notifier.attach(LoggingObserver())
    if args.display:
        notifier.attach(ConsoleDisplay())

    try:
        lot = ParkingLot(rows, row_sequence, args.admin_type or cfg["admin_type"], notifier)
    except (InvalidSpotTypeError, UnsupportedAdminTypeError, InvalidRequestError) as e:
        return _fail(str(e))

    log.info("lot created rows=%d sequence=%s mode=%s", rows, row_sequence, mode)
    print(f"Parking lot created with total spots: {lot.size}")
    print("Printing initial lot summary:")
    print()
    lot.print_summary()

    if mode == "live":
        run_shell(lot)
    return 0


def run_shell(lot: ParkingLot, read: Optional[Callable[[str], str]] = None):
    read = read or input
    while True:
        print(MENU)
        try:
            choice = read("Enter choice: ").strip()
        except EOFError:
            print()
            print("Exiting application.")
            return

        try:
            if choice == "1":
                lot.print_summary()
            elif choice == "2":
                _park(lot, read)
            elif choice == "3":
                identifier = read("Enter vehicle identifier to remove: ").strip()
                lot.remove_vehicle(identifier)
                print("Vehicle removed (if present).")
            elif choice == "4":
                print("Exiting application.")
                return
            else:
                print("Invalid option. Please try again.")
        except EOFError:
            print()
            print("Exiting application.")
            return


def _park(lot: ParkingLot, read: Callable[[str], str]):
    identifier = read("Enter vehicle identifier: ").strip()
    names = ", ".join(t.value for t in VehicleType)
    raw_type = read(f"Enter vehicle type ({names}): ")
    try:
        vehicle_type = VehicleType.parse(raw_type)
    except ValueError:
        print("Invalid vehicle type.", file=sys.stderr)
        return
    try:
        spot_ids = lot.park_vehicle(identifier, vehicle_type)
    except InvalidRequestError as e:
        print(f"Error: {e}", file=sys.stderr)
        return
    if spot_ids is None:
        print(f"Error: No available spots for vehicle: {identifier}", file=sys.stderr)
        return
    print(f"Vehicle parked at spot(s): {', '.join(spot_ids)}")


if __name__ == "__main__":
    sys.exit(main())
