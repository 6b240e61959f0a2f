# __main__.py
import argparse
import logging
import sys

from employee_tracker.config import DEFAULT_DATA_FILE, LOG_FORMAT
from employee_tracker.data.employee_store import EmployeeStore
from employee_tracker.exceptions import StoreIOError

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="employee-tracker",
        description="Manage employee records stored in a comma-separated text file.",
    )
    parser.add_argument("--file", default=DEFAULT_DATA_FILE,
                        help=f"default data file for load/save (default: {DEFAULT_DATA_FILE})")
    parser.add_argument("--load", action="store_true",
                        help="load the data file before opening the menu")
    parser.add_argument("--gui", action="store_true",
                        help="open the desktop window instead of the console menu")
    parser.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO,
                        format=LOG_FORMAT)

    store = EmployeeStore()
    if args.load:
        try:
            store.load(args.file)
        except StoreIOError as e:
            logger.error("could not load %s", e)

    if args.gui:
        from employee_tracker.gui.employee_manager import open_employee_manager
        return open_employee_manager(store, args.file)

    from employee_tracker.cli.menu import main_menu
    try:
        main_menu(store, args.file)
    except (EOFError, KeyboardInterrupt):
        print("\nExiting Employee Tracker... Goodbye!")
    return 0


if __name__ == "__main__":
    sys.exit(main())
