"""Entry point for the Pizza Palace bill generator."""

from __future__ import annotations

import argparse
import logging

from pizza_palace.config import DEBUG_LOG_PATH
from pizza_palace.controller import Prompter, make_console, run_session
from pizza_palace.data import default_catalog
from pizza_palace.logs import LOGGER_NAME, configure_logging
from pizza_palace.printer import check_printer_dependencies, print_bill
from pizza_palace.rendering import format_bill, render_menu_lines

logger = logging.getLogger(f"{LOGGER_NAME}.main")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Pizza Palace ordering and bill generator")
    parser.add_argument("--menu", action="store_true", help="print the full menu and exit")
    parser.add_argument("--print-receipt", action="store_true", help="also send the bill to the ESC/POS printer")
    parser.add_argument("--log-file", default=DEBUG_LOG_PATH, help="debug log location")
    return parser


def main(argv: list[str] | None = None) -> int:
    """Run one ordering session and print the bill."""
    args = build_parser().parse_args(argv)
    configure_logging(args.log_file)
    catalog = default_catalog()
    console = make_console()

    if args.menu:
        console.print("\n".join(render_menu_lines(catalog)))
        return 0

    try:
        order = run_session(Prompter(console), catalog)
    except (EOFError, KeyboardInterrupt):
        logger.info("session_aborted")
        console.print("\nOrder cancelled before the bill was generated.")
        return 0

    console.print(format_bill(order))
    logger.info("bill_rendered items=%d total=%s", len(order.items), order.total())

    if args.print_receipt:
        ready, status = check_printer_dependencies()
        logger.info("printer_status=%r", status)
        if not ready:
            console.print(f"Receipt not printed: {status}")
            return 0
        try:
            print_bill(order)
        except Exception as exc:
            logger.exception("bill_print_failed")
            console.print(f"Receipt printing failed: {exc}")
        else:
            console.print("Receipt sent to printer.")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
