"""
cli.py — Command Line Entry Point

Without arguments, runs the demo order and prints one line per reported
action. Flags choose other strategies or start the HTTP API.
"""

import argparse
import sys
from typing import List, Optional

from .config import API_HOST, API_PORT, DEFAULT_NOTIFICATION_MESSAGE
from .discounts import NoDiscount, PercentageDiscount
from .errors import OrderServiceError
from .logging_config import setup_logging
from .registry import DELIVERY_METHODS, NOTIFIERS, PAYMENT_METHODS
from .reporting import ActionReporter
from .workflow import SAMPLE_DISCOUNT_FRACTION, run_sample


def build_parser() -> argparse.ArgumentParser:
    """Argument parser for the order-service command."""
    p = argparse.ArgumentParser(prog="order-service", description="Process a demo order with pluggable strategies.")
    p.add_argument("--payment", choices=sorted(PAYMENT_METHODS), default="credit_card", help="Payment strategy.")
    p.add_argument("--delivery", choices=sorted(DELIVERY_METHODS), default="courier", help="Delivery strategy.")
    p.add_argument("--notification", choices=sorted(NOTIFIERS), default="email", help="Notification strategy.")
    p.add_argument(
        "--discount-percent",
        dest="discount_percent",
        type=float,
        default=SAMPLE_DISCOUNT_FRACTION * 100,
        help="Percentage discount, 0 disables it (default: 10).",
    )
    p.add_argument("--message", default=DEFAULT_NOTIFICATION_MESSAGE, help="Notification text.")
    p.add_argument("--serve", action="store_true", help="Start the HTTP API instead of running the demo.")
    p.add_argument("-v", "--verbose", action="store_true", help="Log processing details to stdout.")
    return p


def main(argv: Optional[List[str]] = None) -> int:
    """
    Runs the command line.

    Args:
        argv (List[str], optional): Arguments without the program name; sys.argv when omitted.

    Returns:
        int: Exit code, 0 on success. Usage errors exit with 2 through argparse.
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.serve:
        import uvicorn

        uvicorn.run("order_service.main:app", host=API_HOST, port=API_PORT)
        return 0

    setup_logging(level="INFO" if args.verbose else "WARNING")

    try:
        fraction = args.discount_percent / 100
        discount = PercentageDiscount(fraction) if fraction else NoDiscount()
        run_sample(
            reporter=ActionReporter(echo=print),
            payment=args.payment,
            delivery=args.delivery,
            notification=args.notification,
            discount=discount,
            message=args.message,
        )
    except OrderServiceError as e:
        parser.error(str(e))
    return 0


if __name__ == "__main__":
    sys.exit(main())
