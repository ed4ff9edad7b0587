"""
Command line entry point.

    btc-stats serve              # run the HTTP API
    btc-stats report --days 90   # fetch, analyze and print a text report
"""

import argparse
import logging
import sys
from typing import List, Optional

from .analytics import StatisticsError
from .api.bitcoin import MAX_HISTORY_DAYS, SYMBOL, VS_CURRENCY, interval_label, run_analysis
from .config import get_settings
from .core import get_engine
from .logging_config import configure_logging
from .report import format_report
from .services import PriceFeedError, get_price_client

logger = logging.getLogger(__name__)


def _positive_days(value: str) -> int:
    try:
        days = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"days must be an integer, got {value!r}") from None
    if not 1 <= days <= MAX_HISTORY_DAYS:
        raise argparse.ArgumentTypeError(f"days must be between 1 and {MAX_HISTORY_DAYS}, got {days}")
    return days


def serve_cmd(args: argparse.Namespace) -> int:
    from .main import run
    run()
    return 0


def report_cmd(args: argparse.Namespace) -> int:
    days = args.days or get_settings().default_days
    client = get_price_client()

    logger.info("Checking CoinGecko connectivity")
    if not client.ping():
        logger.warning("Connectivity check failed, trying to fetch anyway")

    try:
        analysis, interval = run_analysis(days, client, get_engine())
    except (PriceFeedError, StatisticsError) as e:
        logger.error("Report failed: %s", e)
        return 1

    print(format_report(analysis, symbol=SYMBOL, currency=VS_CURRENCY, interval=interval_label(interval)))
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    configure_logging()
    parser = argparse.ArgumentParser(description="Bitcoin price statistics")
    subparsers = parser.add_subparsers(dest="command")

    subparsers.add_parser("serve", help="Run the HTTP API on port 8000.")

    report = subparsers.add_parser("report", help="Fetch prices and print a statistics report.")
    report.add_argument(
        "--days",
        type=_positive_days,
        default=None,
        help="Days of history to analyze (default: BTC_STATS_DEFAULT_DAYS).",
    )

    args = parser.parse_args(argv)
    if not args.command:
        parser.print_help()
        return 2
    if args.command == "serve":
        return serve_cmd(args)
    return report_cmd(args)


if __name__ == "__main__":
    sys.exit(main())
