"""Command-line interface for the balance service."""
from __future__ import annotations

import argparse
import asyncio
import json
import logging
import sys

from .config import load_config
from .errors import BalanceError, ConfigurationError
from .logging_setup import configure_logging
from .services import BalanceService

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Build the argparse CLI parser."""
    parser = argparse.ArgumentParser(
        prog="eth-balance",
        description="Cached Ethereum balance lookups over JSON-RPC",
    )
    parser.add_argument(
        "--config",
        default=None,
        help="Path to config.yaml (default: config.yaml in project root)",
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: INFO)",
    )

    sub = parser.add_subparsers(dest="command")

    balance_parser = sub.add_parser("balance", help="Resolve one or more balances")
    balance_parser.add_argument("addresses", nargs="+", metavar="ADDRESS")

    watch_parser = sub.add_parser("watch", help="Resolve an address repeatedly")
    watch_parser.add_argument("address", metavar="ADDRESS")
    watch_parser.add_argument(
        "--interval",
        type=float,
        default=1.0,
        help="Seconds between lookups (default: 1)",
    )
    watch_parser.add_argument(
        "--count",
        type=int,
        default=None,
        help="Stop after this many lookups (default: run forever)",
    )

    return parser


async def _print_balance(service: BalanceService, address: str) -> bool:
    try:
        result = await service.get_balance(address)
    except BalanceError as e:
        print(json.dumps({"address": address, "error": e.to_dict()}))
        return False
    print(json.dumps({"address": address, **result.to_dict()}))
    return True


async def run_balance(service: BalanceService, addresses: list[str]) -> int:
    """Resolve all addresses concurrently; return the process exit status."""
    results = await asyncio.gather(
        *(_print_balance(service, address) for address in addresses)
    )
    return 0 if all(results) else 1


async def run_watch(
    service: BalanceService,
    address: str,
    interval: float,
    count: int | None = None,
) -> int:
    """Poll one address, logging the balance and the service counters."""
    done = 0
    failures = 0
    while count is None or done < count:
        if not await _print_balance(service, address):
            failures += 1
        done += 1
        if service.observer is not None:
            logger.info("Counters: %s", service.observer.snapshot())
        if count is None or done < count:
            await asyncio.sleep(interval)
    return 0 if failures == 0 else 1


async def _run(args: argparse.Namespace) -> int:
    """Execute the selected command."""
    configure_logging(args.log_level)
    config = load_config(args.config)

    async with await BalanceService.from_config(config) as service:
        if args.command == "balance":
            return await run_balance(service, args.addresses)
        return await run_watch(service, args.address, args.interval, args.count)


def main() -> None:
    """Entry point."""
    parser = build_parser()
    args = parser.parse_args()

    if not args.command:
        parser.print_help()
        sys.exit(1)

    try:
        sys.exit(asyncio.run(_run(args)))
    except ConfigurationError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        sys.exit(2)
