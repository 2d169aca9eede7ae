"""Command-line interface for the GhostMarket API client."""

import argparse
import asyncio
import json
import logging
import sys
from collections.abc import Awaitable, Callable
from typing import Any

import aiohttp
from dotenv import load_dotenv

from ghostmarket.client import APIError, GhostMarketAPI, GhostMarketAPIConfig, Network
from ghostmarket.utils import setup_logging

logger = logging.getLogger(__name__)

Endpoint = Callable[[GhostMarketAPI, dict[str, str], argparse.Namespace], Awaitable[Any]]

COMMANDS: dict[str, tuple[str, Endpoint]] = {
    "assets": ("List NFT assets", lambda api, q, args: api.assets.list(q)),
    "metadata": ("Get token metadata", lambda api, q, args: api.assets.metadata(q)),
    "refresh-metadata": (
        "Refresh token metadata",
        lambda api, q, args: api.assets.refresh_metadata(q),
    ),
    "token-uri": ("Get a token URI", lambda api, q, args: api.assets.token_uri(q)),
    "collections": ("List collections", lambda api, q, args: api.collections.list(q)),
    "events": ("List marketplace events", lambda api, q, args: api.events.list(q)),
    "order": (
        "Get an order from the orderbook",
        lambda api, q, args: api.orders.get(q, page=args.page),
    ),
    "orders": (
        "List orders from the orderbook",
        lambda api, q, args: api.orders.list(q, page=args.page),
    ),
    "open-orders": ("List open orders", lambda api, q, args: api.orders.open(q)),
    "open-mintings": (
        "List open mintings",
        lambda api, q, args: api.orders.open_mintings(q),
    ),
    "series": ("List NFT series", lambda api, q, args: api.series.list(q)),
    "statistics": ("Get statistics", lambda api, q, args: api.statistics.get(q)),
    "users": ("List users", lambda api, q, args: api.users.list(q)),
    "user-exists": (
        "Check whether a username exists",
        lambda api, q, args: api.users.exists(args.username),
    ),
}


def key_value(item: str) -> tuple[str, str]:
    """Parse a ``key=value`` query parameter."""
    key, sep, value = item.partition("=")
    if not sep or not key:
        raise argparse.ArgumentTypeError(f"Expected key=value, got '{item}'")
    return key, value


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser with one subcommand per endpoint."""
    parser = argparse.ArgumentParser(
        prog="ghostmarket",
        description="Query the GhostMarket NFT marketplace API",
    )
    parser.add_argument(
        "--network",
        choices=[network.value for network in Network],
        default=None,
        help="Network preset (default: GHOSTMARKET_NETWORK env var or main)",
    )
    parser.add_argument(
        "--api-key",
        default=None,
        help="API key (default: GHOSTMARKET_API_KEY env var)",
    )
    parser.add_argument(
        "--api-base-url",
        default=None,
        help="Override the API base URL (default: GHOSTMARKET_API_BASE_URL env var or network preset)",
    )
    parser.add_argument(
        "--env-file",
        default=".env",
        help=".env file with environment variables to load.",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Set the logging level (default: WARNING)",
    )

    subparsers = parser.add_subparsers(
        dest="command", help="Available endpoints", required=True
    )
    for name, (help_text, endpoint) in COMMANDS.items():
        subparser = subparsers.add_parser(name, help=help_text)
        subparser.set_defaults(endpoint=endpoint)
        subparser.add_argument(
            "-p",
            "--param",
            type=key_value,
            action="append",
            default=[],
            help="Query parameter as key=value, may be repeated",
        )
        if name in ("order", "orders"):
            subparser.add_argument(
                "--page", type=int, default=1, help="Page number (default: 1)"
            )
            subparser.add_argument(
                "--page-size",
                type=int,
                default=None,
                help="Orders per page (default: 20)",
            )
        if name == "user-exists":
            subparser.add_argument("username", help="Username to look up")

    return parser


async def run_command(args: argparse.Namespace) -> Any:
    """Run the endpoint selected on the command line and return its JSON."""
    overrides = {
        "network_name": args.network,
        "api_key": args.api_key,
        "api_base_url": args.api_base_url,
    }
    config = GhostMarketAPIConfig(
        **{key: value for key, value in overrides.items() if value is not None}
    )

    async with GhostMarketAPI(config) as api:
        if getattr(args, "page_size", None):
            api.page_size = args.page_size
        logger.info(f"Calling {args.command} on {api.api_base_url}")
        return await args.endpoint(api, dict(args.param), args)


def main(argv: list[str] | None = None) -> int:
    """Run main CLI."""
    parser = build_parser()
    args = parser.parse_args(argv)

    setup_logging(args.log_level)

    if load_dotenv(args.env_file):
        logger.info(f"Loaded environment variables from env file at path: {args.env_file}")
    else:
        logger.debug(f"No environment variables loaded from env file at path: {args.env_file}")

    try:
        result = asyncio.run(run_command(args))
    except APIError as e:
        logger.error(str(e))
        return 1
    except (aiohttp.ClientError, TimeoutError) as e:
        logger.error(f"Request failed: {e!r}")
        return 1
    except KeyboardInterrupt:
        print("\nExecution interrupted by user.")
        return 1

    print(json.dumps(result, indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
