"""notus-dx command line.

Usage:
    notus-dx healthcheck
    notus-dx wallet <eoa> [--register]
    notus-dx portfolio <address>
    notus-dx history <address> [--take N]
    notus-dx cross-swap-status <quote_id> [--wait]
    notus-dx kyc-status <session_id> [--wait]
    notus-dx sign-webhook <body> [--timestamp TS] [--event-id ID]
    notus-dx serve

Reads the same environment variables as the server (NOTUS_API_KEY,
WEBHOOK_SECRET, ...). Exit code is 0 on success and 1 on any error.
"""

import argparse
import asyncio
import logging
import sys
import time
import uuid
from typing import Any, Optional

import httpx

from notus_dx.actions.service import NotusService
from notus_dx.client.exceptions import NotusError
from notus_dx.config import Settings, get_settings
from notus_dx.main import configure_logging, run_server
from notus_dx.utils.timing import safe_dumps, timed_operation
from notus_dx.webhooks.signature import sign_payload
from notus_dx.webhooks.verifier import ID_HEADER, SIGNATURE_HEADER, TIMESTAMP_HEADER

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="notus-dx", description="Notus smart wallet tooling")
    sub = parser.add_subparsers(dest="command", required=True)

    sub.add_parser("healthcheck", help="Check that the Notus API accepts the API key")

    wallet = sub.add_parser("wallet", help="Look up the smart wallet of an EOA")
    wallet.add_argument("eoa", help="Externally owned account address")
    wallet.add_argument("--register", action="store_true", help="Register it if missing")

    portfolio = sub.add_parser("portfolio", help="Show a smart wallet portfolio")
    portfolio.add_argument("address", help="Smart wallet address")

    history = sub.add_parser("history", help="Show smart wallet transaction history")
    history.add_argument("address", help="Smart wallet address")
    history.add_argument("--take", type=int, default=10, help="Number of transactions")

    cross = sub.add_parser("cross-swap-status", help="Show a cross-chain swap status")
    cross.add_argument("quote_id")
    cross.add_argument("--wait", action="store_true", help="Poll until completed or failed")

    kyc = sub.add_parser("kyc-status", help="Show a KYC session status")
    kyc.add_argument("session_id")
    kyc.add_argument("--wait", action="store_true", help="Poll until the session ends")

    sign = sub.add_parser("sign-webhook", help="Print signed headers for a test webhook body")
    sign.add_argument("body", help="Raw JSON body")
    sign.add_argument("--timestamp", help="Unix seconds (default: now)")
    sign.add_argument("--event-id", help="svix-id header (default: random)")

    sub.add_parser("serve", help="Run the webhook API server")
    return parser


def signed_webhook_headers(
    body: str,
    secret: str,
    timestamp: Optional[str] = None,
    event_id: Optional[str] = None,
) -> dict:
    """Headers a Svix sender would attach to ``body``."""
    timestamp = timestamp or str(int(time.time()))
    return {
        ID_HEADER: event_id or f"msg_{uuid.uuid4().hex}",
        TIMESTAMP_HEADER: timestamp,
        SIGNATURE_HEADER: sign_payload(timestamp, body, secret),
    }


async def run_api_command(
    args: argparse.Namespace,
    settings: Settings,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> Any:
    """Run one API-backed subcommand and return what it fetched."""
    async with NotusService.from_settings(settings, transport=transport) as notus:
        if args.command == "healthcheck":
            return await timed_operation(
                "healthcheck", lambda: notus.wallets.list_wallets(page=1, per_page=1)
            )

        if args.command == "wallet":
            if args.register:
                wallet = await timed_operation(
                    "wallet.get_or_register", lambda: notus.wallets.get_or_register(args.eoa)
                )
            else:
                wallet = await timed_operation(
                    "wallet.get_address", lambda: notus.wallets.get_address(args.eoa)
                )
            return wallet.model_dump(by_alias=True) if wallet else {"registered": False}

        if args.command == "portfolio":
            return await timed_operation(
                "wallet.portfolio", lambda: notus.wallets.get_portfolio(args.address)
            )

        if args.command == "history":
            return await timed_operation(
                "wallet.history", lambda: notus.wallets.get_history(args.address, take=args.take)
            )

        if args.command == "cross-swap-status":
            if args.wait:
                return await timed_operation(
                    "cross_swap.wait", lambda: notus.cross_chain.wait_for_completion(args.quote_id)
                )
            return await timed_operation(
                "cross_swap.status", lambda: notus.cross_chain.get_status(args.quote_id)
            )

        if args.command == "kyc-status":
            if args.wait:
                return await timed_operation(
                    "kyc.wait", lambda: notus.kyc.wait_for_verification(args.session_id)
                )
            return await timed_operation(
                "kyc.session", lambda: notus.kyc.get_session(args.session_id)
            )

    raise ValueError(f"Unknown command: {args.command}")


def main(argv: Optional[list[str]] = None, settings: Optional[Settings] = None) -> int:
    """Main entry point."""
    args = build_parser().parse_args(argv)
    settings = settings or get_settings()
    configure_logging(settings)

    if args.command == "serve":
        run_server(settings)
        return 0

    if args.command == "sign-webhook" and not settings.webhook_secret:
        print("WEBHOOK_SECRET is not set", file=sys.stderr)
        return 1

    try:
        if args.command == "sign-webhook":
            headers = signed_webhook_headers(
                args.body, settings.webhook_secret, args.timestamp, args.event_id
            )
            result = {"headers": headers, "body": args.body}
        else:
            result = asyncio.run(run_api_command(args, settings))
    except (NotusError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(safe_dumps(result))
    return 0


if __name__ == "__main__":
    sys.exit(main())
