"""Main CLI entry point for the Keap client."""

import argparse
import asyncio
import json
import logging
import sys
from dataclasses import replace

from keap_client.client import create_client
from keap_client.core import (
    APIError,
    ConfigurationError,
    InvalidResponseError,
    load_settings,
    save_settings,
)
from keap_client.demo import run_demo

logger = logging.getLogger(__name__)


def setup_logging(verbose: bool = False):
    """Configure logging for the CLI."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(levelname)s: %(message)s",
    )
    if not verbose:
        logging.getLogger("httpx").setLevel(logging.WARNING)


def _print_page(page, label: str) -> None:
    items = [item.to_dict() for item in page.get_items()]
    print(json.dumps(items, indent=2, default=str))
    print(f"{len(items)} of {page.get_count()} {label}", file=sys.stderr)


def _run(coro) -> None:
    """Run a command coroutine, mapping client errors to exit code 1."""
    try:
        asyncio.run(coro)
    except ConfigurationError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        sys.exit(1)
    except APIError as e:
        print(f"API error: {e}", file=sys.stderr)
        if e.status_code:
            print(f"HTTP Status: {e.status_code}", file=sys.stderr)
        sys.exit(1)
    except InvalidResponseError as e:
        print(f"Unexpected response: {e}", file=sys.stderr)
        sys.exit(1)


def cmd_configure(args):
    """Handle the configure command."""
    try:
        settings = load_settings()
        if args.timeout is not None:
            settings = settings.with_timeout(args.timeout)
        if args.retries is not None:
            settings = settings.with_retries(args.retries)
        if args.backoff is not None:
            settings = replace(settings, backoff_seconds=args.backoff)
        if args.base_url is not None:
            settings = replace(settings, base_url=args.base_url)

        path = save_settings(settings)
    except ConfigurationError as e:
        print(f"Error saving settings: {e}", file=sys.stderr)
        sys.exit(1)

    print(f"Settings saved to: {path}")
    for key, value in settings.to_dict().items():
        print(f"  {key:16s} {value}")


def cmd_account(args):
    """Handle the account command."""

    async def run():
        async with create_client(args.api_key) as client:
            profile = await client.account_info.get_account_info()
            print(json.dumps(profile.to_dict(), indent=2, default=str))

    _run(run())


def cmd_contacts(args):
    """Handle the contacts command."""
    options = {"limit": args.limit, "offset": args.offset, "email": args.email}

    async def run():
        async with create_client(args.api_key) as client:
            page = await client.contacts.list_contacts(options)
            _print_page(page, "contacts")

    _run(run())


def cmd_tags(args):
    """Handle the tags command."""
    options = {"limit": args.limit, "offset": args.offset, "name": args.name}

    async def run():
        async with create_client(args.api_key) as client:
            page = await client.tags.list_tags(options)
            _print_page(page, "tags")

    _run(run())


def cmd_demo(args):
    """Handle the demo command."""

    async def run():
        async with create_client(args.api_key) as client:
            await run_demo(client, page_size=args.limit)

    _run(run())


def main():
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        prog="keap-client",
        description="Keap CRM REST client",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable verbose logging")
    parser.add_argument("--api-key", help="API key (or set KEAP_API_KEY env var)")

    subparsers = parser.add_subparsers(dest="command", help="Command to execute")

    # Configure command
    configure_parser = subparsers.add_parser("configure", help="Save request settings")
    configure_parser.add_argument("--timeout", type=int, help="Per-attempt timeout in milliseconds")
    configure_parser.add_argument("--retries", type=int, help="Retries after the first failed attempt")
    configure_parser.add_argument("--backoff", type=float, help="Base delay in seconds between retries")
    configure_parser.add_argument("--base-url", help="REST base URL")
    configure_parser.set_defaults(func=cmd_configure)

    # Account command
    account_parser = subparsers.add_parser("account", help="Show the account profile")
    account_parser.set_defaults(func=cmd_account)

    # Contacts command
    contacts_parser = subparsers.add_parser("contacts", help="List contacts")
    contacts_parser.add_argument("--limit", type=int, default=10, help="Page size")
    contacts_parser.add_argument("--offset", type=int, help="Items to skip")
    contacts_parser.add_argument("--email", help="Filter by email address")
    contacts_parser.set_defaults(func=cmd_contacts)

    # Tags command
    tags_parser = subparsers.add_parser("tags", help="List tags")
    tags_parser.add_argument("--limit", type=int, default=10, help="Page size")
    tags_parser.add_argument("--offset", type=int, help="Items to skip")
    tags_parser.add_argument("--name", help="Filter by tag name")
    tags_parser.set_defaults(func=cmd_tags)

    # Demo command
    demo_parser = subparsers.add_parser("demo", help="Run an end-to-end demo")
    demo_parser.add_argument("--limit", type=int, default=5, help="Contacts per page")
    demo_parser.set_defaults(func=cmd_demo)

    args = parser.parse_args()

    setup_logging(args.verbose)

    if not args.command:
        parser.print_help()
        sys.exit(1)

    args.func(args)


if __name__ == "__main__":
    main()
