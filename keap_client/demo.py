"""
End-to-End Demo

Walks through the account profile, the first contacts page and the page
after it, printing what the client sees.
"""

import logging

from .client import KeapClient
from .core import APIError, ConfigurationError

logger = logging.getLogger(__name__)

# Suppress httpx INFO logs for cleaner output
logging.getLogger("httpx").setLevel(logging.WARNING)


async def run_demo(client: KeapClient, page_size: int = 5) -> None:
    """
    Run the end-to-end demo against the Keap API.

    Args:
        client: Configured KeapClient
        page_size: Contacts per page

    Raises:
        ConfigurationError: If no API key is configured
        APIError: If API calls fail
    """
    print("Starting Keap client demo...")
    print()

    # Step 1: Account profile
    print("Step 1: Fetching account profile...")
    try:
        profile = await client.account_info.get_account_info()
    except ConfigurationError as e:
        print(f"✗ Error: {e}")
        print()
        print("Set an API key first:")
        print("  export KEAP_API_KEY=YOUR_KEY")
        raise
    except APIError as e:
        print(f"✗ API Error: {e}")
        if e.status_code:
            print(f"  HTTP Status: {e.status_code}")
        print()
        print("Common issues:")
        print("  - Invalid or revoked API key")
        print("  - Request timeout too low for your connection")
        raise

    print(f"✓ Account: {profile.name or 'unknown'}")
    if profile.email:
        print(f"  Email: {profile.email}")
    print()

    # Step 2: First page of contacts
    print("Step 2: Fetching contacts...")
    page = await client.contacts.list_contacts({"limit": page_size})
    print(f"✓ Retrieved {len(page.get_items())} of {page.get_count()} contacts")

    for contact in page.get_items():
        name = f"{contact.given_name or ''} {contact.family_name or ''}".strip()
        email = None
        if contact.email_addresses:
            email = contact.email_addresses[0].get("email")
        print(f"  - ID: {contact.id}", end="")
        if name:
            print(f", Name: {name}", end="")
        if email:
            print(f", Email: {email}", end="")
        print()
    print()

    # Step 3: Follow the next cursor
    print("Step 3: Following the next page cursor...")
    next_page = await page.next()
    if next_page is None:
        print("✓ No further pages")
    else:
        print(f"✓ Next page holds {len(next_page.get_items())} contacts")
    print()

    print("=" * 50)
    print("✓ Demo completed successfully!")
    print("=" * 50)
