"""
Client facade.

KeapClient owns one RequestEngine and hands it to lazily created resource
wrappers. create_client() builds a client from the saved settings.
"""

import logging
from functools import cached_property
from typing import Any

import httpx

from .core import EngineSettings, RequestEngine, load_settings
from .resources import (
    AccountInfo,
    Contacts,
    Ecommerce,
    Emails,
    Files,
    Opportunities,
    Orders,
    Products,
    Subscriptions,
    Tags,
    Transactions,
    Users,
)

logger = logging.getLogger(__name__)


class KeapClient:
    """
    Entry point for the Keap REST API.

    Example:
        >>> async with KeapClient(api_key="KEY") as client:
        ...     page = await client.contacts.list_contacts({"limit": 10})
        ...     for contact in page.get_items():
        ...         print(contact.given_name)
    """

    def __init__(
        self,
        api_key: str | None = None,
        request_timeout: int | None = None,
        retries: int | None = None,
        *,
        settings: EngineSettings | None = None,
        http_client: httpx.AsyncClient | None = None,
    ):
        """
        Initialize the client.

        Args:
            api_key: Keap API key; overrides settings.api_key when given
            request_timeout: Per-attempt timeout in milliseconds
            retries: Retries after the first failed attempt
            settings: Base settings (defaults used if None)
            http_client: Optional httpx async client (created if None)
        """
        settings = settings or EngineSettings()
        if api_key is not None:
            settings = settings.with_api_key(api_key)
        if request_timeout is not None:
            settings = settings.with_timeout(request_timeout)
        if retries is not None:
            settings = settings.with_retries(retries)

        self.engine = RequestEngine(settings, http_client=http_client)

    async def aclose(self) -> None:
        await self.engine.aclose()

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.aclose()
        return False

    @cached_property
    def account_info(self) -> AccountInfo:
        return AccountInfo(self.engine)

    @cached_property
    def contacts(self) -> Contacts:
        return Contacts(self.engine)

    @cached_property
    def opportunities(self) -> Opportunities:
        return Opportunities(self.engine)

    @cached_property
    def products(self) -> Products:
        return Products(self.engine)

    @cached_property
    def ecommerce(self) -> Ecommerce:
        return Ecommerce(self.engine)

    @property
    def orders(self) -> Orders:
        return self.ecommerce.orders

    @property
    def subscriptions(self) -> Subscriptions:
        return self.ecommerce.subscriptions

    @property
    def transactions(self) -> Transactions:
        return self.ecommerce.transactions

    @cached_property
    def emails(self) -> Emails:
        return Emails(self.engine)

    @cached_property
    def files(self) -> Files:
        return Files(self.engine)

    @cached_property
    def users(self) -> Users:
        return Users(self.engine)

    @cached_property
    def tags(self) -> Tags:
        return Tags(self.engine)


def create_client(api_key: str | None = None, **overrides: Any) -> KeapClient:
    """
    Build a KeapClient from the saved settings.

    Args:
        api_key: Keap API key (falls back to KEAP_API_KEY)
        **overrides: request_timeout, retries or http_client

    Returns:
        Configured KeapClient

    Raises:
        ConfigurationError: If the settings file is invalid
    """
    settings = load_settings(api_key)
    if not settings.api_key:
        logger.warning("No API key configured; requests will fail until one is set")
    return KeapClient(settings=settings, **overrides)
