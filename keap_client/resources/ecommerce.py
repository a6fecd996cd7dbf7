"""E-commerce wrappers: orders, subscriptions and transactions."""

from dataclasses import dataclass
from functools import cached_property
from typing import Any

from keap_client.core.api import RequestEngine
from keap_client.core.paginator import Paginator
from keap_client.core.records import Record
from .base import Resource, require

LIST_ORDER_KEYS = ["limit", "offset", "since", "until", "paid", "order", "contact_id"]
LIST_TRANSACTION_KEYS = ["contact_id", "limit", "offset", "since", "until"]
REQUIRED_ORDER_FIELDS = ("contact_id", "order_date", "order_title", "order_type")


@dataclass
class Order(Record):
    id: int | None = None
    title: str | None = None
    status: str | None = None
    order_type: str | None = None
    order_date: str | None = None
    creation_date: str | None = None
    modification_date: str | None = None
    contact: dict[str, Any] | None = None
    order_items: list[dict[str, Any]] | None = None
    shipping_information: dict[str, Any] | None = None
    total: float | None = None
    total_paid: float | None = None
    total_due: float | None = None
    refund_total: float | None = None
    recurring: bool | None = None
    source_type: str | None = None


@dataclass
class OrderItem(Record):
    id: int | None = None
    name: str | None = None
    description: str | None = None
    notes: str | None = None
    price: float | None = None
    quantity: int | None = None
    cost: float | None = None
    discount: float | None = None
    type: str | None = None
    product: dict[str, Any] | None = None


@dataclass
class Transaction(Record):
    id: int | None = None
    amount: float | None = None
    contact_id: int | None = None
    currency: str | None = None
    gateway: str | None = None
    gateway_account_name: str | None = None
    collection_method: str | None = None
    status: str | None = None
    type: str | None = None
    test: bool | None = None
    transaction_date: str | None = None
    order_ids: str | None = None
    orders: list[dict[str, Any]] | None = None
    errors: str | None = None


@dataclass
class Subscription(Record):
    id: int | None = None
    contact_id: int | None = None
    product_id: int | None = None
    subscription_plan_id: int | None = None
    active: bool | None = None
    allow_tax: bool | None = None
    auto_charge: bool | None = None
    billing_amount: float | None = None
    billing_cycle: str | None = None
    billing_frequency: int | None = None
    quantity: int | None = None
    start_date: str | None = None
    end_date: str | None = None
    next_bill_date: str | None = None
    payment_gateway: dict[str, Any] | None = None


class Orders(Resource):
    """Orders, their items, payments and transactions."""

    async def list_orders(self, options: dict[str, Any] | None = None) -> Paginator[Order]:
        """
        Fetch a page of orders.

        Args:
            options: Filters such as limit, offset, since, until, paid,
                order, contact_id

        Returns:
            Paginator of Order records
        """
        return await self._get_page("v1/orders", "orders", Order, options, LIST_ORDER_KEYS)

    async def create_order(
        self, options: dict[str, Any], data: dict[str, Any] | None = None
    ) -> Order:
        """
        Create an order.

        Args:
            options: contact_id, order_date, order_title and order_type, plus
                optional promo_codes, affiliates and shipping_address
            data: Additional order fields merged over options
        """
        body = {**options, **(data or {})}
        missing = [key for key in REQUIRED_ORDER_FIELDS if body.get(key) is None]
        require(not missing, f"An order needs {', '.join(missing)}")
        return await self._send_record("POST", "v1/orders", Order, body)

    async def get_order(self, order_id: int) -> Order:
        return await self._get_record(f"v1/orders/{order_id}", Order)

    async def delete_order(self, order_id: int) -> bool:
        return await self._delete(f"v1/orders/{order_id}")

    async def create_order_item(self, order_id: int, data: dict[str, Any]) -> OrderItem:
        require(data.get("product_id"), "An order item needs a product_id")
        return await self._send_record("POST", f"v1/orders/{order_id}/items", OrderItem, data)

    async def delete_order_item(self, order_id: int, item_id: int) -> bool:
        return await self._delete(f"v1/orders/{order_id}/items/{item_id}")

    async def list_order_payments(self, order_id: int) -> list[dict[str, Any]]:
        return await self.engine.get(f"v1/orders/{order_id}/payments")

    async def create_order_payment(self, order_id: int, data: dict[str, Any]) -> dict[str, Any]:
        require(data.get("payment_method_type"), "A payment needs a payment_method_type")
        return await self.engine.post(f"v1/orders/{order_id}/payments", data)

    async def list_order_transactions(
        self, order_id: int, options: dict[str, Any] | None = None
    ) -> Paginator[Transaction]:
        return await self._get_page(
            f"v1/orders/{order_id}/transactions",
            "transactions",
            Transaction,
            options,
            LIST_TRANSACTION_KEYS,
        )


class Subscriptions(Resource):
    """Recurring subscriptions."""

    async def list_subscriptions(
        self, options: dict[str, Any] | None = None
    ) -> Paginator[Subscription]:
        return await self._get_page(
            "v1/subscriptions",
            "subscriptions",
            Subscription,
            options,
            ["limit", "offset", "contact_id"],
        )

    async def create_subscription(self, data: dict[str, Any]) -> Subscription:
        require(data.get("contact_id"), "A subscription needs a contact_id")
        require(
            data.get("subscription_plan_id"), "A subscription needs a subscription_plan_id"
        )
        return await self._send_record("POST", "v1/subscriptions", Subscription, data)


class Transactions(Resource):
    """Payment transactions."""

    async def list_transactions(
        self, options: dict[str, Any] | None = None
    ) -> Paginator[Transaction]:
        return await self._get_page(
            "v1/transactions", "transactions", Transaction, options, LIST_TRANSACTION_KEYS
        )

    async def get_transaction(self, transaction_id: int) -> Transaction:
        return await self._get_record(f"v1/transactions/{transaction_id}", Transaction)


class Ecommerce:
    """Groups the order, subscription and transaction wrappers."""

    def __init__(self, engine: RequestEngine):
        self.engine = engine

    @cached_property
    def orders(self) -> Orders:
        return Orders(self.engine)

    @cached_property
    def subscriptions(self) -> Subscriptions:
        return Subscriptions(self.engine)

    @cached_property
    def transactions(self) -> Transactions:
        return Transactions(self.engine)
