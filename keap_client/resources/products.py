"""Products wrapper."""

import re
from dataclasses import dataclass
from typing import Any

from keap_client.core.paginator import Paginator
from keap_client.core.records import Record
from .base import BoundRecord, Resource, _as_payload, require

IMAGE_NAME_PATTERN = re.compile(r".+\.(png|gif|jpg|jpeg)$", re.IGNORECASE)
IMAGE_DATA_PATTERN = re.compile(r"^data:image/(png|gif|jpg|jpeg);base64,.+", re.DOTALL)
CYCLE_TYPES = ("DAY", "WEEK", "MONTH", "YEAR")


@dataclass
class SubscriptionPlan(Record):
    cycle_type: str
    plan_price: float
    id: int | None = None
    active: bool | None = None
    frequency: int | None = None
    number_of_cycles: int | None = None
    subscription_plan_index: int | None = None
    subscription_plan_name: str | None = None
    url: str | None = None


@dataclass
class Product(BoundRecord):
    id: int
    product_name: str
    active: bool | None = None
    product_desc: str | None = None
    product_short_desc: str | None = None
    product_price: float | None = None
    sku: str | None = None
    subscription_only: bool | None = None
    subscription_plans: list[dict[str, Any]] | None = None
    url: str | None = None

    async def refresh(self) -> "Product":
        return await self._owner().get_product(self.id)

    async def update(self, data: dict[str, Any]) -> "Product":
        """Update the given fields of this product."""
        owner = self._owner()
        return await owner.update_product({**_as_payload(data), "id": self.id})

    async def delete(self) -> bool:
        return await self._owner().delete_product(self.id)

    async def create_subscription_plan(
        self, data: "SubscriptionPlan | dict[str, Any]"
    ) -> "SubscriptionPlan":
        return await self._owner().create_subscription_plan(self.id, data)

    async def get_subscription_plan(self, subscription_id: int) -> "SubscriptionPlan":
        return await self._owner().get_subscription_plan(self.id, subscription_id)

    async def delete_subscription_plan(self, subscription_id: int) -> bool:
        return await self._owner().delete_subscription_plan(self.id, subscription_id)

    async def upload_image(
        self, file_data: str, file_name: str, checksum: str | None = None
    ) -> bool:
        return await self._owner().upload_product_image(self.id, file_data, file_name, checksum)

    async def delete_image(self) -> bool:
        return await self._owner().delete_product_image(self.id)


class Products(Resource):
    """Manage products, their images and subscription plans."""

    async def list_products(self, options: dict[str, Any] | None = None) -> Paginator[Product]:
        """
        Fetch a page of products.

        Args:
            options: Filters active, limit and offset

        Returns:
            Paginator of Product records
        """
        return await self._get_page(
            "v1/products", "products", Product, options, ["active", "limit", "offset"]
        )

    async def get_product(self, product_id: int) -> Product:
        return await self._get_record(f"v1/products/{product_id}", Product)

    async def create_product(self, data: dict[str, Any]) -> Product:
        require(data.get("product_name"), "A product needs a product_name")
        return await self._send_record("POST", "v1/products", Product, data)

    async def update_product(self, data: Product | dict[str, Any]) -> Product:
        product_id = data.id if isinstance(data, Product) else data.get("id")
        require(product_id, "Product ID is required for update")
        return await self._send_record("PATCH", f"v1/products/{product_id}", Product, data)

    async def delete_product(self, product_id: int) -> bool:
        return await self._delete(f"v1/products/{product_id}")

    async def upload_product_image(
        self,
        product_id: int,
        file_data: str,
        file_name: str,
        checksum: str | None = None,
    ) -> bool:
        """
        Upload a product image.

        Args:
            product_id: Product to attach the image to
            file_data: Base64 data URI, e.g. "data:image/png;base64,..."
            file_name: Image name ending in .png, .gif, .jpg or .jpeg
            checksum: Optional checksum of the image

        Returns:
            True once the image is stored
        """
        require(
            IMAGE_DATA_PATTERN.match(file_data or ""),
            "file_data must be a base64 data URI for a png, gif, jpg or jpeg image",
        )
        require(
            IMAGE_NAME_PATTERN.match(file_name or ""),
            "file_name must end in .png, .gif, .jpg or .jpeg",
        )
        body = {"file_data": file_data, "file_name": file_name}
        if checksum is not None:
            body["checksum"] = checksum
        await self.engine.post(f"v1/products/{product_id}/image", body)
        return True

    async def delete_product_image(self, product_id: int) -> bool:
        return await self._delete(f"v1/products/{product_id}/image")

    async def create_subscription_plan(
        self, product_id: int, data: SubscriptionPlan | dict[str, Any]
    ) -> SubscriptionPlan:
        cycle_type = data.cycle_type if isinstance(data, SubscriptionPlan) else data.get("cycle_type")
        require(
            cycle_type in CYCLE_TYPES,
            f"cycle_type must be one of {', '.join(CYCLE_TYPES)}",
        )
        return await self._send_record(
            "POST", f"v1/products/{product_id}/subscriptions", SubscriptionPlan, data
        )

    async def get_subscription_plan(self, product_id: int, subscription_id: int) -> SubscriptionPlan:
        return await self._get_record(
            f"v1/products/{product_id}/subscriptions/{subscription_id}", SubscriptionPlan
        )

    async def delete_subscription_plan(self, product_id: int, subscription_id: int) -> bool:
        return await self._delete(f"v1/products/{product_id}/subscriptions/{subscription_id}")
