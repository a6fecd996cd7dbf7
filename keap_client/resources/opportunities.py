"""Opportunities wrapper."""

from dataclasses import dataclass
from typing import Any

from keap_client.core.paginator import Paginator
from .base import BoundRecord, Resource, _as_payload, require

LIST_OPPORTUNITY_KEYS = ["user_id", "stage_id", "limit", "offset", "order", "search_term"]
OPPORTUNITY_ORDERS = ("next_action", "opportunity_name", "contact_name", "date_created")


@dataclass
class Opportunity(BoundRecord):
    """A sales opportunity. Title, contact and stage are always present."""
    opportunity_title: str
    contact: dict[str, Any]
    stage: dict[str, Any]
    id: int | None = None
    affiliate_id: int | None = None
    user: dict[str, Any] | None = None
    custom_fields: list[dict[str, Any]] | None = None
    date_created: str | None = None
    last_updated: str | None = None
    estimated_close_date: str | None = None
    include_in_forecast: int | None = None
    next_action_date: str | None = None
    next_action_notes: str | None = None
    opportunity_notes: str | None = None
    projected_revenue_high: float | None = None
    projected_revenue_low: float | None = None

    async def refresh(self) -> "Opportunity":
        """Fetch the current state of this opportunity."""
        return await self._owner().get_opportunity(self.id)

    async def update(self, data: "Opportunity | dict[str, Any]") -> "Opportunity":
        """Update the given fields of this opportunity."""
        owner = self._owner()
        return await owner.update_opportunity({**_as_payload(data), "id": self.id})

    async def replace(self, data: "Opportunity | dict[str, Any]") -> "Opportunity":
        """Replace every field of this opportunity."""
        owner = self._owner()
        return await owner.replace_opportunity({**_as_payload(data), "id": self.id})

    async def delete(self) -> bool:
        return await self._owner().delete_opportunity(self.id)


def _opportunity_id(data: Opportunity | dict[str, Any]) -> Any:
    return data.id if isinstance(data, Opportunity) else data.get("id")


class Opportunities(Resource):
    """Create, update, delete and fetch opportunities."""

    async def list_opportunities(
        self, options: dict[str, Any] | None = None
    ) -> Paginator[Opportunity]:
        """
        Fetch a page of opportunities.

        Args:
            options: Filters such as limit, offset, order, search_term,
                stage_id, user_id

        Returns:
            Paginator of Opportunity records
        """
        if options and options.get("order") is not None:
            require(
                options["order"] in OPPORTUNITY_ORDERS,
                f"order must be one of {', '.join(OPPORTUNITY_ORDERS)}",
            )
        return await self._get_page(
            "v1/opportunities", "opportunities", Opportunity, options, LIST_OPPORTUNITY_KEYS
        )

    async def get_opportunity(self, opportunity_id: int) -> Opportunity:
        return await self._get_record(f"v1/opportunities/{opportunity_id}", Opportunity)

    async def create_opportunity(self, data: Opportunity | dict[str, Any]) -> Opportunity:
        return await self._send_record("POST", "v1/opportunities", Opportunity, data)

    async def update_opportunity(self, data: Opportunity | dict[str, Any]) -> Opportunity:
        """Update the given fields of an existing opportunity."""
        opportunity_id = _opportunity_id(data)
        require(opportunity_id, "Opportunity ID is required for update")
        return await self._send_record(
            "PATCH", f"v1/opportunities/{opportunity_id}", Opportunity, data
        )

    async def replace_opportunity(self, data: Opportunity | dict[str, Any]) -> Opportunity:
        """Replace every field of an existing opportunity."""
        opportunity_id = _opportunity_id(data)
        require(opportunity_id, "Opportunity ID is required for replacement")
        return await self._send_record(
            "PUT", f"v1/opportunities/{opportunity_id}", Opportunity, data
        )

    async def delete_opportunity(self, opportunity_id: int) -> bool:
        return await self._delete(f"v1/opportunities/{opportunity_id}")
