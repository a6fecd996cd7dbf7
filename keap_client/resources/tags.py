"""Tags wrapper."""

from dataclasses import dataclass
from typing import Any

from keap_client.core.paginator import Paginator
from keap_client.core.records import Record
from .base import Resource, require, require_ids


@dataclass
class Tag(Record):
    name: str
    id: int | None = None
    description: str | None = None
    category: dict[str, Any] | None = None


@dataclass
class TagCategory(Record):
    name: str
    id: int | None = None
    description: str | None = None


@dataclass
class TaggedContact(Record):
    contact: dict[str, Any]
    date_applied: str | None = None


@dataclass
class TaggedCompany(Record):
    company: dict[str, Any]
    date_applied: str | None = None


class Tags(Resource):
    """Tags, tag categories and the contacts or companies they are applied to."""

    async def list_tags(self, options: dict[str, Any] | None = None) -> Paginator[Tag]:
        """
        Fetch a page of tags.

        Args:
            options: Filters limit, offset, name and category

        Returns:
            Paginator of Tag records
        """
        return await self._get_page(
            "v1/tags", "tags", Tag, options, ["limit", "offset", "name", "category"]
        )

    async def create_tag(self, tag: Tag | dict[str, Any]) -> Tag:
        return await self._send_record("POST", "v1/tags", Tag, tag)

    async def create_tag_category(self, category: TagCategory | dict[str, Any]) -> TagCategory:
        return await self._send_record("POST", "v1/tags/categories", TagCategory, category)

    async def get_tag(self, tag_id: int) -> Tag:
        return await self._get_record(f"v1/tags/{tag_id}", Tag)

    async def list_tagged_companies(
        self, tag_id: int, options: dict[str, Any] | None = None
    ) -> Paginator[TaggedCompany]:
        return await self._get_page(
            f"v1/tags/{tag_id}/companies", "companies", TaggedCompany, options, ["limit", "offset"]
        )

    async def list_tagged_contacts(
        self, tag_id: int, options: dict[str, Any] | None = None
    ) -> Paginator[TaggedContact]:
        return await self._get_page(
            f"v1/tags/{tag_id}/contacts", "contacts", TaggedContact, options, ["limit", "offset"]
        )

    async def apply_tag_to_contacts(self, tag_id: int, contact_ids: list[int]) -> dict[str, Any]:
        """Apply a tag to several contacts; returns the per-contact results."""
        ids = require_ids(contact_ids, "Contact IDs")
        return await self.engine.post(f"v1/tags/{tag_id}/contacts", {"ids": ids})

    async def remove_tag_from_contacts(self, tag_id: int, contact_ids: list[int]) -> bool:
        ids = require_ids(contact_ids, "Contact IDs")
        return await self._delete(f"v1/tags/{tag_id}/contacts", {"ids": ids})

    async def remove_tag_from_contact(self, tag_id: int, contact_id: int) -> bool:
        require(contact_id, "Contact ID is required")
        return await self._delete(f"v1/tags/{tag_id}/contacts/{contact_id}")
