"""Contacts wrapper."""

from dataclasses import dataclass
from typing import Any

from keap_client.core.paginator import Paginator
from keap_client.core.query_params import with_query
from keap_client.core.records import Record, decode_many
from .base import Resource, require, require_ids
from .emails import EmailRecord

LIST_CONTACT_KEYS = [
    "limit",
    "offset",
    "email",
    "given_name",
    "family_name",
    "order",
    "order_direction",
    "since",
    "until",
]


@dataclass
class Contact(Record):
    id: int | None = None
    given_name: str | None = None
    middle_name: str | None = None
    family_name: str | None = None
    preferred_name: str | None = None
    prefix: str | None = None
    suffix: str | None = None
    job_title: str | None = None
    company: dict[str, Any] | None = None
    email_addresses: list[dict[str, Any]] | None = None
    phone_numbers: list[dict[str, Any]] | None = None
    fax_numbers: list[dict[str, Any]] | None = None
    addresses: list[dict[str, Any]] | None = None
    social_accounts: list[dict[str, Any]] | None = None
    custom_fields: list[dict[str, Any]] | None = None
    tag_ids: list[int] | None = None
    owner_id: int | None = None
    lead_source_id: int | None = None
    contact_type: str | None = None
    source_type: str | None = None
    email_opted_in: bool | None = None
    email_status: str | None = None
    opt_in_reason: str | None = None
    time_zone: str | None = None
    website: str | None = None
    birthday: str | None = None
    anniversary: str | None = None
    date_created: str | None = None
    last_updated: str | None = None


@dataclass
class CreditCard(Record):
    id: int | None = None
    card_type: str | None = None
    card_number: str | None = None
    expiration_month: str | None = None
    expiration_year: str | None = None
    name_on_card: str | None = None
    email_address: str | None = None
    status: str | None = None
    address: dict[str, Any] | None = None


@dataclass
class AppliedTag(Record):
    tag: dict[str, Any]
    date_applied: str | None = None


def _has_contact_method(data: Contact | dict[str, Any]) -> bool:
    if isinstance(data, Contact):
        return bool(data.email_addresses or data.phone_numbers)
    return bool(data.get("email_addresses") or data.get("phone_numbers"))


class Contacts(Resource):
    """Create, update, delete and fetch contacts."""

    async def list_contacts(self, options: dict[str, Any] | None = None) -> Paginator[Contact]:
        """
        Fetch a page of contacts.

        Args:
            options: Filters such as limit, offset, email, given_name,
                family_name, order, order_direction, since, until

        Returns:
            Paginator of Contact records
        """
        return await self._get_page(
            "v1/contacts", "contacts", Contact, options, LIST_CONTACT_KEYS
        )

    async def get_contact(self, contact_id: int) -> Contact:
        return await self._get_record(f"v1/contacts/{contact_id}", Contact)

    async def create_contact(self, data: Contact | dict[str, Any]) -> Contact:
        """
        Create a contact.

        Raises:
            DomainValidationError: If neither an email address nor a phone
                number is given
        """
        require(
            _has_contact_method(data),
            "A contact needs at least one email address or phone number",
        )
        return await self._send_record("POST", "v1/contacts", Contact, data)

    async def update_contact(self, contact_id: int, data: Contact | dict[str, Any]) -> Contact:
        return await self._send_record("PATCH", f"v1/contacts/{contact_id}", Contact, data)

    async def create_or_update_contact(self, data: Contact | dict[str, Any]) -> Contact:
        """Create the contact, or update it when a duplicate is found."""
        require(
            _has_contact_method(data),
            "A contact needs at least one email address or phone number",
        )
        return await self._send_record("PUT", "v1/contacts", Contact, data)

    async def delete_contact(self, contact_id: int) -> bool:
        return await self._delete(f"v1/contacts/{contact_id}")

    async def get_contact_model(self) -> dict[str, Any]:
        """Fetch the custom fields and optional properties of the contact model."""
        return await self.engine.get("v1/contacts/model")

    async def create_custom_field(self, data: dict[str, Any]) -> dict[str, Any]:
        require(data.get("label"), "A custom field needs a label")
        require(data.get("field_type"), "A custom field needs a field_type")
        return await self.engine.post("v1/contacts/model/customFields", data)

    async def list_credit_cards(self, contact_id: int) -> list[CreditCard]:
        response = await self.engine.get(f"v1/contacts/{contact_id}/creditCards")
        return decode_many(CreditCard, response)

    async def create_credit_card(self, contact_id: int, data: dict[str, Any]) -> CreditCard:
        return await self._send_record(
            "POST", f"v1/contacts/{contact_id}/creditCards", CreditCard, data
        )

    async def list_emails(
        self, contact_id: int, options: dict[str, Any] | None = None
    ) -> Paginator[EmailRecord]:
        return await self._get_page(
            f"v1/contacts/{contact_id}/emails",
            "emails",
            EmailRecord,
            options,
            ["limit", "offset", "email"],
        )

    async def create_email(
        self, contact_id: int, data: EmailRecord | dict[str, Any]
    ) -> EmailRecord:
        return await self._send_record(
            "POST", f"v1/contacts/{contact_id}/emails", EmailRecord, data
        )

    async def list_applied_tags(
        self, contact_id: int, options: dict[str, Any] | None = None
    ) -> Paginator[AppliedTag]:
        return await self._get_page(
            f"v1/contacts/{contact_id}/tags",
            "tags",
            AppliedTag,
            options,
            ["limit", "offset"],
        )

    async def apply_tags(self, contact_id: int, tag_ids: list[int]) -> list[dict[str, Any]]:
        """Apply one or more tags to a contact."""
        ids = require_ids(tag_ids, "Tag IDs")
        return await self.engine.post(f"v1/contacts/{contact_id}/tags", {"tagIds": ids})

    async def remove_tag(self, contact_id: int, tag_id: int) -> bool:
        return await self._delete(f"v1/contacts/{contact_id}/tags/{tag_id}")

    async def remove_tags(self, contact_id: int, tag_ids: list[int]) -> bool:
        ids = require_ids(tag_ids, "Tag IDs")
        path = with_query(f"v1/contacts/{contact_id}/tags", {"ids": ids})
        return await self._delete(path)

    async def add_utm(self, contact_id: int, data: dict[str, Any]) -> dict[str, Any]:
        """Attach UTM tracking data to a contact."""
        require(data.get("keapSourceId"), "UTM data needs a keapSourceId")
        return await self.engine.post(f"v1/contacts/{contact_id}/utms", data)
