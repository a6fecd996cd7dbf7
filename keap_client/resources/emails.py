"""Email records wrapper."""

from dataclasses import dataclass
from typing import Any

from keap_client.core.models import DecodeError
from keap_client.core.paginator import Paginator
from keap_client.core.records import Record, decode_many
from .base import Resource, require

LIST_EMAIL_KEYS = [
    "email",
    "contact_id",
    "ordered",
    "since_sent_date",
    "until_sent_date",
    "limit",
    "offset",
]


@dataclass
class EmailRecord(Record):
    id: int | None = None
    contact_id: int | None = None
    subject: str | None = None
    headers: str | None = None
    html_content: str | None = None
    plain_content: str | None = None
    sent_to_address: str | None = None
    sent_to_cc_addresses: str | None = None
    sent_to_bcc_addresses: str | None = None
    sent_from_address: str | None = None
    sent_from_reply_address: str | None = None
    sent_date: str | None = None
    received_date: str | None = None
    opened_date: str | None = None
    clicked_date: str | None = None
    original_provider: str | None = None
    original_provider_id: str | None = None
    provider_source_id: str | None = None


class Emails(Resource):
    """Record, send and look up emails."""

    async def list_emails(self, options: dict[str, Any] | None = None) -> Paginator[EmailRecord]:
        """
        Fetch a page of email records.

        Args:
            options: Filters such as email, contact_id, ordered,
                since_sent_date, until_sent_date, limit, offset

        Returns:
            Paginator of EmailRecord
        """
        return await self._get_page(
            "v1/emails", "emails", EmailRecord, options, LIST_EMAIL_KEYS
        )

    async def create_email(self, data: EmailRecord | dict[str, Any]) -> EmailRecord:
        return await self._send_record("POST", "v1/emails", EmailRecord, data)

    async def send_email(self, request: dict[str, Any]) -> dict[str, Any] | None:
        """Queue an email for delivery to one or more contacts."""
        require(request.get("contacts"), "An email needs at least one recipient contact")
        require(request.get("subject"), "An email needs a subject")
        return await self.engine.post("v1/emails/queue", request)

    async def create_emails(self, emails: list[EmailRecord | dict[str, Any]]) -> list[EmailRecord]:
        """Create a batch of email records."""
        require(emails, "Emails array cannot be empty")
        response = await self.engine.post(
            "v1/emails/sync",
            [r.to_dict() if isinstance(r, EmailRecord) else r for r in emails],
        )
        if not isinstance(response, dict):
            raise DecodeError(
                "Cannot decode email batch: expected an object", record_type="EmailRecord"
            )
        return decode_many(EmailRecord, response.get("emails"))

    async def get_email(self, email_id: int) -> EmailRecord:
        return await self._get_record(f"v1/emails/{email_id}", EmailRecord)

    async def delete_email(self, email_id: int) -> bool:
        return await self._delete(f"v1/emails/{email_id}")
