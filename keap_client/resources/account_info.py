"""Account profile wrapper."""

from dataclasses import dataclass
from typing import Any

from keap_client.core.records import Record
from .base import Resource

PROFILE_PATH = "v1/account/profile"


@dataclass
class AccountProfile(Record):
    name: str | None = None
    email: str | None = None
    phone: str | None = None
    phone_ext: str | None = None
    website: str | None = None
    time_zone: str | None = None
    currency_code: str | None = None
    language_tag: str | None = None
    logo_url: str | None = None
    business_type: str | None = None
    business_goals: list[str] | None = None
    business_primary_color: str | None = None
    business_secondary_color: str | None = None
    address: dict[str, Any] | None = None


class AccountInfo(Resource):
    """Read and update the current account's profile."""

    async def get_account_info(self) -> AccountProfile:
        return await self._get_record(PROFILE_PATH, AccountProfile)

    async def update_account_info(self, data: AccountProfile | dict[str, Any]) -> AccountProfile:
        return await self._send_record("PUT", PROFILE_PATH, AccountProfile, data)
