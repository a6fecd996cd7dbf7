"""Users wrapper."""

from dataclasses import dataclass
from typing import Any

from keap_client.core.paginator import Paginator
from keap_client.core.records import Record
from .base import Resource, require

LIST_USER_KEYS = ["limit", "offset", "include_inactive", "include_partners"]


@dataclass
class User(Record):
    id: int | None = None
    given_name: str | None = None
    family_name: str | None = None
    preferred_name: str | None = None
    email_address: str | None = None
    global_user_id: int | None = None
    keap_user_id: str | None = None
    partner: bool | None = None
    status: str | None = None
    job_title: str | None = None
    time_zone: str | None = None
    phone_numbers: list[dict[str, Any]] | None = None
    created_date: str | None = None
    last_updated: str | None = None


class Users(Resource):

    async def list_users(self, options: dict[str, Any] | None = None) -> Paginator[User]:
        return await self._get_page("v1/users", "users", User, options, LIST_USER_KEYS)

    async def create_user(self, data: dict[str, Any]) -> User:
        require(data.get("email_address"), "A user needs an email_address")
        return await self._send_record("POST", "v1/users", User, data)
