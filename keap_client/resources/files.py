"""Files wrapper."""

from dataclasses import dataclass
from typing import Any

from keap_client.core.paginator import Paginator
from keap_client.core.records import Record
from .base import Resource, require

LIST_FILE_KEYS = ["contact_id", "name", "permission", "type", "viewable", "limit", "offset"]
VIEWABLE_VALUES = ("PUBLIC", "PRIVATE", "BOTH")
FILE_ASSOCIATIONS = ("USER", "COMPANY", "CONTACT")


@dataclass
class FileDescriptor(Record):
    id: int | None = None
    file_name: str | None = None
    file_size: int | None = None
    category: str | None = None
    contact_id: int | None = None
    created_by: int | None = None
    date_created: str | None = None
    last_updated: str | None = None
    download_url: str | None = None
    public: bool | None = None
    remote_file_key: str | None = None
    type: str | None = None


@dataclass
class FileResponse(Record):
    file_descriptor: dict[str, Any]
    file_data: str | None = None


class Files(Resource):
    """Upload, replace, fetch and delete files."""

    async def list_files(self, options: dict[str, Any] | None = None) -> Paginator[FileDescriptor]:
        """
        Fetch a page of file descriptors.

        Args:
            options: Filters such as contact_id, name, permission, type,
                viewable (PUBLIC, PRIVATE or BOTH), limit, offset

        Returns:
            Paginator of FileDescriptor records
        """
        if options and options.get("viewable") is not None:
            require(
                options["viewable"] in VIEWABLE_VALUES,
                f"viewable must be one of {', '.join(VIEWABLE_VALUES)}",
            )
        return await self._get_page(
            "v1/files", "files", FileDescriptor, options, LIST_FILE_KEYS
        )

    async def upload_file(self, data: dict[str, Any]) -> FileResponse:
        """
        Upload a file.

        Args:
            data: file_data (base64), file_name, file_association, is_public
                and contact_id when associated with a contact
        """
        _check_upload(data)
        return await self._send_record("POST", "v1/files", FileResponse, data)

    async def get_file(self, file_id: int) -> FileResponse:
        return await self._get_record(f"v1/files/{file_id}", FileResponse)

    async def replace_file(self, file_id: int, data: dict[str, Any]) -> FileResponse:
        _check_upload(data)
        return await self._send_record("PUT", f"v1/files/{file_id}", FileResponse, data)

    async def delete_file(self, file_id: int) -> bool:
        return await self._delete(f"v1/files/{file_id}")


def _check_upload(data: dict[str, Any]) -> None:
    require(data.get("file_data"), "A file upload needs file_data")
    require(data.get("file_name"), "A file upload needs a file_name")
    association = data.get("file_association")
    if association is not None:
        require(
            association in FILE_ASSOCIATIONS,
            f"file_association must be one of {', '.join(FILE_ASSOCIATIONS)}",
        )
        if association == "CONTACT":
            require(data.get("contact_id"), "A contact file needs a contact_id")
