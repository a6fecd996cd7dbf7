"""Base class for resource wrappers."""

import logging
from typing import Any, Callable, Iterable, Mapping, TypeVar

from keap_client.core.api import RequestEngine
from keap_client.core.models import DomainValidationError
from keap_client.core.paginator import Paginator
from keap_client.core.query_params import with_query
from keap_client.core.records import Record, decode, decoder_for

logger = logging.getLogger(__name__)

R = TypeVar("R", bound=Record)


class Resource:
    """
    Base class for the per-entity wrappers (contacts, orders, tags, ...).

    Each wrapper exposes one method per REST endpoint and uses the shared
    RequestEngine for I/O.
    """

    def __init__(self, engine: RequestEngine):
        """
        Initialize the wrapper.

        Args:
            engine: Request engine shared with the other wrappers
        """
        self.engine = engine

    async def _get_page(
        self,
        path: str,
        item_key: str,
        record_type: type[R] | None = None,
        options: Mapping[str, Any] | None = None,
        allowed_keys: Iterable[str] | None = None,
    ) -> Paginator:
        url = with_query(path, options, allowed_keys)
        response = await self.engine.get(url)
        return Paginator.wrap(self.engine, response, item_key, decoder=self._decoder(record_type))

    async def _get_record(self, path: str, record_type: type[R]) -> R:
        response = await self.engine.get(path)
        return self._bind(decode(record_type, response))

    async def _send_record(
        self,
        method: str,
        path: str,
        record_type: type[R],
        body: Any,
    ) -> R:
        response = await self.engine.request(method, path, _as_payload(body))
        return self._bind(decode(record_type, response))

    async def _delete(self, path: str, body: Any = None) -> bool:
        await self.engine.delete(path, body)
        logger.info(f"Deleted {path}")
        return True

    def _bind(self, record: R) -> R:
        if isinstance(record, BoundRecord):
            record.bind(self)
        return record

    def _decoder(self, record_type: type[R] | None) -> Callable[[Any], R] | None:
        if record_type is None:
            return None
        decoder = decoder_for(record_type)
        if not issubclass(record_type, BoundRecord):
            return decoder
        return lambda item: self._bind(decoder(item))


class BoundRecord(Record):
    """
    Record that keeps a reference to the wrapper that produced it.

    Records returned by a wrapper are bound to it, so they can update,
    refresh or delete themselves. A record built by hand must be bound with
    bind() before its operations are used.
    """

    _resource = None

    def bind(self, resource: Resource) -> "BoundRecord":
        self._resource = resource
        return self

    def _owner(self) -> Any:
        """
        Return the bound wrapper after checking the record can be addressed.

        Raises:
            DomainValidationError: If the record is unbound or has no id
        """
        name = type(self).__name__
        require(self._resource is not None, f"{name} is not bound to a client")
        require(getattr(self, "id", None), f"{name} has no ID")
        return self._resource


def _as_payload(body: Any) -> Any:
    if isinstance(body, Record):
        return body.to_dict()
    if isinstance(body, list):
        return [_as_payload(item) for item in body]
    return body


def require(condition: Any, message: str) -> None:
    """Raise DomainValidationError with message unless condition holds."""
    if not condition:
        raise DomainValidationError(message)


def require_ids(ids: Any, what: str) -> list:
    """Check that a list of ids is non-empty and return it as a list."""
    require(ids, f"{what} array cannot be empty")
    return list(ids)
