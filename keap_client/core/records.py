"""
Typed records and the decode step between raw JSON and resource wrappers.

Decoding only checks that the payload is an object and that required
fields are present and non-null. Unknown keys are kept in Record.extra.
"""

from dataclasses import MISSING, dataclass, field, fields
from functools import partial
from typing import Any, Callable, TypeVar

from .models import DecodeError

R = TypeVar("R", bound="Record")


@dataclass
class Record:
    """Base class for records returned by resource wrappers."""
    extra: dict[str, Any] = field(default_factory=dict, repr=False, kw_only=True)

    @classmethod
    def required_fields(cls) -> list[str]:
        return [
            f.name
            for f in fields(cls)
            if f.default is MISSING and f.default_factory is MISSING
        ]

    def to_dict(self) -> dict[str, Any]:
        """Convert the record back into a JSON-ready dict, dropping unset fields."""
        data = dict(self.extra)
        for f in fields(self):
            if f.name == "extra":
                continue
            value = getattr(self, f.name)
            if value is not None:
                data[f.name] = value
        return data


def decode(record_type: type[R], data: Any) -> R:
    """
    Decode a JSON object into a record.

    Args:
        record_type: Record subclass to build
        data: Parsed JSON value

    Returns:
        Instance of record_type

    Raises:
        DecodeError: If data is not an object or a required field is missing
    """
    name = record_type.__name__
    if not isinstance(data, dict):
        raise DecodeError(
            f"Cannot decode {name}: expected an object, got {type(data).__name__}",
            record_type=name,
        )

    missing = [key for key in record_type.required_fields() if data.get(key) is None]
    if missing:
        raise DecodeError(
            f"Cannot decode {name}: missing required fields {', '.join(missing)}",
            record_type=name,
        )

    known = {f.name for f in fields(record_type)} - {"extra"}
    kwargs = {key: value for key, value in data.items() if key in known}
    extra = {key: value for key, value in data.items() if key not in known}
    return record_type(**kwargs, extra=extra)


def decode_many(record_type: type[R], items: Any) -> list[R]:
    """Decode a JSON array into a list of records."""
    if not isinstance(items, list):
        raise DecodeError(
            f"Cannot decode {record_type.__name__} list: expected an array, "
            f"got {type(items).__name__}",
            record_type=record_type.__name__,
        )
    return [decode(record_type, item) for item in items]


def decoder_for(record_type: type[R]) -> Callable[[Any], R]:
    """Return a single-argument decoder suitable for Paginator.wrap()."""
    return partial(decode, record_type)
