"""Query string construction for list endpoints."""

from typing import Any, Iterable, Mapping

import httpx


def _stringify(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (list, tuple)):
        return ",".join(_stringify(v) for v in value)
    return str(value)


def create_params(
    options: Mapping[str, Any] | None,
    allowed_keys: Iterable[str] | None = None,
) -> httpx.QueryParams:
    """
    Build query parameters from an options mapping.

    Only keys in allowed_keys with a non-None value are kept, in the order
    of allowed_keys. Without an allow-list every non-None option is kept in
    insertion order.

    Args:
        options: Filter options (e.g. {"limit": 10, "name": None})
        allowed_keys: Keys the endpoint recognizes

    Returns:
        httpx.QueryParams with stringified values
    """
    if not options:
        return httpx.QueryParams()

    keys = options.keys() if allowed_keys is None else allowed_keys
    pairs = [
        (key, _stringify(options[key]))
        for key in keys
        if key in options and options[key] is not None
    ]
    return httpx.QueryParams(pairs)


def build_query(
    options: Mapping[str, Any] | None,
    allowed_keys: Iterable[str] | None = None,
) -> str:
    """Return the canonical, percent-encoded query string for options."""
    return str(create_params(options, allowed_keys))


def with_query(
    path: str,
    options: Mapping[str, Any] | None,
    allowed_keys: Iterable[str] | None = None,
) -> str:
    """Append the query string for options to path, if there is one."""
    query = build_query(options, allowed_keys)
    return f"{path}?{query}" if query else path
