"""Typed async client for the Keap (Infusionsoft) CRM REST API."""

from .core import (
    KeapError,
    ConfigurationError,
    APIError,
    TransportFailure,
    HTTPStatusFailure,
    InvalidResponseError,
    DecodeError,
    DomainValidationError,
    EngineSettings,
    RequestEngine,
    Paginator,
    PaginationPolicy,
)
from .client import KeapClient, create_client

__all__ = [
    "KeapClient",
    "create_client",
    "KeapError",
    "ConfigurationError",
    "APIError",
    "TransportFailure",
    "HTTPStatusFailure",
    "InvalidResponseError",
    "DecodeError",
    "DomainValidationError",
    "EngineSettings",
    "RequestEngine",
    "Paginator",
    "PaginationPolicy",
]
