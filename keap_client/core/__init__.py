"""Core components shared by every resource wrapper."""

from .models import (
    DEFAULT_BASE_URL,
    API_KEY_HEADER,
    KeapError,
    ConfigurationError,
    APIError,
    TransportFailure,
    HTTPStatusFailure,
    InvalidResponseError,
    DecodeError,
    DomainValidationError,
    EngineSettings,
)
from .api import RequestEngine
from .paginator import Paginator, PaginationPolicy
from .query_params import create_params, build_query, with_query
from .records import Record, decode, decode_many, decoder_for
from .config_store import get_base_dir, settings_path, save_settings, load_settings

__all__ = [
    "DEFAULT_BASE_URL",
    "API_KEY_HEADER",
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
    "create_params",
    "build_query",
    "with_query",
    "Record",
    "decode",
    "decode_many",
    "decoder_for",
    "get_base_dir",
    "settings_path",
    "save_settings",
    "load_settings",
]
