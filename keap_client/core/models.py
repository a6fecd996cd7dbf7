"""Core settings and error types for the Keap client."""

from dataclasses import dataclass, field, replace
from typing import Any


DEFAULT_BASE_URL = "https://api.infusionsoft.com/crm/rest/"
API_KEY_HEADER = "X-Keap-API-Key"
DEFAULT_TIMEOUT_MS = 5000
DEFAULT_RETRIES = 1


class KeapError(Exception):
    """Base class for every error raised by the client."""
    pass


class ConfigurationError(KeapError):
    """Raised when the client is missing credentials or has invalid settings."""
    pass


class APIError(KeapError):
    """Raised when an API request fails after retries."""

    def __init__(
        self,
        message: str,
        method: str | None = None,
        path: str | None = None,
        status_code: int | None = None,
        attempts: int | None = None,
    ):
        super().__init__(message)
        self.method = method
        self.path = path
        self.status_code = status_code
        self.attempts = attempts


class TransportFailure(APIError):
    """Network-level failure: connection refused, DNS, per-attempt timeout."""
    pass


class HTTPStatusFailure(APIError):
    """The server answered with a non-success status code."""
    pass


class InvalidResponseError(KeapError):
    """Raised when a response body does not have the expected shape."""
    pass


class DecodeError(InvalidResponseError):
    """Raised when JSON cannot be decoded into a typed record."""

    def __init__(self, message: str, record_type: str | None = None):
        super().__init__(message)
        self.record_type = record_type


class DomainValidationError(KeapError, ValueError):
    """Raised by resource wrappers when a request precondition is not met."""
    pass


@dataclass(frozen=True)
class EngineSettings:
    """
    Immutable configuration of a request engine.

    Changing a setting produces a new instance; engines swap the whole
    object so an in-flight request keeps the settings it started with.
    """
    api_key: str | None = field(default=None, repr=False)
    timeout_ms: int = DEFAULT_TIMEOUT_MS
    retries: int = DEFAULT_RETRIES
    backoff_seconds: float = 0.0
    base_url: str = DEFAULT_BASE_URL

    def __post_init__(self):
        if self.retries < 0:
            raise ConfigurationError(f"Retry count must be >= 0, got {self.retries}")
        if self.backoff_seconds < 0:
            raise ConfigurationError(
                f"Backoff must be >= 0 seconds, got {self.backoff_seconds}"
            )

    def with_timeout(self, milliseconds: int) -> "EngineSettings":
        """Return a copy with a new per-attempt timeout."""
        return replace(self, timeout_ms=int(milliseconds))

    def with_retries(self, count: int) -> "EngineSettings":
        """Return a copy with a new retry budget."""
        return replace(self, retries=int(count))

    def with_api_key(self, api_key: str | None) -> "EngineSettings":
        """Return a copy with a different API key."""
        return replace(self, api_key=api_key)

    def to_dict(self) -> dict[str, Any]:
        """Convert settings to a dictionary. The API key is never included."""
        return {
            "timeout_ms": self.timeout_ms,
            "retries": self.retries,
            "backoff_seconds": self.backoff_seconds,
            "base_url": self.base_url,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any], api_key: str | None = None) -> "EngineSettings":
        """Create EngineSettings from a dictionary."""
        return cls(
            api_key=api_key,
            timeout_ms=int(data.get("timeout_ms", DEFAULT_TIMEOUT_MS)),
            retries=int(data.get("retries", DEFAULT_RETRIES)),
            backoff_seconds=float(data.get("backoff_seconds", 0.0)),
            base_url=data.get("base_url", DEFAULT_BASE_URL),
        )
