"""
Domain Errors

This module defines the error taxonomy raised by the flyover pipeline.
Every stage raises one of these and the orchestrator forwards it unchanged.
"""

from typing import Any, Dict, Optional


class DomainError(Exception):
    """Base class for domain errors."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        self.message = message
        self.details = details or {}
        super().__init__(message)

    @property
    def stage(self) -> Optional[str]:
        """Pipeline stage that raised the error, when known."""
        return self.details.get("stage")


class NetworkError(DomainError):
    """Raised on transport failures: DNS, refused connection, timeout."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message, details)


class UpstreamStatusError(DomainError):
    """Raised when a provider answers with a non-2xx status code."""

    def __init__(self, status_code: int, details: Optional[Dict[str, Any]] = None):
        self.status_code = status_code
        message = f"Status code {status_code}. Verify output."
        super().__init__(message, details)


class ProviderRejectedError(DomainError):
    """Raised when a provider flags a logical failure inside its payload."""

    def __init__(
        self, provider_message: str, details: Optional[Dict[str, Any]] = None
    ):
        self.provider_message = provider_message
        super().__init__(provider_message, details)


class InvalidCoordinateError(DomainError):
    """Raised when the flyover provider rejects the coordinates."""

    def __init__(
        self,
        message: str = "invalid coordinates",
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message, details)


class MalformedResponseError(DomainError):
    """Raised when a response body does not match the expected shape."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message, details)


class InvalidIPAddressError(DomainError):
    """Raised before a geolocation lookup when the IP address is unusable."""

    def __init__(self, ip_address: str, details: Optional[Dict[str, Any]] = None):
        self.ip_address = ip_address
        message = f"Invalid IP address: {ip_address!r}"
        super().__init__(message, details)
