"""
Gateway error taxonomy.

Every failure that leaves the gateway is one of these, so the HTTP layer can
answer with a stable status code and an ``error`` tag the client can read.
"""

from typing import Any, Dict, Optional


class GatewayError(Exception):
    """Base class for failures surfaced to gateway callers."""

    kind = "gateway_error"
    status_code = 500
    retryable = False

    def __init__(self, message: str, cause: Optional[BaseException] = None):
        super().__init__(message)
        self.message = message
        self.cause = cause

    def to_dict(self) -> Dict[str, Any]:
        return {
            "detail": self.message,
            "error": self.kind,
            "retryable": self.retryable,
        }


class InvalidInput(GatewayError):
    """Request is missing the code to review."""

    kind = "invalid_input"
    status_code = 400


class NetworkFailure(GatewayError):
    """The provider could not be reached (connect error, timeout, reset)."""

    kind = "network_failure"
    status_code = 503
    retryable = True


class ProviderFailure(GatewayError):
    """
    The provider answered, but with an error or an unusable response.

    Args:
        message: Human readable description.
        provider_status: HTTP status returned by the provider, if any.
        retryable: Whether repeating the call may succeed (quota, overload).
        cause: Original exception.
    """

    kind = "provider_failure"
    status_code = 502

    def __init__(
        self,
        message: str,
        provider_status: Optional[int] = None,
        retryable: bool = False,
        cause: Optional[BaseException] = None,
    ):
        super().__init__(message, cause)
        self.provider_status = provider_status
        self.retryable = retryable

    def to_dict(self) -> Dict[str, Any]:
        data = super().to_dict()
        data["provider_status"] = self.provider_status
        return data
