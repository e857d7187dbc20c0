"""
Client-side failure types.
"""

from typing import Optional


class ReviewClientError(Exception):
    """Base class for failures reported to the user as a notification."""

    kind = "client_error"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InvalidInput(ReviewClientError):
    """Empty or whitespace-only code; never sent to the gateway."""

    kind = "invalid_input"


class NetworkFailure(ReviewClientError):
    """The gateway could not be reached."""

    kind = "network_failure"


class GatewayFailure(ReviewClientError):
    """
    The gateway answered with a non-success status.

    ``error`` carries the gateway's error tag (``provider_failure``,
    ``network_failure``, ``invalid_input``) when the body had one.
    """

    kind = "gateway_failure"

    def __init__(
        self,
        message: str,
        status_code: int,
        error: Optional[str] = None,
        retryable: bool = False,
    ):
        super().__init__(message)
        self.status_code = status_code
        self.error = error
        self.retryable = retryable


class NothingToCopy(ReviewClientError):
    kind = "nothing_to_copy"


class ExtractionEmpty(ReviewClientError):
    """The review contains no fenced code blocks."""

    kind = "extraction_empty"


class ClipboardUnavailable(ReviewClientError):
    kind = "clipboard_unavailable"
