"""
HTTP client for the review gateway.
"""

import json
import logging
from dataclasses import dataclass
from typing import Any, Optional

import httpx

from client.errors import GatewayFailure, InvalidInput, NetworkFailure

SERVICE_PATH = "/get-service"


@dataclass
class ReviewResult:
    text: str
    message: Optional[str] = None


def _result_from_body(response: httpx.Response) -> ReviewResult:
    try:
        data: Any = response.json()
    except ValueError:
        return ReviewResult(text=response.text)

    if isinstance(data, str):
        return ReviewResult(text=data)

    if isinstance(data, dict):
        message = data.get("message") if isinstance(data.get("message"), str) else None
        if isinstance(data.get("text"), str):
            return ReviewResult(text=data["text"], message=message)
        return ReviewResult(text=json.dumps(data, indent=2), message=message)

    return ReviewResult(text=json.dumps(data, indent=2))


def _failure_from_body(response: httpx.Response) -> GatewayFailure:
    detail = response.text or response.reason_phrase
    error = None
    retryable = False
    try:
        data = response.json()
    except ValueError:
        data = None

    if isinstance(data, dict):
        if isinstance(data.get("detail"), str):
            detail = data["detail"]
        elif data.get("error"):
            detail = str(data["error"])
        error = data.get("error") if isinstance(data.get("error"), str) else None
        retryable = bool(data.get("retryable", False))

    return GatewayFailure(
        f"Gateway returned {response.status_code}: {detail}",
        status_code=response.status_code,
        error=error,
        retryable=retryable,
    )


class GatewayClient:
    """Posts code to ``{base_url}/get-service`` and returns the review."""

    def __init__(
        self,
        base_url: str,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._transport = transport

    @property
    def url(self) -> str:
        return f"{self.base_url}{SERVICE_PATH}"

    async def review(self, code: str) -> ReviewResult:
        """
        Request a review of ``code``.

        Raises:
            InvalidInput: ``code`` is empty or whitespace only; nothing is sent.
            NetworkFailure: the gateway could not be reached or the exchange
                failed at the HTTP layer (bad encoding, protocol error).
            GatewayFailure: the gateway answered with a non-2xx status.
        """
        if not code or not code.strip():
            raise InvalidInput("Please write some code to review.")

        try:
            async with httpx.AsyncClient(
                timeout=self.timeout, transport=self._transport
            ) as client:
                response = await client.post(self.url, json={"code": code})
        except httpx.HTTPError as e:
            logging.error(f"Gateway unreachable at {self.url}: {e}")
            raise NetworkFailure(f"Could not reach the review service: {e}") from e

        if response.is_success:
            return _result_from_body(response)

        failure = _failure_from_body(response)
        logging.error(failure.message)
        raise failure
