"""
Gemini review gateway.

Wraps the google-genai SDK: one prompt in, the model's markdown text out.
Provider and transport exceptions are translated into the gateway error
taxonomy in ``backend.errors``.
"""

import asyncio
import logging
from typing import Optional

import httpx
from google import genai
from google.genai import errors as genai_errors

from backend.config import Settings
from backend.errors import GatewayError, NetworkFailure, ProviderFailure
from backend.prompts import build_contents, load_system_prompt

RETRYABLE_PROVIDER_STATUSES = {408, 429}


def classify_error(exc: BaseException) -> GatewayError:
    """Map an exception raised while calling the provider to a GatewayError."""
    if isinstance(exc, GatewayError):
        return exc

    if isinstance(exc, (httpx.TransportError, asyncio.TimeoutError, ConnectionError)):
        return NetworkFailure(f"Could not reach the AI provider: {exc}", cause=exc)

    if isinstance(exc, genai_errors.APIError):
        status = exc.code
        retryable = status in RETRYABLE_PROVIDER_STATUSES or (status is not None and status >= 500)
        return ProviderFailure(
            f"AI provider returned an error ({status}): {exc.message or exc.status}",
            provider_status=status,
            retryable=retryable,
            cause=exc,
        )

    return ProviderFailure(f"AI provider call failed: {exc}", cause=exc)


class ReviewGateway:
    """Forwards code snippets to Gemini with the configured system instruction."""

    def __init__(
        self,
        api_key: str,
        model: str,
        system_prompt: str,
        max_retries: int = 2,
        backoff_seconds: float = 1.0,
        timeout_ms: Optional[int] = None,
    ):
        http_options = None
        if timeout_ms:
            http_options = genai.types.HttpOptions(timeout=timeout_ms)

        self._client = genai.Client(api_key=api_key or None, http_options=http_options)
        self.model = model
        self.system_prompt = system_prompt
        self.max_retries = max(0, max_retries)
        self.backoff_seconds = backoff_seconds

    @classmethod
    def from_settings(cls, settings: Settings) -> "ReviewGateway":
        return cls(
            api_key=settings.GEMINI_API_KEY,
            model=settings.GEMINI_MODEL,
            system_prompt=load_system_prompt(settings),
            max_retries=settings.PROVIDER_MAX_RETRIES,
            backoff_seconds=settings.PROVIDER_BACKOFF_SECONDS,
            timeout_ms=settings.PROVIDER_TIMEOUT_MS,
        )

    async def _generate(self, code: str) -> str:
        response = await self._client.aio.models.generate_content(
            model=self.model,
            contents=build_contents(code),
            config=genai.types.GenerateContentConfig(
                system_instruction=self.system_prompt,
                response_mime_type="text/plain",
            ),
        )

        text = response.text
        if text is None:
            raise ProviderFailure("AI provider returned an empty response")
        return text

    async def review(self, code: str) -> str:
        """
        Review a snippet and return the provider's markdown text verbatim.

        Retryable failures are repeated up to ``max_retries`` times with
        exponential backoff. Anything else is raised on the first attempt.

        Raises:
            NetworkFailure: provider unreachable after all attempts.
            ProviderFailure: provider error or malformed response.
        """
        attempt = 0
        while True:
            try:
                return await self._generate(code)
            except Exception as e:
                error = classify_error(e)
                logging.error(
                    f"Gemini call failed (attempt {attempt + 1}/{self.max_retries + 1}): "
                    f"{error.kind}: {error.message}"
                )
                if not error.retryable or attempt >= self.max_retries:
                    if error is e:
                        raise
                    raise error from e

            delay = self.backoff_seconds * (2 ** attempt)
            attempt += 1
            if delay > 0:
                await asyncio.sleep(delay)
