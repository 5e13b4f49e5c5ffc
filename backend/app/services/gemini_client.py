"""
Gemini Client — raw REST calls to the generateContent endpoint via httpx.

Responsibilities:
  • Build the generateContent request body (prompt + generation config)
  • POST it to the configured URL with the API key appended
  • Enforce the request timeout
  • Turn every transport, timeout or HTTP error into an {"error": ...} envelope
"""

from __future__ import annotations

import logging
from typing import Any

import httpx

logger = logging.getLogger(__name__)


class GeminiClient:
    """Thin async client for a single generateContent call per request."""

    def __init__(
        self,
        *,
        api_url: str,
        api_key: str,
        timeout: float = 30.0,
        temperature: float = 0.7,
        max_output_tokens: int = 2048,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.api_url = api_url
        self.api_key = api_key
        self.timeout = timeout
        self.temperature = temperature
        self.max_output_tokens = max_output_tokens
        self._transport = transport

    @property
    def full_url(self) -> str:
        return f"{self.api_url}{self.api_key}"

    def build_request_body(self, prompt: str) -> dict[str, Any]:
        return {
            "contents": [{"parts": [{"text": prompt}]}],
            "generationConfig": {
                "temperature": self.temperature,
                "maxOutputTokens": self.max_output_tokens,
            },
        }

    async def generate(self, prompt: str) -> dict[str, Any]:
        """
        Send the prompt and return the decoded JSON reply.

        Never raises: on failure the reply is replaced by {"error": <message>},
        so callers must be ready for that shape.
        """
        body = self.build_request_body(prompt)
        logger.info(
            f"Gemini call: prompt={len(prompt)} chars temp={self.temperature} "
            f"tokens={self.max_output_tokens} timeout={self.timeout}s"
        )

        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
                resp = await client.post(
                    self.full_url,
                    headers={"Content-Type": "application/json"},
                    json=body,
                )
                resp.raise_for_status()
                data = resp.json()
        except (httpx.HTTPError, ValueError) as e:
            return self._error_envelope(e)

        if not isinstance(data, dict):
            return self._error_envelope(
                ValueError(f"Expected a JSON object from Gemini, got {type(data).__name__}")
            )

        logger.info(f"Gemini response received (status={resp.status_code})")
        return data

    @staticmethod
    def _error_envelope(error: Exception) -> dict[str, Any]:
        """Fallback value for a failed call. httpx timeouts often have an empty message."""
        message = str(error) or type(error).__name__
        logger.error(f"Error calling Gemini API: {message}")
        return {"error": message}
