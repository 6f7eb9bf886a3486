"""Client for the Anthropic Messages API."""
import logging
from typing import Any, Dict, Optional

import httpx

from src.app.errors import ConfigurationError, MalformedUpstreamResponse, UpstreamError
from src.app.settings import settings

logger = logging.getLogger(__name__)


class AnthropicClient:
    """Thin wrapper around one POST to ``/v1/messages``.

    No retries: a non-success status is surfaced to the caller as-is.
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        base_url: Optional[str] = None,
        model: Optional[str] = None,
        max_tokens: Optional[int] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        self.api_key = api_key
        self.base_url = base_url or settings.anthropic_api_url
        self.model = model or settings.model_name
        self.max_tokens = max_tokens or settings.max_tokens
        self.timeout = timeout or settings.request_timeout
        self.client = httpx.Client(timeout=self.timeout, transport=transport)

    @classmethod
    def from_settings(cls) -> "AnthropicClient":
        return cls(api_key=settings.anthropic_api_key)

    def _headers(self) -> Dict[str, str]:
        return {
            "content-type": "application/json",
            "x-api-key": self.api_key or "",
            "anthropic-version": settings.anthropic_version,
        }

    def complete(self, prompt: str) -> str:
        """
        Send a single user message and return the generated text.

        Args:
            prompt: Message content, forwarded verbatim

        Returns:
            Text of the first content block

        Raises:
            ConfigurationError: no API key configured
            UpstreamError: the API answered with a non-success status
            MalformedUpstreamResponse: the success body has no text block
        """
        if not self.api_key:
            raise ConfigurationError()

        payload = {
            "model": self.model,
            "max_tokens": self.max_tokens,
            "messages": [{"role": "user", "content": prompt}],
        }
        response = self.client.post(self.base_url, json=payload, headers=self._headers())
        logger.info("Anthropic API response status: %s", response.status_code)

        if not response.is_success:
            logger.error("Anthropic API error: %s", response.text)
            raise UpstreamError(response.status_code, response.text)

        try:
            data = response.json()
        except ValueError:
            logger.error("Anthropic API returned a non-JSON body")
            raise MalformedUpstreamResponse()
        return extract_text(data)

    def close(self):
        """Close the HTTP client."""
        self.client.close()


def extract_text(data: Any) -> str:
    """Pull ``content[0].text`` out of a Messages API response."""
    content = data.get("content") if isinstance(data, dict) else None
    first = content[0] if isinstance(content, list) and content else None
    text = first.get("text") if isinstance(first, dict) else None
    if not isinstance(text, str) or not text:
        logger.error("Unexpected response structure: %s", data)
        raise MalformedUpstreamResponse()
    return text
