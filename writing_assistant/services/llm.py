# OpenAI text-completion API service
import logging
from typing import Optional

import httpx

from writing_assistant.core.config import Settings
from writing_assistant.core.errors import UpstreamError

logger = logging.getLogger(__name__)


class LLMService:
    def __init__(self, settings: Settings, transport: Optional[httpx.AsyncBaseTransport] = None):
        self.url = settings.completions_url
        self.model = settings.model
        self.max_tokens = settings.max_tokens
        self.timeout = httpx.Timeout(settings.timeout)
        self.headers = {
            "Content-Type": "application/json",
            "Authorization": f"Bearer {settings.api_key}",
        }
        self.transport = transport

    async def call_completion_api(self, prompt: str, temperature: float) -> str:
        """Send one completion request and return the first choice text as-is."""
        data = {
            "model": self.model,
            "prompt": prompt,
            "temperature": temperature,
            "max_tokens": self.max_tokens,
        }
        async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport, follow_redirects=True) as client:
            try:
                response = await client.post(self.url, headers=self.headers, json=data)
                response.raise_for_status()
            except httpx.HTTPStatusError as e:
                body = _error_body(e.response)
                logger.error("Completion provider returned %s: %s", e.response.status_code, body)
                raise UpstreamError(status_code=e.response.status_code, body=body) from e
            except httpx.HTTPError as e:
                logger.error("Error with completion API request: %s", e)
                raise UpstreamError() from e

        try:
            result = response.json()
            text = result["choices"][0]["text"]
            if not isinstance(text, str):
                raise TypeError("completion text is not a string")
            return text
        except (ValueError, KeyError, IndexError, TypeError) as e:
            logger.error("Unexpected completion payload: %s", response.text)
            raise UpstreamError() from e


def _error_body(response: httpx.Response):
    try:
        return response.json()
    except ValueError:
        return {"error": {"message": response.text}}
