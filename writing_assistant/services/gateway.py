# Validates prompt requests and forwards them to the completion provider
import logging
from dataclasses import dataclass
from typing import Optional

import httpx

from writing_assistant.core.config import Settings
from writing_assistant.core.errors import (
    INVALID_ARGS_MESSAGE,
    INVALID_PROMPT_MESSAGE,
    NOT_CONFIGURED_MESSAGE,
    ConfigurationError,
    ValidationError,
)
from writing_assistant.services.llm import LLMService
from writing_assistant.services.prompts import build_prompt

logger = logging.getLogger(__name__)

DEFAULT_TEMPERATURE = 1.0


@dataclass
class CompletionResult:
    text: str


def is_blank(value: Optional[str]) -> bool:
    return not value or not value.strip()


class CompletionGateway:
    """Turns one prompt request into one completion call.

    Every rejection happens before the provider is contacted. Provider
    failures surface as ``UpstreamError`` from ``LLMService``.
    """

    def __init__(self, settings: Settings, transport: Optional[httpx.AsyncBaseTransport] = None):
        self.configured = settings.provider_configured
        self.llm_service = LLMService(settings, transport=transport)

    def check_ready(self) -> None:
        if not self.configured:
            raise ConfigurationError(NOT_CONFIGURED_MESSAGE)

    def prepare(self, topic_type: str, prompt_type: str, question: str, content: str) -> str:
        self.check_ready()
        if is_blank(question) or is_blank(topic_type) or is_blank(prompt_type):
            logger.info("Rejected prompt request with blank arguments")
            raise ValidationError(INVALID_ARGS_MESSAGE)
        prompt = build_prompt(topic_type, prompt_type, question, content or "")
        if is_blank(prompt):
            logger.info("Rejected unknown prompt type %r", prompt_type)
            raise ValidationError(INVALID_PROMPT_MESSAGE)
        return prompt

    async def complete(
        self,
        topic_type: str,
        prompt_type: str,
        question: str,
        content: str = "",
        temperature: Optional[float] = None,
    ) -> CompletionResult:
        prompt = self.prepare(topic_type, prompt_type, question, content)
        logger.debug("Prompt for %s: %s", prompt_type, prompt)
        if temperature is None:
            temperature = DEFAULT_TEMPERATURE
        text = await self.llm_service.call_completion_api(prompt, temperature)
        return CompletionResult(text=text)
