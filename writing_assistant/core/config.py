# Environment-driven settings for the completion provider
import logging
import os
from typing import Optional

import pydantic
from dotenv import load_dotenv
from pydantic import BaseModel, Field, field_validator

from writing_assistant.core.errors import ConfigurationError

DEFAULT_COMPLETIONS_URL = "https://api.openai.com/v1/completions"
DEFAULT_COMPLETION_MODEL = "gpt-3.5-turbo-instruct"
DEFAULT_MAX_TOKENS = 550

# Settings field -> environment variable
ENV_VARS = {
    "api_key": "OPENAI_API_KEY",
    "completions_url": "OPENAI_COMPLETIONS_URL",
    "model": "OPENAI_COMPLETION_MODEL",
    "max_tokens": "OPENAI_MAX_TOKENS",
    "timeout": "OPENAI_TIMEOUT",
    "log_level": "LOG_LEVEL",
}


class Settings(BaseModel):
    api_key: Optional[str] = None
    completions_url: str = DEFAULT_COMPLETIONS_URL
    model: str = DEFAULT_COMPLETION_MODEL
    max_tokens: int = Field(default=DEFAULT_MAX_TOKENS, gt=0)
    timeout: float = Field(default=60, gt=0)
    log_level: str = "INFO"

    @field_validator("log_level")
    @classmethod
    def known_log_level(cls, v: str) -> str:
        level = v.strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"unknown log level {v!r}")
        return level

    @property
    def provider_configured(self) -> bool:
        return bool(self.api_key and self.api_key.strip())


def get_settings() -> Settings:
    """Read settings from the environment, loading .env first if present.

    Raises ``ConfigurationError`` naming the offending variables when a
    value cannot be parsed.
    """
    load_dotenv()
    values = {field: os.getenv(var) for field, var in ENV_VARS.items() if os.getenv(var) is not None}
    try:
        return Settings(**values)
    except pydantic.ValidationError as e:
        problems = []
        for error in e.errors():
            field = error["loc"][0] if error["loc"] else ""
            problems.append(f"{ENV_VARS.get(field, field)}: {error['msg']}")
        raise ConfigurationError("Invalid environment configuration: " + "; ".join(problems)) from e
