# Errors raised while serving a prompt request
from typing import Any, Optional

NOT_CONFIGURED_MESSAGE = "OpenAI API key not configured, please follow instructions in README.md"
INVALID_ARGS_MESSAGE = "Invalid args"
INVALID_PROMPT_MESSAGE = "Invalid prompt"
UPSTREAM_FAILED_MESSAGE = "An error occurred during your request."


class WritingAssistantError(Exception):
    status_code = 500

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code

    def to_body(self) -> Any:
        return {"error": {"message": self.message}}


class ConfigurationError(WritingAssistantError):
    status_code = 500


class ValidationError(WritingAssistantError):
    status_code = 400


class UpstreamError(WritingAssistantError):
    """Completion provider failure.

    When the provider answered with its own error response, ``body`` holds
    that response and is relayed to the caller unchanged.
    """

    def __init__(self, message: str = UPSTREAM_FAILED_MESSAGE, status_code: int = 500, body: Any = None):
        super().__init__(message, status_code)
        self.body = body

    def to_body(self) -> Any:
        if self.body is not None:
            return self.body
        return super().to_body()
