# FastAPI application factory
import logging
from typing import Optional

import httpx
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from writing_assistant.api.endpoints import router
from writing_assistant.core.config import Settings, get_settings
from writing_assistant.core.errors import INVALID_ARGS_MESSAGE, ValidationError, WritingAssistantError
from writing_assistant.services.gateway import CompletionGateway

logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None, transport: Optional[httpx.AsyncBaseTransport] = None) -> FastAPI:
    settings = settings or get_settings()
    logging.basicConfig(level=settings.log_level.upper())

    app = FastAPI(title="Writing Assistant")
    app.state.gateway = CompletionGateway(settings, transport=transport)
    if not settings.provider_configured:
        logger.warning("OPENAI_API_KEY is not set; every prompt request will fail with 500")

    @app.exception_handler(WritingAssistantError)
    async def writing_assistant_error_handler(request: Request, exc: WritingAssistantError):
        return JSONResponse(status_code=exc.status_code, content=exc.to_body())

    @app.exception_handler(RequestValidationError)
    async def request_validation_error_handler(request: Request, exc: RequestValidationError):
        # an unconfigured provider wins over a malformed body
        try:
            request.app.state.gateway.check_ready()
        except WritingAssistantError as e:
            return await writing_assistant_error_handler(request, e)
        logger.info("Rejected malformed request body: %s", exc.errors())
        return await writing_assistant_error_handler(request, ValidationError(INVALID_ARGS_MESSAGE))

    app.include_router(router)
    return app


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(create_app(), host="0.0.0.0", port=8000)
