import json
from collections.abc import Callable
from typing import Any

import httpx
import pytest
from fastapi.testclient import TestClient

from writing_assistant.core.config import Settings
from writing_assistant.main import create_app

TEST_URL = "https://llm.test/v1/completions"


class FakeProvider:
    """Records outgoing completion requests and answers with a canned response."""

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self.responder: Callable[[httpx.Request], httpx.Response] = lambda req: httpx.Response(
            200, json={"choices": [{"text": "\n\nok"}]}
        )

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self.responder(request)

    @property
    def payloads(self) -> list[dict[str, Any]]:
        return [json.loads(req.content) for req in self.requests]

    def respond_with(self, status_code: int, **kwargs: Any) -> None:
        self.responder = lambda req: httpx.Response(status_code, **kwargs)


@pytest.fixture
def provider() -> FakeProvider:
    return FakeProvider()


@pytest.fixture
def transport(provider: FakeProvider) -> httpx.MockTransport:
    return httpx.MockTransport(provider)


@pytest.fixture
def settings() -> Settings:
    return Settings(api_key="sk-test", completions_url=TEST_URL, model="test-model")


@pytest.fixture
def client(settings: Settings, transport: httpx.MockTransport) -> TestClient:
    return TestClient(create_app(settings, transport=transport))


@pytest.fixture
def unconfigured_client(transport: httpx.MockTransport) -> TestClient:
    return TestClient(create_app(Settings(api_key=None, completions_url=TEST_URL), transport=transport))
