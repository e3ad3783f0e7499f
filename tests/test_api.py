from fastapi.testclient import TestClient

from writing_assistant.services.prompts import ActionKind
from tests.conftest import FakeProvider


def post_prompt(client: TestClient, **overrides):
    body = {"topicType": "Debate", "promptType": "outline", "question": "Is X good?", "content": ""}
    body.update(overrides)
    return client.post("/api/prompt", json=body)


def test_health_check(client: TestClient) -> None:
    response = client.get("/")
    assert response.status_code == 200
    assert "message" in response.json()


def test_prompt_result_is_trimmed(client: TestClient, provider: FakeProvider) -> None:
    provider.respond_with(200, json={"choices": [{"text": " Hello world \n"}]})
    response = post_prompt(client)
    assert response.status_code == 200
    assert response.json() == {"result": "Hello world"}
    assert provider.payloads[0]["prompt"] == (
        "Act as a debater. Write an essay outline in response to the following debate question: Is X good?"
    )


def test_temperature_defaults_to_one(client: TestClient, provider: FakeProvider) -> None:
    post_prompt(client, temperature=None)
    assert provider.payloads[0]["temperature"] == 1.0


def test_missing_content_is_accepted(client: TestClient, provider: FakeProvider) -> None:
    response = client.post("/api/prompt", json={"topicType": "Debate", "promptType": "improve", "question": "Q"})
    assert response.status_code == 200
    assert provider.payloads[0]["prompt"] == "Improve/Perfect this essay: \n"


def test_unknown_prompt_type(client: TestClient, provider: FakeProvider) -> None:
    response = post_prompt(client, promptType="not_a_real_action")
    assert response.status_code == 400
    assert response.json() == {"error": {"message": "Invalid prompt"}}
    assert provider.requests == []


def test_blank_question(client: TestClient, provider: FakeProvider) -> None:
    response = post_prompt(client, question="   ")
    assert response.status_code == 400
    assert response.json() == {"error": {"message": "Invalid args"}}
    assert provider.requests == []


def test_null_fields_count_as_blank(client: TestClient, provider: FakeProvider) -> None:
    response = post_prompt(client, topicType=None)
    assert response.status_code == 400
    assert response.json() == {"error": {"message": "Invalid args"}}


def test_malformed_body(client: TestClient, provider: FakeProvider) -> None:
    response = client.post("/api/prompt", content=b"not json", headers={"Content-Type": "application/json"})
    assert response.status_code == 400
    assert response.json() == {"error": {"message": "Invalid args"}}

    response = post_prompt(client, question=["a", "list"])
    assert response.status_code == 400
    assert provider.requests == []


def test_unconfigured_provider_always_500(unconfigured_client: TestClient, provider: FakeProvider) -> None:
    for response in (
        post_prompt(unconfigured_client),
        post_prompt(unconfigured_client, question=""),
        post_prompt(unconfigured_client, promptType="not_a_real_action"),
        unconfigured_client.post("/api/prompt", content=b"{", headers={"Content-Type": "application/json"}),
    ):
        assert response.status_code == 500
        assert "not configured" in response.json()["error"]["message"]
    assert provider.requests == []


def test_provider_error_relayed_verbatim(client: TestClient, provider: FakeProvider) -> None:
    provider.respond_with(429, json={"error": {"message": "rate limited"}})
    response = post_prompt(client)
    assert response.status_code == 429
    assert response.json() == {"error": {"message": "rate limited"}}


def test_action_catalog(client: TestClient) -> None:
    response = client.get("/api/actions")
    assert response.status_code == 200
    data = response.json()
    assert data["topicTypes"] == ["IELTS Writing", "IELTS Speaking", "Debate"]
    assert {a["promptType"] for a in data["actions"]} == {k.value for k in ActionKind}
    conclusion = next(a for a in data["actions"] if a["promptType"] == "conclusion")
    assert conclusion == {
        "promptType": "conclusion",
        "name": "Conclusion",
        "tooltip": "Write a short conclusion paragraph for this half-done essay",
        "group": "generate",
        "requireContent": True,
    }
