import json

import httpx
import pytest
from fastapi.testclient import TestClient

from app.main import app
from app.services.gemini_client import GeminiClient
from app.utils.dependencies import get_gemini_client


RESUME = {
    "personalInfo": {"fullName": "Alex Kim", "email": "alex@example.com"},
    "summary": "Senior backend engineer with 5 years of Java.",
    "skills": ["Java", "Spring Boot", "PostgreSQL"],
    "experience": [
        {
            "jobTitle": "Senior Backend Engineer",
            "company": "Acme",
            "duration": "2019 - Present",
            "responsibility": ["Built payment APIs"],
        }
    ],
    "education": [{"degree": "BSc Computer Science", "university": "State University"}],
    "projects": [{"title": "Ledger", "description": "Double-entry ledger", "technologiesUsed": ["Java"]}],
}


def gemini_reply(text: str) -> dict:
    return {"candidates": [{"content": {"parts": [{"text": text}], "role": "model"}}]}


@pytest.fixture
def stub_upstream():
    """Install a GeminiClient whose transport is answered by the given handler."""
    seen: list[dict] = []

    def install(handler):
        def recording_handler(request: httpx.Request) -> httpx.Response:
            seen.append(json.loads(request.content))
            return handler(request)

        app.dependency_overrides[get_gemini_client] = lambda: GeminiClient(
            api_url="https://gemini.test/generate?key=",
            api_key="test-key",
            transport=httpx.MockTransport(recording_handler),
        )
        return seen

    yield install
    app.dependency_overrides.clear()


@pytest.fixture
def client():
    return TestClient(app)


def test_generate_returns_fenced_resume(client, stub_upstream):
    fenced = "<think>pick sections</think>\n```json\n" + json.dumps(RESUME) + "\n```"
    seen = stub_upstream(lambda request: httpx.Response(200, json=gemini_reply(fenced)))

    resp = client.post(
        "/api/v1/resume/generate",
        json={"userDescription": "Senior backend engineer, 5 years Java"},
    )

    assert resp.status_code == 200
    assert resp.json() == RESUME
    prompt = seen[0]["contents"][0]["parts"][0]["text"]
    assert "Senior backend engineer, 5 years Java" in prompt
    assert "{{userDescription}}" not in prompt


def test_generate_wraps_prose_reply(client, stub_upstream):
    stub_upstream(lambda request: httpx.Response(200, json=gemini_reply("Sorry, I can't help.")))

    resp = client.post("/api/v1/resume/generate", json={"userDescription": "x"})

    assert resp.status_code == 200
    assert resp.json() == {"response": "Sorry, I can't help."}


def test_upstream_failure_still_returns_200_with_error(client, stub_upstream):
    def handler(request):
        raise httpx.ConnectError("upstream unreachable", request=request)

    stub_upstream(handler)

    resp = client.post("/api/v1/resume/generate", json={"userDescription": "x"})

    assert resp.status_code == 200
    assert resp.json() == {"error": "upstream unreachable"}


def test_unexpected_upstream_shape_returns_empty_response(client, stub_upstream):
    stub_upstream(lambda request: httpx.Response(200, json={"promptFeedback": {"blockReason": "SAFETY"}}))

    resp = client.post("/api/v1/resume/generate", json={"userDescription": "x"})

    assert resp.status_code == 200
    assert resp.json() == {"response": ""}


def test_missing_description_is_rejected(client, stub_upstream):
    seen = stub_upstream(lambda request: httpx.Response(200, json=gemini_reply("{}")))

    resp = client.post("/api/v1/resume/generate", json={})

    assert resp.status_code == 422
    assert seen == []


def test_cors_allows_any_origin(client, stub_upstream):
    stub_upstream(lambda request: httpx.Response(200, json=gemini_reply('{"a": 1}')))

    resp = client.post(
        "/api/v1/resume/generate",
        json={"userDescription": "x"},
        headers={"Origin": "https://some-frontend.example"},
    )

    assert resp.status_code == 200
    assert resp.headers["access-control-allow-origin"] == "*"


def test_health_check(client):
    resp = client.get("/api/health")
    assert resp.status_code == 200
    assert resp.json()["status"] == "healthy"


def test_nan_in_model_reply_still_returns_200(client, stub_upstream):
    fenced = '```json\n{"gpa": NaN}\n```'
    stub_upstream(lambda request: httpx.Response(200, json=gemini_reply(fenced)))

    resp = client.post("/api/v1/resume/generate", json={"userDescription": "x"})

    assert resp.status_code == 200
    assert resp.json() == {"response": fenced}
