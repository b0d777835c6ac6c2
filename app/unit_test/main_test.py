import pytest
from fastapi.testclient import TestClient

from app.di import knowledge_base, prompt_executor
from app.exceptions import FlowValidationError, ProviderError
from app.executor import PromptExecutor
from app.knowledge import KnowledgeBase
from app.main import app
from app.models import AnswerResponse, SummarizeResponse
from app.prompt_builder import TemplateId


class FakeExecutor(PromptExecutor):
    def __init__(self, output=None, error=None):
        self.output = output
        self.error = error
        self.calls = []

    async def execute(self, template_id, payload):
        self.calls.append((template_id, payload))
        if self.error is not None:
            raise self.error
        return self.output


@pytest.fixture
def kb_file(tmp_path):
    path = tmp_path / "knowledge-base.txt"
    path.write_text("K", encoding="utf-8")
    return path


@pytest.fixture
def make_client(kb_file):
    def _make(executor: PromptExecutor, kb_path=None) -> TestClient:
        app.dependency_overrides[prompt_executor] = lambda: executor
        app.dependency_overrides[knowledge_base] = lambda: KnowledgeBase(kb_path or kb_file)
        return TestClient(app)

    yield _make
    app.dependency_overrides.clear()


def test_summarize_endpoint(make_client):
    executor = FakeExecutor(output=SummarizeResponse(website_summary="Acme in short."))

    with make_client(executor) as client:
        response = client.post("/flows/summarize", json={"websiteContent": "Welcome"})

    assert response.status_code == 200
    assert response.json() == {"websiteSummary": "Acme in short."}
    template_id, payload = executor.calls[0]
    assert template_id == TemplateId.SUMMARIZE
    assert payload.website_content == "Welcome"


def test_answer_endpoint_prefixes_knowledge_base(make_client):
    executor = FakeExecutor(output=AnswerResponse(answer="We offer training."))

    with make_client(executor) as client:
        response = client.post("/flows/answer", json={"question": "Q", "websiteContent": "P"})

    assert response.status_code == 200
    assert response.json() == {"answer": "We offer training."}
    _, payload = executor.calls[0]
    assert payload.website_content == "K P"
    assert payload.question == "Q"


def test_answer_endpoint_rejects_missing_question(make_client):
    executor = FakeExecutor(output=AnswerResponse(answer="unused"))

    with make_client(executor) as client:
        response = client.post("/flows/answer", json={"websiteContent": "P"})

    assert response.status_code == 422
    assert executor.calls == []


def test_provider_failure_maps_to_bad_gateway(make_client):
    executor = FakeExecutor(error=ProviderError("Model provider call failed: timeout"))

    with make_client(executor) as client:
        response = client.post("/flows/summarize", json={"websiteContent": "Welcome"})

    assert response.status_code == 502
    assert response.json() == {"detail": "Model provider call failed: timeout"}


def test_output_validation_failure_maps_to_422(make_client):
    executor = FakeExecutor(error=FlowValidationError("Invalid output for AnswerResponse"))

    with make_client(executor) as client:
        response = client.post("/flows/answer", json={"question": "Q", "websiteContent": "P"})

    assert response.status_code == 422
    assert response.json()["detail"] == "Invalid output for AnswerResponse"


def test_missing_knowledge_base_maps_to_server_error(make_client, tmp_path):
    executor = FakeExecutor(output=AnswerResponse(answer="unused"))

    with make_client(executor, kb_path=tmp_path / "missing.txt") as client:
        response = client.post("/flows/answer", json={"question": "Q", "websiteContent": "P"})

    assert response.status_code == 500
    assert "knowledge base" in response.json()["detail"]
    assert executor.calls == []


def test_health():
    with TestClient(app) as client:
        response = client.get("/health")
    assert response.json() == {"status": "ok"}


def test_undecodable_knowledge_base_returns_json_error(make_client, tmp_path):
    kb_path = tmp_path / "knowledge-base.txt"
    kb_path.write_bytes(b"\xff\xfe bad")
    executor = FakeExecutor(output=AnswerResponse(answer="unused"))

    with make_client(executor, kb_path=kb_path) as client:
        response = client.post("/flows/answer", json={"question": "Q", "websiteContent": "P"})

    assert response.status_code == 500
    assert response.headers["content-type"].startswith("application/json")
    assert "knowledge base" in response.json()["detail"]
