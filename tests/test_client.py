# This project was developed with assistance from AI tools.
"""Tests for the HTTP API client."""

import json

import httpx
import pytest

from loan_support.client.api import ApiError, LoanSupportClient
from loan_support.client.storage import ClientSettings


def _client(handler, **settings) -> LoanSupportClient:
    cfg = ClientSettings(**{"api_base": "http://api.test", **settings})
    return LoanSupportClient(cfg, transport=httpx.MockTransport(handler))


class Recorder:
    """MockTransport handler that records requests and returns a fixed response."""

    def __init__(self, status_code: int = 200, payload=None, text: str | None = None):
        self.status_code = status_code
        self.payload = {} if payload is None else payload
        self.text = text
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.text is not None:
            return httpx.Response(self.status_code, text=self.text)
        return httpx.Response(self.status_code, json=self.payload)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]


# ---------------------------------------------------------------------------
# Request building
# ---------------------------------------------------------------------------


def test_urls_are_prefixed():
    rec = Recorder(payload={"status": "ok"})
    with _client(rec) as client:
        assert client.check_health() == {"status": "ok"}
    assert str(rec.last.url) == "http://api.test/api/v1/health"
    assert rec.last.method == "GET"


def test_trailing_slash_on_base_is_ignored():
    rec = Recorder(payload={"status": "ok"})
    with _client(rec, api_base="http://api.test/") as client:
        client.check_health()
    assert str(rec.last.url) == "http://api.test/api/v1/health"


def test_empty_base_falls_back_to_default():
    rec = Recorder(payload={"status": "ok"})
    with _client(rec, api_base="") as client:
        client.check_health()
    assert str(rec.last.url) == "http://localhost:5000/api/v1/health"


def test_bearer_token_attached_when_set():
    rec = Recorder()
    with _client(rec, bearer_token="secret-token") as client:
        client.check_health()
    assert rec.last.headers["Authorization"] == "Bearer secret-token"
    assert rec.last.headers["Content-Type"] == "application/json"


def test_no_authorization_header_without_token():
    rec = Recorder()
    with _client(rec) as client:
        client.check_health()
    assert "Authorization" not in rec.last.headers


def test_ingest_without_path_sends_empty_object():
    rec = Recorder(payload={"status": "ok", "ingested": {"pages": 60, "chunks": 700}})
    with _client(rec) as client:
        result = client.ingest_documents()
    assert result["ingested"]["pages"] == 60
    assert rec.last.method == "POST"
    assert str(rec.last.url).endswith("/api/v1/ingest")
    assert json.loads(rec.last.content) == {}


def test_ingest_with_path():
    rec = Recorder(payload={"status": "ok", "ingested": {"pages": 1, "chunks": 1}})
    with _client(rec) as client:
        client.ingest_documents("some/dir")
    assert json.loads(rec.last.content) == {"path": "some/dir"}


def test_ask_sends_query_and_top_k():
    rec = Recorder(payload={"answer": "42"})
    with _client(rec) as client:
        assert client.ask_question("why?") == {"answer": "42"}
    assert json.loads(rec.last.content) == {"query": "why?", "top_k": 5}
    assert str(rec.last.url).endswith("/api/v1/chat/ask")


def test_calculate_eligibility_posts_payload():
    payload = {"monthly_income": 8500, "monthly_obligations": 1200, "roi": 7.25,
               "tenure_months": 360}
    rec = Recorder(payload={"emi": 2200, "foir": 40.0, "eligible_loan_amount": 359000})
    with _client(rec) as client:
        result = client.calculate_eligibility(payload)
    assert result["emi"] == 2200
    assert json.loads(rec.last.content) == payload
    assert str(rec.last.url).endswith("/api/v1/eligibility/calculate")


# ---------------------------------------------------------------------------
# Error mapping
# ---------------------------------------------------------------------------


@pytest.mark.parametrize("status_code", [401, 403])
def test_auth_errors(status_code):
    with _client(Recorder(status_code=status_code)) as client:
        with pytest.raises(ApiError) as exc_info:
            client.check_health()
    assert exc_info.value.status_code == status_code
    assert exc_info.value.message == "Invalid token. Configure it in Settings."


def test_not_found():
    with _client(Recorder(status_code=404)) as client:
        with pytest.raises(ApiError, match="Endpoint not found"):
            client.check_health()


def test_server_error_includes_body():
    with _client(Recorder(status_code=502, text="upstream down")) as client:
        with pytest.raises(ApiError) as exc_info:
            client.ask_question("q")
    assert exc_info.value.message == "Server error: upstream down"


def test_server_error_without_body_uses_reason():
    with _client(Recorder(status_code=500, text="")) as client:
        with pytest.raises(ApiError) as exc_info:
            client.ask_question("q")
    assert exc_info.value.message == "Server error: Internal Server Error"


def test_bad_request_prefers_problem_detail():
    rec = Recorder(status_code=400, payload={
        "title": "Bad Request",
        "status": 400,
        "detail": "Missing required fields: tenure_months",
    })
    with _client(rec) as client:
        with pytest.raises(ApiError) as exc_info:
            client.calculate_eligibility({})
    assert exc_info.value.status_code == 400
    assert exc_info.value.message == "Missing required fields: tenure_months"


def test_client_error_without_body():
    with _client(Recorder(status_code=409, text="")) as client:
        with pytest.raises(ApiError, match="Request failed: Conflict"):
            client.check_health()


def test_connection_failure():
    def handler(request):
        raise httpx.ConnectError("connection refused", request=request)

    with _client(handler) as client:
        with pytest.raises(ApiError) as exc_info:
            client.check_health()
    assert exc_info.value.status_code is None
    assert "Could not reach API" in exc_info.value.message


def test_timeout():
    def handler(request):
        raise httpx.ReadTimeout("slow", request=request)

    with _client(handler) as client:
        with pytest.raises(ApiError, match="timed out"):
            client.check_health()


def test_non_json_success_body():
    rec = Recorder(status_code=200, text="<html>not the API</html>")
    with _client(rec) as client:
        with pytest.raises(ApiError) as exc_info:
            client.check_health()
    assert exc_info.value.status_code == 200
    assert "Invalid JSON response" in exc_info.value.message
