# This project was developed with assistance from AI tools.
"""HTTP client for the loan support API.

Wraps ``httpx.Client`` with the base URL and bearer token from an explicit
``ClientSettings`` and turns HTTP failures into ``ApiError`` messages that
can be shown to a user as-is.
"""

import logging
from typing import Any

import httpx

from .storage import DEFAULT_API_BASE, ClientSettings

logger = logging.getLogger(__name__)

API_PREFIX = "/api/v1"


class ApiError(Exception):
    """A failed API call with a user-facing message.

    ``status_code`` is None when the request never got a response
    (connection refused, timeout).
    """

    def __init__(self, message: str, status_code: int | None = None):
        self.message = message
        self.status_code = status_code
        super().__init__(message)


def _error_text(response: httpx.Response) -> str:
    """Prefer the problem-details ``detail`` over the raw body."""
    try:
        payload = response.json()
    except ValueError:
        return response.text
    if isinstance(payload, dict) and payload.get("detail"):
        return str(payload["detail"])
    return response.text


def _error_for_response(response: httpx.Response) -> ApiError:
    """Map an unsuccessful response to a user-facing ApiError."""
    code = response.status_code
    body = _error_text(response)
    if code in (401, 403):
        return ApiError("Invalid token. Configure it in Settings.", code)
    if code == 404:
        return ApiError("Endpoint not found. Check backend routes or update API prefix.", code)
    if code >= 500:
        return ApiError(f"Server error: {body or response.reason_phrase}", code)
    return ApiError(body or f"Request failed: {response.reason_phrase}", code)


class LoanSupportClient:
    """Synchronous client for the ``/api/v1`` endpoints.

    Usage:
        with LoanSupportClient(get_settings()) as client:
            client.calculate_eligibility({...})
    """

    def __init__(
        self,
        settings: ClientSettings,
        *,
        timeout: float = 30.0,
        transport: httpx.BaseTransport | None = None,
    ):
        self.settings = settings
        base = (settings.api_base or DEFAULT_API_BASE).rstrip("/")
        self._http = httpx.Client(
            base_url=f"{base}{API_PREFIX}",
            headers=self._headers(),
            timeout=timeout,
            transport=transport,
        )

    def _headers(self) -> dict[str, str]:
        headers = {"Content-Type": "application/json"}
        if self.settings.bearer_token:
            headers["Authorization"] = f"Bearer {self.settings.bearer_token}"
        return headers

    def close(self) -> None:
        self._http.close()

    def __enter__(self) -> "LoanSupportClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def _request(self, method: str, endpoint: str, json: Any = None) -> dict:
        logger.debug("%s %s%s", method, self._http.base_url, endpoint)
        try:
            response = self._http.request(method, endpoint, json=json)
        except httpx.TimeoutException as exc:
            raise ApiError(f"Request timed out: {self._http.base_url}{endpoint}") from exc
        except httpx.HTTPError as exc:
            raise ApiError(f"Could not reach API at {self._http.base_url}: {exc}") from exc

        if not response.is_success:
            raise _error_for_response(response)
        try:
            return response.json()
        except ValueError as exc:
            raise ApiError(
                f"Invalid JSON response from {response.url}. "
                "Check the API base URL in Settings.",
                response.status_code,
            ) from exc

    def check_health(self) -> dict:
        return self._request("GET", "/health")

    def ingest_documents(self, path: str | None = None) -> dict:
        """Trigger ingestion; the server uses its default directory when ``path`` is empty."""
        body = {"path": path} if path else {}
        return self._request("POST", "/ingest", json=body)

    def ask_question(self, query: str, top_k: int = 5) -> dict:
        return self._request("POST", "/chat/ask", json={"query": query, "top_k": top_k})

    def calculate_eligibility(self, data: dict[str, Any]) -> dict:
        return self._request("POST", "/eligibility/calculate", json=data)
