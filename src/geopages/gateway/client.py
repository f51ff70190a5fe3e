"""Upstream content API client.

Async HTTP client that never raises past its boundary: every transport or
HTTP failure becomes an ApiFailure result.
"""

import json
import logging
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

import httpx

from geopages.gateway.cache import NO_CACHE, CachePolicy

logger = logging.getLogger(__name__)

T = TypeVar("T")

# Upstream error bodies can be whole HTML pages
MAX_ERROR_BODY = 500


@dataclass(frozen=True)
class ApiSuccess(Generic[T]):
    """Successful upstream call. ``data`` is None for an empty or non-JSON body."""

    data: T
    policy: CachePolicy = NO_CACHE
    success: bool = True


@dataclass(frozen=True)
class ApiFailure:
    """Failed upstream call."""

    error: str
    status: int | None = None
    policy: CachePolicy = NO_CACHE
    success: bool = False


ApiResult = ApiSuccess[Any] | ApiFailure


class ContentClient:
    """Async HTTP client for the upstream content API."""

    def __init__(self, client: httpx.AsyncClient, base_url: str) -> None:
        """Initialize content client.

        Args:
            client: httpx AsyncClient used for all requests
            base_url: API base URL ending with /api (e.g., https://api.example.com/api)
        """
        self.client = client
        self.base_url = base_url.rstrip("/")

    def url_for(self, endpoint: str) -> str:
        """Join an endpoint onto the base URL."""
        clean = endpoint if endpoint.startswith("/") else f"/{endpoint}"
        return f"{self.base_url}{clean}"

    async def get(
        self,
        endpoint: str,
        policy: CachePolicy = NO_CACHE,
        params: dict[str, str] | None = None,
    ) -> ApiResult:
        """GET an endpoint and decode its JSON body.

        Args:
            endpoint: Path below the base URL, already percent-encoded
            policy: Cache policy to attach to the result
            params: Optional query parameters

        Returns:
            ApiSuccess with decoded body, or ApiFailure
        """
        return await self._request("GET", endpoint, policy, params=params)

    async def post(
        self,
        endpoint: str,
        payload: dict[str, Any],
    ) -> ApiResult:
        """POST a JSON payload and decode the JSON response."""
        return await self._request("POST", endpoint, NO_CACHE, json_body=payload)

    async def _request(
        self,
        method: str,
        endpoint: str,
        policy: CachePolicy,
        *,
        params: dict[str, str] | None = None,
        json_body: dict[str, Any] | None = None,
    ) -> ApiResult:
        url = self.url_for(endpoint)
        logger.debug(f"[API {method}] {url}")

        try:
            response = await self.client.request(
                method,
                url,
                params=params,
                json=json_body,
                headers={"Accept": "application/json"},
            )
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            status = e.response.status_code
            logger.warning(f"API error {status} for {url}")
            return ApiFailure(error=_error_message(e.response), status=status)
        except httpx.HTTPError as e:
            logger.warning(f"API request to {url} failed: {e}")
            return ApiFailure(error=str(e) or type(e).__name__)

        return ApiSuccess(data=_decode_body(response, url), policy=policy)


def _decode_body(response: httpx.Response, url: str) -> Any:
    text = response.text
    if not text.strip():
        logger.debug(f"Empty response from {url}")
        return None

    try:
        return json.loads(text)
    except json.JSONDecodeError:
        content_type = response.headers.get("content-type", "")
        logger.warning(f"Non-JSON response from {url} (Content-Type: {content_type})")
        return None


def _error_message(response: httpx.Response) -> str:
    """Prefer a structured ``{"error": ...}`` body, else a truncated raw body."""
    status = response.status_code
    try:
        payload = response.json()
    except ValueError:
        payload = None

    if isinstance(payload, dict) and isinstance(payload.get("error"), str):
        return payload["error"]

    body = response.text or response.reason_phrase
    if len(body) > MAX_ERROR_BODY:
        body = body[:MAX_ERROR_BODY] + "..."
    return f"API error {status}: {body}"
