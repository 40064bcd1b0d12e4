"""Async HTTP client for the record search API."""

from __future__ import annotations

import logging
from typing import Any

import httpx

from procurement_search.core.config import settings
from procurement_search.schemas.buyer import BuyersListResponse
from procurement_search.schemas.record import RecordSearchRequest, RecordSearchResponse

logger = logging.getLogger(__name__)


class ApiClientError(Exception):
    """Non-2xx response from the API, carrying the server's error code."""

    def __init__(self, status_code: int, code: str, message: str):
        self.status_code = status_code
        self.code = code
        self.message = message
        super().__init__(f"{status_code} {code}: {message}")


class RecordsApiClient:
    def __init__(
        self,
        base_url: str | None = None,
        *,
        client: httpx.AsyncClient | None = None,
        timeout: float = 30.0,
    ):
        self._owns_client = client is None
        self.client = client or httpx.AsyncClient(
            base_url=base_url or settings.api_base_url, timeout=timeout
        )

    async def close(self):
        """Close the HTTP client if this instance created it."""
        if self._owns_client:
            await self.client.aclose()

    async def __aenter__(self) -> RecordsApiClient:
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.close()

    async def search_records(self, request: RecordSearchRequest) -> RecordSearchResponse:
        response = await self.client.post(
            "/records-search",
            json=request.model_dump(by_alias=True, exclude_none=True),
        )
        return RecordSearchResponse.model_validate(self._json(response))

    async def get_buyers(self) -> BuyersListResponse:
        response = await self.client.get("/buyers")
        return BuyersListResponse.model_validate(self._json(response))

    @staticmethod
    def _json(response: httpx.Response) -> Any:
        if response.is_success:
            return response.json()

        code, message = "HTTP_ERROR", response.reason_phrase
        try:
            body = response.json()
        except ValueError:
            body = None  # non-JSON error body; keep the status line
        error = body.get("error") if isinstance(body, dict) else None
        if isinstance(error, dict):
            code = error.get("code", code)
            message = error.get("message", message)
        logger.error(
            "%s %s failed: %d %s", response.request.method, response.request.url.path,
            response.status_code, code,
        )
        raise ApiClientError(response.status_code, code, message)
