from __future__ import annotations

from typing import Any, Dict, Optional

import httpx

from tuningsearch_mcp.utils.config import DEFAULT_API_BASE_URL, DEFAULT_REQUEST_TIMEOUT
from tuningsearch_mcp.utils.logger import get_logger
from .errors import RequestFailure, TransportFailure
from .models import QuotaInfo, SearchRequest, SearchResult


class TuningSearchClient:
    """Thin async client for the TuningSearch REST API."""

    def __init__(
        self,
        api_key: str,
        base_url: str = DEFAULT_API_BASE_URL,
        timeout: float = DEFAULT_REQUEST_TIMEOUT,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.api_key = api_key
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.transport = transport
        self.logger = get_logger("tuningsearch_client")

    def _headers(self) -> Dict[str, str]:
        return {
            "Content-Type": "application/json",
            "Authorization": f"Bearer {self.api_key}",
        }

    async def _get(self, label: str, path: str, params: Optional[Dict[str, str]] = None) -> Dict[str, Any]:
        try:
            async with httpx.AsyncClient(
                base_url=self.base_url,
                headers=self._headers(),
                timeout=self.timeout,
                transport=self.transport,
            ) as client:
                resp = await client.get(path, params=params)
        except httpx.HTTPError as e:
            raise TransportFailure(f"{label} request failed: {e}") from e

        if not resp.is_success:
            raise RequestFailure(
                f"{label} request failed: {resp.status_code} {resp.reason_phrase}",
                status_code=resp.status_code,
                reason=resp.reason_phrase,
            )

        try:
            payload = resp.json()
        except ValueError as e:
            raise TransportFailure(f"{label} response is not valid JSON: {e}") from e

        data = payload.get("data") if isinstance(payload, dict) else None
        if not isinstance(data, dict):
            raise TransportFailure(f"{label} response has no data object")
        return data

    async def search(self, request: SearchRequest) -> SearchResult:
        params = request.to_params()
        self.logger.debug(f"GET /v1/search {params}")
        data = await self._get("Search", "/v1/search", params=params)
        result = SearchResult.from_dict(data)
        self.logger.info(f"TuningSearch returned {len(result.results)} results")
        return result

    async def get_quota(self) -> QuotaInfo:
        self.logger.debug("GET /v1/me/quota")
        data = await self._get("Quota", "/v1/me/quota")
        return QuotaInfo.from_dict(data)
