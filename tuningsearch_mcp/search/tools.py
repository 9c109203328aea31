from __future__ import annotations

from typing import Optional

import httpx
from mcp.types import CallToolResult, TextContent

from tuningsearch_mcp.utils.logger import get_logger
from tuningsearch_mcp.utils.config import Settings
from .client import TuningSearchClient
from .errors import SearchError, ValidationError
from .formatter import format_quota, format_search_result
from .models import validate_search_request


MISSING_API_KEY_MESSAGE = "Error: TUNINGSEARCH_API_KEY environment variable is not set"


def _text_result(text: str, is_error: bool = False) -> CallToolResult:
    return CallToolResult(content=[TextContent(type="text", text=text)], isError=is_error)


class SearchTools:
    """Tool operations behind the MCP server.

    Every call returns a CallToolResult; failures come back flagged with
    isError instead of raising, so the transport always gets a response.
    """

    def __init__(self, settings: Settings, transport: Optional[httpx.AsyncBaseTransport] = None):
        self.settings = settings
        self.transport = transport
        self.logger = get_logger("search_mcp")

    def _client(self) -> Optional[TuningSearchClient]:
        if not self.settings.tuningsearch_api_key:
            return None
        return TuningSearchClient(
            self.settings.tuningsearch_api_key,
            base_url=self.settings.api_base_url,
            timeout=self.settings.request_timeout,
            transport=self.transport,
        )

    async def search(
        self,
        query: str,
        language: Optional[str] = None,
        page: Optional[int] = None,
        safe: Optional[int] = None,
        time_range: Optional[str] = None,
    ) -> CallToolResult:
        try:
            request = validate_search_request(query, language, page, safe, time_range)
        except ValidationError as e:
            self.logger.warning(f"Rejected search parameters: {e}")
            return _text_result(f"Search error: {e}", is_error=True)

        client = self._client()
        if client is None:
            self.logger.warning("search called without TUNINGSEARCH_API_KEY")
            return _text_result(MISSING_API_KEY_MESSAGE, is_error=True)

        try:
            self.logger.info(f"Searching TuningSearch for: {request.query!r}")
            result = await client.search(request)
            text = format_search_result(result)
        except SearchError as e:
            self.logger.error(f"Search error: {e}")
            return _text_result(f"Search error: {e}", is_error=True)
        except Exception as e:
            self.logger.exception(f"Unexpected search failure: {e}")
            return _text_result(f"Search error: {e}", is_error=True)
        return _text_result(text)

    async def quota(self) -> CallToolResult:
        client = self._client()
        if client is None:
            self.logger.warning("quota called without TUNINGSEARCH_API_KEY")
            return _text_result(MISSING_API_KEY_MESSAGE, is_error=True)

        try:
            info = await client.get_quota()
            text = format_quota(info)
        except SearchError as e:
            self.logger.error(f"Quota check error: {e}")
            return _text_result(f"Quota check error: {e}", is_error=True)
        except Exception as e:
            self.logger.exception(f"Unexpected quota failure: {e}")
            return _text_result(f"Quota check error: {e}", is_error=True)
        return _text_result(text)
