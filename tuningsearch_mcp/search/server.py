"""MCP server exposing TuningSearch tools and prompts."""
from typing import Annotated, Literal, Optional

import httpx
from mcp.server.fastmcp import FastMCP
from mcp.types import CallToolResult
from pydantic import Field

from tuningsearch_mcp.utils.config import Settings
from tuningsearch_mcp.utils.logger import get_logger
from .models import LANGUAGE_LABELS, SUPPORTED_LANGUAGES, Language, SafeLevel, TimeRange
from .prompts import (
    ANALYZE_RESULTS_DESCRIPTION,
    SEARCH_WEB_DESCRIPTION,
    analyze_search_results_prompt,
    search_web_prompt,
)
from .tools import SearchTools


SERVER_NAME = "tuningsearch-mcp-server"
SERVER_VERSION = "0.1.4"
SERVER_DESCRIPTION = "MCP server for Free Google Search API service"

LANGUAGE_HELP = "Search language (supported: " + ", ".join(
    f"'{lang}' ({LANGUAGE_LABELS[lang]})" for lang in SUPPORTED_LANGUAGES
) + ")"


class SearchMCPServer:
    """Binds SearchTools and the guidance prompts to a FastMCP instance."""

    def __init__(self, settings: Settings, transport: Optional[httpx.AsyncBaseTransport] = None):
        self.settings = settings
        self.logger = get_logger("search_mcp")
        self.tools = SearchTools(settings, transport=transport)
        self.mcp = FastMCP(SERVER_NAME, instructions=SERVER_DESCRIPTION)
        self._register_tools()
        self._register_prompts()

    def _register_tools(self) -> None:
        tools = self.tools

        @self.mcp.tool(name="search", description="Search the web with the TuningSearch engine")
        async def search(
            query: Annotated[str, Field(description="Search query")],
            language: Annotated[Optional[Language], Field(description=LANGUAGE_HELP)] = None,
            page: Annotated[Optional[int], Field(description="Result page number")] = None,
            safe: Annotated[
                Optional[SafeLevel],
                Field(description="Safe search level: 0=Off, 1=Moderate, 2=Strict"),
            ] = None,
            time_range: Annotated[Optional[TimeRange], Field(description="Search time range")] = None,
        ) -> CallToolResult:
            return await tools.search(query, language=language, page=page, safe=safe, time_range=time_range)

        @self.mcp.tool(name="quota", description="Show the TuningSearch account quota and plan limits")
        async def quota() -> CallToolResult:
            return await tools.quota()

    def _register_prompts(self) -> None:
        @self.mcp.prompt(name="search-web", description=SEARCH_WEB_DESCRIPTION)
        def search_web() -> str:
            return search_web_prompt()

        @self.mcp.prompt(name="analyze-search-results", description=ANALYZE_RESULTS_DESCRIPTION)
        def analyze_search_results() -> str:
            return analyze_search_results_prompt()

    def run(self, transport: Literal["stdio", "sse"] = "stdio") -> None:
        self.logger.info(f"Starting {SERVER_NAME} {SERVER_VERSION} on {transport}")
        self.mcp.run(transport=transport)
