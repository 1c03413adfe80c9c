"""MCP Server for Japanese train route search.

This module implements a Model Context Protocol (MCP) server that exposes
Yahoo! Transit route search as a single tool, plus a usage prompt that
tells clients how to write station names.
"""

import asyncio
import logging
from collections.abc import Callable
from datetime import datetime
from typing import Any

from mcp.server import NotificationOptions, Server
from mcp.server.models import InitializationOptions
from mcp.types import (
    CallToolResult,
    GetPromptResult,
    Prompt,
    PromptMessage,
    TextContent,
    Tool,
    ToolAnnotations,
)

from .. import __version__
from ..core.exceptions import ValidationError
from ..core.extractor import extract_main_content
from ..core.models import (
    MAX_VIA_STATIONS,
    SeatPreference,
    SortOrder,
    TicketType,
    TimeType,
    WalkSpeed,
    build_search_request,
)
from ..core.scraper import YahooTransitScraper
from ..utils.config import Settings, get_settings
from .usage import (
    SEARCH_ROUTE_DESCRIPTION,
    SEARCH_ROUTE_TITLE,
    USAGE_GUIDE,
    USAGE_PROMPT_DESCRIPTION,
    USAGE_PROMPT_NAME,
)

logger = logging.getLogger(__name__)

SERVER_NAME = "norikae-search"


def _enum_values(enum_cls: Any) -> list[str]:
    return [member.value for member in enum_cls]


SEARCH_ROUTE_SCHEMA: dict[str, Any] = {
    "type": "object",
    "properties": {
        "from": {
            "type": "string",
            "description": "出発駅名 / Departure station (例: 東京, 新宿)",
        },
        "to": {
            "type": "string",
            "description": "到着駅名 / Arrival station (例: 横浜, 渋谷)",
        },
        "via": {
            "type": "array",
            "items": {"type": "string"},
            "description": f"経由駅名の配列（最大{MAX_VIA_STATIONS}駅）/ Via stations (max {MAX_VIA_STATIONS})",
        },
        "year": {"type": "integer", "description": "出発年 / Year (例: 2026)"},
        "month": {"type": "integer", "description": "出発月 / Month (1-12)"},
        "day": {"type": "integer", "description": "出発日 / Day (1-31)"},
        "hour": {"type": "integer", "description": "出発時刻の時 / Hour (0-23)"},
        "minute": {"type": "integer", "description": "出発時刻の分 / Minute (0-59)"},
        "timeType": {
            "type": "string",
            "enum": _enum_values(TimeType),
            "description": "時刻指定タイプ / Time type",
            "default": TimeType.DEPARTURE.value,
        },
        "ticket": {
            "type": "string",
            "enum": _enum_values(TicketType),
            "description": "運賃タイプ / Fare type: ic=IC運賃、cash=きっぷ運賃",
            "default": TicketType.IC.value,
        },
        "seatPreference": {
            "type": "string",
            "enum": _enum_values(SeatPreference),
            "description": "座席指定 / Seat preference",
            "default": SeatPreference.NON_RESERVED.value,
        },
        "walkSpeed": {
            "type": "string",
            "enum": _enum_values(WalkSpeed),
            "description": "歩く速度 / Walking speed",
            "default": WalkSpeed.SLIGHTLY_SLOW.value,
        },
        "sortBy": {
            "type": "string",
            "enum": _enum_values(SortOrder),
            "description": "並び順 / Sort by: time=到着が早い順、transfer=乗換回数順、fare=料金安い順",
            "default": SortOrder.TIME.value,
        },
        "useAirline": {"type": "boolean", "description": "空路を使う / Use airlines", "default": True},
        "useShinkansen": {"type": "boolean", "description": "新幹線を使う / Use Shinkansen", "default": True},
        "useExpress": {"type": "boolean", "description": "有料特急を使う / Use express trains", "default": True},
        "useHighwayBus": {"type": "boolean", "description": "高速バスを使う / Use highway buses", "default": True},
        "useLocalBus": {"type": "boolean", "description": "路線バスを使う / Use local buses", "default": True},
        "useFerry": {"type": "boolean", "description": "フェリーを使う / Use ferries", "default": True},
    },
    "required": ["from", "to"],
}


class TransitMCPServer:
    """MCP Server for Japanese train route search."""

    def __init__(
        self,
        settings: Settings | None = None,
        clock: Callable[[], datetime] = datetime.now,
    ) -> None:
        """Initialize the Transit MCP Server.

        Args:
            settings: Runtime settings, defaults to the environment
            clock: Returns the current local time, used for omitted date fields
        """
        self.settings = settings or get_settings()
        self.clock = clock
        self.server = Server(SERVER_NAME)
        self.scraper = YahooTransitScraper(
            timeout=self.settings.request_timeout,
            base_url=self.settings.base_url,
            user_agent=self.settings.user_agent,
        )

        self._register_handlers()

    def _register_handlers(self) -> None:
        """Register MCP protocol handlers."""

        @self.server.list_tools()
        async def handle_list_tools() -> list[Tool]:
            """List available tools."""
            return self._list_tools()

        @self.server.call_tool()
        async def handle_call_tool(name: str, arguments: dict[str, Any]) -> CallToolResult:
            """Handle tool calls."""
            if name == "search_route":
                return await self._search_route(arguments or {})
            return self._error_result(f"Unknown tool: {name}")

        @self.server.list_prompts()
        async def handle_list_prompts() -> list[Prompt]:
            """List available prompts."""
            return self._list_prompts()

        @self.server.get_prompt()
        async def handle_get_prompt(
            name: str, arguments: dict[str, str] | None
        ) -> GetPromptResult:
            """Return a prompt by name."""
            return self._get_prompt(name)

    def _list_tools(self) -> list[Tool]:
        return [
            Tool(
                name="search_route",
                title=SEARCH_ROUTE_TITLE,
                description=SEARCH_ROUTE_DESCRIPTION,
                inputSchema=SEARCH_ROUTE_SCHEMA,
                annotations=ToolAnnotations(readOnlyHint=True, openWorldHint=True),
            )
        ]

    def _list_prompts(self) -> list[Prompt]:
        return [Prompt(name=USAGE_PROMPT_NAME, description=USAGE_PROMPT_DESCRIPTION)]

    def _get_prompt(self, name: str) -> GetPromptResult:
        if name != USAGE_PROMPT_NAME:
            raise ValueError(f"Unknown prompt: {name}")

        return GetPromptResult(
            description=USAGE_PROMPT_DESCRIPTION,
            messages=[
                PromptMessage(
                    role="user",
                    content=TextContent(type="text", text=USAGE_GUIDE),
                )
            ],
        )

    async def _search_route(self, arguments: dict[str, Any]) -> CallToolResult:
        """Search Yahoo Transit and return the route section of the result page."""
        try:
            request = build_search_request(arguments, now=self.clock())
        except ValidationError as e:
            return self._error_result(f"入力が不正です: {str(e)}")

        for station in (request.from_station, request.to_station, *request.via):
            if self._is_romaji_name(station):
                logger.warning(
                    f"'{station}' appears to be a romaji name; Yahoo Transit expects Japanese"
                )

        url = self.scraper.build_url(request)
        logger.info(f"Searching route: {request}")

        try:
            html_content = await asyncio.to_thread(self.scraper.fetch_html, url)
        except Exception as e:
            logger.error(f"Route search failed for {request}: {e}")
            return self._error_result(f"エラーが発生しました: {str(e)}")

        return CallToolResult(
            content=[TextContent(type="text", text=extract_main_content(html_content))],
            isError=False,
        )

    def _error_result(self, message: str) -> CallToolResult:
        return CallToolResult(
            content=[TextContent(type="text", text=message)],
            isError=True,
        )

    def _is_romaji_name(self, name: str) -> bool:
        """Check if a station name appears to be in romaji (ASCII characters only)."""
        return name.isascii() and name.isalpha()


async def main() -> None:
    """Main entry point for the MCP server."""
    settings = get_settings()
    logging.basicConfig(level=settings.log_level.upper())
    logger.info("Starting Norikae Search MCP Server")

    server_instance = TransitMCPServer(settings=settings)

    from mcp.server.stdio import stdio_server

    async with stdio_server() as (read_stream, write_stream):
        logger.info("MCP Server running with stdio transport")
        await server_instance.server.run(
            read_stream,
            write_stream,
            InitializationOptions(
                server_name=SERVER_NAME,
                server_version=__version__,
                capabilities=server_instance.server.get_capabilities(
                    notification_options=NotificationOptions(),
                    experimental_capabilities={},
                ),
            ),
        )


def main_sync() -> None:
    """Synchronous wrapper for the async main function - used as entry point."""
    asyncio.run(main())


if __name__ == "__main__":
    main_sync()
