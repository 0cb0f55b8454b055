"""Tool registry: the set of tools exposed to the host, fixed at startup."""

import logging
from typing import Any, Optional

from polytools.config import Settings
from polytools.platforms.polymarket import PolymarketClient
from polytools.services.market_data import MarketDataReader
from polytools.services.orders import OrderCanceller, OrderSubmitter
from polytools.tools.base import Tool
from polytools.tools.definitions import create_polymarket_tools

logger = logging.getLogger(__name__)


def extract_params(*args: Any) -> tuple[str, dict]:
    """Hosts call tools as (tool_call_id, params, ...) or just (params,)."""
    if args and isinstance(args[0], str):
        params = args[1] if len(args) > 1 and isinstance(args[1], dict) else {}
        return args[0], params
    if args and isinstance(args[0], dict):
        return "unknown", args[0]
    return "unknown", {}


class ToolRegistry:
    def __init__(self, tools: Optional[list[Tool]] = None, readonly: bool = False):
        self.readonly = readonly
        self._tools: dict[str, Tool] = {}
        for tool in tools or []:
            if readonly and tool.mutating:
                continue
            self._tools[tool.name] = tool

    def get(self, name: str) -> Optional[Tool]:
        return self._tools.get(name)

    def names(self) -> list[str]:
        return list(self._tools)

    def list_tools(self) -> list[dict]:
        return [tool.to_spec() for tool in self._tools.values()]

    async def invoke(self, name: str, *args: Any) -> Optional[dict]:
        """Run a tool by name with host-style arguments; None when the tool is not registered."""
        tool = self.get(name)
        if tool is None:
            return None
        tool_call_id, params = extract_params(*args)
        return await tool.execute(tool_call_id, params)


def build_registry(settings: Settings, client: Optional[PolymarketClient] = None) -> ToolRegistry:
    if not settings.private_key:
        logger.error("private_key is required (via settings or POLYMARKET_PRIVATE_KEY env var)")
        return ToolRegistry()

    client = client or PolymarketClient(settings)
    tools = create_polymarket_tools(
        MarketDataReader(client),
        OrderSubmitter(client),
        OrderCanceller(client),
    )
    registry = ToolRegistry(tools, readonly=settings.readonly)
    logger.info("Registered %d Polymarket tools (readonly=%s)", len(registry.names()), settings.readonly)
    return registry
