from typing import Any

from fastapi import APIRouter, Body, Depends, Header

from polytools.dependencies import get_registry, get_tool
from polytools.schemas.common import ToolResult
from polytools.tools.base import Tool
from polytools.tools.registry import ToolRegistry

router = APIRouter()


@router.get("/tools")
async def list_tools(registry: ToolRegistry = Depends(get_registry)):
    return registry.list_tools()


@router.post(
    "/tools/{name}",
    response_model=ToolResult,
    response_model_by_alias=True,
    response_model_exclude_none=True,
)
async def call_tool(
    params: dict[str, Any] | None = Body(default=None),
    x_tool_call_id: str = Header(default="unknown", alias="X-Tool-Call-Id"),
    tool: Tool = Depends(get_tool),
    registry: ToolRegistry = Depends(get_registry),
):
    return await registry.invoke(tool.name, x_tool_call_id, params or {})
