from fastapi import Depends, HTTPException, Request

from polytools.tools.base import Tool
from polytools.tools.registry import ToolRegistry


def get_registry(request: Request) -> ToolRegistry:
    return request.app.state.registry


def get_tool(name: str, registry: ToolRegistry = Depends(get_registry)) -> Tool:
    tool = registry.get(name)
    if not tool:
        raise HTTPException(status_code=404, detail=f"Tool '{name}' not found")
    return tool
