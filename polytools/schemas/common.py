import json
from typing import Any, Literal

from pydantic import BaseModel, Field


class TextContent(BaseModel):
    type: Literal["text"] = "text"
    text: str


class ToolResult(BaseModel):
    content: list[TextContent]
    is_error: bool | None = Field(default=None, alias="isError")

    model_config = {"populate_by_name": True}


def tool_result(data: Any, is_error: bool = False) -> dict:
    result = ToolResult(
        content=[TextContent(text=json.dumps(data, indent=2, default=str))],
        is_error=True if is_error else None,
    )
    return result.model_dump(by_alias=True, exclude_none=True)


def error_result(message: str) -> dict:
    return tool_result({"error": message}, is_error=True)
