"""
Base tool type for the Polymarket agent tools.

A tool is a name, an LLM-facing description, a pydantic parameter model and an
async handler. Whatever happens inside the handler, the caller gets back the same
envelope: {"content": [...]} on success, plus "isError": true on failure.
"""

import logging
from dataclasses import dataclass
from typing import Any, Awaitable, Callable

from pydantic import BaseModel, ValidationError

from polytools.platforms.base import InvalidParameterError, PlatformError, to_payload
from polytools.schemas.common import error_result, tool_result

logger = logging.getLogger(__name__)

Handler = Callable[[Any], Awaitable[Any]]


def describe_validation_error(error: ValidationError) -> str:
    first = error.errors()[0]
    path = ".".join(str(p) for p in first["loc"])
    return f"{path}: {first['msg']}" if path else first["msg"]


@dataclass
class Tool:
    name: str
    description: str
    params_model: type[BaseModel]
    handler: Handler
    mutating: bool = False

    @property
    def parameters(self) -> dict[str, Any]:
        return self.params_model.model_json_schema()

    def to_spec(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "description": self.description,
            "parameters": self.parameters,
        }

    def parse(self, params: dict) -> BaseModel:
        try:
            return self.params_model.model_validate(params or {})
        except ValidationError as e:
            raise InvalidParameterError(describe_validation_error(e)) from e

    async def execute(self, tool_call_id: str, params: dict) -> dict:
        logger.debug("Executing %s (call %s)", self.name, tool_call_id)
        try:
            data = await self.handler(self.parse(params))
        except PlatformError as e:
            return error_result(e.message)
        except Exception as e:
            logger.exception("Tool %s failed unexpectedly", self.name)
            return error_result(str(e))
        return tool_result(to_payload(data))
