import json
import logging
from typing import Any, Union
from pydantic import ValidationError
from seo_publisher.core.context import ToolContext
from seo_publisher.core.errors import InternalError, JsonRpcError, MethodNotFoundError, ParseError
from seo_publisher.core.mcp_types import (
    ErrorEnvelope,
    JsonRpcRequest,
    JsonRpcResponse,
    ToolDefinition,
    ToolInputSchema,
    ToolListResult,
)
from seo_publisher.tools.registry import ToolRegistry

logger = logging.getLogger(__name__)

LIST_TOOLS = "tools/list"
CALL_TOOL = "tools/call"

def decode_request(line: Union[str, bytes]) -> JsonRpcRequest:
    """Parse one input line; anything other than a UTF-8 JSON object is a parse error."""
    try:
        if isinstance(line, bytes):
            line = line.decode("utf-8")
        message = json.loads(line)
    except (ValueError, RecursionError) as e:
        raise ParseError(str(e)) from e
    if not isinstance(message, dict):
        raise ParseError(f"Expected a JSON object, got {type(message).__name__}")
    try:
        return JsonRpcRequest.model_validate(message)
    except ValidationError as e:
        raise ParseError(str(e)) from e

def error_response(error: JsonRpcError, request_id: Any = None) -> JsonRpcResponse:
    return JsonRpcResponse(id=request_id, error=ErrorEnvelope(**error.to_dict()))

class Dispatcher:
    def __init__(self, registry: ToolRegistry, context: ToolContext, strict_arguments: bool = True):
        self.registry = registry
        self.context = context
        self.strict_arguments = strict_arguments

    async def handle(self, request: JsonRpcRequest) -> JsonRpcResponse:
        """Never raises: every failure becomes an error envelope."""
        request_id = request.id
        try:
            result = await self._route(request)
            return JsonRpcResponse(id=request_id, result=result)
        except JsonRpcError as e:
            return error_response(e, request_id)
        except Exception as e:
            logger.error(f"Internal error handling {request.method!r}: {e}")
            return error_response(InternalError(str(e)), request_id)

    async def handle_line(self, line: Union[str, bytes]) -> JsonRpcResponse:
        try:
            request = decode_request(line)
        except ParseError as e:
            logger.warning(f"Unparseable request line: {e.data['message']}")
            return error_response(e)
        return await self.handle(request)

    async def _route(self, request: JsonRpcRequest) -> Any:
        method = request.method
        if method == LIST_TOOLS:
            tools = [self._advertised(t) for t in self.registry.list_tools()]
            return ToolListResult(tools=tools).model_dump(exclude_none=True)
        elif method == CALL_TOOL:
            return await self._call_tool(request.params)
        else:
            raise MethodNotFoundError()

    @staticmethod
    def _advertised(definition: ToolDefinition) -> ToolDefinition:
        # Callers only see names and descriptions; per-field schema detail is withheld
        return ToolDefinition(
            name=definition.name,
            description=definition.description,
            inputSchema=ToolInputSchema(),
        )

    async def _call_tool(self, params: Any) -> Any:
        if not isinstance(params, dict):
            raise InternalError("tools/call requires params with name and arguments")
        tool_name = params.get("name")
        arguments = params.get("arguments")
        if arguments is None and not self.strict_arguments:
            arguments = {}

        logger.info(f"Calling tool {tool_name}")
        return await self.registry.call_tool(
            tool_name, arguments, self.context, strict=self.strict_arguments
        )
