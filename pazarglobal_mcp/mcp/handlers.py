"""MCP method handlers for JSON-RPC requests."""

from typing import Any

from pydantic import ValidationError

from pazarglobal_mcp.mcp.errors import (
    INVALID_METHOD_MESSAGE,
    INVALID_PARAMS,
    METHOD_NOT_FOUND,
    TOOL_EXECUTION_ERROR,
    ToolArgumentsError,
    exception_message,
    make_error_data,
)
from pazarglobal_mcp.mcp.models import ToolCallParams, ToolsListResult
from pazarglobal_mcp.mcp.registry import ToolRegistry
from pazarglobal_mcp.utils.logging import bind_rpc_context, get_logger

logger = get_logger(__name__)

# (result, error) pair; exactly one is None
DispatchOutcome = tuple[Any | None, dict[str, Any] | None]


class MCPHandlers:
    """Handlers for the MCP methods this server supports."""

    def __init__(self, registry: ToolRegistry):
        self.registry = registry

    async def handle_tools_list(self, params: dict[str, Any]) -> DispatchOutcome:
        """Handle the tools/list request. Params are ignored."""
        result = ToolsListResult(tools=self.registry.list_tools())
        return result.model_dump(), None

    async def handle_tools_call(self, params: dict[str, Any]) -> DispatchOutcome:
        """Handle the tools/call request."""
        try:
            call_params = ToolCallParams.model_validate(params)
        except ValidationError as e:
            logger.warning("invalid_call_params", errors=e.error_count())
            return None, make_error_data(
                INVALID_PARAMS,
                "Invalid params for tools/call",
                data=e.errors(include_url=False, include_context=False),
            )

        if not call_params.name:
            return None, make_error_data(
                INVALID_PARAMS, "Invalid params: tool name is required"
            )

        bind_rpc_context(tool=call_params.name)
        tool = self.registry.resolve(call_params.name)
        if tool is None:
            logger.info("unknown_tool")
            return None, make_error_data(
                METHOD_NOT_FOUND, f"Unknown tool: {call_params.name}"
            )

        try:
            arguments = self.validate_arguments(tool.name, tool.arguments_model, call_params.arguments)
        except ToolArgumentsError as e:
            logger.info("invalid_tool_arguments", errors=len(e.errors))
            return None, e.to_error_data()

        logger.info("tool_call")
        try:
            result = await tool.handler(arguments)
        except Exception as e:
            logger.exception("tool_failed", error=exception_message(e))
            return None, make_error_data(TOOL_EXECUTION_ERROR, exception_message(e))
        logger.info("tool_succeeded")
        return result, None

    @staticmethod
    def validate_arguments(tool_name: str, model: type, arguments: dict[str, Any]) -> Any:
        """Validate raw call arguments against a tool's argument model."""
        try:
            return model.model_validate(arguments)
        except ValidationError as e:
            raise ToolArgumentsError(
                tool_name, e.errors(include_url=False, include_context=False)
            ) from e

    async def dispatch(self, method: Any, params: dict[str, Any]) -> DispatchOutcome:
        """
        Dispatch a method call to the appropriate handler.

        Returns (result, error) tuple. One will be None.
        """
        handlers = {
            "tools/list": self.handle_tools_list,
            "tools/call": self.handle_tools_call,
        }

        handler = handlers.get(method) if isinstance(method, str) else None
        if handler is None:
            logger.info("invalid_method")
            return None, make_error_data(METHOD_NOT_FOUND, INVALID_METHOD_MESSAGE)

        return await handler(params)
