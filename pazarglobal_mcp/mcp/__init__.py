"""MCP (Model Context Protocol) implementation with JSON-RPC 2.0."""

from pazarglobal_mcp.mcp.models import (
    JsonRpcRequest,
    JsonRpcResponse,
    JsonRpcError,
    Tool,
    ToolCallParams,
)
from pazarglobal_mcp.mcp.registry import ToolRegistry, build_registry
from pazarglobal_mcp.mcp.errors import (
    INVALID_REQUEST,
    METHOD_NOT_FOUND,
    INVALID_PARAMS,
    TOOL_EXECUTION_ERROR,
    InvalidEnvelopeError,
    ToolArgumentsError,
)

__all__ = [
    "JsonRpcRequest",
    "JsonRpcResponse",
    "JsonRpcError",
    "Tool",
    "ToolCallParams",
    "ToolRegistry",
    "build_registry",
    "INVALID_REQUEST",
    "METHOD_NOT_FOUND",
    "INVALID_PARAMS",
    "TOOL_EXECUTION_ERROR",
    "InvalidEnvelopeError",
    "ToolArgumentsError",
]
