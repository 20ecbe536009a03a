"""Pydantic models for the MCP JSON-RPC 2.0 protocol."""

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, model_serializer, model_validator


# =============================================================================
# JSON-RPC 2.0 Base Models
# =============================================================================


class JsonRpcRequest(BaseModel):
    """JSON-RPC 2.0 request object."""

    jsonrpc: str = "2.0"
    id: Any = None  # string, number or null; echoed back unchanged
    method: Any  # non-string values are answered with "Invalid method"
    params: dict[str, Any] = Field(default_factory=dict)

    @model_validator(mode="before")
    @classmethod
    def _null_params(cls, data: Any) -> Any:
        if isinstance(data, dict) and data.get("params") is None:
            data = {k: v for k, v in data.items() if k != "params"}
        return data


class JsonRpcError(BaseModel):
    """JSON-RPC 2.0 error object."""

    code: int
    message: str
    data: Any = None

    @model_serializer
    def _serialize(self) -> dict[str, Any]:
        """Omit ``data`` when there is none."""
        error: dict[str, Any] = {"code": self.code, "message": self.message}
        if self.data is not None:
            error["data"] = self.data
        return error


class JsonRpcResponse(BaseModel):
    """JSON-RPC 2.0 response object."""

    jsonrpc: Literal["2.0"] = "2.0"
    id: Any = None
    result: Any = None
    error: JsonRpcError | None = None

    @model_serializer
    def _serialize(self) -> dict[str, Any]:
        """Serialize with exactly one of ``result`` or ``error``."""
        data: dict[str, Any] = {"jsonrpc": self.jsonrpc, "id": self.id}
        if self.error is not None:
            data["error"] = self.error.model_dump()
        else:
            data["result"] = self.result
        return data


# =============================================================================
# MCP Tool Models
# =============================================================================


class Tool(BaseModel):
    """Tool entry returned by tools/list."""

    name: str = Field(..., description="Tool name (lowercase with underscores)")
    description: str = Field(..., description="Human-readable description")
    parameters: dict[str, Any] = Field(..., description="JSON Schema for tool input")
    required: list[str] = Field(default_factory=list)


class ToolsListResult(BaseModel):
    """Result of tools/list request."""

    tools: list[Tool]


class ToolCallParams(BaseModel):
    """
    Parameters for tools/call request.

    The canonical shape is ``{"name": ..., "arguments": {...}}``. Older clients
    send the tool name as ``tool`` or ``toolName`` and the arguments as
    ``params``; those keys are accepted here and nowhere else.
    """

    model_config = ConfigDict(extra="ignore")

    name: str | None = None
    arguments: dict[str, Any] = Field(default_factory=dict)

    @model_validator(mode="before")
    @classmethod
    def _apply_aliases(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data
        data = dict(data)
        if data.get("name") is None:
            data["name"] = data.get("tool") or data.get("toolName")
        if data.get("arguments") is None:
            data["arguments"] = data.get("params") or {}
        return data


class BrowserCheckTool(BaseModel):
    """Tool entry in the GET /mcp discovery payload."""

    name: str
    description: str = "Available MCP tool"
