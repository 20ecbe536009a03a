"""JSON-RPC 2.0 error codes, error response helpers and dispatcher exceptions."""

from typing import Any

# Standard JSON-RPC 2.0 error codes
INVALID_REQUEST = -32600  # The JSON sent is not a valid Request object
METHOD_NOT_FOUND = -32601  # The method does not exist / is not available
INVALID_PARAMS = -32602  # Invalid method parameter(s)

# Custom error codes (server-defined, must be between -32000 and -32099)
TOOL_EXECUTION_ERROR = -32000  # Tool execution failed

INVALID_ENVELOPE_MESSAGE = "Invalid JSON-RPC request"
INVALID_METHOD_MESSAGE = "Invalid method"


def error_message(code: int) -> str:
    """Get the standard message for a JSON-RPC error code."""
    messages = {
        INVALID_REQUEST: "Invalid Request",
        METHOD_NOT_FOUND: "Method not found",
        INVALID_PARAMS: "Invalid params",
        TOOL_EXECUTION_ERROR: "Tool execution error",
    }
    return messages.get(code, "Unknown error")


def make_error_data(code: int, message: str | None = None, data: Any = None) -> dict[str, Any]:
    """Create an error object for JSON-RPC response."""
    error: dict[str, Any] = {
        "code": code,
        "message": message or error_message(code),
    }
    if data is not None:
        error["data"] = data
    return error


def exception_message(exc: BaseException) -> str:
    """Message reported for a failed handler: the exception text, else its type name."""
    return str(exc) or type(exc).__name__


class InvalidEnvelopeError(Exception):
    """The request body is not a JSON-RPC envelope (no method to dispatch)."""

    def __init__(self, detail: str | None = None):
        super().__init__(INVALID_ENVELOPE_MESSAGE)
        self.detail = detail


class ToolArgumentsError(Exception):
    """Tool call arguments did not match the tool's declared input."""

    def __init__(self, tool_name: str, errors: list[dict[str, Any]]):
        self.tool_name = tool_name
        self.errors = errors
        summary = "; ".join(
            f"{'.'.join(str(part) for part in err.get('loc', ())) or 'arguments'}: {err.get('msg')}"
            for err in errors
        )
        super().__init__(f"Invalid arguments for {tool_name}: {summary}")

    def to_error_data(self) -> dict[str, Any]:
        return make_error_data(INVALID_PARAMS, str(self), data=self.errors)
