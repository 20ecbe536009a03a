"""JSON-RPC 2.0 message processing."""

import json
from typing import Any

from pydantic import ValidationError

from pazarglobal_mcp.mcp.errors import (
    INVALID_REQUEST,
    InvalidEnvelopeError,
    make_error_data,
)
from pazarglobal_mcp.mcp.handlers import MCPHandlers
from pazarglobal_mcp.mcp.models import JsonRpcError, JsonRpcRequest, JsonRpcResponse
from pazarglobal_mcp.utils.logging import bind_rpc_context


class JsonRpcProcessor:
    """Turn raw request bodies into JSON-RPC responses."""

    def __init__(self, handlers: MCPHandlers):
        self.handlers = handlers

    def decode_body(self, raw_data: str | bytes) -> Any:
        """Decode a raw body as JSON, raising InvalidEnvelopeError if it isn't."""
        try:
            if isinstance(raw_data, bytes):
                raw_data = raw_data.decode("utf-8")
            return json.loads(raw_data)
        except (UnicodeDecodeError, json.JSONDecodeError) as e:
            raise InvalidEnvelopeError(f"Invalid JSON: {e}") from e

    def parse_request(self, data: Any) -> tuple[JsonRpcRequest | None, dict | None]:
        """
        Parse a decoded body into a JSON-RPC request.

        Raises InvalidEnvelopeError when there is no method to dispatch.
        Otherwise returns (request, error) tuple. One will be None.
        """
        if not isinstance(data, dict):
            raise InvalidEnvelopeError("Request body must be a JSON object")
        # Only an absent or blank method is an envelope error; any other
        # value is dispatched and answered in-band as an unknown method
        if data.get("method") in (None, "", False, 0):
            raise InvalidEnvelopeError("Missing method")

        try:
            return JsonRpcRequest.model_validate(data), None
        except ValidationError as e:
            return None, make_error_data(
                INVALID_REQUEST,
                f"Invalid JSON-RPC request: {e.errors(include_url=False)[0]['msg']}",
            )

    async def process_request(self, request: JsonRpcRequest) -> JsonRpcResponse:
        """Process a validated JSON-RPC request. Always produces a response."""
        bind_rpc_context(method=request.method, rpc_id=request.id)
        result, error = await self.handlers.dispatch(request.method, request.params)

        if error is not None:
            return JsonRpcResponse(id=request.id, error=JsonRpcError(**error))
        return JsonRpcResponse(id=request.id, result=result)

    async def handle_data(self, data: Any) -> JsonRpcResponse:
        """Handle an already decoded JSON-RPC body end-to-end."""
        request, error = self.parse_request(data)
        if error is not None:
            return JsonRpcResponse(id=data.get("id"), error=JsonRpcError(**error))
        return await self.process_request(request)  # type: ignore[arg-type]

    async def handle_message(self, raw_data: str | bytes) -> JsonRpcResponse:
        """
        Handle a raw JSON-RPC message end-to-end.

        Raises InvalidEnvelopeError for bodies that are not JSON-RPC envelopes.
        """
        return await self.handle_data(self.decode_body(raw_data))

    def serialize_response(self, response: JsonRpcResponse) -> str:
        """Serialize a JSON-RPC response to JSON string."""
        return json.dumps(response.model_dump())
