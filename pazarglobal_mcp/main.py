"""FastAPI MCP Server - Main application entrypoint."""

import sys
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from pazarglobal_mcp.config.loader import get_settings
from pazarglobal_mcp.mcp.errors import InvalidEnvelopeError
from pazarglobal_mcp.mcp.handlers import MCPHandlers
from pazarglobal_mcp.mcp.jsonrpc import JsonRpcProcessor
from pazarglobal_mcp.mcp.models import BrowserCheckTool
from pazarglobal_mcp.mcp.registry import ToolRegistry, get_registry
from pazarglobal_mcp.utils.cors import CorsHeadersMiddleware
from pazarglobal_mcp.utils.logging import get_logger, new_request_context, setup_logging

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan handler."""
    setup_logging()
    log = get_logger("startup")

    settings = get_settings()
    registry: ToolRegistry = app.state.registry
    log.info(
        "Starting MCP server",
        server_name=settings.server_name,
        version=settings.server_version,
        endpoint=f"http://{settings.host}:{settings.port}/mcp",
    )
    log.info("Tools loaded", tools=registry.tool_names)
    if not settings.store_configured:
        log.warning("SUPABASE_URL is not set; insert_listing calls will fail")

    yield

    log.info("Shutting down MCP server")


def create_app(registry: ToolRegistry | None = None) -> FastAPI:
    """
    Build the FastAPI application around a tool registry.

    Args:
        registry: Tools to expose. Defaults to the process-wide registry.
    """
    settings = get_settings()
    app = FastAPI(
        title=settings.server_name,
        description="MCP server for PazarGlobal price cleaning and listing insertion",
        version=settings.server_version,
        lifespan=lifespan,
    )
    app.state.registry = registry if registry is not None else get_registry()
    app.state.processor = JsonRpcProcessor(MCPHandlers(app.state.registry))

    # CORS headers on every response; OPTIONS is answered before routing
    app.add_middleware(CorsHeadersMiddleware)

    @app.middleware("http")
    async def add_request_id_middleware(request: Request, call_next):
        """Add request ID to all requests."""
        request_id = new_request_context(request.headers.get("X-Request-ID"))
        response = await call_next(request)
        response.headers["X-Request-ID"] = request_id
        return response

    # =========================================================================
    # Health and Info Endpoints
    # =========================================================================

    @app.get("/health")
    async def health() -> dict:
        """Health check endpoint."""
        return {"status": "ok"}

    @app.get("/")
    async def root(request: Request) -> dict:
        """Root endpoint with server info."""
        return {
            "name": settings.server_name,
            "version": settings.server_version,
            "endpoints": {"health": "/health", "mcp": "/mcp"},
            "tools": request.app.state.registry.tool_names,
        }

    # =========================================================================
    # MCP Endpoints
    # =========================================================================

    @app.post("/mcp")
    async def mcp_endpoint(request: Request) -> JSONResponse:
        """
        JSON-RPC endpoint for tools/list and tools/call.

        Errors are reported in the JSON-RPC payload with HTTP 200; only a body
        without a method is rejected with HTTP 400.
        """
        body = await request.body()
        processor: JsonRpcProcessor = request.app.state.processor

        try:
            response = await processor.handle_message(body)
        except InvalidEnvelopeError as e:
            logger.warning("rejected_envelope", detail=e.detail)
            return JSONResponse(status_code=400, content={"error": str(e)})

        return JSONResponse(content=response.model_dump())

    @app.get("/mcp")
    async def mcp_browser_check(request: Request) -> dict:
        """JSON-RPC shaped tool list so visiting /mcp in a browser is informative."""
        tools = [
            BrowserCheckTool(name=name).model_dump()
            for name in request.app.state.registry.tool_names
        ]
        return {"jsonrpc": "2.0", "id": "browser-check", "result": {"tools": tools}}

    return app


app = create_app()


# =============================================================================
# Main Entry Point
# =============================================================================


def main() -> None:
    """Run the server with uvicorn."""
    import uvicorn

    settings = get_settings()
    try:
        uvicorn.run(
            "pazarglobal_mcp.main:app",
            host=settings.host,
            port=settings.port,
        )
    except OSError as e:
        logger.error("bind_failed", host=settings.host, port=settings.port, error=str(e))
        sys.exit(1)


if __name__ == "__main__":
    main()
