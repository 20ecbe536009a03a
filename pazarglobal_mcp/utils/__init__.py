"""Utility modules: logging, HTTP client, CORS headers."""

from pazarglobal_mcp.utils.logging import setup_logging, get_logger
from pazarglobal_mcp.utils.http import create_http_client
from pazarglobal_mcp.utils.cors import CorsHeadersMiddleware

__all__ = [
    "setup_logging",
    "get_logger",
    "create_http_client",
    "CorsHeadersMiddleware",
]
