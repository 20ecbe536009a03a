"""Structured logging: one JSON line per event, tagged with request and RPC context."""

import logging
import sys
import uuid
from typing import Any

import structlog
from structlog.contextvars import bind_contextvars, clear_contextvars, get_contextvars

from pazarglobal_mcp.config.loader import get_settings

# Event keys whose values must never reach the log output
SECRET_KEYS = frozenset({"apikey", "authorization", "supabase_service_key"})


def new_request_context(request_id: str | None = None) -> str:
    """
    Start a fresh logging context for one HTTP request.

    Anything bound by a previous request on the same task is dropped, so the
    RPC method and tool name of one call never leak into the next.
    """
    clear_contextvars()
    request_id = request_id or uuid.uuid4().hex[:8]
    bind_contextvars(request_id=request_id)
    return request_id


def get_request_id() -> str:
    """Get the current request ID."""
    return get_contextvars().get("request_id", "")


def bind_rpc_context(method: Any = None, rpc_id: Any = None, tool: str | None = None) -> None:
    """Tag subsequent log events with the JSON-RPC method, id and tool name."""
    values = {"rpc_method": method, "rpc_id": rpc_id, "tool": tool}
    bind_contextvars(**{key: value for key, value in values.items() if value is not None})


def redact_secrets(
    logger: Any, method_name: str, event_dict: dict[str, Any]
) -> dict[str, Any]:
    """Mask store credentials if a call site logs them."""
    for key in SECRET_KEYS.intersection(event_dict):
        event_dict[key] = "***"
    return event_dict


def setup_logging() -> None:
    """Set up structured logging."""
    settings = get_settings()
    level = getattr(logging, settings.log_level.upper(), logging.INFO)

    processors = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        redact_secrets,
        structlog.processors.format_exc_info,
    ]

    if settings.log_format == "json":
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=True))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stdout),
        cache_logger_on_first_use=True,
    )

    # uvicorn and httpx log through the standard library
    logging.basicConfig(format="%(message)s", stream=sys.stdout, level=level)
    logging.getLogger("httpx").setLevel(max(level, logging.WARNING))


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """Get a structured logger, tagged with ``logger=<name>`` when a name is given."""
    if name is None:
        return structlog.get_logger()
    return structlog.get_logger().bind(logger=name)
