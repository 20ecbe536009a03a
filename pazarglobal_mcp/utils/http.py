"""HTTP client factory for outbound calls."""

import httpx

from pazarglobal_mcp.config.loader import get_settings


def create_http_client(
    timeout: float | None = None,
    base_url: str | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> httpx.AsyncClient:
    """
    Create an async HTTP client with sensible defaults.

    Args:
        timeout: Request timeout in seconds. Uses default from settings if None.
        base_url: Optional base URL for all requests.
        transport: Optional transport override (e.g. ``httpx.MockTransport`` in tests).

    Returns:
        Configured httpx.AsyncClient instance.
    """
    settings = get_settings()

    if timeout is None:
        timeout = float(settings.default_timeout)

    return httpx.AsyncClient(
        base_url=base_url or "",
        timeout=httpx.Timeout(timeout),
        follow_redirects=True,
        headers={
            "User-Agent": f"pazarglobal-mcp/{settings.server_version}",
        },
        transport=transport,
    )
