"""Supabase (PostgREST) client for the listings table."""

import json
from typing import Any

import httpx

from pazarglobal_mcp.config.loader import Settings, get_settings
from pazarglobal_mcp.utils.http import create_http_client
from pazarglobal_mcp.utils.logging import get_logger

logger = get_logger(__name__)

LISTING_FIELDS = (
    "product_name",
    "brand",
    "condition",
    "category",
    "description",
    "original_price_text",
    "clean_price",
)


class ListingStoreError(Exception):
    """The listing store could not be reached or answered with an unreadable body."""


class ListingStoreClient:
    """Client that writes product listings to Supabase."""

    def __init__(
        self,
        settings: Settings | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.settings = settings or get_settings()
        self._transport = transport

    def _headers(self) -> dict[str, str]:
        key = self.settings.supabase_service_key
        return {
            "Content-Type": "application/json",
            "apikey": key,
            "Authorization": f"Bearer {key}",
            "Prefer": "return=representation",
        }

    async def insert_listing(self, listing: dict[str, Any]) -> dict[str, Any]:
        """
        Insert one listing row.

        Args:
            listing: Listing fields; keys outside LISTING_FIELDS are dropped.

        Returns:
            ``{"success": bool, "status": int, "result": <response body>}``.
            A non-2xx answer is reported with ``success`` False, not raised.

        Raises:
            ListingStoreError: Store not configured, or body is not JSON.
            httpx.HTTPError: On network failure or timeout.
        """
        if not self.settings.store_configured:
            raise ListingStoreError("SUPABASE_URL is not configured")

        payload = {field: listing[field] for field in LISTING_FIELDS if field in listing}
        url = self.settings.listings_endpoint

        async with create_http_client(
            timeout=self.settings.default_timeout, transport=self._transport
        ) as client:
            response = await client.post(url, json=payload, headers=self._headers())

        logger.info(
            "listing_store_response",
            status=response.status_code,
            table=self.settings.listings_table,
            fields=sorted(payload),
        )
        return {
            "success": response.is_success,
            "status": response.status_code,
            "result": self._parse_body(response),
        }

    @staticmethod
    def _parse_body(response: httpx.Response) -> Any:
        if not response.content.strip():
            return None
        try:
            return response.json()
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise ListingStoreError(
                f"Listing store returned a non-JSON body (HTTP {response.status_code})"
            ) from e


# Singleton client
_client: ListingStoreClient | None = None


def get_client() -> ListingStoreClient:
    """Get the listing store client instance."""
    global _client
    if _client is None:
        _client = ListingStoreClient()
    return _client
