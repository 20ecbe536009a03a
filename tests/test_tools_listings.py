"""Tests for the listing provider."""

import json

import httpx
import pytest

from pazarglobal_mcp.config.loader import Settings
from pazarglobal_mcp.mcp.registry import ToolRegistry
from pazarglobal_mcp.tools.listings.client import ListingStoreClient, ListingStoreError
from pazarglobal_mcp.tools.listings.tools import (
    InsertListingArguments,
    make_insert_listing_handler,
    register_tools,
)

LISTING = {
    "product_name": "Chair",
    "brand": "Ikea",
    "condition": "used",
    "category": "furniture",
    "description": "Oak chair",
    "original_price_text": "1,234 TL",
    "clean_price": 1234,
}


def make_settings(**overrides) -> Settings:
    values = {
        "supabase_url": "https://db.example.co",
        "supabase_service_key": "service-key",
    }
    values.update(overrides)
    return Settings(**values)


def make_client(handler, **overrides) -> ListingStoreClient:
    return ListingStoreClient(
        settings=make_settings(**overrides), transport=httpx.MockTransport(handler)
    )


class TestListingStoreClient:
    """Tests for the Supabase listing client."""

    @pytest.mark.asyncio
    async def test_posts_listing(self):
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(201, json=[dict(LISTING, id=17)])

        result = await make_client(handler).insert_listing(LISTING)

        assert result == {"success": True, "status": 201, "result": [dict(LISTING, id=17)]}
        request = seen[0]
        assert request.method == "POST"
        assert str(request.url) == "https://db.example.co/rest/v1/listings"
        assert request.headers["apikey"] == "service-key"
        assert request.headers["authorization"] == "Bearer service-key"
        assert request.headers["prefer"] == "return=representation"
        assert request.headers["content-type"] == "application/json"
        assert json.loads(request.content) == LISTING

    @pytest.mark.asyncio
    async def test_payload_keeps_only_listing_fields(self):
        bodies: list[dict] = []

        def handler(request: httpx.Request) -> httpx.Response:
            bodies.append(json.loads(request.content))
            return httpx.Response(201, json=[])

        await make_client(handler).insert_listing(
            {"product_name": "Lamp", "brand": None, "owner_id": "x"}
        )
        assert bodies == [{"product_name": "Lamp", "brand": None}]

    @pytest.mark.asyncio
    async def test_custom_table(self):
        urls: list[str] = []

        def handler(request: httpx.Request) -> httpx.Response:
            urls.append(str(request.url))
            return httpx.Response(201, json=[])

        await make_client(handler, listings_table="drafts").insert_listing(LISTING)
        assert urls == ["https://db.example.co/rest/v1/drafts"]

    @pytest.mark.asyncio
    async def test_error_status_reported_in_band(self):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(409, json={"message": "duplicate key"})

        result = await make_client(handler).insert_listing(LISTING)
        assert result == {
            "success": False,
            "status": 409,
            "result": {"message": "duplicate key"},
        }

    @pytest.mark.asyncio
    async def test_empty_body(self):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(204)

        result = await make_client(handler).insert_listing(LISTING)
        assert result == {"success": True, "status": 204, "result": None}

    @pytest.mark.asyncio
    async def test_non_json_body_raises(self):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(502, text="<html>Bad gateway</html>")

        with pytest.raises(ListingStoreError, match="non-JSON"):
            await make_client(handler).insert_listing(LISTING)

    @pytest.mark.asyncio
    async def test_network_error_propagates(self):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        with pytest.raises(httpx.ConnectError):
            await make_client(handler).insert_listing(LISTING)

    @pytest.mark.asyncio
    async def test_unconfigured_store_raises(self):
        def handler(request: httpx.Request) -> httpx.Response:
            raise AssertionError("no request expected")

        with pytest.raises(ListingStoreError, match="SUPABASE_URL"):
            await make_client(handler, supabase_url="").insert_listing(LISTING)


class TestInsertListingHandler:
    """Tests for the insert_listing tool handler."""

    @pytest.mark.asyncio
    async def test_forwards_only_supplied_fields(self, store):
        handler = make_insert_listing_handler(store)
        arguments = InsertListingArguments.model_validate(
            {"product_name": "Chair", "clean_price": 100, "condition": None}
        )

        result = await handler(arguments)

        assert result["success"] is True
        assert result["status"] == 201
        assert store.calls == [{"product_name": "Chair", "clean_price": 100, "condition": None}]

    @pytest.mark.asyncio
    async def test_store_errors_propagate(self, store_factory):
        handler = make_insert_listing_handler(store_factory(error=RuntimeError("boom")))
        with pytest.raises(RuntimeError, match="boom"):
            await handler(InsertListingArguments(product_name="Chair"))

    def test_arguments_accept_fractional_price(self):
        arguments = InsertListingArguments.model_validate(
            {"product_name": "Chair", "clean_price": 99.5}
        )
        assert arguments.clean_price == 99.5

    def test_register_tools_uses_given_client(self, store):
        registry = ToolRegistry()
        register_tools(registry, client=store)

        tool = registry.get("insert_listing")
        assert tool is not None
        assert tool.required == ["product_name"]
        assert set(tool.input_schema["properties"]) == set(LISTING)
