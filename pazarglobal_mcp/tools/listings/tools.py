"""Listing provider tools."""

from typing import Any, Protocol

from pydantic import BaseModel

from pazarglobal_mcp.mcp.registry import ToolRegistry
from pazarglobal_mcp.tools.listings.client import get_client


class ListingStore(Protocol):
    async def insert_listing(self, listing: dict[str, Any]) -> dict[str, Any]: ...


class InsertListingArguments(BaseModel):
    """Arguments for insert_listing."""

    product_name: str
    brand: str | None = None
    condition: str | None = None
    category: str | None = None
    description: str | None = None
    original_price_text: str | None = None
    clean_price: int | float | None = None


def make_insert_listing_handler(client: ListingStore):
    """Build the insert_listing handler bound to a store client."""

    async def insert_listing_handler(arguments: InsertListingArguments) -> dict[str, Any]:
        """Handle the insert_listing tool call."""
        # Only fields the caller actually sent are forwarded
        return await client.insert_listing(arguments.model_dump(exclude_unset=True))

    return insert_listing_handler


def register_tools(registry: ToolRegistry, client: ListingStore | None = None) -> None:
    """Register listing tools with the registry."""

    registry.register(
        name="insert_listing",
        description="Insert a new product listing to Supabase database",
        input_schema={
            "type": "object",
            "properties": {
                "product_name": {"type": "string", "description": "Product name"},
                "brand": {"type": "string", "description": "Brand name"},
                "condition": {"type": "string", "description": "Product condition"},
                "category": {"type": "string", "description": "Product category"},
                "description": {"type": "string", "description": "Product description"},
                "original_price_text": {
                    "type": "string",
                    "description": "Original price text",
                },
                "clean_price": {"type": "number", "description": "Cleaned numeric price"},
            },
            "required": ["product_name"],
        },
        arguments_model=InsertListingArguments,
        handler=make_insert_listing_handler(client or get_client()),
    )
