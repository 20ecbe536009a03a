"""Pricing provider tools."""

from typing import Any

from pydantic import BaseModel

from pazarglobal_mcp.mcp.registry import ToolRegistry
from pazarglobal_mcp.tools.pricing.cleaner import clean_price_text


class CleanPriceArguments(BaseModel):
    """Arguments for clean_price. A missing or null price yields a null result."""

    price_text: str | None = None


async def clean_price_handler(arguments: CleanPriceArguments) -> dict[str, Any]:
    """Handle the clean_price tool call."""
    return {"clean_price": clean_price_text(arguments.price_text)}


def register_tools(registry: ToolRegistry) -> None:
    """Register pricing tools with the registry."""

    registry.register(
        name="clean_price",
        description="Clean and parse price text to numeric value",
        input_schema={
            "type": "object",
            "properties": {
                "price_text": {
                    "type": "string",
                    "description": "Raw price text (e.g. '1,234 TL')",
                },
            },
            "required": ["price_text"],
        },
        arguments_model=CleanPriceArguments,
        handler=clean_price_handler,
    )
