"""Tool registry for managing MCP tools."""

import logging
from typing import Any, Awaitable, Callable

from pydantic import BaseModel

from pazarglobal_mcp.mcp.models import Tool

logger = logging.getLogger(__name__)

# Type alias for tool handlers: validated arguments in, tool result dict out
ToolHandler = Callable[[Any], Awaitable[dict[str, Any]]]


class ToolDefinition:
    """A registered tool with its metadata, argument model and handler."""

    def __init__(
        self,
        name: str,
        description: str,
        input_schema: dict[str, Any],
        arguments_model: type[BaseModel],
        handler: ToolHandler,
    ):
        self.name = name
        self.description = description
        self.input_schema = input_schema
        self.arguments_model = arguments_model
        self.handler = handler

    @property
    def required(self) -> list[str]:
        return list(self.input_schema.get("required", []))

    def to_mcp_tool(self) -> Tool:
        """Convert to MCP Tool model for protocol responses."""
        return Tool(
            name=self.name,
            description=self.description,
            parameters=self.input_schema,
            required=self.required,
        )


class ToolRegistry:
    """
    Ordered, name-keyed table of tools.

    Tools are registered once while the application is being built; after
    ``freeze()`` the registry is read-only and safe to share across requests.
    """

    def __init__(self) -> None:
        self._tools: dict[str, ToolDefinition] = {}
        self._frozen = False

    def register(
        self,
        name: str,
        description: str,
        input_schema: dict[str, Any],
        arguments_model: type[BaseModel],
        handler: ToolHandler,
    ) -> None:
        """Register a tool with the registry."""
        if self._frozen:
            raise RuntimeError(f"Cannot register '{name}': registry is frozen")
        if name in self._tools:
            raise ValueError(f"Tool '{name}' is already registered")

        properties = input_schema.get("properties", {})
        missing = [field for field in input_schema.get("required", []) if field not in properties]
        if missing:
            raise ValueError(
                f"Tool '{name}' requires undeclared properties: {', '.join(missing)}"
            )

        self._tools[name] = ToolDefinition(
            name=name,
            description=description,
            input_schema=input_schema,
            arguments_model=arguments_model,
            handler=handler,
        )
        logger.info(f"Registered tool: {name}")

    def freeze(self) -> "ToolRegistry":
        """Make the registry read-only."""
        self._frozen = True
        return self

    @property
    def frozen(self) -> bool:
        return self._frozen

    def get(self, name: str) -> ToolDefinition | None:
        """Get a tool by name."""
        return self._tools.get(name)

    def resolve(self, name: str | None) -> ToolDefinition | None:
        """Resolve a tool for invocation; None if the name is unknown or missing."""
        if not name:
            return None
        return self.get(name)

    def list_tools(self) -> list[Tool]:
        """List all registered tools as MCP Tool models, in registration order."""
        return [tool.to_mcp_tool() for tool in self._tools.values()]

    @property
    def tool_names(self) -> list[str]:
        return list(self._tools)

    @property
    def tool_count(self) -> int:
        """Return the number of registered tools."""
        return len(self._tools)


def build_registry(store_client: Any = None) -> ToolRegistry:
    """
    Build the production registry: ``clean_price`` then ``insert_listing``.

    ``store_client`` replaces the settings-configured Supabase client, which is
    how tests run the listing tool against a fake store.
    """
    from pazarglobal_mcp.tools.listings import tools as listing_tools
    from pazarglobal_mcp.tools.pricing import tools as pricing_tools

    registry = ToolRegistry()
    pricing_tools.register_tools(registry)
    listing_tools.register_tools(registry, client=store_client)
    return registry.freeze()


# Global registry instance
_registry: ToolRegistry | None = None


def get_registry() -> ToolRegistry:
    """Get the process-wide default registry, creating it if necessary."""
    global _registry
    if _registry is None:
        _registry = build_registry()
    return _registry


def reset_registry() -> None:
    """Reset the process-wide registry (useful for testing)."""
    global _registry
    _registry = None
