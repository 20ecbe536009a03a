"""PazarGlobal MCP server: price cleaning and listing insertion over JSON-RPC."""

__version__ = "1.0.0"
