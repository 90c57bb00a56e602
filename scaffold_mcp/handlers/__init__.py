"""MCP tool handlers, grouped by concern."""
