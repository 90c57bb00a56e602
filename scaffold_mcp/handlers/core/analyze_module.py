"""MCP handler for the analyze_module tool (delegates to ScaffoldService)."""

from __future__ import annotations

import json

from mcp.types import TextContent, Tool

from ...services import ServiceResult, create_scaffold_service

# =============================================================================
# Tool Definition
# =============================================================================

TOOL_DEFINITION = Tool(
    name="analyze_module",
    description=(
        "Analyze a TypeScript/JavaScript module by pattern matching. "
        "Classifies it as a React component or a function module and "
        "extracts exports, imports, props, state and effect usage."
    ),
    inputSchema={
        "type": "object",
        "properties": {
            "file_path": {
                "type": "string",
                "description": "Path to the module to analyze"
            }
        },
        "required": ["file_path"]
    }
)


# =============================================================================
# Handler
# =============================================================================

async def handle(arguments: dict) -> list[TextContent]:
    """Analyze the module at 'file_path' and return JSON results."""
    service = create_scaffold_service()
    file_path = arguments.get("file_path")

    result = service.analyze(file_path)

    if not result.success:
        return _error_response(result)

    analysis = result.data
    if analysis is None:
        return [TextContent(
            type="text",
            text=f"Skipped: {file_path} is a test, spec or config module"
        )]

    return [TextContent(type="text", text=json.dumps(analysis.to_dict(), indent=2))]


# =============================================================================
# Helpers
# =============================================================================

def _error_response(result: ServiceResult) -> list[TextContent]:
    """Create error response from failed ServiceResult."""
    return [TextContent(type="text", text=f"Error: {result.error.message}")]
