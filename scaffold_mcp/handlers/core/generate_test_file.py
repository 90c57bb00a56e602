"""MCP handler for generate_test_file (delegates to ScaffoldService)."""

from __future__ import annotations

from mcp.types import TextContent, Tool

from ...core.scaffolder import BatchItem, ItemStatus
from ...services import ServiceResult, create_scaffold_service

# =============================================================================
# Tool Definition
# =============================================================================

TOOL_DEFINITION = Tool(
    name="generate_test_file",
    description=(
        "Generate a stub vitest file next to a TypeScript/JavaScript module. "
        "React components get render, props, state, effect and snapshot "
        "placeholders; other modules get a definition check. "
        "An existing test file is never overwritten."
    ),
    inputSchema={
        "type": "object",
        "properties": {
            "file_path": {
                "type": "string",
                "description": "Path to the module to generate a test for"
            },
            "dry_run": {
                "type": "boolean",
                "description": "Return the stub without writing it (default: false)"
            }
        },
        "required": ["file_path"]
    }
)


# =============================================================================
# Handler
# =============================================================================

async def handle(arguments: dict) -> list[TextContent]:
    """Generate (or preview) the stub test for 'file_path'."""
    service = create_scaffold_service()
    file_path = arguments.get("file_path")

    if arguments.get("dry_run", False):
        preview = service.preview(file_path)
        if not preview.success:
            return _error_response(preview)
        if preview.data is None:
            return [TextContent(type="text", text=_skipped_message(file_path))]
        return [TextContent(type="text", text=format_preview(preview.data))]

    result = service.generate(file_path)

    if not result.success:
        return _error_response(result)

    return [TextContent(type="text", text=format_generation_item(result.data))]


# =============================================================================
# Response Formatting
# =============================================================================

def format_generation_item(item: BatchItem) -> str:
    """Format a single generation outcome as readable text."""
    if item.status is ItemStatus.GENERATED:
        return f"Generated test file: {item.test_path}"
    if item.status is ItemStatus.EXISTING:
        return f"Test file already exists: {item.test_path}"
    if item.status is ItemStatus.SKIPPED:
        return _skipped_message(item.source_path)
    return f"Error generating test for {item.source_path}: {item.error}"


def format_preview(generated) -> str:
    """Format a rendered-but-unwritten test document."""
    lines = [f"Preview for {generated.module_name} ({len(generated.test_cases)} test(s))"]

    if generated.warnings:
        lines.append("")
        lines.append("Warnings/Notes:")
        for warning in generated.warnings:
            lines.append(f"  - {warning}")

    lines.extend([
        "",
        "=" * 60,
        "GENERATED TEST CODE:",
        "=" * 60,
        "",
        generated.to_code()
    ])
    return "\n".join(lines)


# =============================================================================
# Helpers
# =============================================================================

def _skipped_message(file_path: str | None) -> str:
    return f"No test generated for: {file_path} (test, spec or config module)"


def _error_response(result: ServiceResult) -> list[TextContent]:
    """Create error response from failed ServiceResult."""
    return [TextContent(type="text", text=f"Error: {result.error.message}")]
