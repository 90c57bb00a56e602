"""
Scaffold MCP Server

Stub test generation for React/TypeScript modules.
Classify, Extract, Render, Write.
"""

__version__ = "0.1.0"

# Public API
from .core.analyzer import ComponentAnalysis, FunctionAnalysis, ModuleKind, analyze_file, analyze_source
from .core.generators import GeneratedTest, render_test_document
from .core.scaffolder import BatchResult, Scaffolder

__all__ = [
    "__version__",
    # Analyzer
    "analyze_file",
    "analyze_source",
    "ComponentAnalysis",
    "FunctionAnalysis",
    "ModuleKind",
    # Generator
    "render_test_document",
    "GeneratedTest",
    # Orchestrator
    "Scaffolder",
    "BatchResult",
]
