"""Core domain logic: analysis, template rendering and generation orchestration."""


from .analyzer import (
    ComponentAnalysis,
    FunctionAnalysis,
    ModuleAnalysis,
    ModuleKind,
    analyze_file,
    analyze_source,
    is_component_module,
)
from .generators import GeneratedTest, GeneratedTestCase, TemplateGenerator, generate_tests, render_test_document
from .scaffolder import BatchItem, BatchResult, ItemStatus, Scaffolder

__all__ = [
    # Analyzer
    "analyze_file",
    "analyze_source",
    "is_component_module",
    "ComponentAnalysis",
    "FunctionAnalysis",
    "ModuleAnalysis",
    "ModuleKind",
    # Generators
    "generate_tests",
    "render_test_document",
    "GeneratedTest",
    "GeneratedTestCase",
    "TemplateGenerator",
    # Orchestrator
    "Scaffolder",
    "BatchResult",
    "BatchItem",
    "ItemStatus",
]
