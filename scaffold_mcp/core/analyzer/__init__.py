"""Analyzer - module classification and fact extraction."""

from .analyzer import analyze_file, analyze_source
from .classifier import is_component_module
from .extractor import extract_exported_names, extract_imported_modules
from .models import ComponentAnalysis, FunctionAnalysis, ModuleAnalysis, ModuleKind

__all__ = [
    "analyze_file",
    "analyze_source",
    "is_component_module",
    "extract_exported_names",
    "extract_imported_modules",
    "ComponentAnalysis",
    "FunctionAnalysis",
    "ModuleAnalysis",
    "ModuleKind",
]
