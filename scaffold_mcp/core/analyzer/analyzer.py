"""Module analyzer - classify module text and extract its facts."""

from __future__ import annotations

from pathlib import Path

from ..paths import is_skipped_name, module_name_for
from .classifier import is_component_module
from .extractor import (
    extract_exported_names,
    extract_imported_modules,
    find_input_params_type_name,
    has_input_params,
    has_internal_state,
    has_lifecycle_effects,
    is_async_module,
)
from .models import ComponentAnalysis, FunctionAnalysis, ModuleAnalysis


def analyze_source(content: str, file_path: str = "module.tsx") -> ModuleAnalysis:
    """Analyze module text. Never raises; classification is best-effort."""
    name = module_name_for(file_path)

    if is_component_module(content):
        return ComponentAnalysis(
            name=name,
            file_path=str(file_path),
            has_input_params=has_input_params(content),
            input_params_type_name=find_input_params_type_name(content),
            has_internal_state=has_internal_state(content),
            has_lifecycle_effects=has_lifecycle_effects(content),
            exported_names=extract_exported_names(content),
            imported_modules=extract_imported_modules(content),
        )

    return FunctionAnalysis(
        name=name,
        file_path=str(file_path),
        exported_names=extract_exported_names(content),
        is_async=is_async_module(content),
    )


def analyze_file(file_path: str | Path) -> ModuleAnalysis | None:
    """
    Read and analyze a module file.

    Returns None for test, spec and config modules. Read errors
    (FileNotFoundError, PermissionError, UnicodeDecodeError) propagate.
    """
    content = Path(file_path).read_text(encoding="utf-8")

    if is_skipped_name(module_name_for(file_path)):
        return None

    return analyze_source(content, str(file_path))
