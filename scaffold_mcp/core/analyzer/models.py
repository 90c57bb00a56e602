"""Data models for module analysis."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Literal, Union


class ModuleKind(str, Enum):
    """Tag that discriminates the two analysis variants."""
    COMPONENT = "component"
    FUNCTION = "function"


@dataclass(frozen=True)
class ComponentAnalysis:
    """Facts extracted from a module classified as a UI component."""
    name: str
    file_path: str
    has_input_params: bool = False
    input_params_type_name: str | None = None
    has_internal_state: bool = False
    has_lifecycle_effects: bool = False
    exported_names: frozenset[str] = frozenset()
    imported_modules: tuple[str, ...] = ()
    kind: Literal[ModuleKind.COMPONENT] = field(default=ModuleKind.COMPONENT, init=False)

    @property
    def is_component(self) -> bool:
        return True

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON response."""
        return {
            "kind": self.kind.value,
            "name": self.name,
            "file_path": self.file_path,
            "has_input_params": self.has_input_params,
            "input_params_type_name": self.input_params_type_name,
            "has_internal_state": self.has_internal_state,
            "has_lifecycle_effects": self.has_lifecycle_effects,
            "exported_names": sorted(self.exported_names),
            "imported_modules": list(self.imported_modules),
        }


@dataclass(frozen=True)
class FunctionAnalysis:
    """
    Facts extracted from a plain function module.

    `parameters` and `return_type` exist for shape parity only; the
    text scan never fills them in.
    """
    name: str
    file_path: str
    exported_names: frozenset[str] = frozenset()
    is_async: bool = False
    parameters: tuple[str, ...] = ()
    return_type: str = "unknown"
    kind: Literal[ModuleKind.FUNCTION] = field(default=ModuleKind.FUNCTION, init=False)

    @property
    def is_component(self) -> bool:
        return False

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON response."""
        return {
            "kind": self.kind.value,
            "name": self.name,
            "file_path": self.file_path,
            "exported_names": sorted(self.exported_names),
            "is_async": self.is_async,
            "parameters": list(self.parameters),
            "return_type": self.return_type,
        }


ModuleAnalysis = Union[ComponentAnalysis, FunctionAnalysis]
