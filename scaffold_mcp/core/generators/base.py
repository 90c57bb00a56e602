"""
Base interface for test generators.
Holds the rendered-document model shared by all generators.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field

from ..analyzer.models import ComponentAnalysis, FunctionAnalysis

_INDENT = "  "


@dataclass
class GeneratedTestCase:
    """A single `it(...)` block."""
    name: str                          # "renders without crashing"
    body: list[str]                    # Lines inside the callback, relative indent
    leading_comment: str | None = None

    # What the block scaffolds (for reporting)
    category: str = "render"  # "render" | "props" | "state" | "effects" | "snapshot" | "definition"


@dataclass
class GeneratedTest:
    """Complete generated test document for one module."""
    module_name: str
    imports: list[str]
    test_cases: list[GeneratedTestCase]
    notes: list[str] = field(default_factory=list)      # Comments opening the describe block
    examples: list[str] = field(default_factory=list)   # Comments closing the describe block
    trailer: list[str] = field(default_factory=list)    # Declarations after the describe block
    warnings: list[str] = field(default_factory=list)

    def to_code(self) -> str:
        """Render the vitest document text."""
        lines = list(self.imports)
        lines.append("")
        lines.append(f"describe('{self.module_name}', () => {{")

        blocks: list[list[str]] = []
        if self.notes:
            blocks.append([f"{_INDENT}{note}" for note in self.notes])

        for test in self.test_cases:
            block = []
            if test.leading_comment:
                block.append(f"{_INDENT}{test.leading_comment}")
            block.append(f"{_INDENT}it('{test.name}', () => {{")
            block.extend(f"{_INDENT * 2}{line}" if line else "" for line in test.body)
            block.append(f"{_INDENT}}});")
            blocks.append(block)

        if self.examples:
            blocks.append([f"{_INDENT}{line}" for line in self.examples])

        for i, block in enumerate(blocks):
            if i > 0:
                lines.append("")
            lines.extend(block)

        lines.append("});")

        if self.trailer:
            lines.append("")
            lines.extend(self.trailer)

        return "\n".join(lines) + "\n"


class TestGeneratorBase(ABC):
    """Abstract base class for test generators."""

    @abstractmethod
    def generate_for_component(self, analysis: ComponentAnalysis) -> GeneratedTest:
        """Generate the test document for a UI component module."""
        pass

    @abstractmethod
    def generate_for_module(self, analysis: FunctionAnalysis) -> GeneratedTest:
        """Generate the test document for a plain function module."""
        pass
