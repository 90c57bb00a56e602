"""
Scaffolder - the generation orchestrator.

Pipeline per module:
1. Read and analyze (skip test/spec/config modules)
2. Derive the sibling `.test.tsx` path
3. Leave an existing test file untouched
4. Otherwise render the template and write it

Batch operations run the single-file path sequentially and record a
per-item outcome instead of aborting on the first failure.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Iterable

from ..constants import DEFAULT_SOURCE_ROOT, DEFAULT_TEST_ROOT
from .analyzer import ModuleAnalysis, analyze_file
from .generators import render_test_document
from .paths import generated_test_path, is_candidate_module, matching_test_path

logger = logging.getLogger(__name__)


class ItemStatus(str, Enum):
    """Outcome of one batch item."""
    GENERATED = "generated"
    EXISTING = "existing"
    SKIPPED = "skipped"
    FAILED = "failed"


@dataclass(frozen=True)
class BatchItem:
    """Result for a single source path in a batch."""
    source_path: str
    status: ItemStatus
    test_path: str | None = None
    error: str | None = None

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON response."""
        result = {"source_path": self.source_path, "status": self.status.value}
        if self.test_path:
            result["test_path"] = self.test_path
        if self.error:
            result["error"] = self.error
        return result


@dataclass
class BatchResult:
    """Per-path results of a best-effort batch run."""
    items: list[BatchItem] = field(default_factory=list)

    @property
    def generated(self) -> list[BatchItem]:
        return [i for i in self.items if i.status is ItemStatus.GENERATED]

    @property
    def failed(self) -> list[BatchItem]:
        return [i for i in self.items if i.status is ItemStatus.FAILED]

    @property
    def succeeded(self) -> bool:
        """True when no item failed."""
        return not self.failed

    def counts(self) -> dict[str, int]:
        """Number of items per status, in status declaration order."""
        return {
            status.value: sum(1 for i in self.items if i.status is status)
            for status in ItemStatus
        }

    def to_dict(self) -> dict:
        return {
            "counts": self.counts(),
            "items": [i.to_dict() for i in self.items],
        }


class Scaffolder:
    """
    Generate stub tests for modules under a source root.

    Roots are fixed at construction; no other state is kept between calls.
    """

    def __init__(
        self,
        source_root: str | Path = DEFAULT_SOURCE_ROOT,
        test_root: str | Path = DEFAULT_TEST_ROOT
    ):
        self._source_root = Path(source_root)
        self._test_root = Path(test_root)

    @property
    def source_root(self) -> Path:
        return self._source_root

    @property
    def test_root(self) -> Path:
        return self._test_root

    def analyze(self, file_path: str | Path) -> ModuleAnalysis | None:
        """Analyze one module (None for skipped names; read errors propagate)."""
        return analyze_file(file_path)

    def generate_test_file(self, file_path: str | Path) -> str | None:
        """
        Generate the stub test for one module.

        Returns the test path, or None when the module is skipped. An
        existing test file is returned as-is and never overwritten.
        Read and write errors propagate.
        """
        return self.scaffold(file_path).test_path

    def find_modules_needing_tests(self) -> list[str]:
        """List candidate modules under the source root without a matching test file."""
        if not self._source_root.is_dir():
            logger.warning(f"Source root not found: {self._source_root}")
            return []

        modules = []
        for path in sorted(self._source_root.rglob("*")):
            if not path.is_file() or not is_candidate_module(path, self._source_root):
                continue
            if not matching_test_path(path).exists():
                modules.append(str(path))

        return modules

    def generate_all_missing_tests(self) -> BatchResult:
        """Generate tests for every module reported by find_modules_needing_tests()."""
        modules = self.find_modules_needing_tests()
        logger.info(f"Found {len(modules)} files needing tests")
        return self.generate_for_paths(modules)

    def generate_for_paths(self, file_paths: Iterable[str | Path]) -> BatchResult:
        """Run generate_test_file for each path; failures are recorded, not raised."""
        result = BatchResult()

        for file_path in file_paths:
            try:
                result.items.append(self.scaffold(file_path))
            except Exception as e:
                logger.error(f"Error generating test for {file_path}: {e}")
                result.items.append(BatchItem(
                    source_path=str(file_path),
                    status=ItemStatus.FAILED,
                    error=str(e)
                ))

        return result

    def scaffold(self, file_path: str | Path) -> BatchItem:
        """Same as generate_test_file(), reporting whether the file was written."""
        analysis = self.analyze(file_path)
        if analysis is None:
            logger.debug(f"Skipping {file_path}")
            return BatchItem(str(file_path), ItemStatus.SKIPPED)

        test_path = generated_test_path(file_path)
        if test_path.exists():
            logger.info(f"Test file already exists: {test_path}")
            return BatchItem(str(file_path), ItemStatus.EXISTING, str(test_path))

        test_path.write_text(render_test_document(analysis), encoding="utf-8")
        logger.info(f"Generated test file: {test_path}")
        return BatchItem(str(file_path), ItemStatus.GENERATED, str(test_path))
