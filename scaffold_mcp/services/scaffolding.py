"""
Scaffolding Service - business logic behind the generate/check commands.

Wraps the core Scaffolder with:
- Input validation (path present, recognized extension)
- Exception-to-ServiceResult conversion
- A preview mode that renders without writing
"""

from __future__ import annotations

import logging
from pathlib import Path

from ..constants import MODULE_EXTENSIONS
from ..core.analyzer import ModuleAnalysis
from ..core.generators import GeneratedTest, generate_tests
from ..core.scaffolder import BatchItem, BatchResult, Scaffolder
from .base import ErrorCode, ServiceResult

logger = logging.getLogger(__name__)


class ScaffoldService:
    """
    Service for generating stub test files.

    Stateless apart from the injected Scaffolder (whose roots are fixed).
    """

    def __init__(self, scaffolder: Scaffolder | None = None):
        """
        Initialize the scaffolding service.

        Args:
            scaffolder: Scaffolder instance (creates default if None)
        """
        self._scaffolder = scaffolder or Scaffolder()

    @property
    def scaffolder(self) -> Scaffolder:
        return self._scaffolder

    def analyze(self, file_path: str | None) -> ServiceResult[ModuleAnalysis | None]:
        """Analyze one module; data is None when the module name is skipped."""
        validation_error = self._validate_path(file_path)
        if validation_error:
            return validation_error

        try:
            return ServiceResult.ok(self._scaffolder.analyze(file_path))
        except Exception as e:
            return ServiceResult.from_exception(e, f"Cannot read {file_path}")

    def preview(self, file_path: str | None) -> ServiceResult[GeneratedTest | None]:
        """Render the test document for one module without writing it."""
        analyze_result = self.analyze(file_path)
        if not analyze_result.success:
            return analyze_result

        return analyze_result.map(
            lambda analysis: generate_tests(analysis) if analysis is not None else None
        )

    def generate(self, file_path: str | None) -> ServiceResult[BatchItem]:
        """
        Generate the stub test for one module.

        Returns:
            ServiceResult containing a BatchItem whose status is
            generated, existing or skipped
        """
        validation_error = self._validate_path(file_path)
        if validation_error:
            return validation_error

        try:
            item = self._scaffolder.scaffold(file_path)
        except Exception as e:
            logger.error(f"Error generating test for {file_path}: {e}")
            return ServiceResult.from_exception(e, f"Cannot generate test for {file_path}")

        return ServiceResult.ok(item)

    def find_missing(self) -> ServiceResult[list[str]]:
        """List modules under the source root that have no test file."""
        root = self._scaffolder.source_root
        if not root.is_dir():
            return ServiceResult.fail(
                ErrorCode.FILE_NOT_FOUND,
                f"Source root not found: {root}"
            )

        try:
            return ServiceResult.ok(self._scaffolder.find_modules_needing_tests())
        except OSError as e:
            return ServiceResult.from_exception(e, f"Cannot scan {root}")

    def generate_all(self) -> ServiceResult[BatchResult]:
        """Generate tests for every module that lacks one (best-effort)."""
        missing = self.find_missing()
        if not missing.success:
            return missing

        logger.info(f"Found {len(missing.data)} files needing tests")
        return ServiceResult.ok(self._scaffolder.generate_for_paths(missing.data))

    def generate_for_paths(self, file_paths: list[str]) -> ServiceResult[BatchResult]:
        """Generate tests for the given paths (best-effort)."""
        return ServiceResult.ok(self._scaffolder.generate_for_paths(file_paths))

    def _validate_path(self, file_path: str | None) -> ServiceResult | None:
        """Return a failed result when the path is missing or not a module."""
        if not file_path:
            return ServiceResult.fail(
                ErrorCode.MISSING_INPUT,
                "'file_path' is required"
            )

        suffix = Path(file_path).suffix
        if suffix not in MODULE_EXTENSIONS:
            return ServiceResult.fail(
                ErrorCode.INVALID_EXTENSION,
                f"Unsupported module extension: {suffix or '(none)'}",
                details={"extension": suffix, "allowed": list(MODULE_EXTENSIONS)}
            )

        return None
