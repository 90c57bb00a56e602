"""Path policy: module names, test-file locations and discovery filters."""

from __future__ import annotations

from pathlib import Path

from ..constants import (
    EXCLUDED_DIRS,
    GENERATED_TEST_SUFFIX,
    MODULE_EXTENSIONS,
    SKIPPED_NAME_MARKERS,
    TEST_FILE_MARKERS,
)


def module_name_for(file_path: str | Path) -> str:
    """Base name without the final extension ("Button.test.tsx" -> "Button.test")."""
    return Path(file_path).stem


def is_skipped_name(name: str) -> bool:
    """Check whether a module base name opts out of scaffolding."""
    return any(marker in name for marker in SKIPPED_NAME_MARKERS)


def generated_test_path(file_path: str | Path) -> Path:
    """Sibling path a generated test is written to (always `.test.tsx`)."""
    path = Path(file_path)
    return path.parent / f"{module_name_for(path)}{GENERATED_TEST_SUFFIX}"


def matching_test_path(file_path: str | Path) -> Path:
    """Sibling test path that keeps the source extension (used for discovery)."""
    path = Path(file_path)
    return path.parent / f"{path.stem}.test{path.suffix}"


def is_module_file(file_path: str | Path) -> bool:
    return Path(file_path).suffix in MODULE_EXTENSIONS


def is_test_file(file_path: str | Path) -> bool:
    name = Path(file_path).name
    return any(marker in name for marker in TEST_FILE_MARKERS)


def is_excluded_path(file_path: str | Path, root: str | Path | None = None) -> bool:
    """Check whether any directory part (below root, if given) is excluded."""
    path = Path(file_path)
    if root is not None:
        try:
            path = path.relative_to(root)
        except ValueError:
            pass
    return any(part in EXCLUDED_DIRS for part in path.parts[:-1])


def is_candidate_module(file_path: str | Path, root: str | Path | None = None) -> bool:
    """A recognized, non-test module outside dependency/build/VCS trees."""
    return (
        is_module_file(file_path)
        and not is_test_file(file_path)
        and not is_excluded_path(file_path, root)
    )
