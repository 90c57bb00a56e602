"""
Shared constants used across the project.
"""

from typing import Final

# Source modules the scaffolder recognizes (markup-capable and plain variants)
MODULE_EXTENSIONS: Final[tuple[str, ...]] = (".ts", ".tsx", ".js", ".jsx")

# Generated tests always use the markup-capable suffix
GENERATED_TEST_SUFFIX: Final[str] = ".test.tsx"

# Base-name substrings that mark a module as not worth scaffolding
SKIPPED_NAME_MARKERS: Final[tuple[str, ...]] = ("test", "spec", "config")

# File-name fragments that identify an existing test file
TEST_FILE_MARKERS: Final[tuple[str, ...]] = (".test.", ".spec.")

# Dependency, build and version-control trees never scanned
EXCLUDED_DIRS: Final[frozenset[str]] = frozenset({
    "node_modules", "dist", "build", ".git"
})

# Defaults
DEFAULT_SOURCE_ROOT: Final[str] = "src"
DEFAULT_TEST_ROOT: Final[str] = "src"
DEFAULT_COMPARE_REF: Final[str] = "HEAD~1"
WATCH_POLL_INTERVAL_SECONDS: Final[float] = 0.5
