"""Runtime configuration (environment overrides on top of constants)."""

from __future__ import annotations

import os
from dataclasses import dataclass

from .constants import (
    DEFAULT_COMPARE_REF,
    DEFAULT_SOURCE_ROOT,
    DEFAULT_TEST_ROOT,
    WATCH_POLL_INTERVAL_SECONDS,
)


@dataclass(frozen=True)
class ScaffoldConfig:
    """
    Settings shared by the CLI, the MCP handlers and the services.

    Attributes:
        source_root: Directory scanned for modules needing tests
        test_root: Directory tests are expected under
        compare_ref: Git ref used by the changed/new file commands
        poll_interval: Seconds between watcher polls
    """
    source_root: str = DEFAULT_SOURCE_ROOT
    test_root: str = DEFAULT_TEST_ROOT
    compare_ref: str = DEFAULT_COMPARE_REF
    poll_interval: float = WATCH_POLL_INTERVAL_SECONDS

    @classmethod
    def from_env(cls) -> ScaffoldConfig:
        """Build config from SCAFFOLD_* environment variables."""
        poll = os.getenv("SCAFFOLD_POLL_INTERVAL")
        return cls(
            source_root=os.getenv("SCAFFOLD_SOURCE_ROOT") or DEFAULT_SOURCE_ROOT,
            test_root=os.getenv("SCAFFOLD_TEST_ROOT") or DEFAULT_TEST_ROOT,
            compare_ref=os.getenv("SCAFFOLD_COMPARE_REF") or DEFAULT_COMPARE_REF,
            poll_interval=float(poll) if poll else WATCH_POLL_INTERVAL_SECONDS,
        )
