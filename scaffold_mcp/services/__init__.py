"""Services package.

Exposes stateless service classes and shared result types used by the
MCP handlers and the CLI.
"""


from ..config import ScaffoldConfig
from ..core.scaffolder import Scaffolder

# Base utilities
from .base import (
    ErrorCode,
    ServiceError,
    ServiceResult,
)

# Services
from .scaffolding import ScaffoldService
from .vcs import GitChangesService
from .watcher import ModuleWatcher, WatchEvent, WatchEventKind

__all__ = [
    # Base
    "ServiceResult",
    "ServiceError",
    "ErrorCode",
    # Services
    "ScaffoldService",
    "GitChangesService",
    "ModuleWatcher",
    "WatchEvent",
    "WatchEventKind",
]


# =============================================================================
# Convenience factory functions
# =============================================================================

def create_scaffold_service(
    source_root: str | None = None,
    test_root: str | None = None
) -> ScaffoldService:
    """Factory for ScaffoldService (roots default to ScaffoldConfig.from_env())."""
    config = ScaffoldConfig.from_env()
    return ScaffoldService(Scaffolder(
        source_root=source_root or config.source_root,
        test_root=test_root or config.test_root
    ))


def create_git_service(
    repo_path: str = ".",
    source_root: str | None = None
) -> GitChangesService:
    """Factory for GitChangesService."""
    return GitChangesService(
        repo_path=repo_path,
        scaffolder=create_scaffold_service(source_root).scaffolder
    )
