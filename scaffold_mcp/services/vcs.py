"""Version-control integration.

Lists changed/new modules with `git diff` (via GitPython) and feeds them to
the scaffolder. Errors from git come back as failed ServiceResults.
"""


from __future__ import annotations

import logging
from pathlib import Path

from git import Repo
from git.exc import GitCommandError, InvalidGitRepositoryError, NoSuchPathError

from ..constants import DEFAULT_COMPARE_REF, MODULE_EXTENSIONS
from ..core.paths import is_excluded_path, is_module_file, is_test_file
from ..core.scaffolder import BatchResult, Scaffolder
from .base import ErrorCode, ServiceResult

logger = logging.getLogger(__name__)


class GitChangesService:
    """Git operations used by the git-changed/git-new commands (diff, status, stage)."""

    def __init__(
        self,
        repo_path: str | Path = ".",
        scaffolder: Scaffolder | None = None,
        repo: Repo | None = None,
    ):
        self._repo_path = Path(repo_path)
        self._scaffolder = scaffolder or Scaffolder()
        self._repo = repo  # Lazy initialization

    def _get_repo(self) -> Repo:
        """Get or open the repository (searching parent directories)."""
        if self._repo is None:
            self._repo = Repo(self._repo_path, search_parent_directories=True)
        return self._repo

    # =========================================================================
    # Diff
    # =========================================================================

    def changed_files(self, compare_with: str = DEFAULT_COMPARE_REF) -> ServiceResult[list[str]]:
        """Modules changed since `compare_with` and still present (repo-relative paths)."""
        return self._diff_names(compare_with, "--diff-filter=d")

    def new_files(self, compare_with: str = DEFAULT_COMPARE_REF) -> ServiceResult[list[str]]:
        """Modules added since `compare_with` (repo-relative paths)."""
        return self._diff_names(compare_with, "--diff-filter=A")

    def _diff_names(self, compare_with: str, *options: str) -> ServiceResult[list[str]]:
        try:
            output = self._get_repo().git.diff("--name-only", *options, compare_with)
        except (InvalidGitRepositoryError, NoSuchPathError):
            return ServiceResult.fail(
                ErrorCode.NOT_A_REPOSITORY,
                f"Not a git repository: {self._repo_path}"
            )
        except GitCommandError as e:
            stderr = (e.stderr or "").strip()
            return ServiceResult.fail(
                ErrorCode.GIT_ERROR,
                f"git diff against {compare_with} failed: {stderr or e}",
                details={"ref": compare_with}
            )

        names = [line.strip() for line in output.splitlines() if line.strip()]
        return ServiceResult.ok([
            name for name in names
            if is_module_file(name) and not is_test_file(name)
        ])

    # =========================================================================
    # Generation
    # =========================================================================

    def generate_for_changed_files(
        self,
        compare_with: str = DEFAULT_COMPARE_REF
    ) -> ServiceResult[BatchResult]:
        """Generate stub tests for every changed module."""
        return self._generate_for(self.changed_files(compare_with), "changed")

    def generate_for_new_files(
        self,
        compare_with: str = DEFAULT_COMPARE_REF
    ) -> ServiceResult[BatchResult]:
        """Generate stub tests for every newly added module."""
        return self._generate_for(self.new_files(compare_with), "new")

    def _generate_for(
        self,
        names_result: ServiceResult[list[str]],
        label: str
    ) -> ServiceResult[BatchResult]:
        if not names_result.success:
            return names_result

        names = names_result.data
        if not names:
            logger.info(f"No {label} modules detected")
            return ServiceResult.ok(BatchResult())

        logger.info(f"Found {len(names)} {label} files: {', '.join(names)}")
        root = Path(self._get_repo().working_tree_dir)
        return ServiceResult.ok(
            self._scaffolder.generate_for_paths(str(root / name) for name in names)
        )

    # =========================================================================
    # Working tree
    # =========================================================================

    def is_working_directory_clean(self) -> bool:
        """True when there are no staged, unstaged or untracked changes."""
        try:
            return not self._get_repo().is_dirty(untracked_files=True)
        except (GitCommandError, InvalidGitRepositoryError, NoSuchPathError):
            return False

    def stage_test_files(self) -> ServiceResult[list[str]]:
        """Stage every `*.test.{ts,tsx,js,jsx}` file in the working tree."""
        try:
            repo = self._get_repo()
            root = Path(repo.working_tree_dir)
            paths = sorted(
                str(path.relative_to(root))
                for path in root.rglob("*.test.*")
                if path.is_file()
                and path.suffix in MODULE_EXTENSIONS
                and not is_excluded_path(path, root)
            )
            if paths:
                repo.git.add("--", *paths)
        except (InvalidGitRepositoryError, NoSuchPathError):
            return ServiceResult.fail(
                ErrorCode.NOT_A_REPOSITORY,
                f"Not a git repository: {self._repo_path}"
            )
        except GitCommandError as e:
            return ServiceResult.fail(
                ErrorCode.GIT_ERROR,
                f"git add failed: {(e.stderr or '').strip() or e}"
            )

        logger.info(f"Staged {len(paths)} test files")
        return ServiceResult.ok(paths)
