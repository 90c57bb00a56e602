"""Tests for GitChangesService (repository mocked unless a real one is needed)."""

import shutil
from pathlib import Path
from unittest.mock import Mock

import pytest
from git import Repo
from git.exc import GitCommandError, InvalidGitRepositoryError

from scaffold_mcp.core.scaffolder import ItemStatus, Scaffolder
from scaffold_mcp.services import ErrorCode, GitChangesService


@pytest.fixture
def mock_repo(source_tree):
    """A repo whose working tree is the parent of the sample src/ tree."""
    repo = Mock()
    repo.working_tree_dir = str(source_tree.parent)
    repo.git.diff.return_value = ""
    return repo


def _service(repo, source_tree):
    return GitChangesService(".", scaffolder=Scaffolder(source_tree), repo=repo)


# =============================================================================
# Diff listing
# =============================================================================

class TestChangedFiles:
    """Tests for changed_files / new_files."""

    def test_filters_to_non_test_modules(self, mock_repo, source_tree):
        mock_repo.git.diff.return_value = (
            "src/components/Counter.tsx\n"
            "src/components/Counter.test.tsx\n"
            "README.md\n"
            "src/utils/math.ts\n"
        )

        result = _service(mock_repo, source_tree).changed_files("main")

        assert result.data == ["src/components/Counter.tsx", "src/utils/math.ts"]
        mock_repo.git.diff.assert_called_once_with("--name-only", "--diff-filter=d", "main")

    def test_new_files_uses_added_filter(self, mock_repo, source_tree):
        _service(mock_repo, source_tree).new_files()

        mock_repo.git.diff.assert_called_once_with("--name-only", "--diff-filter=A", "HEAD~1")

    def test_git_error(self, mock_repo, source_tree):
        mock_repo.git.diff.side_effect = GitCommandError(
            "git diff", 128, stderr="fatal: bad revision 'nope'"
        )

        result = _service(mock_repo, source_tree).changed_files("nope")

        assert result.success is False
        assert result.error.code == ErrorCode.GIT_ERROR
        assert "bad revision" in result.error.message

    @pytest.mark.skipif(shutil.which("git") is None, reason="git executable not available")
    def test_deleted_files_not_listed(self, tmp_path):
        """A module removed since the ref is not reported as changed."""
        repo = Repo.init(tmp_path)
        (tmp_path / "old.ts").write_text("export const a = 1;\n")
        repo.index.add(["old.ts"])
        repo.index.commit("add old")

        repo.index.remove(["old.ts"], working_tree=True)
        (tmp_path / "new.ts").write_text("export const b = 2;\n")
        repo.index.add(["new.ts"])
        repo.index.commit("replace old with new")

        service = GitChangesService(tmp_path, scaffolder=Scaffolder(tmp_path))
        batch = service.generate_for_changed_files("HEAD~1").data

        assert service.changed_files("HEAD~1").data == ["new.ts"]
        assert [i.status for i in batch.items] == [ItemStatus.GENERATED]
        assert batch.succeeded is True

    def test_not_a_repository(self, tmp_path):
        result = GitChangesService(tmp_path).changed_files()

        assert result.success is False
        assert result.error.code == ErrorCode.NOT_A_REPOSITORY


# =============================================================================
# Generation
# =============================================================================

class TestGenerateForChanges:
    """Tests for generate_for_changed_files / generate_for_new_files."""

    def test_generates_for_changed_modules(self, mock_repo, source_tree):
        mock_repo.git.diff.return_value = "src/components/Counter.tsx\n"

        result = _service(mock_repo, source_tree).generate_for_changed_files()

        assert [i.status for i in result.data.items] == [ItemStatus.GENERATED]
        assert (source_tree / "components" / "Counter.test.tsx").exists()

    def test_deleted_file_recorded_as_failure(self, mock_repo, source_tree):
        """A name git reports but the tree no longer has fails on its own."""
        mock_repo.git.diff.return_value = "src/Removed.tsx\nsrc/hooks/useLocalStorage.ts\n"

        result = _service(mock_repo, source_tree).generate_for_changed_files()

        assert [i.status for i in result.data.items] == [ItemStatus.FAILED, ItemStatus.GENERATED]

    def test_no_changes(self, mock_repo, source_tree):
        result = _service(mock_repo, source_tree).generate_for_new_files()

        assert result.success is True
        assert result.data.items == []

    def test_diff_failure_propagates(self, mock_repo, source_tree):
        mock_repo.git.diff.side_effect = GitCommandError("git diff", 128)

        result = _service(mock_repo, source_tree).generate_for_new_files("HEAD~5")

        assert result.error.code == ErrorCode.GIT_ERROR


# =============================================================================
# Working tree
# =============================================================================

class TestWorkingTree:
    """Tests for status and staging helpers."""

    def test_clean_working_directory(self, mock_repo, source_tree):
        mock_repo.is_dirty.return_value = False

        assert _service(mock_repo, source_tree).is_working_directory_clean() is True
        mock_repo.is_dirty.assert_called_once_with(untracked_files=True)

    def test_status_error_is_not_clean(self, mock_repo, source_tree):
        mock_repo.is_dirty.side_effect = InvalidGitRepositoryError("nope")

        assert _service(mock_repo, source_tree).is_working_directory_clean() is False

    def test_stage_test_files(self, mock_repo, source_tree):
        (source_tree / "node_modules" / "lib" / "index.test.js").write_text("")

        result = _service(mock_repo, source_tree).stage_test_files()

        expected = [str(Path("src") / "utils" / "math.test.ts")]
        assert result.data == expected
        mock_repo.git.add.assert_called_once_with("--", *expected)

    def test_stage_nothing(self, mock_repo, tmp_path):
        mock_repo.working_tree_dir = str(tmp_path)

        result = GitChangesService(".", repo=mock_repo).stage_test_files()

        assert result.data == []
        mock_repo.git.add.assert_not_called()
