"""Unit tests for repository identity resolution from .git/config.

These tests build throwaway .git directories and don't require git or network access.
Run with: pytest tests/test_identity_unit.py
"""

from pathlib import Path
from unittest.mock import patch

import pytest
from git_approvers.resolvers.identity import (
    find_git_config,
    parse_remote_url,
    read_origin_url,
    resolve_repository_identity,
)
from git_approvers.utils.types import FailureReason, RepositoryIdentity


class TestParseRemoteUrl:
    """Unit tests for remote URL parsing."""

    def test_ssh_url(self) -> None:
        """Test SSH remotes yield owner and name."""
        assert parse_remote_url("git@github.com:acme/widgets.git") == RepositoryIdentity(
            owner="acme", name="widgets"
        )

    def test_https_url(self) -> None:
        """Test HTTPS remotes yield owner and name."""
        assert parse_remote_url("https://github.com/acme/widgets.git") == RepositoryIdentity(
            owner="acme", name="widgets"
        )

    def test_surrounding_whitespace_is_ignored(self) -> None:
        """Test config values with stray whitespace still parse."""
        identity = parse_remote_url("  git@github.com:acme/widgets.git\n")
        assert identity == RepositoryIdentity(owner="acme", name="widgets")

    def test_dotted_repository_name(self) -> None:
        """Test names containing dots keep everything before the .git suffix."""
        identity = parse_remote_url("https://github.com/acme/widgets.io.git")
        assert identity == RepositoryIdentity(owner="acme", name="widgets.io")

    @pytest.mark.parametrize(
        "url",
        [
            "git@github.com:acme/widgets",
            "https://github.com/acme/widgets",
            "git@gitlab.com:acme/widgets.git",
            "https://bitbucket.org/acme/widgets.git",
            "git@github.com:acme.git",
            "https://github.com//widgets.git",
            "git@github.com:acme/.git",
            "",
        ],
    )
    def test_malformed_urls(self, url: str) -> None:
        """Test URLs missing .git, on other hosts, or missing a part yield None."""
        assert parse_remote_url(url) is None


class TestFindGitConfig:
    """Unit tests for locating the git config file."""

    def test_regular_checkout(self, workspace: Path) -> None:
        """Test a plain .git directory."""
        assert find_git_config(workspace) == workspace / ".git" / "config"

    def test_no_git_directory(self, tmp_path: Path) -> None:
        """Test a workspace that is not a repository."""
        assert find_git_config(tmp_path) is None

    def test_linked_worktree(self, tmp_path: Path) -> None:
        """Test a worktree .git file is followed to the shared config."""
        main_git = tmp_path / "main" / ".git"
        worktree_git = main_git / "worktrees" / "feature"
        worktree_git.mkdir(parents=True)
        (main_git / "config").write_text('[remote "origin"]\n\turl = x\n')
        (worktree_git / "commondir").write_text("../..\n")

        checkout = tmp_path / "feature"
        checkout.mkdir()
        (checkout / ".git").write_text(f"gitdir: {worktree_git}\n")

        assert find_git_config(checkout) == (main_git / "config").resolve()

    def test_relative_gitdir_pointer(self, tmp_path: Path) -> None:
        """Test a submodule-style relative gitdir pointer."""
        module_git = tmp_path / ".git" / "modules" / "lib"
        module_git.mkdir(parents=True)
        (module_git / "config").write_text("[core]\n")

        checkout = tmp_path / "lib"
        checkout.mkdir()
        (checkout / ".git").write_text("gitdir: ../.git/modules/lib\n")

        assert find_git_config(checkout) == (module_git / "config").resolve()

    def test_garbage_git_file(self, tmp_path: Path) -> None:
        """Test a .git file without a gitdir pointer."""
        (tmp_path / ".git").write_text("not a pointer\n")
        assert find_git_config(tmp_path) is None


class TestReadOriginUrl:
    """Unit tests for reading remote.origin.url."""

    def test_reads_tab_indented_config(self, workspace: Path) -> None:
        """Test the layout git itself writes."""
        assert read_origin_url(workspace / ".git" / "config") == "git@github.com:acme/widgets.git"

    def test_other_remotes_are_ignored(self, tmp_path: Path) -> None:
        """Test only the origin remote is consulted."""
        config = tmp_path / "config"
        config.write_text(
            '[remote "upstream"]\n\turl = git@github.com:other/thing.git\n'
            '[remote "origin"]\n\turl = https://github.com/acme/widgets.git\n'
        )
        assert read_origin_url(config) == "https://github.com/acme/widgets.git"

    def test_duplicate_keys_and_flags(self, tmp_path: Path) -> None:
        """Test repeated fetch keys and valueless keys are tolerated."""
        config = tmp_path / "config"
        config.write_text(
            '[remote "origin"]\n'
            "\turl = git@github.com:acme/widgets.git\n"
            "\tfetch = +refs/heads/*:refs/remotes/origin/*\n"
            "\tfetch = +refs/pull/*:refs/remotes/origin/pr/*\n"
            "\tprune\n"
        )
        assert read_origin_url(config) == "git@github.com:acme/widgets.git"

    def test_quoted_url(self, tmp_path: Path) -> None:
        """Test surrounding double quotes are removed, as git does."""
        config = tmp_path / "config"
        config.write_text('[remote "origin"]\n\turl = "git@github.com:acme/widgets.git"\n')
        assert read_origin_url(config) == "git@github.com:acme/widgets.git"

    def test_no_origin(self, tmp_path: Path) -> None:
        """Test a config without an origin remote."""
        config = tmp_path / "config"
        config.write_text("[core]\n\tbare = false\n")
        assert read_origin_url(config) is None


class TestResolveRepositoryIdentity:
    """Unit tests for the identity resolver entry point."""

    def test_ssh_origin(self, make_workspace) -> None:
        """Test an SSH origin resolves to acme/widgets."""
        result = resolve_repository_identity(make_workspace("git@github.com:acme/widgets.git"))

        assert result.found
        assert result.value == RepositoryIdentity(owner="acme", name="widgets")

    def test_https_origin(self, make_workspace) -> None:
        """Test an HTTPS origin resolves to acme/widgets."""
        result = resolve_repository_identity(
            make_workspace("https://github.com/acme/widgets.git")
        )

        assert result.found
        assert result.value.full_name == "acme/widgets"

    def test_no_workspace(self) -> None:
        """Test a missing workspace root."""
        result = resolve_repository_identity(None)

        assert not result.found
        assert result.reason is FailureReason.NO_WORKSPACE

    def test_not_a_repository(self, tmp_path: Path) -> None:
        """Test a directory without .git."""
        result = resolve_repository_identity(tmp_path)

        assert result.value is None
        assert result.reason is FailureReason.NO_GIT_CONFIG

    def test_missing_origin(self, make_workspace) -> None:
        """Test a repository without an origin remote."""
        result = resolve_repository_identity(make_workspace(None))

        assert result.reason is FailureReason.NO_ORIGIN

    def test_non_github_origin(self, make_workspace) -> None:
        """Test an origin on another host."""
        result = resolve_repository_identity(make_workspace("git@gitlab.com:acme/widgets.git"))

        assert result.reason is FailureReason.UNRECOGNIZED_REMOTE
        assert result.detail == "git@gitlab.com:acme/widgets.git"

    def test_unparseable_config(self, workspace: Path) -> None:
        """Test a config file that is not INI-like."""
        (workspace / ".git" / "config").write_text("url = no section header\n")

        result = resolve_repository_identity(workspace)

        assert result.reason is FailureReason.CONFIG_UNREADABLE

    def test_quoted_origin(self, make_workspace) -> None:
        """Test a quoted origin URL still resolves."""
        result = resolve_repository_identity(
            make_workspace('"https://github.com/acme/widgets.git"')
        )

        assert result.value == RepositoryIdentity(owner="acme", name="widgets")

    def test_unreadable_config(self, workspace: Path) -> None:
        """Test read errors are converted, not raised."""
        with patch.object(Path, "read_text", side_effect=PermissionError("denied")):
            result = resolve_repository_identity(workspace)

        assert result.value is None
        assert result.reason is FailureReason.CONFIG_UNREADABLE
        assert "denied" in result.detail
