"""Root pytest configuration for git-approvers tests.

Provides fake git workspaces and settings so unit tests need neither a real
repository nor GITHUB_TOKEN.
"""

from collections.abc import Callable
from pathlib import Path

import pytest
from git_approvers.config.settings import Settings

GIT_CONFIG_TEMPLATE = """[core]
\trepositoryformatversion = 0
\tfilemode = true
\tbare = false
\tlogallrefupdates = true
[remote "origin"]
\turl = {url}
\tfetch = +refs/heads/*:refs/remotes/origin/*
[branch "main"]
\tremote = origin
\tmerge = refs/heads/main
"""


@pytest.fixture
def make_workspace(tmp_path: Path) -> Callable[[str | None], Path]:
    """Factory creating a workspace whose .git/config has the given origin URL.

    Passing None writes a config without any remote section.
    """

    def _make(origin_url: str | None = "git@github.com:acme/widgets.git") -> Path:
        workspace = tmp_path / "workspace"
        git_dir = workspace / ".git"
        git_dir.mkdir(parents=True, exist_ok=True)
        if origin_url is None:
            config = "[core]\n\tbare = false\n"
        else:
            config = GIT_CONFIG_TEMPLATE.format(url=origin_url)
        (git_dir / "config").write_text(config, encoding="utf-8")
        return workspace

    return _make


@pytest.fixture
def workspace(make_workspace: Callable[[str | None], Path]) -> Path:
    """Workspace for acme/widgets with an SSH origin."""
    return make_workspace("git@github.com:acme/widgets.git")


@pytest.fixture
def settings(workspace: Path) -> Settings:
    """Settings pointing at the fake workspace with a dummy token."""
    return Settings(github_token="ghp_test_token", workspace_root=workspace)
