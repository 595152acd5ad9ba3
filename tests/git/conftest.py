"""Test fixtures for git module."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import pygit2
import pytest

if TYPE_CHECKING:
    from collections.abc import Generator


@pytest.fixture
def temp_repo(tmp_path: Path) -> Generator[pygit2.Repository, None, None]:
    """Create a temporary git repository with initial commit."""
    repo_path = tmp_path / "repo"
    repo_path.mkdir()

    repo = pygit2.init_repository(str(repo_path), initial_head="main")

    # Configure user
    repo.config["user.name"] = "Test User"
    repo.config["user.email"] = "test@example.com"

    # Create initial commit
    (repo_path / "go.mod").write_text("module github.com/x/y\n")
    repo.index.add("go.mod")
    repo.index.write()
    tree = repo.index.write_tree()
    sig = pygit2.Signature("Test User", "test@example.com")
    repo.create_commit("refs/heads/main", sig, sig, "Initial commit", tree, [])

    repo.set_head("refs/heads/main")

    yield repo


@pytest.fixture
def unborn_repo(tmp_path: Path) -> pygit2.Repository:
    """Repository without any commit."""
    repo_path = tmp_path / "empty"
    repo_path.mkdir()
    return pygit2.init_repository(str(repo_path), initial_head="main")
