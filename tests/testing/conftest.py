"""Fixtures for test orchestration tests."""

from __future__ import annotations

from pathlib import Path

import pygit2
import pytest

MODULE = "github.com/x/y"


@pytest.fixture
def go_repo(tmp_path: Path) -> Path:
    """Committed Go module in a fresh git repository. Returns the module root."""
    root = tmp_path / "mod"
    root.mkdir()
    repo = pygit2.init_repository(str(root), initial_head="main")

    (root / "go.mod").write_text(f"module {MODULE}\n\ngo 1.22\n")
    (root / "y.go").write_text("package y\n")
    repo.index.add("go.mod")
    repo.index.add("y.go")
    repo.index.write()
    tree = repo.index.write_tree()
    sig = pygit2.Signature("Test User", "test@example.com")
    repo.create_commit("refs/heads/main", sig, sig, "Initial commit", tree, [])
    repo.set_head("refs/heads/main")

    return root
