"""Repository access layer - owns pygit2.Repository and exposes the facts the cache needs."""

from __future__ import annotations

from pathlib import Path

import pygit2

from gotestflow.git.errors import GitError, NotARepositoryError, UnbornHeadError

STATUS_WT_NEW = pygit2.GIT_STATUS_WT_NEW


class RepoAccess:
    """Owns pygit2.Repository for the repository containing a path."""

    def __init__(self, path: Path | str) -> None:
        self._path = Path(path)
        git_dir = pygit2.discover_repository(str(self._path))
        if git_dir is None:
            raise NotARepositoryError(str(self._path))
        try:
            self._repo = pygit2.Repository(git_dir)
        except pygit2.GitError as e:
            raise NotARepositoryError(str(self._path)) from e

    @property
    def repo(self) -> pygit2.Repository:
        return self._repo

    @property
    def workdir(self) -> Path:
        return Path(self._repo.workdir) if self._repo.workdir else self._path

    @property
    def is_unborn(self) -> bool:
        return self._repo.head_is_unborn

    def head_commit_id(self) -> str:
        """Hex id of the commit HEAD points to."""
        if self.is_unborn:
            raise UnbornHeadError(str(self._path))
        return str(self._repo.head.peel(pygit2.Commit).id)

    def head_patch(self) -> str:
        """Patch text of tracked changes between HEAD and the working tree."""
        try:
            diff = self._repo.diff("HEAD")
        except (pygit2.GitError, KeyError) as e:
            raise GitError(f"Cannot diff HEAD: {e}") from e
        return diff.patch or ""

    def untracked_files(self) -> list[str]:
        """Untracked, non-ignored paths relative to the workdir, sorted."""
        return sorted(
            path
            for path, flags in self._repo.status().items()
            if flags & STATUS_WT_NEW
        )
