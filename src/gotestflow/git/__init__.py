"""Git repository state used for result caching."""

from gotestflow.git.access import RepoAccess
from gotestflow.git.errors import GitError, NotARepositoryError, UnbornHeadError

__all__ = ["RepoAccess", "GitError", "NotARepositoryError", "UnbornHeadError"]
