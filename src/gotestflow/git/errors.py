"""Git module error types."""


class GitError(Exception):
    """Base error for git operations."""

    pass


class NotARepositoryError(GitError):
    """Path is not inside a git repository."""

    def __init__(self, path: str) -> None:
        super().__init__(f"Not a git repository: {path}")
        self.path = path


class UnbornHeadError(GitError):
    """HEAD has no commit yet."""

    def __init__(self, path: str) -> None:
        super().__init__(f"Repository has no commits: {path}")
        self.path = path
