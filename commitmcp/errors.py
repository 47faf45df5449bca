#!/usr/bin/env python3

__all__ = [
    "GitError",
    "RepositoryUnavailableError",
    "StageError",
    "CommitError",
    "ExternalToolError",
]


class GitError(Exception):
    """Base class for failures reported by git operations.

    The ``detail`` attribute holds the raw diagnostic text (usually git's
    stderr) so that callers can render it without the exception prefix.
    """

    def __init__(self, message: str, detail: str | None = None) -> None:
        super().__init__(message)
        self.detail = detail if detail is not None else message


class RepositoryUnavailableError(GitError):
    """The target path is not inside a git repository."""


class StageError(GitError):
    """``git add`` failed for the requested paths."""


class CommitError(GitError):
    """``git commit`` failed, e.g. because nothing was staged."""


class ExternalToolError(GitError):
    """The git executable could not be launched at all."""
