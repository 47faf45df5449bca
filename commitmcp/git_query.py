#!/usr/bin/env python3

import enum
import logging
import os
from typing import List, NamedTuple

from .errors import GitError, RepositoryUnavailableError
from .shell import run_command

__all__ = [
    "ChangeKind",
    "FileChange",
    "get_repository_root",
    "ensure_repository",
    "parse_status",
    "get_status",
    "get_log",
    "get_current_branch",
]

log = logging.getLogger(__name__)


class ChangeKind(enum.Enum):
    ADDED = "added"
    MODIFIED = "modified"
    DELETED = "deleted"


class FileChange(NamedTuple):
    path: str
    kind: ChangeKind


async def get_repository_root(path: str) -> str:
    """Get the root directory of the Git repository containing the path.

    Args:
        path: An existing directory

    Returns:
        The absolute path to the repository root

    Raises:
        ValueError: If the path is not an existing directory
        RuntimeError: If git reports the path is not in a repository
        ExternalToolError: If git cannot be launched
    """
    abs_path = os.path.abspath(path)
    if not os.path.isdir(abs_path):
        raise ValueError(f"Not a directory: {abs_path}")

    result = await run_command(
        ["git", "rev-parse", "--show-toplevel"],
        cwd=abs_path,
        check=True,
    )

    return str(result.stdout.strip())


async def ensure_repository(path: str) -> str:
    """Return the repository root for path or raise RepositoryUnavailableError."""
    try:
        return await get_repository_root(path)
    except (RuntimeError, ValueError) as e:
        log.info("Rejecting %s: %s", path, e)
        raise RepositoryUnavailableError(
            f"Cannot open git repository at {path}", detail=str(e)
        ) from e


def _classify(code: str) -> ChangeKind | None:
    # Untracked or newly added wins over modification, which wins over deletion.
    if "?" in code or "A" in code:
        return ChangeKind.ADDED
    if "M" in code:
        return ChangeKind.MODIFIED
    if "D" in code:
        return ChangeKind.DELETED
    return None


def parse_status(output: str) -> List[FileChange]:
    """Parse ``git status --porcelain -z`` output.

    Entries whose status code is neither an addition, a modification nor a
    deletion (unmerged paths, plain renames, type changes) are skipped.
    """
    changes: List[FileChange] = []
    entries = output.split("\0")
    i = 0
    while i < len(entries):
        entry = entries[i]
        i += 1
        if len(entry) < 4:
            continue
        code, path = entry[:2], entry[3:]
        if code[0] in "RC":
            # The source path of a rename or copy follows as its own entry.
            i += 1
        kind = _classify(code)
        if kind is None:
            log.debug("Skipping status entry %r", entry)
            continue
        changes.append(FileChange(path, kind))
    return changes


async def get_status(repo_root: str) -> List[FileChange]:
    """List changed files in the working tree, including untracked ones."""
    result = await run_command(
        ["git", "status", "--porcelain", "-z", "--untracked-files=all"],
        cwd=repo_root,
        check=False,
    )
    if result.returncode != 0:
        raise GitError("git status failed", detail=str(result.stderr).strip())
    return parse_status(str(result.stdout))


async def get_log(repo_root: str, count: int) -> str:
    """Return ``git log --oneline`` for the last count commits."""
    result = await run_command(
        ["git", "log", "--oneline", "-n", str(count)],
        cwd=repo_root,
        check=False,
    )
    if result.returncode != 0:
        raise GitError("git log failed", detail=str(result.stderr).strip())
    return str(result.stdout)


async def get_current_branch(repo_root: str) -> str:
    """Return the name of the checked out branch, empty when HEAD is detached."""
    result = await run_command(
        ["git", "branch", "--show-current"],
        cwd=repo_root,
        check=False,
    )
    if result.returncode != 0:
        raise GitError("git branch failed", detail=str(result.stderr).strip())
    return str(result.stdout).strip()
