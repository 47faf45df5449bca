#!/usr/bin/env python3

import logging
from typing import Sequence

from .errors import CommitError, StageError
from .shell import run_command

__all__ = ["stage_files", "commit"]

log = logging.getLogger(__name__)


async def stage_files(paths: Sequence[str], repo_root: str) -> None:
    """Stage the given paths with ``git add``.

    Args:
        paths: Paths relative to repo_root; must not be empty
        repo_root: Directory to run git in

    Raises:
        StageError: If no paths were given or git add failed
        ExternalToolError: If git cannot be launched
    """
    if not paths:
        raise StageError("No files given to stage")

    log.debug("stage_files(%s, %s)", list(paths), repo_root)
    result = await run_command(
        ["git", "add", "--", *paths],
        cwd=repo_root,
        check=False,
    )
    if result.returncode != 0:
        raise StageError("git add failed", detail=str(result.stderr).strip())


async def commit(message: str, repo_root: str) -> None:
    """Commit whatever is staged with the given message.

    Raises:
        CommitError: If git commit exits non-zero, e.g. nothing is staged
        ExternalToolError: If git cannot be launched
    """
    log.debug("commit(%r, %s)", message, repo_root)
    result = await run_command(
        ["git", "commit", "-m", message],
        cwd=repo_root,
        check=False,
    )
    if result.returncode != 0:
        # "nothing to commit" is reported on stdout, not stderr
        detail = str(result.stderr).strip() or str(result.stdout).strip()
        raise CommitError("git commit failed", detail=detail)
