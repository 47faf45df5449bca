#!/usr/bin/env python3

import logging
from typing import List, Optional

from ..common import PUSH_REMINDER, normalize_file_path, repository_lock
from ..errors import GitError
from ..git import commit, ensure_repository, stage_files
from ..mcp import mcp
from .result_utils import render_failure

__all__ = [
    "git_commit",
]


@mcp.tool()
async def git_commit(
    message: str,
    path: Optional[str] = None,
    files: Optional[List[str]] = None,
) -> str:
    """Run git add and git commit with the given commit message.

    Args:
        message: The commit message
        path: Path to the git repository, defaults to the current directory
        files: Files to stage before committing, defaults to every change

    Returns:
        A message describing whether the commit succeeded
    """
    directory = normalize_file_path(path)
    paths = files if files else ["."]

    try:
        root = await ensure_repository(directory)
    except GitError as e:
        return render_failure("git commit", e)

    async with repository_lock(root):
        try:
            await stage_files(paths, directory)
        except GitError as e:
            return render_failure("git add", e)

        try:
            await commit(message, directory)
        except GitError as e:
            return render_failure("git commit", e)

    logging.info(f"Committed {', '.join(paths)} in {directory}")
    return f"✅ Commit succeeded!\n\n{PUSH_REMINDER}"
