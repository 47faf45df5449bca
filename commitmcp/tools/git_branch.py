#!/usr/bin/env python3

from ..common import normalize_file_path
from ..errors import GitError
from ..git import ensure_repository, get_current_branch
from ..mcp import mcp
from .result_utils import render_failure

__all__ = [
    "git_branch",
]


@mcp.tool()
async def git_branch(path: str | None = None) -> str:
    """Show the currently checked out git branch.

    Args:
        path: Path to the git repository, defaults to the current directory
    """
    directory = normalize_file_path(path)
    try:
        await ensure_repository(directory)
        branch = await get_current_branch(directory)
    except GitError as e:
        return render_failure("git branch", e)

    if not branch:
        return "🌿 Current branch: (detached HEAD)"
    return f"🌿 Current branch: {branch}"
