#!/usr/bin/env python3

from ..common import normalize_file_path
from ..config import get_log_count
from ..errors import GitError
from ..git import ensure_repository, get_log
from ..mcp import mcp
from .result_utils import render_failure

__all__ = [
    "git_log",
]


@mcp.tool()
async def git_log(count: int | None = None, path: str | None = None) -> str:
    """Show the most recent commits, one line each.

    Args:
        count: Number of commits to show, defaults to 10
        path: Path to the git repository, defaults to the current directory

    Returns:
        The oneline log
    """
    n = count if count is not None and count > 0 else get_log_count()
    directory = normalize_file_path(path)
    try:
        await ensure_repository(directory)
        output = await get_log(directory, n)
    except GitError as e:
        return render_failure("git log", e)

    return f"📜 Last {n} commits:\n\n{output}"
