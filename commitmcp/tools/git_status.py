#!/usr/bin/env python3

from ..common import normalize_file_path
from ..errors import GitError
from ..git import ChangeKind, ensure_repository, get_status
from ..mcp import mcp
from .result_utils import render_failure

__all__ = [
    "git_status",
]

_KIND_LABELS = {
    ChangeKind.ADDED: "➕ added",
    ChangeKind.MODIFIED: "📝 modified",
    ChangeKind.DELETED: "➖ deleted",
}


@mcp.tool()
async def git_status(path: str | None = None) -> str:
    """Show the repository status: every added, modified or deleted file,
    untracked files included.

    Args:
        path: Path to the git repository, defaults to the current directory

    Returns:
        A change map with one line per changed file
    """
    directory = normalize_file_path(path)
    try:
        await ensure_repository(directory)
        changes = await get_status(directory)
    except GitError as e:
        return render_failure("git status", e)

    if not changes:
        return "✅ Working tree clean, no changes"

    lines = [f"{_KIND_LABELS[c.kind]} {c.path}" for c in changes]
    return "📊 Changes:\n\n" + "\n".join(lines) + "\n"
