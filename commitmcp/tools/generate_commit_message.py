#!/usr/bin/env python3

from typing import List, Optional

from ..commit_types import get_commit_type
from ..git import format_commit_message, render_generated_message
from ..mcp import mcp

__all__ = [
    "generate_commit_message",
]


@mcp.tool()
async def generate_commit_message(
    commit_type: str,
    short_desc: str,
    details: Optional[List[str]] = None,
) -> str:
    """Generate a conventional commit message from a commit type and descriptions.

    Args:
        commit_type: Commit type: feat/fix/docs/style/refactor/perf/test/chore/build/ci/revert/init/ui/config/merge
        short_desc: Short summary (50 characters or less)
        details: Detailed description, one entry per change

    Returns:
        The generated commit message
    """
    message = format_commit_message(
        get_commit_type(commit_type), short_desc, details or []
    )
    return render_generated_message(message)
