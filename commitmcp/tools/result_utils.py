#!/usr/bin/env python3

import logging

from ..common import one_line
from ..errors import GitError, RepositoryUnavailableError

__all__ = [
    "render_failure",
]


def render_failure(action: str, error: GitError) -> str:
    """Render a git failure as a tool result instead of raising it."""
    logging.warning(f"{action} failed: {error} ({error.detail})")
    if isinstance(error, RepositoryUnavailableError):
        return f"❌ {error}: {one_line(error.detail)}"
    return f"❌ {action} failed: {one_line(error.detail)}"
