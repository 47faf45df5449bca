#!/usr/bin/env python3

"""Git operations and utilities.

This module re-exports the git facade used by the tools:
- git_query.py: repository checks and read-only queries (status, log, branch)
- git_commit.py: staging and committing
- git_message.py: formatting commit messages
"""

from .git_commit import commit, stage_files
from .git_message import format_commit_message, render_generated_message
from .git_query import (
    ChangeKind,
    FileChange,
    ensure_repository,
    get_current_branch,
    get_log,
    get_repository_root,
    get_status,
)

__all__ = [
    "ChangeKind",
    "FileChange",
    "commit",
    "ensure_repository",
    "format_commit_message",
    "get_current_branch",
    "get_log",
    "get_repository_root",
    "get_status",
    "render_generated_message",
    "stage_files",
]
