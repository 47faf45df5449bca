#!/usr/bin/env python3

from .generate_commit_message import generate_commit_message
from .git_branch import git_branch
from .git_commit import git_commit
from .git_log import git_log
from .git_status import git_status
from .list_commit_types import list_commit_types
from .smart_commit import smart_commit

__all__ = [
    "generate_commit_message",
    "git_branch",
    "git_commit",
    "git_log",
    "git_status",
    "list_commit_types",
    "smart_commit",
]
