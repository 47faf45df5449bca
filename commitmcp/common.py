#!/usr/bin/env python3

import asyncio
import os
from typing import Dict

__all__ = [
    "DEFAULT_PATH",
    "PUSH_REMINDER",
    "normalize_file_path",
    "one_line",
    "repository_lock",
]

DEFAULT_PATH = "."
PUSH_REMINDER = "💡 To publish, run: git push"

_repository_locks: Dict[str, asyncio.Lock] = {}


def normalize_file_path(file_path: str | None) -> str:
    """Normalize a file path to an absolute path.

    Expands the tilde character (~) if present to the user's home directory.
    A missing path means the current working directory.
    """
    if not file_path:
        file_path = DEFAULT_PATH

    expanded_path = os.path.expanduser(file_path)

    if not os.path.isabs(expanded_path):
        return os.path.abspath(os.path.join(os.getcwd(), expanded_path))
    return os.path.abspath(expanded_path)


def one_line(text: str) -> str:
    """Collapse diagnostic output onto a single line."""
    return " ".join(line.strip() for line in text.splitlines() if line.strip())


def repository_lock(repo_root: str) -> asyncio.Lock:
    """Return the lock guarding the index of the repository at repo_root.

    The staging area is shared by every request that targets the same
    repository, so tools that stage and commit must hold this lock.  Locks
    live for the life of the process, which runs a single event loop.
    """
    key = os.path.realpath(repo_root)
    lock = _repository_locks.get(key)
    if lock is None:
        lock = asyncio.Lock()
        _repository_locks[key] = lock
    return lock
