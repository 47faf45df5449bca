#!/usr/bin/env python3

import logging
from typing import Any, List, Mapping, Optional, Union

from pydantic import BaseModel, Field

from ..common import normalize_file_path, repository_lock
from ..errors import GitError
from ..git import ensure_repository
from ..mcp import mcp
from ..smart_commit import CommitGroup, run_smart_commit
from .result_utils import render_failure

__all__ = [
    "CommitGroupParam",
    "smart_commit",
]


class CommitGroupParam(BaseModel):
    files: List[str] = Field(description="Paths of the files to commit in this group")
    commit_type: str = Field(
        description="Commit type: feat/fix/docs/style/refactor/perf/test/chore/build/ci/revert/init/ui/config/merge"
    )
    short_desc: str = Field(description="Short summary (50 characters or less)")
    details: List[str] = Field(
        default_factory=list,
        description="Detailed description, one entry per change",
    )


def _to_group(item: Union[CommitGroupParam, Mapping[str, Any]]) -> CommitGroup:
    if isinstance(item, CommitGroupParam):
        return CommitGroup.from_dict(item.model_dump())
    return CommitGroup.from_dict(CommitGroupParam.model_validate(item).model_dump())


@mcp.tool()
async def smart_commit(
    commits: List[CommitGroupParam],
    path: Optional[str] = None,
) -> str:
    """Classified commits: commit groups of changes one after another, each
    with its own file list and commit message, e.g. separate fix, feat and
    style commits from one working tree.

    Args:
        commits: Commit groups in priority order (fix first, then feat, then the rest)
        path: Path to the git repository, defaults to the current directory

    Returns:
        A summary with one line per group and the number of successful commits
    """
    groups = [_to_group(item) for item in commits]
    directory = normalize_file_path(path)

    try:
        root = await ensure_repository(directory)
    except GitError as e:
        return render_failure("smart commit", e)

    logging.info(f"Running smart commit with {len(groups)} groups in {directory}")
    async with repository_lock(root):
        report = await run_smart_commit(groups, directory)
    return report.text
