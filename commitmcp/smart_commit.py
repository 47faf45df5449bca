#!/usr/bin/env python3

"""Grouped commits: carve one dirty working tree into several commits.

Each group names its own files and classification.  Groups are staged and
committed strictly one after another, in the order given, because they all
share the repository's single index.  A group that fails to stage or commit
is recorded and skipped; later groups are still attempted and earlier
commits are never rolled back.
"""

import enum
import logging
from dataclasses import dataclass
from typing import Any, List, Mapping, Sequence, Tuple

from .commit_types import get_commit_type
from .common import PUSH_REMINDER, one_line
from .errors import GitError
from .git_commit import commit, stage_files
from .git_message import format_commit_message

__all__ = [
    "SUCCESS_MARKER",
    "FAILURE_MARKER",
    "CommitGroup",
    "GroupState",
    "CommitOutcome",
    "ExecutionReport",
    "render_report",
    "run_smart_commit",
]

log = logging.getLogger(__name__)

SUCCESS_MARKER = "✅"
FAILURE_MARKER = "❌"


@dataclass(frozen=True)
class CommitGroup:
    files: Tuple[str, ...]
    commit_type: str
    short_desc: str
    details: Tuple[str, ...] = ()

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "CommitGroup":
        """Build a group from tool parameters."""
        return cls(
            files=tuple(data.get("files") or ()),
            commit_type=str(data.get("commit_type", "")),
            short_desc=str(data.get("short_desc", "")),
            details=tuple(data.get("details") or ()),
        )


class GroupState(enum.Enum):
    STAGE_FAILED = "stage_failed"
    COMMIT_FAILED = "commit_failed"
    COMMITTED = "committed"


@dataclass(frozen=True)
class CommitOutcome:
    index: int
    commit_type: str
    short_desc: str
    file_count: int
    state: GroupState
    failure_detail: str | None = None

    @property
    def success(self) -> bool:
        return self.state is GroupState.COMMITTED


@dataclass(frozen=True)
class ExecutionReport:
    total_groups: int
    success_count: int
    outcomes: Tuple[CommitOutcome, ...]
    text: str


def _render_outcome(outcome: CommitOutcome) -> str:
    # Caller supplied text is collapsed so each outcome stays on one line
    prefix = f"Group {outcome.index} [{one_line(outcome.commit_type)}]"
    if outcome.success:
        return (
            f"{SUCCESS_MARKER} {prefix}: {one_line(outcome.short_desc)} "
            f"({outcome.file_count} files)"
        )
    step = "git add" if outcome.state is GroupState.STAGE_FAILED else "git commit"
    detail = one_line(outcome.failure_detail or "")
    return f"{FAILURE_MARKER} {prefix} {step} failed: {detail}"


def render_report(
    total_groups: int, success_count: int, outcomes: Sequence[CommitOutcome]
) -> str:
    """Render the human readable summary of a grouped commit run.

    Every outcome is exactly one line starting with SUCCESS_MARKER or
    FAILURE_MARKER, in submission order.
    """
    summary = (
        f"📊 Grouped commit finished: {success_count}/{total_groups} groups succeeded"
    )
    lines = "\n".join(_render_outcome(o) for o in outcomes)
    text = f"{summary}\n\n{lines}" if lines else summary
    if success_count > 0:
        text += f"\n\n{PUSH_REMINDER}"
    return text


async def run_smart_commit(
    groups: Sequence[CommitGroup], repo_root: str
) -> ExecutionReport:
    """Stage and commit each group in order and report per-group results.

    The repository is expected to have been validated by the caller; any
    GitError raised while processing a group is recorded in that group's
    outcome and never aborts the run.

    Args:
        groups: Groups in the order they should be committed
        repo_root: Directory to run git in

    Returns:
        The ExecutionReport for this run
    """
    outcomes: List[CommitOutcome] = []
    success_count = 0

    for index, group in enumerate(groups, start=1):
        commit_type = get_commit_type(group.commit_type)
        message = format_commit_message(commit_type, group.short_desc, group.details)
        file_count = len(group.files)

        try:
            await stage_files(group.files, repo_root)
        except GitError as e:
            log.warning(
                f"Group {index} [{group.commit_type}] failed to stage: {e.detail}"
            )
            outcomes.append(
                CommitOutcome(
                    index,
                    group.commit_type,
                    group.short_desc,
                    file_count,
                    GroupState.STAGE_FAILED,
                    e.detail,
                )
            )
            continue

        try:
            await commit(message, repo_root)
        except GitError as e:
            log.warning(
                f"Group {index} [{group.commit_type}] failed to commit: {e.detail}"
            )
            outcomes.append(
                CommitOutcome(
                    index,
                    group.commit_type,
                    group.short_desc,
                    file_count,
                    GroupState.COMMIT_FAILED,
                    e.detail,
                )
            )
            continue

        success_count += 1
        log.info(f"Group {index} [{group.commit_type}] committed {file_count} files")
        outcomes.append(
            CommitOutcome(
                index,
                group.commit_type,
                group.short_desc,
                file_count,
                GroupState.COMMITTED,
            )
        )

    text = render_report(len(groups), success_count, outcomes)
    return ExecutionReport(len(groups), success_count, tuple(outcomes), text)
