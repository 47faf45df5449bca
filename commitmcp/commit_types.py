#!/usr/bin/env python3

"""Commit classifications used to prefix generated commit messages.

The table is fixed at import time.  Lookups never fail: an unknown key
resolves to the first entry, so a caller that invents a classification
still gets a well-formed message.
"""

from dataclasses import dataclass
from typing import Dict, Tuple

__all__ = [
    "CommitType",
    "COMMIT_TYPES",
    "DEFAULT_COMMIT_TYPE",
    "get_commit_type",
    "render_commit_types_table",
]


@dataclass(frozen=True)
class CommitType:
    key: str
    emoji: str
    description: str

    @property
    def label(self) -> str:
        return f"{self.emoji} {self.key}"


COMMIT_TYPES: Tuple[CommitType, ...] = (
    CommitType("feat", "✨", "New feature"),
    CommitType("fix", "🐛", "Bug fix"),
    CommitType("docs", "📝", "Documentation change"),
    CommitType("style", "💄", "Code formatting"),
    CommitType("refactor", "♻️", "Code refactoring"),
    CommitType("perf", "⚡️", "Performance improvement"),
    CommitType("test", "✅", "Add or update tests"),
    CommitType("chore", "🔧", "Build or tooling change"),
    CommitType("build", "📦", "Build system change"),
    CommitType("ci", "👷", "CI configuration change"),
    CommitType("revert", "⏪", "Revert code"),
    CommitType("init", "🎉", "Project initialization"),
    CommitType("ui", "🎨", "UI style update"),
    CommitType("config", "⚙️", "Configuration file change"),
    CommitType("merge", "🔀", "Merge branches"),
)

DEFAULT_COMMIT_TYPE = COMMIT_TYPES[0]

_BY_KEY: Dict[str, CommitType] = {t.key: t for t in COMMIT_TYPES}


def get_commit_type(key: str) -> CommitType:
    """Look up a commit type by key, falling back to DEFAULT_COMMIT_TYPE."""
    return _BY_KEY.get(key, DEFAULT_COMMIT_TYPE)


def render_commit_types_table() -> str:
    """Render the supported commit types as a markdown table."""
    lines = [
        "📋 Supported commit types:",
        "",
        "| Type | Emoji | Description |",
        "|------|-------|-------------|",
    ]
    for t in COMMIT_TYPES:
        lines.append(f"| {t.key} | {t.emoji} | {t.description} |")
    return "\n".join(lines) + "\n"
