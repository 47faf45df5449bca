#!/usr/bin/env python3

import logging
from typing import Sequence

from .commit_types import CommitType

__all__ = [
    "DETAILS_MARKER",
    "format_commit_message",
    "render_generated_message",
]

log = logging.getLogger(__name__)

DETAILS_MARKER = "Details:"


def format_commit_message(
    commit_type: CommitType,
    short_desc: str,
    details: Sequence[str] = (),
) -> str:
    """Build a commit message from a commit type, a summary and detail lines.

    The subject line is ``<emoji> <type>: <short_desc>``.  When details are
    given they follow a blank line and the ``Details:`` marker, one bullet per
    entry in the order given:

        ✨ feat: add login page

        Details:
        - render the form
        - wire up validation

    Without details the message is the subject line alone.  The summary is
    not truncated; keeping it under ~50 characters is up to the caller.

    Args:
        commit_type: The resolved commit classification
        short_desc: One line summary of the change
        details: Ordered list of change descriptions

    Returns:
        The commit message text
    """
    subject = f"{commit_type.label}: {short_desc}"
    if not details:
        return subject

    body = "\n".join(f"- {detail}" for detail in details)
    log.debug("Formatted commit message with %d detail lines", len(details))
    return f"{subject}\n\n{DETAILS_MARKER}\n{body}"


def render_generated_message(message: str) -> str:
    """Wrap a generated commit message for display in a tool result."""
    return f"📝 Generated commit message:\n\n```\n{message}\n```"
