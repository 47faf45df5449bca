#!/usr/bin/env python3

import unittest

from expecttest import TestCase

from commitmcp.commit_types import get_commit_type
from commitmcp.git_message import (
    DETAILS_MARKER,
    format_commit_message,
    render_generated_message,
)


class TestFormatCommitMessage(TestCase):
    def test_subject_only_without_details(self):
        message = format_commit_message(get_commit_type("feat"), "add login page", [])
        self.assertExpectedInline(message, """✨ feat: add login page""")
        self.assertNotIn(DETAILS_MARKER, message)

    def test_details_become_bullets(self):
        message = format_commit_message(
            get_commit_type("fix"),
            "null check",
            ["guard against nil input", "add regression test"],
        )
        self.assertExpectedInline(
            message,
            """\
🐛 fix: null check

Details:
- guard against nil input
- add regression test""",
        )

    def test_one_line_per_detail(self):
        details = [f"change {i}" for i in range(7)]
        message = format_commit_message(get_commit_type("refactor"), "x", details)
        bullets = [line for line in message.splitlines() if line.startswith("- ")]
        self.assertEqual(bullets, [f"- {d}" for d in details])

    def test_long_summary_is_not_truncated(self):
        summary = "a" * 200
        message = format_commit_message(get_commit_type("docs"), summary, ())
        self.assertEqual(message, f"📝 docs: {summary}")

    def test_unknown_type_uses_default_label(self):
        message = format_commit_message(get_commit_type("nope"), "x", [])
        self.assertEqual(message, "✨ feat: x")

    def test_deterministic(self):
        args = (get_commit_type("perf"), "faster", ["cache lookups"])
        self.assertEqual(format_commit_message(*args), format_commit_message(*args))

    def test_render_generated_message(self):
        self.assertExpectedInline(
            render_generated_message("✨ feat: x"),
            """\
📝 Generated commit message:

```
✨ feat: x
```""",
        )


if __name__ == "__main__":
    unittest.main()
