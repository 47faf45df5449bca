#!/usr/bin/env python3

import os
import tempfile
import unittest

from commitmcp.testing import MCPEndToEndTestCase


class TestGitTools(MCPEndToEndTestCase):
    """Single-shot git tools against a real repository."""

    async def asyncSetUp(self):
        await super().asyncSetUp()
        self.write_file("sample.txt", "Sample content\n")
        self.write_file("doomed.txt", "to be deleted\n")
        await self.git_run(["add", "sample.txt", "doomed.txt"])
        await self.git_run(["commit", "-m", "Second commit"])

    async def test_git_status_clean(self):
        result = await self.call_tool(None, "git_status", {"path": self.temp_dir.name})
        self.assertExpectedInline(result, """✅ Working tree clean, no changes""")

    async def test_git_status_changes(self):
        self.write_file("sample.txt", "Changed\n")
        self.write_file("new/untracked.txt", "new\n")
        os.remove(os.path.join(self.temp_dir.name, "doomed.txt"))

        result = await self.call_tool(None, "git_status", {"path": self.temp_dir.name})

        self.assertTrue(result.startswith("📊 Changes:"), result)
        self.assertIn("➕ added new/untracked.txt", result)
        self.assertIn("📝 modified sample.txt", result)
        self.assertIn("➖ deleted doomed.txt", result)

    async def test_git_log(self):
        result = await self.call_tool(None, "git_log", {"path": self.temp_dir.name})
        self.assertTrue(result.startswith("📜 Last 10 commits:"), result)
        self.assertIn("Second commit", result)
        self.assertIn("Initial commit", result)

        result = await self.call_tool(
            None, "git_log", {"count": 1, "path": self.temp_dir.name}
        )
        self.assertTrue(result.startswith("📜 Last 1 commits:"), result)
        self.assertIn("Second commit", result)
        self.assertNotIn("Initial commit", result)

    async def test_git_branch(self):
        result = await self.call_tool(None, "git_branch", {"path": self.temp_dir.name})
        self.assertExpectedInline(result, """🌿 Current branch: main""")

    async def test_git_commit_all(self):
        self.write_file("sample.txt", "Committed by tool\n")
        self.write_file("extra.txt", "extra\n")

        result = await self.call_tool(
            None,
            "git_commit",
            {"message": "🐛 fix: tool commit", "path": self.temp_dir.name},
        )

        self.assertExpectedInline(
            result,
            """\
✅ Commit succeeded!

💡 To publish, run: git push""",
        )
        status = await self.git_run(
            ["status", "--porcelain"], capture_output=True, text=True
        )
        self.assertEqual(status, "")

    async def test_git_commit_selected_files(self):
        self.write_file("sample.txt", "only this\n")
        self.write_file("extra.txt", "left alone\n")

        await self.call_tool(
            None,
            "git_commit",
            {
                "message": "docs: partial",
                "path": self.temp_dir.name,
                "files": ["sample.txt"],
            },
        )

        status = await self.git_run(
            ["status", "--porcelain"], capture_output=True, text=True
        )
        self.assertEqual(status, "?? extra.txt")

    async def test_git_commit_nothing_to_commit(self):
        result = await self.call_tool(
            None, "git_commit", {"message": "empty", "path": self.temp_dir.name}
        )
        self.assertTrue(result.startswith("❌ git commit failed:"), result)
        self.assertIn("nothing to commit", result)

    async def test_generate_commit_message(self):
        result = await self.call_tool(
            None,
            "generate_commit_message",
            {
                "commit_type": "feat",
                "short_desc": "add search",
                "details": ["index titles", "rank by date"],
            },
        )
        self.assertExpectedInline(
            result,
            """\
📝 Generated commit message:

```
✨ feat: add search

Details:
- index titles
- rank by date
```""",
        )

    async def test_list_commit_types(self):
        result = await self.call_tool(None, "list_commit_types", {})
        self.assertIn("| fix | 🐛 | Bug fix |", result)
        self.assertIn("| merge | 🔀 | Merge branches |", result)

    async def test_tools_reject_non_repository(self):
        with tempfile.TemporaryDirectory() as not_a_repo:
            for tool in ["git_status", "git_log", "git_branch"]:
                with self.subTest(tool=tool):
                    result = await self.call_tool(None, tool, {"path": not_a_repo})
                    self.assertTrue(
                        result.startswith("❌ Cannot open git repository"), result
                    )

            result = await self.call_tool(
                None, "git_commit", {"message": "x", "path": not_a_repo}
            )
            self.assertTrue(result.startswith("❌ Cannot open git repository"), result)


if __name__ == "__main__":
    unittest.main()
