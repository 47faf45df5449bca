#!/usr/bin/env python3

"""Test the server over a real stdio MCP session."""

import unittest

from commitmcp.testing import MCPEndToEndTestCase


class ListToolsTest(MCPEndToEndTestCase):
    in_process = False

    async def test_list_tools(self):
        async with self.create_client_session() as session:
            assert session is not None
            result = await session.list_tools()
            tool_names = {tool.name for tool in result.tools}
            self.assertEqual(
                tool_names,
                {
                    "generate_commit_message",
                    "git_branch",
                    "git_commit",
                    "git_log",
                    "git_status",
                    "list_commit_types",
                    "smart_commit",
                },
            )

    async def test_smart_commit_over_stdio(self):
        self.write_file("a.txt", "hello\n")
        async with self.create_client_session() as session:
            result = await self.call_tool(
                session,
                "smart_commit",
                {
                    "commits": [
                        {
                            "files": ["a.txt"],
                            "commit_type": "init",
                            "short_desc": "first file",
                            "details": ["say hello"],
                        }
                    ],
                    "path": self.temp_dir.name,
                },
            )
        self.assertIn("✅ Group 1 [init]: first file (1 files)", result)

    async def test_branch_defaults_to_server_cwd(self):
        async with self.create_client_session() as session:
            result = await self.call_tool(session, "git_branch", {})
        self.assertEqual(result, "🌿 Current branch: main")


if __name__ == "__main__":
    unittest.main()
